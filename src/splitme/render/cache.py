"""Render memoization.

Each distinct key is rendered at most once while its entry is held.
``compute`` is synchronous, so on a single event loop nothing can
interleave between the lookup and the store: concurrent requests for the
same missing key cannot both render it.

Keys include the rendered location, which clients control through path
parameters. Pass ``max_entries`` to bound memory; least recently used
entries are evicted first. ``max_entries=None`` keeps everything for the
life of the process and is only safe when the key space is small and
fixed.
"""

import logging
from collections import OrderedDict
from collections.abc import Callable

logger = logging.getLogger("splitme.render")


class RenderCache:
    """Process-lifetime memo of rendered pages, keyed by a canonical string."""

    __slots__ = ("_entries", "_max_entries", "hits", "misses")

    def __init__(self, max_entries: int | None = None) -> None:
        if max_entries is not None and max_entries < 1:
            msg = f"max_entries must be positive or None, got {max_entries}"
            raise ValueError(msg)
        self._entries: OrderedDict[str, str] = OrderedDict()
        self._max_entries = max_entries
        self.hits = 0
        self.misses = 0

    @property
    def max_entries(self) -> int | None:
        return self._max_entries

    def get_or_compute(self, key: str, compute: Callable[[], str]) -> str:
        """Return the stored value for *key*, computing and storing it on a miss."""
        try:
            value = self._entries[key]
        except KeyError:
            pass
        else:
            self.hits += 1
            self._entries.move_to_end(key)
            logger.debug("render cache hit %s", key)
            return value

        self.misses += 1
        logger.debug("render cache miss %s", key)
        value = compute()
        self._entries[key] = value
        if self._max_entries is not None and len(self._entries) > self._max_entries:
            evicted, _ = self._entries.popitem(last=False)
            logger.debug("render cache evicted %s", evicted)
        return value

    def __contains__(self, key: object) -> bool:
        return key in self._entries

    def __len__(self) -> int:
        return len(self._entries)
