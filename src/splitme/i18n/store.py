"""Locale store.

Translation tables are loaded asynchronously, once, before the server
accepts traffic; after that the store is read-only. Picking the best
locale for a request is synchronous and deterministic.
"""

from __future__ import annotations

import json
import logging
from collections.abc import Mapping
from dataclasses import dataclass, field
from pathlib import Path
from typing import TYPE_CHECKING, Any

import anyio

from splitme.errors import LocaleLoadError

if TYPE_CHECKING:
    from splitme.http.request import Request
    from splitme.i18n.translator import Translator

logger = logging.getLogger("splitme.i18n")

LOCALES_DIR = Path(__file__).parent / "locales"

# Facebook Open Graph locale codes
DEFAULT_ISO_CODES: dict[str, str] = {
    "en": "en_US",
    "fr": "fr_FR",
}


@dataclass(frozen=True, slots=True)
class Locale:
    """A loaded locale. Immutable once registered."""

    id: str
    iso: str
    phrases: Mapping[str, str] = field(default_factory=dict, repr=False)


def flatten_phrases(data: Mapping[str, Any], prefix: str = "") -> dict[str, str]:
    """Flatten nested phrase objects into dotted keys.

    ``{"product": {"title": "Split Me"}}`` -> ``{"product.title": "Split Me"}``
    """
    flat: dict[str, str] = {}
    for key, value in data.items():
        dotted = f"{prefix}.{key}" if prefix else key
        if isinstance(value, Mapping):
            flat.update(flatten_phrases(value, dotted))
        else:
            flat[dotted] = str(value)
    return flat


def parse_accept_language(header: str) -> list[str]:
    """Language tags from an ``Accept-Language`` header, best first.

    Entries are ordered by q-value; equal q-values keep header order.
    Tags with ``q=0`` or an unparsable q-value are dropped, as is ``*``.
    """
    weighted: list[tuple[float, int, str]] = []
    for position, part in enumerate(header.split(",")):
        tag, *params = (piece.strip() for piece in part.split(";"))
        if not tag or tag == "*":
            continue
        quality = 1.0
        for param in params:
            name, _, value = param.partition("=")
            if name.strip().lower() == "q":
                try:
                    quality = float(value)
                except ValueError:
                    quality = 0.0
        if quality <= 0:
            continue
        weighted.append((-quality, position, tag.lower().replace("_", "-")))
    weighted.sort()
    return [tag for _, _, tag in weighted]


class LocaleStore:
    """Holds every supported locale, keyed by id.

    Usage::

        store = LocaleStore(supported=("en", "fr"), default="en")
        await store.load_all()
        store.resolve_best_locale(request)  # "fr"
    """

    __slots__ = ("_default", "_directory", "_iso_codes", "_locales", "_supported", "_translators")

    def __init__(
        self,
        directory: str | Path | None = None,
        *,
        supported: tuple[str, ...] = ("en", "fr"),
        default: str = "en",
        iso_codes: Mapping[str, str] | None = None,
    ) -> None:
        if default not in supported:
            msg = f"Default locale {default!r} is not in supported locales {supported!r}"
            raise ValueError(msg)
        self._directory = Path(directory) if directory is not None else LOCALES_DIR
        self._supported = tuple(supported)
        self._default = default
        self._iso_codes = dict(DEFAULT_ISO_CODES if iso_codes is None else iso_codes)
        self._locales: dict[str, Locale] = {}
        self._translators: dict[str, Translator] = {}

    # -- Loading --

    async def load(self, locale_id: str) -> Locale:
        """Read and register the translation table for *locale_id*.

        Raises ``LocaleLoadError`` if the locale is unsupported, the file
        is missing or unreadable, or it does not hold a JSON object.
        """
        if locale_id not in self._supported:
            raise LocaleLoadError(locale_id, "not a supported locale")

        path = anyio.Path(self._directory / f"{locale_id}.json")
        try:
            raw = await path.read_text(encoding="utf-8")
        except OSError as exc:
            raise LocaleLoadError(locale_id, f"cannot read {path}: {exc.strerror or exc}") from exc

        try:
            data = json.loads(raw)
        except json.JSONDecodeError as exc:
            raise LocaleLoadError(locale_id, f"invalid JSON in {path}: {exc}") from exc
        if not isinstance(data, dict):
            raise LocaleLoadError(locale_id, f"{path} must contain a JSON object")

        locale = Locale(
            id=locale_id,
            iso=self._iso_codes.get(locale_id, locale_id),
            phrases=flatten_phrases(data),
        )
        self._locales[locale_id] = locale
        self._translators.pop(locale_id, None)
        logger.info("Loaded locale %r (%d phrases)", locale_id, len(locale.phrases))
        return locale

    async def load_all(self) -> None:
        """Load every supported locale concurrently.

        The first ``LocaleLoadError`` is re-raised on its own so callers
        can treat it as a plain fatal startup error.
        """
        try:
            async with anyio.create_task_group() as tg:
                for locale_id in self._supported:
                    tg.start_soon(self.load, locale_id)
        except ExceptionGroup as group:
            matched, _ = group.split(LocaleLoadError)
            if matched is None:
                raise
            raise _first_leaf(matched) from group

    @property
    def ready(self) -> bool:
        """True once every supported locale is loaded."""
        return all(locale_id in self._locales for locale_id in self._supported)

    # -- Lookup --

    @property
    def available(self) -> tuple[str, ...]:
        return self._supported

    @property
    def default(self) -> str:
        return self._default

    def get(self, locale_id: str) -> Locale:
        """Return a loaded locale. Raises ``KeyError`` if it was never loaded."""
        return self._locales[locale_id]

    def iso(self, locale_id: str) -> str:
        return self.get(locale_id).iso

    def translator(self, locale_id: str) -> Translator:
        from splitme.i18n.translator import Translator

        translator = self._translators.get(locale_id)
        if translator is None:
            translator = Translator(self.get(locale_id))
            self._translators[locale_id] = translator
        return translator

    # -- Negotiation --

    def _supported_tag(self, tag: str) -> str | None:
        for candidate in (tag, tag.split("-")[0]):
            for locale_id in self._supported:
                if locale_id.lower() == candidate:
                    return locale_id
        return None

    def resolve_best_locale(self, request: Request) -> str:
        """Pick the best supported locale for *request*.

        Order: ``?locale=`` query parameter, then ``Accept-Language``
        (exact tag before primary subtag), then the default locale.
        """
        explicit = request.query.get("locale")
        if explicit:
            found = self._supported_tag(explicit.lower().replace("_", "-"))
            if found is not None:
                return found

        header = request.accept_language
        if header:
            for tag in parse_accept_language(header):
                found = self._supported_tag(tag)
                if found is not None:
                    return found

        return self._default


def _first_leaf(group: BaseExceptionGroup) -> BaseException:
    exc: BaseException = group
    while isinstance(exc, BaseExceptionGroup):
        exc = exc.exceptions[0]
    return exc
