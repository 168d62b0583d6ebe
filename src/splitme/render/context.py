"""Per-request render context and cache-key derivation.

Only fields that change the rendered page belong in the key. Anything
user-specific (cookies, client address) must stay out, or one user's
page would be served to another.
"""

import json
from collections.abc import Iterable
from dataclasses import dataclass

from splitme.routing.route import Location


def is_bot_user_agent(user_agent: str | None, needles: Iterable[str]) -> bool:
    """True if *user_agent* contains any of the crawler markers in *needles*."""
    if not user_agent:
        return False
    return any(needle in user_agent for needle in needles)


@dataclass(frozen=True, slots=True)
class RequestContext:
    locale: str
    is_bot: bool
    url: str

    def cache_key(self, location: Location) -> str:
        """Canonical key: locale, bot flag and the matched path.

        The query string is left out: views never read it, and the one
        parameter that changes the page (``?locale=``) is already folded
        into *locale*. Equivalent spellings of a path share one entry.
        """
        return json.dumps(
            {"is_bot": self.is_bot, "locale": self.locale, "location": location.pathname},
            sort_keys=True,
            separators=(",", ":"),
        )
