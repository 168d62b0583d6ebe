"""Props handed to every view."""

from collections.abc import Mapping
from dataclasses import dataclass, field

from splitme.i18n.translator import Translator
from splitme.routing.route import Location


@dataclass(frozen=True, slots=True)
class ViewProps:
    locale: str
    t: Translator
    location: Location
    params: Mapping[str, str | int] = field(default_factory=dict)
