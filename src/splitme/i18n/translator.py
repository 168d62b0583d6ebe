"""Phrase lookup with polyglot-style interpolation and pluralization.

Phrases use ``%{name}`` placeholders. A phrase may hold several plural
forms separated by ``" |||| "``; the ``smart_count`` option picks one::

    t("expense.count", smart_count=3)   # "3 expenses"
"""

import logging
import re
from collections.abc import Callable
from typing import Any

from splitme.i18n.store import Locale

logger = logging.getLogger("splitme.i18n")

PLURAL_DELIMITER = "||||"

_INTERPOLATION = re.compile(r"%\{(\w+)\}")


def _plural_germanic(n: int) -> int:
    return 0 if n == 1 else 1


def _plural_french(n: int) -> int:
    return 0 if n <= 1 else 1


# Plural form index by primary language subtag
PLURAL_RULES: dict[str, Callable[[int], int]] = {
    "en": _plural_germanic,
    "de": _plural_germanic,
    "fr": _plural_french,
}


class Translator:
    """Translate keys for one locale.

    Missing keys return the key itself and are logged once.
    """

    __slots__ = ("_locale", "_missing", "_plural")

    def __init__(self, locale: Locale) -> None:
        self._locale = locale
        self._plural = PLURAL_RULES.get(locale.id.split("-")[0], _plural_germanic)
        self._missing: set[str] = set()

    @property
    def locale(self) -> Locale:
        return self._locale

    def has(self, key: str) -> bool:
        return key in self._locale.phrases

    def t(self, key: str, **options: Any) -> str:
        phrase = self._locale.phrases.get(key)
        if phrase is None:
            if key not in self._missing:
                self._missing.add(key)
                logger.warning("Missing translation %r for locale %r", key, self._locale.id)
            return key

        count = options.get("smart_count")
        if PLURAL_DELIMITER in phrase:
            forms = [form.strip() for form in phrase.split(PLURAL_DELIMITER)]
            index = self._plural(int(count)) if count is not None else 0
            phrase = forms[min(index, len(forms) - 1)]

        if options:
            phrase = _INTERPOLATION.sub(
                lambda m: str(options[m.group(1)]) if m.group(1) in options else m.group(0),
                phrase,
            )
        return phrase

    __call__ = t
