"""Localization — locale loading, best-locale resolution, translation."""

from splitme.i18n.store import DEFAULT_ISO_CODES, Locale, LocaleStore, parse_accept_language
from splitme.i18n.translator import Translator

__all__ = [
    "DEFAULT_ISO_CODES",
    "Locale",
    "LocaleStore",
    "Translator",
    "parse_accept_language",
]
