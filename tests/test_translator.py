"""Tests for splitme.i18n.translator — phrases, interpolation, plurals."""

import logging

from splitme.i18n.store import Locale, flatten_phrases
from splitme.i18n.translator import Translator


def _translator(locale_id: str, phrases: dict) -> Translator:
    return Translator(Locale(id=locale_id, iso=locale_id, phrases=flatten_phrases(phrases)))


class TestTranslate:
    def test_plain(self) -> None:
        t = _translator("en", {"save": "Save"})
        assert t("save") == "Save"
        assert t.t("save") == "Save"

    def test_nested_key(self) -> None:
        t = _translator("en", {"account": {"list": {"title": "My accounts"}}})
        assert t("account.list.title") == "My accounts"

    def test_interpolation(self) -> None:
        t = _translator("en", {"greeting": "Hello %{name}"})
        assert t("greeting", name="Ada") == "Hello Ada"

    def test_unknown_placeholder_left_alone(self) -> None:
        t = _translator("en", {"greeting": "Hello %{name}"})
        assert t("greeting", other="x") == "Hello %{name}"

    def test_has(self) -> None:
        t = _translator("en", {"save": "Save"})
        assert t.has("save")
        assert not t.has("cancel")


class TestPlurals:
    def test_english(self) -> None:
        t = _translator("en", {"n": "%{smart_count} expense |||| %{smart_count} expenses"})
        assert t("n", smart_count=0) == "0 expenses"
        assert t("n", smart_count=1) == "1 expense"
        assert t("n", smart_count=2) == "2 expenses"

    def test_french_zero_is_singular(self) -> None:
        t = _translator("fr", {"n": "%{smart_count} dépense |||| %{smart_count} dépenses"})
        assert t("n", smart_count=0) == "0 dépense"
        assert t("n", smart_count=1) == "1 dépense"
        assert t("n", smart_count=5) == "5 dépenses"

    def test_without_count_uses_first_form(self) -> None:
        t = _translator("en", {"n": "one |||| many"})
        assert t("n") == "one"


class TestMissingKeys:
    def test_returns_key(self) -> None:
        t = _translator("en", {})
        assert t("nope.missing") == "nope.missing"

    def test_warns_once(self, caplog) -> None:
        t = _translator("en", {})
        with caplog.at_level(logging.WARNING, logger="splitme.i18n"):
            t("nope.missing")
            t("nope.missing")
        assert len([r for r in caplog.records if "nope.missing" in r.getMessage()]) == 1
