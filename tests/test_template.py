"""Tests for splitme.templating.engine — kida page template."""

import pytest

from splitme.errors import ConfigurationError
from splitme.render import TEMPLATE_KEYS
from splitme.templating import PageTemplate, interpolate, template_placeholders


class TestPlaceholders:
    def test_outputs_conditions_and_loops(self) -> None:
        source = (
            "<p>{{ a }}</p>"
            "{% if b and not flag %}{{ c.d }}{% end %}"
            "{% for x in items %}{{ x }}{{ loop.index }}{% end %}"
        )
        assert template_placeholders(source) == {"a", "b", "flag", "c", "items"}

    def test_string_literals_ignored(self) -> None:
        assert template_placeholders("{% if mode == 'dark' %}x{% end %}") == {"mode"}

    def test_packaged_template_uses_renderer_keys(self) -> None:
        assert PageTemplate.from_path().placeholders == TEMPLATE_KEYS


class TestPageTemplate:
    def test_source_is_minified(self) -> None:
        page = PageTemplate("<div>\n  <!-- c -->\n  <p>{{ x }}</p>\n</div>")
        assert page.source == "<div><p>{{ x }}</p></div>"

    def test_check_passes(self) -> None:
        PageTemplate("{{ a }}{{ b }}").check({"a", "b", "extra"})

    def test_check_reports_missing(self) -> None:
        with pytest.raises(ConfigurationError, match="b, c"):
            PageTemplate("{{ a }}{{ b }}{{ c }}").check({"a"})

    def test_from_path(self, tmp_path) -> None:
        path = tmp_path / "page.html"
        path.write_text("<h1>\n  {{ title }}\n</h1>")
        assert PageTemplate.from_path(path).render({"title": "Hi"}) == "<h1> Hi </h1>"

    def test_from_missing_path(self, tmp_path) -> None:
        with pytest.raises(ConfigurationError, match="Cannot read"):
            PageTemplate.from_path(tmp_path / "missing.html")


class TestInterpolate:
    def test_substitutes(self) -> None:
        assert interpolate("<p>{{ name }}</p>", {"name": "Ada"}) == "<p>Ada</p>"

    def test_autoescapes(self) -> None:
        assert interpolate("<p>{{ name }}</p>", {"name": "<b>"}) == "<p>&lt;b&gt;</p>"

    def test_no_placeholder_left(self) -> None:
        html = interpolate(
            "<title>{{ title }}</title>{% if on %}<i>{{ extra }}</i>{% end %}",
            {"title": "T", "on": True, "extra": "E"},
        )
        assert "{{" not in html
        assert "{%" not in html
        assert html == "<title>T</title><i>E</i>"

    def test_missing_key(self) -> None:
        with pytest.raises(ConfigurationError, match="title"):
            interpolate("<title>{{ title }}</title>", {})

    def test_accepts_compiled_template(self) -> None:
        page = PageTemplate("{{ a }}")
        assert interpolate(page, {"a": 1}) == "1"
