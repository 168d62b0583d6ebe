"""Tests for splitme.markup — node construction and HTML serialization."""

import pytest

from splitme.markup import Raw, fragment, h, render_to_string, title
from splitme.markup.serialize import attribute_name


class TestElements:
    def test_text_escaped(self) -> None:
        assert render_to_string(h("p", None, "<b>&")).html == "<p>&lt;b&gt;&amp;</p>"

    def test_attribute_escaped(self) -> None:
        html = render_to_string(h("a", {"href": '/x?a=1&b="2"'})).html
        assert html == '<a href="/x?a=1&amp;b=&quot;2&quot;"></a>'

    def test_void_element(self) -> None:
        assert render_to_string(h("input", {"type": "text"})).html == '<input type="text">'

    def test_void_element_with_children(self) -> None:
        with pytest.raises(ValueError, match="void"):
            render_to_string(h("br", None, "x"))

    def test_boolean_and_none_attributes(self) -> None:
        html = render_to_string(h("input", {"required": True, "disabled": False, "value": None})).html
        assert html == "<input required>"

    def test_children_flattened(self) -> None:
        items = [h("li", None, str(i)) for i in range(2)]
        html = render_to_string(h("ul", None, items, None, False)).html
        assert html == "<ul><li>0</li><li>1</li></ul>"

    def test_fragment_and_raw(self) -> None:
        html = render_to_string(fragment("a", Raw("<hr>"), 3)).html
        assert html == "a<hr>3"

    def test_unrenderable(self) -> None:
        with pytest.raises(TypeError):
            render_to_string(h("p", None, object()))


class TestAttributeNames:
    @pytest.mark.parametrize(
        ("prop", "name"),
        [
            ("class_name", "class"),
            ("html_for", "for"),
            ("data_account_id", "data-account-id"),
            ("aria_hidden", "aria-hidden"),
            ("href", "href"),
        ],
    )
    def test_mapping(self, prop: str, name: str) -> None:
        assert attribute_name(prop) == name


class TestTitle:
    def test_no_title(self) -> None:
        assert render_to_string(h("p", None, "x")).title is None

    def test_title_renders_children_only(self) -> None:
        rendered = render_to_string(title("Home", h("p", None, "x")))
        assert rendered.html == "<p>x</p>"
        assert rendered.title == "Home"

    def test_innermost_wins(self) -> None:
        tree = title("Split Me", h("div", None, title("My accounts", "list")))
        assert render_to_string(tree).title == "My accounts"

    def test_last_visited_wins(self) -> None:
        tree = fragment(title("First"), title("Second"))
        assert render_to_string(tree).title == "Second"
