import pytest
from markupsafe import Markup

from adminfields.core.element import (
    BOOLEAN_ATTRIBUTES,
    VOID_ELEMENTS,
    Element,
    normalize_attributes,
    render,
)
from adminfields.runtime.escape import escape_html


def test_empty_void_and_container_tags():
    assert render("input", {}) == "<input />"
    assert render("br") == "<br />"
    assert render("div", {}) == "<div></div>"
    assert render("SPAN") == "<span></span>"


@pytest.mark.parametrize("tag", sorted(VOID_ELEMENTS))
def test_void_tags_drop_content(tag):
    assert render(tag, {}, "ignored") == f"<{tag} />"


def test_attributes_keep_insertion_order():
    html = render("input", {"type": "text", "name": "title", "id": "title"})
    assert html == '<input type="text" name="title" id="title" />'


def test_null_false_and_empty_values_are_suppressed():
    html = render("input", {"a": None, "b": "", "c": False, "d": "0", "e": 0})
    assert html == '<input d="0" e="0" />'
    assert "a=" not in html
    assert "b=" not in html
    assert "c=" not in html


@pytest.mark.parametrize("value", [True, "true", "checked", 1, "1"])
def test_boolean_attribute_truthy_forms(value):
    assert render("input", {"checked": value}) == "<input checked />"


@pytest.mark.parametrize("value", [False, "false", 0, "0", 2, "yes", "disabled", None, "", [1]])
def test_boolean_attribute_other_forms_render_nothing(value):
    assert render("input", {"checked": value}) == "<input />"


def test_every_boolean_attribute_accepts_its_own_name():
    for name in BOOLEAN_ATTRIBUTES:
        assert render("input", {name: name}) == f"<input {name} />"


def test_true_on_regular_attribute_renders_one():
    assert render("div", {"data-open": True}) == '<div data-open="1"></div>'


def test_data_mapping_is_hoisted():
    html = render("div", {"id": "x", "data": {"unit": "px", "empty": ""}})
    assert html == '<div id="x" data-unit="px"></div>'


def test_attrs_passthrough_is_merged_verbatim():
    html = render("input", {"attrs": {"aria-label": "Search", "autocomplete": "off"}})
    assert html == '<input aria-label="Search" autocomplete="off" />'


def test_normalize_drops_none_and_keeps_non_mapping_data():
    assert normalize_attributes({"id": None, "data": "raw"}) == {"data": "raw"}


def test_values_and_names_are_escaped():
    html = render("div", {"title": '"><script>alert(1)</script>', 'on"x': "y"})
    assert "<script>" not in html
    assert 'title="&quot;&gt;&lt;script&gt;alert(1)&lt;/script&gt;"' in html
    assert 'on&quot;x="y"' in html


def test_text_content_is_escaped_but_markup_is_not():
    assert render("p", {}, "a < b & c") == "<p>a &lt; b &amp; c</p>"
    assert render("p", {}, Markup("<b>bold</b>")) == "<p><b>bold</b></p>"


def test_nested_element_content():
    inner = Element("option", {"value": "a"}, "A")
    assert render("select", {}, inner) == '<select><option value="a">A</option></select>'


def test_fluent_builders():
    element = (
        Element.create("span", {"class": "a b"})
        .add_class("b c")
        .data({"role": "hint"})
        .set("title", "Hi")
        .content("text")
    )
    assert element.render() == '<span class="a b c" data-role="hint" title="Hi">text</span>'
    assert str(element) == element.render()


def test_add_class_on_element_without_class():
    assert Element("div").add_class(" x  y ").render() == '<div class="x y"></div>'


def test_escape_html_escapes_the_four_characters():
    assert escape_html('<a href="x">&</a>') == "&lt;a href=&quot;x&quot;&gt;&amp;&lt;/a&gt;"
    assert escape_html(0) == "0"
