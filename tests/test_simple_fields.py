import pytest

from adminfields import FieldConfigError
from adminfields.fields import (
    Button,
    Checkbox,
    Color,
    Date,
    DateTime,
    Hidden,
    Number,
    Range,
    Text,
    Textarea,
    Time,
    Toggle,
)


def test_text_input_defaults():
    assert Text("title", "Hello").render_input() == (
        '<input id="title" name="title" type="text" value="Hello" class="regular-text" />'
    )


def test_text_wrapper_reports_input_type():
    html = Text("mail", None, {"type": "email", "label": "Email", "required": True}).render()
    assert html.startswith('<div class="form-field field-email field-required">')
    assert 'type="email"' in html
    assert " required" in html


def test_text_optional_attributes_and_custom_class():
    html = Text(
        "code", "", {"maxlength": 8, "minlength": 0, "pattern": "[A-Z]+", "class": "code"}
    ).render_input()
    assert 'maxlength="8"' in html
    assert 'minlength="0"' in html
    assert 'pattern="[A-Z]+"' in html
    assert 'class="code"' in html
    assert "value=" not in html


def test_text_zero_value_is_kept():
    assert 'value="0"' in Text("n", 0).render_input()
    assert 'value="0"' in Text("n", "0").render_input()


def test_text_value_is_escaped():
    html = Text("t", '"><script>x</script>').render_input()
    assert "<script>" not in html
    assert 'value="&quot;&gt;&lt;script&gt;x&lt;/script&gt;"' in html


def test_hidden_skips_wrapper_and_label():
    html = Hidden("token", "abc", {"label": "Ignored", "class": "ignored", "data": {"k": 1}}).render()
    assert html == '<input type="hidden" id="token" name="token" value="abc" data-k="1" />'


def test_textarea_escapes_content():
    html = Textarea("body", "</textarea><b>", {"rows": 3, "cols": 40}).render_input()
    assert html == (
        '<textarea id="body" name="body" rows="3" cols="40" class="large-text">'
        "&lt;/textarea&gt;&lt;b&gt;</textarea>"
    )


def test_color_default_and_data_attribute():
    html = Color("accent").render_input()
    assert 'type="color" value="#000000"' in html
    assert 'data-default-color="#000000"' in html

    data = {"role": "picker"}
    html = Color("accent", "#ff0000", {"default": "#fff", "data": data, "placeholder": "x"}).render_input()
    assert 'value="#ff0000"' in html
    assert 'data-role="picker" data-default-color="#fff"' in html
    assert "placeholder" not in html
    assert data == {"role": "picker"}


def test_number_limits_and_default_class():
    html = Number("qty", 3, {"min": 0, "max": 10, "step": 1}).render_input()
    assert html == (
        '<input id="qty" name="qty" type="number" value="3" min="0" max="10" step="1" class="small-text" />'
    )


def test_range_with_output_and_unit():
    html = Range("opacity", 40, {"unit": "%"}).render_input()
    assert html == (
        '<div class="range-field-wrapper" data-unit="%">'
        '<input id="opacity" name="opacity" type="range" value="40" min="0" max="100" step="1" />'
        '<output for="opacity" class="range-output">40%</output>'
        "</div>"
    )


def test_range_falls_back_to_min_and_can_hide_output():
    html = Range("r", None, {"min": 5, "show_output": False}).render_input()
    assert 'value="5"' in html
    assert "<output" not in html
    assert 'data-unit=""' in html


def test_checkbox_label_follows_input():
    html = Checkbox("agree", True, {"label": "I agree", "description": "Required"}).render()
    assert html == (
        '<div class="form-field field-checkbox">'
        '<label for="agree"><input id="agree" name="agree" type="checkbox" value="1" checked /> I agree</label>'
        '<p class="description">Required</p>'
        "</div>"
    )


def test_checkbox_label_preference_and_bare_input():
    html = Checkbox("c", False, {"label": "Main", "checkbox_label": "Inline"}).render_input()
    assert "Inline" in html
    assert "Main" not in html
    assert " checked" not in html
    assert Checkbox("c", "", {"wrapper": False}).render() == (
        '<input id="c" name="c" type="checkbox" value="1" />'
    )


def test_toggle_with_captions_keeps_heading_label():
    html = Toggle("active", 1, {"label": "Active", "on_label": "On", "off_label": "Off"}).render()
    assert '<label for="active">Active</label>' in html
    assert (
        '<span class="toggle__labels"><span class="toggle__label-off">Off</span>'
        '<span class="toggle__label-on">On</span></span>'
    ) in html
    assert 'class="toggle__input"' in html
    assert " checked" in html


def test_toggle_without_captions_uses_inline_text():
    html = Toggle("active", 0, {"label": "Active"}).render()
    assert "<label for=\"active\">Active</label>" not in html
    assert '<span class="toggle__text">Active</span>' in html
    assert '<label class="toggle" for="active">' in html
    assert '<span class="toggle__slider"></span>' in html
    assert " checked" not in html


@pytest.mark.parametrize(
    "cls,input_type", [(Date, "date"), (Time, "time"), (DateTime, "datetime-local")]
)
def test_temporal_inputs(cls, input_type):
    html = cls("when", "x", {"min": "a", "max": "b", "placeholder": "ignored"}).render_input()
    assert f'type="{input_type}"' in html
    assert 'min="a" max="b"' in html
    assert "placeholder" not in html


def test_date_ignores_step_time_uses_it():
    assert "step" not in Date("d", None, {"step": 7}).render_input()
    assert 'step="60"' in Time("t", None, {"step": 60}).render_input()


def test_button_types_and_classes():
    assert Button("Save changes").render() == (
        '<button type="button" id="Save_changes" class="button">Save changes</button>'
    )
    html = Button("Go", {"type": "submit", "small": True, "class": "extra", "name": "go", "value": 1}).render()
    assert html == (
        '<button type="submit" id="Go" class="button button-primary button-small extra" '
        'name="go" value="1">Go</button>'
    )


def test_button_skips_wrapper_even_with_label():
    html = Button("Reset", {"type": "reset", "label": "Ignored", "wrapper": True}).render()
    assert html.startswith("<button")
    assert "Ignored" not in html


def test_button_text_is_escaped_and_type_validated():
    assert "&lt;b&gt;" in Button("<b>").render()
    with pytest.raises(FieldConfigError):
        Button("x", {"type": "image"})


@pytest.mark.parametrize("value", ["0", 0, "", None, False, []])
def test_checkbox_and_toggle_stored_off_values_stay_unchecked(value):
    assert " checked" not in Checkbox("agree", value, {"wrapper": False}).render()
    assert " checked" not in Toggle("active", value, {"wrapper": False}).render()


@pytest.mark.parametrize("value", ["1", 1, "on", True, "yes"])
def test_checkbox_and_toggle_on_values(value):
    assert " checked" in Checkbox("agree", value, {"wrapper": False}).render()
    assert " checked" in Toggle("active", value, {"wrapper": False}).render()
