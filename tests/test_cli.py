import pytest
from click.testing import CliRunner

from adminfields.cli.main import cli, parse_option


@pytest.fixture
def runner():
    return CliRunner()


def test_types_lists_registered_names(runner):
    result = runner.invoke(cli, ["types"])
    assert result.exit_code == 0
    for type_name in ("text", "price", "date_range", "submit"):
        assert type_name in result.output


def test_render_prints_markup(runner):
    result = runner.invoke(cli, ["render", "text", "title", "--value", "Hello"])
    assert result.exit_code == 0
    assert result.output.strip() == (
        '<div class="form-field field-text">'
        '<input id="title" name="title" type="text" value="Hello" class="regular-text" />'
        "</div>"
    )


def test_render_without_wrapper(runner):
    result = runner.invoke(cli, ["render", "hidden", "token", "--value", "x", "--no-wrapper"])
    assert result.exit_code == 0
    assert result.output.strip() == '<input type="hidden" id="token" name="token" value="x" />'


def test_render_options_and_json_value(runner):
    result = runner.invoke(
        cli,
        [
            "render",
            "checkbox_group",
            "days",
            "--value-json",
            '["mon"]',
            "--options-json",
            '{"options": {"mon": "Mon", "tue": "Tue"}}',
            "--option",
            "label=Days",
            "--option",
            "required=true",
        ],
    )
    assert result.exit_code == 0
    assert '<label for="days">Days <span class="required">*</span></label>' in result.output
    assert 'value="mon" checked' in result.output
    assert 'value="tue" checked' not in result.output


def test_render_unknown_type_fails(runner):
    result = runner.invoke(cli, ["render", "wysiwyg", "body"])
    assert result.exit_code == 1
    assert "unknown field type 'wysiwyg'" in result.output


def test_render_invalid_configuration_fails(runner):
    result = runner.invoke(cli, ["render", "radio", "r", "--option", "layout=diagonal"])
    assert result.exit_code == 1
    assert "layout" in result.output


@pytest.mark.parametrize(
    "args",
    [
        ["--value", "x", "--value-json", "\"y\""],
        ["--value-json", "{nope"],
        ["--options-json", "[1, 2]"],
        ["--option", "no-equals-sign"],
    ],
)
def test_render_bad_parameters_exit_with_usage_error(runner, args):
    result = runner.invoke(cli, ["render", "text", "t", *args])
    assert result.exit_code == 2


def test_parse_option():
    assert parse_option("rows=3") == ("rows", 3)
    assert parse_option("label=Hello world") == ("label", "Hello world")
    assert parse_option("data={\"k\": 1}") == ("data", {"k": 1})
    assert parse_option("pattern=a=b") == ("pattern", "a=b")
