"""Main CLI entry point."""

import json
import logging
from typing import Any, Dict, Optional, Tuple

import rich_click as click
from rich.console import Console
from rich.logging import RichHandler
from rich.table import Table

from adminfields import __version__
from adminfields.config import Settings
from adminfields.core.field import FieldConfigError
from adminfields.core.registry import default_registry

console = Console()

click.rich_click.USE_RICH_MARKUP = True
click.rich_click.STYLE_HELPTEXT_FIRST = True
click.rich_click.STYLE_COMMANDS_TABLE_SHOW_LINES = False
click.rich_click.STYLE_COMMANDS_TABLE_PAD_EDGE = False
click.rich_click.STYLE_COMMANDS_TABLE_BOX = None
click.rich_click.STYLE_OPTIONS_TABLE_BOX = None
click.rich_click.SHOW_ARGUMENTS = True
click.rich_click.GROUP_ARGUMENTS_OPTIONS = True
click.rich_click.STYLE_ERRORS_SUGGESTION = "magenta italic"
click.rich_click.ERRORS_SUGGESTION = "Try running 'adminfields --help' for more information."

click.rich_click.STYLE_HEADER_TEXT = "bold cyan"
click.rich_click.STYLE_OPTION = "cyan"
click.rich_click.STYLE_SWITCH = "cyan"
click.rich_click.STYLE_METAVAR = "dim white"
click.rich_click.STYLE_USAGE_COMMAND = "cyan"
click.rich_click.STYLE_USAGE = "dim"

click.rich_click.COMMAND_GROUPS = {
    "adminfields": [
        {
            "name": "Commands",
            "commands": ["render", "types", "preview"],
        }
    ]
}


def configure_logging(settings: Settings) -> None:
    logging.basicConfig(
        level=settings.log_level_number,
        format="%(message)s",
        datefmt="[%X]",
        handlers=[RichHandler(console=console, show_path=False, markup=True)],
    )


def parse_option(raw: str) -> Tuple[str, Any]:
    """Parse ``key=value``; the value is read as JSON when it parses, else kept as text."""
    if "=" not in raw:
        raise click.BadParameter(f"Expected KEY=VALUE, got '{raw}'", param_hint="--option")
    key, value = raw.split("=", 1)
    try:
        return key, json.loads(value)
    except json.JSONDecodeError:
        return key, value


def load_json(raw: str, param_hint: str) -> Any:
    try:
        return json.loads(raw)
    except json.JSONDecodeError as e:
        raise click.BadParameter(f"Invalid JSON: {e}", param_hint=param_hint)


@click.group(
    help=f"""
[bold white on cyan] adminfields [/] [bold cyan]v{__version__}[/] Render admin form fields.

Run [bold cyan]adminfields types[/] to list field types.
Run [bold cyan]adminfields render TYPE NAME[/] to print a field's markup.
"""
)
@click.version_option(__version__)
@click.pass_context
def cli(ctx: click.Context) -> None:
    settings = Settings.from_env()
    configure_logging(settings)
    ctx.obj = settings


@cli.command()
def types() -> None:
    """List registered field types."""
    table = Table(show_header=True, header_style="bold magenta", box=None)
    table.add_column("Type", style="cyan")
    table.add_column("Constructor")

    for type_name in default_registry.types():
        constructor = default_registry.constructor(type_name)
        table.add_row(type_name, getattr(constructor, "__qualname__", repr(constructor)))

    console.print(table)


@cli.command()
@click.argument("type_name", metavar="TYPE")
@click.argument("name")
@click.option("--value", default=None, help="Field value as text")
@click.option("--value-json", default=None, help="Field value as JSON (lists, mappings)")
@click.option("--option", "option_pairs", multiple=True, help="Option as KEY=VALUE; repeatable")
@click.option("--options-json", default=None, help="All options as a JSON object")
@click.option("--no-wrapper", is_flag=True, help="Render just the input")
def render(
    type_name: str,
    name: str,
    value: Optional[str],
    value_json: Optional[str],
    option_pairs: Tuple[str, ...],
    options_json: Optional[str],
    no_wrapper: bool,
) -> None:
    """Print the HTML of one field."""
    if value is not None and value_json is not None:
        raise click.UsageError("--value and --value-json are mutually exclusive")

    options: Dict[str, Any] = {}
    if options_json:
        loaded = load_json(options_json, "--options-json")
        if not isinstance(loaded, dict):
            raise click.BadParameter("Options must be a JSON object", param_hint="--options-json")
        options.update(loaded)
    for raw in option_pairs:
        key, parsed = parse_option(raw)
        options[key] = parsed
    if no_wrapper:
        options["wrapper"] = False

    field_value: Any = value
    if value_json is not None:
        field_value = load_json(value_json, "--value-json")

    try:
        field = default_registry.create(type_name, name, field_value, options)
    except FieldConfigError as e:
        console.print(f"[bold red]Error[/]: {e}")
        raise SystemExit(1)

    if field is None:
        console.print(f"[bold red]Error[/]: unknown field type '{type_name}'")
        raise SystemExit(1)

    # Plain echo so markup is never reinterpreted by rich
    click.echo(field.render())


@cli.command()
@click.option("--host", default=None, help="Host to bind to")
@click.option("--port", default=None, type=int, help="Port to bind to")
@click.pass_obj
def preview(settings: Settings, host: Optional[str], port: Optional[int]) -> None:
    """Serve a gallery of every field type."""
    import uvicorn

    from adminfields.runtime.preview import create_app

    settings = settings.override(host=host, port=port)
    console.print(
        f"🚀 Serving field preview on "
        f"[link=http://{settings.host}:{settings.port}]http://{settings.host}:{settings.port}[/link]"
    )
    uvicorn.run(
        create_app(debug=settings.log_level_number <= logging.DEBUG),
        host=settings.host,
        port=settings.port,
        log_level=settings.log_level.lower(),
    )


if __name__ == "__main__":
    cli()
