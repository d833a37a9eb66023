"""Command-line interface for datekit."""

import logging
from datetime import datetime
from typing import Annotated, Optional

import typer
from rich.console import Console
from rich.table import Table

from datekit.config import FormatterConfig
from datekit.converter import DateConverter
from datekit.exceptions import DatekitError
from datekit.formats import DateFormat, iter_formats
from datekit.locales import LocaleFormat
from datekit.plurals import pluralize
from datekit.settings import Settings

app = typer.Typer(
    name="datekit",
    help="Date formatting and Russian 'time ago' phrases",
    add_completion=False,
)

console = Console()


@app.callback()
def main(
    verbose: Annotated[
        bool,
        typer.Option("--verbose", "-v", help="Enable debug logging"),
    ] = False,
) -> None:
    """Configure logging for all commands."""
    try:
        level = logging.DEBUG if verbose else Settings.from_env().log_level_number
    except DatekitError as e:
        typer.echo(f"Error: {e}", err=True)
        raise typer.Exit(1)
    logging.basicConfig(
        level=level,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )


def _build_config(
    format_name: str,
    locale: Optional[str],
    timezone: Optional[str],
) -> FormatterConfig:
    locale_format = LocaleFormat.from_tag(locale) if locale else None
    return FormatterConfig(
        format=DateFormat.from_name(format_name, locale_format),
        locale=locale_format,
        timezone=timezone,
    )


@app.command(name="formats")
def formats_cmd() -> None:
    """List the catalog formats."""
    table = Table(title="Date formats")
    table.add_column("Name", style="cyan")
    table.add_column("Locale")
    table.add_column("Pattern")
    table.add_column("Example")

    for fmt in iter_formats():
        table.add_row(
            fmt.name,
            fmt.locale.tag if fmt.locale else "",
            fmt.pattern,
            fmt.example,
        )
    console.print(table)


@app.command(name="parse")
def parse_cmd(
    text: Annotated[str, typer.Argument(help="Text to parse")],
    format: Annotated[
        str,
        typer.Option("--format", "-f", help="Catalog format name"),
    ] = "api_full_date_format",
    locale: Annotated[
        Optional[str],
        typer.Option("--locale", "-l", help="Locale (ru, en)"),
    ] = None,
    timezone: Annotated[
        Optional[str],
        typer.Option("--timezone", "-t", help="IANA timezone name"),
    ] = None,
) -> None:
    """Parse text and print it as ISO-8601."""
    try:
        config = _build_config(format, locale, timezone)
    except DatekitError as e:
        typer.echo(f"Error: {e}", err=True)
        raise typer.Exit(1)

    result = DateConverter().date_from_string(text, config)
    if result is None:
        typer.echo(f"Could not parse {text!r} with pattern {config.pattern!r}", err=True)
        raise typer.Exit(1)
    typer.echo(result.isoformat())


@app.command(name="format")
def format_cmd(
    value: Annotated[str, typer.Argument(help="ISO-8601 datetime")],
    format: Annotated[
        str,
        typer.Option("--format", "-f", help="Catalog format name"),
    ] = "short_date",
    locale: Annotated[
        Optional[str],
        typer.Option("--locale", "-l", help="Locale (ru, en)"),
    ] = None,
    timezone: Annotated[
        Optional[str],
        typer.Option("--timezone", "-t", help="IANA timezone name"),
    ] = None,
) -> None:
    """Format an ISO-8601 datetime with a catalog format."""
    try:
        config = _build_config(format, locale, timezone)
        date = datetime.fromisoformat(value)
    except (DatekitError, ValueError) as e:
        typer.echo(f"Error: {e}", err=True)
        raise typer.Exit(1)

    typer.echo(DateConverter().string_from_date(date, config))


@app.command(name="ago")
def ago_cmd(
    text: Annotated[str, typer.Argument(help="Date text")],
    format: Annotated[
        str,
        typer.Option("--format", "-f", help="Catalog format name"),
    ] = "api_full_date_format",
    unit: Annotated[
        bool,
        typer.Option("--unit", help="Prefix the output with the selected unit"),
    ] = False,
) -> None:
    """Print how long ago a date was."""
    try:
        date_format = DateFormat.from_name(format)
    except DatekitError as e:
        typer.echo(f"Error: {e}", err=True)
        raise typer.Exit(1)

    result = DateConverter().time_ago_classified(text, date_format)
    if unit:
        typer.echo(f"{result.unit.value}: {result.text}")
    else:
        typer.echo(result.text)


@app.command(name="plural")
def plural_cmd(
    count: Annotated[int, typer.Argument(help="The number")],
    singular: Annotated[str, typer.Argument(help="Form after 1, 21...")],
    plural: Annotated[str, typer.Argument(help="Form after 2-4, 22-24...")],
    plural_genitive: Annotated[str, typer.Argument(help="Form after 5-20, 25-30...")],
) -> None:
    """Print a count with the agreeing Russian word form."""
    typer.echo(pluralize(count, singular, plural, plural_genitive))


if __name__ == "__main__":
    app()
