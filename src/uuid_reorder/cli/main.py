import logging
from datetime import datetime
from typing import NoReturn

import typer
from rich.console import Console
from rich.markup import escape
from rich.table import Table

from uuid_reorder.bounds import lowest_bound, lowest_bound_for_ticks
from uuid_reorder.codec import sortable_ticks, standard_ticks, to_sortable, to_standard
from uuid_reorder.config import LOG_LEVEL_ENV
from uuid_reorder.errors import ReorderError, ValidationError
from uuid_reorder.identifier import Identifier
from uuid_reorder.log import configure_logging
from uuid_reorder.timestamp import Timestamp

app = typer.Typer(help="Sortable version 1 UUID tools")
console = Console()
logger = logging.getLogger("cli")


def _fail(error: ReorderError) -> NoReturn:
    logger.info("Command failed: %s", error)
    console.print(f"[red]{escape(str(error))}[/red]")
    raise typer.Exit(code=1)


def _parse_instant(text: str) -> datetime:
    try:
        return datetime.fromisoformat(text)
    except ValueError as e:
        raise ValidationError(
            f"Cannot parse ISO-8601 instant: {e}", field="when", value=text
        ) from e


@app.callback()
def main_options(
    log_level: str = typer.Option(
        "WARNING", "--log-level", envvar=LOG_LEVEL_ENV, help="Log level"
    ),
    json_logs: bool = typer.Option(False, "--json-logs", help="Emit logs as JSON"),
):
    """Reorder version 1 UUIDs so they sort by time."""
    configure_logging(level=log_level, json_format=json_logs)


@app.command()
def sortable(uuids: list[str] = typer.Argument(..., help="UUIDs in RFC 4122 order")):
    """Print the sortable form of RFC-order version 1 UUIDs."""
    try:
        for text in uuids:
            console.print(str(to_sortable(Identifier.parse(text))))
    except ReorderError as e:
        _fail(e)


@app.command()
def standard(uuids: list[str] = typer.Argument(..., help="UUIDs in sortable order")):
    """Print the RFC 4122 form of sortable-order version 1 UUIDs."""
    try:
        for text in uuids:
            console.print(str(to_standard(Identifier.parse(text))))
    except ReorderError as e:
        _fail(e)


@app.command()
def bound(
    when: str = typer.Argument(..., help="ISO-8601 instant, or a tick count with --ticks"),
    ticks: bool = typer.Option(False, "--ticks", help="Read WHEN as 100ns ticks since 1582-10-15"),
    show_standard: bool = typer.Option(False, "--standard", help="Also print the RFC-order form"),
):
    """Print the lowest sortable UUID for an instant."""
    try:
        if ticks:
            try:
                count = int(when, 0)
            except ValueError as e:
                raise ValidationError(
                    f"Cannot parse tick count: {e}", field="when", value=when
                ) from e
            result = lowest_bound_for_ticks(count)
        else:
            result = lowest_bound(_parse_instant(when))

        if show_standard:
            console.print(f"sortable: {result}")
            console.print(f"standard: {to_standard(result)}")
        else:
            console.print(str(result))
    except ReorderError as e:
        _fail(e)


@app.command()
def inspect(
    uuid_text: str = typer.Argument(..., metavar="UUID", help="UUID to inspect"),
    is_sortable: bool = typer.Option(False, "--sortable", help="Read the UUID as sortable order"),
):
    """Show the version, variant and embedded timestamp of a UUID."""
    try:
        identifier = Identifier.parse(uuid_text)
        if is_sortable:
            count = sortable_ticks(identifier)
            other_label, other = "Standard form", to_standard(identifier)
        else:
            count = standard_ticks(identifier)
            other_label, other = "Sortable form", to_sortable(identifier)
    except ReorderError as e:
        _fail(e)

    table = Table(title="UUID")
    table.add_column("Property", style="cyan")
    table.add_column("Value", style="magenta")

    table.add_row("UUID", str(identifier))
    table.add_row("Layout", "sortable" if is_sortable else "standard")
    table.add_row("Version", str(identifier.version))
    table.add_row("Variant", identifier.to_uuid().variant)
    table.add_row("Timestamp counter", str(count))
    table.add_row("Instant", Timestamp.from_ticks(count).isoformat())
    table.add_row(other_label, str(other))

    console.print(table)


def main():
    app()


if __name__ == "__main__":
    main()
