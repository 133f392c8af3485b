"""CLI entry point using Typer."""

import logging
from datetime import datetime
from pathlib import Path

import structlog
import typer
from rich.console import Console
from rich.table import Table

from streamfeed.codec.decode import decode_activity
from streamfeed.codec.encode import encode_activity
from streamfeed.codec.errors import CodecError
from streamfeed.codec.results import decode_aggregated_feed
from streamfeed.config import settings
from streamfeed.models import Activity

app = typer.Typer(
    name="streamfeed",
    help="Activity feed codec - inspect and re-encode activity documents.",
)
console = Console()

# Configure structured logging
structlog.configure(
    processors=[
        structlog.stdlib.add_log_level,
        structlog.processors.JSONRenderer() if settings.log_json else structlog.dev.ConsoleRenderer(),
    ],
    wrapper_class=structlog.make_filtering_bound_logger(logging.getLevelName(settings.log_level)),
    context_class=dict,
    logger_factory=structlog.PrintLoggerFactory(),
)


def _read_document(path: Path) -> bytes:
    if not path.exists():
        raise FileNotFoundError(f"Document not found: {path}")
    return path.read_bytes()


def _activity_table(activity: Activity, title: str = "Activity") -> Table:
    table = Table(title=title)
    table.add_column("Field", style="cyan")
    table.add_column("Value", style="green")
    table.add_row("id", activity.id)
    table.add_row("actor", activity.actor)
    table.add_row("verb", activity.verb)
    table.add_row("object", activity.object)
    table.add_row("origin", activity.origin)
    table.add_row("target", activity.target)
    table.add_row("time", activity.time.isoformat() if activity.time else "")
    table.add_row("foreign_id", activity.foreign_id)
    table.add_row("data", "" if activity.data is None else repr(activity.data))
    for feed in activity.to:
        table.add_row("to", f"{feed.feed_id} {feed.token}".strip())
    for key, value in sorted(activity.metadata.items()):
        table.add_row(f"meta:{key}", value)
    return table


@app.command()
def encode(
    path: Path = typer.Argument(..., help="Activity JSON document"),
    time: str | None = typer.Option(None, "--time", help="ISO timestamp used when the activity has no time"),
) -> None:
    """Decode an activity document and print its outbound encoding."""
    try:
        activity = decode_activity(_read_document(path))
        clock = None
        if time:
            pinned = datetime.fromisoformat(time)
            clock = lambda: pinned  # noqa: E731
        typer.echo(encode_activity(activity, clock=clock).decode("utf-8"))
    except (FileNotFoundError, ValueError) as e:
        console.print(f"[bold red]Error:[/bold red] {e}")
        raise typer.Exit(1)


@app.command()
def decode(path: Path = typer.Argument(..., help="Activity JSON document")) -> None:
    """Show the fields of a decoded activity."""
    try:
        activity = decode_activity(_read_document(path))
    except (FileNotFoundError, CodecError) as e:
        console.print(f"[bold red]Error:[/bold red] {e}")
        raise typer.Exit(1)

    console.print(_activity_table(activity))


@app.command()
def groups(path: Path = typer.Argument(..., help="Aggregated feed listing JSON document")) -> None:
    """Summarize a grouped activity listing."""
    try:
        result = decode_aggregated_feed(_read_document(path))
    except (FileNotFoundError, CodecError) as e:
        console.print(f"[bold red]Error:[/bold red] {e}")
        raise typer.Exit(1)

    table = Table(title="Activity Groups")
    table.add_column("Group", style="cyan")
    table.add_column("Verb")
    table.add_column("Activities", style="green")
    table.add_column("Actors", style="green")
    for group in result.results:
        table.add_row(
            group.group,
            group.verb,
            str(group.activity_count),
            str(group.actor_count),
        )

    console.print(table)
    console.print(f"duration={result.duration} next={result.next or '-'}")


if __name__ == "__main__":
    app()
