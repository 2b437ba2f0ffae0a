"""Command-line interface for the calendar link generator."""

from __future__ import annotations

import json
import logging
import sys
from typing import Optional

import typer
from pydantic import ValidationError

from .calendar import EventDetails, generate_links
from .config import get_settings

app = typer.Typer(
    name="addtocal",
    help="Generate Google, Outlook and Yahoo 'add event' calendar links",
    no_args_is_help=True,
)

LINK_LABELS = {
    "google_calendar_link": "Google Calendar",
    "outlook_calendar_link": "Outlook Calendar",
    "yahoo_calendar_link": "Yahoo Calendar",
}


def setup_logging(verbose: bool = False, level: str = "INFO") -> None:
    """Configure logging based on verbosity."""
    logging.basicConfig(
        level=logging.DEBUG if verbose else level.upper(),
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        handlers=[logging.StreamHandler(sys.stdout)],
    )


@app.command()
def links(
    title: Optional[str] = typer.Option(None, "--title", "-t", help="Event title"),
    description: Optional[str] = typer.Option(
        None, "--description", "-d", help="Event description"
    ),
    location: Optional[str] = typer.Option(None, "--location", "-l", help="Event location"),
    start: Optional[str] = typer.Option(
        None, "--start", "-s", help="Start date-time, e.g. 2024-01-15T12:00"
    ),
    end: Optional[str] = typer.Option(
        None, "--end", "-e", help="End date-time, e.g. 2024-01-15T13:00"
    ),
    as_json: bool = typer.Option(False, "--json", help="Print links as a JSON object"),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Enable verbose logging"),
) -> None:
    """Print the calendar links for an event."""
    try:
        settings = get_settings()
    except ValidationError as e:
        typer.echo(f"❌ Configuration error: {e}", err=True)
        raise typer.Exit(1)

    setup_logging(verbose, settings.log_level)
    logger = logging.getLogger(__name__)

    event = EventDetails(
        title=title,
        description=description,
        location=location,
        start_date=start,
        end_date=end,
    )
    generated = generate_links(event, settings.tzinfo).as_dict()
    logger.debug(f"Generated links for {event} in {settings.local_timezone}")

    if as_json:
        typer.echo(json.dumps(generated, indent=2))
        return

    for key, label in LINK_LABELS.items():
        typer.echo(f"{label}: {generated[key]}")


@app.command()
def serve(
    host: Optional[str] = typer.Option(None, "--host", help="API host (default from config)"),
    port: Optional[int] = typer.Option(None, "--port", "-p", help="API port (default from config)"),
    reload: bool = typer.Option(False, "--reload", help="Enable auto-reload"),
) -> None:
    """Start the web server."""
    import uvicorn

    try:
        settings = get_settings()
    except ValidationError as e:
        typer.echo(f"❌ Configuration error: {e}", err=True)
        raise typer.Exit(1)

    setup_logging(level=settings.log_level)

    uvicorn.run(
        "addtocal.api:app",
        host=host or settings.api_host,
        port=port or settings.api_port,
        reload=reload,
    )


@app.command()
def config(
    validate: bool = typer.Option(False, "--validate", help="Validate configuration"),
    show: bool = typer.Option(False, "--show", help="Show current config"),
) -> None:
    """Check or display configuration."""
    try:
        settings = get_settings()

        if validate:
            typer.echo("✅ Configuration is valid")

        if show:
            typer.echo("\nCurrent Configuration:")
            typer.echo(f"  App Title: {settings.app_title}")
            typer.echo(f"  Local Timezone: {settings.local_timezone}")
            typer.echo(f"  API Host: {settings.api_host}")
            typer.echo(f"  API Port: {settings.api_port}")
            typer.echo(f"  Log Level: {settings.log_level}")

    except ValidationError as e:
        typer.echo(f"❌ Configuration error: {e}", err=True)
        raise typer.Exit(1)


def main() -> None:
    """Entry point for the CLI."""
    app()


if __name__ == "__main__":
    main()
