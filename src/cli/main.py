"""Command-line entry-point.

Thin layer: builds settings, fetcher and aggregator, runs one aggregate
operation and renders it. All orchestration lives in
`core.services.aggregation`.
"""

from __future__ import annotations

import asyncio
from typing import Optional

import structlog
import typer
from rich.console import Console

from adapters.http_client import HttpJsonFetcher
from adapters.json_exporter import person_info_to_json
from cli import doctor
from cli.ui_components import build_films_table, build_person_panel, print_banner
from core.config import AppSettings
from core.domain.models import PersonInfo
from core.errors import FetchError
from core.interfaces.aggregator import AggregateProducer
from core.observability import get_logger, setup_logging
from core.services.aggregation import Variant, build_aggregator

app = typer.Typer(no_args_is_help=True, help="Aggregate a SWAPI person with its homeworld and films.")
app.add_typer(doctor.app, name="doctor")

_console = Console()
logger = get_logger(__name__)


@app.callback()
def _configure() -> None:
    settings = AppSettings()
    setup_logging(level=settings.log_level, format=settings.log_format)


async def _collect(aggregator: AggregateProducer) -> PersonInfo:
    return await aggregator.get_person_info()


@app.command()
def show(
    variant: Variant = typer.Option(
        Variant.AWAIT,
        "--variant",
        help="Concurrency idiom used for the aggregate operation.",
    ),
    person_url: Optional[str] = typer.Option(
        None,
        "--person-url",
        help="Primary person URL (defaults to SWAPI_AGG_PERSON_URL).",
    ),
    as_json: bool = typer.Option(False, "--json", help="Print JSON instead of tables."),
) -> None:
    """Fetch a person, its homeworld and films, and print the aggregate."""

    settings = AppSettings()
    fetcher = HttpJsonFetcher(settings)
    target = person_url or settings.person_url
    aggregator = build_aggregator(variant, fetcher, target)

    with structlog.contextvars.bound_contextvars(variant=variant.value, person_url=target):
        try:
            info = asyncio.run(_collect(aggregator))
        except FetchError as exc:
            logger.error("aggregate_failed", url=exc.url, error=str(exc))
            _console.print(f"[red]Error:[/red] {exc}")
            raise typer.Exit(code=1) from exc

    if as_json:
        typer.echo(person_info_to_json(info))
        return

    print_banner(_console)
    _console.print(build_person_panel(info))
    _console.print(build_films_table(info))


def run() -> None:
    app()


if __name__ == "__main__":
    run()
