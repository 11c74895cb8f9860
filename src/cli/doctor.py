"""Doctor command for environment diagnostics."""

from __future__ import annotations

import asyncio

import typer
from rich.console import Console
from rich.table import Table

from adapters.http_client import build_async_client
from core.config import AppSettings

app = typer.Typer(no_args_is_help=True, help="Environment diagnostics and configuration checks.")

_console = Console()


async def _check_http(url: str, settings: AppSettings) -> tuple[bool, str]:
    try:
        async with build_async_client(settings) as client:
            response = await client.get(url)
    except Exception as exc:
        return False, str(exc) or exc.__class__.__name__
    return not response.is_error, f"HTTP {response.status_code}"


@app.command()
def run() -> None:
    """Show the effective configuration and check that the API answers."""

    settings = AppSettings()

    table = Table(title="SWAPI Aggregator Doctor")
    table.add_column("Check", style="bright_green", no_wrap=True)
    table.add_column("Status", style="white")
    table.add_column("Details", style="dim")

    table.add_row("API base URL", "OK", settings.api_base_url)
    table.add_row("Person URL", "OK", settings.person_url)
    table.add_row("HTTP timeout", "OK", f"{settings.http_timeout_seconds:g}s")
    table.add_row("Logging", "OK", f"{settings.log_level} / {settings.log_format}")

    ok_http, detail_http = asyncio.run(_check_http(settings.api_base_url, settings))
    table.add_row("HTTP connectivity", "OK" if ok_http else "FAIL", detail_http)

    _console.print(table)

    if not ok_http:
        raise typer.Exit(code=1)
