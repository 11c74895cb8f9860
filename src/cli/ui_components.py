"""CLI UI components (Rich).

Why separate components:
- Keeps command logic apart from visual details.
- Lets `show` and `doctor` share the same banner.
"""

from __future__ import annotations

from rich.align import Align
from rich.console import Console
from rich.panel import Panel
from rich.table import Table
from rich.text import Text

from core.domain.models import PersonInfo


def print_banner(console: Console) -> None:
    """Print the welcome banner.

    Skipped by the CLI in `--json` mode so stdout stays machine-readable.
    """

    title = Text("SWAPI Aggregator", style="bold cyan")
    subtitle = Text("Person • Homeworld • Films", style="dim")
    body = Align.center(Text.assemble(title, "\n", subtitle), vertical="middle")
    console.print(Panel(body, border_style="cyan", padding=(1, 4)))


def build_person_panel(info: PersonInfo) -> Panel:
    body = Text()
    body.append("Height: ", style="bold")
    body.append(f"{info.height}\n")
    body.append("Gender: ", style="bold")
    body.append(f"{info.gender.value}\n")
    body.append("Homeworld: ", style="bold")
    body.append(info.homeworld)
    return Panel(body, title=Text(info.name, style="bold yellow"), border_style="yellow")


def build_films_table(info: PersonInfo) -> Table:
    """Films in the order the person document lists them."""

    table = Table(title="Films")
    table.add_column("#", style="dim", no_wrap=True)
    table.add_column("Title", style="cyan")
    table.add_column("Director", style="white")
    table.add_column("Release date", style="magenta", no_wrap=True)
    for position, film in enumerate(info.films, start=1):
        table.add_row(str(position), film.title, film.director, film.release_date)
    return table
