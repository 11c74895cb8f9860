"""Development entry point for the SWAPI aggregator (no install needed).

Runs the `swapi-aggregator` CLI straight from a checkout:
- `python -m main show --variant stream --json` prints Luke Skywalker's
  aggregate (person, homeworld name and films) as JSON.
- `python -m main doctor run` checks configuration and API reachability.

Modules live under `src/` (`core`, `adapters`, `cli`), so the directory is
put on `sys.path` before importing the CLI.
"""

from __future__ import annotations

import sys
from pathlib import Path


def main() -> None:
    project_root = Path(__file__).resolve().parent
    src = project_root / "src"
    if str(src) not in sys.path:
        sys.path.insert(0, str(src))

    from cli.main import run  # noqa: PLC0415

    run()


if __name__ == "__main__":
    main()
