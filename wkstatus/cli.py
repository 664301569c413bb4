"""
wk-status command line entry point.

Prints WaniKani review status in the xbar/SwiftBar line format.

Usage:
    wk-status                          # one pass with settings from VAR_* env
    wk-status --now 2024-01-01T12:00:00
    python -m wkstatus --log-level DEBUG
"""

from __future__ import annotations

import sys
from datetime import UTC, datetime
from typing import Annotated

import typer
from loguru import logger

from .config import LogLevel, get_settings
from .status import run_once

app = typer.Typer(
    name="wk-status",
    help="WaniKani reviews, lessons and SRS stages for the menu bar",
    add_completion=False,
)


def configure_logging(level: str) -> None:
    """Send logs to stderr; stdout belongs to the menu-bar host."""
    logger.remove()
    logger.add(
        sys.stderr,
        level=level,
        format="<level>{message}</level>",
    )


@app.command()
def status(
    now: Annotated[
        datetime | None,
        typer.Option("--now", help="Reference time for due reviews (naive values are UTC)"),
    ] = None,
    log_level: Annotated[
        LogLevel | None,
        typer.Option("--log-level", case_sensitive=False, help="Override VAR_LOG_LEVEL"),
    ] = None,
) -> None:
    """Fetch WaniKani status once and print menu lines."""
    settings = get_settings()
    configure_logging((log_level or settings.log_level).value)

    if now is None:
        now = datetime.now(UTC)
    elif now.tzinfo is None:
        now = now.replace(tzinfo=UTC)

    for line in run_once(settings, now):
        typer.echo(str(line))


def main() -> None:
    """CLI entry point."""
    app()


if __name__ == "__main__":
    main()
