"""Typer CLI application."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Annotated, Optional

import typer
from rich.console import Console

import termpix
from termpix.core.constants import OUTPUT_FILENAME

LOG_FORMAT = "%(asctime)s - %(levelname)s - %(name)s - %(message)s"
LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR")


def setup_logging(log_file: Optional[Path], level: str = "INFO") -> None:
    """Route termpix logs to a file.

    The editor owns the terminal, so without a file nothing is emitted.
    """
    logger = logging.getLogger("termpix")
    if log_file is None:
        return
    handler = logging.FileHandler(log_file, encoding="utf-8")
    handler.setFormatter(logging.Formatter(LOG_FORMAT))
    logger.addHandler(handler)
    logger.setLevel(level)


def _version_callback(value: bool) -> None:
    if value:
        print(f"termpix {termpix.__version__}")
        raise typer.Exit()


def create_app() -> typer.Typer:
    """Create and configure the CLI application."""
    app = typer.Typer(
        name="termpix",
        help="Draw 64x64 pixel art in the terminal and export it as a bitmap.",
        add_completion=False,
        rich_markup_mode="rich",
    )
    console = Console()

    @app.command()
    def edit(
        log_file: Annotated[Optional[Path], typer.Option("--log-file", "-l", help="Write logs to this file")] = None,
        log_level: Annotated[str, typer.Option("--log-level", help="DEBUG, INFO, WARNING or ERROR")] = "INFO",
        version: Annotated[
            bool,
            typer.Option("--version", callback=_version_callback, is_eager=True, help="Show version and exit"),
        ] = False,
    ) -> None:
        """Launch the pixel editor. Ctrl+S writes output.bmp, q quits."""
        level = log_level.upper()
        if level not in LOG_LEVELS:
            console.print(f"[red]Unknown log level: {log_level}[/]")
            raise typer.Exit(2)
        setup_logging(log_file, level)

        from termpix.cli.studio.editor import run_editor
        editor = run_editor(Path(OUTPUT_FILENAME))

        if editor.last_export is not None:
            console.print(f"[green]Last export:[/] {editor.last_export.resolve()}")
        else:
            console.print("[dim]Nothing exported.[/]")

    return app
