"""Typer CLI application."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Annotated, Optional

import typer
from rich.console import Console
from rich.markup import escape

from txtedit.cli.core.input import InputReader
from txtedit.cli.core.log import setup_logging
from txtedit.cli.core.terminal import Terminal, TerminalByteSource, TerminalError
from txtedit.core.document import Document
from txtedit.io.reader import read_lines

logger = logging.getLogger(__name__)


def create_app() -> typer.Typer:
    """Create and configure the CLI application."""
    app = typer.Typer(
        name="txtedit",
        help="A small terminal text editor.",
        add_completion=False,
        rich_markup_mode="rich",
    )
    console = Console(stderr=True, soft_wrap=True)

    @app.command()
    def edit(
        path: Annotated[Optional[Path], typer.Argument(help="File to open")] = None,
    ) -> None:
        """Edit PATH, or start with an empty unnamed buffer."""
        from txtedit.cli.studio.editor import EditorApp

        setup_logging()
        terminal: Optional[Terminal] = None

        try:
            document = Document(path)
            if path is not None:
                document.load(read_lines(path))
                logger.info("Opened %s (%d lines)", path, document.num_rows)

            terminal = Terminal()
            source = TerminalByteSource(terminal.in_fd)
            with terminal.raw_mode():
                size = terminal.size(source)
                editor = EditorApp(document, size, InputReader(source), terminal.write)
                editor.run()
        except (TerminalError, OSError) as e:
            logger.error("Fatal: %s", e, exc_info=True)
            if terminal is not None:
                try:
                    terminal.clear()
                except TerminalError:
                    logger.debug("Could not clear the screen")
            console.print(f"[red]txtedit: {escape(str(e))}[/]")
            raise typer.Exit(1)

    return app
