"""Render the editor state to a terminal frame."""

from __future__ import annotations

import time
from typing import Callable

from txtedit import __version__
from txtedit.cli.widgets.status_bar import MessageBarWidget, StatusBarWidget
from txtedit.core.constants import (
    CLEAR_LINE,
    CRLF,
    CURSOR_HOME,
    FILLER,
    HIDE_CURSOR,
    SHOW_CURSOR,
    WELCOME,
)
from txtedit.edit.state import EditorState


class ScreenRenderer:
    """
    Compose one full frame for the current editor state.

    The whole frame is built into a single buffer so that it can be written
    to the terminal in one call, which avoids visible tearing.
    """

    def __init__(self, state: EditorState, clock: Callable[[], float] = time.time) -> None:
        self.state = state
        self.status_bar = StatusBarWidget(state)
        self.message_bar = MessageBarWidget(state.status, clock)

    def welcome_line(self) -> bytes:
        cols = self.state.viewport.screen_cols
        welcome = WELCOME.format(version=__version__).encode()[:cols]
        padding = (cols - len(welcome)) // 2

        line = bytearray()
        if padding:
            line += FILLER
            padding -= 1
        line += b" " * padding
        line += welcome
        return bytes(line)

    def draw_rows(self, out: bytearray) -> None:
        doc = self.state.document
        view = self.state.viewport

        for y in range(view.screen_rows):
            filerow = y + view.row_offset
            if filerow >= doc.num_rows:
                if doc.num_rows == 0 and y == view.screen_rows // 3:
                    out += self.welcome_line()
                else:
                    out += FILLER
            else:
                render = doc.rows[filerow].render
                out += render[view.col_offset:view.col_offset + view.screen_cols]

            out += CLEAR_LINE
            out += CRLF

    def build_frame(self) -> bytes:
        """Return the bytes for one complete screen refresh."""
        view = self.state.viewport
        cursor = self.state.cursor

        out = bytearray()
        out += HIDE_CURSOR
        out += CURSOR_HOME

        self.draw_rows(out)
        for line in self.status_bar.render(view.screen_cols):
            out += line + CRLF
        for line in self.message_bar.render(view.screen_cols):
            out += line

        out += b"\x1b[%d;%dH" % (
            cursor.y - view.row_offset + 1,
            cursor.rx - view.col_offset + 1,
        )
        out += SHOW_CURSOR
        return bytes(out)
