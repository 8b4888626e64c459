"""Status and message bars shown below the document."""

from __future__ import annotations

import os
from typing import Callable

from txtedit.cli.widgets.base import BaseWidget
from txtedit.core.constants import (
    CLEAR_LINE,
    RESET_ATTRS,
    REVERSE_VIDEO,
    STATUS_FILENAME_WIDTH,
)
from txtedit.edit.state import EditorState, StatusMessage


class StatusBarWidget(BaseWidget):
    """Reverse-video bar with the file name, line count and cursor line."""

    def __init__(self, state: EditorState) -> None:
        super().__init__()
        self._state = state

    def left_text(self) -> bytes:
        doc = self._state.document
        name = os.fsencode(doc.path) if doc.path else b"[No Name]"
        modified = b"(modified)" if doc.is_modified else b""
        return name[:STATUS_FILENAME_WIDTH] + b" - %d lines %s" % (doc.num_rows, modified)

    def right_text(self) -> bytes:
        return b"%d/%d" % (self._state.cursor.y + 1, self._state.document.num_rows)

    def render(self, width: int) -> list[bytes]:
        """Render the status bar, fitting within ``width`` columns.

        The right-hand text is placed only when it ends exactly at the last
        column; otherwise the bar is padded with spaces.
        """
        left = self.left_text()[:width]
        right = self.right_text()

        line = bytearray(left)
        while len(line) < width:
            if width - len(line) == len(right):
                line += right
                break
            line += b" "

        return [REVERSE_VIDEO + bytes(line) + RESET_ATTRS]


class MessageBarWidget(BaseWidget):
    """Transient status message, hidden once it has expired."""

    def __init__(self, message: StatusMessage, clock: Callable[[], float]) -> None:
        super().__init__()
        self._message = message
        self._clock = clock

    def render(self, width: int) -> list[bytes]:
        line = CLEAR_LINE
        if self._message.is_visible(self._clock()):
            line += self._message.text.encode("utf-8", "replace")[:width]
        return [line]
