"""Incremental search driven by the prompt."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Optional

from txtedit.cli.core.input import Key, KeyEvent
from txtedit.core.constants import ENTER, SEARCH_PROMPT
from txtedit.edit.viewport import rx_to_cx

if TYPE_CHECKING:
    from txtedit.cli.studio.editor import EditorApp

logger = logging.getLogger(__name__)


class SearchController:
    """
    Find text as it is typed.

    Every new query character restarts the scan from the top of the file.
    Arrow keys step to the next (Right/Down) or previous (Left/Up) match,
    wrapping around the ends of the document. Escape puts the cursor and
    viewport back where they were before the search started.
    """

    def __init__(self, app: EditorApp) -> None:
        self._app = app
        self.last_match: Optional[int] = None
        self.direction = 1

    def reset(self) -> None:
        self.last_match = None
        self.direction = 1

    def find(self) -> None:
        state = self._app.state
        cursor, view = state.cursor, state.viewport
        saved = (cursor.x, cursor.y, view.col_offset, view.row_offset)

        self.reset()
        query = self._app.prompt.ask(SEARCH_PROMPT, self.on_key)

        if query is None:
            cursor.x, cursor.y, view.col_offset, view.row_offset = saved

    def on_key(self, query: str, event: KeyEvent) -> None:
        """Prompt callback: update direction and jump to the next match."""
        if event.key == Key.ESCAPE or (event.is_char and event.byte == ENTER):
            self.reset()
            return

        if event.key in (Key.RIGHT, Key.DOWN):
            self.direction = 1
        elif event.key in (Key.LEFT, Key.UP):
            self.direction = -1
        else:
            self.reset()

        if query:
            self.step(query.encode("utf-8"))

    def step(self, needle: bytes) -> bool:
        """Move to the next row containing ``needle``. Returns True on a match."""
        state = self._app.state
        doc = state.document

        if self.last_match is None:
            self.direction = 1
        current = self.last_match if self.last_match is not None else -1

        for _ in range(doc.num_rows):
            current += self.direction
            if current == -1:
                current = doc.num_rows - 1
            elif current == doc.num_rows:
                current = 0

            row = doc.rows[current]
            pos = row.render.find(needle)
            if pos != -1:
                self.last_match = current
                state.cursor.y = current
                state.cursor.x = rx_to_cx(row, pos)
                # Past the end so the next scroll puts the match at the top
                state.viewport.row_offset = doc.num_rows
                logger.debug("Match for %r at row %d", needle, current)
                return True
        return False
