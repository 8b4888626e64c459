"""EditorState - the single mutable aggregate threaded through the editor."""

from __future__ import annotations

from dataclasses import dataclass, field

from txtedit.core.constants import MESSAGE_TIMEOUT, QUIT_TIMES
from txtedit.core.cursor import Cursor
from txtedit.core.document import Document


@dataclass(slots=True)
class Viewport:
    """Visible window over the document.

    ``screen_rows`` already excludes the status and message bars.
    """
    screen_rows: int
    screen_cols: int
    row_offset: int = 0
    col_offset: int = 0

    @classmethod
    def for_terminal(cls, rows: int, cols: int) -> Viewport:
        return cls(screen_rows=max(0, rows - 2), screen_cols=cols)


@dataclass(slots=True)
class StatusMessage:
    text: str = ""
    timestamp: float = 0.0

    def set(self, text: str, now: float) -> None:
        self.text = text
        self.timestamp = now

    def is_visible(self, now: float) -> bool:
        return bool(self.text) and now - self.timestamp < MESSAGE_TIMEOUT


@dataclass
class EditorState:
    document: Document
    viewport: Viewport
    cursor: Cursor = field(default_factory=Cursor)
    status: StatusMessage = field(default_factory=StatusMessage)
    quit_times: int = QUIT_TIMES
