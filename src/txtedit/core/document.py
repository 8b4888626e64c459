"""Document - the ordered rows of a text file plus its dirty state."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Iterable, Iterator

from txtedit.core.cursor import Cursor
from txtedit.core.row import Row

logger = logging.getLogger(__name__)


class Document:
    """
    An editable text buffer.

    Rows are kept in a plain list in line order. ``dirty`` counts mutations
    since the last successful load or save; it is reset by :meth:`load` and
    :meth:`mark_saved` only.

    Example:
        doc = Document.from_lines([b"hello world", b"foo"])
        cursor = Cursor(x=5, y=0)
        doc.insert_char(cursor, ord("X"))
        doc.rows[0].chars  # bytearray(b'helloX world')
    """

    def __init__(self, path: Path | None = None) -> None:
        self.rows: list[Row] = []
        self.dirty = 0
        self.path = path

    @classmethod
    def from_lines(cls, lines: Iterable[bytes], path: Path | None = None) -> Document:
        doc = cls(path)
        doc.load(lines)
        return doc

    # -------------------------------------------------------------------------
    # Queries
    # -------------------------------------------------------------------------

    @property
    def num_rows(self) -> int:
        return len(self.rows)

    @property
    def is_modified(self) -> bool:
        return self.dirty > 0

    @property
    def display_name(self) -> str:
        return self.path.name if self.path else "[No Name]"

    def row_at(self, y: int) -> Row | None:
        """Return row ``y``, or None for the virtual row and beyond."""
        if 0 <= y < len(self.rows):
            return self.rows[y]
        return None

    def __iter__(self) -> Iterator[Row]:
        return iter(self.rows)

    def __len__(self) -> int:
        return len(self.rows)

    # -------------------------------------------------------------------------
    # Row operations
    # -------------------------------------------------------------------------

    def insert_row(self, at: int, text: bytes | bytearray = b"") -> None:
        if at < 0 or at > len(self.rows):
            return
        self.rows.insert(at, Row(bytearray(text)))
        self.dirty += 1

    def delete_row(self, at: int) -> None:
        if at < 0 or at >= len(self.rows):
            return
        del self.rows[at]
        self.dirty += 1

    # -------------------------------------------------------------------------
    # Editing at the cursor
    # -------------------------------------------------------------------------

    def insert_char(self, cursor: Cursor, ch: int) -> None:
        """Insert byte ``ch`` at the cursor and advance it one column."""
        if cursor.y == len(self.rows):
            self.insert_row(len(self.rows))
        self.rows[cursor.y].insert(cursor.x, ch)
        self.dirty += 1
        cursor.x += 1

    def insert_newline(self, cursor: Cursor) -> None:
        """Split the current row at the cursor; the cursor moves to the new line."""
        if cursor.x == 0:
            self.insert_row(cursor.y)
        else:
            row = self.rows[cursor.y]
            self.insert_row(cursor.y + 1, row.chars[cursor.x:])
            row.truncate(cursor.x)
        cursor.y += 1
        cursor.x = 0

    def delete_char(self, cursor: Cursor) -> None:
        """Delete the byte left of the cursor, joining lines at column 0."""
        if cursor.y == len(self.rows):
            return
        if cursor.x == 0 and cursor.y == 0:
            return

        row = self.rows[cursor.y]
        if cursor.x > 0:
            row.delete(cursor.x - 1)
            self.dirty += 1
            cursor.x -= 1
        else:
            prev = self.rows[cursor.y - 1]
            cursor.x = prev.size
            prev.append(row.chars)
            self.delete_row(cursor.y)
            cursor.y -= 1

    # -------------------------------------------------------------------------
    # Serialization
    # -------------------------------------------------------------------------

    def to_bytes(self) -> bytes:
        """Join every row, each terminated by a single line feed."""
        return b"".join(bytes(row.chars) + b"\n" for row in self.rows)

    def load(self, lines: Iterable[bytes]) -> None:
        """Replace the contents with ``lines`` (already stripped of line endings)."""
        self.rows = [Row(bytearray(line)) for line in lines]
        self.dirty = 0
        logger.debug("Loaded %d rows into %s", len(self.rows), self.display_name)

    def mark_saved(self, path: Path) -> None:
        """Record a successful write of the whole buffer to ``path``."""
        self.path = path
        self.dirty = 0
