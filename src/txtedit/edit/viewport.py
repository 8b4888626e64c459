"""Viewport math: raw/rendered column mapping and scrolling."""

from txtedit.core.constants import TAB, TAB_STOP
from txtedit.core.row import Row
from txtedit.edit.state import EditorState


def cx_to_rx(row: Row, cx: int) -> int:
    """Map raw column ``cx`` to its column in the tab-expanded rendering."""
    rx = 0
    for ch in row.chars[:cx]:
        if ch == TAB:
            rx += TAB_STOP - (rx % TAB_STOP)
        else:
            rx += 1
    return rx


def rx_to_cx(row: Row, rx: int) -> int:
    """Map rendered column ``rx`` back to the raw column that covers it.

    Returns the row length when ``rx`` lies past the end of the rendering.
    """
    cur_rx = 0
    for cx, ch in enumerate(row.chars):
        if ch == TAB:
            cur_rx += TAB_STOP - (cur_rx % TAB_STOP)
        else:
            cur_rx += 1
        if cur_rx > rx:
            return cx
    return row.size


def scroll(state: EditorState) -> None:
    """Recompute ``cursor.rx`` and move the viewport so the cursor is visible."""
    cursor = state.cursor
    view = state.viewport

    row = state.document.row_at(cursor.y)
    cursor.rx = cx_to_rx(row, cursor.x) if row is not None else 0

    if cursor.y < view.row_offset:
        view.row_offset = cursor.y
    if cursor.y >= view.row_offset + view.screen_rows:
        view.row_offset = cursor.y - view.screen_rows + 1
    if cursor.rx < view.col_offset:
        view.col_offset = cursor.rx
    if cursor.rx >= view.col_offset + view.screen_cols:
        view.col_offset = cursor.rx - view.screen_cols + 1
