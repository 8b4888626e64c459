"""Cursor movement over the document."""

from txtedit.cli.core.input import Key
from txtedit.edit.state import EditorState


def move_cursor(state: EditorState, key: Key) -> None:
    """Move the cursor one step in the direction of an arrow ``key``.

    Horizontal moves wrap across line boundaries. The column is snapped to
    the length of the destination row afterwards.
    """
    cursor = state.cursor
    doc = state.document
    row = doc.row_at(cursor.y)

    if key == Key.LEFT:
        if cursor.x != 0:
            cursor.x -= 1
        elif cursor.y > 0:
            cursor.y -= 1
            cursor.x = doc.rows[cursor.y].size
    elif key == Key.RIGHT:
        if row is not None and cursor.x < row.size:
            cursor.x += 1
        elif row is not None and cursor.x == row.size:
            cursor.y += 1
            cursor.x = 0
    elif key == Key.UP:
        if cursor.y != 0:
            cursor.y -= 1
    elif key == Key.DOWN:
        if cursor.y < doc.num_rows:
            cursor.y += 1

    row = doc.row_at(cursor.y)
    row_len = row.size if row is not None else 0
    if cursor.x > row_len:
        cursor.x = row_len


def page(state: EditorState, key: Key) -> None:
    """Jump a screenful up or down for PAGE_UP / PAGE_DOWN."""
    cursor = state.cursor
    view = state.viewport

    if key == Key.PAGE_UP:
        cursor.y = view.row_offset
        step = Key.UP
    else:
        cursor.y = min(view.row_offset + view.screen_rows - 1, state.document.num_rows)
        step = Key.DOWN

    for _ in range(view.screen_rows):
        move_cursor(state, step)


def home(state: EditorState) -> None:
    state.cursor.x = 0


def end(state: EditorState) -> None:
    row = state.document.row_at(state.cursor.y)
    if row is not None:
        state.cursor.x = row.size
