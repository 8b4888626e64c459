"""Cursor position within a document."""

from dataclasses import dataclass


@dataclass(slots=True)
class Cursor:
    """
    Cursor location.

    ``y`` ranges over ``[0, num_rows]``; ``y == num_rows`` is the virtual
    row after the last line. ``x`` is a raw column into row ``y``. ``rx`` is
    the same position in tab-expanded space and is maintained by
    :func:`txtedit.edit.viewport.scroll`.
    """
    x: int = 0
    y: int = 0
    rx: int = 0
