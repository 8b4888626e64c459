"""Edit module - editor state, viewport math and cursor motion."""

from txtedit.edit.state import EditorState, StatusMessage, Viewport
from txtedit.edit.viewport import cx_to_rx, rx_to_cx, scroll

__all__ = [
    "EditorState",
    "StatusMessage",
    "Viewport",
    "cx_to_rx",
    "rx_to_cx",
    "scroll",
]
