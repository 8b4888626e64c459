"""Core data structures for the text buffer."""

from txtedit.core.row import Row, expand_tabs
from txtedit.core.cursor import Cursor
from txtedit.core.document import Document

__all__ = ["Row", "expand_tabs", "Cursor", "Document"]
