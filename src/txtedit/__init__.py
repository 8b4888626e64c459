"""
txtedit: a small terminal text editor

Holds a document as rows of bytes, decodes raw keyboard input into editing
commands, keeps a scrollable viewport over the text and redraws the screen
with plain VT100 escape sequences.

Quick Start:
    >>> from txtedit import Document, Cursor
    >>> doc = Document.from_lines([b"hello world"])
    >>> doc.insert_char(Cursor(x=5), ord("!"))
    >>> doc.to_bytes()
    b'hello! world\\n'

Run the editor:
    $ txtedit notes.txt
"""

import logging

__version__ = "0.1.0"

logging.getLogger(__name__).addHandler(logging.NullHandler())

# Core types
from txtedit.core.row import Row
from txtedit.core.cursor import Cursor
from txtedit.core.document import Document

# File I/O
from txtedit.io.reader import read_lines
from txtedit.io.writer import write_bytes

__all__ = [
    "__version__",
    "Row",
    "Cursor",
    "Document",
    "read_lines",
    "write_bytes",
]
