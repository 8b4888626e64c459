"""File I/O for the editor."""

from txtedit.io.reader import read_lines
from txtedit.io.writer import write_bytes

__all__ = ["read_lines", "write_bytes"]
