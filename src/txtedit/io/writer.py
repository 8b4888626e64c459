"""Save text files."""

import os
from pathlib import Path


def write_bytes(path: str | Path, data: bytes) -> int:
    """
    Write ``data`` to ``path``, creating or truncating it.

    Returns the number of bytes written. Errors propagate as OSError.
    """
    fd = os.open(path, os.O_RDWR | os.O_CREAT, 0o644)
    try:
        os.ftruncate(fd, len(data))
        view = memoryview(data)
        written = 0
        while written < len(data):
            written += os.write(fd, view[written:])
    finally:
        os.close(fd)
    return written
