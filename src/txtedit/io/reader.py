"""Load text files as lines."""

from pathlib import Path


def read_lines(path: str | Path) -> list[bytes]:
    """
    Read a file from disk as a list of lines.

    Each line is stripped of its trailing ``\\n`` and ``\\r`` bytes. A final
    line ending does not produce an extra empty line.
    """
    path = Path(path)

    with open(path, 'rb') as f:
        return [line.rstrip(b'\r\n') for line in f]
