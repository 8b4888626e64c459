"""Low-level terminal operations for a raw-mode editor session."""

from __future__ import annotations

import errno
import os
import re
import select
import sys
import termios
from contextlib import contextmanager
from dataclasses import dataclass
from typing import Iterator, Optional

from txtedit.core.constants import (
    CLEAR_SCREEN,
    CURSOR_HOME,
    ESCAPE_TIMEOUT,
)

# Reply to a cursor position report request: ESC [ rows ; cols R
_CURSOR_REPORT = re.compile(rb'\x1b\[(\d+);(\d+)R')
_REPORT_LIMIT = 32


class TerminalError(RuntimeError):
    """Unrecoverable failure talking to the terminal."""


@dataclass(frozen=True)
class TerminalSize:
    """Terminal dimensions."""
    rows: int
    cols: int


class TerminalByteSource:
    """Read single bytes from a file descriptor with a short timeout."""

    def __init__(self, fd: Optional[int] = None, timeout: float = ESCAPE_TIMEOUT) -> None:
        self._fd = sys.stdin.fileno() if fd is None else fd
        self._timeout = timeout

    def read_byte(self) -> Optional[int]:
        """Return the next byte, or None if none arrived within the timeout."""
        try:
            ready, _, _ = select.select([self._fd], [], [], self._timeout)
            if not ready:
                return None
            data = os.read(self._fd, 1)
        except InterruptedError:
            return None
        except OSError as e:
            if e.errno == errno.EAGAIN:
                return None
            raise TerminalError(f"read: {e.strerror}") from e
        if not data:
            raise TerminalError("read: EOF")
        return data[0]


def parse_cursor_report(data: bytes) -> TerminalSize:
    """Parse an ``ESC [ rows ; cols R`` reply into a size."""
    match = _CURSOR_REPORT.search(data)
    if match is None:
        raise TerminalError(f"Unexpected cursor position reply: {data!r}")
    return TerminalSize(int(match.group(1)), int(match.group(2)))


class Terminal:
    """Terminal I/O for the editor: raw mode, geometry and frame output."""

    def __init__(self, in_fd: Optional[int] = None, out_fd: Optional[int] = None) -> None:
        self.in_fd = sys.stdin.fileno() if in_fd is None else in_fd
        self.out_fd = sys.stdout.fileno() if out_fd is None else out_fd

    def write(self, data: bytes) -> None:
        """Write ``data`` in full to the terminal."""
        view = memoryview(data)
        while view:
            try:
                written = os.write(self.out_fd, view)
            except OSError as e:
                raise TerminalError(f"write: {e.strerror}") from e
            view = view[written:]

    def clear(self) -> None:
        """Clear screen and move cursor to home."""
        self.write(CLEAR_SCREEN + CURSOR_HOME)

    def size(self, source: Optional[TerminalByteSource] = None) -> TerminalSize:
        """Get current terminal dimensions.

        Falls back to pushing the cursor to the bottom-right corner and asking
        the terminal where it ended up.
        """
        try:
            size = os.get_terminal_size(self.out_fd)
            if size.columns > 0:
                return TerminalSize(size.lines, size.columns)
        except OSError:
            pass
        return self._size_from_cursor(source or TerminalByteSource(self.in_fd))

    def _size_from_cursor(self, source: TerminalByteSource) -> TerminalSize:
        self.write(b'\x1b[999C\x1b[999B')
        self.write(b'\x1b[6n')

        reply = bytearray()
        while len(reply) < _REPORT_LIMIT:
            b = source.read_byte()
            if b is None:
                break
            reply.append(b)
            if b == ord('R'):
                break
        return parse_cursor_report(bytes(reply))

    @contextmanager
    def raw_mode(self) -> Iterator[None]:
        """Context manager for raw, non-echoing input with a 100ms read timeout."""
        try:
            original = termios.tcgetattr(self.in_fd)
        except termios.error as e:
            raise TerminalError(f"tcgetattr: {e}") from e

        raw = list(original)
        raw[0] &= ~(termios.BRKINT | termios.ICRNL | termios.INPCK | termios.ISTRIP | termios.IXON)
        raw[1] &= ~termios.OPOST
        raw[2] |= termios.CS8
        raw[3] &= ~(termios.ECHO | termios.ICANON | termios.IEXTEN | termios.ISIG)
        raw[6] = list(original[6])
        raw[6][termios.VMIN] = 0
        raw[6][termios.VTIME] = 1

        try:
            termios.tcsetattr(self.in_fd, termios.TCSAFLUSH, raw)
        except termios.error as e:
            raise TerminalError(f"tcsetattr: {e}") from e
        try:
            yield
        finally:
            try:
                termios.tcsetattr(self.in_fd, termios.TCSAFLUSH, original)
            except termios.error as e:
                raise TerminalError(f"tcsetattr: {e}") from e
