"""Keyboard input decoding with event abstraction."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from enum import Enum, auto
from typing import Optional, Protocol

from txtedit.core.constants import DEL, ESC

key_logger = logging.getLogger("txtedit.keys")


class Key(Enum):
    """Named key constants."""
    ESCAPE = auto()
    UP = auto()
    DOWN = auto()
    LEFT = auto()
    RIGHT = auto()
    HOME = auto()
    END = auto()
    PAGE_UP = auto()
    PAGE_DOWN = auto()
    DELETE = auto()
    BACKSPACE = auto()


ARROWS = frozenset({Key.UP, Key.DOWN, Key.LEFT, Key.RIGHT})


def ctrl_key(letter: str) -> int:
    """Byte produced by holding Ctrl with ``letter``."""
    return ord(letter) & 0x1F


@dataclass(frozen=True)
class KeyEvent:
    """Represents a keyboard input event."""
    key: Optional[Key] = None  # Named key if recognized
    byte: Optional[int] = None  # Raw byte for plain characters
    raw: bytes = b""  # Bytes consumed to produce this event

    @property
    def is_char(self) -> bool:
        return self.byte is not None and self.key is None

    def is_ctrl(self, letter: str) -> bool:
        return self.is_char and self.byte == ctrl_key(letter)

    @property
    def is_printable(self) -> bool:
        """Non-control ASCII character."""
        return self.is_char and 32 <= self.byte < 127


class ByteSource(Protocol):
    """Anything that yields one byte, or None after a short timeout."""

    def read_byte(self) -> Optional[int]:
        ...


class InputReader:
    """
    Decode a byte stream into key events.

    Each call to :meth:`read_key` consumes exactly the bytes of one key. An
    escape sequence is recognised only if its bytes arrive within the byte
    source's timeout; a lone ESC and an unknown or partial sequence both
    decode to ``Key.ESCAPE``.
    """

    # Sequences terminated by '~' (ESC [ <digit> ~)
    TILDE_SEQUENCES: dict[int, Key] = {
        ord('1'): Key.HOME,
        ord('3'): Key.DELETE,
        ord('4'): Key.END,
        ord('5'): Key.PAGE_UP,
        ord('6'): Key.PAGE_DOWN,
        ord('7'): Key.HOME,
        ord('8'): Key.END,
    }

    # CSI sequences (ESC [ <letter>)
    CSI_SEQUENCES: dict[int, Key] = {
        ord('A'): Key.UP,
        ord('B'): Key.DOWN,
        ord('C'): Key.RIGHT,
        ord('D'): Key.LEFT,
        ord('H'): Key.HOME,
        ord('F'): Key.END,
    }

    # SS3 sequences (ESC O <letter>)
    SS3_SEQUENCES: dict[int, Key] = {
        ord('H'): Key.HOME,
        ord('F'): Key.END,
    }

    def __init__(self, source: ByteSource) -> None:
        self._source = source

    def read_key(self) -> KeyEvent:
        """Block until one key has been read and return it."""
        first = self._source.read_byte()
        while first is None:
            first = self._source.read_byte()

        event = self._decode(first)
        key_logger.debug("key %r", event)
        return event

    def _decode(self, first: int) -> KeyEvent:
        if first == DEL:
            return KeyEvent(key=Key.BACKSPACE, raw=bytes([first]))
        if first != ESC:
            return KeyEvent(byte=first, raw=bytes([first]))

        seq = bytearray([ESC])

        for _ in range(2):
            b = self._source.read_byte()
            if b is None:
                return KeyEvent(key=Key.ESCAPE, raw=bytes(seq))
            seq.append(b)

        intro, final = seq[1], seq[2]

        if intro == ord('['):
            if ord('0') <= final <= ord('9'):
                b = self._source.read_byte()
                if b is None:
                    return KeyEvent(key=Key.ESCAPE, raw=bytes(seq))
                seq.append(b)
                if b == ord('~') and final in self.TILDE_SEQUENCES:
                    return KeyEvent(key=self.TILDE_SEQUENCES[final], raw=bytes(seq))
            elif final in self.CSI_SEQUENCES:
                return KeyEvent(key=self.CSI_SEQUENCES[final], raw=bytes(seq))
        elif intro == ord('O'):
            if final in self.SS3_SEQUENCES:
                return KeyEvent(key=self.SS3_SEQUENCES[final], raw=bytes(seq))

        # Unknown sequence
        return KeyEvent(key=Key.ESCAPE, raw=bytes(seq))
