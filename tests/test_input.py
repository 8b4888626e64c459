"""Tests for key decoding."""

import pytest

from conftest import TIMEOUT, ScriptedByteSource
from txtedit.cli.core.input import InputReader, Key, KeyEvent, ctrl_key


def decode(*chunks) -> KeyEvent:
    return InputReader(ScriptedByteSource(*chunks)).read_key()


class TestPlainBytes:

    def test_printable_character(self) -> None:
        event = decode(b"a")
        assert event.is_char
        assert event.byte == ord("a")
        assert event.key is None
        assert event.is_printable

    def test_control_character(self) -> None:
        event = decode(b"\x11")
        assert event.is_ctrl("q")
        assert not event.is_printable
        assert ctrl_key("q") == 0x11

    def test_enter_is_a_character(self) -> None:
        event = decode(b"\r")
        assert event.is_char
        assert event.byte == 13

    def test_del_byte_is_backspace(self) -> None:
        event = decode(b"\x7f")
        assert event.key == Key.BACKSPACE
        assert not event.is_char

    def test_high_byte_is_character(self) -> None:
        event = decode(b"\xe9")
        assert event.byte == 0xE9
        assert not event.is_printable

    def test_waits_for_first_byte(self) -> None:
        source = ScriptedByteSource(TIMEOUT, TIMEOUT, b"x")
        event = InputReader(source).read_key()
        assert event.byte == ord("x")
        assert source.exhausted

    def test_one_key_per_call(self) -> None:
        reader = InputReader(ScriptedByteSource(b"ab"))
        assert reader.read_key().byte == ord("a")
        assert reader.read_key().byte == ord("b")


class TestEscapeSequences:

    @pytest.mark.parametrize("seq,key", [
        (b"\x1b[A", Key.UP),
        (b"\x1b[B", Key.DOWN),
        (b"\x1b[C", Key.RIGHT),
        (b"\x1b[D", Key.LEFT),
        (b"\x1b[H", Key.HOME),
        (b"\x1b[F", Key.END),
        (b"\x1bOH", Key.HOME),
        (b"\x1bOF", Key.END),
        (b"\x1b[1~", Key.HOME),
        (b"\x1b[7~", Key.HOME),
        (b"\x1b[3~", Key.DELETE),
        (b"\x1b[4~", Key.END),
        (b"\x1b[8~", Key.END),
        (b"\x1b[5~", Key.PAGE_UP),
        (b"\x1b[6~", Key.PAGE_DOWN),
    ])
    def test_known_sequence(self, seq: bytes, key: Key) -> None:
        event = decode(seq)
        assert event.key == key
        assert event.raw == seq

    def test_lone_escape(self) -> None:
        assert decode(b"\x1b", TIMEOUT).key == Key.ESCAPE

    def test_escape_then_timeout_after_intro(self) -> None:
        assert decode(b"\x1b[", TIMEOUT).key == Key.ESCAPE

    def test_digit_without_terminator(self) -> None:
        assert decode(b"\x1b[5", TIMEOUT).key == Key.ESCAPE

    @pytest.mark.parametrize("seq", [
        b"\x1b[2~",   # Insert is not bound
        b"\x1b[9~",
        b"\x1b[5x",   # wrong terminator
        b"\x1b[Z",
        b"\x1bOA",
        b"\x1bxy",
    ])
    def test_unrecognised_sequence_is_escape(self, seq: bytes) -> None:
        event = decode(seq)
        assert event.key == Key.ESCAPE
        assert event.raw == seq

    def test_sequence_consumes_only_its_bytes(self) -> None:
        reader = InputReader(ScriptedByteSource(b"\x1b[Aq"))
        assert reader.read_key().key == Key.UP
        assert reader.read_key().byte == ord("q")
