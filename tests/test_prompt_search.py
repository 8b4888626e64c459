"""Tests for the modal prompt and incremental search."""

from conftest import TIMEOUT
from txtedit.cli.core.input import Key
from txtedit.edit.viewport import scroll


class TestPrompt:

    def test_returns_text_on_enter(self, make_editor) -> None:
        editor = make_editor([b"a"], b"abc\r")
        assert editor.prompt.ask("Name: {}") == "abc"
        assert editor.state.status.text == ""

    def test_escape_cancels(self, make_editor) -> None:
        editor = make_editor([b"a"], b"abc\x1b", TIMEOUT)
        assert editor.prompt.ask("Name: {}") is None
        assert editor.state.status.text == ""

    def test_prompt_shown_in_message_bar(self, make_editor) -> None:
        editor = make_editor([b"a"], b"ab\r")
        editor.prompt.ask("Name: {} (ESC to cancel)")
        assert b"Name: ab (ESC to cancel)" in editor.frames[-1]

    def test_backspace_variants_remove_last_char(self, make_editor) -> None:
        editor = make_editor([b"a"], b"abcd\x7f\x08\x1b[3~e\r")
        assert editor.prompt.ask("{}") == "ae"

    def test_backspace_on_empty_buffer(self, make_editor) -> None:
        editor = make_editor([b"a"], b"\x7fx\r")
        assert editor.prompt.ask("{}") == "x"

    def test_enter_ignored_while_empty(self, make_editor) -> None:
        editor = make_editor([b"a"], b"\rx\r")
        assert editor.prompt.ask("{}") == "x"
        assert editor.source.exhausted

    def test_control_and_high_bytes_ignored(self, make_editor) -> None:
        editor = make_editor([b"a"], b"a\x01\x1b[A\xe9b\r")
        assert editor.prompt.ask("{}") == "ab"

    def test_callback_sees_every_key(self, make_editor) -> None:
        editor = make_editor([b"a"], b"ab\x7f\r")
        calls = []
        editor.prompt.ask("{}", lambda text, event: calls.append((text, event.key, event.byte)))
        assert calls == [
            ("a", None, ord("a")),
            ("ab", None, ord("b")),
            ("a", Key.BACKSPACE, None),
            ("a", None, 13),
        ]

    def test_callback_called_on_cancel(self, make_editor) -> None:
        editor = make_editor([b"a"], b"q\x1b", TIMEOUT)
        calls = []
        editor.prompt.ask("{}", lambda text, event: calls.append((text, event.key)))
        assert calls[-1] == ("q", Key.ESCAPE)


LINES = [b"alpha", b"beta\tgamma", b"delta gamma"]


class TestSearch:

    def test_find_moves_to_first_match(self, make_editor) -> None:
        editor = make_editor(LINES, b"\x06gamma\r")
        editor.process_keypress(editor.read_key())
        cursor = editor.state.cursor
        # raw column of 'g' after the tab
        assert (cursor.x, cursor.y) == (5, 1)

    def test_each_new_character_restarts_from_top(self, make_editor) -> None:
        editor = make_editor(LINES, b"\x06ga\r")
        editor.process_keypress(editor.read_key())
        assert editor.state.cursor.y == 1

    def test_arrow_moves_to_next_match(self, make_editor) -> None:
        editor = make_editor(LINES, b"\x06gamma\x1b[B\r")
        editor.process_keypress(editor.read_key())
        assert (editor.state.cursor.x, editor.state.cursor.y) == (6, 2)

    def test_search_wraps_forward(self, make_editor) -> None:
        editor = make_editor(LINES, b"\x06gamma\x1b[B\x1b[C\r")
        editor.process_keypress(editor.read_key())
        assert editor.state.cursor.y == 1

    def test_search_backward_wraps(self, make_editor) -> None:
        editor = make_editor(LINES, b"\x06gamma\x1b[A\r")
        editor.process_keypress(editor.read_key())
        assert editor.state.cursor.y == 2

    def test_match_scrolls_to_top(self, make_editor) -> None:
        lines = [b"filler"] * 30 + [b"needle"] + [b"filler"] * 5
        editor = make_editor(lines, b"\x06needle\r", rows=12)
        editor.process_keypress(editor.read_key())
        scroll(editor.state)
        assert editor.state.cursor.y == 30
        assert editor.state.viewport.row_offset == 30

    def test_escape_restores_cursor_and_viewport(self, make_editor) -> None:
        lines = [b"filler"] * 30
        lines[2] = b"needle"
        editor = make_editor(lines, b"\x06needle\x1b", TIMEOUT, rows=12)
        editor.state.cursor.x, editor.state.cursor.y = 3, 20
        editor.refresh_screen()
        before = (editor.state.viewport.row_offset, editor.state.viewport.col_offset)

        editor.process_keypress(editor.read_key())

        assert (editor.state.cursor.x, editor.state.cursor.y) == (3, 20)
        assert (editor.state.viewport.row_offset, editor.state.viewport.col_offset) == before

    def test_absent_query_leaves_state_unchanged(self, make_editor) -> None:
        editor = make_editor(LINES, b"\x06zzz\x1b", TIMEOUT)
        editor.state.cursor.x, editor.state.cursor.y = 2, 1
        editor.refresh_screen()
        before = (editor.state.viewport.row_offset, editor.state.viewport.col_offset)

        editor.process_keypress(editor.read_key())

        assert (editor.state.cursor.x, editor.state.cursor.y) == (2, 1)
        assert (editor.state.viewport.row_offset, editor.state.viewport.col_offset) == before
        assert editor.search.last_match is None

    def test_search_in_empty_document(self, make_editor) -> None:
        editor = make_editor([], b"\x06x\r")
        editor.process_keypress(editor.read_key())
        assert (editor.state.cursor.x, editor.state.cursor.y) == (0, 0)
