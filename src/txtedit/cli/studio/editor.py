"""Interactive text editor application.

This module provides the main EditorApp that ties together:
- InputReader: decodes key presses from the terminal
- Document: the text being edited
- ScreenRenderer: draws the document, status bar and message bar
- PromptController / SearchController: modal input in the message bar
"""

from __future__ import annotations

import logging
import time
from pathlib import Path
from typing import Callable

from txtedit.cli.core.input import ARROWS, InputReader, Key, KeyEvent
from txtedit.cli.core.terminal import TerminalSize
from txtedit.cli.studio.prompt import PromptController
from txtedit.cli.studio.search import SearchController
from txtedit.core.constants import (
    CLEAR_SCREEN,
    CURSOR_HOME,
    ENTER,
    HELP_MESSAGE,
    QUIT_TIMES,
    SAVE_AS_PROMPT,
)
from txtedit.core.document import Document
from txtedit.edit import motion
from txtedit.edit.state import EditorState, Viewport
from txtedit.edit.viewport import scroll
from txtedit.io.writer import write_bytes
from txtedit.render.screen import ScreenRenderer

logger = logging.getLogger(__name__)

SaveFunc = Callable[[Path, bytes], int]


class EditorApp:
    """Terminal text editor.

    One key is read and fully handled, then one frame is drawn, before the
    next key is read. Prompts and search run as nested loops on the same
    read/render cycle.

    Keyboard Controls:
        Ctrl-S: Save (asks for a file name if there is none)
        Ctrl-Q: Quit (press repeatedly to discard unsaved changes)
        Ctrl-F: Incremental search
        Arrows, Home, End, PageUp, PageDown: Move
        Enter, Backspace, Delete: Edit
    """

    def __init__(
        self,
        document: Document,
        size: TerminalSize,
        reader: InputReader,
        write: Callable[[bytes], None],
        clock: Callable[[], float] = time.time,
        save: SaveFunc = write_bytes,
    ) -> None:
        """Initialize the editor.

        Args:
            document: Document to edit
            size: Full terminal size; two rows are kept for the bars
            reader: Source of key events
            write: Sink for rendered frames
            clock: Time source for status message expiry
            save: Function persisting bytes to a path
        """
        self.running = False
        self.state = EditorState(document, Viewport.for_terminal(size.rows, size.cols))
        self.input = reader
        self.renderer = ScreenRenderer(self.state, clock)
        self.prompt = PromptController(self)
        self.search = SearchController(self)

        self._write = write
        self._clock = clock
        self._save = save

        self.set_status_message(HELP_MESSAGE)

    # -------------------------------------------------------------------------
    # Screen
    # -------------------------------------------------------------------------

    def set_status_message(self, text: str) -> None:
        self.state.status.set(text, self._clock())

    def refresh_screen(self) -> None:
        scroll(self.state)
        self._write(self.renderer.build_frame())

    def read_key(self) -> KeyEvent:
        return self.input.read_key()

    # -------------------------------------------------------------------------
    # Main Loop
    # -------------------------------------------------------------------------

    def run(self) -> None:
        """Run the editor main loop until the user quits."""
        self.running = True
        logger.info("Editing %s", self.state.document.display_name)

        while self.running:
            self.refresh_screen()
            self.process_keypress(self.read_key())

    def process_keypress(self, event: KeyEvent) -> None:
        """Dispatch one key event."""
        state = self.state

        if event.is_ctrl('q'):
            if state.document.is_modified and state.quit_times > 0:
                self.set_status_message(
                    "WARNING!!! File has unsaved changes. "
                    f"Press Ctrl-Q {state.quit_times} more times to quit."
                )
                state.quit_times -= 1
                return
            self.quit()
            return

        if event.is_char and event.byte == ENTER:
            state.document.insert_newline(state.cursor)
        elif event.is_ctrl('s'):
            self.save()
        elif event.is_ctrl('f'):
            self.search.find()
        elif event.key == Key.HOME:
            motion.home(state)
        elif event.key == Key.END:
            motion.end(state)
        elif event.key in (Key.BACKSPACE, Key.DELETE) or event.is_ctrl('h'):
            if event.key == Key.DELETE:
                motion.move_cursor(state, Key.RIGHT)
            state.document.delete_char(state.cursor)
        elif event.key in (Key.PAGE_UP, Key.PAGE_DOWN):
            motion.page(state, event.key)
        elif event.key in ARROWS:
            motion.move_cursor(state, event.key)
        elif event.key == Key.ESCAPE or event.is_ctrl('l'):
            pass
        elif event.is_char:
            state.document.insert_char(state.cursor, event.byte)

        state.quit_times = QUIT_TIMES

    # -------------------------------------------------------------------------
    # Commands
    # -------------------------------------------------------------------------

    def save(self) -> None:
        """Write the document to its path, asking for one if needed."""
        doc = self.state.document

        target = doc.path
        if target is None:
            name = self.prompt.ask(SAVE_AS_PROMPT)
            if name is None:
                self.set_status_message("Save aborted")
                return
            target = Path(name)

        data = doc.to_bytes()
        try:
            written = self._save(target, data)
        except OSError as e:
            logger.warning("Saving %s failed: %s", target, e)
            self.set_status_message(f"Can't save! I/O error: {e.strerror or e}")
            return

        doc.mark_saved(target)
        logger.info("Wrote %d bytes to %s", written, doc.path)
        self.set_status_message(f"{written} bytes written to disk")

    def quit(self) -> None:
        self._write(CLEAR_SCREEN + CURSOR_HOME)
        self.running = False
        logger.info("Quit")
