"""Single-line modal prompt shown in the message bar."""

from __future__ import annotations

from typing import TYPE_CHECKING, Callable, Optional

from txtedit.cli.core.input import Key, KeyEvent
from txtedit.core.constants import ENTER

if TYPE_CHECKING:
    from txtedit.cli.studio.editor import EditorApp

PromptCallback = Callable[[str, KeyEvent], None]


class PromptController:
    """
    Collect a line of input while the rest of the editor waits.

    The prompt takes over the read/render cycle of the editor until the
    user presses Enter on a non-empty line or cancels with Escape. An
    optional callback sees the buffer and the key after every keystroke,
    including the final one.
    """

    def __init__(self, app: EditorApp) -> None:
        self._app = app

    def ask(self, template: str, callback: Optional[PromptCallback] = None) -> Optional[str]:
        """Run the prompt; ``template`` is formatted with the current input.

        Returns the entered text, or None if the prompt was cancelled.
        """
        chars: list[str] = []

        while True:
            self._app.set_status_message(template.format("".join(chars)))
            self._app.refresh_screen()

            event = self._app.read_key()

            if event.key in (Key.DELETE, Key.BACKSPACE) or event.is_ctrl('h'):
                if chars:
                    chars.pop()
            elif event.key == Key.ESCAPE:
                self._app.set_status_message("")
                if callback:
                    callback("".join(chars), event)
                return None
            elif event.is_char and event.byte == ENTER:
                if chars:
                    text = "".join(chars)
                    self._app.set_status_message("")
                    if callback:
                        callback(text, event)
                    return text
            elif event.is_printable:
                chars.append(chr(event.byte))

            if callback:
                callback("".join(chars), event)
