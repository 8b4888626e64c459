"""Core TUI infrastructure - terminal I/O, input handling, logging."""

from txtedit.cli.core.terminal import (
    Terminal,
    TerminalByteSource,
    TerminalError,
    TerminalSize,
)
from txtedit.cli.core.input import InputReader, KeyEvent, Key, ctrl_key
from txtedit.cli.core.log import setup_logging

__all__ = [
    "Terminal",
    "TerminalByteSource",
    "TerminalError",
    "TerminalSize",
    "InputReader",
    "KeyEvent",
    "Key",
    "ctrl_key",
    "setup_logging",
]
