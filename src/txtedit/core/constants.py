"""Shared constants for the editor core."""

# Terminal escape sequences
ESC = 0x1B
CLEAR_SCREEN = b"\x1b[2J"
CLEAR_LINE = b"\x1b[K"
CURSOR_HOME = b"\x1b[H"
HIDE_CURSOR = b"\x1b[?25l"
SHOW_CURSOR = b"\x1b[?25h"
REVERSE_VIDEO = b"\x1b[7m"
RESET_ATTRS = b"\x1b[m"
CRLF = b"\r\n"

# Keys decoded as plain characters
ENTER = 0x0D
TAB = 0x09
DEL = 0x7F

# Editor behaviour
TAB_STOP = 8
QUIT_TIMES = 3
MESSAGE_TIMEOUT = 5.0   # seconds a status message stays visible
ESCAPE_TIMEOUT = 0.1    # inter-byte wait used to tell ESC from a sequence
STATUS_FILENAME_WIDTH = 20
FILLER = b"~"

WELCOME = "Txtedit editor -- version {version}"
HELP_MESSAGE = "HELP: Ctrl-S = save | Ctrl-Q = quit | Ctrl-F = find"
SAVE_AS_PROMPT = "Save as: {} (ESC to cancel)"
SEARCH_PROMPT = "Search: {} (Use ESC/Arrows/Enter)"
