"""Row - one line of the document."""

from dataclasses import dataclass, field

from txtedit.core.constants import TAB, TAB_STOP


def expand_tabs(chars: bytes | bytearray) -> bytes:
    """Expand each tab to spaces up to the next multiple of TAB_STOP."""
    out = bytearray()
    for ch in chars:
        if ch == TAB:
            out += b" "
            while len(out) % TAB_STOP != 0:
                out += b" "
        else:
            out.append(ch)
    return bytes(out)


@dataclass(slots=True)
class Row:
    """
    A line of text with its tab-expanded rendering.

    ``chars`` holds the raw bytes as typed or loaded. ``render`` is derived
    from ``chars`` and is rebuilt by every mutating method, so it is never
    observed out of date.
    """
    chars: bytearray = field(default_factory=bytearray)
    render: bytes = b""

    def __post_init__(self) -> None:
        self.chars = bytearray(self.chars)
        self.update()

    @property
    def size(self) -> int:
        return len(self.chars)

    @property
    def rsize(self) -> int:
        return len(self.render)

    def update(self) -> None:
        """Recompute the render cache from the raw content."""
        self.render = expand_tabs(self.chars)

    def insert(self, at: int, ch: int) -> None:
        """Insert byte ``ch`` at column ``at`` (clamped to the end of the row)."""
        if at < 0 or at > self.size:
            at = self.size
        self.chars.insert(at, ch)
        self.update()

    def append(self, data: bytes | bytearray) -> None:
        self.chars += data
        self.update()

    def delete(self, at: int) -> None:
        """Remove the byte at column ``at``; out-of-range columns are ignored."""
        if at < 0 or at >= self.size:
            return
        del self.chars[at]
        self.update()

    def truncate(self, at: int) -> None:
        del self.chars[at:]
        self.update()
