"""Pytest fixtures shared by the editor tests."""

from collections import deque
from pathlib import Path
from typing import Callable, Iterable, Optional

import pytest

from txtedit.cli.core.input import InputReader
from txtedit.cli.core.terminal import TerminalSize
from txtedit.cli.studio.editor import EditorApp
from txtedit.core.document import Document

# Marks a point in a key script where the inter-byte timeout expires
TIMEOUT = None


class ScriptedByteSource:
    """Byte source that replays a script; ``TIMEOUT`` entries read as None."""

    def __init__(self, *chunks: Optional[bytes]) -> None:
        self._queue: deque[Optional[int]] = deque()
        self.feed(*chunks)

    def feed(self, *chunks: Optional[bytes]) -> None:
        for chunk in chunks:
            if chunk is None:
                self._queue.append(None)
            else:
                self._queue.extend(chunk)

    @property
    def exhausted(self) -> bool:
        return not self._queue

    def read_byte(self) -> Optional[int]:
        if not self._queue:
            raise AssertionError("key script exhausted")
        return self._queue.popleft()


class FakeClock:
    def __init__(self, now: float = 1000.0) -> None:
        self.now = now

    def __call__(self) -> float:
        return self.now

    def advance(self, seconds: float) -> None:
        self.now += seconds


@pytest.fixture
def clock() -> FakeClock:
    return FakeClock()


@pytest.fixture
def make_document() -> Callable[..., Document]:
    def factory(*lines: bytes, path: Optional[Path] = None) -> Document:
        return Document.from_lines(lines, path)
    return factory


@pytest.fixture
def make_editor(clock: FakeClock) -> Callable[..., EditorApp]:
    """Build an EditorApp wired to a scripted keyboard and captured output.

    The returned editor has ``frames`` (list of written byte chunks) and
    ``source`` (the ScriptedByteSource) attributes for inspection.
    """
    def factory(
        lines: Iterable[bytes] = (),
        *chunks: Optional[bytes],
        rows: int = 12,
        cols: int = 40,
        path: Optional[Path] = None,
        save=None,
    ) -> EditorApp:
        document = Document.from_lines(lines, path)
        source = ScriptedByteSource(*chunks)
        frames: list[bytes] = []
        kwargs = {"save": save} if save is not None else {}
        editor = EditorApp(
            document,
            TerminalSize(rows, cols),
            InputReader(source),
            frames.append,
            clock=clock,
            **kwargs,
        )
        editor.frames = frames
        editor.source = source
        return editor
    return factory
