"""Rendering of editor state to terminal frames."""

from txtedit.render.screen import ScreenRenderer

__all__ = ["ScreenRenderer"]
