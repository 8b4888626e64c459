"""Base widget protocol and common functionality."""

from __future__ import annotations

from abc import ABC, abstractmethod


class BaseWidget(ABC):
    """Base class for the bars drawn under the document."""

    @abstractmethod
    def render(self, width: int) -> list[bytes]:
        """Render widget content as a list of lines, without line breaks."""
        pass
