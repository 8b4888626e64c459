"""Widgets drawn around the document view."""

from txtedit.cli.widgets.base import BaseWidget
from txtedit.cli.widgets.status_bar import MessageBarWidget, StatusBarWidget

__all__ = ["BaseWidget", "MessageBarWidget", "StatusBarWidget"]
