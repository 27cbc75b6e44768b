"""Base factory interfaces."""

import sys
from abc import ABC, abstractmethod
from typing import Optional, TextIO

from cinema_manager.models import ContentItem


class ContentCreator(ABC):
    """Abstract base class for content item creators."""

    @property
    @abstractmethod
    def kind(self) -> str:
        """Kind label stamped on every created item."""
        ...

    def create_item(self, title: str) -> ContentItem:
        """Create a content item of this creator's kind."""
        return ContentItem(title=title, kind=self.kind)


class Widget(ABC):
    """Abstract base class for UI widgets."""

    def __init__(self, stream: Optional[TextIO] = None):
        self.stream = stream

    @property
    @abstractmethod
    def theme(self) -> str:
        ...

    @property
    @abstractmethod
    def kind(self) -> str:
        ...

    @abstractmethod
    def render(self) -> None:
        """Draw the widget to its output stream."""
        ...

    def _write(self, line: str) -> None:
        # resolved late so redirected stdout is honoured
        print(line, file=self.stream or sys.stdout)


class UIFactory(ABC):
    """
    Abstract base class for themed widget factories.

    Every widget a factory creates belongs to the factory's theme. Adding a
    new widget kind means adding a ``create_*`` method here and implementing
    it in every concrete factory.
    """

    def __init__(self, stream: Optional[TextIO] = None):
        self.stream = stream

    @property
    @abstractmethod
    def theme(self) -> str:
        """Name of the visual theme."""
        ...

    @abstractmethod
    def create_button(self) -> Widget:
        ...

    @abstractmethod
    def create_checkbox(self) -> Widget:
        ...
