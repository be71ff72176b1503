"""Base widget and common functionality."""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass

from termpix.cli.core.input import KeyEvent


@dataclass
class Rect:
    """Rectangle bounds for widget positioning."""
    x: int
    y: int
    width: int
    height: int


class BaseWidget(ABC):
    """Base class with common widget functionality."""

    def __init__(self) -> None:
        self._visible = True

    @property
    def visible(self) -> bool:
        return self._visible

    @visible.setter
    def visible(self, value: bool) -> None:
        self._visible = value

    @abstractmethod
    def render(self, bounds: Rect) -> list[str]:
        """Render widget content as exactly bounds.height lines."""
        pass

    def handle_input(self, event: KeyEvent) -> bool:
        """Default: don't consume events."""
        return False
