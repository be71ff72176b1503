"""Pytest configuration and shared fixtures."""

from contextlib import contextmanager
from pathlib import Path
from typing import Iterator, Optional

import pytest

from termpix.cli.core.input import Key, KeyEvent
from termpix.cli.core.terminal import Terminal
from termpix.core.state import ApplicationState


class ScriptedReader:
    """Key source that replays a fixed list of events, then presses q."""

    def __init__(self, events: list[Optional[KeyEvent]]) -> None:
        self._events = list(events)
        self.reads = 0

    def read(self, timeout: float = 0.1) -> Optional[KeyEvent]:
        self.reads += 1
        if self._events:
            return self._events.pop(0)
        return KeyEvent(char="q", raw="q")


def char(c: str) -> KeyEvent:
    return KeyEvent(char=c, raw=c)


def key(k: Key) -> KeyEvent:
    return KeyEvent(key=k)


def ctrl(c: str) -> KeyEvent:
    return KeyEvent(char=c, raw=chr(ord(c) - 0x60), ctrl=True)


@pytest.fixture
def state() -> ApplicationState:
    """Fresh editor state: empty grid, cursor (0, 0), Pen, White."""
    return ApplicationState()


@pytest.fixture
def output_path(tmp_path: Path) -> Path:
    return tmp_path / "output.bmp"


@pytest.fixture
def terminal_guard(monkeypatch: pytest.MonkeyPatch) -> dict[str, int]:
    """Replace the full-screen terminal mode with a counter."""
    calls = {"entered": 0, "exited": 0}

    @contextmanager
    def fake_managed_mode() -> Iterator[None]:
        calls["entered"] += 1
        try:
            yield
        finally:
            calls["exited"] += 1

    monkeypatch.setattr(Terminal, "managed_mode", staticmethod(fake_managed_mode))
    return calls
