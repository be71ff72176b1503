"""Low-level terminal operations for the editor screen."""

from __future__ import annotations

import logging
import os
import sys
from contextlib import contextmanager
from dataclasses import dataclass
from typing import Iterator

from termpix.core.constants import CSI, RESET

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class TerminalSize:
    """Terminal dimensions."""
    rows: int
    cols: int


class Terminal:
    """Terminal I/O for the full-screen editor."""

    @staticmethod
    def size() -> TerminalSize:
        """Get current terminal dimensions."""
        try:
            size = os.get_terminal_size()
            return TerminalSize(size.lines, size.columns)
        except OSError:
            return TerminalSize(24, 80)

    @staticmethod
    def clear() -> None:
        """Clear screen and move cursor to home."""
        Terminal.write(f'{CSI}2J{CSI}H')

    @staticmethod
    def home() -> None:
        Terminal.write(f'{CSI}H')

    @staticmethod
    def hide_cursor() -> None:
        Terminal.write(f'{CSI}?25l')

    @staticmethod
    def show_cursor() -> None:
        Terminal.write(f'{CSI}?25h')

    @staticmethod
    def reset() -> None:
        """Reset all terminal attributes."""
        Terminal.write(RESET)

    @staticmethod
    def write(text: str) -> None:
        """Write text to terminal."""
        sys.stdout.write(text)
        sys.stdout.flush()

    @staticmethod
    @contextmanager
    def raw_mode() -> Iterator[None]:
        """Context manager for raw terminal mode (Unix only)."""
        try:
            import termios
            import tty
        except ImportError:
            # No termios (Windows): keys still arrive, just line-buffered
            logger.warning("termios unavailable, running without raw mode")
            yield
            return

        fd = sys.stdin.fileno()
        old_settings = termios.tcgetattr(fd)
        try:
            tty.setraw(fd)
            yield
        finally:
            termios.tcsetattr(fd, termios.TCSADRAIN, old_settings)

    @staticmethod
    @contextmanager
    def alternate_screen() -> Iterator[None]:
        """Use alternate screen buffer (preserves scrollback)."""
        Terminal.write(f'{CSI}?1049h')
        try:
            yield
        finally:
            Terminal.write(f'{CSI}?1049l')

    @staticmethod
    @contextmanager
    def managed_mode() -> Iterator[None]:
        """Full TUI mode: alternate screen, hidden cursor, raw input.

        Everything is restored on exit, including when the body raises.
        """
        with Terminal.alternate_screen():
            Terminal.hide_cursor()
            try:
                with Terminal.raw_mode():
                    yield
            finally:
                Terminal.show_cursor()
                Terminal.reset()
