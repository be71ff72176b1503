"""Core TUI infrastructure - terminal I/O, input handling, layout."""

from termpix.cli.core.terminal import Terminal, TerminalSize
from termpix.cli.core.input import InputReader, KeyEvent, Key, KeySource
from termpix.cli.core.layout import Layout, calculate_layout
from termpix.cli.core.shortcuts import Action, ShortcutDef, EDITOR_SHORTCUTS

__all__ = [
    "Terminal",
    "TerminalSize",
    "InputReader",
    "KeyEvent",
    "Key",
    "KeySource",
    "Layout",
    "calculate_layout",
    "Action",
    "ShortcutDef",
    "EDITOR_SHORTCUTS",
]
