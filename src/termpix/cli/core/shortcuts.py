"""Keyboard shortcut table.

Single source of truth for the editor's key bindings. The input handler
dispatches through it and the status panel builds its legend from it, so
the two cannot drift apart.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum, auto

from termpix.cli.core.input import Key, KeyEvent


class Action(Enum):
    """What a key press asks the editor to do."""
    NONE = auto()
    MOVE_UP = auto()
    MOVE_DOWN = auto()
    MOVE_LEFT = auto()
    MOVE_RIGHT = auto()
    APPLY = auto()
    PEN = auto()
    ERASER = auto()
    COLOR_PICKER = auto()
    OPEN_PALETTE = auto()
    EXPORT = auto()
    QUIT = auto()


@dataclass(frozen=True)
class ShortcutDef:
    """Definition of a keyboard shortcut.

    Attributes:
        action: Action triggered by the shortcut
        keys: Keys/chars that trigger it
        label: Short label for the legend; empty hides it
        ctrl: Whether the Control modifier must be held
    """
    action: Action
    keys: tuple[str | Key, ...]
    label: str = ""
    ctrl: bool = False

    def matches(self, event: KeyEvent) -> bool:
        """Check if a key event matches this shortcut."""
        if event.ctrl != self.ctrl:
            return False
        for key in self.keys:
            if isinstance(key, Key):
                if event.key == key:
                    return True
            elif event.char == key:
                return True
        return False

    @property
    def key_display(self) -> str:
        """Get display string for the keys."""
        displays = []
        for key in self.keys:
            text = _key_to_display(key) if isinstance(key, Key) else _char_to_display(key)
            displays.append(f"^{text.upper()}" if self.ctrl else text)
        return "/".join(displays)


def _key_to_display(key: Key) -> str:
    display_map = {
        Key.UP: "↑",
        Key.DOWN: "↓",
        Key.LEFT: "←",
        Key.RIGHT: "→",
        Key.ENTER: "Enter",
        Key.ESCAPE: "Esc",
    }
    return display_map.get(key, key.name.title())


def _char_to_display(char: str) -> str:
    return "Space" if char == " " else char


EDITOR_SHORTCUTS: tuple[ShortcutDef, ...] = (
    ShortcutDef(Action.MOVE_UP, (Key.UP,), "Move"),
    ShortcutDef(Action.MOVE_DOWN, (Key.DOWN,)),
    ShortcutDef(Action.MOVE_LEFT, (Key.LEFT,)),
    ShortcutDef(Action.MOVE_RIGHT, (Key.RIGHT,)),
    ShortcutDef(Action.APPLY, (" ",), "Apply"),
    ShortcutDef(Action.PEN, ("1",), "Pen"),
    ShortcutDef(Action.ERASER, ("2",), "Eraser"),
    ShortcutDef(Action.COLOR_PICKER, ("3",), "Picker"),
    ShortcutDef(Action.OPEN_PALETTE, ("c",), "Colors"),
    ShortcutDef(Action.EXPORT, ("s",), "Export", ctrl=True),
    ShortcutDef(Action.QUIT, ("q",), "Quit"),
)


def lookup(event: KeyEvent) -> Action:
    """Return the action bound to a key event, or Action.NONE."""
    for shortcut in EDITOR_SHORTCUTS:
        if shortcut.matches(event):
            return shortcut.action
    return Action.NONE


def legend() -> list[tuple[str, str]]:
    """(keys, label) pairs for the status panel legend."""
    arrows = "".join(
        _key_to_display(sc.keys[0])
        for sc in EDITOR_SHORTCUTS
        if sc.action in (Action.MOVE_UP, Action.MOVE_DOWN, Action.MOVE_LEFT, Action.MOVE_RIGHT)
    )
    pairs = []
    for sc in EDITOR_SHORTCUTS:
        if not sc.label:
            continue
        keys = arrows if sc.action is Action.MOVE_UP else sc.key_display
        pairs.append((keys, sc.label))
    return pairs
