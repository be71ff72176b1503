"""Map key events to editor state changes."""

from __future__ import annotations

from termpix.cli.core.input import KeyEvent
from termpix.cli.core.shortcuts import Action, lookup
from termpix.core.state import ApplicationState, Tool

_MOVES: dict[Action, tuple[int, int]] = {
    Action.MOVE_UP: (0, -1),
    Action.MOVE_DOWN: (0, 1),
    Action.MOVE_LEFT: (-1, 0),
    Action.MOVE_RIGHT: (1, 0),
}

_TOOLS: dict[Action, Tool] = {
    Action.PEN: Tool.PEN,
    Action.ERASER: Tool.ERASER,
    Action.COLOR_PICKER: Tool.COLOR_PICKER,
}


def handle_key(state: ApplicationState, event: KeyEvent) -> Action:
    """
    Apply one key event to the editor state.

    Movement, tool selection and tool application happen here. EXPORT,
    OPEN_PALETTE and QUIT only come back as the returned action; the
    caller carries them out. Unbound keys return Action.NONE and change
    nothing.
    """
    action = lookup(event)

    if action in _MOVES:
        state.move_cursor(*_MOVES[action])
    elif action in _TOOLS:
        state.select_tool(_TOOLS[action])
    elif action is Action.APPLY:
        state.apply_tool()

    return action
