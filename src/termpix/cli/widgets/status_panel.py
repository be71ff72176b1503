"""Status panel showing tools, current color and key bindings."""

from __future__ import annotations

from typing import Optional

from termpix.cli.core import shortcuts
from termpix.cli.core.ansi_text import truncate_and_pad
from termpix.cli.widgets.base import BaseWidget, Rect
from termpix.core.constants import CSI, PAINTED_GLYPH, RESET, REVERSE
from termpix.core.state import ApplicationState, Tool

ACTIVE_MARKER = "▶"

# Tool -> key shown in the tool list
TOOL_KEYS: dict[Tool, str] = {
    Tool.PEN: "1",
    Tool.ERASER: "2",
    Tool.COLOR_PICKER: "3",
}


class StatusPanelWidget(BaseWidget):
    """Bottom panel: tool list, active tool and color, legend, last message."""

    def __init__(self, state: ApplicationState) -> None:
        super().__init__()
        self._state = state
        self._message: Optional[str] = None

    @property
    def message(self) -> Optional[str]:
        return self._message

    def set_message(self, text: Optional[str]) -> None:
        self._message = text

    def tools_line(self) -> str:
        parts = []
        for tool in Tool:
            label = f"{TOOL_KEYS[tool]} {tool.display_name}"
            if tool is self._state.tool:
                parts.append(f"{REVERSE}{ACTIVE_MARKER}{label}{RESET}")
            else:
                parts.append(f" {label}")
        return " " + "  ".join(parts)

    def info_line(self) -> str:
        color = self._state.color
        swatch = f"{CSI}{color.to_sgr_fg()}m{PAINTED_GLYPH * 2}{RESET}"
        return f" Tool: {self._state.tool.display_name}   Color: {color!r} {swatch}"

    def legend_line(self) -> str:
        return " " + "".join(
            f"{REVERSE} {keys} {RESET}{CSI}36m {label} {RESET}"
            for keys, label in shortcuts.legend()
        )

    def render(self, bounds: Rect) -> list[str]:
        lines = [self.tools_line(), self.info_line(), self.legend_line()]
        if self._message:
            lines.append(f" {self._message}")
        lines = lines[:bounds.height]
        while len(lines) < bounds.height:
            lines.append("")
        return [truncate_and_pad(line, bounds.width) for line in lines]
