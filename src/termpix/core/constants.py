"""Shared constants for the pixel editor."""

# Canvas
GRID_SIZE = 64

# Export
OUTPUT_FILENAME = "output.bmp"

# Main loop input poll interval in seconds (~10 Hz)
POLL_TIMEOUT = 0.1

# Cell glyphs, in render priority order
CURSOR_GLYPH = "█"
PAINTED_GLYPH = "▓"
EMPTY_GLYPH = "·"

# Percentage of terminal height given to the drawing area
DRAWING_AREA_PERCENT = 80

# ANSI escape sequences
ESC = "\x1b"
CSI = f"{ESC}["
RESET = f"{CSI}0m"
DIM = f"{CSI}90m"
REVERSE = f"{CSI}7m"
