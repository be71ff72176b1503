"""Terminal user interface for the pixel editor."""
