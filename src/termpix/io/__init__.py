"""File output for pixel art."""

from termpix.io.writer import export_bmp, grid_to_image

__all__ = ["export_bmp", "grid_to_image"]
