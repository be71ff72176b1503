"""Export the grid to a bitmap image."""

from __future__ import annotations

import logging
from pathlib import Path

from PIL import Image

from termpix.core.color import Color
from termpix.core.constants import OUTPUT_FILENAME
from termpix.core.grid import Grid
from termpix.errors import ExportError

logger = logging.getLogger(__name__)

# Unpainted cells export as black
UNPAINTED_RGB = Color.BLACK.to_rgb()


def grid_to_image(grid: Grid) -> Image.Image:
    """Build an RGB image with one pixel per grid cell."""
    img = Image.new("RGB", (grid.width, grid.height), color=UNPAINTED_RGB)
    img.putdata([
        cell.to_rgb() if cell is not None else UNPAINTED_RGB
        for row in grid.rows()
        for cell in row
    ])
    return img


def export_bmp(grid: Grid, path: str | Path = OUTPUT_FILENAME) -> Path:
    """
    Write the grid as a 24-bit BMP, overwriting any existing file.

    Returns the path written. Raises ExportError if the file cannot be
    written; the grid is left untouched either way.
    """
    path = Path(path)
    img = grid_to_image(grid)
    try:
        img.save(path, format="BMP")
    except OSError as e:
        logger.error("Export to %s failed: %s", path, e)
        raise ExportError(path, e.strerror or str(e)) from e
    logger.info("Exported %dx%d image to %s", grid.width, grid.height, path)
    return path
