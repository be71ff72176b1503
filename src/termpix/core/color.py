"""Color representation for pixel art."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import ClassVar


class ColorName(Enum):
    """Named terminal colors. Value is the 16-color palette index."""
    BLACK = 0
    RED = 1
    GREEN = 2
    YELLOW = 3
    BLUE = 4
    MAGENTA = 5
    CYAN = 6
    GRAY = 7
    DARK_GRAY = 8
    LIGHT_RED = 9
    LIGHT_GREEN = 10
    LIGHT_YELLOW = 11
    LIGHT_BLUE = 12
    LIGHT_MAGENTA = 13
    LIGHT_CYAN = 14
    WHITE = 15


# Names with an exact RGB mapping. Anything else exports as FALLBACK_RGB.
NAMED_RGB: dict[ColorName, tuple[int, int, int]] = {
    ColorName.BLACK: (0, 0, 0),
    ColorName.WHITE: (255, 255, 255),
    ColorName.RED: (255, 0, 0),
    ColorName.GREEN: (0, 255, 0),
    ColorName.BLUE: (0, 0, 255),
}

FALLBACK_RGB = (128, 128, 128)


@dataclass(frozen=True)
class Color:
    """
    A pixel color: either a named terminal color or an explicit RGB triple.

    Exactly one of ``name`` and ``value`` is set. Use the class constants or
    ``Color.rgb()`` rather than the constructor.
    """
    name: ColorName | None = None
    value: tuple[int, int, int] | None = None

    BLACK: ClassVar["Color"]
    RED: ClassVar["Color"]
    GREEN: ClassVar["Color"]
    YELLOW: ClassVar["Color"]
    BLUE: ClassVar["Color"]
    MAGENTA: ClassVar["Color"]
    CYAN: ClassVar["Color"]
    GRAY: ClassVar["Color"]
    DARK_GRAY: ClassVar["Color"]
    LIGHT_RED: ClassVar["Color"]
    LIGHT_GREEN: ClassVar["Color"]
    LIGHT_YELLOW: ClassVar["Color"]
    LIGHT_BLUE: ClassVar["Color"]
    LIGHT_MAGENTA: ClassVar["Color"]
    LIGHT_CYAN: ClassVar["Color"]
    WHITE: ClassVar["Color"]

    def __post_init__(self) -> None:
        if (self.name is None) == (self.value is None):
            raise ValueError("Color needs exactly one of name or value")

    @classmethod
    def named(cls, name: ColorName) -> Color:
        return cls(name=name)

    @classmethod
    def rgb(cls, r: int, g: int, b: int) -> Color:
        """Create a Color from RGB values."""
        if not all(0 <= c <= 255 for c in (r, g, b)):
            raise ValueError(f"RGB values must be 0-255, got ({r}, {g}, {b})")
        return cls(value=(r, g, b))

    @property
    def is_rgb(self) -> bool:
        return self.value is not None

    def to_rgb(self) -> tuple[int, int, int]:
        """Return the 24-bit RGB triple used for export."""
        if self.value is not None:
            return self.value
        assert self.name is not None
        return NAMED_RGB.get(self.name, FALLBACK_RGB)

    def to_sgr_fg(self) -> str:
        """Return SGR parameters for this color as a foreground."""
        if self.value is not None:
            r, g, b = self.value
            return f"38;2;{r};{g};{b}"
        assert self.name is not None
        index = self.name.value
        if index < 8:
            return str(30 + index)
        return str(90 + index - 8)

    def to_sgr_bg(self) -> str:
        """Return SGR parameters for this color as a background."""
        if self.value is not None:
            r, g, b = self.value
            return f"48;2;{r};{g};{b}"
        assert self.name is not None
        index = self.name.value
        if index < 8:
            return str(40 + index)
        return str(100 + index - 8)

    def __repr__(self) -> str:
        if self.value is not None:
            r, g, b = self.value
            return f"Rgb({r}, {g}, {b})"
        assert self.name is not None
        return "".join(part.capitalize() for part in self.name.name.split("_"))


def to_rgb(color: Color) -> tuple[int, int, int]:
    """Map a color to its exported RGB triple."""
    return color.to_rgb()


# Initialize class-level color constants
for _name in ColorName:
    setattr(Color, _name.name, Color(name=_name))
del _name
