"""Terminal colors and their foreground/background escape sequences."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum, IntEnum
from typing import Tuple, Union


class ColorType(Enum):
    """The resolution a color was given in."""

    UNSET = "unset"
    NO_COLOR = "no_color"
    BIT3 = "bit3"
    BIT4 = "bit4"
    BIT8 = "bit8"
    BIT24 = "bit24"


class ColorName(IntEnum):
    """3/4-bit colors: foreground code is value + 30, background value + 40."""

    BLACK = 0
    RED = 1
    GREEN = 2
    YELLOW = 3
    BLUE = 4
    MAGENTA = 5
    CYAN = 6
    WHITE = 7
    DEFAULT = 9
    GRAY = 60
    BRIGHT_BLACK = 60
    BRIGHT_RED = 61
    BRIGHT_GREEN = 62
    BRIGHT_YELLOW = 63
    BRIGHT_BLUE = 64
    BRIGHT_MAGENTA = 65
    BRIGHT_CYAN = 66
    BRIGHT_WHITE = 67


RGB = Tuple[int, int, int]


def _check_byte(name: str, value: int) -> None:
    if not isinstance(value, int) or isinstance(value, bool):
        raise TypeError(f"{name} must be an int")
    if not 0 <= value <= 255:
        raise ValueError(f"{name} out of range: {value}")


@dataclass(frozen=True)
class Color:
    """A color: a named 3/4-bit color, an 8-bit index, or an RGB triple."""

    type: ColorType = ColorType.UNSET
    value: Union[ColorName, int, RGB, None] = None

    @classmethod
    def from_name(cls, name: ColorName) -> "Color":
        name = ColorName(name)
        kind = ColorType.BIT4 if name >= ColorName.BRIGHT_BLACK else ColorType.BIT3
        return cls(kind, name)

    @classmethod
    def from_8bit(cls, value: int) -> "Color":
        _check_byte("value", value)
        return cls(ColorType.BIT8, value)

    @classmethod
    def from_rgb(cls, red: int, green: int, blue: int) -> "Color":
        for label, component in (("red", red), ("green", green), ("blue", blue)):
            _check_byte(label, component)
        return cls(ColorType.BIT24, (red, green, blue))


ColorLike = Union[Color, ColorName, int, RGB]


def _coerce(color: ColorLike) -> Color:
    if isinstance(color, Color):
        return color
    if isinstance(color, ColorName):
        return Color.from_name(color)
    if isinstance(color, int) and not isinstance(color, bool):
        return Color.from_8bit(color)
    if isinstance(color, tuple) and len(color) == 3:
        return Color.from_rgb(*color)
    raise TypeError(f"cannot interpret {color!r} as a color")


def _sequence(color: ColorLike, base: int) -> str:
    color = _coerce(color)
    if color.type in (ColorType.BIT3, ColorType.BIT4):
        return f"\x1b[{base + int(color.value)}m"
    if color.type is ColorType.BIT8:
        return f"\x1b[{base + 8};5;{color.value}m"
    if color.type is ColorType.BIT24:
        red, green, blue = color.value
        return f"\x1b[{base + 8};2;{red};{green};{blue}m"
    return ""


def color_fg(color: ColorLike) -> str:
    """Escape sequence that sets the foreground color."""
    return _sequence(color, 30)


def color_bg(color: ColorLike) -> str:
    """Escape sequence that sets the background color."""
    return _sequence(color, 40)