"""Text styles (SGR attributes) and their escape sequences."""

from __future__ import annotations

from enum import IntEnum


class Style(IntEnum):
    """SGR text attributes; several names share a code."""

    RESET = 0
    BOLD = 1
    DIM = 2
    ITALIC = 3
    UNDERLINE = 4
    BLINK = 5
    BLINK_RAPID = 6
    REVERSED = 7
    CONCEAL = 8
    CROSSED = 9

    FONT0 = 10
    RESET_FONT = 10
    FONT1 = 11
    FONT2 = 12
    FONT3 = 13
    FONT4 = 14
    FONT5 = 15
    FONT6 = 16
    FONT7 = 17
    FONT8 = 18
    FONT9 = 19
    FONT10 = 20

    DOUBLY_UNDERLINED_OR_NOT_BOLD = 21

    RESET_BOLD = 22
    RESET_DIM = 22
    RESET_ITALIC = 23
    RESET_UNDERLINE = 24
    RESET_BLINK = 25
    RESET_BLINK_RAPID = 25
    RESET_REVERSED = 27
    RESET_CONCEAL = 28
    RESET_CROSSED = 29

    DEFAULT_FOREGROUND_COLOR = 39
    DEFAULT_BACKGROUND_COLOR = 49

    FRAME = 51
    ENCIRCLE = 52
    OVERLINE = 53
    RESET_FRAME = 54
    RESET_ENCIRCLE = 54
    RESET_OVERLINE = 55

    DEFAULT_UNDERLINE_COLOR = 59

    BAR_RIGHT = 60
    DOUBLE_BAR_RIGHT = 61
    BAR_LEFT = 62
    DOUBLE_BAR_LEFT = 63
    STRESS_MARKING = 64

    RESET_BAR = 65

    SUPERSCRIPT = 73
    SUBSCRIPT = 74
    RESET_SUPERSCRIPT = 75
    RESET_SUBSCRIPT = 75


def style(value: Style | int) -> str:
    """Return the escape sequence that applies ``value``.

    Resetting the background also clears to the end of the line, so the
    default background fills the rest of it.
    """
    value = Style(value)
    sequence = f"\x1b[{int(value)}m"
    if value is Style.DEFAULT_BACKGROUND_COLOR:
        sequence += "\x1b[K"
    return sequence