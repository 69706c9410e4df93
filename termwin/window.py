"""An off-screen grid of styled cells that renders to escape sequences."""

from __future__ import annotations

from dataclasses import dataclass, field, replace
from typing import Iterator, List, Union

from termwin.color import Color, ColorName, color_bg, color_fg
from termwin.exception import TerminalError
from termwin.geometry import Position, Size
from termwin.style import Style, style as style_sequence

_DEFAULT_COLOR = Color.from_name(ColorName.DEFAULT)
_BLACK_RGB = Color.from_rgb(0, 0, 0)
_WHITE_RGB = Color.from_rgb(255, 255, 255)

_UTF8_BORDER = "│─┌┐└┘"
_ASCII_BORDER = "|-++++"

ColorInput = Union[Color, ColorName, int, tuple]


def _as_color(color: ColorInput) -> Color:
    if isinstance(color, Color):
        return color
    if isinstance(color, ColorName):
        return Color.from_name(color)
    if isinstance(color, int) and not isinstance(color, bool):
        return Color.from_8bit(color)
    if isinstance(color, tuple) and len(color) == 3:
        return Color.from_rgb(*color)
    raise TypeError(f"cannot interpret {color!r} as a color")


def _cursor_off() -> str:
    return "\x1b[?25l"


def _cursor_on() -> str:
    return "\x1b[?25h"


def _cursor_move(row: int, column: int) -> str:
    return f"\x1b[{row};{column}H"


@dataclass(frozen=True)
class Cell:
    """One character of a window together with its colors and style."""

    char: str = " "
    fg: Color = field(default=_DEFAULT_COLOR)
    bg: Color = field(default=_DEFAULT_COLOR)
    fg_reset: bool = True
    bg_reset: bool = True
    style: Style = Style.RESET


class Window:
    """A rectangular grid of cells addressed by 1-based (column, row)."""

    def __init__(self, size: Size) -> None:
        self._size = size
        self._cursor = Position()
        self._cells: List[Cell] = []
        self.clear()

    @property
    def size(self) -> Size:
        return self._size

    @property
    def rows(self) -> int:
        return self._size.rows

    @property
    def columns(self) -> int:
        return self._size.columns

    @property
    def cursor(self) -> Position:
        return self._cursor

    def inside(self, column: int, row: int) -> bool:
        """Whether (column, row) lies within the window."""
        return 1 <= column <= self._size.columns and 1 <= row <= self._size.rows

    def _index(self, column: int, row: int) -> int:
        if not self.inside(column, row):
            raise TerminalError("Cursor out of range")
        return (row - 1) * self._size.columns + (column - 1)

    def cell(self, column: int, row: int) -> Cell:
        """The cell at (column, row)."""
        return self._cells[self._index(column, row)]

    def _update(self, column: int, row: int, **changes: object) -> None:
        index = self._index(column, row)
        self._cells[index] = replace(self._cells[index], **changes)

    def set_char(self, column: int, row: int, character: str) -> None:
        if not self.inside(column, row):
            raise TerminalError("set_char(): (x,y) out of bounds")
        self._update(column, row, char=character)

    def set_fg_reset(self, column: int, row: int) -> None:
        self._update(column, row, fg_reset=True, fg=_DEFAULT_COLOR)

    def set_bg_reset(self, column: int, row: int) -> None:
        self._update(column, row, bg_reset=True, bg=_DEFAULT_COLOR)

    def set_fg(self, column: int, row: int, color: ColorInput) -> None:
        self._update(column, row, fg_reset=False, fg=_as_color(color))

    def set_bg(self, column: int, row: int, color: ColorInput) -> None:
        self._update(column, row, bg_reset=False, bg=_as_color(color))

    def set_style(self, column: int, row: int, style: Style) -> None:
        self._update(column, row, style=Style(style))

    def set_cursor_pos(self, column: int, row: int) -> None:
        self._cursor = Position(row=row, column=column)

    def set_height(self, new_height: int) -> None:
        """Grow the window to ``new_height`` rows; shrinking is refused."""
        if new_height == self._size.rows:
            return
        if new_height < self._size.rows:
            raise TerminalError("Shrinking height not supported.")
        added = (new_height - self._size.rows) * self._size.columns
        filler = Cell(fg=_BLACK_RGB, bg=_BLACK_RGB)
        self._cells.extend([filler] * added)
        self._size = Size(rows=new_height, columns=self._size.columns)

    def print_str(
        self,
        column: int,
        row: int,
        text: str,
        indent: int = 0,
        move_cursor: bool = False,
    ) -> None:
        """Write ``text`` from (column, row), stopping at the window's edge.

        A newline moves to the next row at ``column + indent`` and marks the
        indentation with dots.
        """
        xpos = column
        ypos = row
        for character in text:
            if character == "\n":
                xpos = column + indent
                ypos += 1
                if not self.inside(xpos, ypos):
                    return
                for offset in range(indent):
                    self.set_char(column + offset, ypos, ".")
            else:
                if not self.inside(xpos, ypos):
                    return
                self.set_char(xpos, row, character)
                xpos += 1
        if move_cursor:
            self._cursor = Position(row=ypos, column=xpos)

    def _area(self, x1: int, y1: int, x2: int, y2: int) -> Iterator[tuple]:
        for row in range(y1, y2 + 1):
            for column in range(x1, x2 + 1):
                yield column, row

    def fill_fg(self, x1: int, y1: int, x2: int, y2: int, color: ColorInput) -> None:
        for column, row in self._area(x1, y1, x2, y2):
            self.set_fg(column, row, color)

    def fill_bg(self, x1: int, y1: int, x2: int, y2: int, color: ColorInput) -> None:
        for column, row in self._area(x1, y1, x2, y2):
            self.set_bg(column, row, color)

    def fill_style(self, x1: int, y1: int, x2: int, y2: int, style: Style) -> None:
        for column, row in self._area(x1, y1, x2, y2):
            self.set_style(column, row, style)

    def print_border(self, utf8: bool = True) -> None:
        """Draw a frame around the whole window."""
        self.print_rect(1, 1, self._size.columns, self._size.rows, utf8)

    def print_rect(self, x1: int, y1: int, x2: int, y2: int, utf8: bool = True) -> None:
        """Draw a frame with corners at (x1, y1) and (x2, y2)."""
        vertical, horizontal, top_left, top_right, bottom_left, bottom_right = (
            _UTF8_BORDER if utf8 else _ASCII_BORDER
        )
        for row in range(y1 + 1, y2):
            self.set_char(x1, row, vertical)
            self.set_char(x2, row, vertical)
        for column in range(x1 + 1, x2):
            self.set_char(column, y1, horizontal)
            self.set_char(column, y2, horizontal)
        self.set_char(x1, y1, top_left)
        self.set_char(x2, y1, top_right)
        self.set_char(x1, y2, bottom_left)
        self.set_char(x2, y2, bottom_right)

    def clear(self) -> None:
        """Reset every cell to a blank with default colors and style."""
        self._cells = [Cell()] * self._size.area()

    def render(self, x0: int, y0: int, term: bool) -> str:
        """Text that draws the window; with ``term``, placed at (x0, y0)."""
        parts: List[str] = []
        if term:
            parts.append(_cursor_off())
        current_fg = _DEFAULT_COLOR
        current_bg = _DEFAULT_COLOR
        current_fg_reset = True
        current_bg_reset = True
        current_style = Style.RESET
        for row in range(1, self._size.rows + 1):
            if term:
                parts.append(_cursor_move(y0 + row - 1, x0))
            for column in range(1, self._size.columns + 1):
                cell = self.cell(column, row)
                update_fg = update_bg = False
                update_fg_reset = update_bg_reset = update_style = False

                if current_fg_reset != cell.fg_reset:
                    current_fg_reset = cell.fg_reset
                    if current_fg_reset:
                        update_fg_reset = True
                        current_fg = _WHITE_RGB
                if current_bg_reset != cell.bg_reset:
                    current_bg_reset = cell.bg_reset
                    if current_bg_reset:
                        update_bg_reset = True
                        current_bg = _WHITE_RGB
                if not current_fg_reset and current_fg != cell.fg:
                    current_fg = cell.fg
                    update_fg = True
                if not current_fg_reset and current_bg != cell.bg:
                    current_bg = cell.bg
                    update_bg = True
                if current_style != cell.style:
                    current_style = cell.style
                    update_style = True
                    if current_style == Style.RESET:
                        # A reset clears colors too; re-apply non-default ones.
                        update_fg = not current_fg_reset
                        update_bg = not current_bg_reset

                if update_style:
                    parts.append(style_sequence(cell.style))
                if update_fg_reset:
                    parts.append(color_fg(ColorName.DEFAULT))
                elif update_fg:
                    parts.append(color_fg(cell.fg))
                if update_bg_reset:
                    parts.append(color_bg(ColorName.DEFAULT))
                elif update_bg:
                    parts.append(color_bg(cell.bg))
                parts.append(cell.char)
            if row < self._size.rows:
                parts.append("\n")
        if not current_fg_reset:
            parts.append(color_fg(ColorName.DEFAULT))
        if not current_bg_reset:
            parts.append(color_bg(ColorName.DEFAULT))
        if current_style != Style.RESET:
            parts.append(style_sequence(Style.RESET))
        if term:
            parts.append(
                _cursor_move(
                    y0 + (self._cursor.row - 1), x0 + (self._cursor.column - 1)
                )
            )
            parts.append(_cursor_on())
        return "".join(parts)