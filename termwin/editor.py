"""A small text editor model: rows of text, a cursor, search and files."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from pathlib import Path
from typing import List, Optional, Tuple, Union

from termwin.geometry import Size
from termwin.style import Style, style
from termwin.syntax import Highlight, Syntax, find_syntax, highlight_row

TAB_STOP = 8
QUIT_TIMES = 3
VERSION = "0.0.1"
_STATUS_BAR_LINES = 2


class Direction(Enum):
    """A cursor movement."""

    LEFT = "left"
    RIGHT = "right"
    UP = "up"
    DOWN = "down"


def cx_to_rx(chars: str, cx: int) -> int:
    """Rendered column of character index ``cx``, with tabs expanded."""
    rx = 0
    for char in chars[:cx]:
        if char == "\t":
            rx += (TAB_STOP - 1) - (rx % TAB_STOP)
        rx += 1
    return rx


def rx_to_cx(chars: str, rx: int) -> int:
    """Character index whose rendered span holds column ``rx``."""
    cur_rx = 0
    for cx, char in enumerate(chars):
        if char == "\t":
            cur_rx += (TAB_STOP - 1) - (cur_rx % TAB_STOP)
        cur_rx += 1
        if cur_rx > rx:
            return cx
    return len(chars)


def render_tabs(chars: str) -> str:
    """``chars`` with each tab expanded to spaces up to the next tab stop."""
    out: List[str] = []
    width = 0
    for char in chars:
        if char == "\t":
            pad = TAB_STOP - (width % TAB_STOP)
            out.append(" " * pad)
            width += pad
        else:
            out.append(char)
            width += 1
    return "".join(out)


@dataclass
class Row:
    """One line of the file, its rendered form and its highlighting."""

    chars: str = ""
    render: str = ""
    hl: List[Highlight] = field(default_factory=list)
    open_comment: bool = False


class Editor:
    """The state of an editing session on a screen of a given size."""

    def __init__(self, size: Size = Size(rows=24, columns=80)) -> None:
        self.cx = 0
        self.cy = 0
        self.rx = 0
        self.rowoff = 0
        self.coloff = 0
        self.screen_rows = max(size.rows - _STATUS_BAR_LINES, 0)
        self.screen_cols = size.columns
        self.rows: List[Row] = []
        self.dirty = False
        self.filename = ""
        self.status = ""
        self.syntax: Optional[Syntax] = None
        self._last_match = -1
        self._saved_hl: Optional[Tuple[int, List[Highlight]]] = None

    # Row maintenance

    def _update_syntax(self, index: int) -> None:
        while index < len(self.rows):
            row = self.rows[index]
            previous_open = index > 0 and self.rows[index - 1].open_comment
            row.hl, still_open = highlight_row(row.render, self.syntax, previous_open)
            changed = still_open != row.open_comment
            row.open_comment = still_open
            if not changed:
                break
            index += 1

    def _update_row(self, index: int) -> None:
        row = self.rows[index]
        row.render = render_tabs(row.chars)
        self._update_syntax(index)

    def _select_syntax(self) -> None:
        syntax = find_syntax(self.filename)
        if syntax is None:
            return
        self.syntax = syntax
        for index in range(len(self.rows)):
            self._update_row(index)

    def insert_row(self, at: int, text: str) -> None:
        """Insert a line before index ``at``; out-of-range positions are ignored."""
        if at < 0 or at > len(self.rows):
            return
        self.rows.insert(at, Row(chars=text))
        self._update_row(at)
        self.dirty = True

    def delete_row(self, at: int) -> None:
        """Remove the line at ``at``; out-of-range positions are ignored."""
        if at < 0 or at >= len(self.rows):
            return
        del self.rows[at]
        self.dirty = True

    def _row_insert_char(self, index: int, at: int, char: str) -> None:
        row = self.rows[index]
        if at < 0 or at > len(row.chars):
            at = len(row.chars)
        row.chars = row.chars[:at] + char + row.chars[at:]
        self._update_row(index)
        self.dirty = True

    def _row_delete_char(self, index: int, at: int) -> None:
        row = self.rows[index]
        if at < 0 or at >= len(row.chars):
            return
        row.chars = row.chars[:at] + row.chars[at + 1:]
        self._update_row(index)
        self.dirty = True

    # Editing at the cursor

    def insert_char(self, char: str) -> None:
        """Insert ``char`` at the cursor and move past it."""
        if self.cy == len(self.rows):
            self.insert_row(len(self.rows), "")
        self._row_insert_char(self.cy, self.cx, char)
        self.cx += 1

    def insert_newline(self) -> None:
        """Split the line at the cursor and move to the start of the new line."""
        if self.cx == 0:
            self.insert_row(self.cy, "")
        else:
            row = self.rows[self.cy]
            self.insert_row(self.cy + 1, row.chars[self.cx:])
            row = self.rows[self.cy]
            row.chars = row.chars[: self.cx]
            self._update_row(self.cy)
        self.cy += 1
        self.cx = 0

    def delete_char(self) -> None:
        """Delete the character before the cursor, joining lines at column 0."""
        if self.cy == len(self.rows):
            return
        if self.cx == 0 and self.cy == 0:
            return
        if self.cx > 0:
            self._row_delete_char(self.cy, self.cx - 1)
            self.cx -= 1
        else:
            previous = self.rows[self.cy - 1]
            self.cx = len(previous.chars)
            previous.chars += self.rows[self.cy].chars
            self._update_row(self.cy - 1)
            self.dirty = True
            self.delete_row(self.cy)
            self.cy -= 1

    def move_cursor(self, direction: Direction) -> None:
        """Move the cursor one step, wrapping across line ends."""
        direction = Direction(direction)
        row = self.rows[self.cy] if self.cy < len(self.rows) else None
        if direction is Direction.LEFT:
            if self.cx != 0:
                self.cx -= 1
            elif self.cy > 0:
                self.cy -= 1
                self.cx = len(self.rows[self.cy].chars)
        elif direction is Direction.RIGHT:
            if row is not None and self.cx < len(row.chars):
                self.cx += 1
            elif row is not None and self.cx == len(row.chars):
                self.cy += 1
                self.cx = 0
        elif direction is Direction.UP:
            if self.cy != 0:
                self.cy -= 1
        elif direction is Direction.DOWN:
            if self.cy < len(self.rows):
                self.cy += 1
        row = self.rows[self.cy] if self.cy < len(self.rows) else None
        row_length = len(row.chars) if row is not None else 0
        if self.cx > row_length:
            self.cx = row_length

    # Files

    def to_text(self) -> str:
        """The file contents: every line followed by a newline."""
        return "".join(row.chars + "\n" for row in self.rows)

    def open(self, path: Union[str, Path]) -> None:
        """Load ``path``, replacing nothing but appending its lines."""
        self.filename = str(path)
        self._select_syntax()
        with open(path, encoding="utf-8", newline="") as handle:
            content = handle.read()
        lines = content.split("\n")
        if lines and lines[-1] == "":
            lines.pop()
        for line in lines:
            self.insert_row(len(self.rows), line.rstrip("\r\n"))
        self.dirty = False

    def save(self, path: Union[str, Path, None] = None) -> Optional[int]:
        """Write the text to ``path`` or the current file; return bytes written.

        Without any file name the save is aborted and None is returned.
        """
        if path is not None:
            self.filename = str(path)
            self._select_syntax()
        if not self.filename:
            self.set_status("Save aborted")
            return None
        data = self.to_text().encode("utf-8")
        Path(self.filename).write_bytes(data)
        self.dirty = False
        self.set_status(f"{len(data)} bytes written to disk")
        return len(data)

    # Search

    def _restore_match(self) -> None:
        if self._saved_hl is None:
            return
        index, saved = self._saved_hl
        if index < len(self.rows):
            self.rows[index].hl = saved
        self._saved_hl = None

    def find_next(self, query: str, direction: Optional[Direction] = None) -> bool:
        """Move to the next line holding ``query`` and highlight the match.

        Without a direction the search starts afresh; LEFT/UP search
        backwards from the last match, RIGHT/DOWN forwards. Wraps around.
        """
        self._restore_match()
        if direction is None:
            self._last_match = -1
            step = 1
        elif Direction(direction) in (Direction.RIGHT, Direction.DOWN):
            step = 1
        else:
            step = -1
        if self._last_match == -1:
            step = 1
        count = len(self.rows)
        current = self._last_match
        for _ in range(count):
            current += step
            if current == -1:
                current = count - 1
            elif current == count:
                current = 0
            row = self.rows[current]
            position = row.render.find(query)
            if position == -1:
                continue
            self._last_match = current
            self.cy = current
            self.cx = rx_to_cx(row.chars, position)
            self.rowoff = count
            self._saved_hl = (current, list(row.hl))
            end = min(position + len(query), len(row.hl))
            row.hl[position:end] = [Highlight.MATCH] * (end - position)
            return True
        return False

    # Display

    def scroll(self) -> None:
        """Adjust the offsets so the cursor is on screen."""
        self.rx = 0
        if self.cy < len(self.rows):
            self.rx = cx_to_rx(self.rows[self.cy].chars, self.cx)
        if self.cy < self.rowoff:
            self.rowoff = self.cy
        if self.cy >= self.rowoff + self.screen_rows:
            self.rowoff = self.cy - self.screen_rows + 1
        if self.rx < self.coloff:
            self.coloff = self.rx
        if self.rx >= self.coloff + self.screen_cols:
            self.coloff = self.rx - self.screen_cols + 1

    def status_bar(self) -> str:
        """The reversed status line: file name, line count, type and position."""
        left1 = self.filename or "[No Name]"
        left2 = f" - {len(self.rows)} lines "
        if self.dirty:
            left2 += "(modified)"
        right = f"{self.syntax.filetype} | " if self.syntax is not None else "no ft | "
        right += f"{self.cy + 1}/{len(self.rows)}"
        body = ""
        if len(left1) + len(left2) + len(right) < self.screen_cols:
            gap = self.screen_cols - len(right) - len(left1) - len(left2)
            body = left1 + left2 + " " * gap + right
        else:
            fixed = len(right) + len(left2)
            if self.screen_cols > fixed:
                keep = self.screen_cols - fixed
                body = left1[len(left1) - keep:] + left2 + right
        return style(Style.REVERSED) + body + style(Style.RESET) + "\r\n"

    def set_status(self, message: str) -> None:
        """Set the message shown under the status bar, cut to the screen width."""
        self.status = message[: self.screen_cols]