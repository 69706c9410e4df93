# termwin

Building blocks for terminal applications in plain Python, with no
dependencies. Everything here produces strings and data; nothing writes to or
reads from a terminal by itself.

## What is in the package

- **`termwin.style`** – `Style` is an `IntEnum` of SGR attributes (bold, dim,
  italic, underline, blink, fonts, frame, overline, bars, superscript, …;
  several names share a code, e.g. `RESET_BOLD` and `RESET_DIM`).
  `style(value)` returns the escape sequence `ESC[<code>m`; for
  `Style.DEFAULT_BACKGROUND_COLOR` it also appends `ESC[K` so the default
  background fills the rest of the line.
- **`termwin.color`** – `ColorName` holds the 3/4-bit colors (`RED`,
  `BRIGHT_BLUE`, `DEFAULT`, …), `ColorType` the resolution a color was given
  in, and `Color` is a frozen dataclass built with `Color.from_name()`,
  `Color.from_8bit()` or `Color.from_rgb()` (components are checked to be
  0–255). `color_fg()` and `color_bg()` accept a `Color`, a `ColorName`, an
  8-bit index or an `(r, g, b)` tuple and return the matching foreground or
  background sequence (`ESC[31m`, `ESC[38;5;Nm`, `ESC[38;2;R;G;Bm`, …).
- **`termwin.geometry`** – frozen dataclasses `Position(row, column)` (both
  default to 1) and `Size(rows, columns)` with `Size.area()`. Values must be
  integers in 0–65535.
- **`termwin.terminal`** – `terminal_title(title)` returns the sequence that
  sets the window title; `clear_scrollback()` returns `ESC[3J`.
- **`termwin.window`** – `Window(size)` is an off-screen grid of `Cell`s
  addressed by 1-based `(column, row)`. Each `Cell` has `char`, `fg`, `bg`,
  `fg_reset`, `bg_reset` and `style`. Use `set_char()`, `set_fg()`,
  `set_bg()`, `set_fg_reset()`, `set_bg_reset()`, `set_style()`,
  `set_cursor_pos()`, `print_str()` (with optional `indent` and
  `move_cursor`), `fill_fg()`, `fill_bg()`, `fill_style()`, `print_rect()`
  and `print_border()` (box-drawing characters, or `|`, `-`, `+` with
  `utf8=False`), `clear()`, `inside()` and `set_height()` (growing only).
  `render(x0, y0, term)` returns one string that draws the window, emitting
  style and color sequences only where they change from the previous cell;
  with `term=True` it also hides the cursor, positions each row at
  `(x0, y0)`, and finally moves to and shows the window's cursor.
- **`termwin.syntax`** – highlighting for C-like files. `find_syntax(filename)`
  picks a `Syntax` by extension (`.c`, `.h`, `.hpp`, `.cpp`) or returns `None`;
  `highlight_row(render, syntax, open_comment)` returns a list of `Highlight`
  values for one line and whether it ends inside a `/* */` comment;
  `highlight_color()` maps a `Highlight` to a `Color`; `is_separator()` tells
  word boundaries.
- **`termwin.editor`** – `Editor(size)` models an editing session: rows of
  text (`Row` with `chars`, tab-expanded `render` and `hl`), a cursor
  (`cx`, `cy`, `rx`) and scroll offsets. It offers `insert_row()`,
  `delete_row()`, `insert_char()`, `insert_newline()`, `delete_char()`,
  `move_cursor(Direction)`, `find_next(query, direction)` (wrapping search
  that marks the match as `Highlight.MATCH`), `scroll()`, `open(path)`,
  `save(path=None)` (returns the number of bytes written, or `None` and a
  "Save aborted" status when there is no file name), `to_text()`,
  `status_bar()` and `set_status()`. Helpers `cx_to_rx()`, `rx_to_cx()` and
  `render_tabs()` handle tab stops of 8.
- **`termwin.exception`** – `TerminalError` carries `message`, `code` and
  `context`; the window raises it for out-of-range cells and for shrinking.
- **`termwin.version`** – `version_string()` returns `"1.0.0"` and
  `version_tuple()` returns `(1, 0, 0)`.

## Installation

```
pip install termwin
```

## Example

```python
from termwin.color import Color, ColorName, color_fg
from termwin.geometry import Size
from termwin.style import Style, style
from termwin.window import Window

print(color_fg(ColorName.RED) + "red text" + style(Style.RESET))

win = Window(Size(rows=5, columns=20))
win.print_border(utf8=True)
win.print_str(3, 3, "hello")
win.fill_fg(3, 3, 7, 3, Color.from_name(ColorName.GREEN))
win.fill_style(3, 3, 7, 3, Style.BOLD)
print(win.render(1, 1, False))
```

## What it does not do

The package does not control a terminal: it has no raw or cooked input mode,
does not read keys, mouse or resize events, does not query the screen size or
cursor position, and does not detect color or UTF-8 support. It converts
between no color resolutions. `Editor` is a model only: it has no key
handling loop, does not draw its text rows to the screen, and there is no
command to start it.