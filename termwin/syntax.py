"""Syntax highlighting of editor rows, one rendered line at a time."""

from __future__ import annotations

from dataclasses import dataclass
from enum import IntEnum
from typing import List, Optional, Tuple

from termwin.color import Color, ColorName

_SEPARATORS = ",.()+-/*=~%<>[];"
_C_SPACE = " \t\n\v\f\r"
_DIGITS = "0123456789"


class Highlight(IntEnum):
    """The highlight class of one rendered character."""

    NORMAL = 0
    COMMENT = 1
    MLCOMMENT = 2
    KEYWORD1 = 3
    KEYWORD2 = 4
    STRING = 5
    NUMBER = 6
    MATCH = 7


@dataclass(frozen=True)
class Syntax:
    """Highlighting rules for one file type.

    Keywords ending in ``|`` are secondary keywords (types); the ``|`` is
    not part of the word.
    """

    filetype: str
    filematch: Tuple[str, ...] = ()
    keywords: Tuple[str, ...] = ()
    singleline_comment_start: str = ""
    multiline_comment_start: str = ""
    multiline_comment_end: str = ""
    highlight_numbers: bool = False
    highlight_strings: bool = False


_C_SYNTAX = Syntax(
    filetype="c",
    filematch=(".c", ".h", ".hpp", ".cpp"),
    keywords=(
        "switch", "if", "while", "for", "break", "continue", "return", "else",
        "struct", "union", "typedef", "static", "enum", "class", "case",
        "int|", "long|", "double|", "float|", "char|", "unsigned|", "signed|",
        "void|", "bool|",
    ),
    singleline_comment_start="//",
    multiline_comment_start="/*",
    multiline_comment_end="*/",
    highlight_numbers=True,
    highlight_strings=True,
)

_DATABASE: Tuple[Syntax, ...] = (_C_SYNTAX,)

_COLORS = {
    Highlight.COMMENT: ColorName.BRIGHT_CYAN,
    Highlight.MLCOMMENT: ColorName.CYAN,
    Highlight.KEYWORD1: ColorName.YELLOW,
    Highlight.KEYWORD2: ColorName.GREEN,
    Highlight.STRING: ColorName.MAGENTA,
    Highlight.NUMBER: ColorName.RED,
    Highlight.MATCH: ColorName.BLUE,
}


def find_syntax(filename: str) -> Optional[Syntax]:
    """The syntax whose extensions match ``filename``, or None."""
    if not filename:
        return None
    dot = filename.rfind(".")
    if dot == -1:
        return None
    extension = filename[dot:]
    return next(
        (syntax for syntax in _DATABASE if extension in syntax.filematch), None
    )


def is_separator(char: str) -> bool:
    """Whether ``char`` ends a word; the end of the line ("" or NUL) does."""
    return char in ("", "\0") or char in _C_SPACE or char in _SEPARATORS


def highlight_color(highlight: Highlight) -> Color:
    """The foreground color used for a highlight class."""
    return Color.from_name(_COLORS.get(Highlight(highlight), ColorName.GRAY))


def _match_keyword(render: str, i: int, keywords: Tuple[str, ...]) -> Optional[Tuple[int, Highlight]]:
    for keyword in keywords:
        secondary = keyword.endswith("|")
        word = keyword[:-1] if secondary else keyword
        end = i + len(word)
        if render.startswith(word, i) and is_separator(render[end:end + 1]):
            return len(word), Highlight.KEYWORD2 if secondary else Highlight.KEYWORD1
    return None


def highlight_row(
    render: str, syntax: Optional[Syntax], open_comment: bool
) -> Tuple[List[Highlight], bool]:
    """Highlight one rendered row.

    ``open_comment`` tells whether the previous row ended inside a
    multi-line comment. Returns the highlight of each character and whether
    this row ends inside one.
    """
    length = len(render)
    hl = [Highlight.NORMAL] * length
    if syntax is None:
        return hl, False

    scs = syntax.singleline_comment_start
    mcs = syntax.multiline_comment_start
    mce = syntax.multiline_comment_end

    prev_sep = True
    in_string = ""
    in_comment = bool(open_comment)

    i = 0
    while i < length:
        c = render[i]
        prev_hl = hl[i - 1] if i > 0 else Highlight.NORMAL

        if scs and not in_string and not in_comment and render.startswith(scs, i):
            hl[i:] = [Highlight.COMMENT] * (length - i)
            break

        if mcs and mce and not in_string:
            if in_comment:
                hl[i] = Highlight.MLCOMMENT
                if render.startswith(mce, i):
                    hl[i:i + len(mce)] = [Highlight.MLCOMMENT] * len(mce)
                    i += len(mce)
                    in_comment = False
                    prev_sep = True
                else:
                    i += 1
                continue
            if render.startswith(mcs, i):
                hl[i:i + len(mcs)] = [Highlight.MLCOMMENT] * len(mcs)
                i += len(mcs)
                in_comment = True
                continue

        if syntax.highlight_strings:
            if in_string:
                hl[i] = Highlight.STRING
                if c == "\\" and i + 1 < length:
                    hl[i + 1] = Highlight.STRING
                    i += 2
                    continue
                if c == in_string:
                    in_string = ""
                i += 1
                prev_sep = True
                continue
            if c in ('"', "'"):
                in_string = c
                hl[i] = Highlight.STRING
                i += 1
                continue

        if syntax.highlight_numbers:
            if (c in _DIGITS and (prev_sep or prev_hl == Highlight.NUMBER)) or (
                c == "." and prev_hl == Highlight.NUMBER
            ):
                hl[i] = Highlight.NUMBER
                i += 1
                prev_sep = False
                continue

        if prev_sep:
            found = _match_keyword(render, i, syntax.keywords)
            if found is not None:
                size, kind = found
                hl[i:i + size] = [kind] * size
                i += size
                prev_sep = False
                continue

        prev_sep = is_separator(c)
        i += 1

    return hl, in_comment