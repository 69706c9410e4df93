import pytest

from termwin.color import Color, ColorName
from termwin.syntax import (
    Highlight,
    Syntax,
    find_syntax,
    highlight_color,
    highlight_row,
    is_separator,
)

N = Highlight.NORMAL
C = Highlight.COMMENT
ML = Highlight.MLCOMMENT
K1 = Highlight.KEYWORD1
K2 = Highlight.KEYWORD2
S = Highlight.STRING
NUM = Highlight.NUMBER


@pytest.fixture
def c_syntax():
    syntax = find_syntax("main.cpp")
    assert syntax is not None
    return syntax


@pytest.mark.parametrize("name", ["a.c", "a.h", "a.hpp", "a.cpp", "dir/x.y.cpp"])
def test_find_syntax_c_extensions(name):
    syntax = find_syntax(name)
    assert syntax is not None
    assert syntax.filetype == "c"


@pytest.mark.parametrize("name", ["", "Makefile", "script.py", "dir.c/file"])
def test_find_syntax_no_match(name):
    assert find_syntax(name) is None


@pytest.mark.parametrize("char", [" ", "\t", "", "\0", ",", ".", "(", ";", "[", "~"])
def test_separators(char):
    assert is_separator(char) is True


@pytest.mark.parametrize("char", ["a", "Z", "_", "1", '"', "#"])
def test_non_separators(char):
    assert is_separator(char) is False


def test_highlight_color_mapping():
    assert highlight_color(Highlight.COMMENT) == Color.from_name(ColorName.BRIGHT_CYAN)
    assert highlight_color(Highlight.MLCOMMENT) == Color.from_name(ColorName.CYAN)
    assert highlight_color(Highlight.KEYWORD1) == Color.from_name(ColorName.YELLOW)
    assert highlight_color(Highlight.KEYWORD2) == Color.from_name(ColorName.GREEN)
    assert highlight_color(Highlight.STRING) == Color.from_name(ColorName.MAGENTA)
    assert highlight_color(Highlight.NUMBER) == Color.from_name(ColorName.RED)
    assert highlight_color(Highlight.MATCH) == Color.from_name(ColorName.BLUE)
    assert highlight_color(Highlight.NORMAL) == Color.from_name(ColorName.GRAY)


def test_no_syntax_is_all_normal():
    hl, open_comment = highlight_row("int x = 1; /* y", None, True)
    assert hl == [N] * len("int x = 1; /* y")
    assert open_comment is False


def test_declaration_with_comment(c_syntax):
    text = "int x = 42; // hi"
    hl, open_comment = highlight_row(text, c_syntax, False)
    assert len(hl) == len(text)
    assert hl[:3] == [K2] * 3
    assert hl[3:8] == [N] * 5
    assert hl[8:10] == [NUM, NUM]
    assert hl[10:12] == [N, N]
    assert hl[12:] == [C] * 5
    assert open_comment is False


def test_primary_keyword(c_syntax):
    hl, _ = highlight_row("return;", c_syntax, False)
    assert hl == [K1] * 6 + [N]


def test_keyword_inside_identifier_not_highlighted(c_syntax):
    hl, _ = highlight_row("iffy", c_syntax, False)
    assert hl == [N] * 4


def test_keyword_at_end_of_line(c_syntax):
    hl, _ = highlight_row("x else", c_syntax, False)
    assert hl == [N, N] + [K1] * 4


def test_digit_after_letter_not_number(c_syntax):
    hl, _ = highlight_row("x1", c_syntax, False)
    assert hl == [N, N]


def test_decimal_number(c_syntax):
    hl, _ = highlight_row("3.14", c_syntax, False)
    assert hl == [NUM] * 4


def test_string_with_escape(c_syntax):
    text = '"a\\"b" x'
    hl, _ = highlight_row(text, c_syntax, False)
    assert hl[:6] == [S] * 6
    assert hl[6:] == [N, N]


def test_comment_marker_inside_string(c_syntax):
    hl, _ = highlight_row('"//"', c_syntax, False)
    assert hl == [S] * 4


def test_single_quotes(c_syntax):
    hl, _ = highlight_row("'a'", c_syntax, False)
    assert hl == [S] * 3


def test_multiline_comment_opens(c_syntax):
    text = "/* abc"
    hl, open_comment = highlight_row(text, c_syntax, False)
    assert hl == [ML] * len(text)
    assert open_comment is True


def test_multiline_comment_continues_and_closes(c_syntax):
    text = "x */ y"
    hl, open_comment = highlight_row(text, c_syntax, True)
    assert hl[:4] == [ML] * 4
    assert hl[4:] == [N, N]
    assert open_comment is False


def test_multiline_comment_spans_whole_row(c_syntax):
    text = "still inside"
    hl, open_comment = highlight_row(text, c_syntax, True)
    assert hl == [ML] * len(text)
    assert open_comment is True


def test_closed_comment_in_one_row(c_syntax):
    text = "/* a */int"
    hl, open_comment = highlight_row(text, c_syntax, False)
    assert hl[:7] == [ML] * 7
    assert hl[7:] == [K2] * 3
    assert open_comment is False


def test_empty_row(c_syntax):
    assert highlight_row("", c_syntax, False) == ([], False)
    assert highlight_row("", c_syntax, True) == ([], True)


def test_flags_disabled():
    plain = Syntax(filetype="plain", keywords=("if",))
    hl, _ = highlight_row('if "a" 12', plain, False)
    assert hl == [K1, K1] + [N] * 7


def test_highlight_length_matches_input(c_syntax):
    for text in ["int main() { return 0; }", "char* s = \"x\";", "/* */ // x"]:
        hl, _ = highlight_row(text, c_syntax, False)
        assert len(hl) == len(text)