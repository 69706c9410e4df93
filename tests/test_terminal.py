from termwin.terminal import clear_scrollback, terminal_title


def test_title_sequence():
    assert terminal_title("hello") == "\x1b]0;hello\a"


def test_title_keeps_unicode():
    result = terminal_title("Čertík")
    assert result.startswith("\x1b]0;")
    assert result.endswith("\a")
    assert result[4:-1] == "Čertík"


def test_empty_title():
    assert terminal_title("") == "\x1b]0;\a"


def test_clear_scrollback():
    assert clear_scrollback() == "\x1b[3J"