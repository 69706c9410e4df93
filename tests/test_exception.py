import errno

from termwin.exception import TerminalError


def test_message_and_default_code():
    exception = TerminalError("MyException")
    assert exception.message == "MyException"
    assert exception.code == 0


def test_message_and_code():
    exception = TerminalError("MyException2", code=2)
    assert exception.message == "MyException2"
    assert exception.code == 2


def test_errno_context():
    exception = TerminalError("argument list too long", code=errno.E2BIG, context="MyErrno")
    assert exception.context == "MyErrno"
    assert exception.code == errno.E2BIG


def test_str_is_message():
    assert str(TerminalError("MyException")) == "MyException"