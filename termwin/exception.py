"""The error raised by terminal operations."""

from __future__ import annotations


class TerminalError(Exception):
    """A terminal failure with a message, a numeric code and optional context."""

    def __init__(self, message: str, code: int = 0, context: str = "") -> None:
        super().__init__(message)
        self.message = message
        self.code = code
        self.context = context

    def __str__(self) -> str:
        if self.context:
            return f"{self.context}: {self.message}"
        return self.message