"""Whole-terminal escape sequences."""

from __future__ import annotations


def terminal_title(title: str) -> str:
    """Sequence that sets the window title (supported by some terminals)."""
    return "\x1b]0;" + title + "\a"


def clear_scrollback() -> str:
    """Sequence that clears the screen and the scroll-back buffer."""
    return "\x1b[3J"