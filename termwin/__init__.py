"""Terminal styles and colors, an off-screen rendering window, syntax highlighting and a small editor model."""

__version__ = "1.0.0"

__all__ = [
    "color",
    "editor",
    "exception",
    "geometry",
    "style",
    "syntax",
    "terminal",
    "version",
    "window",
]