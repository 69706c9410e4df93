"""Library version information."""

from __future__ import annotations

_VERSION = (1, 0, 0)


def version_tuple() -> tuple[int, int, int]:
    """Return (major, minor, patch)."""
    return _VERSION


def version_string() -> str:
    """Return the version as "major.minor.patch"."""
    return ".".join(str(part) for part in _VERSION)