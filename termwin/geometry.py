"""Positions and sizes of terminal cells, 1-based and 16-bit."""

from __future__ import annotations

from dataclasses import dataclass

_MAX = 0xFFFF


def _check(name: str, value: int) -> None:
    if not isinstance(value, int) or isinstance(value, bool):
        raise TypeError(f"{name} must be an int")
    if not 0 <= value <= _MAX:
        raise ValueError(f"{name} out of range: {value}")


@dataclass(frozen=True)
class Position:
    """A cell position; rows and columns start at 1."""

    row: int = 1
    column: int = 1

    def __post_init__(self) -> None:
        _check("row", self.row)
        _check("column", self.column)


@dataclass(frozen=True)
class Size:
    """A rectangular extent in rows and columns."""

    rows: int = 0
    columns: int = 0

    def __post_init__(self) -> None:
        _check("rows", self.rows)
        _check("columns", self.columns)

    def area(self) -> int:
        """Number of cells covered."""
        return self.rows * self.columns