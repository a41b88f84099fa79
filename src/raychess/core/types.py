"""Coordinate value type and parsing helpers.

Board layout: ``x`` is the column, ``y`` is the row, both 0-7.
White's back row is ``y == 0``, Black's is ``y == 7``.
"""

from __future__ import annotations

from dataclasses import dataclass

BOARD_SIZE = 8


@dataclass(frozen=True, slots=True)
class Coordinate:
    """Immutable 2D board position (or offset)."""

    x: int
    y: int

    # ── Arithmetic ───────────────────────────────────────────────────────

    def __add__(self, other: Coordinate) -> Coordinate:
        return Coordinate(self.x + other.x, self.y + other.y)

    def __sub__(self, other: Coordinate) -> Coordinate:
        return Coordinate(self.x - other.x, self.y - other.y)

    def __mul__(self, factor: int) -> Coordinate:
        return Coordinate(self.x * factor, self.y * factor)

    __rmul__ = __mul__

    # ── Bounds ───────────────────────────────────────────────────────────

    def is_out_of_bounds(self) -> bool:
        return (
            self.x >= BOARD_SIZE or self.x <= -1 or self.y >= BOARD_SIZE or self.y <= -1
        )

    # ── Display ──────────────────────────────────────────────────────────

    def __str__(self) -> str:
        return f"({self.x}, {self.y})"


def parse_coordinate(text: str) -> Coordinate:
    """Parse ``"x y"`` (two whitespace-separated integers) into a Coordinate.

    Raises:
        ValueError: On non-numeric input or the wrong number of values.
    """
    parts = text.split()
    if len(parts) != 2:
        raise ValueError(f"Expected two integers, got {text!r}")
    try:
        x, y = (int(part) for part in parts)
    except ValueError:
        raise ValueError(f"Invalid coordinate: {text!r}") from None
    return Coordinate(x, y)


def all_coordinates() -> list[Coordinate]:
    """Every on-board coordinate, row by row starting at ``y == 0``."""
    return [Coordinate(x, y) for y in range(BOARD_SIZE) for x in range(BOARD_SIZE)]
