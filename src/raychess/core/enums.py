"""Core enumerations for the chess domain."""

from __future__ import annotations

from enum import IntEnum


class Side(IntEnum):
    """Player side. White starts on rows 0-1 and moves up the board."""

    WHITE = 0
    BLACK = 1

    @property
    def opposite(self) -> Side:
        return Side(1 - self.value)

    @property
    def direction(self) -> int:
        """Sign of a forward step along the y axis."""
        return 1 if self is Side.WHITE else -1

    @property
    def far_rank(self) -> int:
        """Row a pawn of this side promotes on."""
        return 7 if self is Side.WHITE else 0

    def __str__(self) -> str:
        return self.name.capitalize()

    def __format__(self, format_spec: str) -> str:
        return format(str(self), format_spec)


class PieceKind(IntEnum):
    """The six chess piece kinds."""

    PAWN = 1
    KNIGHT = 2
    BISHOP = 3
    ROOK = 4
    QUEEN = 5
    KING = 6
