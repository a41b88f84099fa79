"""Exceptions raised across the core boundary.

Ordinary illegal moves are reported as ``False``, never as exceptions.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from raychess.core.enums import Side
    from raychess.core.types import Coordinate


class ChessError(Exception):
    """Base class for raychess errors."""


class NoSuchPieceError(ChessError):
    """No piece occupies the requested square."""

    def __init__(self, position: Coordinate | None = None) -> None:
        self.position = position
        message = "The selected piece does not exist."
        if position is not None:
            message = f"{message} (at {position})"
        super().__init__(message)


class MissingKingError(NoSuchPieceError):
    """A side has no king on the board."""

    def __init__(self, side: Side) -> None:
        super().__init__()
        self.side = side
        self.args = (f"No {side} king on board",)
