"""Interfaces and state names for the game layer."""

from __future__ import annotations

from abc import ABC, abstractmethod
from enum import IntEnum, auto
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from raychess.core.enums import Side
    from raychess.core.move_generator import LegalMoves
    from raychess.core.types import Coordinate


# ── Game phase FSM states ────────────────────────────────────────────────────


class GamePhase(IntEnum):
    """Finite-state-machine states for a chess game."""

    NORMAL = auto()
    IN_CHECK = auto()
    CHECKMATE = auto()  # terminal


# ── Abstract interfaces ─────────────────────────────────────────────────────


class IGameEngine(ABC):
    """What the command loop and board window rely on."""

    __slots__ = ()

    @property
    @abstractmethod
    def turn(self) -> Side: ...

    @property
    @abstractmethod
    def in_check(self) -> bool: ...

    @property
    @abstractmethod
    def checkmate(self) -> bool: ...

    @abstractmethod
    def move_piece(self, source: Coordinate, target: Coordinate) -> bool:
        """Move or capture. Returns True if applied.

        Raises:
            NoSuchPieceError: *source* is empty.
        """

    @abstractmethod
    def get_legal_moves(self, position: Coordinate) -> LegalMoves:
        """Legal destinations of the piece on *position*.

        Raises:
            NoSuchPieceError: *position* is empty.
        """
