"""Game state — board, turn and check flags owned by the engine."""

from __future__ import annotations

from dataclasses import dataclass, field

from raychess.core.board import Board
from raychess.core.enums import Side
from raychess.core.piece import Piece
from raychess.game.interfaces import GamePhase


@dataclass
class GameState:
    """Mutable state of one game.

    This is a pure data class; only :class:`GameEngine` writes to it.
    ``threats`` holds the pieces attacking the side-to-move's king and is
    empty whenever ``in_check`` is false.
    """

    board: Board = field(default_factory=Board.initial)
    turn: Side = Side.WHITE
    in_check: bool = False
    checkmate: bool = False
    threats: list[Piece] = field(default_factory=list)
    captured: list[Piece] = field(default_factory=list)
    ply_count: int = 0

    def reset(self, board: Board | None = None, turn: Side = Side.WHITE) -> None:
        """Start over from *board* (standard layout by default)."""
        self.board = board if board is not None else Board.initial()
        self.turn = turn
        self.in_check = False
        self.checkmate = False
        self.threats = []
        self.captured = []
        self.ply_count = 0

    # ── Query helpers ────────────────────────────────────────────────────

    @property
    def phase(self) -> GamePhase:
        if self.checkmate:
            return GamePhase.CHECKMATE
        if self.in_check:
            return GamePhase.IN_CHECK
        return GamePhase.NORMAL

    @property
    def winner(self) -> Side | None:
        """The side that delivered mate, if any."""
        return self.turn.opposite if self.checkmate else None
