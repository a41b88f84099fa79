"""High-level rules: check and checkmate detection."""

from __future__ import annotations

from raychess.core.board import Board
from raychess.core.enums import Side
from raychess.core.move_generator import LegalMoves, MoveGenerator
from raychess.core.piece import Piece
from raychess.core.types import Coordinate


class Rules:
    """Static rule-checker that operates on a :class:`Board`."""

    # Checkmate policy:
    # - Only the king's own escapes (moves and captures) are counted.
    #   Blocking the checking line or capturing the checker with another
    #   piece is not considered, so some positions with a single
    #   capturable/blockable checker are reported as mate.

    @staticmethod
    def threats(board: Board, index: int, position: Coordinate) -> list[Piece]:
        return MoveGenerator(board).threats(index, position)

    @staticmethod
    def check_threats(board: Board, side: Side) -> list[Piece]:
        return MoveGenerator(board).check_threats(side)

    @staticmethod
    def is_in_check(board: Board, side: Side) -> bool:
        return MoveGenerator(board).is_in_check(side)

    @staticmethod
    def king_escapes(board: Board, side: Side) -> LegalMoves:
        """Squares *side*'s king may reach while in check."""
        gen = MoveGenerator(board)
        return gen.targets(board.king(side), in_check=True)

    @staticmethod
    def is_checkmate(board: Board, side: Side) -> bool:
        if not Rules.is_in_check(board, side):
            return False
        return Rules.king_escapes(board, side).count == 0
