"""Core domain layer — pure chess rules with zero external dependencies.

Quick start::

    from raychess.core import Board, Coordinate, MoveGenerator, Side

    board = Board.initial()
    gen = MoveGenerator(board)
    pawn = board.piece_at(Coordinate(0, 1))
    print(gen.legal_moves(pawn))
"""

from raychess.core.board import Board
from raychess.core.enums import PieceKind, Side
from raychess.core.errors import ChessError, MissingKingError, NoSuchPieceError
from raychess.core.move_generator import LegalMoves, MoveGenerator
from raychess.core.piece import MovementProfile, Piece, movement_profile
from raychess.core.rules import Rules
from raychess.core.types import BOARD_SIZE, Coordinate, all_coordinates, parse_coordinate

__all__ = [
    # Enums
    "PieceKind",
    "Side",
    # Types / helpers
    "BOARD_SIZE",
    "Coordinate",
    "all_coordinates",
    "parse_coordinate",
    # Errors
    "ChessError",
    "MissingKingError",
    "NoSuchPieceError",
    # Domain objects
    "Board",
    "LegalMoves",
    "MovementProfile",
    "MoveGenerator",
    "Piece",
    "Rules",
    "movement_profile",
]
