"""Board-building helpers shared by the tests."""

from __future__ import annotations

from raychess.core.board import Board
from raychess.core.enums import PieceKind, Side
from raychess.core.piece import Piece
from raychess.core.types import Coordinate

W = Side.WHITE
B = Side.BLACK

PAWN = PieceKind.PAWN
KNIGHT = PieceKind.KNIGHT
BISHOP = PieceKind.BISHOP
ROOK = PieceKind.ROOK
QUEEN = PieceKind.QUEEN
KING = PieceKind.KING


def c(x: int, y: int) -> Coordinate:
    return Coordinate(x, y)


def make_board(*specs: tuple[Side, PieceKind, int, int]) -> Board:
    """Board whose piece indexes follow the order of *specs*.

    Pawns placed off their starting row are marked as already moved.
    """
    pieces = []
    for index, (side, kind, x, y) in enumerate(specs):
        start_row = 1 if side is Side.WHITE else 6
        has_moved = kind == PieceKind.PAWN and y != start_row
        pieces.append(Piece(index, side, kind, Coordinate(x, y), has_moved))
    return Board.from_pieces(pieces)


def positions(board: Board) -> list[Coordinate | None]:
    return [None if p is None else p.position for p in board]
