"""Piece entity and the piece catalog (movement profiles per kind).

A movement profile is a pair of ray tables.  Each ray is an ordered
sequence of offsets of increasing distance in one direction; generation
walks a ray until the first blocking condition.  Sliders get seven-step
rays, knights and kings get eight one-step rays, and pawns get a forward
ray for moves and two one-step diagonal rays for attacks.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import TypeAlias

from raychess.core.enums import PieceKind, Side
from raychess.core.types import BOARD_SIZE, Coordinate

Ray: TypeAlias = tuple[Coordinate, ...]
RayTable: TypeAlias = tuple[Ray, ...]


# -- Ray builders -----------------------------------------------------------


def _slide(dx: int, dy: int) -> Ray:
    step = Coordinate(dx, dy)
    return tuple(step * n for n in range(1, BOARD_SIZE))


def _jumps(offsets: tuple[tuple[int, int], ...]) -> RayTable:
    return tuple((Coordinate(dx, dy),) for dx, dy in offsets)


ROOK_RAYS: RayTable = tuple(_slide(dx, dy) for dx, dy in ((-1, 0), (1, 0), (0, 1), (0, -1)))
BISHOP_RAYS: RayTable = tuple(
    _slide(dx, dy) for dx, dy in ((1, 1), (-1, 1), (1, -1), (-1, -1))
)
QUEEN_RAYS: RayTable = ROOK_RAYS + BISHOP_RAYS

KNIGHT_RAYS: RayTable = _jumps(
    ((1, 2), (2, 1), (2, -1), (1, -2), (-1, -2), (-2, -1), (-2, 1), (-1, 2))
)
KING_RAYS: RayTable = _jumps(
    ((-1, 1), (0, 1), (1, 1), (1, 0), (1, -1), (0, -1), (-1, -1), (-1, 0))
)


@dataclass(frozen=True, slots=True)
class MovementProfile:
    """Ray tables for quiet moves and for attacks."""

    moves: RayTable
    attacks: RayTable


_FIXED_PROFILES: dict[PieceKind, MovementProfile] = {
    PieceKind.ROOK: MovementProfile(ROOK_RAYS, ROOK_RAYS),
    PieceKind.BISHOP: MovementProfile(BISHOP_RAYS, BISHOP_RAYS),
    PieceKind.QUEEN: MovementProfile(QUEEN_RAYS, QUEEN_RAYS),
    PieceKind.KNIGHT: MovementProfile(KNIGHT_RAYS, KNIGHT_RAYS),
    PieceKind.KING: MovementProfile(KING_RAYS, KING_RAYS),
}


def _build_pawn_profiles() -> dict[tuple[Side, bool], MovementProfile]:
    profiles: dict[tuple[Side, bool], MovementProfile] = {}
    for side in Side:
        d = side.direction
        attacks = ((Coordinate(-1, d),), (Coordinate(1, d),))
        profiles[(side, False)] = MovementProfile(
            ((Coordinate(0, d), Coordinate(0, 2 * d)),), attacks
        )
        profiles[(side, True)] = MovementProfile(((Coordinate(0, d),),), attacks)
    return profiles


_PAWN_PROFILES = _build_pawn_profiles()


def movement_profile(kind: PieceKind, side: Side, has_moved: bool = False) -> MovementProfile:
    """Look up the movement profile for a piece kind.

    Only pawns depend on *side* (direction of travel) and *has_moved*
    (the double step is lost after the first quiet move; captures keep it).
    """
    if kind == PieceKind.PAWN:
        return _PAWN_PROFILES[(side, has_moved)]
    return _FIXED_PROFILES[kind]


# Two-letter names used by the terminal renderer.
_NAMES: dict[PieceKind, str] = {
    PieceKind.PAWN: "Pa",
    PieceKind.ROOK: "Ro",
    PieceKind.KNIGHT: "Kn",
    PieceKind.BISHOP: "Bi",
    PieceKind.QUEEN: "Qu",
    PieceKind.KING: "Ki",
}

_UNICODE: dict[tuple[Side, PieceKind], str] = {
    (Side.WHITE, PieceKind.PAWN): "♙",
    (Side.WHITE, PieceKind.KNIGHT): "♘",
    (Side.WHITE, PieceKind.BISHOP): "♗",
    (Side.WHITE, PieceKind.ROOK): "♖",
    (Side.WHITE, PieceKind.QUEEN): "♕",
    (Side.WHITE, PieceKind.KING): "♔",
    (Side.BLACK, PieceKind.PAWN): "♟",
    (Side.BLACK, PieceKind.KNIGHT): "♞",
    (Side.BLACK, PieceKind.BISHOP): "♝",
    (Side.BLACK, PieceKind.ROOK): "♜",
    (Side.BLACK, PieceKind.QUEEN): "♛",
    (Side.BLACK, PieceKind.KING): "♚",
}


class Piece:
    """A piece on the board.

    ``index`` and ``side`` are fixed for the lifetime of the game.
    ``position``, ``kind`` (promotion) and ``has_moved`` are mutated in
    place by the game engine only.
    """

    __slots__ = ("_index", "_side", "kind", "position", "has_moved")

    def __init__(
        self,
        index: int,
        side: Side,
        kind: PieceKind,
        position: Coordinate,
        has_moved: bool = False,
    ) -> None:
        self._index = index
        self._side = side
        self.kind = kind
        self.position = position
        self.has_moved = has_moved

    @property
    def index(self) -> int:
        return self._index

    @property
    def side(self) -> Side:
        return self._side

    @property
    def profile(self) -> MovementProfile:
        return movement_profile(self.kind, self._side, self.has_moved)

    @property
    def is_king(self) -> bool:
        return self.kind == PieceKind.KING

    @property
    def name(self) -> str:
        """Two-letter name, e.g. ``"Kn"``."""
        return _NAMES[self.kind]

    @property
    def symbol(self) -> str:
        """Unicode chess symbol, e.g. ♞."""
        return _UNICODE[(self._side, self.kind)]

    def should_promote(self) -> bool:
        """A pawn standing on the far row for its side."""
        return self.kind == PieceKind.PAWN and self.position.y == self._side.far_rank

    def copy(self) -> Piece:
        return Piece(self._index, self._side, self.kind, self.position, self.has_moved)

    def __repr__(self) -> str:
        return (
            f"Piece(index={self._index}, side={self._side.name}, "
            f"kind={self.kind.name}, position={self.position})"
        )
