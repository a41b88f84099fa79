"""Board - the fixed set of piece slots for one game."""

from __future__ import annotations

from collections.abc import Iterable, Iterator

from raychess.core.enums import PieceKind, Side
from raychess.core.errors import MissingKingError
from raychess.core.piece import Piece
from raychess.core.types import BOARD_SIZE, Coordinate

_BACK_RANK: tuple[tuple[PieceKind, tuple[int, ...]], ...] = (
    (PieceKind.ROOK, (0, 7)),
    (PieceKind.KNIGHT, (1, 6)),
    (PieceKind.BISHOP, (2, 5)),
    (PieceKind.QUEEN, (3,)),
    (PieceKind.KING, (4,)),
)


class Board:
    """Slots of optional pieces, keyed by piece index.

    A captured piece leaves an empty slot behind; slots are never
    compacted and indexes are never reused.
    """

    __slots__ = ("_slots",)

    def __init__(self, size: int = 0) -> None:
        self._slots: list[Piece | None] = [None] * size

    # -- Factories ----------------------------------------------------------

    @classmethod
    def initial(cls) -> Board:
        """Standard starting layout.

        Indexes 0-15 are White (pawns, rooks, knights, bishops, queen,
        king) and 16-31 repeat the same order for Black.
        """
        pieces: list[Piece] = []
        for side in Side:
            pawn_row = 1 if side is Side.WHITE else 6
            back_row = 0 if side is Side.WHITE else 7
            for x in range(BOARD_SIZE):
                pieces.append(
                    Piece(len(pieces), side, PieceKind.PAWN, Coordinate(x, pawn_row))
                )
            for kind, columns in _BACK_RANK:
                for x in columns:
                    pieces.append(Piece(len(pieces), side, kind, Coordinate(x, back_row)))
        return cls.from_pieces(pieces)

    @classmethod
    def from_pieces(cls, pieces: Iterable[Piece]) -> Board:
        """Build a board from pieces carrying their own indexes.

        Raises:
            ValueError: Duplicate index, shared square or off-board piece.
        """
        pieces = list(pieces)
        board = cls(max((p.index for p in pieces), default=-1) + 1)
        occupied: set[Coordinate] = set()
        for piece in pieces:
            if board._slots[piece.index] is not None:
                raise ValueError(f"Duplicate piece index: {piece.index}")
            if piece.position.is_out_of_bounds():
                raise ValueError(f"Piece {piece.index} is off the board: {piece.position}")
            if piece.position in occupied:
                raise ValueError(f"Square {piece.position} is occupied twice")
            occupied.add(piece.position)
            board._slots[piece.index] = piece
        return board

    # -- Element access -----------------------------------------------------

    def __len__(self) -> int:
        return len(self._slots)

    def __getitem__(self, index: int) -> Piece | None:
        return self._slots[index]

    def __iter__(self) -> Iterator[Piece | None]:
        return iter(self._slots)

    def pieces(self, side: Side | None = None) -> list[Piece]:
        """Occupied slots in index order, optionally for one side."""
        return [
            p for p in self._slots if p is not None and (side is None or p.side == side)
        ]

    def piece_at(self, position: Coordinate) -> Piece | None:
        for piece in self._slots:
            if piece is not None and piece.position == position:
                return piece
        return None

    def king(self, side: Side) -> Piece:
        """Return *side*'s king.

        Raises:
            MissingKingError: The side has no king on the board.
        """
        for piece in self._slots:
            if piece is not None and piece.is_king and piece.side == side:
                return piece
        raise MissingKingError(side)

    def snapshot(self) -> tuple[Piece | None, ...]:
        """Detached copy of every slot, empty ones included."""
        return tuple(None if p is None else p.copy() for p in self._slots)

    # -- Mutation / copying -------------------------------------------------

    def remove(self, index: int) -> Piece:
        """Clear slot *index* and return the piece that was there."""
        piece = self._slots[index]
        if piece is None:
            raise KeyError(f"Slot {index} is already empty")
        self._slots[index] = None
        return piece

    def promote(self, index: int, kind: PieceKind = PieceKind.QUEEN) -> Piece:
        """Change the kind of the piece in slot *index* in place."""
        piece = self._slots[index]
        if piece is None:
            raise KeyError(f"Slot {index} is empty")
        piece.kind = kind
        return piece

    def copy(self) -> Board:
        b = Board()
        b._slots = [None if p is None else p.copy() for p in self._slots]
        return b

    def relocated(self, index: int, target: Coordinate) -> Board:
        """Successor board with piece *index* on *target*.

        Whatever else stands on *target* is captured.  The receiver is
        left untouched and ``has_moved`` is not changed.
        """
        successor = self.copy()
        occupant = successor.piece_at(target)
        if occupant is not None and occupant.index != index:
            successor._slots[occupant.index] = None
        piece = successor._slots[index]
        if piece is None:
            raise KeyError(f"Slot {index} is empty")
        piece.position = target
        return successor

    # -- Dunder helpers -----------------------------------------------------

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Board):
            return NotImplemented
        return [_key(p) for p in self._slots] == [_key(p) for p in other._slots]

    def __repr__(self) -> str:
        rows: list[str] = []
        for y in range(BOARD_SIZE - 1, -1, -1):
            row = []
            for x in range(BOARD_SIZE):
                p = self.piece_at(Coordinate(x, y))
                if p is None:
                    row.append(".")
                else:
                    letter = "N" if p.kind == PieceKind.KNIGHT else p.kind.name[0]
                    row.append(letter if p.side is Side.WHITE else letter.lower())
            rows.append(f"{y} {' '.join(row)}")
        rows.append("  0 1 2 3 4 5 6 7")
        return "\n".join(rows)


def _key(piece: Piece | None) -> tuple[int, int, int, int, bool] | None:
    if piece is None:
        return None
    return (piece.side, piece.kind, piece.position.x, piece.position.y, piece.has_moved)
