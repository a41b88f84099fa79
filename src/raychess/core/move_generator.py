"""Legal move / attack generation and attack detection.

Every candidate square is found by walking the piece's rays.  Whether a
candidate leaves the mover's king safe is decided on a successor board
(:meth:`Board.relocated`), so generation never mutates the board it was
given and generators over the same board can run side by side.
"""

from __future__ import annotations

from typing import NamedTuple

from raychess.core.board import Board
from raychess.core.enums import Side
from raychess.core.piece import Piece
from raychess.core.types import Coordinate


class LegalMoves(NamedTuple):
    """Destinations for one piece: quiet moves and captures."""

    moves: list[Coordinate]
    attacks: list[Coordinate]

    @property
    def count(self) -> int:
        return len(self.moves) + len(self.attacks)


class MoveGenerator:
    """Generates legal moves and attacks on a :class:`Board`."""

    __slots__ = ("_board", "_occupancy")

    def __init__(self, board: Board) -> None:
        self._board = board
        self._occupancy: dict[Coordinate, Piece] = {
            p.position: p for p in board.pieces()
        }

    @property
    def board(self) -> Board:
        return self._board

    # -- Public API ---------------------------------------------------------

    def legal_moves(self, piece: Piece) -> list[Coordinate]:
        """Quiet moves that keep the mover's king out of check.

        A ray stops at the first square that is off the board, occupied,
        or unsafe for the king.
        """
        occupancy = self._occupancy
        legal: list[Coordinate] = []
        for ray in piece.profile.moves:
            for offset in ray:
                target = piece.position + offset
                if (
                    target.is_out_of_bounds()
                    or target in occupancy
                    or not self._is_safe_after(piece, target)
                ):
                    break
                legal.append(target)
        return legal

    def attack_targets(self, piece: Piece, friendly_fire: bool = False) -> list[Coordinate]:
        """First occupied square on each attack ray.

        The square is kept when it holds an opposing piece, or any piece
        when *friendly_fire* is set (defence queries only).
        """
        occupancy = self._occupancy
        targets: list[Coordinate] = []
        for ray in piece.profile.attacks:
            for offset in ray:
                target = piece.position + offset
                if target.is_out_of_bounds():
                    break
                occupant = occupancy.get(target)
                if occupant is None:
                    continue
                if occupant.side != piece.side or friendly_fire:
                    targets.append(target)
                break
        return targets

    def legal_attacks(self, piece: Piece) -> list[Coordinate]:
        """Captures that do not expose the mover's own king.

        For the king itself this means no opposing piece defends the
        captured square.
        """
        return [t for t in self.attack_targets(piece) if self._is_safe_after(piece, t)]

    def legal_check_moves(self, piece: Piece) -> list[Coordinate]:
        """Quiet moves while the mover's side is in check.

        Every legal move is already filtered for king safety, so this
        equals :meth:`legal_moves`.
        """
        return self.legal_moves(piece)

    def legal_check_attacks(self, piece: Piece) -> list[Coordinate]:
        """Captures that leave the mover's king out of check.

        Same filter as :meth:`legal_attacks`; a capture that does not
        remove the checker fails it.
        """
        return self.legal_attacks(piece)

    def moves_for(self, piece: Piece, in_check: bool) -> list[Coordinate]:
        return self.legal_check_moves(piece) if in_check else self.legal_moves(piece)

    def attacks_for(self, piece: Piece, in_check: bool) -> list[Coordinate]:
        return self.legal_check_attacks(piece) if in_check else self.legal_attacks(piece)

    def targets(self, piece: Piece, in_check: bool) -> LegalMoves:
        """Both move and attack sets under the given check state."""
        return LegalMoves(self.moves_for(piece, in_check), self.attacks_for(piece, in_check))

    # -- Attempts -----------------------------------------------------------

    def try_move(self, piece: Piece, target: Coordinate, in_check: bool) -> bool:
        """Relocate *piece* to *target* if it is a legal quiet move.

        Only a quiet move spends a pawn's double step.
        """
        if target not in self.moves_for(piece, in_check):
            return False
        self._relocate(piece, target)
        piece.has_moved = True
        return True

    def try_attack(self, piece: Piece, target: Coordinate, in_check: bool) -> bool:
        """Relocate *piece* onto an opposing piece at *target* if legal.

        The captured piece is not removed here; the caller clears its
        slot.
        """
        occupant = self._occupancy.get(target)
        if occupant is None or occupant.side == piece.side:
            return False
        if target not in self.attacks_for(piece, in_check):
            return False
        self._relocate(piece, target)
        return True

    # -- Attack detection ---------------------------------------------------

    def threats(self, index: int, position: Coordinate) -> list[Piece]:
        """Pieces other than *index* whose attack rays reach *position*.

        Attack rays are walked with friendly fire on, so a defender of a
        piece on *position* counts as a threat regardless of side.
        """
        return [
            piece
            for piece in self._board.pieces()
            if piece.index != index and position in self.attack_targets(piece, True)
        ]

    def check_threats(self, side: Side) -> list[Piece]:
        """Opposing pieces attacking *side*'s king.

        Raises:
            MissingKingError: *side* has no king.
        """
        king = self._board.king(side)
        return [
            piece
            for piece in self._board.pieces(side.opposite)
            if king.position in self.attack_targets(piece, True)
        ]

    def is_in_check(self, side: Side) -> bool:
        return bool(self.check_threats(side))

    # -- Internal helpers ---------------------------------------------------

    def _is_safe_after(self, piece: Piece, target: Coordinate) -> bool:
        successor = self._board.relocated(piece.index, target)
        return not MoveGenerator(successor).is_in_check(piece.side)

    def _relocate(self, piece: Piece, target: Coordinate) -> None:
        del self._occupancy[piece.position]
        piece.position = target
        self._occupancy[target] = piece
