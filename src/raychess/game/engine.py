"""GameEngine — the central orchestrator of a chess game.

Coordinates: GameState, MoveGenerator, Rules.
Emits events via simple callbacks so front ends / tests can subscribe.
"""

from __future__ import annotations

import logging
from collections.abc import Callable
from dataclasses import dataclass, field

from raychess.core.board import Board
from raychess.core.enums import PieceKind, Side
from raychess.core.errors import NoSuchPieceError
from raychess.core.move_generator import LegalMoves, MoveGenerator
from raychess.core.piece import Piece
from raychess.core.rules import Rules
from raychess.core.types import Coordinate
from raychess.game.interfaces import GamePhase, IGameEngine
from raychess.game.state import GameState

_LOGGER = logging.getLogger(__name__)

# ── Event definitions ────────────────────────────────────────────────────────

MoveCallback = Callable[[Piece, Coordinate, Coordinate], None]  # piece, from, to
CaptureCallback = Callable[[Piece, Piece], None]  # attacker, captured
PromotionCallback = Callable[[Piece], None]
CheckCallback = Callable[[Side, list[Piece]], None]  # side in check, threats
CheckmateCallback = Callable[[Side], None]  # mated side


@dataclass
class GameEvents:
    """Observable callbacks. Multiple handlers per event."""

    on_move: list[MoveCallback] = field(default_factory=list)
    on_capture: list[CaptureCallback] = field(default_factory=list)
    on_promotion: list[PromotionCallback] = field(default_factory=list)
    on_check: list[CheckCallback] = field(default_factory=list)
    on_checkmate: list[CheckmateCallback] = field(default_factory=list)


# ── Engine ───────────────────────────────────────────────────────────────────


class GameEngine(IGameEngine):
    """Orchestrates a game: validates moves, applies captures and
    promotions, switches turns, tracks check and checkmate.

    Thread-safety: methods are designed to be called from a single thread.
    Legality queries never mutate the board, but ``move_piece`` does.
    """

    __slots__ = ("_state", "events")

    def __init__(self, board: Board | None = None, turn: Side = Side.WHITE) -> None:
        self._state = GameState()
        self.events = GameEvents()
        self.new_game(board, turn)

    # ── Properties ───────────────────────────────────────────────────────

    @property
    def state(self) -> GameState:
        return self._state

    @property
    def board(self) -> Board:
        return self._state.board

    @property
    def turn(self) -> Side:
        return self._state.turn

    @property
    def in_check(self) -> bool:
        return self._state.in_check

    @property
    def checkmate(self) -> bool:
        return self._state.checkmate

    @property
    def threats(self) -> list[Piece]:
        return list(self._state.threats)

    @property
    def phase(self) -> GamePhase:
        return self._state.phase

    # ── Lifecycle ────────────────────────────────────────────────────────

    def new_game(self, board: Board | None = None, turn: Side = Side.WHITE) -> None:
        """Reset to *board* (standard layout by default) with *turn* to move."""
        self._state.reset(board, turn)
        self._update_check()
        if self._state.in_check:
            self._update_checkmate()
        _LOGGER.debug("New game, %s to move, phase %s", turn, self._state.phase.name)

    # ── Queries ──────────────────────────────────────────────────────────

    def piece_at(self, position: Coordinate) -> Piece:
        """Raises :class:`NoSuchPieceError` if *position* is empty."""
        piece = self._state.board.piece_at(position)
        if piece is None:
            raise NoSuchPieceError(position)
        return piece

    def get_legal_moves(self, position: Coordinate) -> LegalMoves:
        piece = self.piece_at(position)
        gen = MoveGenerator(self._state.board)
        return gen.targets(piece, self._state.in_check)

    def legal_moves_for_side(self, side: Side | None = None) -> dict[int, LegalMoves]:
        """Legal destinations for every piece of *side* (side to move by
        default), keyed by piece index."""
        side = self._state.turn if side is None else side
        gen = MoveGenerator(self._state.board)
        in_check = self._state.in_check
        return {
            piece.index: gen.targets(piece, in_check)
            for piece in self._state.board.pieces(side)
        }

    # ── Move application ─────────────────────────────────────────────────

    def move_piece(self, source: Coordinate, target: Coordinate) -> bool:
        state = self._state
        piece = self.piece_at(source)

        if state.checkmate:
            return False
        if piece.side != state.turn:
            _LOGGER.warning(
                "Rejected %s from %s: it is %s's turn", piece.name, source, state.turn
            )
            return False

        gen = MoveGenerator(state.board)
        captured: Piece | None = None
        applied = gen.try_move(piece, target, state.in_check)
        if not applied:
            occupant = state.board.piece_at(target)
            if occupant is not None:
                applied = gen.try_attack(piece, target, state.in_check)
                if applied:
                    captured = state.board.remove(occupant.index)
                    state.captured.append(captured)

        promoted = self._promote_pawns()

        if applied:
            state.turn = state.turn.opposite
            state.ply_count += 1
            _LOGGER.debug("%s %s: %s -> %s", piece.side, piece.name, source, target)

        self._update_check()
        if state.in_check:
            self._update_checkmate()

        if applied:
            self._emit_move(piece, source, target)
            if captured is not None:
                self._emit_capture(piece, captured)
        for p in promoted:
            self._emit_promotion(p)
        if state.in_check and applied:
            self._emit_check(state.turn, state.threats)
        if state.checkmate and applied:
            self._emit_checkmate(state.turn)
        return applied

    # ── Internal helpers ─────────────────────────────────────────────────

    def _promote_pawns(self) -> list[Piece]:
        board = self._state.board
        promoted = [
            board.promote(p.index, PieceKind.QUEEN)
            for p in board.pieces()
            if p.should_promote()
        ]
        for p in promoted:
            _LOGGER.debug("Promoted piece %d to queen at %s", p.index, p.position)
        return promoted

    def _update_check(self) -> None:
        state = self._state
        threats = Rules.check_threats(state.board, state.turn)
        was_in_check = state.in_check
        state.in_check = bool(threats)
        state.threats = threats
        if state.in_check != was_in_check:
            _LOGGER.debug(
                "%s %s check", state.turn, "is in" if state.in_check else "is out of"
            )

    def _update_checkmate(self) -> None:
        state = self._state
        escapes = Rules.king_escapes(state.board, state.turn)
        state.checkmate = escapes.count == 0
        if state.checkmate:
            _LOGGER.info("Checkmate: %s wins", state.turn.opposite)

    def _emit_move(self, piece: Piece, source: Coordinate, target: Coordinate) -> None:
        for cb in self.events.on_move:
            cb(piece, source, target)

    def _emit_capture(self, attacker: Piece, captured: Piece) -> None:
        for cb in self.events.on_capture:
            cb(attacker, captured)

    def _emit_promotion(self, piece: Piece) -> None:
        for cb in self.events.on_promotion:
            cb(piece)

    def _emit_check(self, side: Side, threats: list[Piece]) -> None:
        for cb in self.events.on_check:
            cb(side, list(threats))

    def _emit_checkmate(self, side: Side) -> None:
        for cb in self.events.on_checkmate:
            cb(side)
