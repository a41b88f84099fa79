"""Tests for MoveGenerator: rays, blocking, captures and king safety."""

from helpers import BISHOP, KING, PAWN, ROOK, B, W, c, make_board, positions
from raychess.core.board import Board
from raychess.core.move_generator import MoveGenerator


def _rook_board() -> Board:
    # White rook on (0,0) with Black pieces stacked up the file.
    return make_board(
        (W, ROOK, 0, 0),
        (B, PAWN, 0, 1),
        (B, BISHOP, 0, 2),
        (W, KING, 7, 7),
        (B, KING, 5, 5),
    )


class TestPawnMoves:
    def test_initial_double_step(self) -> None:
        board = Board.initial()
        gen = MoveGenerator(board)
        moves = gen.legal_moves(board.piece_at(c(0, 1)))
        assert moves == [c(0, 2), c(0, 3)]
        assert c(0, 4) not in moves

    def test_single_step_after_first_move(self) -> None:
        board = Board.initial().relocated(0, c(0, 3))
        gen = MoveGenerator(board)
        assert gen.legal_moves(board[0]) == [c(0, 4)]

    def test_black_pawn_moves_down(self) -> None:
        board = Board.initial()
        gen = MoveGenerator(board)
        assert gen.legal_moves(board[16]) == [c(0, 5), c(0, 4)]

    def test_blocked_pawn_cannot_jump(self) -> None:
        board = make_board((W, PAWN, 0, 1), (B, ROOK, 0, 2), (W, KING, 4, 0), (B, KING, 4, 7))
        assert MoveGenerator(board).legal_moves(board[0]) == []

    def test_double_step_stops_at_blocker(self) -> None:
        board = make_board((W, PAWN, 0, 1), (B, ROOK, 0, 3), (W, KING, 4, 0), (B, KING, 4, 7))
        assert MoveGenerator(board).legal_moves(board[0]) == [c(0, 2)]

    def test_pawn_attacks_diagonally_only(self) -> None:
        board = make_board(
            (W, PAWN, 3, 3),
            (B, ROOK, 3, 4),
            (B, ROOK, 4, 4),
            (W, KING, 7, 0),
            (B, KING, 7, 7),
        )
        gen = MoveGenerator(board)
        pawn = board[0]
        assert gen.legal_moves(pawn) == []
        assert gen.legal_attacks(pawn) == [c(4, 4)]

    def test_pawn_does_not_attack_empty_square(self) -> None:
        board = Board.initial()
        gen = MoveGenerator(board)
        assert gen.attack_targets(board[4]) == []


class TestSliders:
    def test_rook_walks_until_blocked(self) -> None:
        board = _rook_board()
        gen = MoveGenerator(board)
        rook = board[0]
        assert gen.legal_moves(rook) == [c(x, 0) for x in range(1, 8)]

    def test_rook_captures_first_blocker_only(self) -> None:
        board = _rook_board()
        gen = MoveGenerator(board)
        rook = board[0]
        assert gen.legal_attacks(rook) == [c(0, 1)]
        assert c(0, 2) not in gen.legal_moves(rook)
        assert c(0, 2) not in gen.legal_attacks(rook)

    def test_rook_in_starting_corner_is_boxed_in(self) -> None:
        board = Board.initial()
        gen = MoveGenerator(board)
        rook = board[8]
        assert gen.legal_moves(rook) == []
        assert gen.attack_targets(rook) == []
        assert gen.attack_targets(rook, friendly_fire=True) == [c(1, 0), c(0, 1)]

    def test_knight_jumps_over_pieces(self) -> None:
        board = Board.initial()
        gen = MoveGenerator(board)
        assert gen.legal_moves(board[10]) == [c(2, 2), c(0, 2)]

    def test_initial_position_has_twenty_moves(self) -> None:
        board = Board.initial()
        gen = MoveGenerator(board)
        total = sum(len(gen.legal_moves(p)) for p in board.pieces(W))
        assert total == 20


class TestKingSafety:
    def test_pinned_rook_stays_on_file(self) -> None:
        board = make_board((W, KING, 4, 0), (W, ROOK, 4, 1), (B, ROOK, 4, 7), (B, KING, 0, 7))
        gen = MoveGenerator(board)
        rook = board[1]
        assert gen.legal_moves(rook) == [c(4, y) for y in range(2, 7)]
        assert gen.legal_attacks(rook) == [c(4, 7)]

    def test_pinned_bishop_cannot_capture(self) -> None:
        board = make_board(
            (W, KING, 4, 0),
            (W, BISHOP, 4, 1),
            (B, ROOK, 4, 7),
            (B, KING, 0, 7),
            (B, PAWN, 5, 2),
        )
        gen = MoveGenerator(board)
        bishop = board[1]
        assert gen.attack_targets(bishop) == [c(5, 2)]
        assert gen.legal_attacks(bishop) == []
        assert gen.legal_moves(bishop) == []

    def test_king_avoids_attacked_squares(self) -> None:
        board = make_board((W, KING, 4, 0), (B, KING, 4, 7), (B, ROOK, 3, 1), (B, ROOK, 3, 7))
        gen = MoveGenerator(board)
        assert gen.legal_moves(board[0]) == [c(5, 0)]

    def test_king_cannot_capture_defended_piece(self) -> None:
        board = make_board((W, KING, 4, 0), (B, KING, 4, 7), (B, ROOK, 3, 1), (B, ROOK, 3, 7))
        gen = MoveGenerator(board)
        king = board[0]
        assert gen.attack_targets(king) == [c(3, 1)]
        assert gen.legal_attacks(king) == []
        assert gen.legal_check_attacks(king) == []

    def test_king_captures_undefended_piece(self) -> None:
        board = make_board((W, KING, 4, 0), (B, KING, 4, 7), (B, ROOK, 3, 1))
        gen = MoveGenerator(board)
        assert gen.legal_attacks(board[0]) == [c(3, 1)]

    def test_generation_does_not_mutate_board(self) -> None:
        board = make_board((W, KING, 4, 0), (W, ROOK, 4, 1), (B, ROOK, 4, 7), (B, KING, 0, 7))
        before = positions(board)
        gen = MoveGenerator(board)
        for piece in board.pieces():
            gen.targets(piece, in_check=False)
            gen.targets(piece, in_check=True)
        assert positions(board) == before
        assert not any(p.has_moved for p in board.pieces())


class TestThreats:
    def test_threats_include_defenders(self) -> None:
        board = make_board((W, KING, 4, 0), (B, KING, 4, 7), (B, ROOK, 3, 1), (B, ROOK, 3, 7))
        gen = MoveGenerator(board)
        threats = gen.threats(2, c(3, 1))
        assert [p.index for p in threats] == [0, 3]

    def test_threats_exclude_given_index(self) -> None:
        board = make_board((W, KING, 4, 0), (B, KING, 4, 7), (B, ROOK, 3, 1), (B, ROOK, 3, 7))
        gen = MoveGenerator(board)
        assert [p.index for p in gen.threats(3, c(3, 1))] == [0]

    def test_check_threats_ignore_own_side(self) -> None:
        board = make_board((W, KING, 4, 0), (W, ROOK, 4, 1), (B, KING, 4, 7))
        gen = MoveGenerator(board)
        assert gen.check_threats(W) == []
        assert not gen.is_in_check(W)

    def test_check_threats_list_attackers(self) -> None:
        board = make_board((W, KING, 4, 0), (B, ROOK, 4, 5), (B, KING, 0, 7))
        gen = MoveGenerator(board)
        assert [p.index for p in gen.check_threats(W)] == [1]
        assert gen.is_in_check(W)


class TestAttempts:
    def test_try_move_relocates(self) -> None:
        board = Board.initial()
        gen = MoveGenerator(board)
        pawn = board[4]
        assert gen.try_move(pawn, c(4, 3), in_check=False)
        assert pawn.position == c(4, 3)
        assert pawn.has_moved

    def test_try_attack_keeps_double_step(self) -> None:
        board = make_board((W, PAWN, 1, 1), (B, ROOK, 2, 2), (W, KING, 7, 0), (B, KING, 7, 7))
        gen = MoveGenerator(board)
        pawn = board[0]
        assert gen.try_attack(pawn, c(2, 2), in_check=False)
        assert pawn.position == c(2, 2)
        assert not pawn.has_moved

    def test_failed_move_does_not_mutate(self) -> None:
        board = Board.initial()
        before = positions(board)
        gen = MoveGenerator(board)
        assert not gen.try_move(board[4], c(4, 4), in_check=False)
        assert positions(board) == before

    def test_try_attack_rejects_own_piece(self) -> None:
        board = Board.initial()
        gen = MoveGenerator(board)
        assert not gen.try_attack(board[8], c(0, 1), in_check=False)
        assert board[8].position == c(0, 0)

    def test_try_attack_moves_attacker_only(self) -> None:
        board = _rook_board()
        gen = MoveGenerator(board)
        assert gen.try_attack(board[0], c(0, 1), in_check=False)
        assert board[0].position == c(0, 1)
        assert board[1] is not None  # the caller clears the captured slot
