"""Tests for board mutation: moves, placements and turn switching."""

import chess
import pytest

from knightproof.analysis import BoardState, IllegalMoveError, Slot, Square, parse_square
from knightproof.game import apply_move, other_turn, place_piece, remove_piece, switch_turn
from knightproof.scenarios import generate_counterexample


def sq(name: str) -> Square:
    return parse_square(name)


@pytest.fixture()
def counterexample():
    # wK d4, bK h1, knights b2 and f6, White to move
    return generate_counterexample()


# ---------------------------------------------------------------------------
# Turn
# ---------------------------------------------------------------------------


class TestTurn:
    def test_other_turn(self):
        assert other_turn(chess.WHITE) == chess.BLACK
        assert other_turn(chess.BLACK) == chess.WHITE

    def test_switch_turn(self, counterexample):
        switched = switch_turn(counterexample)
        assert switched.turn == chess.BLACK
        assert counterexample.turn == chess.WHITE
        assert switched.white_king == counterexample.white_king
        assert switch_turn(switched) == counterexample


# ---------------------------------------------------------------------------
# Moves
# ---------------------------------------------------------------------------


class TestApplyMove:
    def test_king_move_switches_turn(self, counterexample):
        moved = apply_move(counterexample, sq("d4"), sq("c3"))
        assert moved.white_king == sq("c3")
        assert moved.turn == chess.BLACK
        assert counterexample.white_king == sq("d4")

    def test_sequence(self, counterexample):
        board = apply_move(counterexample, sq("d4"), sq("c3"))
        board = apply_move(board, sq("b2"), sq("d1"))
        assert board.knight1 == sq("d1")
        assert board.knight2 == sq("f6")
        assert board.turn == chess.WHITE

    def test_second_knight_moves_its_own_slot(self, counterexample):
        board = switch_turn(counterexample)
        moved = apply_move(board, sq("f6"), sq("g4"))
        assert moved.knight2 == sq("g4")
        assert moved.knight1 == sq("b2")

    def test_empty_source(self, counterexample):
        with pytest.raises(IllegalMoveError, match="no piece on a8"):
            apply_move(counterexample, sq("a8"), sq("a7"))

    def test_wrong_side(self, counterexample):
        with pytest.raises(IllegalMoveError, match="white to move"):
            apply_move(counterexample, sq("b2"), sq("d1"))

    def test_wrong_shape(self, counterexample):
        with pytest.raises(IllegalMoveError):
            apply_move(counterexample, sq("d4"), sq("d6"))

    def test_target_occupied(self):
        board = BoardState(
            white_king=sq("d4"), black_king=sq("h8"), knight1=sq("b3"), knight2=sq("c5"),
            turn=chess.BLACK,
        )
        with pytest.raises(IllegalMoveError, match="occupied"):
            apply_move(board, sq("b3"), sq("c5"))
        with pytest.raises(IllegalMoveError, match="occupied"):
            apply_move(board, sq("b3"), sq("d4"))

    def test_kings_may_not_touch(self):
        board = BoardState(white_king=sq("d4"), black_king=sq("f6"))
        with pytest.raises(IllegalMoveError, match="next to each other"):
            apply_move(board, sq("d4"), sq("e5"))

    def test_black_king_may_not_touch(self):
        board = BoardState(white_king=sq("d4"), black_king=sq("f6"), turn=chess.BLACK)
        with pytest.raises(IllegalMoveError):
            apply_move(board, sq("f6"), sq("e5"))
        assert apply_move(board, sq("f6"), sq("g7")).black_king == sq("g7")

    def test_is_value_error(self, counterexample):
        with pytest.raises(ValueError):
            apply_move(counterexample, sq("d4"), sq("h4"))


# ---------------------------------------------------------------------------
# Placement
# ---------------------------------------------------------------------------


class TestPlacePiece:
    def test_build_up_from_empty(self):
        board = BoardState()
        board = place_piece(board, Slot.WHITE_KING, sq("d4"))
        board = place_piece(board, Slot.BLACK_KING, sq("h8"))
        board = place_piece(board, Slot.KNIGHT_1, sq("b2"))
        board = place_piece(board, Slot.KNIGHT_2, sq("f6"))
        assert board == BoardState(
            white_king=sq("d4"), black_king=sq("h8"), knight1=sq("b2"), knight2=sq("f6"),
        )
        assert board.turn == chess.WHITE

    def test_relocates_existing_piece(self, counterexample):
        board = place_piece(counterexample, Slot.WHITE_KING, sq("a1"))
        assert board.white_king == sq("a1")
        assert board.slot_at(sq("d4")) is None

    def test_same_square_allowed(self, counterexample):
        assert place_piece(counterexample, Slot.KNIGHT_1, sq("b2")) == counterexample

    def test_occupied(self, counterexample):
        with pytest.raises(IllegalMoveError, match="occupied"):
            place_piece(counterexample, Slot.KNIGHT_1, sq("d4"))

    def test_adjacent_kings(self, counterexample):
        with pytest.raises(IllegalMoveError):
            place_piece(counterexample, Slot.BLACK_KING, sq("e5"))

    def test_off_board(self):
        with pytest.raises(IllegalMoveError, match="off the board"):
            place_piece(BoardState(), Slot.KNIGHT_1, Square(8, 0))

    def test_keeps_turn(self, counterexample):
        board = place_piece(switch_turn(counterexample), Slot.KNIGHT_2, sq("g5"))
        assert board.turn == chess.BLACK


def test_remove_piece(counterexample):
    board = remove_piece(counterexample, Slot.KNIGHT_2)
    assert board.knight2 is None
    assert not board.is_complete
    assert counterexample.knight2 == sq("f6")
