"""Board changes: moves, placements and turn switching, all returning new boards."""

from __future__ import annotations

import logging
from dataclasses import replace

import chess

from knightproof.analysis import (
    BoardState,
    IllegalMoveError,
    Slot,
    Square,
    _color_name,
    are_kings_adjacent,
    is_in_bounds,
    is_legal_move_shape,
    is_piece_for_turn,
    opposing_king,
)

logger = logging.getLogger(__name__)


def other_turn(turn: chess.Color) -> chess.Color:
    return not turn


def switch_turn(board: BoardState) -> BoardState:
    return replace(board, turn=other_turn(board.turn))


def _reject(message: str) -> IllegalMoveError:
    logger.debug("Rejected: %s", message)
    return IllegalMoveError(message)


def _check_landing(board: BoardState, slot: Slot, square: Square) -> None:
    """Raise unless slot's piece may stand on square with the rest unchanged."""
    occupant = board.slot_at(square)
    if occupant is not None and occupant is not slot:
        raise _reject(f"{square} is occupied by {occupant.value}")
    other_king = opposing_king(slot.kind, board)
    if other_king is not None and are_kings_adjacent(square, other_king):
        raise _reject(f"kings may not stand next to each other ({square} and {other_king})")


def apply_move(board: BoardState, from_sq: Square, to_sq: Square) -> BoardState:
    """Move the piece on from_sq to to_sq and hand the turn over.

    Raises IllegalMoveError (board untouched) if there is no piece on from_sq,
    it belongs to the side not to move, the shape is wrong, the target is
    occupied, or the kings would end up adjacent.
    """
    slot = board.slot_at(from_sq)
    if slot is None:
        raise _reject(f"no piece on {from_sq}")
    if not is_piece_for_turn(slot.kind, board.turn):
        raise _reject(f"{slot.value} cannot move, it is {_color_name(board.turn)} to move")
    if not is_legal_move_shape(slot.kind, from_sq, to_sq):
        raise _reject(f"{slot.value} cannot move from {from_sq} to {to_sq}")
    _check_landing(board, slot, to_sq)

    moved = replace(board, **{slot.value: to_sq}, turn=other_turn(board.turn))
    logger.debug("%s %s-%s", slot.value, from_sq, to_sq)
    return moved


def place_piece(board: BoardState, slot: Slot, square: Square) -> BoardState:
    """Put slot's piece on square, wherever it stood before. Turn unchanged."""
    if not is_in_bounds(square):
        raise _reject(f"{square} is off the board")
    _check_landing(board, slot, square)
    return replace(board, **{slot.value: square})


def remove_piece(board: BoardState, slot: Slot) -> BoardState:
    return replace(board, **{slot.value: None})
