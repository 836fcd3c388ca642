"""Occupancy, king adjacency and per-piece legal targets.

Only the rules this four-piece scenario needs: pieces move by shape, never
onto another piece, and the two kings never stand next to each other.
Whether the White King walks into a knight attack is left to the analysis.
"""

import chess

from knightproof.analysis.attacks import attacked_by_knights
from knightproof.analysis.geometry import chebyshev_distance, offsets_for
from knightproof.analysis.types import BoardState, PieceKind, Slot, Square

__all__ = [
    "are_kings_adjacent",
    "is_legal_move_shape",
    "opposing_king",
    "legal_targets",
    "legal_moves_for_turn",
    "is_piece_for_turn",
    "is_side_to_move_in_check",
    "TURN_SLOTS",
]

TURN_SLOTS: dict[chess.Color, tuple[Slot, ...]] = {
    chess.WHITE: (Slot.WHITE_KING,),
    chess.BLACK: (Slot.BLACK_KING, Slot.KNIGHT_1, Slot.KNIGHT_2),
}


def are_kings_adjacent(a: Square, b: Square) -> bool:
    """True at Chebyshev distance exactly 1. Equal squares are not adjacent."""
    return chebyshev_distance(a, b) == 1


def is_legal_move_shape(kind: PieceKind, from_sq: Square, to_sq: Square) -> bool:
    return to_sq in offsets_for(kind, from_sq)


def opposing_king(kind: PieceKind, board: BoardState) -> Square | None:
    """Square of the king a moving king must keep away from; None for knights."""
    if not kind.is_king:
        return None
    return board.black_king if kind is PieceKind.WHITE_KING else board.white_king


def legal_targets(kind: PieceKind, from_sq: Square, board: BoardState) -> frozenset[Square]:
    targets = offsets_for(kind, from_sq) - board.occupied()
    other_king = opposing_king(kind, board)
    if other_king is not None:
        targets = frozenset(t for t in targets if not are_kings_adjacent(t, other_king))
    return targets


def legal_moves_for_turn(board: BoardState) -> dict[Slot, frozenset[Square]]:
    """Legal targets for every piece of the side to move that has any."""
    moves: dict[Slot, frozenset[Square]] = {}
    for slot in TURN_SLOTS[board.turn]:
        from_sq = board.square_of(slot)
        if from_sq is None:
            continue
        targets = legal_targets(slot.kind, from_sq, board)
        if targets:
            moves[slot] = targets
    return moves


def is_piece_for_turn(kind: PieceKind, turn: chess.Color) -> bool:
    return kind.color == turn


def is_side_to_move_in_check(board: BoardState) -> bool:
    """Knight check on the White King when White is to move.

    Black can never be in check: White owns only a king, and kings are never
    adjacent.
    """
    if board.turn == chess.BLACK or board.white_king is None:
        return False
    return board.white_king in attacked_by_knights(board.knight1, board.knight2)
