"""JSON-ready serialization of boards and analysis results.

Algebraic square names ("a1".."h8") are the only notation on the wire.
Square collections come out sorted by (file, rank) so output is stable.
"""

from __future__ import annotations

from collections.abc import Iterable, Mapping

import chess

from knightproof.analysis import (
    AnalysisResult,
    BoardState,
    ColoringProof,
    PositionReport,
    Slot,
    Square,
    _color_name,
    format_square,
    parse_square,
)

_TURNS = {"white": chess.WHITE, "black": chess.BLACK}


def _names(squares: Iterable[Square]) -> list[str]:
    return [format_square(sq) for sq in sorted(squares)]


def _name(square: Square | None) -> str | None:
    return format_square(square) if square is not None else None


def parse_turn(text: str) -> chess.Color:
    try:
        return _TURNS[text]
    except KeyError:
        raise ValueError(f"Invalid turn: {text!r} (expected 'white' or 'black')") from None


def serialize_board(board: BoardState) -> dict:
    data: dict = {slot.value: _name(board.square_of(slot)) for slot in Slot}
    data["turn"] = _color_name(board.turn)
    return data


def board_from_dict(data: Mapping) -> BoardState:
    """Inverse of serialize_board. Missing or null slots are empty.

    Raises ValueError for bad square names, a bad turn, or a board that
    breaks an invariant.
    """
    squares = {}
    for slot in Slot:
        name = data.get(slot.value)
        squares[slot.value] = parse_square(name) if name is not None else None
    return BoardState(**squares, turn=parse_turn(data.get("turn", "white")))


def serialize_analysis(result: AnalysisResult) -> dict:
    return {
        "can_checkmate": result.can_checkmate,
        "attacked_squares": _names(result.attacked_squares),
        "escape_squares": _names(result.escape_squares),
        "blocked_escapes": _names(result.blocked_escapes),
        "unattackable_escapes": _names(result.unattackable_escapes),
        "verdict": result.verdict.value,
        "reason": result.reason,
        "is_in_check": result.is_in_check,
        "turn": _color_name(result.turn),
    }


def serialize_moves(moves: Mapping[Slot, Iterable[Square]]) -> dict[str, list[str]]:
    return {slot.value: _names(targets) for slot, targets in moves.items()}


def serialize_coloring(proof: ColoringProof | None) -> dict | None:
    if proof is None:
        return None
    return {
        "knight1_color": proof.knight1_color.value,
        "knight2_color": proof.knight2_color.value,
        "same_color_knights": proof.same_color_knights,
        "total_squares": proof.total_squares,
        "light_squares": _names(proof.light_squares),
        "dark_squares": _names(proof.dark_squares),
        "attacked_light": _names(proof.attacked_light),
        "attacked_dark": _names(proof.attacked_dark),
        "unattackable_squares": _names(proof.unattackable_squares),
    }


def serialize_report(report: PositionReport) -> dict:
    return {
        "board": serialize_board(report.board),
        "analysis": serialize_analysis(report.result),
        "side_to_move_in_check": report.side_to_move_in_check,
        "coloring": serialize_coloring(report.coloring),
        "legal_moves": serialize_moves(report.legal_moves),
    }
