"""Algebraic notation, bounds and square colour."""

import chess

from knightproof.analysis.types import BOARD_SIZE, Square, SquareColor

__all__ = [
    "ALL_SQUARES",
    "parse_square",
    "format_square",
    "is_in_bounds",
    "is_light_square",
    "square_color",
    "to_chess_square",
    "from_chess_square",
]


def from_chess_square(sq: chess.Square) -> Square:
    return Square(chess.square_file(sq), chess.square_rank(sq))


def to_chess_square(square: Square) -> chess.Square:
    """python-chess square index. Precondition: square is in bounds."""
    return chess.square(square.file, square.rank)


# a1, b1, ..., h8
ALL_SQUARES: tuple[Square, ...] = tuple(from_chess_square(sq) for sq in chess.SQUARES)


def parse_square(text: str) -> Square:
    """'a1' -> Square(0, 0), 'h8' -> Square(7, 7).

    Raises ValueError for anything outside a1..h8.
    """
    return from_chess_square(chess.parse_square(text))


def format_square(square: Square) -> str:
    return chess.square_name(to_chess_square(square))


def is_in_bounds(square: Square) -> bool:
    return 0 <= square.file < BOARD_SIZE and 0 <= square.rank < BOARD_SIZE


def is_light_square(square: Square) -> bool:
    # a1 counts as light here, the inverse of chess.BB_LIGHT_SQUARES
    return (square.file + square.rank) % 2 == 0


def square_color(square: Square) -> SquareColor:
    return SquareColor.LIGHT if is_light_square(square) else SquareColor.DARK
