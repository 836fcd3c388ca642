"""Squares attacked by the black pieces.

Two notions are kept apart:

- check squares: attacked by the knights. Only knights give check here.
- unsafe squares: check squares plus the Black King's neighbourhood. The
  White King may not step next to the Black King, but the Black King never
  gives check.
"""

from knightproof.analysis.geometry import king_offsets, knight_offsets
from knightproof.analysis.types import Square

__all__ = [
    "attacked_by_knights",
    "attacked_by_all",
]


def attacked_by_knights(
    knight1: Square | None,
    knight2: Square | None,
) -> frozenset[Square]:
    attacked: set[Square] = set()
    for knight in (knight1, knight2):
        if knight is not None:
            attacked |= knight_offsets(knight)
    return frozenset(attacked)


def attacked_by_all(
    knight1: Square | None,
    knight2: Square | None,
    black_king: Square | None,
) -> frozenset[Square]:
    attacked = attacked_by_knights(knight1, knight2)
    if black_king is not None:
        attacked |= king_offsets(black_king)
    return attacked
