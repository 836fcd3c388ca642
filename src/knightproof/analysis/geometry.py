"""Knight and king move geometry, independent of occupancy."""

from knightproof.analysis.squares import is_in_bounds
from knightproof.analysis.types import PieceKind, Square

__all__ = [
    "KNIGHT_OFFSETS",
    "KING_OFFSETS",
    "knight_offsets",
    "king_offsets",
    "offsets_for",
    "chebyshev_distance",
]

KNIGHT_OFFSETS: tuple[tuple[int, int], ...] = (
    (2, 1), (2, -1), (-2, 1), (-2, -1),
    (1, 2), (1, -2), (-1, 2), (-1, -2),
)

KING_OFFSETS: tuple[tuple[int, int], ...] = (
    (1, 0), (-1, 0), (0, 1), (0, -1),
    (1, 1), (1, -1), (-1, 1), (-1, -1),
)


def _targets(square: Square, offsets: tuple[tuple[int, int], ...]) -> frozenset[Square]:
    candidates = (Square(square.file + df, square.rank + dr) for df, dr in offsets)
    return frozenset(c for c in candidates if is_in_bounds(c))


def knight_offsets(square: Square) -> frozenset[Square]:
    return _targets(square, KNIGHT_OFFSETS)


def king_offsets(square: Square) -> frozenset[Square]:
    return _targets(square, KING_OFFSETS)


def offsets_for(kind: PieceKind, square: Square) -> frozenset[Square]:
    """Geometric targets of a piece kind from square."""
    if kind is PieceKind.WHITE_KING or kind is PieceKind.BLACK_KING:
        return king_offsets(square)
    if kind is PieceKind.BLACK_KNIGHT:
        return knight_offsets(square)
    raise ValueError(f"Unknown piece kind: {kind!r}")


def chebyshev_distance(a: Square, b: Square) -> int:
    return max(abs(a.file - b.file), abs(a.rank - b.rank))
