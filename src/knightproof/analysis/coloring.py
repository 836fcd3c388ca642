"""Light/dark breakdown of the White King's neighbourhood against the knights."""

from dataclasses import dataclass, field

from knightproof.analysis.attacks import attacked_by_knights
from knightproof.analysis.geometry import king_offsets
from knightproof.analysis.squares import is_light_square, square_color
from knightproof.analysis.types import BoardState, Square, SquareColor

__all__ = [
    "ColoringProof",
    "analyze_coloring",
]


@dataclass(frozen=True)
class ColoringProof:
    knight1_color: SquareColor
    knight2_color: SquareColor
    same_color_knights: bool
    light_squares: frozenset[Square]       # king neighbourhood, light
    dark_squares: frozenset[Square]        # king neighbourhood, dark
    attacked_light: frozenset[Square] = field(default_factory=frozenset)
    attacked_dark: frozenset[Square] = field(default_factory=frozenset)
    # neighbourhood squares no knight can ever reach; empty for mixed colours
    unattackable_squares: frozenset[Square] = field(default_factory=frozenset)

    @property
    def total_squares(self) -> int:
        return len(self.light_squares) + len(self.dark_squares)


def analyze_coloring(board: BoardState) -> ColoringProof | None:
    """None unless the White King and both knights are on the board."""
    if board.white_king is None or board.knight1 is None or board.knight2 is None:
        return None

    neighbourhood = king_offsets(board.white_king)
    light = frozenset(sq for sq in neighbourhood if is_light_square(sq))
    dark = neighbourhood - light
    attacked = attacked_by_knights(board.knight1, board.knight2)

    k1_color = square_color(board.knight1)
    k2_color = square_color(board.knight2)
    same = k1_color == k2_color
    if not same:
        unattackable = frozenset()
    elif k1_color is SquareColor.LIGHT:
        unattackable = light
    else:
        unattackable = dark

    return ColoringProof(
        knight1_color=k1_color,
        knight2_color=k2_color,
        same_color_knights=same,
        light_squares=light,
        dark_squares=dark,
        attacked_light=light & attacked,
        attacked_dark=dark & attacked,
        unattackable_squares=unattackable,
    )
