"""Checkmate verdict for the White King against king and two knights.

The central claim: a knight always moves to the opposite colour, so two
knights on the same colour attack only one colour class. Any escape square
of the knights' own colour is out of their reach, and the king walks out.
"""

from knightproof.analysis.attacks import attacked_by_all, attacked_by_knights
from knightproof.analysis.geometry import king_offsets
from knightproof.analysis.squares import is_light_square, square_color
from knightproof.analysis.types import AnalysisResult, BoardState, Verdict

__all__ = [
    "INCOMPLETE_REASON",
    "analyze_checkmate",
]

INCOMPLETE_REASON = "incomplete placement: all four pieces must be on the board"


def _plural(n: int, word: str) -> str:
    return f"{n} {word}" if n == 1 else f"{n} {word}s"


def analyze_checkmate(board: BoardState) -> AnalysisResult:
    white_king = board.white_king
    knight1, knight2 = board.knight1, board.knight2
    if white_king is None or board.black_king is None or knight1 is None or knight2 is None:
        return AnalysisResult(
            can_checkmate=False,
            attacked_squares=frozenset(),
            escape_squares=frozenset(),
            blocked_escapes=frozenset(),
            verdict=Verdict.INCOMPLETE,
            reason=INCOMPLETE_REASON,
            is_in_check=False,
            turn=board.turn,
        )

    unsafe = attacked_by_all(knight1, knight2, board.black_king)
    king_moves = king_offsets(white_king)

    check_squares = attacked_by_knights(knight1, knight2)
    is_in_check = white_king in check_squares

    escapes = king_moves - unsafe
    blocked = king_moves & unsafe

    # --- Bipartite short-circuit ---
    knight1_light = is_light_square(knight1)
    if knight1_light == is_light_square(knight2):
        unattackable = frozenset(sq for sq in escapes if is_light_square(sq) == knight1_light)
        if unattackable:
            color = square_color(knight1).value
            return AnalysisResult(
                can_checkmate=False,
                attacked_squares=check_squares,
                escape_squares=escapes,
                blocked_escapes=blocked,
                verdict=Verdict.BIPARTITE,
                reason=(
                    f"bipartite constraint: knights on {color} squares only attack "
                    f"the other colour and cannot cover {_plural(len(unattackable), color + ' escape square')}"
                ),
                is_in_check=is_in_check,
                turn=board.turn,
                unattackable_escapes=unattackable,
            )

    can_checkmate = is_in_check and not escapes
    if can_checkmate:
        verdict, reason = Verdict.CHECKMATE, "checkmate"
    elif escapes:
        verdict = Verdict.ESCAPES
        reason = f"king has {_plural(len(escapes), 'escape square')}"
    else:
        verdict, reason = Verdict.NOT_IN_CHECK, "king is not in check"

    return AnalysisResult(
        can_checkmate=can_checkmate,
        attacked_squares=check_squares,
        escape_squares=escapes,
        blocked_escapes=blocked,
        verdict=verdict,
        reason=reason,
        is_in_check=is_in_check,
        turn=board.turn,
    )
