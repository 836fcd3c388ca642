"""Pure-function board analysis package.

All functions take squares or a BoardState and return frozen values.
No randomness, no I/O, nothing mutated. The presentation layer renders
these results; it holds no rules of its own.
"""

from dataclasses import dataclass, field

# Re-export everything so `from knightproof.analysis import X` works
from knightproof.analysis.types import *  # noqa: F401,F403
from knightproof.analysis.squares import *  # noqa: F401,F403
from knightproof.analysis.geometry import *  # noqa: F401,F403
from knightproof.analysis.attacks import *  # noqa: F401,F403
from knightproof.analysis.legality import *  # noqa: F401,F403
from knightproof.analysis.checkmate import *  # noqa: F401,F403
from knightproof.analysis.coloring import *  # noqa: F401,F403

# Explicit imports for orchestration logic
from knightproof.analysis.checkmate import analyze_checkmate
from knightproof.analysis.coloring import ColoringProof, analyze_coloring
from knightproof.analysis.legality import is_side_to_move_in_check, legal_moves_for_turn
from knightproof.analysis.types import AnalysisResult, BoardState, Slot, Square


@dataclass(frozen=True)
class PositionReport:
    board: BoardState
    result: AnalysisResult
    side_to_move_in_check: bool
    coloring: ColoringProof | None = None
    legal_moves: dict[Slot, frozenset[Square]] = field(default_factory=dict)


def analyze(board: BoardState) -> AnalysisResult:
    """Checkmate verdict for board. Same board in, same result out."""
    return analyze_checkmate(board)


def analyze_position(board: BoardState) -> PositionReport:
    """Everything the presentation layer shows for one board."""
    return PositionReport(
        board=board,
        result=analyze_checkmate(board),
        side_to_move_in_check=is_side_to_move_in_check(board),
        coloring=analyze_coloring(board),
        legal_moves=legal_moves_for_turn(board),
    )
