"""Board data model: squares, piece kinds, board state and analysis results."""

import enum
from dataclasses import dataclass

import chess

__all__ = [
    "BOARD_SIZE",
    "Square",
    "SquareColor",
    "PieceKind",
    "Slot",
    "BoardState",
    "Verdict",
    "AnalysisResult",
    "InvalidBoardError",
    "IllegalMoveError",
    "_color_name",
]

BOARD_SIZE = 8


class InvalidBoardError(ValueError):
    """Board would break an invariant (off-board, co-located or adjacent kings)."""


class IllegalMoveError(ValueError):
    """Proposed move or placement is not legal; the board is left unchanged."""


def _color_name(color: chess.Color) -> str:
    """Convert chess.Color bool to lowercase string."""
    return "white" if color == chess.WHITE else "black"


@dataclass(frozen=True, order=True)
class Square:
    file: int  # 0-7 (a-h)
    rank: int  # 0-7 (1-8)

    def __str__(self) -> str:
        if 0 <= self.file < BOARD_SIZE and 0 <= self.rank < BOARD_SIZE:
            return chess.FILE_NAMES[self.file] + chess.RANK_NAMES[self.rank]
        return f"({self.file}, {self.rank})"


class SquareColor(enum.Enum):
    LIGHT = "light"
    DARK = "dark"


class PieceKind(enum.Enum):
    WHITE_KING = "wK"
    BLACK_KING = "bK"
    BLACK_KNIGHT = "bN"

    @property
    def color(self) -> chess.Color:
        return chess.WHITE if self is PieceKind.WHITE_KING else chess.BLACK

    @property
    def is_king(self) -> bool:
        return self is not PieceKind.BLACK_KNIGHT


class Slot(enum.Enum):
    """The four piece positions a board can hold."""
    WHITE_KING = "white_king"
    BLACK_KING = "black_king"
    KNIGHT_1 = "knight1"
    KNIGHT_2 = "knight2"

    @property
    def kind(self) -> PieceKind:
        return _SLOT_KINDS[self]


_SLOT_KINDS = {
    Slot.WHITE_KING: PieceKind.WHITE_KING,
    Slot.BLACK_KING: PieceKind.BLACK_KING,
    Slot.KNIGHT_1: PieceKind.BLACK_KNIGHT,
    Slot.KNIGHT_2: PieceKind.BLACK_KNIGHT,
}


@dataclass(frozen=True)
class BoardState:
    white_king: Square | None = None
    black_king: Square | None = None
    knight1: Square | None = None
    knight2: Square | None = None
    turn: chess.Color = chess.WHITE

    def __post_init__(self):
        problems = self.violations()
        if problems:
            raise InvalidBoardError("; ".join(problems))

    def violations(self) -> list[str]:
        """List every broken invariant; empty for a valid board."""
        problems = []
        seen: dict[Square, Slot] = {}
        for slot, square in self.pieces():
            if not (0 <= square.file < BOARD_SIZE and 0 <= square.rank < BOARD_SIZE):
                problems.append(f"{slot.value} is off the board at {square}")
                continue
            if square in seen:
                problems.append(f"{slot.value} and {seen[square].value} share {square}")
            seen[square] = slot
        wk, bk = self.white_king, self.black_king
        if wk is not None and bk is not None:
            if max(abs(wk.file - bk.file), abs(wk.rank - bk.rank)) == 1:
                problems.append(f"kings on {wk} and {bk} are adjacent")
        return problems

    def square_of(self, slot: Slot) -> Square | None:
        return getattr(self, slot.value)

    def pieces(self) -> list[tuple[Slot, Square]]:
        """Present pieces in slot order."""
        return [(slot, self.square_of(slot)) for slot in Slot if self.square_of(slot) is not None]

    def occupied(self) -> frozenset[Square]:
        return frozenset(square for _, square in self.pieces())

    def slot_at(self, square: Square) -> Slot | None:
        for slot, occupant in self.pieces():
            if occupant == square:
                return slot
        return None

    @property
    def is_complete(self) -> bool:
        return all(self.square_of(slot) is not None for slot in Slot)


class Verdict(enum.Enum):
    INCOMPLETE = "incomplete"
    BIPARTITE = "bipartite"
    CHECKMATE = "checkmate"
    ESCAPES = "escapes"
    NOT_IN_CHECK = "not_in_check"


@dataclass(frozen=True)
class AnalysisResult:
    can_checkmate: bool
    attacked_squares: frozenset[Square]  # knight attacks only
    escape_squares: frozenset[Square]
    blocked_escapes: frozenset[Square]
    verdict: Verdict
    reason: str
    is_in_check: bool
    turn: chess.Color
    # Escape squares sharing the knights' colour; empty unless the knights match
    unattackable_escapes: frozenset[Square] = frozenset()
