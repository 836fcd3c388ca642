"""
Scenario generators for the proof walkthrough.

- Random: rejection-sampled legal placement of all four pieces
- Optimal attack: knights arranged to cover as much of the king's
  neighbourhood as they can; the proof still holds
- Counterexample: both knights on light squares, so the bipartite
  argument visibly rules out mate

Every generator returns a complete, valid board with White to move.
"""

from __future__ import annotations

import enum
import logging
import random

from knightproof.analysis import (
    ALL_SQUARES,
    BoardState,
    Square,
    are_kings_adjacent,
    parse_square,
)

logger = logging.getLogger(__name__)

MAX_ATTEMPTS = 100

FALLBACK_WHITE_KING = parse_square("d4")
FALLBACK_BLACK_KING = parse_square("h8")
FALLBACK_KNIGHTS = (parse_square("b2"), parse_square("f6"))


class ScenarioKind(enum.Enum):
    RANDOM = "random"
    OPTIMAL = "optimal"
    COUNTEREXAMPLE = "counterexample"


def _random_square(rng: random.Random) -> Square:
    return Square(rng.randrange(8), rng.randrange(8))


def _place_kings(rng: random.Random, max_attempts: int) -> tuple[Square, Square]:
    for _ in range(max_attempts):
        white_king = _random_square(rng)
        black_king = _random_square(rng)
        if white_king != black_king and not are_kings_adjacent(white_king, black_king):
            return white_king, black_king
    logger.warning("King placement gave up after %d attempts, using fallback", max_attempts)
    return FALLBACK_WHITE_KING, FALLBACK_BLACK_KING


def _fallback_knights(taken: set[Square]) -> tuple[Square, Square]:
    """Preferred fallback squares first, then the first free squares a1..h8."""
    candidates = dict.fromkeys((*FALLBACK_KNIGHTS, *ALL_SQUARES))
    free = [sq for sq in candidates if sq not in taken]
    return free[0], free[1]


def _place_knights(
    rng: random.Random,
    max_attempts: int,
    kings: tuple[Square, Square],
) -> tuple[Square, Square]:
    for _ in range(max_attempts):
        knight1 = _random_square(rng)
        knight2 = _random_square(rng)
        if knight1 != knight2 and knight1 not in kings and knight2 not in kings:
            return knight1, knight2
    logger.warning("Knight placement gave up after %d attempts, using fallback", max_attempts)
    return _fallback_knights(set(kings))


def generate_random_scenario(
    rng: random.Random | None = None,
    max_attempts: int = MAX_ATTEMPTS,
) -> BoardState:
    """
    Random legal placement of both kings and both knights.

    Args:
        rng: Source of randomness; a fresh unseeded generator when None
        max_attempts: Retry ceiling for each sampling loop before the
            fixed fallback placement is used

    Returns:
        A complete board with White to move
    """
    rng = rng or random.Random()
    white_king, black_king = _place_kings(rng, max_attempts)
    knight1, knight2 = _place_knights(rng, max_attempts, (white_king, black_king))
    return BoardState(
        white_king=white_king,
        black_king=black_king,
        knight1=knight1,
        knight2=knight2,
    )


def generate_optimal_attack_scenario() -> BoardState:
    return BoardState(
        white_king=parse_square("d4"),
        black_king=parse_square("a8"),
        knight1=parse_square("b3"),
        knight2=parse_square("f3"),
    )


def generate_counterexample() -> BoardState:
    # b2 and f6 are both light
    return BoardState(
        white_king=parse_square("d4"),
        black_king=parse_square("h1"),
        knight1=parse_square("b2"),
        knight2=parse_square("f6"),
    )


def generate_scenario(
    kind: ScenarioKind,
    rng: random.Random | None = None,
    max_attempts: int = MAX_ATTEMPTS,
) -> BoardState:
    if kind is ScenarioKind.RANDOM:
        return generate_random_scenario(rng, max_attempts)
    if kind is ScenarioKind.OPTIMAL:
        return generate_optimal_attack_scenario()
    if kind is ScenarioKind.COUNTEREXAMPLE:
        return generate_counterexample()
    raise ValueError(f"Unknown scenario kind: {kind!r}")
