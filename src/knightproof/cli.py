"""CLI for analyzing two-knights positions.

Usage:
    python -m knightproof.cli analyze --white-king d4 --black-king h8
        --knights b2 f6 [--turn black]
    python -m knightproof.cli moves --white-king d4 --black-king h8
        --knights b2 f6 [--turn black]
    python -m knightproof.cli scenario {random,optimal,counterexample}
        [--seed N] [--analyze]

Prints JSON on stdout.
"""

from __future__ import annotations

import argparse
import json
import logging
import random
import sys

from knightproof.analysis import BoardState, analyze_position, legal_moves_for_turn
from knightproof.config import Settings
from knightproof.report import board_from_dict, serialize_board, serialize_moves, serialize_report
from knightproof.scenarios import ScenarioKind, generate_scenario


def _board_from_args(args: argparse.Namespace) -> BoardState:
    knights = list(args.knights or [])
    if len(knights) > 2:
        raise ValueError("at most two knights")
    knights += [None] * (2 - len(knights))
    return board_from_dict({
        "white_king": args.white_king,
        "black_king": args.black_king,
        "knight1": knights[0],
        "knight2": knights[1],
        "turn": args.turn,
    })


def _run(args: argparse.Namespace, settings: Settings) -> dict:
    if args.command == "scenario":
        seed = args.seed if args.seed is not None else settings.scenario_seed
        board = generate_scenario(
            ScenarioKind(args.kind), random.Random(seed), settings.scenario_max_attempts,
        )
        if args.analyze:
            return serialize_report(analyze_position(board))
        return serialize_board(board)

    board = _board_from_args(args)
    if args.command == "moves":
        return serialize_moves(legal_moves_for_turn(board))
    return serialize_report(analyze_position(board))


def _add_board_args(parser: argparse.ArgumentParser) -> None:
    parser.add_argument("--white-king", metavar="SQ", help="White King square, e.g. d4")
    parser.add_argument("--black-king", metavar="SQ", help="Black King square")
    parser.add_argument(
        "--knights", metavar="SQ", nargs="+",
        help="Up to two Black Knight squares",
    )
    parser.add_argument(
        "--turn", default="white", choices=["white", "black"],
        help="Side to move (default: white)",
    )


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="knightproof",
        description="Two same-coloured knights cannot checkmate a lone king",
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    sub = parser.add_subparsers(dest="command", required=True)

    _add_board_args(sub.add_parser("analyze", help="Checkmate analysis of a position"))
    _add_board_args(sub.add_parser("moves", help="Legal moves for the side to move"))

    scenario = sub.add_parser("scenario", help="Generate a proof scenario")
    scenario.add_argument("kind", choices=[k.value for k in ScenarioKind])
    scenario.add_argument("--seed", type=int, help="Seed for the random scenario")
    scenario.add_argument(
        "--analyze", action="store_true",
        help="Include the full analysis of the generated board",
    )
    return parser


def main(argv: list[str] | None = None) -> None:
    args = build_parser().parse_args(argv)
    settings = Settings()
    logging.basicConfig(level=settings.log_level, stream=sys.stderr)

    try:
        result = _run(args, settings)
    except ValueError as e:
        print(f"error: {e}", file=sys.stderr)
        sys.exit(1)

    json.dump(result, sys.stdout, indent=2)
    print()


if __name__ == "__main__":
    main()
