#!/usr/bin/env python3
"""
minefield - command-line entry point.

Usage:
    minefield play [--difficulty NAME] [--seed N] [--safe-zone POLICY]
    minefield bench [--difficulty NAME] [--seed N]
"""
import argparse
import dataclasses
import logging
import random
import sys
import time
from typing import List, Optional, TextIO

from .board import Board
from .config import DIFFICULTIES, BoardConfig, SafeZone, get_preset
from .errors import MinefieldError
from .render import render_text
from .session import GameSession

logger = logging.getLogger(__name__)

PLAY_HELP = "Commands: r X Y reveal | f X Y flag | c X Y chord | n new game | q quit"


def build_config(args: argparse.Namespace) -> BoardConfig:
    """Turn preset or explicit size options into a board configuration."""
    safe_zone = SafeZone(args.safe_zone)
    if args.width or args.height or args.mines is not None:
        base = get_preset(args.difficulty)
        return BoardConfig(
            width=args.width or base.width,
            height=args.height or base.height,
            num_mines=base.num_mines if args.mines is None else args.mines,
            safe_zone=safe_zone,
        )
    return dataclasses.replace(get_preset(args.difficulty), safe_zone=safe_zone)


def make_rng(seed: Optional[int]) -> random.Random:
    return random.Random(seed) if seed is not None else random.Random()


# ============================================================================
# play
# ============================================================================

def print_status(session: GameSession, out: TextIO) -> None:
    board = session.board
    print(render_text(board, with_coords=True), file=out)
    print(
        f"Mines left: {board.remaining_mine_estimate} | "
        f"Flags: {board.flagged_count} | "
        f"Time: {session.elapsed:.0f}s",
        file=out,
    )


def run_command(session: GameSession, words: List[str], out: TextIO) -> bool:
    """
    Apply one typed command to the session.

    Returns:
        False when the player asked to quit.
    """
    command = words[0].lower()
    if command == "q":
        return False
    if command == "n":
        session.new_game()
        return True
    if command not in ("r", "f", "c") or len(words) != 3:
        print(PLAY_HELP, file=out)
        return True

    try:
        x, y = int(words[1]), int(words[2])
    except ValueError:
        print("Coordinates must be integers", file=out)
        return True

    if not session.board.in_bounds(x, y):
        print(f"({x}, {y}) is off the board", file=out)
        return True

    if command == "r":
        turn = session.click(x, y)
    elif command == "f":
        turn = session.right_click(x, y)
    else:
        turn = session.double_click(x, y)
    if turn.cue is not None:
        logger.debug(
            "cue %s for %d changed cells",
            turn.cue.value, len(turn.result.changed),
        )
    return True


def play(
    args: argparse.Namespace,
    stdin: Optional[TextIO] = None,
    out: Optional[TextIO] = None,
) -> None:
    """Play an interactive game in the terminal."""
    stdin = stdin or sys.stdin
    session = GameSession(build_config(args), make_rng(args.seed))
    print(PLAY_HELP, file=out)
    print_status(session, out)

    for line in stdin:
        words = line.split()
        if not words:
            continue
        if not run_command(session, words, out):
            break
        print_status(session, out)
        if session.board.is_won:
            print(f"*** WIN! *** ({session.elapsed:.1f}s)", file=out)
        elif session.board.is_lost:
            print("*** LOST (hit mine) *** type n for a new game", file=out)


# ============================================================================
# bench
# ============================================================================

def bench(args: argparse.Namespace, out: Optional[TextIO] = None) -> None:
    """Time generation and the first flood fill on a preset board."""
    config = build_config(args)
    board = Board(config, make_rng(args.seed))
    x, y = config.width // 2, config.height // 2

    start = time.perf_counter()
    board.populate(x, y)
    generated = time.perf_counter()
    result = board.reveal(x, y)
    revealed = time.perf_counter()

    print(f"Board: {config.width}x{config.height} with {config.num_mines} mines", file=out)
    print(f"  Generation: {generated - start:.3f}s", file=out)
    print(f"  First reveal: {revealed - generated:.3f}s", file=out)
    print(f"  Cells revealed: {len(result.changed)} / {config.safe_cells}", file=out)
    print(f"  Outcome: {board.outcome.name}", file=out)


# ============================================================================
# Argument parsing
# ============================================================================

def add_board_arguments(parser: argparse.ArgumentParser) -> None:
    parser.add_argument(
        "--difficulty", choices=list(DIFFICULTIES), default="easy",
        help="Board preset",
    )
    parser.add_argument("--width", type=int, help="Override preset width")
    parser.add_argument("--height", type=int, help="Override preset height")
    parser.add_argument("--mines", type=int, help="Override preset mine count")
    parser.add_argument(
        "--seed", type=int, default=None, help="Random seed for mine layout"
    )
    parser.add_argument(
        "--safe-zone",
        choices=[policy.value for policy in SafeZone],
        default=SafeZone.NEIGHBORHOOD.value,
        help="Cells kept mine-free around the first click",
    )


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="minefield", description="Minefield - mine-detection puzzle"
    )
    parser.add_argument(
        "-v", "--verbose", action="store_true", help="Enable debug logging"
    )
    subparsers = parser.add_subparsers(dest="command", help="Command to run")

    play_parser = subparsers.add_parser("play", help="Play in the terminal")
    add_board_arguments(play_parser)

    bench_parser = subparsers.add_parser(
        "bench", help="Time generation and the first reveal"
    )
    add_board_arguments(bench_parser)

    return parser


def main(argv: Optional[List[str]] = None) -> int:
    """Parse arguments and run the appropriate command."""
    parser = build_parser()
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )

    try:
        if args.command == "play":
            play(args)
        elif args.command == "bench":
            bench(args)
        else:
            parser.print_help()
    except MinefieldError as exc:
        print(f"error: {exc}", file=sys.stderr)
        return 2
    return 0


if __name__ == "__main__":
    sys.exit(main())
