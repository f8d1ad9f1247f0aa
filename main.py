#!/usr/bin/env python3
"""
Minesweeper board demo.

Usage:
    python main.py [--width W] [--height H] [--mines N] [--reveal I]
                   [--flag I ...] [--seed S] [--debug]
"""
import argparse
import random

from src.mines import Board, MinesweeperError


def play(args: argparse.Namespace) -> None:
    """Build a board, reveal one cell, flag some and print it."""
    rng = random.Random(args.seed) if args.seed is not None else None
    board = Board.new(args.width, args.height, args.mines, rng=rng)

    print(f"Board: {args.width}x{args.height} with {args.mines} mines")
    print(f"Revealing cell {args.reveal} {board.cartesian(args.reveal)}\n")
    board.reveal_tile(args.reveal)

    for index in args.flag:
        try:
            board.flag_tile(index)
        except MinesweeperError as error:
            print(f"Skipped flag: {error}")

    print(board.render_debug() if args.debug else board.render())
    print(f"\nHidden cells left: {len(board.hidden_indices())}")


def main() -> None:
    """Parse arguments and run the demo."""
    parser = argparse.ArgumentParser(description="Minesweeper board demo")
    parser.add_argument("--width", type=int, default=9, help="Board width")
    parser.add_argument("--height", type=int, default=9, help="Board height")
    parser.add_argument("--mines", type=int, default=20, help="Number of mines")
    parser.add_argument("--reveal", type=int, default=0, help="Cell to reveal first")
    parser.add_argument(
        "--flag", type=int, nargs="*", default=[], help="Cells to flag"
    )
    parser.add_argument("--seed", type=int, default=None, help="Random seed")
    parser.add_argument(
        "--debug", action="store_true", help="Show bombs and counts"
    )
    args = parser.parse_args()

    play(args)


if __name__ == "__main__":
    main()
