"""Command-line interface for the magic square puzzle system."""

import argparse
import json
import logging
import sys
from typing import List, Optional

from tqdm import tqdm

from .core.board import MagicBoard
from .core.exceptions import InvalidMoveError, MagicSquareError
from .core.validator import compute_sums, is_valid_square, magic_constant, puzzle_status, PuzzleStatus
from .game.session import GameSession
from .generator import MagicSquareGenerator, Difficulty, SUPPORTED_ORDERS
from .generator.variants import all_variants
from .utils.logger import configure_logging
from .visualize import BoardRenderer, format_board, format_sums


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="magic-square",
        description="Magic Square Puzzle Generator & Verifier",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  # Print a randomized 5x5 magic square
  magic-square generate --order 5 --randomize

  # Build 3 hard 4x4 puzzles and save them as JSON
  magic-square puzzle --order 4 --difficulty hard --count 3 --output puzzles.json

  # Check a square
  magic-square verify --square "8,1,6;3,5,7;4,9,2"

  # Play in the terminal
  magic-square play --order 3 --difficulty easy
        """
    )
    parser.add_argument(
        "--verbose", "-v", action="store_true",
        help="Enable debug logging"
    )

    subparsers = parser.add_subparsers(dest="command", help="Available commands")

    # Generate command
    gen_parser = subparsers.add_parser("generate", help="Generate a complete magic square")
    gen_parser.add_argument(
        "--order", "-n", type=int, default=3,
        help="Order of the square (default: 3)"
    )
    gen_parser.add_argument(
        "--randomize", "-r", action="store_true",
        help="Apply a random rotation/mirror"
    )
    gen_parser.add_argument(
        "--seed", "-s", type=int, default=None,
        help="Random seed for reproducibility"
    )
    gen_parser.add_argument(
        "--output", "-o", type=str, default=None,
        help="Output file for the square (JSON format)"
    )

    # Puzzle command
    puzzle_parser = subparsers.add_parser("puzzle", help="Generate puzzles")
    puzzle_parser.add_argument(
        "--order", "-n", type=int, default=3,
        help="Order of the square (default: 3)"
    )
    puzzle_parser.add_argument(
        "--difficulty", "-d",
        choices=[d.value for d in Difficulty],
        default="medium",
        help="Difficulty level (default: medium)"
    )
    puzzle_parser.add_argument(
        "--fraction", "-f", type=float, default=None,
        help="Clue fraction in (0, 1]; overrides --difficulty"
    )
    puzzle_parser.add_argument(
        "--count", "-c", type=int, default=1,
        help="Number of puzzles to generate (default: 1)"
    )
    puzzle_parser.add_argument(
        "--seed", "-s", type=int, default=None,
        help="Random seed for reproducibility"
    )
    puzzle_parser.add_argument(
        "--output", "-o", type=str, default=None,
        help="Output file for puzzles (JSON format)"
    )
    puzzle_parser.add_argument(
        "--png", type=str, default=None,
        help="Directory to render puzzle images into"
    )

    # Verify command
    verify_parser = subparsers.add_parser("verify", help="Verify a square or board")
    verify_parser.add_argument(
        "--square", "-q", type=str, required=True,
        help='Rows separated by ";" and cells by ",", "." for empty'
    )

    # Check command
    check_parser = subparsers.add_parser(
        "check", help="Generate and verify every supported order up to a maximum"
    )
    check_parser.add_argument(
        "--max-order", "-m", type=int, default=max(SUPPORTED_ORDERS),
        help=f"Largest order to check (default: {max(SUPPORTED_ORDERS)})"
    )

    # Play command
    play_parser = subparsers.add_parser("play", help="Play a puzzle in the terminal")
    play_parser.add_argument(
        "--order", "-n", type=int, choices=SUPPORTED_ORDERS, default=3,
        help="Order of the square (default: 3)"
    )
    play_parser.add_argument(
        "--difficulty", "-d",
        choices=[d.value for d in Difficulty],
        default="medium",
        help="Difficulty level (default: medium)"
    )
    play_parser.add_argument(
        "--seed", "-s", type=int, default=None,
        help="Random seed for reproducibility"
    )

    return parser


def main(argv: Optional[List[str]] = None) -> int:
    """Main entry point for the CLI."""
    parser = build_parser()
    args = parser.parse_args(argv)

    if args.command is None:
        parser.print_help()
        return 1

    configure_logging(logging.DEBUG if args.verbose else logging.WARNING)

    commands = {
        "generate": cmd_generate,
        "puzzle": cmd_puzzle,
        "verify": cmd_verify,
        "check": cmd_check,
        "play": cmd_play,
    }
    try:
        return commands[args.command](args)
    except (MagicSquareError, ValueError) as e:
        print(f"Error: {e}", file=sys.stderr)
        return 2


def cmd_generate(args) -> int:
    """Handle the generate command."""
    generator = MagicSquareGenerator(seed=args.seed)
    square = generator.generate(args.order)
    if args.randomize:
        square = generator.randomize(square)

    print(f"Magic square of order {args.order} (constant {magic_constant(args.order)}):")
    print(square)
    print(format_sums(compute_sums(square)))

    if args.output:
        with open(args.output, "w") as f:
            json.dump({
                "order": args.order,
                "magic_constant": magic_constant(args.order),
                "square": square.to_2d_list(),
            }, f, indent=2)
        print(f"\nSquare saved to {args.output}")
    return 0


def cmd_puzzle(args) -> int:
    """Handle the puzzle command."""
    generator = MagicSquareGenerator(seed=args.seed)
    difficulty = args.fraction if args.fraction is not None else args.difficulty
    puzzles = generator.generate_batch(args.count, args.order, difficulty)

    renderer = BoardRenderer(args.png) if args.png else None

    for i, state in enumerate(puzzles, 1):
        print(f"\n--- {state.difficulty.capitalize()} Puzzle {i} "
              f"({state.clue_count} clues, target {magic_constant(args.order)}) ---")
        print(format_board(state.board, state.fixed))
        print(f"Available: {' '.join(str(v) for v in state.available)}")

        if renderer is not None:
            path = renderer.render(state, f"puzzle_{args.order}x{args.order}_{i}.png")
            print(f"Rendered to {path}")

    if args.output:
        with open(args.output, "w") as f:
            json.dump([p.to_dict() for p in puzzles], f, indent=2)
        print(f"\nAll puzzles saved to {args.output}")

    print(f"\nTotal puzzles generated: {len(puzzles)}")
    return 0


def cmd_verify(args) -> int:
    """Handle the verify command."""
    board = MagicBoard.from_string(args.square)
    status = puzzle_status(board)

    print(board)
    print(f"Target sum (magic constant): {magic_constant(board.size)}")
    print(format_sums(compute_sums(board)))

    if status is PuzzleStatus.SOLVED:
        if is_valid_square(board):
            print("✓ Magic square")
        else:
            print("✓ Magic sums (numbers are not exactly 1..n²)")
        return 0
    if status is PuzzleStatus.COMPLETE_INVALID:
        print("✗ Complete, but not magic")
    else:
        print("✗ Incomplete")
    return 1


def cmd_check(args) -> int:
    """Handle the check command."""
    orders = [n for n in range(1, args.max_order + 1) if n % 2 == 1 or n % 4 == 0]
    failures = []

    for n in tqdm(orders, desc="Orders"):
        square = MagicSquareGenerator.generate(n)
        for k, variant in enumerate(all_variants(square)):
            if not is_valid_square(variant):
                failures.append((n, k))

    if failures:
        for n, k in failures:
            print(f"✗ Order {n}, variant {k} is not magic")
        return 1

    print(f"✓ {len(orders)} orders x 8 variants verified")
    return 0


PLAY_HELP = """Commands (rows and columns start at 1):
  select V       pick number V to place (again to deselect)
  click R C      place the selection, or clear a filled cell
  reset          clear all non-clue cells
  new            start a new puzzle
  sums           show line sums
  quit           leave the game"""


def cmd_play(args, input_fn=input) -> int:
    """Handle the play command."""
    session = GameSession(args.order, args.difficulty, seed=args.seed)
    print(PLAY_HELP)

    while True:
        state = session.state
        print()
        print(f"Target sum (magic constant): {session.target}")
        print(format_board(state.board, state.fixed))
        print(f"Available: {' '.join(str(v) for v in session.available)}"
              + (f"  [selected {session.selected}]" if session.selected is not None else ""))

        status = session.status
        if status is PuzzleStatus.SOLVED:
            print("Solved!")
        elif status is PuzzleStatus.COMPLETE_INVALID:
            print("Complete, but not magic yet.")

        try:
            line = input_fn("> ").strip()
        except EOFError:
            return 0
        if not line:
            continue

        cmd, *params = line.split()
        try:
            if cmd in ("quit", "exit", "q"):
                return 0
            elif cmd == "select" and len(params) == 1:
                session.select(int(params[0]))
            elif cmd == "click" and len(params) == 2:
                row, col = int(params[0]), int(params[1])
                if not (1 <= row <= state.size and 1 <= col <= state.size):
                    raise ValueError(f"cell ({row}, {col}) is off the board")
                session.click(row - 1, col - 1)
            elif cmd == "reset":
                session.reset()
            elif cmd == "new":
                session.new_game()
            elif cmd == "sums":
                print(format_sums(session.sums))
            else:
                print(PLAY_HELP)
        except (InvalidMoveError, ValueError, IndexError) as e:
            print(f"Invalid move: {e}")


if __name__ == "__main__":
    sys.exit(main())
