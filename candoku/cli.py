"""Command-line interface for the Sudoku solver."""

import argparse
import logging
import sys

from .core.board import SudokuBoard
from .core.exceptions import ParseError
from .reader import read_grids, write_solutions
from .solvers import BacktrackingSolver


def main(argv=None):
    """Main entry point for the CLI."""
    parser = argparse.ArgumentParser(
        description="Sudoku solver using candidate tracking and MRV backtracking",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  # Solve a single puzzle
  candoku solve --puzzle "0030206009003050010018064..."

  # Solve every grid in a Project Euler 96 style file
  candoku file p096_sudoku.txt --output solutions.txt --progress
        """
    )
    parser.add_argument(
        "--log-level", default="WARNING",
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        help="Logging level (default: WARNING)"
    )

    subparsers = parser.add_subparsers(dest="command", help="Available commands")

    # Solve command
    solve_parser = subparsers.add_parser("solve", help="Solve a Sudoku puzzle")
    solve_parser.add_argument(
        "--puzzle", "-p", type=str, required=True,
        help="Puzzle string (81 chars, 0 for empty cells)"
    )
    solve_parser.add_argument(
        "--verbose", "-v", action="store_true",
        help="Show detailed solving statistics"
    )

    # File command
    file_parser = subparsers.add_parser("file", help="Solve every grid in a puzzle file")
    file_parser.add_argument(
        "input", type=str,
        help="File containing grids as nine lines of nine digits"
    )
    file_parser.add_argument(
        "--output", "-o", type=str, default=None,
        help="Output file for the solution report (default: stdout)"
    )
    file_parser.add_argument(
        "--progress", action="store_true",
        help="Show a progress bar"
    )

    args = parser.parse_args(argv)

    logging.basicConfig(
        level=getattr(logging, args.log_level),
        format="%(asctime)s %(name)s %(levelname)s %(message)s",
    )

    if args.command is None:
        parser.print_help()
        sys.exit(1)

    if args.command == "solve":
        cmd_solve(args)
    elif args.command == "file":
        cmd_file(args)


def cmd_solve(args):
    """Handle the solve command."""
    try:
        board = SudokuBoard.from_string(args.puzzle)
    except ParseError as e:
        print(f"Error parsing puzzle: {e}")
        sys.exit(1)

    print("Input puzzle:")
    print(board)
    print()

    solver = BacktrackingSolver(track_memory=args.verbose)
    solution, stats = solver.solve(board)

    if stats.solved:
        print(f"✓ Solved in {stats.time_seconds:.4f}s")
        if args.verbose:
            print(f"  Iterations: {stats.iterations:,}")
            print(f"  Backtracks: {stats.backtracks:,}")
            print(f"  Max depth: {stats.extra['max_depth']}")
            print(f"  Memory: {stats.memory_bytes / 1024:.2f} KB")
        print(solution)
        print(solution.to_string())
    else:
        print("✗ Puzzle has no solution")
        if args.verbose:
            print(f"  Time: {stats.time_seconds:.4f}s")
            print(f"  Iterations: {stats.iterations:,}")


def cmd_file(args):
    """Handle the file command."""
    with open(args.input, "r") as source:
        grids = list(read_grids(source))

    if args.output:
        with open(args.output, "w") as output:
            euler_sum = write_solutions(grids, output, progress=args.progress)
        print(f"{len(grids)} grids processed, report saved to {args.output}")
        print(f"Project Euler 96 sum: {euler_sum}")
    else:
        write_solutions(grids, sys.stdout, progress=args.progress)
        print()


if __name__ == "__main__":
    main()
