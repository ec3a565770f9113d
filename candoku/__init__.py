"""Sudoku solver using candidate tracking and MRV backtracking."""

from .core import (
    Board, SudokuBoard, Cell, Digit, CandidateTracker, copy_onto,
    CandokuError, NotFoundError, OverwriteError, ParseError,
)
from .solvers import BacktrackingSolver, SolverStats, solve, solve_into

__version__ = "1.0.0"

__all__ = [
    "Board", "SudokuBoard", "Cell", "Digit", "CandidateTracker", "copy_onto",
    "CandokuError", "NotFoundError", "OverwriteError", "ParseError",
    "BacktrackingSolver", "SolverStats", "solve", "solve_into",
]
