"""Solvers module for Sudoku puzzles."""

from .base_solver import BaseSolver, SolverStats
from .backtracking_solver import BacktrackingSolver, solve, solve_into

__all__ = [
    "BaseSolver",
    "SolverStats",
    "BacktrackingSolver",
    "solve",
    "solve_into",
]
