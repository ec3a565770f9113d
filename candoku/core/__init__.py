"""Core module for Sudoku grid addressing, boards and candidate tracking."""

from .grid import (
    Cell, Digit, DIGITS, cell, row, column, box, peers,
    all_cells, all_rows, all_columns, all_boxes,
)
from .board import Board, SudokuBoard, copy_onto
from .candidates import CandidateTracker
from .exceptions import CandokuError, NotFoundError, OverwriteError, ParseError

__all__ = [
    "Cell", "Digit", "DIGITS", "cell", "row", "column", "box", "peers",
    "all_cells", "all_rows", "all_columns", "all_boxes",
    "Board", "SudokuBoard", "copy_onto",
    "CandidateTracker",
    "CandokuError", "NotFoundError", "OverwriteError", "ParseError",
]
