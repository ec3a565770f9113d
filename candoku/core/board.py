"""9x9 Sudoku board with write-once cells."""

from __future__ import annotations
from typing import Iterable, List, Optional, Union
import numpy as np

from .exceptions import OverwriteError, ParseError
from .grid import (
    BOX_SIZE, SIZE, Cell, CellRef, Digit, Group, all_cells, as_cell,
)

# A cell, a (row, column) pair, or a row index followed by a column argument
CellOrRow = Union[CellRef, int]

_TEXT_DIGITS = "0123456789"


def _distinct(values: np.ndarray) -> bool:
    filled = values[values != 0]
    return len(filled) == len(np.unique(filled))


class SudokuBoard:
    """
    A 9x9 grid of optional digits.

    Cells are stored in a numpy array with 0 meaning blank. Once a cell holds a
    digit, ``set_digit`` refuses to overwrite it; there is no way to clear a
    cell through the public interface.
    """

    def __init__(self, grid: Optional[Union[np.ndarray, List[List[int]]]] = None):
        """
        Initialize a board.

        Args:
            grid: Optional 9x9 array-like of values 0-9. If None, creates an
                  empty board.
        """
        if grid is None:
            self.grid = np.zeros((SIZE, SIZE), dtype=np.int8)
            return

        arr = np.asarray(grid)
        if arr.shape != (SIZE, SIZE):
            raise ValueError(f"Grid shape must be ({SIZE}, {SIZE}), got {arr.shape}")
        if not np.issubdtype(arr.dtype, np.number) or not np.array_equal(arr, np.round(arr)):
            raise ValueError("Grid values must be integers")
        if arr.min() < 0 or arr.max() > SIZE:
            raise ValueError(f"Grid values must be 0-{SIZE}")
        self.grid = arr.astype(np.int8)

    def copy(self) -> SudokuBoard:
        """Create a deep copy of the board."""
        new_board = SudokuBoard.__new__(SudokuBoard)
        new_board.grid = self.grid.copy()
        return new_board

    def digit_at(self, where: CellOrRow, column: Optional[int] = None) -> Optional[Digit]:
        """Get the digit at a cell, or None if the cell is blank."""
        c = as_cell(where, column)
        value = self.grid[c.row, c.column]
        return Digit(int(value)) if value else None

    def set_digit(self, where: CellOrRow, *args) -> None:
        """
        Write a digit into a blank cell.

        Accepts ``set_digit(cell, d)`` or ``set_digit(row, column, d)``.

        Raises:
            OverwriteError: If the cell already holds a digit.
            ValueError: If ``d`` is not in 1..9.
        """
        if len(args) == 2:
            c, d = as_cell(where, args[0]), args[1]
        elif len(args) == 1:
            c, d = as_cell(where), args[0]
        else:
            raise TypeError("set_digit() takes a cell and a digit")

        digit = Digit.from_int(d)
        existing = self.grid[c.row, c.column]
        if existing:
            raise OverwriteError(c, Digit(int(existing)), digit)
        self.grid[c.row, c.column] = int(digit)

    def is_empty(self, where: CellOrRow, column: Optional[int] = None) -> bool:
        c = as_cell(where, column)
        return bool(self.grid[c.row, c.column] == 0)

    def empty_cells(self, group: Optional[Iterable[Cell]] = None) -> List[Cell]:
        """Empty cells of a group (or of the whole board), in iteration order."""
        cells = all_cells() if group is None else group
        return [c for c in cells if self.grid[c.row, c.column] == 0]

    def non_empty_cells(self, group: Optional[Iterable[Cell]] = None) -> List[Cell]:
        """Filled cells of a group (or of the whole board), in iteration order."""
        cells = all_cells() if group is None else group
        return [c for c in cells if self.grid[c.row, c.column] != 0]

    def has_empty_cell(self, group: Optional[Iterable[Cell]] = None) -> bool:
        if group is None:
            return not self.grid.all()
        return any(self.grid[c.row, c.column] == 0 for c in group)

    def count_empty(self) -> int:
        """Count the number of empty cells."""
        return int(np.sum(self.grid == 0))

    def count_filled(self) -> int:
        """Count the number of filled cells."""
        return int(np.sum(self.grid != 0))

    def is_consistent(self, group: Optional[Iterable[Cell]] = None) -> bool:
        """
        Check that no digit repeats among the filled cells of a group.

        With no argument every row, column and box is checked. This says
        nothing about whether the board can be completed.
        """
        if group is not None:
            if isinstance(group, Group):
                return _distinct(self.grid[group.indices])
            return _distinct(np.array([self.grid[c.row, c.column] for c in group]))

        # One-hot counts per (row, column, digit); a count above 1 along any
        # unit axis is a repeated digit.
        one_hot = self.grid[:, :, None] == np.arange(1, SIZE + 1)
        if one_hot.sum(axis=1).max() > 1:
            return False
        if one_hot.sum(axis=0).max() > 1:
            return False
        boxes = one_hot.reshape(BOX_SIZE, BOX_SIZE, BOX_SIZE, BOX_SIZE, SIZE)
        return bool(boxes.sum(axis=(1, 3)).max() <= 1)

    def is_solved(self) -> bool:
        """Check if the puzzle is completely and correctly solved."""
        return not self.has_empty_cell() and self.is_consistent()

    def to_string(self) -> str:
        """
        Convert the board to its 81-character form.

        Cells are written row-major, '0' for blank and '1'-'9' otherwise.
        """
        return "".join(_TEXT_DIGITS[v] for v in self.grid.ravel())

    @classmethod
    def from_string(cls, s: str) -> SudokuBoard:
        """
        Create a board from its 81-character form.

        Raises:
            ParseError: If ``s`` is not 81 characters long or contains a
                        character other than '0'-'9'.
        """
        if len(s) != SIZE * SIZE:
            raise ParseError(f"String of incorrect size: {len(s)}")

        values = []
        for position, char in enumerate(s):
            if char not in _TEXT_DIGITS:
                raise ParseError(f"Not a digit: {char!r} at position {position}")
            values.append(ord(char) - ord("0"))

        return cls(np.array(values, dtype=np.int8).reshape(SIZE, SIZE))

    def __str__(self) -> str:
        """Pretty-print the board."""
        lines = []
        horizontal_sep = "+" + (("-" * (BOX_SIZE * 2 + 1)) + "+") * BOX_SIZE

        for i in range(SIZE):
            if i % BOX_SIZE == 0:
                lines.append(horizontal_sep)

            row_str = "|"
            for j in range(SIZE):
                val = self.grid[i, j]
                row_str += f" {val}" if val else " ."
                if (j + 1) % BOX_SIZE == 0:
                    row_str += " |"

            lines.append(row_str)

        lines.append(horizontal_sep)
        return "\n".join(lines)

    def __repr__(self) -> str:
        return f"SudokuBoard(filled={self.count_filled()})"

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, SudokuBoard):
            return NotImplemented
        return bool(np.array_equal(self.grid, other.grid))

    def __hash__(self) -> int:
        return hash(self.to_string())


Board = SudokuBoard


def copy_onto(source: SudokuBoard, target: SudokuBoard) -> None:
    """
    Merge the filled cells of ``source`` into ``target``.

    Cells that agree are left alone. Every cell is checked before anything is
    written, so a failed merge leaves ``target`` untouched.

    Raises:
        OverwriteError: If a target cell holds a different digit than the
                        corresponding source cell.
    """
    pending = []
    for c in source.non_empty_cells():
        digit = source.digit_at(c)
        existing = target.digit_at(c)
        if existing is None:
            pending.append((c, digit))
        elif existing != digit:
            raise OverwriteError(c, existing, digit)

    for c, digit in pending:
        target.set_digit(c, digit)
