"""
Addressing scheme for a 9x9 Sudoku grid.

Cells, rows, columns and boxes are built once at import time into read-only
tables. Every other module enumerates the grid through the functions here, so
the order of ``all_cells()`` (row-major) is the order used for tie-breaking
during the search.
"""

from __future__ import annotations
import operator
from dataclasses import dataclass
from enum import IntEnum
from typing import Dict, Iterator, Tuple, Union, overload

import numpy as np

SIZE = 9
BOX_SIZE = 3


def _check_index(index: int, what: str) -> int:
    index = operator.index(index)
    if index < 0 or index >= SIZE:
        raise IndexError(f"Bad {what} index: {index}")
    return index


class Digit(IntEnum):
    """A value 1-9 that may occupy a cell."""

    ONE = 1
    TWO = 2
    THREE = 3
    FOUR = 4
    FIVE = 5
    SIX = 6
    SEVEN = 7
    EIGHT = 8
    NINE = 9

    def to_char(self) -> str:
        return str(self.value)

    @classmethod
    def from_int(cls, value: int) -> Digit:
        """
        Convert an integer to a Digit.

        Raises:
            ValueError: If ``value`` is not in 1..9.
        """
        if isinstance(value, cls):
            return value
        try:
            return cls(operator.index(value))
        except (TypeError, ValueError):
            raise ValueError(f"Not a nonzero digit: {value!r}") from None

    @classmethod
    def from_char(cls, char: str) -> Digit:
        """
        Convert a character '1'-'9' to a Digit.

        Raises:
            ValueError: If ``char`` is not one of '1'..'9'.
        """
        if not isinstance(char, str) or len(char) != 1 or char not in "123456789":
            raise ValueError(f"Not a nonzero digit: {char!r}")
        return cls(ord(char) - ord("0"))


DIGITS: Tuple[Digit, ...] = tuple(Digit)


@dataclass(frozen=True, order=True)
class Cell:
    """One of the 81 grid positions. Both coordinates are validated on construction."""

    row: int
    column: int

    def __post_init__(self):
        object.__setattr__(self, "row", _check_index(self.row, "row"))
        object.__setattr__(self, "column", _check_index(self.column, "column"))

    @classmethod
    def of(cls, row: int, column: int) -> Cell:
        return cell(row, column)

    def __iter__(self) -> Iterator[int]:
        yield self.row
        yield self.column

    def __str__(self) -> str:
        return f"({self.row}, {self.column})"


class Group:
    """Nine cells sharing a row, a column or a box."""

    kind = "group"

    def __init__(self, cells: Tuple[Cell, ...]):
        self._cells = cells
        # Fancy-index pair for reading the group out of a 9x9 array
        rows = np.array([c.row for c in cells], dtype=np.intp)
        columns = np.array([c.column for c in cells], dtype=np.intp)
        rows.flags.writeable = False
        columns.flags.writeable = False
        self.indices = (rows, columns)

    @property
    def cells(self) -> Tuple[Cell, ...]:
        return self._cells

    def __iter__(self) -> Iterator[Cell]:
        return iter(self._cells)

    def __len__(self) -> int:
        return len(self._cells)

    def __contains__(self, item: object) -> bool:
        return item in self._cells

    def __getitem__(self, position: int) -> Cell:
        return self._cells[position]

    def __repr__(self) -> str:
        return f"{self.kind}({self.index})"


class Row(Group):
    kind = "row"

    def __init__(self, index: int):
        self.index = index
        super().__init__(tuple(_CELLS[index * SIZE + j] for j in range(SIZE)))


class Column(Group):
    kind = "column"

    def __init__(self, index: int):
        self.index = index
        super().__init__(tuple(_CELLS[i * SIZE + index] for i in range(SIZE)))


class Box(Group):
    """A 3x3 box, iterated row-major from its top-left corner."""

    kind = "box"

    def __init__(self, corner: Cell):
        self.corner = corner
        self.index = (corner.row // BOX_SIZE) * BOX_SIZE + corner.column // BOX_SIZE
        super().__init__(tuple(
            _CELLS[(corner.row + k // BOX_SIZE) * SIZE + corner.column + k % BOX_SIZE]
            for k in range(SIZE)
        ))

    def __repr__(self) -> str:
        return f"{self.kind}({self.index}, corner={self.corner})"


# Lookup tables, built once and never mutated afterwards
_CELLS: Tuple[Cell, ...] = tuple(Cell(i, j) for i in range(SIZE) for j in range(SIZE))
_ROWS: Tuple[Row, ...] = tuple(Row(i) for i in range(SIZE))
_COLUMNS: Tuple[Column, ...] = tuple(Column(j) for j in range(SIZE))
_BOXES: Tuple[Box, ...] = tuple(
    Box(_CELLS[i * SIZE + j])
    for i in range(0, SIZE, BOX_SIZE)
    for j in range(0, SIZE, BOX_SIZE)
)


def cell(row: int, column: int) -> Cell:
    """
    Return the cell at (row, column).

    Raises:
        IndexError: If either coordinate is outside [0, 9).
    """
    row = _check_index(row, "row")
    column = _check_index(column, "column")
    return _CELLS[row * SIZE + column]


CellRef = Union[Cell, Tuple[int, int]]


@overload
def as_cell(where: CellRef) -> Cell: ...


@overload
def as_cell(where: int, column: int) -> Cell: ...


def as_cell(where, column=None):
    """
    Accept either a Cell, a (row, column) pair, or row and column separately.

    Raises:
        TypeError: If a bare row index is given without a column.
    """
    if column is not None:
        return cell(where, column)
    if isinstance(where, int):
        raise TypeError(f"Expected a cell or a (row, column) pair, got {where!r}")
    if isinstance(where, Cell):
        return where
    row, column = where
    return cell(row, column)


def row(index: int) -> Row:
    return _ROWS[_check_index(index, "row")]


def column(index: int) -> Column:
    return _COLUMNS[_check_index(index, "column")]


@overload
def box(where: CellRef) -> Box: ...


@overload
def box(where: int, column: int) -> Box: ...


def box(where, column=None):
    """Return the unique box containing the given cell or coordinates."""
    c = as_cell(where, column)
    return _BOXES[(c.row // BOX_SIZE) * BOX_SIZE + c.column // BOX_SIZE]


def all_cells() -> Tuple[Cell, ...]:
    return _CELLS


def all_rows() -> Tuple[Row, ...]:
    return _ROWS


def all_columns() -> Tuple[Column, ...]:
    return _COLUMNS


def all_boxes() -> Tuple[Box, ...]:
    return _BOXES


def all_groups() -> Tuple[Group, ...]:
    """Rows, then columns, then boxes."""
    return _ROWS + _COLUMNS + _BOXES


def _build_peers() -> Dict[Cell, Tuple[Cell, ...]]:
    peers = {}
    for c in _CELLS:
        shared = set(row(c.row)) | set(column(c.column)) | set(box(c))
        shared.discard(c)
        peers[c] = tuple(p for p in _CELLS if p in shared)
    return peers


_PEERS = _build_peers()


@overload
def peers(where: CellRef) -> Tuple[Cell, ...]: ...


@overload
def peers(where: int, column: int) -> Tuple[Cell, ...]: ...


def peers(where, column=None):
    """
    Get the 20 cells sharing a row, column or box with the given cell.

    Returns:
        The peers in ``all_cells()`` order, excluding the cell itself.
    """
    return _PEERS[as_cell(where, column)]
