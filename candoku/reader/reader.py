"""Reading puzzle files and writing solution reports."""

from __future__ import annotations
import logging
from typing import Iterable, Iterator, List, Optional, TextIO

from tqdm import tqdm

from ..core.board import SudokuBoard
from ..core.grid import SIZE
from ..solvers import solve

log = logging.getLogger(__name__)

_DECIMAL = frozenset("0123456789")


def _represents_row(line: str) -> bool:
    return len(line) == SIZE and all(ch in _DECIMAL for ch in line)


def read_grid(stream: TextIO) -> Optional[SudokuBoard]:
    """
    Read the next grid from a text stream.

    Scans for nine consecutive lines of nine digits each, with '0' for a
    blank cell. Any other line (a "Grid 01" header, say) discards the rows
    collected so far.

    Returns:
        The parsed board, or None if the stream ends first.
    """
    rows: List[str] = []
    while len(rows) < SIZE:
        line = stream.readline()
        if not line:
            return None
        line = line.rstrip("\r\n")
        if _represents_row(line):
            rows.append(line)
        else:
            rows.clear()
    return SudokuBoard.from_string("".join(rows))


def read_grids(stream: TextIO) -> Iterator[SudokuBoard]:
    """Yield every grid in a text stream, in order."""
    while True:
        grid = read_grid(stream)
        if grid is None:
            return
        yield grid


def format_solution(board: SudokuBoard) -> str:
    """The 81-character form split into nine newline-terminated rows."""
    s = board.to_string()
    return "".join(s[i:i + SIZE] + "\n" for i in range(0, len(s), SIZE))


def three_digit_number(board: SudokuBoard) -> int:
    """
    Number formed by the first three digits of the top row.

    Raises:
        ValueError: If any of those three cells is blank.
    """
    total = 0
    for j in range(3):
        digit = board.digit_at(0, j)
        if digit is None:
            raise ValueError(f"Grid has blank at (0, {j})")
        total = total * 10 + int(digit)
    return total


def write_solutions(
    grids: Iterable[SudokuBoard],
    output: TextIO,
    progress: bool = False,
) -> int:
    """
    Solve each grid and write a report to ``output``.

    Each input gets a "Solution to input N:" block or an "Input N has no
    solution." line. The report ends with the Project Euler 96 sum, the
    total of ``three_digit_number`` over the solved grids.

    Args:
        grids: Puzzles to solve, numbered from 1 in the report.
        output: Text stream receiving the report.
        progress: Show a tqdm progress bar on stderr.

    Returns:
        The Project Euler 96 sum.
    """
    euler_sum = 0
    for index, grid in enumerate(tqdm(grids, desc="Solving", disable=not progress), 1):
        solved = solve(grid)
        if solved is not None:
            output.write(f"Solution to input {index}:\n{format_solution(solved)}\n")
            euler_sum += three_digit_number(solved)
        else:
            log.info("Input %d has no solution", index)
            output.write(f"Input {index} has no solution.\n\n")
        output.flush()

    output.write(f"Project Euler 96 sum: {euler_sum}")
    output.flush()
    return euler_sum
