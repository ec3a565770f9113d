"""Tests for puzzle-file reading and solution reports."""

import io

import pytest
from candoku.core.board import SudokuBoard
from candoku.reader import (
    read_grid, read_grids, format_solution, three_digit_number, write_solutions,
)


EULER_GRID_1 = (
    "003020600\n"
    "900305001\n"
    "001806400\n"
    "008102900\n"
    "700000008\n"
    "006708200\n"
    "002609500\n"
    "800203009\n"
    "005010300\n"
)

EULER_SOLUTION_1 = (
    "483921657\n"
    "967345821\n"
    "251876493\n"
    "548132976\n"
    "729564138\n"
    "136798245\n"
    "372689514\n"
    "814253769\n"
    "695417382\n"
)

# First row holds two 5s
UNSOLVABLE = "550070000\n" + EULER_GRID_1[10:]


def euler_file(*grids):
    return io.StringIO("".join(f"Grid {i:02d}\n{g}" for i, g in enumerate(grids, 1)))


class TestReadGrid:
    """Tests for scanning a stream for grids."""

    def test_reads_one_grid(self):
        board = read_grid(euler_file(EULER_GRID_1))
        assert board.to_string() == EULER_GRID_1.replace("\n", "")

    def test_end_of_stream(self):
        assert read_grid(io.StringIO("")) is None

    def test_incomplete_grid(self):
        partial = "".join(EULER_GRID_1.splitlines(keepends=True)[:8])
        assert read_grid(io.StringIO(partial)) is None

    def test_interruption_resets_rows(self):
        """A non-row line discards the rows collected before it."""
        lines = EULER_GRID_1.splitlines(keepends=True)
        text = "".join(lines[:4]) + "junk\n" + EULER_GRID_1
        board = read_grid(io.StringIO(text))
        assert board.to_string() == EULER_GRID_1.replace("\n", "")

    @pytest.mark.parametrize("line", ["12345678\n", "1234567890\n", "12345678x\n", "\n"])
    def test_non_row_lines(self, line):
        text = line * 9
        assert read_grid(io.StringIO(text)) is None

    def test_windows_line_endings(self):
        board = read_grid(io.StringIO(EULER_GRID_1.replace("\n", "\r\n")))
        assert board is not None

    def test_read_grids(self):
        grids = list(read_grids(euler_file(EULER_GRID_1, UNSOLVABLE, EULER_GRID_1)))
        assert len(grids) == 3
        assert grids[0] == grids[2]
        assert not grids[1].is_consistent()


class TestFormatting:
    def test_format_solution(self):
        board = SudokuBoard.from_string(EULER_SOLUTION_1.replace("\n", ""))
        assert format_solution(board) == EULER_SOLUTION_1

    def test_three_digit_number(self):
        board = SudokuBoard.from_string(EULER_SOLUTION_1.replace("\n", ""))
        assert three_digit_number(board) == 483

    def test_three_digit_number_blank(self):
        board = SudokuBoard.from_string(EULER_GRID_1.replace("\n", ""))
        with pytest.raises(ValueError):
            three_digit_number(board)


class TestWriteSolutions:
    """Tests for the solution report."""

    def test_report(self):
        grids = read_grids(euler_file(EULER_GRID_1, UNSOLVABLE))
        output = io.StringIO()

        total = write_solutions(grids, output)

        assert total == 483
        assert output.getvalue() == (
            "Solution to input 1:\n"
            + EULER_SOLUTION_1
            + "\n"
            + "Input 2 has no solution.\n\n"
            + "Project Euler 96 sum: 483"
        )

    def test_sum_over_several_grids(self):
        grids = read_grids(euler_file(EULER_GRID_1, EULER_GRID_1))
        assert write_solutions(grids, io.StringIO()) == 966

    def test_empty_input(self):
        output = io.StringIO()
        assert write_solutions([], output) == 0
        assert output.getvalue() == "Project Euler 96 sum: 0"


if __name__ == "__main__":
    pytest.main([__file__, "-v"])
