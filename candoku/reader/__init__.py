"""Reader module for puzzle files and solution reports."""

from .reader import read_grid, read_grids, format_solution, three_digit_number, write_solutions

__all__ = ["read_grid", "read_grids", "format_solution", "three_digit_number", "write_solutions"]
