"""Errors raised by the board and candidate-tracking layers."""

from __future__ import annotations
from typing import Optional, TYPE_CHECKING

if TYPE_CHECKING:
    from .grid import Cell


class CandokuError(Exception):
    """Base class for errors raised by this package."""


class ParseError(CandokuError, ValueError):
    """A serialized grid has the wrong length or a non-digit character."""


class OverwriteError(CandokuError):
    """Attempt to write a digit into a cell that already holds one."""

    def __init__(self, cell: Cell, existing: int, attempted: Optional[int] = None):
        self.cell = cell
        self.existing = existing
        self.attempted = attempted
        message = f"Illegal attempt to overwrite cell {cell} holding {int(existing)}"
        if attempted is not None:
            message += f" with {int(attempted)}"
        super().__init__(message)


class NotFoundError(CandokuError, LookupError):
    """No candidate set exists for the requested cell (it is not empty)."""
