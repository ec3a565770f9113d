"""Board wrapper that tracks the legal digits of every empty cell."""

from __future__ import annotations
from typing import Dict, FrozenSet, List, Optional, Set

from .board import SudokuBoard
from .exceptions import NotFoundError
from .grid import DIGITS, Cell, CellRef, Digit, as_cell, peers


class CandidateTracker:
    """
    A board plus, for each of its empty cells, the set of digits not yet excluded.

    Every digit committed through ``set_cell`` is removed from the candidate
    sets of the cell's row, column and box. As long as digits are only ever
    placed through ``set_cell``, the value a cell takes in any completion of
    the board is in that cell's candidate set. ``rule_out`` narrows a set
    without placing anything and so can break that guarantee; the search uses
    it only for digits it has already tried and refuted at the current level.
    """

    def __init__(self, board: SudokuBoard):
        """
        Build candidate sets for a copy of ``board``.

        Each empty cell starts with all nine digits; the digit of every
        filled cell is then removed from the sets of its peers.
        """
        self._board = board.copy()
        # Insertion order follows all_cells(); deletions keep it intact.
        self._candidates: Dict[Cell, Set[Digit]] = {
            c: set(DIGITS) for c in self._board.empty_cells()
        }
        for c in self._board.non_empty_cells():
            self._propagate(c, self._board.digit_at(c))

    @property
    def board(self) -> SudokuBoard:
        return self._board

    def _propagate(self, cell: Cell, digit: Digit) -> None:
        for peer in peers(cell):
            remaining = self._candidates.get(peer)
            if remaining is not None:
                remaining.discard(digit)

    def set_cell(self, cell: CellRef, digit: int) -> None:
        """
        Place a digit and rule it out along the cell's row, column and box.

        Raises:
            OverwriteError: If the cell is already filled.
        """
        cell = as_cell(cell)
        digit = Digit.from_int(digit)
        self._board.set_digit(cell, digit)
        del self._candidates[cell]
        self._propagate(cell, digit)

    def rule_out(self, digit: int, cell: CellRef) -> None:
        """
        Remove one digit from one empty cell's candidate set.

        Raises:
            NotFoundError: If the cell is not empty.
        """
        cell = as_cell(cell)
        remaining = self._candidates.get(cell)
        if remaining is None:
            raise NotFoundError(f"Cell {cell} is not empty")
        remaining.discard(digit)

    def lookup(self, cell: CellRef) -> Optional[FrozenSet[Digit]]:
        """Candidate set of a cell, or None if the cell is filled."""
        remaining = self._candidates.get(as_cell(cell))
        return None if remaining is None else frozenset(remaining)

    def candidates_of(self, cell: CellRef) -> FrozenSet[Digit]:
        """
        Read-only view of a cell's candidate set.

        Raises:
            NotFoundError: If the cell is not empty.
        """
        cell = as_cell(cell)
        remaining = self.lookup(cell)
        if remaining is None:
            raise NotFoundError(f"Cell {cell} is not empty")
        return remaining

    def empty_cells(self) -> List[Cell]:
        return list(self._candidates)

    def has_empty_cell(self) -> bool:
        return bool(self._candidates)

    def has_empty_candidate(self) -> bool:
        """True if some empty cell has no legal digit left."""
        return any(not remaining for remaining in self._candidates.values())

    def cell_with_fewest_candidates(self) -> Cell:
        """
        Pick the empty cell with the smallest candidate set.

        Ties go to the cell that comes first in ``all_cells()`` order.

        Raises:
            NotFoundError: If the board has no empty cell.
        """
        if not self._candidates:
            raise NotFoundError("The grid is full")
        return min(self._candidates, key=lambda c: len(self._candidates[c]))

    def clone(self) -> CandidateTracker:
        """Deep copy of the board and of every candidate set."""
        new_tracker = CandidateTracker.__new__(CandidateTracker)
        new_tracker._board = self._board.copy()
        new_tracker._candidates = {c: set(s) for c, s in self._candidates.items()}
        return new_tracker

    def candidates_to_string(self) -> str:
        """One line per empty cell, fewest candidates first."""
        cells = sorted(self._candidates, key=lambda c: len(self._candidates[c]))
        return "".join(
            f"{c}: {' '.join(str(int(d)) for d in sorted(self._candidates[c]))}\n"
            for c in cells
        )

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, CandidateTracker):
            return NotImplemented
        return self._board == other._board and self._candidates == other._candidates

    __hash__ = None

    def __repr__(self) -> str:
        return f"CandidateTracker(empty={len(self._candidates)})"
