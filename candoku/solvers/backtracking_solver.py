"""Depth-first backtracking search over a candidate-tracking board."""

from __future__ import annotations
import logging
from typing import Optional

from .base_solver import BaseSolver
from ..core.board import SudokuBoard, copy_onto
from ..core.candidates import CandidateTracker

log = logging.getLogger(__name__)


def _log_candidates(tracker: CandidateTracker) -> None:
    if log.isEnabledFor(logging.DEBUG):
        log.debug("Candidates at dead end:\n%s", tracker.candidates_to_string())


class BacktrackingSolver(BaseSolver):
    """
    Recursive backtracking driven by a CandidateTracker.

    Features:
    - Constraint propagation on every placement (done by the tracker)
    - Minimum Remaining Values (MRV) cell selection, ties broken by cell order
    - Forced moves committed in place, without cloning
    - Refuted digits ruled out at the level that tried them

    Cells and digits are always enumerated in the same order, so the same
    puzzle always produces the same solution.
    """

    name = "MRV Backtracking"

    def _solve(self, board: SudokuBoard) -> Optional[SudokuBoard]:
        """Solve using MRV backtracking."""
        self.stats.extra["max_depth"] = 0
        return self._search(CandidateTracker(board), depth=0)

    def _search(self, tracker: CandidateTracker, depth: int) -> Optional[SudokuBoard]:
        """
        Run one activation of the search on ``tracker``.

        The tracker is owned by this activation: forced moves and rule-outs
        mutate it in place, while speculative placements go to clones.

        Returns:
            The solved board, or None if this branch has no completion.
        """
        self.stats.iterations += 1
        if depth > self.stats.extra["max_depth"]:
            self.stats.extra["max_depth"] = depth

        while tracker.has_empty_cell():
            if not tracker.board.is_consistent():
                log.debug("Depth %d: board inconsistent, backtracking", depth)
                _log_candidates(tracker)
                return None
            if tracker.has_empty_candidate():
                log.debug("Depth %d: a cell ran out of candidates, backtracking", depth)
                _log_candidates(tracker)
                return None

            cell = tracker.cell_with_fewest_candidates()
            self.stats.nodes_explored += 1

            while len(tracker.candidates_of(cell)) > 1:
                digit = min(tracker.candidates_of(cell))
                log.debug("Depth %d: trying %d at %s", depth, digit, cell)

                branch = tracker.clone()
                branch.set_cell(cell, digit)
                solution = self._search(branch, depth + 1)
                if solution is not None:
                    return solution

                tracker.rule_out(digit, cell)
                self.stats.backtracks += 1

            # Exactly one candidate left: the placement is forced
            tracker.set_cell(cell, min(tracker.candidates_of(cell)))

        if not tracker.board.is_consistent():
            log.debug("Depth %d: full board is inconsistent", depth)
            return None
        return tracker.board.copy()


def solve(board: SudokuBoard) -> Optional[SudokuBoard]:
    """
    Solve a puzzle.

    Args:
        board: The puzzle. It is not modified.

    Returns:
        A fully filled, consistent board extending ``board``, or None if no
        such board exists.
    """
    solution, _ = BacktrackingSolver().solve(board)
    return solution


def solve_into(board: SudokuBoard) -> bool:
    """
    Solve a puzzle and write the solution into ``board``.

    Returns:
        True if a solution was found and copied in, False otherwise (in which
        case ``board`` is unchanged).
    """
    solution = solve(board)
    if solution is None:
        return False
    copy_onto(solution, board)
    return True
