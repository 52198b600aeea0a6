"""Gesture tracking and word matching over a built grid.

A host drives the engine with three calls per gesture: ``begin_selection``
on pointer-down, ``update_selection`` for every cell the pointer enters, and
``end_selection`` on pointer-up. The engine reduces the gesture to a straight
line of cells, reads the letters along it and checks the string (and its
reverse) against the words not found yet.
"""

from __future__ import annotations

from typing import Callable, List, Optional, Sequence

from ..core.constants import Coord
from ..core.exceptions import CellOutOfBoundsError
from ..core.models import FoundState, Selection, SelectionResult
from ..data.normalization import normalize_words
from .grid import LetterGrid
from ..utils.logger import get_logger


LOGGER = get_logger(__name__)

LinePolicy = Callable[[Coord, Coord], List[Coord]]
CompletionCallback = Callable[[int, int], None]


def _sign(value: int) -> int:
    return (value > 0) - (value < 0)


def snap_to_dominant_axis(anchor: Coord, head: Coord) -> List[Coord]:
    """Reinterpret an off-line gesture as a pure row or column run.

    The run starts at ``anchor`` and follows whichever axis moved further,
    so the result may not pass through ``head``.
    """

    (r0, c0), (r1, c1) = anchor, head
    dr, dc = r1 - r0, c1 - c0
    if abs(dr) > abs(dc):
        step = _sign(dr)
        return [(r0 + step * i, c0) for i in range(abs(dr) + 1)]
    step = _sign(dc)
    return [(r0, c0 + step * i) for i in range(abs(dc) + 1)]


def derive_line(
    anchor: Coord,
    head: Coord,
    policy: LinePolicy = snap_to_dominant_axis,
) -> List[Coord]:
    """Return the ordered cells from ``anchor`` to ``head`` inclusive."""

    if anchor == head:
        return [anchor]
    (r0, c0), (r1, c1) = anchor, head
    dr, dc = r1 - r0, c1 - c0
    if dr and dc and abs(dr) != abs(dc):
        return policy(anchor, head)
    step_r, step_c = _sign(dr), _sign(dc)
    length = max(abs(dr), abs(dc)) + 1
    return [(r0 + step_r * i, c0 + step_c * i) for i in range(length)]


class SelectionEngine:
    """Turns pointer gestures into found words for one puzzle instance."""

    def __init__(
        self,
        grid: LetterGrid,
        words: Sequence[str],
        on_complete: Optional[CompletionCallback] = None,
        line_policy: LinePolicy = snap_to_dominant_axis,
    ) -> None:
        self.grid = grid
        self.targets: List[str] = normalize_words(words)
        self.on_complete = on_complete
        self.line_policy = line_policy
        self.found = FoundState()
        self.selection: Optional[Selection] = None
        self._completion_fired = False

    # ------------------------------------------------------------------
    # Queries
    # ------------------------------------------------------------------
    @property
    def is_selecting(self) -> bool:
        return self.selection is not None

    @property
    def total_words(self) -> int:
        return len(self.targets)

    @property
    def is_complete(self) -> bool:
        return self._completion_fired

    def remaining_words(self) -> List[str]:
        return [word for word in self.targets if not self.found.is_found(word)]

    def selected_cells(self) -> List[Coord]:
        if self.selection is None:
            return []
        return list(self.selection.cells)

    # ------------------------------------------------------------------
    # Gesture lifecycle
    # ------------------------------------------------------------------
    def begin_selection(self, cell: Coord) -> None:
        self._check_cell(cell)
        if self.selection is not None:
            LOGGER.debug("Discarding unfinished selection from %s", self.selection.anchor)
        self.selection = Selection(anchor=cell, head=cell)

    def update_selection(self, cell: Coord) -> None:
        self._check_cell(cell)
        if self.selection is None:
            return
        self.selection.head = cell
        self.selection.cells = derive_line(self.selection.anchor, cell, self.line_policy)

    def end_selection(self, cell: Optional[Coord] = None) -> Optional[SelectionResult]:
        """Finish the gesture and evaluate it.

        ``cell`` is an optional last head position reported with pointer-up.
        Returns None when no gesture was active.
        """

        if cell is not None:
            self._check_cell(cell)
        if self.selection is None:
            return None
        if cell is not None:
            self.update_selection(cell)

        cells = list(self.selection.cells)
        self.selection = None
        forward = self.grid.read(cells)
        backward = forward[::-1]

        for word in self.remaining_words():
            if word == forward or word == backward:
                return self._mark_found(word, cells, forward)

        LOGGER.debug("Selection %s -> %s matched nothing", cells, forward)
        return SelectionResult(cells=tuple(cells), text=forward)

    def cancel_selection(self) -> None:
        """Drop the active gesture without evaluating it."""

        self.selection = None

    # ------------------------------------------------------------------
    # Internals
    # ------------------------------------------------------------------
    def _mark_found(self, word: str, cells: List[Coord], text: str) -> SelectionResult:
        self.found.record(word, cells)
        LOGGER.info(
            "Found '%s' (%s/%s)", word, self.found.count, self.total_words
        )
        completed = False
        if not self._completion_fired and self.found.count == self.total_words:
            self._completion_fired = True
            completed = True
            LOGGER.info("Puzzle complete: all %s words found", self.total_words)
            if self.on_complete is not None:
                self.on_complete(self.found.count, self.total_words)
        return SelectionResult(
            cells=tuple(cells), text=text, matched_word=word, completed=completed
        )

    def _check_cell(self, cell: Coord) -> None:
        if not self.grid.contains(cell):
            raise CellOutOfBoundsError(
                f"Cell {cell} outside {self.grid.size}x{self.grid.size} grid"
            )
