"""Deterministic integrity checks for built grids."""

from __future__ import annotations

from dataclasses import dataclass
from typing import List, Sequence

from ..core.constants import DIRECTIONS
from ..core.exceptions import ValidationError
from ..core.models import Placement
from .grid import LetterGrid
from ..utils.logger import get_logger


LOGGER = get_logger(__name__)


@dataclass
class ValidationResult:
    ok: bool
    messages: List[str]


class PuzzleValidator:
    """Runs deterministic validation over a grid and its placements."""

    def validate(self, grid: LetterGrid, placements: Sequence[Placement]) -> ValidationResult:
        messages: List[str] = []
        try:
            self._check_square(grid)
            self._check_letters(grid)
            for placement in placements:
                self._check_straight_line(grid, placement)
                self._check_reads_back(grid, placement)
        except ValidationError as exc:
            messages.append(str(exc))
            LOGGER.error("Validation failed: %s", exc)
            return ValidationResult(ok=False, messages=messages)
        return ValidationResult(ok=True, messages=[])

    def _check_square(self, grid: LetterGrid) -> None:
        if grid.size == 0:
            raise ValidationError("Grid has no rows")
        for r, row in enumerate(grid.rows):
            if len(row) != grid.size:
                raise ValidationError(
                    f"Row {r} has {len(row)} cells, expected {grid.size}"
                )

    def _check_letters(self, grid: LetterGrid) -> None:
        for r, row in enumerate(grid.rows):
            for c, letter in enumerate(row):
                if not letter or len(letter) != 1 or letter != letter.upper():
                    raise ValidationError(f"Invalid letter {letter!r} at ({r},{c})")

    def _check_straight_line(self, grid: LetterGrid, placement: Placement) -> None:
        if not placement.cells:
            raise ValidationError(f"Placement '{placement.word}' has no cells")
        for cell in placement.cells:
            if not grid.contains(cell):
                raise ValidationError(
                    f"Placement '{placement.word}' leaves the grid at {cell}"
                )
        if len(placement.cells) < 2:
            return
        step = placement.direction
        if step not in DIRECTIONS:
            raise ValidationError(f"Placement '{placement.word}' has bad step {step}")
        for (r0, c0), (r1, c1) in zip(placement.cells, placement.cells[1:]):
            if (r1 - r0, c1 - c0) != step:
                raise ValidationError(f"Placement '{placement.word}' bends at {(r1, c1)}")

    def _check_reads_back(self, grid: LetterGrid, placement: Placement) -> None:
        text = grid.read(placement.cells)
        if text != placement.word:
            raise ValidationError(
                f"Placement '{placement.word}' reads back as '{text}'"
            )
