"""Letter grid representation and randomized word placement."""

from __future__ import annotations

import random
from dataclasses import dataclass
from typing import Iterable, List, Optional, Sequence, Tuple

from ..core.constants import ALPHABET, DIRECTIONS, MAX_PLACEMENT_ATTEMPTS, Bounds, Coord
from ..core.exceptions import ConfigurationError
from ..core.models import Placement
from ..data.normalization import normalize_word
from ..utils.logger import get_logger


LOGGER = get_logger(__name__)


@dataclass(frozen=True)
class LetterGrid:
    """Immutable N×N matrix of single uppercase characters."""

    rows: Tuple[Tuple[str, ...], ...]

    @property
    def size(self) -> int:
        return len(self.rows)

    @property
    def bounds(self) -> Bounds:
        return Bounds(rows=self.size, cols=self.size)

    def contains(self, cell: Coord) -> bool:
        row, col = cell
        return self.bounds.contains(row, col)

    def letter(self, row: int, col: int) -> str:
        return self.rows[row][col]

    def read(self, cells: Iterable[Coord]) -> str:
        """Concatenate the letters found at ``cells`` in order."""

        return "".join(self.rows[row][col] for row, col in cells)

    def to_jsonable(self) -> List[List[str]]:
        return [list(row) for row in self.rows]

    def __str__(self) -> str:
        return "\n".join(" ".join(row) for row in self.rows)


@dataclass
class GridConfig:
    """Configuration values driving grid construction."""

    size: int
    max_attempts: int = MAX_PLACEMENT_ATTEMPTS
    rng_seed: Optional[int] = None
    alphabet: str = ALPHABET

    def bounds(self) -> Bounds:
        return Bounds(rows=self.size, cols=self.size)

    def check(self) -> None:
        if self.size <= 0:
            raise ConfigurationError(f"Grid size must be positive, got {self.size}")
        if self.max_attempts <= 0:
            raise ConfigurationError(
                f"Placement attempt budget must be positive, got {self.max_attempts}"
            )
        if not self.alphabet:
            raise ConfigurationError("Filler alphabet must not be empty")


class GridBuilder:
    """Places words onto an empty grid, then fills the gaps with random letters."""

    def __init__(self, config: GridConfig, rng: Optional[random.Random] = None) -> None:
        config.check()
        self.config = config
        self.bounds = config.bounds()
        self.rng = rng if rng is not None else random.Random(config.rng_seed)
        self._cells: List[List[Optional[str]]] = []

    # ------------------------------------------------------------------
    # Public entrypoint
    # ------------------------------------------------------------------
    def build(self, words: Sequence[str]) -> Tuple[LetterGrid, List[Placement]]:
        size = self.config.size
        self._cells = [[None] * size for _ in range(size)]
        placements: List[Placement] = []

        for source in words:
            word = normalize_word(source)
            if not word:
                LOGGER.debug("Skipping blank word %r", source)
                continue
            placement = self._place_word(word, source)
            if placement is None:
                LOGGER.debug(
                    "No room for '%s' after %s attempts", word, self.config.max_attempts
                )
                continue
            placements.append(placement)

        filled = self._fill_empty_cells()
        grid = LetterGrid(rows=tuple(tuple(row) for row in self._cells))
        LOGGER.info(
            "Built %sx%s grid: placed %s/%s words, %s filler cells",
            size,
            size,
            len(placements),
            len(words),
            filled,
        )
        return grid, placements

    # ------------------------------------------------------------------
    # Placement
    # ------------------------------------------------------------------
    def _place_word(self, word: str, source: str) -> Optional[Placement]:
        size = self.config.size
        for _ in range(self.config.max_attempts):
            direction = DIRECTIONS[self.rng.randrange(len(DIRECTIONS))]
            row = self.rng.randrange(size)
            col = self.rng.randrange(size)
            cells = self._fit(word, row, col, direction)
            if cells is None:
                continue
            for (r, c), letter in zip(cells, word):
                self._cells[r][c] = letter
            return Placement(word=word, cells=tuple(cells), source=source)
        return None

    def _fit(self, word: str, row: int, col: int, direction: Coord) -> Optional[List[Coord]]:
        """Return the cells ``word`` would occupy, or None if it clashes."""

        dr, dc = direction
        cells: List[Coord] = []
        for index, letter in enumerate(word):
            r, c = row + dr * index, col + dc * index
            if not self.bounds.contains(r, c):
                return None
            existing = self._cells[r][c]
            if existing is not None and existing != letter:
                return None
            cells.append((r, c))
        return cells

    def _fill_empty_cells(self) -> int:
        filled = 0
        for row in self._cells:
            for c, letter in enumerate(row):
                if letter is None:
                    row[c] = self.rng.choice(self.config.alphabet)
                    filled += 1
        return filled


def build_grid(
    words: Sequence[str],
    size: int,
    *,
    rng: Optional[random.Random] = None,
    max_attempts: int = MAX_PLACEMENT_ATTEMPTS,
) -> Tuple[LetterGrid, List[Placement]]:
    """Lay ``words`` onto a ``size``×``size`` grid.

    Words that find no clash-free spot within ``max_attempts`` random tries
    are left out of the returned placements. Pass a seeded ``rng`` for a
    reproducible grid.
    """

    builder = GridBuilder(GridConfig(size=size, max_attempts=max_attempts), rng=rng)
    return builder.build(words)
