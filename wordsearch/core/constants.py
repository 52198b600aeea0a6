"""Shared constants for the word-search engine."""

from __future__ import annotations

import string
from dataclasses import dataclass
from typing import Tuple


Coord = Tuple[int, int]

# Order matters: placement draws an index into this tuple.
DIRECTIONS: Tuple[Coord, ...] = (
    (0, 1),
    (1, 0),
    (1, 1),
    (1, -1),
    (0, -1),
    (-1, 0),
    (-1, -1),
    (-1, 1),
)

ALPHABET = string.ascii_uppercase

DEFAULT_GRID_SIZE = 10
MAX_PLACEMENT_ATTEMPTS = 100

WORD_SEARCH_TEMPLATE_TYPE = "word_search"


@dataclass(frozen=True)
class Bounds:
    """Simple rectangle bounds helper."""

    rows: int
    cols: int

    def contains(self, row: int, col: int) -> bool:
        return 0 <= row < self.rows and 0 <= col < self.cols
