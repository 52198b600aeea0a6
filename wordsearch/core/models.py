"""Data models shared by the grid builder and the selection engine."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import List, Optional, Set, Tuple

from .constants import Coord


@dataclass(frozen=True)
class Placement:
    """A placed word and the cells it occupies, first letter to last."""

    word: str
    cells: Tuple[Coord, ...]
    source: str = ""

    @property
    def start(self) -> Coord:
        return self.cells[0]

    @property
    def end(self) -> Coord:
        return self.cells[-1]

    @property
    def direction(self) -> Coord:
        if len(self.cells) < 2:
            return (0, 0)
        (r0, c0), (r1, c1) = self.cells[0], self.cells[1]
        return (r1 - r0, c1 - c0)


@dataclass
class Selection:
    """Transient state of a single pointer gesture."""

    anchor: Coord
    head: Coord
    cells: List[Coord] = field(default_factory=list)

    def __post_init__(self) -> None:
        if not self.cells:
            self.cells = [self.anchor]


@dataclass
class FoundState:
    """Words matched so far and the cells to highlight for them."""

    words: Set[str] = field(default_factory=set)
    cells: Set[Coord] = field(default_factory=set)

    @property
    def count(self) -> int:
        return len(self.words)

    def is_found(self, word: str) -> bool:
        return word in self.words

    def is_highlighted(self, cell: Coord) -> bool:
        return cell in self.cells

    def record(self, word: str, cells: List[Coord]) -> None:
        self.words.add(word)
        self.cells.update(cells)


@dataclass(frozen=True)
class SelectionResult:
    """Outcome of evaluating a finished gesture."""

    cells: Tuple[Coord, ...]
    text: str
    matched_word: Optional[str] = None
    completed: bool = False

    @property
    def matched(self) -> bool:
        return self.matched_word is not None
