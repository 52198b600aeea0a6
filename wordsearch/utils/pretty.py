"""Pretty-print helpers for word-search grids."""

from __future__ import annotations

import sys
from collections import Counter
from typing import TYPE_CHECKING, Iterable, Optional, Set

from ..core.constants import Coord

if TYPE_CHECKING:
    from ..engine.grid import LetterGrid
    from ..engine.puzzle import WordSearchPuzzle


def format_grid(grid: LetterGrid, highlighted: Optional[Iterable[Coord]] = None) -> str:
    """Render the grid with row/column headers; highlighted cells are bracketed."""

    marks: Set[Coord] = set(highlighted or ())
    width = grid.size
    header_cells = [f"{c:>3}" for c in range(width)]
    lines = ["    " + "".join(header_cells)]
    lines.append("    " + "-" * (3 * width))
    for r in range(width):
        row_cells = []
        for c in range(width):
            letter = grid.letter(r, c)
            row_cells.append(f"[{letter}]" if (r, c) in marks else f" {letter} ")
        lines.append(f"{r:>2} |" + "".join(row_cells))
    return "\n".join(lines)


def pretty_print_grid(
    grid: LetterGrid,
    *,
    highlighted: Optional[Iterable[Coord]] = None,
    label: str | None = None,
    stream=None,
) -> None:
    """Print the grid in a human-friendly format."""

    stream = stream or sys.stdout
    if label:
        print(label, file=stream)
    print(format_grid(grid, highlighted), file=stream)


def print_puzzle_stats(puzzle: WordSearchPuzzle, *, solution: bool = False, stream=None) -> None:
    """Print the grid plus placement and progress stats."""

    stream = stream or sys.stdout
    highlighted: Set[Coord] = set(puzzle.found.cells)
    if solution:
        for placement in puzzle.placements:
            highlighted.update(placement.cells)
    print(format_grid(puzzle.grid, highlighted), file=stream)

    placements = puzzle.placements
    lengths = [len(p.word) for p in placements]
    letter_cells = {cell for p in placements for cell in p.cells}
    total_cells = puzzle.size * puzzle.size
    crossings = sum(lengths) - len(letter_cells)

    print(file=stream)
    print("--- Grid ---", file=stream)
    print(f"  Size:          {puzzle.size} x {puzzle.size} ({total_cells} cells)", file=stream)
    print(f"  Word letters:  {len(letter_cells)} ({len(letter_cells) / total_cells * 100:.0f}%)", file=stream)
    print(f"  Crossings:     {crossings}", file=stream)

    print(file=stream)
    print("--- Words ---", file=stream)
    print(f"  Placed:        {len(placements)}/{len(puzzle.words)}", file=stream)
    if lengths:
        dist_parts = [f"{l}:{c}" for l, c in sorted(Counter(lengths).items())]
        print(f"  Length range:  {min(lengths)}-{max(lengths)}", file=stream)
        print(f"  Distribution:  {' '.join(dist_parts)}", file=stream)
    if puzzle.unplaced_words:
        print(f"  Unplaced:      {', '.join(puzzle.unplaced_words)}", file=stream)
    print(f"  Found:         {puzzle.found.count}/{puzzle.engine.total_words}", file=stream)

    if puzzle.seed is not None:
        print(file=stream)
        print(f"Seed: {puzzle.seed}", file=stream)
