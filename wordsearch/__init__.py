"""Word-search puzzle engine for the learning platform's mini-game host.

This package exposes the public API surface via:

- ``wordsearch.engine.grid.build_grid``: lays words onto a square letter grid.
- ``wordsearch.engine.selection.SelectionEngine``: turns pointer gestures into
  found words.
- ``wordsearch.engine.puzzle.WordSearchPuzzle``: one playable puzzle instance.
- ``wordsearch.io.templates.PuzzleTemplate``: mini-game template parsing.
"""

from .engine.grid import GridBuilder, GridConfig, LetterGrid, build_grid
from .engine.puzzle import WordSearchPuzzle
from .engine.selection import SelectionEngine, derive_line, snap_to_dominant_axis
from .io.templates import PuzzleTemplate, load_template_file

__all__ = [
    "GridBuilder",
    "GridConfig",
    "LetterGrid",
    "build_grid",
    "WordSearchPuzzle",
    "SelectionEngine",
    "derive_line",
    "snap_to_dominant_axis",
    "PuzzleTemplate",
    "load_template_file",
]

__version__ = "0.1.0"
