"""Puzzle orchestration: build a grid, validate it, attach a selection engine."""

from __future__ import annotations

import random
from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional, Sequence

from ..core.constants import MAX_PLACEMENT_ATTEMPTS
from ..core.exceptions import ValidationError
from ..core.models import FoundState, Placement
from ..data.normalization import normalize_word, normalize_words
from .grid import GridBuilder, GridConfig, LetterGrid
from .selection import CompletionCallback, LinePolicy, SelectionEngine, snap_to_dominant_axis
from .validator import PuzzleValidator
from ..utils.logger import get_logger


LOGGER = get_logger(__name__)


@dataclass
class WordSearchPuzzle:
    """One puzzle instance: an immutable grid plus its live found state.

    Resetting never mutates an instance; :meth:`reset` builds a new one for
    the same words and size.
    """

    words: List[str]
    grid: LetterGrid
    placements: List[Placement]
    engine: SelectionEngine
    max_attempts: int = MAX_PLACEMENT_ATTEMPTS
    seed: Optional[int] = None
    rng: random.Random = field(default_factory=random.Random, repr=False)

    @classmethod
    def create(
        cls,
        words: Sequence[str],
        size: int,
        *,
        rng: Optional[random.Random] = None,
        seed: Optional[int] = None,
        max_attempts: int = MAX_PLACEMENT_ATTEMPTS,
        on_complete: Optional[CompletionCallback] = None,
        line_policy: LinePolicy = snap_to_dominant_axis,
    ) -> "WordSearchPuzzle":
        config = GridConfig(size=size, max_attempts=max_attempts, rng_seed=seed)
        builder = GridBuilder(config, rng=rng)
        grid, placements = builder.build(words)

        validation = PuzzleValidator().validate(grid, placements)
        if not validation.ok:
            raise ValidationError(f"Grid validation failed: {validation.messages}")

        engine = SelectionEngine(grid, words, on_complete=on_complete, line_policy=line_policy)
        puzzle = cls(
            words=list(words),
            grid=grid,
            placements=placements,
            engine=engine,
            max_attempts=max_attempts,
            seed=seed,
            rng=builder.rng,
        )
        if not puzzle.is_completable:
            LOGGER.warning(
                "Puzzle cannot be completed (unplaced: %s)", puzzle.unplaced_words
            )
        return puzzle

    def reset(self) -> "WordSearchPuzzle":
        """Return a fresh puzzle with a new grid and nothing found."""

        return WordSearchPuzzle.create(
            self.words,
            self.size,
            rng=self.rng,
            max_attempts=self.max_attempts,
            on_complete=self.engine.on_complete,
            line_policy=self.engine.line_policy,
        )

    # ------------------------------------------------------------------
    # Queries
    # ------------------------------------------------------------------
    @property
    def size(self) -> int:
        return self.grid.size

    @property
    def found(self) -> FoundState:
        return self.engine.found

    @property
    def placed_words(self) -> List[str]:
        return [placement.word for placement in self.placements]

    @property
    def unplaced_words(self) -> List[str]:
        """Input words (as given) that ended up with no placement."""

        remaining = [placement.source for placement in self.placements]
        unplaced: List[str] = []
        for word in self.words:
            if word in remaining:
                remaining.remove(word)
            else:
                unplaced.append(word)
        return unplaced

    @property
    def is_completable(self) -> bool:
        """True when finding words can ever fire the completion callback.

        An empty word list never completes. Duplicate words (same normalized
        form) count separately towards the total but can only be found once,
        so they also block completion.
        """

        if not self.words or self.unplaced_words:
            return False
        normalized = normalize_words(self.words)
        return len(set(normalized)) == len(normalized)

    def placement_for(self, word: str) -> Optional[Placement]:
        target = normalize_word(word)
        for placement in self.placements:
            if placement.word == target:
                return placement
        return None

    def to_jsonable(self) -> Dict[str, Any]:
        return {
            "size": self.size,
            "seed": self.seed,
            "words": list(self.words),
            "grid": self.grid.to_jsonable(),
            "placements": [
                {
                    "word": placement.word,
                    "source": placement.source,
                    "cells": [list(cell) for cell in placement.cells],
                }
                for placement in self.placements
            ],
            "unplaced": self.unplaced_words,
            "found": sorted(self.found.words),
        }
