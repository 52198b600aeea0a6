"""Word-search mini-game templates.

The host stores every mini-game as a template document shaped like::

    {"type": "word_search", "title": "...", "config": {"words": [...], "gridSize": 10}}

Only reading is supported here; templates are authored elsewhere.
"""

from __future__ import annotations

import json
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Dict, List, Mapping, Optional

from ..core.constants import DEFAULT_GRID_SIZE, WORD_SEARCH_TEMPLATE_TYPE
from ..core.exceptions import TemplateError
from ..data.normalization import normalize_word
from ..utils.logger import get_logger


LOGGER = get_logger(__name__)


@dataclass
class PuzzleTemplate:
    words: List[str] = field(default_factory=list)
    grid_size: int = DEFAULT_GRID_SIZE
    title: Optional[str] = None

    @classmethod
    def from_document(cls, document: Mapping[str, Any]) -> "PuzzleTemplate":
        """Parse a full template document (``type`` + ``config``)."""

        if not isinstance(document, Mapping):
            raise TemplateError("Template document must be a JSON object")
        template_type = document.get("type", WORD_SEARCH_TEMPLATE_TYPE)
        if template_type != WORD_SEARCH_TEMPLATE_TYPE:
            raise TemplateError(f"Expected a word_search template, got '{template_type}'")
        config = document.get("config")
        if config is None:
            config = {}
        template = cls.from_config(config)
        title = document.get("title")
        template.title = str(title) if title else None
        return template

    @classmethod
    def from_config(cls, config: Mapping[str, Any]) -> "PuzzleTemplate":
        """Parse the ``config`` block; only a missing size falls back to the default."""

        if not isinstance(config, Mapping):
            raise TemplateError("Template config must be a JSON object")
        raw_words = config.get("words") or []
        if not isinstance(raw_words, list) or not all(isinstance(w, str) for w in raw_words):
            raise TemplateError("Template words must be a list of strings")
        raw_size = config.get("gridSize")
        if raw_size is None:
            raw_size = DEFAULT_GRID_SIZE
        try:
            grid_size = int(raw_size)
        except (TypeError, ValueError) as exc:
            raise TemplateError(f"Invalid gridSize {raw_size!r}") from exc
        if grid_size <= 0:
            raise TemplateError(f"gridSize must be positive, got {grid_size}")
        return cls(words=list(raw_words), grid_size=grid_size)

    def oversized_words(self) -> List[str]:
        """Words that can never fit, which would make the puzzle unwinnable."""

        return [word for word in self.words if len(normalize_word(word)) > self.grid_size]

    def to_document(self) -> Dict[str, Any]:
        document: Dict[str, Any] = {
            "type": WORD_SEARCH_TEMPLATE_TYPE,
            "config": {"words": list(self.words), "gridSize": self.grid_size},
        }
        if self.title:
            document["title"] = self.title
        return document


def load_template_file(path: Path | str) -> PuzzleTemplate:
    """Read a template document from a local JSON file."""

    path = Path(path)
    try:
        document = json.loads(path.read_text(encoding="utf-8"))
    except (json.JSONDecodeError, OSError) as exc:
        raise TemplateError(f"Cannot read template {path}: {exc}") from exc
    template = PuzzleTemplate.from_document(document)
    LOGGER.debug("Loaded template %s with %s words", path.name, len(template.words))
    return template


__all__ = ["PuzzleTemplate", "load_template_file"]
