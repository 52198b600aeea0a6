"""Word normalization shared by placement and matching."""

from __future__ import annotations

import re
from typing import Iterable, List

WHITESPACE_RE = re.compile(r"\s+")


def normalize_word(text: str) -> str:
    """Return the canonical form of ``text``: uppercased, whitespace removed.

    Two inputs are the same target word exactly when their normalized forms
    are equal, so ``"Sea Lion"`` and ``"sealion"`` both become ``"SEALION"``.
    Other characters are kept as they are.
    """

    if not text:
        return ""
    return WHITESPACE_RE.sub("", text.upper())


def normalize_words(words: Iterable[str]) -> List[str]:
    return [normalize_word(word) for word in words]


__all__ = ["normalize_word", "normalize_words"]
