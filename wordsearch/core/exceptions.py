"""Custom exception hierarchy for the word-search engine."""


class WordSearchError(Exception):
    """Base exception for puzzle failures."""


class ConfigurationError(WordSearchError):
    """Raised when a puzzle is configured with an unusable size or budget."""


class CellOutOfBoundsError(WordSearchError, ValueError):
    """Raised when a gesture reports a coordinate outside the grid."""


class ValidationError(WordSearchError):
    """Raised when the built grid fails its integrity checks."""


class TemplateError(WordSearchError):
    """Raised when a mini-game template cannot be parsed as a word search."""
