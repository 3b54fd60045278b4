"""Exception hierarchy for eijiro.

Parse errors are collected per line and only raised in strict mode.
Cache errors are always recoverable by rebuilding from the corpus.
"""

from typing import Optional


class EijiroError(Exception):
    """Base class for all eijiro errors."""


class ParseError(EijiroError, ValueError):
    """A malformed corpus line."""

    def __init__(self, line_number: int, reason: str, line: Optional[str] = None):
        self.line_number = line_number
        self.reason = reason
        self.line = line
        super().__init__(f"line {line_number}: {reason}")


class BuildError(EijiroError):
    """The dictionary could not be built."""


class EmptyCorpusError(BuildError):
    """No valid entry was found in the corpus."""


class CorpusNotFoundError(EijiroError, FileNotFoundError):
    """The corpus file is missing and no usable cache exists."""


class CacheError(EijiroError):
    """The cache could not be read or written."""


class IndexConstructionError(EijiroError, ValueError):
    """Invalid lookup index input or unsupported search parameters."""


class QueryError(EijiroError):
    """A query could not be answered."""
