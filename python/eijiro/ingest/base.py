"""Base parser interface for dictionary corpora.

All parsers inherit from Ingestor and implement the parse_line() method.
The base class drives line iteration, blank-line skipping and the
skip-or-abort policy for malformed lines.
"""

from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from pathlib import Path
from typing import Optional, Union
import logging

from ..errors import EmptyCorpusError, ParseError
from ..schema import Field

logger = logging.getLogger(__name__)

ON_ERROR_POLICIES = ("skip", "abort")

# A parsed line is either an entry or the error explaining why it was skipped
Entry = tuple[str, Field]
ParsedLine = Union[Entry, ParseError]


@dataclass
class ParseResult:
    """Result of parsing a corpus."""

    entries: list[Entry]
    source_path: Optional[str] = None
    total_lines: int = 0        # Lines seen, blank ones included
    blank_lines: int = 0
    replaced_chars: int = 0     # Undecodable bytes turned into U+FFFD
    errors: list[ParseError] = field(default_factory=list)

    @property
    def total_valid(self) -> int:
        return len(self.entries)

    @property
    def total_errors(self) -> int:
        return len(self.errors)

    def __repr__(self) -> str:
        return (
            f"ParseResult({self.source_path or '<text>'}: "
            f"{self.total_valid}/{self.total_lines} valid, "
            f"{self.total_errors} malformed)"
        )


class Ingestor(ABC):
    """Base class for corpus parsers.

    Subclasses must implement:
        - parse_line(line, line_number) -> (headword, Field) or ParseError
        - file_extensions: list of supported extensions

    The parse() method handles iteration and error policy.
    """

    file_extensions: list[str] = []

    def __init__(self, on_error: str = "skip"):
        """Initialize parser.

        Args:
            on_error: "skip" collects malformed lines and continues,
                "abort" raises the first ParseError.
        """
        if on_error not in ON_ERROR_POLICIES:
            raise ValueError(
                f"Unknown on_error policy: {on_error}. Available: {list(ON_ERROR_POLICIES)}"
            )
        self.on_error = on_error

    @abstractmethod
    def parse_line(self, line: str, line_number: int) -> ParsedLine:
        """Parse one non-blank line.

        Args:
            line: Line text without its line terminator.
            line_number: 1-based line number.

        Returns:
            (headword, Field) for a well-formed line, otherwise a ParseError.
        """
        pass

    def parse(self, raw_text: str, source_path: Optional[str] = None) -> ParseResult:
        """Parse a whole corpus.

        Args:
            raw_text: Full corpus text.
            source_path: Where the text came from (for reporting only).

        Returns:
            ParseResult with entries in corpus order.

        Raises:
            ParseError: On the first malformed line when on_error="abort".
            EmptyCorpusError: If no valid entry was found.
        """
        result = ParseResult(entries=[], source_path=source_path)

        lines = raw_text.split("\n")
        if lines and lines[-1] == "":
            lines.pop()
        if lines and lines[0].startswith("\ufeff"):
            lines[0] = lines[0][1:]

        for line_number, line in enumerate(lines, start=1):
            result.total_lines += 1
            line = line.rstrip("\r")

            if not line.strip():
                result.blank_lines += 1
                continue

            parsed = self.parse_line(line, line_number)
            if isinstance(parsed, ParseError):
                if self.on_error == "abort":
                    raise parsed
                result.errors.append(parsed)
                continue

            result.entries.append(parsed)

        if not result.entries:
            raise EmptyCorpusError(
                f"No valid entries in {source_path or 'corpus'} "
                f"({result.total_errors} malformed lines)"
            )

        logger.debug("Parsed %r", result)
        return result

    def parse_file(self, filepath: Path | str, encoding: str = "utf-8") -> ParseResult:
        """Read and parse a corpus file.

        Args:
            filepath: Path to corpus file.
            encoding: Text encoding (EIJIRO releases are often cp932).

        Returns:
            ParseResult with entries.
        """
        filepath = Path(filepath)
        raw_text = filepath.read_text(encoding=encoding, errors="replace")
        result = self.parse(raw_text, source_path=str(filepath))
        result.replaced_chars = raw_text.count("\ufffd")
        return result
