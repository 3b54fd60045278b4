"""EIJIRO text corpus parser.

Format (one sense per line):
    ■cat  {名-1} : 猫、ネコ◆【複】cats■・The cat slept. 猫は眠った。
    ■catalog : 目録、カタログ

    ■<headword>[  {<ident>}] : <body>[◆<complement>]*[■・<example>]*

Markers are matched by position, not by plain substring search:
    - the headword segment ends at the first " : " separator
    - {ident} is only recognized at the end of the headword segment,
      separated from the headword by whitespace
    - "■・" starts an example only after the separator
    - "◆" starts a complement only before the first example
Marker characters anywhere else are kept as literal text.
"""

from dataclasses import dataclass
from pathlib import Path
from typing import Optional

from ..errors import ParseError
from ..schema import Explanation, Field
from .base import Ingestor, ParsedLine, ParseResult


@dataclass(frozen=True)
class CorpusFormat:
    """Marker strings of the corpus line grammar."""

    entry_marker: str = "■"
    ident_open: str = "{"
    ident_close: str = "}"
    separator: str = " : "
    complement_marker: str = "◆"
    example_marker: str = "■・"

    def __post_init__(self):
        for name, value in vars(self).items():
            if not value:
                raise ValueError(f"Marker {name} must not be empty")


EIJIRO_FORMAT = CorpusFormat()


class EijiroTextParser(Ingestor):
    """Parser for EIJIRO flat-text dictionaries."""

    file_extensions = [".txt"]

    def __init__(
        self,
        on_error: str = "skip",
        corpus_format: Optional[CorpusFormat] = None,
    ):
        super().__init__(on_error)
        self.format = corpus_format or EIJIRO_FORMAT

    def _split_head(self, head: str) -> tuple[str, Optional[str]]:
        """Split the headword segment into (headword, ident)."""
        fmt = self.format
        head = head.strip()

        if head.endswith(fmt.ident_close):
            open_at = head.rfind(fmt.ident_open, 0, len(head) - len(fmt.ident_close))
            # Braces glued to the headword are part of it
            if open_at == 0 or (open_at > 0 and head[open_at - 1].isspace()):
                ident = head[open_at + len(fmt.ident_open):-len(fmt.ident_close)]
                return head[:open_at].strip(), ident.strip()

        return head, None

    def parse_line(self, line: str, line_number: int) -> ParsedLine:
        """Parse one EIJIRO line.

        Args:
            line: Line text.
            line_number: 1-based line number.

        Returns:
            (headword, Field) or a ParseError describing the defect.
        """
        fmt = self.format

        if not line.startswith(fmt.entry_marker):
            return ParseError(line_number, "missing entry marker", line)

        head, sep, rest = line[len(fmt.entry_marker):].partition(fmt.separator)
        if not sep:
            return ParseError(line_number, "missing separator", line)

        headword, ident = self._split_head(head)
        if not headword:
            return ParseError(line_number, "empty headword", line)
        if ident is not None and not ident:
            return ParseError(line_number, "empty ident", line)

        explanation_text, *raw_examples = rest.split(fmt.example_marker)
        body, *raw_complements = explanation_text.split(fmt.complement_marker)

        body = body.strip()
        if not body:
            return ParseError(line_number, "empty gloss body", line)

        complements = tuple(c.strip() for c in raw_complements if c.strip())
        examples = tuple(e.strip() for e in raw_examples if e.strip())

        return headword, Field(
            ident=ident,
            explanation=Explanation(body=body, complements=complements),
            examples=examples,
        )


def parse(
    raw_text: str,
    on_error: str = "skip",
    corpus_format: Optional[CorpusFormat] = None,
) -> ParseResult:
    """Convenience function to parse EIJIRO text.

    Args:
        raw_text: Full corpus text.
        on_error: "skip" or "abort".
        corpus_format: Marker overrides.

    Returns:
        ParseResult with entries.
    """
    parser = EijiroTextParser(on_error=on_error, corpus_format=corpus_format)
    return parser.parse(raw_text)


def parse_file(
    filepath: Path | str,
    encoding: str = "utf-8",
    on_error: str = "skip",
    corpus_format: Optional[CorpusFormat] = None,
) -> ParseResult:
    """Convenience function to read and parse an EIJIRO text file.

    Args:
        filepath: Path to corpus file.
        encoding: Text encoding.
        on_error: "skip" or "abort".
        corpus_format: Marker overrides.

    Returns:
        ParseResult with entries.
    """
    parser = EijiroTextParser(on_error=on_error, corpus_format=corpus_format)
    return parser.parse_file(filepath, encoding=encoding)
