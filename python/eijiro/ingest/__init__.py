"""Corpus parsing module.

Provides pluggable parsers for dictionary corpus formats:
- EIJIRO flat text ("■headword  {ident} : body◆note■・example")

Usage:
    from eijiro.ingest import eijiro_text

    result = eijiro_text.parse_file("EIJIRO.txt", encoding="cp932")
    result = eijiro_text.parse(raw_text, on_error="abort")
"""

from .base import Ingestor, ParseResult
from . import eijiro_text

# Register available parsers
PARSERS: dict[str, type[Ingestor]] = {
    "eijiro": eijiro_text.EijiroTextParser,
}


def get_parser(name: str) -> type[Ingestor]:
    """Get parser class by name."""
    if name not in PARSERS:
        raise ValueError(f"Unknown parser: {name}. Available: {list(PARSERS.keys())}")
    return PARSERS[name]


def register_parser(name: str, parser_cls: type[Ingestor]) -> None:
    """Register a custom parser."""
    PARSERS[name] = parser_cls


__all__ = [
    "Ingestor",
    "ParseResult",
    "eijiro_text",
    "get_parser",
    "register_parser",
    "PARSERS",
]
