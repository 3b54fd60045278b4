"""Dictionary builder for the lookup index.

Collects (headword, Field) pairs, groups them by exact headword and sorts
the headwords:

    ("cat", n), ("catalog", x), ("cat", v)
    -> keys         = ("cat", "catalog")
       field_groups = ((n, v), (x,))
"""

from dataclasses import dataclass
from typing import Iterable
import logging

from ..errors import EmptyCorpusError
from ..schema import Dictionary, Field
from ..ingest.base import Entry, ParseResult

logger = logging.getLogger(__name__)


@dataclass
class BuildStats:
    """Statistics from a build operation."""

    total_keys: int = 0
    total_fields: int = 0
    total_examples: int = 0
    total_complements: int = 0
    skipped_lines: int = 0


class DictionaryBuilder:
    """Builds a Dictionary from parsed entries."""

    def __init__(self):
        # Internal storage: headword -> Fields in encounter order
        self._groups: dict[str, list[Field]] = {}
        self._skipped_lines = 0
        self.stats = BuildStats()

    def add_entries(self, entries: ParseResult | Iterable[Entry]) -> None:
        """Add entries from a ParseResult or any iterable of pairs.

        Args:
            entries: ParseResult from a parser, or (headword, Field) pairs.
        """
        if isinstance(entries, ParseResult):
            self._skipped_lines += entries.total_errors
            entries = entries.entries

        for headword, field in entries:
            self.add_entry(headword, field)

    def add_entry(self, headword: str, field: Field) -> None:
        """Add a single sense.

        Args:
            headword: Exact headword (never normalized).
            field: Sense to attach.
        """
        group = self._groups.get(headword)
        if group is None:
            self._groups[headword] = [field]
        else:
            group.append(field)

    def get_key_count(self) -> int:
        """Get number of distinct headwords added so far."""
        return len(self._groups)

    def get_field_count(self) -> int:
        """Get number of Fields added so far."""
        return sum(len(group) for group in self._groups.values())

    def build(self) -> Dictionary:
        """Build the Dictionary.

        Returns:
            Dictionary with sorted keys and co-indexed field groups.

        Raises:
            EmptyCorpusError: If no entry was added.
        """
        if not self._groups:
            raise EmptyCorpusError("No entries to build a dictionary from")

        keys = sorted(self._groups)
        field_groups = [tuple(self._groups[key]) for key in keys]

        stats = BuildStats(skipped_lines=self._skipped_lines)
        for group in field_groups:
            stats.total_keys += 1
            stats.total_fields += len(group)
            for field in group:
                stats.total_examples += len(field.examples)
                stats.total_complements += len(field.complements)
        self.stats = stats

        logger.info(
            "Built dictionary: %d headwords, %d fields",
            stats.total_keys,
            stats.total_fields,
        )
        return Dictionary(keys=tuple(keys), field_groups=tuple(field_groups))


def build(entries: ParseResult | Iterable[Entry]) -> Dictionary:
    """Convenience function to build a Dictionary in one step.

    Args:
        entries: ParseResult or (headword, Field) pairs.

    Returns:
        Built Dictionary.
    """
    builder = DictionaryBuilder()
    builder.add_entries(entries)
    return builder.build()
