"""Query façade: the entry point frontends call.

Runs the fuzzy index, joins positions with their Fields and ranks the
results prefix-first:

    lookup(d, "cat", 1) over ["bat", "cat", "cats"]
    -> cat, cats   (start with "cat")
       bat         (everything else)

Inside each group the index order (sorted headwords) is kept.
"""

from dataclasses import dataclass
from typing import Iterator, Optional

from .errors import QueryError
from .schema import Dictionary, Field


@dataclass(frozen=True)
class LookupResult:
    """A matched headword with all of its Fields."""

    headword: str
    fields: tuple[Field, ...]


def iter_matches(
    dictionary: Dictionary,
    query: str,
    max_distance: int = 0,
    distance_limit: Optional[int] = None,
) -> Iterator[LookupResult]:
    """Lazily yield matches in index order, without ranking.

    Callers that only need the first few matches can stop consuming early.

    Raises:
        QueryError: If query is not a string.
        IndexConstructionError: If max_distance is unsupported.
    """
    if not isinstance(query, str):
        raise QueryError(f"Query must be a string, got {type(query).__name__}")
    if not query:
        return iter(())

    matches = dictionary.index.fuzzy(query, max_distance, limit=distance_limit)
    return (
        LookupResult(headword=key, fields=dictionary.fields_at(position))
        for key, position in matches
    )


def lookup(
    dictionary: Dictionary,
    query: str,
    max_distance: int = 0,
    limit: Optional[int] = None,
    distance_limit: Optional[int] = None,
) -> list[LookupResult]:
    """Look up a query, prefix matches first.

    Args:
        dictionary: Built Dictionary.
        query: Headword to search for. An empty query matches nothing.
        max_distance: Maximum edit distance (0 for exact lookup).
        limit: Keep at most this many ranked results (None or 0 for all).
        distance_limit: Override for the largest accepted max_distance.

    Returns:
        List of LookupResult; empty when nothing matches.

    Raises:
        QueryError: If query is not a string or limit is negative.
        IndexConstructionError: If max_distance is unsupported.
    """
    if limit is not None and limit < 0:
        raise QueryError(f"Limit must be >= 0, got {limit}")

    prefixed: list[LookupResult] = []
    others: list[LookupResult] = []

    for result in iter_matches(dictionary, query, max_distance, distance_limit):
        if result.headword.startswith(query):
            prefixed.append(result)
        else:
            others.append(result)

    ranked = prefixed + others
    if limit:
        return ranked[:limit]
    return ranked
