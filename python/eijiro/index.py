"""Lookup index over sorted headwords.

Supports exact lookup (binary search) and bounded edit-distance lookup.

The fuzzy search walks a character trie built from the sorted keys and
carries one Levenshtein DP row per trie edge:

    row[j] = distance(trie prefix, query[:j])

A subtree is skipped as soon as min(row) exceeds the distance bound, so only
the part of the vocabulary near the query is visited. Children are kept in
insertion order, which is ascending because keys are inserted sorted, so a
pre-order walk yields matches in sorted-key order.
"""

from bisect import bisect_left
from typing import Iterator, Optional, Sequence

from .errors import IndexConstructionError

# Largest distance accepted unless the caller passes its own ceiling
MAX_DISTANCE_LIMIT = 3


class _Node:
    __slots__ = ("children", "position")

    def __init__(self):
        self.children: Optional[dict[str, "_Node"]] = None
        self.position: Optional[int] = None


def check_distance(max_distance: int, limit: Optional[int] = None) -> int:
    """Validate a distance bound.

    Args:
        max_distance: Requested maximum edit distance.
        limit: Largest accepted value (default MAX_DISTANCE_LIMIT).

    Returns:
        The distance as an int.

    Raises:
        IndexConstructionError: If the distance is not a non-negative
            integer within the limit.
    """
    if limit is None:
        limit = MAX_DISTANCE_LIMIT
    if isinstance(max_distance, bool) or not isinstance(max_distance, int):
        raise IndexConstructionError(
            f"Distance must be an integer, got {max_distance!r}"
        )
    if max_distance < 0:
        raise IndexConstructionError(f"Distance must be >= 0, got {max_distance}")
    if max_distance > limit:
        raise IndexConstructionError(
            f"Distance {max_distance} exceeds supported maximum {limit}"
        )
    return max_distance


def edit_distance(a: str, b: str) -> int:
    """Two-row DP Levenshtein distance over code points."""
    if a == b:
        return 0
    if not a:
        return len(b)
    if not b:
        return len(a)

    prev = list(range(len(b) + 1))
    for i, ca in enumerate(a, 1):
        cur = [i]
        for j, cb in enumerate(b, 1):
            cur.append(min(
                cur[j - 1] + 1,
                prev[j] + 1,
                prev[j - 1] + (ca != cb),
            ))
        prev = cur
    return prev[-1]


def _next_row(word: str, previous: list[int], char: str) -> list[int]:
    row = [previous[0] + 1]
    for column in range(1, len(previous)):
        row.append(min(
            row[column - 1] + 1,                             # insert
            previous[column] + 1,                            # delete
            previous[column - 1] + (word[column - 1] != char),  # replace
        ))
    return row


class LookupIndex:
    """Immutable exact/fuzzy index over a sorted headword sequence."""

    def __init__(self, keys: Sequence[str], max_distance_limit: int = MAX_DISTANCE_LIMIT):
        """Build the index.

        Args:
            keys: Headwords in strictly ascending order.
            max_distance_limit: Largest distance fuzzy() accepts by default.

        Raises:
            IndexConstructionError: If keys are not strings or not strictly
                ascending.
        """
        self.keys = tuple(keys)
        self.max_distance_limit = max_distance_limit
        self._root = _Node()

        previous = None
        for position, key in enumerate(self.keys):
            if not isinstance(key, str):
                raise IndexConstructionError(
                    f"Key at position {position} is not a string: {key!r}"
                )
            if previous is not None and not previous < key:
                raise IndexConstructionError(
                    f"Keys not strictly ascending at position {position}: "
                    f"{previous!r} >= {key!r}"
                )
            self._insert(key, position)
            previous = key

    def _insert(self, key: str, position: int) -> None:
        node = self._root
        for char in key:
            if node.children is None:
                node.children = {}
            child = node.children.get(char)
            if child is None:
                child = node.children[char] = _Node()
            node = child
        node.position = position

    def __len__(self) -> int:
        return len(self.keys)

    def exact(self, word: str) -> Optional[int]:
        """Get the position of word, or None if absent."""
        position = bisect_left(self.keys, word)
        if position < len(self.keys) and self.keys[position] == word:
            return position
        return None

    def fuzzy(
        self,
        word: str,
        max_distance: int,
        limit: Optional[int] = None,
    ) -> Iterator[tuple[str, int]]:
        """Find keys within max_distance edits of word.

        Arguments are validated immediately; the matches are produced lazily
        in sorted-key order. Every call starts an independent traversal.

        Args:
            word: Query string.
            max_distance: Maximum Levenshtein distance (inclusive).
            limit: Override for the largest accepted distance.

        Returns:
            Iterator of (key, position) tuples.

        Raises:
            IndexConstructionError: For an unsupported distance or a
                non-string query.
        """
        if not isinstance(word, str):
            raise IndexConstructionError(f"Query must be a string, got {word!r}")
        max_distance = check_distance(
            max_distance,
            self.max_distance_limit if limit is None else limit,
        )
        if max_distance == 0:
            return self._exact_matches(word)
        return self._walk(word, max_distance)

    def _exact_matches(self, word: str) -> Iterator[tuple[str, int]]:
        position = self.exact(word)
        if position is not None:
            yield self.keys[position], position

    def _walk(self, word: str, max_distance: int) -> Iterator[tuple[str, int]]:
        root_row = list(range(len(word) + 1))
        if self._root.position is not None and root_row[-1] <= max_distance:
            yield self.keys[self._root.position], self._root.position
        if self._root.children is None:
            return

        # Entries are (node, parent row, edge char); rows are computed on pop
        stack = [
            (child, root_row, char)
            for char, child in reversed(self._root.children.items())
        ]
        while stack:
            node, previous, char = stack.pop()
            row = _next_row(word, previous, char)

            if node.position is not None and row[-1] <= max_distance:
                yield self.keys[node.position], node.position

            if node.children is not None and min(row) <= max_distance:
                for child_char, child in reversed(node.children.items()):
                    stack.append((child, row, child_char))

    def prefixed(self, prefix: str) -> Iterator[tuple[str, int]]:
        """Iterate keys starting with prefix, in sorted order."""
        position = bisect_left(self.keys, prefix)
        while position < len(self.keys) and self.keys[position].startswith(prefix):
            yield self.keys[position], position
            position += 1
