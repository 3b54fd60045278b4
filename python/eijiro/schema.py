"""Entry schema and data structures for eijiro.

Core concept:
    - A headword owns one or more Fields (senses)
    - A Field has an optional tag, an explanation and example sentences
    - The Dictionary keeps sorted headwords and their Fields side by side

Example:
    ■cat  {名} : 猫◆【複】cats■・The cat slept.
    -> headword "cat", Field(ident="名",
                             explanation=Explanation("猫", ("【複】cats",)),
                             examples=("The cat slept.",))
"""

from dataclasses import dataclass, field
from typing import Any, Iterator, Optional

from .errors import BuildError, IndexConstructionError
from .index import LookupIndex


def _string_tuple(name: str, values) -> tuple[str, ...]:
    """Freeze a sequence of strings, rejecting anything else."""
    if isinstance(values, str):
        raise TypeError(f"{name} must be a sequence of strings, not a string")
    values = tuple(values)
    for value in values:
        if not isinstance(value, str):
            raise TypeError(f"{name} must contain strings, got {value!r}")
    return values


@dataclass(frozen=True)
class Explanation:
    """Primary gloss plus supplementary notes."""

    body: str
    complements: tuple[str, ...] = ()

    def __post_init__(self):
        if not isinstance(self.body, str) or not self.body.strip():
            raise ValueError(f"Explanation body must be a non-empty string, got {self.body!r}")
        object.__setattr__(self, "complements", _string_tuple("complements", self.complements))

    def to_dict(self) -> dict[str, Any]:
        """Convert to dictionary for JSON serialization."""
        return {
            "body": self.body,
            "complements": list(self.complements),
        }

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "Explanation":
        """Create from dictionary."""
        return cls(
            body=data["body"],
            complements=data.get("complements", []),
        )


@dataclass(frozen=True)
class Field:
    """One sense of a headword."""

    ident: Optional[str]                    # e.g. "名", "他動-1"; None if untagged
    explanation: Explanation
    examples: tuple[str, ...] = ()          # corpus order

    def __post_init__(self):
        if self.ident is not None and not isinstance(self.ident, str):
            raise TypeError(f"Field ident must be a string or None, got {self.ident!r}")
        if not isinstance(self.explanation, Explanation):
            raise TypeError(f"Field explanation must be an Explanation, got {self.explanation!r}")
        object.__setattr__(self, "examples", _string_tuple("examples", self.examples))

    @property
    def body(self) -> str:
        return self.explanation.body

    @property
    def complements(self) -> tuple[str, ...]:
        return self.explanation.complements

    def to_dict(self) -> dict[str, Any]:
        """Convert to dictionary for JSON serialization."""
        return {
            "ident": self.ident,
            "explanation": self.explanation.to_dict(),
            "examples": list(self.examples),
        }

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "Field":
        """Create from dictionary."""
        return cls(
            ident=data.get("ident"),
            explanation=Explanation.from_dict(data["explanation"]),
            examples=data.get("examples", []),
        )


@dataclass(frozen=True)
class Dictionary:
    """Sorted headwords and their Fields, co-indexed.

    ``field_groups[i]`` holds the Fields of ``keys[i]``. The lookup index is
    built once here and shared by every query; nothing is mutable after
    construction.
    """

    keys: tuple[str, ...]
    field_groups: tuple[tuple[Field, ...], ...]
    index: LookupIndex = field(init=False, repr=False, compare=False)

    def __post_init__(self):
        keys = tuple(self.keys)
        groups = tuple(tuple(group) for group in self.field_groups)

        if len(keys) != len(groups):
            raise BuildError(
                f"{len(keys)} keys but {len(groups)} field groups"
            )
        for key, group in zip(keys, groups):
            if not group:
                raise BuildError(f"Headword has no fields: {key!r}")

        try:
            index = LookupIndex(keys)
        except IndexConstructionError as e:
            raise BuildError(str(e)) from e

        object.__setattr__(self, "keys", keys)
        object.__setattr__(self, "field_groups", groups)
        object.__setattr__(self, "index", index)

    def __len__(self) -> int:
        return len(self.keys)

    def __contains__(self, word: object) -> bool:
        return isinstance(word, str) and self.index.exact(word) is not None

    def __iter__(self) -> Iterator[tuple[str, tuple[Field, ...]]]:
        return iter(zip(self.keys, self.field_groups))

    def count(self) -> int:
        """Get headword count."""
        return len(self.keys)

    def field_count(self) -> int:
        """Get total number of Fields."""
        return sum(len(group) for group in self.field_groups)

    def position(self, word: str) -> Optional[int]:
        """Get the position of an exact headword, or None."""
        return self.index.exact(word)

    def fields_at(self, position: int) -> tuple[Field, ...]:
        """Get the Fields of the headword at a position."""
        return self.field_groups[position]

    def get(self, word: str) -> tuple[Field, ...]:
        """Get the Fields of an exact headword (empty if absent)."""
        position = self.index.exact(word)
        if position is None:
            return ()
        return self.field_groups[position]

    def to_dict(self) -> dict[str, Any]:
        """Convert to dictionary for JSON serialization."""
        return {
            "key_count": self.count(),
            "keys": list(self.keys),
            "field_groups": [
                [f.to_dict() for f in group] for group in self.field_groups
            ],
        }

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "Dictionary":
        """Create from dictionary."""
        return cls(
            keys=tuple(data["keys"]),
            field_groups=tuple(
                tuple(Field.from_dict(f) for f in group)
                for group in data["field_groups"]
            ),
        )
