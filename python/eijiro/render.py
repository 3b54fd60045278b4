"""Plain-text rendering of lookup results.

    {名} : 猫◆【複】cats
            The cat slept.
"""

from .lookup import LookupResult
from .schema import Field

COMPLEMENT_PREFIX = "◆"
EXAMPLE_INDENT = " " * 8


def format_field(field: Field) -> str:
    """Render one Field with every attribute."""
    header = f"{{{field.ident}}} : " if field.ident is not None else ""
    complements = "".join(f"{COMPLEMENT_PREFIX}{c}" for c in field.complements)
    examples = "".join(f"\n{EXAMPLE_INDENT}{e}" for e in field.examples)
    return f"{header}{field.body}{complements}{examples}"


def format_result(result: LookupResult) -> str:
    """Render all Fields of a matched headword, one per line."""
    return "\n".join(format_field(f) for f in result.fields)


def format_header(query: str) -> str:
    return f"<Search word: [{query}]>"
