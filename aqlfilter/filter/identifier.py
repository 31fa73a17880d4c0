"""Validation of identifiers spliced unescaped into AQL fragments.

Field names from where-conditions and sort entries are rendered as
``<var>.<field>`` without quoting, so they are restricted to a conservative
allowlist and may not collide with AQL statement keywords. This guards the
shape of the fragment only; it is not a general injection defence.
"""

from __future__ import annotations

import re

from aqlfilter.errors import IdentifierError

IDENTIFIER_PATTERN = re.compile(r"[A-Za-z0-9_]+(\.[A-Za-z0-9_]+)*")

AQL_RESERVED_KEYWORDS: frozenset[str] = frozenset(
    {
        # high-level operations
        "FOR",
        "RETURN",
        "FILTER",
        "SEARCH",
        "SORT",
        "LIMIT",
        "LET",
        "COLLECT",
        "WINDOW",
        "WITH",
        "PRUNE",
        "AGGREGATE",
        "GRAPH",
        # data modification
        "INSERT",
        "UPDATE",
        "REPLACE",
        "REMOVE",
        "UPSERT",
        "INTO",
    }
)


def is_reserved(word: str) -> bool:
    """Case-insensitive membership in :data:`AQL_RESERVED_KEYWORDS`."""
    return word.upper() in AQL_RESERVED_KEYWORDS


def validate_identifier(name: str) -> str:
    """Return ``name`` unchanged if it is safe to splice into a fragment.

    Args:
        name: Field name, optionally dotted (``address.city``)

    Returns:
        str: the validated name

    Raises:
        IdentifierError: if the name is empty, contains characters outside
            letters, digits, underscore and segment dots, or if the name or
            any of its segments is a reserved AQL keyword
    """
    if not isinstance(name, str) or not name:
        raise IdentifierError(f"identifier must be a non-empty string, got {name!r}")
    if IDENTIFIER_PATTERN.fullmatch(name) is None:
        raise IdentifierError(f"identifier {name!r} contains forbidden characters")
    for segment in name.split("."):
        if is_reserved(segment):
            raise IdentifierError(
                f"identifier {name!r} uses reserved keyword {segment.upper()!r}"
            )
    return name
