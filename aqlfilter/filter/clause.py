"""Formatters for the non-recursive fragments: offset/limit and sort."""

from __future__ import annotations

from aqlfilter.errors import SortSyntaxError
from aqlfilter.filter.identifier import validate_identifier
from aqlfilter.onto import SortDirection


def format_offset_limit(offset: int, limit: int) -> str:
    """Render the ``LIMIT`` arguments: nonzero offset, then nonzero limit.

    Negative values are kept as is; AQL decides what they mean.

    Example:
        >>> format_offset_limit(3, 4)
        '3, 4'
        >>> format_offset_limit(0, 2)
        '2'
    """
    parts = [str(v) for v in (offset, limit) if v != 0]
    return ", ".join(parts)


def parse_sort_entry(entry: str) -> tuple[str, SortDirection]:
    """Split ``"<field> [asc|desc]"`` into a validated field and a direction.

    Raises:
        SortSyntaxError: on an empty entry, more than two tokens or an
            unknown direction
        IdentifierError: if the field token is not a safe identifier
    """
    tokens = entry.split()
    if not tokens or len(tokens) > 2:
        raise SortSyntaxError(
            f"sort entry {entry!r} must be '<field>' or '<field> <direction>'"
        )
    field = validate_identifier(tokens[0])
    if len(tokens) == 1:
        return field, SortDirection.ASC
    direction = tokens[1].upper()
    if direction not in SortDirection:
        raise SortSyntaxError(
            f"sort direction {tokens[1]!r} in {entry!r} must be 'asc' or 'desc'"
        )
    return field, SortDirection(direction)


def format_sort(entries: list[str], var_name: str = "var") -> str:
    """Render sort entries as ``<var>.<field> ASC|DESC`` joined with ``", "``.

    Example:
        >>> format_sort(["firstName ASC", "lastName dESc", "age"])
        'var.firstName ASC, var.lastName DESC, var.age ASC'
    """
    rendered = []
    for entry in entries:
        field, direction = parse_sort_entry(entry)
        rendered.append(f"{var_name}.{field} {direction.value}")
    return ", ".join(rendered)
