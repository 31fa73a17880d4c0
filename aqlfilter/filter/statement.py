"""Assembly of processed fragments into AQL statement lines.

Each non-empty fragment is prefixed with its keyword; empty fragments are
omitted entirely. Lines come out in the order AQL expects them after a
``FOR`` loop: ``FILTER``, ``SORT``, ``LIMIT``.
"""

from __future__ import annotations

from aqlfilter.filter.onto import ProcessedFilter
from aqlfilter.onto import ClauseKeyword


def to_statement(processed: ProcessedFilter, separator: str = "\n") -> str:
    """Render a :class:`ProcessedFilter` as keyword-prefixed AQL lines.

    Example:
        >>> to_statement(ProcessedFilter(offset_limit="3, 4", where="var.age == 22"))
        'FILTER var.age == 22\\nLIMIT 3, 4'
    """
    pairs = (
        (ClauseKeyword.FILTER, processed.where),
        (ClauseKeyword.SORT, processed.sort),
        (ClauseKeyword.LIMIT, processed.offset_limit),
    )
    return separator.join(
        f"{keyword.value} {fragment}"
        for keyword, fragment in pairs
        if fragment
    )
