"""aqlfilter: compile structured, JSON-shaped filters into AQL fragments.

Callers accept filters from untrusted input (query strings, request bodies),
decode them into a :class:`Filter` and let a :class:`FilterProcessor` turn
them into ``LIMIT``, ``SORT`` and ``FILTER`` fragments for ArangoDB queries.

Key Features:
    - Offset/limit and sort formatting with identifier validation
    - Recursive where compiler with and/or/not/like and comparison operators
    - AQL literal rendering and string escaping
    - Typed error hierarchy rooted at ValueError

Example:
    >>> from aqlfilter import Filter, FilterProcessor
    >>> fp = FilterProcessor()
    >>> fp.process(Filter(where=[{"not": {"firstName": "D'Arcy"}}])).where
    "!(var.firstName == 'D\\\\'Arcy')"
"""

from .errors import (
    FilterDecodeError,
    FilterDepthError,
    FilterError,
    FilterErrorCode,
    IdentifierError,
    SortSyntaxError,
    WhereShapeError,
    WhereTypeError,
)
from .filter import Filter, ProcessedFilter, WhereCompiler, escape_string, to_statement
from .onto import ComparisonOperator, ConditionKeyword, SortDirection
from .processor import FilterProcessor

__all__ = [
    "ComparisonOperator",
    "ConditionKeyword",
    "Filter",
    "FilterDecodeError",
    "FilterDepthError",
    "FilterError",
    "FilterErrorCode",
    "FilterProcessor",
    "IdentifierError",
    "ProcessedFilter",
    "SortDirection",
    "SortSyntaxError",
    "WhereCompiler",
    "WhereShapeError",
    "WhereTypeError",
    "escape_string",
    "to_statement",
]
