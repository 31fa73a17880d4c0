from .clause import format_offset_limit, format_sort
from .identifier import AQL_RESERVED_KEYWORDS, validate_identifier
from .onto import Filter, ProcessedFilter
from .statement import to_statement
from .value import escape_string, render_value
from .where import WhereCompiler

__all__ = [
    "AQL_RESERVED_KEYWORDS",
    "Filter",
    "ProcessedFilter",
    "WhereCompiler",
    "escape_string",
    "format_offset_limit",
    "format_sort",
    "render_value",
    "to_statement",
    "validate_identifier",
]
