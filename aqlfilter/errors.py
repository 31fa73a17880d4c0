"""Exceptions raised while decoding and compiling filters.

Every exception derives from :class:`FilterError`, itself a ``ValueError``,
and carries a deterministic :class:`FilterErrorCode`. None of them is
retriable: the input itself is invalid and should be rejected to the client.
"""

from __future__ import annotations

from aqlfilter.onto import BaseEnum


class FilterErrorCode(BaseEnum):
    """Deterministic error codes for filter failures."""

    FILTER_ERROR = "FILTER_ERROR"
    DECODE_ERROR = "DECODE_ERROR"
    SORT_SYNTAX = "SORT_SYNTAX"
    WHERE_SHAPE = "WHERE_SHAPE"
    WHERE_TYPE = "WHERE_TYPE"
    INVALID_IDENTIFIER = "INVALID_IDENTIFIER"
    DEPTH_EXCEEDED = "DEPTH_EXCEEDED"


class FilterError(ValueError):
    """Base class for filter failures."""

    code: FilterErrorCode = FilterErrorCode.FILTER_ERROR

    def __init__(self, message: str) -> None:
        self.message = message
        super().__init__(f"[{self.code.value}] {message}")


class FilterDecodeError(FilterError):
    """Raw input is not valid JSON or not a valid filter document."""

    code = FilterErrorCode.DECODE_ERROR


class SortSyntaxError(FilterError):
    """Wrong token count or invalid direction in a sort entry."""

    code = FilterErrorCode.SORT_SYNTAX


class WhereShapeError(FilterError):
    """A where-condition value has the wrong shape."""

    code = FilterErrorCode.WHERE_SHAPE


class WhereTypeError(FilterError):
    """A literal has a type that cannot be rendered, e.g. a non-float number."""

    code = FilterErrorCode.WHERE_TYPE


class IdentifierError(FilterError):
    """A field name is unsafe to splice into a query fragment."""

    code = FilterErrorCode.INVALID_IDENTIFIER


class FilterDepthError(WhereShapeError):
    """Logical operators are nested deeper than the configured limit."""

    code = FilterErrorCode.DEPTH_EXCEEDED
