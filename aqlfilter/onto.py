"""Core enumerations for filter compilation.

This module provides the string enumerations shared by the where compiler,
the clause formatters and the processor.

Key Components:
    - BaseEnum: Base class for string-based enumerations with flexible membership testing
    - ConditionKeyword: Keys of a condition map that are operators rather than fields
    - ComparisonOperator: Keys of a comparison map (eq, neq, gt, ...)
    - SortDirection: AQL sort directions

Example:
    >>> "or" in ConditionKeyword  # True
    >>> "firstName" in ConditionKeyword  # False
"""

from enum import EnumMeta
from types import MappingProxyType

from strenum import StrEnum


class MetaEnum(EnumMeta):
    """Metaclass for flexible enumeration membership testing.

    Allows checking whether a raw value is a valid member of the enum with
    the `in` operator, without instantiating the member first.

    Example:
        >>> class MyEnum(BaseEnum):
        ...     VALUE = "value"
        >>> "value" in MyEnum  # True
        >>> "invalid" in MyEnum  # False
    """

    def __contains__(self, member: object) -> bool:
        """Check if an item is a valid member of the enum.

        Args:
            member: Value to check for membership

        Returns:
            bool: True if the item is a valid enum member, False otherwise
        """
        if isinstance(member, self):
            return True
        try:
            self(member)
            return True
        except ValueError:
            return False


class BaseEnum(StrEnum, metaclass=MetaEnum):
    """Base class for string-based enumerations."""

    def __str__(self) -> str:
        return self.value

    def __repr__(self) -> str:
        return self.value


class ConditionKeyword(BaseEnum):
    """Operator keys of a condition map.

    Keys are matched case-insensitively, callers lower-case them first.

    Attributes:
        AND: Parenthesised conjunction of a list of condition maps
        OR: Parenthesised disjunction of a list of condition maps
        NOT: Negation of a single condition map
        LIKE: AQL ``LIKE()`` pattern match
    """

    AND = "and"
    OR = "or"
    NOT = "not"
    LIKE = "like"


class ComparisonOperator(BaseEnum):
    """Comparison keys accepted inside a field's comparison map.

    Attributes:
        EQ: Equal (==)
        NEQ: Not equal (!=)
        GT: Greater than (>)
        GTE: Greater than or equal (>=)
        LT: Less than (<)
        LTE: Less than or equal (<=)
    """

    EQ = "eq"
    NEQ = "neq"
    GT = "gt"
    GTE = "gte"
    LT = "lt"
    LTE = "lte"

    @property
    def symbol(self) -> str:
        """AQL symbol of the operator."""
        return ComparisonSymbols[self]


ComparisonSymbols = MappingProxyType(
    {
        ComparisonOperator.EQ: "==",
        ComparisonOperator.NEQ: "!=",
        ComparisonOperator.GT: ">",
        ComparisonOperator.GTE: ">=",
        ComparisonOperator.LT: "<",
        ComparisonOperator.LTE: "<=",
    }
)


class SortDirection(BaseEnum):
    """AQL sort directions, always rendered upper-case."""

    ASC = "ASC"
    DESC = "DESC"


class ClauseKeyword(BaseEnum):
    """Statement keywords prefixed to non-empty fragments on assembly."""

    FILTER = "FILTER"
    SORT = "SORT"
    LIMIT = "LIMIT"
