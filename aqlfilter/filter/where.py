"""Recursive compiler from where-condition maps to an AQL boolean expression.

A ``where`` specification is an ordered list of condition maps. Each key of a
condition map is either an operator keyword (``and``, ``or``, ``not``,
``like``, matched case-insensitively) or a field name. All sub-clauses of one
map, and all maps of the top-level list, are joined with ``&&``.

Example:
    >>> compiler = WhereCompiler(var_name="var")
    >>> compiler.compile([{"or": [{"age": {"gt": 23.0}}, {"age": {"lt": 26.0}}]}])
    '(var.age > 23 || var.age < 26)'
"""

from __future__ import annotations

from typing import Any

from aqlfilter.errors import FilterDepthError, WhereShapeError, WhereTypeError
from aqlfilter.filter.identifier import validate_identifier
from aqlfilter.filter.value import is_scalar, render_scalar, render_value
from aqlfilter.onto import ComparisonOperator, ConditionKeyword

AND_JOIN = " && "
OR_JOIN = " || "

LIKE_TEXT = "text"
LIKE_SEARCH = "search"
LIKE_CASE_INSENSITIVE = "case_insensitive"
LIKE_KEYS = frozenset({LIKE_TEXT, LIKE_SEARCH, LIKE_CASE_INSENSITIVE})

DEFAULT_MAX_DEPTH = 32


class WhereCompiler:
    """Compiles condition maps into a single AQL boolean expression.

    The compiler holds no state beyond its configuration and can be shared
    between threads.

    Attributes:
        var_name: Loop variable every field reference is prefixed with
        max_depth: Maximum nesting of ``and``/``or``/``not`` operators
    """

    def __init__(self, var_name: str = "var", max_depth: int = DEFAULT_MAX_DEPTH):
        self.var_name = var_name
        self.max_depth = max_depth

    def compile(self, conditions: list[dict[str, Any]]) -> str:
        """Compile the top-level list of condition maps.

        Empty maps contribute nothing; an empty list compiles to ``""``.

        Raises:
            WhereShapeError: on a value of the wrong shape
            WhereTypeError: on a literal that cannot be rendered
            IdentifierError: on an unsafe field name
        """
        clauses = []
        for condition in conditions:
            if not isinstance(condition, dict):
                raise WhereShapeError(
                    f"where entries must be condition maps, got {condition!r}"
                )
            if not condition:
                continue
            clauses.append(self._compile_map(condition, depth=0))
        return AND_JOIN.join(clauses)

    def field(self, name: str) -> str:
        """Qualified reference ``<var_name>.<name>`` to a validated field."""
        return f"{self.var_name}.{validate_identifier(name)}"

    def _compile_map(self, condition: dict[str, Any], depth: int) -> str:
        if depth > self.max_depth:
            raise FilterDepthError(
                f"nesting depth {depth} exceeds maximum {self.max_depth}"
            )
        if not condition:
            raise WhereShapeError("nested condition map must not be empty")
        return AND_JOIN.join(
            self._compile_key(key, value, depth) for key, value in condition.items()
        )

    def _compile_key(self, key: str, value: Any, depth: int) -> str:
        if not isinstance(key, str):
            raise WhereShapeError(f"condition keys must be strings, got {key!r}")
        keyword = key.lower()
        if keyword == ConditionKeyword.AND:
            return self._compile_group(key, value, AND_JOIN, depth)
        if keyword == ConditionKeyword.OR:
            return self._compile_group(key, value, OR_JOIN, depth)
        if keyword == ConditionKeyword.NOT:
            if not isinstance(value, dict):
                raise WhereShapeError(
                    f"'{key}' expects a condition map, got {type(value).__name__}"
                )
            return f"!({self._compile_map(value, depth + 1)})"
        if keyword == ConditionKeyword.LIKE:
            return self._compile_like(key, value)
        return self._compile_field(key, value)

    def _compile_group(self, key: str, value: Any, joiner: str, depth: int) -> str:
        if not isinstance(value, list):
            raise WhereShapeError(
                f"'{key}' expects a list of condition maps, got {type(value).__name__}"
            )
        if not value:
            raise WhereShapeError(f"'{key}' expects at least one condition map")
        parts = []
        for item in value:
            if not isinstance(item, dict):
                raise WhereShapeError(
                    f"'{key}' expects a list of condition maps, found {item!r}"
                )
            parts.append(self._compile_map(item, depth + 1))
        return "(" + joiner.join(parts) + ")"

    def _compile_like(self, key: str, value: Any) -> str:
        if not isinstance(value, dict):
            raise WhereShapeError(
                f"'{key}' expects a map with '{LIKE_TEXT}' and '{LIKE_SEARCH}', "
                f"got {type(value).__name__}"
            )
        unknown = set(value) - LIKE_KEYS
        if unknown:
            raise WhereShapeError(f"'{key}' got unexpected keys {sorted(unknown)}")
        text = value.get(LIKE_TEXT)
        search = value.get(LIKE_SEARCH)
        if not isinstance(text, str):
            raise WhereShapeError(f"'{key}.{LIKE_TEXT}' must be a field name string")
        if not isinstance(search, str):
            raise WhereShapeError(f"'{key}.{LIKE_SEARCH}' must be a string pattern")
        case_insensitive = value.get(LIKE_CASE_INSENSITIVE, False)
        if not isinstance(case_insensitive, bool):
            raise WhereShapeError(f"'{key}.{LIKE_CASE_INSENSITIVE}' must be a boolean")
        lemma = f"LIKE({self.field(text)}, {render_scalar(search)}"
        if case_insensitive:
            return f"{lemma}, true)"
        return f"{lemma})"

    def _compile_field(self, name: str, value: Any) -> str:
        ref = self.field(name)
        if isinstance(value, dict):
            return self._compile_comparison(name, ref, value)
        if isinstance(value, list):
            for item in value:
                if isinstance(item, (dict, list)) or item is None:
                    raise WhereShapeError(
                        f"field '{name}' list may only hold scalars, found {item!r}"
                    )
            return f"{ref} IN {render_value(value)}"
        if is_scalar(value):
            return f"{ref} == {render_scalar(value)}"
        if isinstance(value, int):
            raise WhereTypeError(
                f"field '{name}' number {value!r} must be a float, got int"
            )
        raise WhereShapeError(
            f"field '{name}' has unsupported value type {type(value).__name__}"
        )

    def _compile_comparison(self, name: str, ref: str, value: dict[str, Any]) -> str:
        if len(value) != 1:
            raise WhereShapeError(
                f"field '{name}' comparison map must hold exactly one operator, "
                f"got {sorted(map(str, value))}"
            )
        ((op_key, operand),) = value.items()
        op_name = op_key.lower() if isinstance(op_key, str) else op_key
        if op_name not in ComparisonOperator:
            raise WhereShapeError(
                f"field '{name}' uses unknown comparison operator {op_key!r}"
            )
        op = ComparisonOperator(op_name)
        if not is_scalar(operand):
            raise WhereTypeError(
                f"field '{name}' operator '{op.value}' expects a float, string or boolean "
                f"operand, got {type(operand).__name__}"
            )
        return f"{ref} {op.symbol} {render_scalar(operand)}"
