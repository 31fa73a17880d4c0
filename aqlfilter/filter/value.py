"""AQL literal rendering for decoded JSON values.

Values reaching the renderer are members of the :data:`JsonValue` union.
Numbers must already be floats (the JSON decode step guarantees it); an
``int`` is treated as a type error rather than silently accepted.
"""

from __future__ import annotations

import math
from typing import Any, TypeAlias

from aqlfilter.errors import WhereTypeError

JsonScalar: TypeAlias = bool | float | str
JsonValue: TypeAlias = bool | float | str | list["JsonValue"] | dict[str, "JsonValue"]


def escape_string(value: str) -> str:
    """Escape single quotes for embedding in a single-quoted AQL string."""
    return value.replace("'", "\\'")


def is_scalar(value: Any) -> bool:
    """Return True for values that render as a single AQL literal."""
    return isinstance(value, (bool, float, str))


def render_number(value: float) -> str:
    """Render a float with the shortest round-trip representation.

    Integral values lose their trailing ``.0``: ``22.0`` renders as ``22``.
    """
    if not math.isfinite(value):
        raise WhereTypeError(f"cannot render non-finite number {value!r}")
    if value.is_integer() and abs(value) < 1e16:
        return str(int(value))
    return repr(value)


def render_scalar(value: Any) -> str:
    """Render a boolean, float or string literal.

    Raises:
        WhereTypeError: for any other type, including ``int`` and ``None``
    """
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, float):
        return render_number(value)
    if isinstance(value, str):
        return f"'{escape_string(value)}'"
    raise WhereTypeError(
        f"unsupported literal {value!r} of type {type(value).__name__}"
    )


def render_value(value: Any) -> str:
    """Render a scalar, or a list of scalars as ``[a, b, ...]``."""
    if isinstance(value, list):
        return "[" + ", ".join(render_scalar(item) for item in value) + "]"
    return render_scalar(value)
