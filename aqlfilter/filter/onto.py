"""Input and output models of the filter processor.

Key Components:
    - Filter: Decoded filter specification (offset, limit, sort, where, options)
    - ProcessedFilter: The three AQL fragments produced from a Filter

Example:
    >>> spec = Filter.from_json('{"limit": 10, "sort": ["age desc"]}')
    >>> spec.limit
    10
"""

from __future__ import annotations

import json
from typing import Any, Self

from pydantic import ConfigDict, Field, ValidationError

from aqlfilter.base import ConfigBaseModel
from aqlfilter.errors import FilterDecodeError


class Filter(ConfigBaseModel):
    """Structured filter as accepted from untrusted input.

    Attributes:
        offset: Number of documents to skip; zero omits it
        limit: Maximum number of documents; zero omits it
        sort: Entries of the form ``"<field>"`` or ``"<field> asc|desc"``
        where: Condition maps, implicitly AND-ed together
        options: Application-defined strings, never interpreted here
    """

    model_config = ConfigDict(frozen=True)

    offset: int = 0
    limit: int = 0
    sort: list[str] = Field(default_factory=list)
    where: list[dict[str, Any]] = Field(default_factory=list)
    options: list[str] = Field(default_factory=list)

    @classmethod
    def from_json(cls, raw: str | bytes) -> Self:
        """Decode a JSON document into a Filter.

        Integral JSON numbers inside ``where`` are turned into floats, so every
        number reaching the compiler is a float. ``offset`` and ``limit`` keep
        their exact integer values.

        Raises:
            FilterDecodeError: if ``raw`` is not JSON or not a filter document
        """
        try:
            data = json.loads(raw)
            if isinstance(data, dict) and "where" in data:
                data["where"] = ints_to_floats(data["where"])
        except (ValueError, OverflowError, RecursionError) as e:
            raise FilterDecodeError(f"malformed filter JSON: {e}") from e
        if not isinstance(data, dict):
            raise FilterDecodeError(
                f"filter JSON must be an object, got {type(data).__name__}"
            )
        try:
            return cls.model_validate(data)
        except ValidationError as e:
            raise FilterDecodeError(f"invalid filter document: {e}") from e


class ProcessedFilter(ConfigBaseModel):
    """AQL fragments ready for embedding; an empty string omits the clause."""

    model_config = ConfigDict(frozen=True)

    offset_limit: str = Field(default="", alias="offsetLimit")
    sort: str = ""
    where: str = ""

    def is_empty(self) -> bool:
        """True when every fragment is empty and no clause should be emitted."""
        return not (self.offset_limit or self.sort or self.where)


def ints_to_floats(value: Any) -> Any:
    """Recursively convert ``int`` values (not ``bool``) to ``float``."""
    if isinstance(value, bool):
        return value
    if isinstance(value, int):
        return float(value)
    if isinstance(value, list):
        return [ints_to_floats(item) for item in value]
    if isinstance(value, dict):
        return {k: ints_to_floats(v) for k, v in value.items()}
    return value
