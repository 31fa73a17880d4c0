"""Filter processor: the single entry point turning a Filter into AQL fragments.

The processor runs the offset/limit formatter, the sort formatter and the
where compiler in that order. The first failure aborts the call, so a
partially built :class:`ProcessedFilter` never escapes.

Example:
    >>> fp = FilterProcessor()
    >>> fp.process(Filter(offset=3, limit=4, sort=["age desc"])).sort
    'var.age DESC'
"""

from __future__ import annotations

import logging

from pydantic import ConfigDict, Field, field_validator

from aqlfilter.base import ConfigBaseModel
from aqlfilter.errors import FilterError
from aqlfilter.filter.clause import format_offset_limit, format_sort
from aqlfilter.filter.identifier import validate_identifier
from aqlfilter.filter.onto import Filter, ProcessedFilter
from aqlfilter.filter.where import DEFAULT_MAX_DEPTH, WhereCompiler

logger = logging.getLogger(__name__)

DEFAULT_VAR_NAME = "var"
MAX_DEPTH_LIMIT = 128


class FilterProcessor(ConfigBaseModel):
    """Immutable, reusable compiler from :class:`Filter` to :class:`ProcessedFilter`.

    Attributes:
        var_name: Loop variable prefixed to every field reference
        max_depth: Maximum nesting of logical operators in ``where``
    """

    model_config = ConfigDict(frozen=True)

    var_name: str = DEFAULT_VAR_NAME
    max_depth: int = Field(default=DEFAULT_MAX_DEPTH, gt=0, le=MAX_DEPTH_LIMIT)

    @field_validator("var_name")
    @classmethod
    def check_var_name(cls, v: str) -> str:
        """Reject variable names that are not safe identifiers."""
        return validate_identifier(v)

    def process(self, spec: Filter | None) -> ProcessedFilter:
        """Compile a filter specification into AQL fragments.

        Args:
            spec: Decoded filter; ``None`` means no filter was requested

        Returns:
            ProcessedFilter: all three fragments, empty ones meaning "omit"

        Raises:
            FilterError: the first sort, where or identifier error encountered
        """
        if spec is None:
            return ProcessedFilter()
        try:
            offset_limit = format_offset_limit(spec.offset, spec.limit)
            sort = format_sort(spec.sort, var_name=self.var_name)
            where = WhereCompiler(
                var_name=self.var_name, max_depth=self.max_depth
            ).compile(spec.where)
        except FilterError as e:
            logger.debug(f"rejected filter [{e.code.value}]: {e.message}")
            raise
        processed = ProcessedFilter(offset_limit=offset_limit, sort=sort, where=where)
        logger.debug(f"processed filter {processed.to_dict()}")
        return processed

    def process_json(self, raw: str | bytes) -> ProcessedFilter:
        """Decode ``raw`` with :meth:`Filter.from_json`, then :meth:`process` it."""
        return self.process(Filter.from_json(raw))
