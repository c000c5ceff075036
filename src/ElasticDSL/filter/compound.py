"""Filters that combine other filters.

Same container rules as the compound queries: one filter appends, a list
replaces, and a list holding anything but filters is rejected untouched.
"""

from __future__ import annotations

from typing import Any

from ElasticDSL.core.util import is_filter
from ElasticDSL.filter.mixin import FilterMixin

_FILTER = "a Filter"


class BoolFilter(FilterMixin):
    """Boolean combination of filters."""

    def __init__(self) -> None:
        super().__init__("bool")

    def must(self, filter_: Any = None) -> Any:
        return self._nodes_accessor(self._body, "must", filter_, is_filter, _FILTER)

    def must_not(self, filter_: Any = None) -> Any:
        return self._nodes_accessor(self._body, "must_not", filter_, is_filter, _FILTER)

    def should(self, filter_: Any = None) -> Any:
        return self._nodes_accessor(self._body, "should", filter_, is_filter, _FILTER)


class _FilterListFilter(FilterMixin):
    def __init__(self, discriminator: str, filters: Any) -> None:
        super().__init__(discriminator)
        self._body["filters"] = []
        self.filters(filters)

    def filters(self, filters: Any = None) -> Any:
        """Append one filter, or replace all filters with a list."""
        return self._nodes_accessor(self._body, "filters", filters, is_filter, _FILTER)

    def add(self, filter_: Any = None) -> Any:
        """Alias of ``filters``."""
        return self.filters(filter_)


class AndFilter(_FilterListFilter):
    """Documents matching every contained filter."""

    def __init__(self, filters: Any) -> None:
        super().__init__("and", filters)


class OrFilter(_FilterListFilter):
    """Documents matching at least one contained filter."""

    def __init__(self, filters: Any) -> None:
        super().__init__("or", filters)


class NotFilter(FilterMixin):
    """Documents not matched by the contained filter."""

    def __init__(self, filter_: Any) -> None:
        super().__init__("not")
        self.filter(filter_)

    def filter(self, filter_: Any = None) -> Any:
        return self._node_accessor(self._body, "filter", filter_, is_filter, _FILTER)
