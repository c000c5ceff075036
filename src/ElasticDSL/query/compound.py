"""Queries that wrap other queries, filters or score functions.

Children are validated with the discriminator predicates and stored as
snapshots of their fragment at insertion time; mutating a child afterwards
does not change the parent.

Container slots (``must``, ``should``, ``add``, ``functions``...) accept either
one child, which is appended, or a list of children, which replaces the slot.
A list containing anything but the expected category is rejected as a whole.
"""

from __future__ import annotations

from typing import Any

from ElasticDSL.core.util import is_filter, is_query, is_score_function
from ElasticDSL.query.mixin import QueryMixin

_NESTED_SCORE_MODES = frozenset({"avg", "total", "max", "none", "sum", "min"})
_FUNCTION_SCORE_MODES = frozenset({"avg", "max", "min", "sum", "multiply", "first"})
_FUNCTION_BOOST_MODES = frozenset({"multiply", "replace", "sum", "avg", "max", "min"})


class BoolQuery(QueryMixin):
    """Boolean combination of other queries."""

    def __init__(self) -> None:
        super().__init__("bool")

    def must(self, query: Any = None) -> Any:
        """Clauses that must match. One query appends; a list replaces."""
        return self._nodes_accessor(self._body, "must", query, is_query, "a Query")

    def must_not(self, query: Any = None) -> Any:
        """Clauses that must not match. One query appends; a list replaces."""
        return self._nodes_accessor(self._body, "must_not", query, is_query, "a Query")

    def should(self, query: Any = None) -> Any:
        """Optional clauses. One query appends; a list replaces."""
        return self._nodes_accessor(self._body, "should", query, is_query, "a Query")

    def adjust_pure_negative(self, adjust: bool | None = None) -> Any:
        return self._accessor(self._body, "adjust_pure_negative", adjust)

    def disable_coord(self, disable: bool | None = None) -> Any:
        return self._accessor(self._body, "disable_coord", disable)

    def minimum_number_should_match(self, minimum: Any = None) -> Any:
        return self._accessor(self._body, "minimum_number_should_match", minimum)

    def minimum_should_match(self, minimum: Any = None) -> Any:
        return self._accessor(self._body, "minimum_should_match", minimum)


class DisMaxQuery(QueryMixin):
    """Union of sub-queries scored by the best matching one."""

    def __init__(self) -> None:
        super().__init__("dis_max")

    def add(self, query: Any = None) -> Any:
        """Append one sub-query, or replace all sub-queries with a list."""
        return self._nodes_accessor(self._body, "queries", query, is_query, "a Query")

    def queries(self, queries: Any = None) -> Any:
        """Alias of ``add``."""
        return self.add(queries)

    def tie_breaker(self, tie_breaker: float | None = None) -> Any:
        return self._accessor(self._body, "tie_breaker", tie_breaker)


class ConstantScoreQuery(QueryMixin):
    """Gives every document matched by a query or filter the same score."""

    def __init__(self) -> None:
        super().__init__("constant_score")

    def query(self, query: Any = None) -> Any:
        return self._node_accessor(self._body, "query", query, is_query, "a Query")

    def filter(self, filter_: Any = None) -> Any:
        return self._node_accessor(self._body, "filter", filter_, is_filter, "a Filter")

    def cache(self, cache: bool | None = None) -> Any:
        return self._accessor(self._body, "_cache", cache)

    def cache_key(self, key: str | None = None) -> Any:
        return self._accessor(self._body, "_cache_key", key)


class FilteredQuery(QueryMixin):
    """Restricts a query's results with a filter."""

    def __init__(self, query: Any, filter_: Any = None) -> None:
        super().__init__("filtered")
        self.query(query)
        if filter_ is not None:
            self.filter(filter_)

    def query(self, query: Any = None) -> Any:
        return self._node_accessor(self._body, "query", query, is_query, "a Query")

    def filter(self, filter_: Any = None) -> Any:
        return self._node_accessor(self._body, "filter", filter_, is_filter, "a Filter")

    def cache(self, cache: bool | None = None) -> Any:
        return self._accessor(self._body, "_cache", cache)

    def cache_key(self, key: str | None = None) -> Any:
        return self._accessor(self._body, "_cache_key", key)


class NestedQuery(QueryMixin):
    """Runs a query or filter against nested objects under ``path``."""

    def __init__(self, path: str) -> None:
        super().__init__("nested")
        self._body["path"] = path

    def path(self, path: str | None = None) -> Any:
        return self._accessor(self._body, "path", path)

    def query(self, query: Any = None) -> Any:
        return self._node_accessor(self._body, "query", query, is_query, "a Query")

    def filter(self, filter_: Any = None) -> Any:
        return self._node_accessor(self._body, "filter", filter_, is_filter, "a Filter")

    def score_mode(self, mode: str | None = None) -> Any:
        """How child scores roll up to the parent: avg, total, max, none, sum or min."""
        return self._enum_accessor(self._body, "score_mode", mode, _NESTED_SCORE_MODES)


class FunctionScoreQuery(QueryMixin):
    """Modifies the score of a query's documents with score functions."""

    def __init__(self) -> None:
        super().__init__("function_score")

    def query(self, query: Any = None) -> Any:
        return self._node_accessor(self._body, "query", query, is_query, "a Query")

    def filter(self, filter_: Any = None) -> Any:
        return self._node_accessor(self._body, "filter", filter_, is_filter, "a Filter")

    def score_mode(self, mode: str | None = None) -> Any:
        """How function scores combine: avg, max, min, sum, multiply or first."""
        return self._enum_accessor(self._body, "score_mode", mode, _FUNCTION_SCORE_MODES)

    def boost_mode(self, mode: str | None = None) -> Any:
        """How the function score combines with the query score."""
        return self._enum_accessor(self._body, "boost_mode", mode, _FUNCTION_BOOST_MODES)

    def max_boost(self, max_boost: float | None = None) -> Any:
        return self._accessor(self._body, "max_boost", max_boost)

    def function(self, func: Any = None) -> Any:
        """Append a single score function."""
        return self._nodes_accessor(self._body, "functions", func, is_score_function, "a ScoreFunction")

    def functions(self, funcs: Any = None) -> Any:
        """Append one score function, or replace all with a list."""
        return self._nodes_accessor(self._body, "functions", funcs, is_score_function, "a ScoreFunction")
