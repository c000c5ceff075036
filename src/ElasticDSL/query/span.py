"""Span queries: positional matching over span clauses.

Span containers only accept other span queries; a plain term query is a query
but not a span and is rejected.
"""

from __future__ import annotations

from typing import Any

from ElasticDSL.core.util import is_span_query
from ElasticDSL.query.basic import _FieldValueQuery
from ElasticDSL.query.mixin import QueryMixin

_SPAN = "a span Query"


class SpanTermQuery(_FieldValueQuery):
    """Matches spans containing a term."""

    def __init__(self, field: str, term: Any) -> None:
        super().__init__("span_term", field, term)

    def term(self, term: Any = None) -> Any:
        return self.value(term)


class _SpanClausesQuery(QueryMixin):
    def __init__(self, discriminator: str, clauses: Any = None) -> None:
        super().__init__(discriminator)
        self._body["clauses"] = []
        if clauses is not None:
            self.clauses(clauses)

    def clauses(self, clauses: Any = None) -> Any:
        """Replace all clauses with a list, or append one span query."""
        return self._nodes_accessor(self._body, "clauses", clauses, is_span_query, _SPAN)

    def add_clause(self, clause: Any = None) -> Any:
        """Append one span query clause."""
        return self._nodes_accessor(self._body, "clauses", clause, is_span_query, _SPAN)


class SpanNearQuery(_SpanClausesQuery):
    """Matches spans that are near one another."""

    def __init__(self, clauses: Any = None) -> None:
        super().__init__("span_near", clauses)

    def slop(self, slop: int | None = None) -> Any:
        """Maximum number of intervening unmatched positions."""
        return self._accessor(self._body, "slop", slop)

    def in_order(self, in_order: bool | None = None) -> Any:
        return self._accessor(self._body, "in_order", in_order)

    def collect_payloads(self, collect: bool | None = None) -> Any:
        return self._accessor(self._body, "collect_payloads", collect)


class SpanOrQuery(_SpanClausesQuery):
    """Matches the union of its span clauses."""

    def __init__(self, clauses: Any = None) -> None:
        super().__init__("span_or", clauses)


class SpanNotQuery(QueryMixin):
    """Removes matches that overlap with another span query."""

    def __init__(self, include: Any = None, exclude: Any = None) -> None:
        super().__init__("span_not")
        if include is not None:
            self.include(include)
        if exclude is not None:
            self.exclude(exclude)

    def include(self, span: Any = None) -> Any:
        return self._node_accessor(self._body, "include", span, is_span_query, _SPAN)

    def exclude(self, span: Any = None) -> Any:
        return self._node_accessor(self._body, "exclude", span, is_span_query, _SPAN)

    def pre(self, tokens: int | None = None) -> Any:
        return self._accessor(self._body, "pre", tokens)

    def post(self, tokens: int | None = None) -> Any:
        return self._accessor(self._body, "post", tokens)

    def dist(self, tokens: int | None = None) -> Any:
        return self._accessor(self._body, "dist", tokens)


class SpanFirstQuery(QueryMixin):
    """Matches spans near the beginning of a field."""

    def __init__(self, match: Any = None, end: int | None = None) -> None:
        super().__init__("span_first")
        if match is not None:
            self.match(match)
        if end is not None:
            self.end(end)

    def match(self, span: Any = None) -> Any:
        return self._node_accessor(self._body, "match", span, is_span_query, _SPAN)

    def end(self, end: int | None = None) -> Any:
        """Maximum end position permitted in a match."""
        return self._accessor(self._body, "end", end)
