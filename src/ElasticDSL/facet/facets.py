"""Facet implementations."""

from __future__ import annotations

from typing import Any

from ElasticDSL.core.util import as_str_list, is_filter, is_query
from ElasticDSL.facet.mixin import FacetMixin, _TypedFacet

_TERMS_ORDER = frozenset({"count", "term", "reverse_count", "reverse_term"})
_HISTOGRAM_ORDER = frozenset({"key", "count", "total"})


class TermsFacet(_TypedFacet):
    """Most frequent terms of one or more fields."""

    def __init__(self, name: str) -> None:
        super().__init__(name, "terms")

    def field(self, field: str | None = None) -> Any:
        return self._accessor(self._settings, "field", field)

    def fields(self, fields: Any = None) -> Any:
        """Facet over several fields at once."""
        if fields is None:
            return self._settings.get("fields")
        self._settings["fields"] = as_str_list(fields, "fields")
        return self

    def script_field(self, script: str | None = None) -> Any:
        return self._accessor(self._settings, "script_field", script)

    def size(self, size: int | None = None) -> Any:
        return self._accessor(self._settings, "size", size)

    def shard_size(self, size: int | None = None) -> Any:
        return self._accessor(self._settings, "shard_size", size)

    def order(self, order: str | None = None) -> Any:
        """count, term, reverse_count or reverse_term."""
        return self._enum_accessor(self._settings, "order", order, _TERMS_ORDER)

    def all_terms(self, all_terms: bool | None = None) -> Any:
        """Also return terms with a zero count."""
        return self._accessor(self._settings, "all_terms", all_terms)

    def exclude(self, terms: Any = None) -> Any:
        """Append one excluded term, or replace them with a list."""
        if terms is None:
            return self._settings.get("exclude")
        if isinstance(terms, str):
            self._settings.setdefault("exclude", []).append(terms)
        else:
            self._settings["exclude"] = as_str_list(terms, "exclude")
        return self

    def regex(self, pattern: str | None = None, flags: str | None = None) -> Any:
        """Only keep terms matching ``pattern``."""
        if pattern is None:
            return self._settings.get("regex")
        self._settings["regex"] = pattern
        if flags is not None:
            self._settings["regex_flags"] = flags
        return self

    def script(self, script: str | None = None) -> Any:
        return self._accessor(self._settings, "script", script)

    def lang(self, lang: str | None = None) -> Any:
        return self._accessor(self._settings, "lang", lang)

    def params(self, params: dict[str, Any] | None = None) -> Any:
        return self._accessor(self._settings, "params", params)


class StatisticalFacet(_TypedFacet):
    """count, total, min, max, mean and variance of numeric fields."""

    def __init__(self, name: str) -> None:
        super().__init__(name, "statistical")

    def field(self, field: str | None = None) -> Any:
        return self._accessor(self._settings, "field", field)

    def fields(self, fields: Any = None) -> Any:
        if fields is None:
            return self._settings.get("fields")
        self._settings["fields"] = as_str_list(fields, "fields")
        return self

    def script(self, script: str | None = None) -> Any:
        return self._accessor(self._settings, "script", script)

    def lang(self, lang: str | None = None) -> Any:
        return self._accessor(self._settings, "lang", lang)

    def params(self, params: dict[str, Any] | None = None) -> Any:
        return self._accessor(self._settings, "params", params)


class HistogramFacet(_TypedFacet):
    """Counts per interval of a numeric or date field."""

    def __init__(self, name: str) -> None:
        super().__init__(name, "histogram")

    def field(self, field: str | None = None) -> Any:
        return self._accessor(self._settings, "field", field)

    def interval(self, interval: Any = None) -> Any:
        return self._accessor(self._settings, "interval", interval)

    def time_interval(self, interval: str | None = None) -> Any:
        """Interval as a time expression such as ``1.5d``."""
        return self._accessor(self._settings, "time_interval", interval)

    def from_(self, lower: Any = None) -> Any:
        return self._accessor(self._settings, "from", lower)

    def to(self, upper: Any = None) -> Any:
        return self._accessor(self._settings, "to", upper)

    def key_field(self, field: str | None = None) -> Any:
        return self._accessor(self._settings, "key_field", field)

    def value_field(self, field: str | None = None) -> Any:
        return self._accessor(self._settings, "value_field", field)

    def key_script(self, script: str | None = None) -> Any:
        return self._accessor(self._settings, "key_script", script)

    def value_script(self, script: str | None = None) -> Any:
        return self._accessor(self._settings, "value_script", script)

    def lang(self, lang: str | None = None) -> Any:
        return self._accessor(self._settings, "lang", lang)

    def params(self, params: dict[str, Any] | None = None) -> Any:
        return self._accessor(self._settings, "params", params)

    def order(self, order: str | None = None) -> Any:
        """key, count or total."""
        return self._enum_accessor(self._settings, "order", order, _HISTOGRAM_ORDER)


class FilterFacet(FacetMixin):
    """Number of hits matching a filter."""

    def __init__(self, name: str) -> None:
        super().__init__(name)

    def filter(self, filter_: Any = None) -> Any:
        return self._node_accessor(self._body, "filter", filter_, is_filter, "a Filter")


class QueryFacet(FacetMixin):
    """Number of hits matching a query."""

    def __init__(self, name: str) -> None:
        super().__init__(name)

    def query(self, query: Any = None) -> Any:
        return self._node_accessor(self._body, "query", query, is_query, "a Query")
