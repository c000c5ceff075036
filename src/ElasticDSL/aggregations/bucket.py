"""Bucket aggregations."""

from __future__ import annotations

from typing import Any

from ElasticDSL.aggregations.mixin import AggregationMixin, BucketsAggregationMixin
from ElasticDSL.core.util import is_filter
from ElasticDSL.utils.log import log

_VALUE_TYPES = frozenset({"string", "double", "float", "long", "integer", "short", "byte"})
_EXECUTION_HINTS = frozenset({"map", "global_ordinals", "global_ordinals_hash", "global_ordinals_low_cardinality"})
_DIRECTIONS = ("asc", "desc")


def _order(key: str, direction: str | None) -> dict[str, str]:
    direction = (direction or "desc").lower()
    if direction not in _DIRECTIONS:
        log.debug("Unknown order direction %r, using desc", direction)
        direction = "desc"
    return {key: direction}


def _pattern(pattern: str, flags: str | None) -> dict[str, str]:
    out = {"pattern": pattern}
    if flags is not None:
        out["flags"] = flags
    return out


class TermsAggregation(BucketsAggregationMixin):
    """One bucket per unique value of a field."""

    def __init__(self, name: str) -> None:
        super().__init__(name, "terms")

    def value_type(self, value_type: str | None = None) -> Any:
        """Type of the script values: string, double, float, long, integer, short or byte."""
        return self._enum_accessor(self._settings, "value_type", value_type, _VALUE_TYPES)

    def format(self, fmt: str | None = None) -> Any:
        return self._accessor(self._settings, "format", fmt)

    def include(self, pattern: str | None = None, flags: str | None = None) -> Any:
        """Only keep terms matching a regular expression."""
        if pattern is None:
            return self._settings.get("include")
        self._settings["include"] = _pattern(pattern, flags)
        return self

    def exclude(self, pattern: str | None = None, flags: str | None = None) -> Any:
        """Drop terms matching a regular expression."""
        if pattern is None:
            return self._settings.get("exclude")
        self._settings["exclude"] = _pattern(pattern, flags)
        return self

    def execution_hint(self, hint: str | None = None) -> Any:
        return self._enum_accessor(self._settings, "execution_hint", hint, _EXECUTION_HINTS)

    def size(self, size: int | None = None) -> Any:
        return self._accessor(self._settings, "size", size)

    def shard_size(self, size: int | None = None) -> Any:
        return self._accessor(self._settings, "shard_size", size)

    def min_doc_count(self, count: int | None = None) -> Any:
        return self._accessor(self._settings, "min_doc_count", count)

    def order(self, key: str | None = None, direction: str | None = None) -> Any:
        """Order buckets by ``key``; an unknown direction falls back to desc."""
        if key is None:
            return self._settings.get("order")
        self._settings["order"] = _order(key, direction)
        return self


class HistogramAggregation(BucketsAggregationMixin):
    """Fixed-interval buckets over a numeric field."""

    def __init__(self, name: str) -> None:
        super().__init__(name, "histogram")

    def interval(self, interval: Any = None) -> Any:
        return self._accessor(self._settings, "interval", interval)

    def format(self, fmt: str | None = None) -> Any:
        return self._accessor(self._settings, "format", fmt)

    def extended_bounds(self, minimum: Any = None, maximum: Any = None) -> Any:
        """Force buckets from ``minimum`` to ``maximum`` even if empty."""
        if minimum is None and maximum is None:
            return self._settings.get("extended_bounds")
        bounds = {}
        if minimum is not None:
            bounds["min"] = minimum
        if maximum is not None:
            bounds["max"] = maximum
        self._settings["extended_bounds"] = bounds
        return self

    def min_doc_count(self, count: int | None = None) -> Any:
        return self._accessor(self._settings, "min_doc_count", count)

    def keyed(self, keyed: bool | None = None) -> Any:
        return self._accessor(self._settings, "keyed", keyed)

    def order(self, key: str | None = None, direction: str | None = None) -> Any:
        if key is None:
            return self._settings.get("order")
        self._settings["order"] = _order(key, direction)
        return self


class RangeAggregation(BucketsAggregationMixin):
    """One bucket per configured range."""

    def __init__(self, name: str) -> None:
        super().__init__(name, "range")

    def range(self, lower: Any = None, upper: Any = None, key: str | None = None) -> Any:
        """Append a ``{from, to, key}`` range; both bounds missing reads the list."""
        if lower is None and upper is None:
            return self._settings.get("ranges")
        entry: dict[str, Any] = {}
        if lower is not None:
            entry["from"] = lower
        if upper is not None:
            entry["to"] = upper
        if key is not None:
            entry["key"] = key
        self._settings.setdefault("ranges", []).append(entry)
        return self

    def keyed(self, keyed: bool | None = None) -> Any:
        return self._accessor(self._settings, "keyed", keyed)


class FilterAggregation(AggregationMixin):
    """Single bucket of the documents matching a filter."""

    def __init__(self, name: str) -> None:
        super().__init__(name)

    def filter(self, filter_: Any = None) -> Any:
        return self._node_accessor(self._body, "filter", filter_, is_filter, "a Filter")


class GlobalAggregation(AggregationMixin):
    """Single bucket of every document in the searched indices."""

    def __init__(self, name: str) -> None:
        super().__init__(name)
        self._body["global"] = {}


class MissingAggregation(AggregationMixin):
    """Single bucket of documents missing a field value."""

    def __init__(self, name: str) -> None:
        super().__init__(name)
        self._body["missing"] = {}

    def field(self, field: str | None = None) -> Any:
        return self._accessor(self._body["missing"], "field", field)


class NestedAggregation(AggregationMixin):
    """Aggregates nested documents under ``path``."""

    def __init__(self, name: str) -> None:
        super().__init__(name)
        self._body["nested"] = {}

    def path(self, path: str | None = None) -> Any:
        return self._accessor(self._body["nested"], "path", path)
