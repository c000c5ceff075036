"""Base classes for aggregation nodes.

An aggregation is keyed by its user supplied name, ``{name: {...}}``, so
several of them can be merged into one ``aggs`` mapping.
"""

from __future__ import annotations

from typing import Any

from ElasticDSL.core.errors import ArgumentTypeError
from ElasticDSL.core.node import Node
from ElasticDSL.core.util import AGGREGATION, ensure, extend, is_aggregation, snapshot


class AggregationMixin(Node):
    """Named aggregation envelope with support for nested aggregations."""

    kind = AGGREGATION

    def __init__(self, name: str) -> None:
        super().__init__({name: {}})
        self._name = name

    @property
    def _body(self) -> dict[str, Any]:
        return self._json[self._name]

    def aggregation(self, agg: Any = None) -> Any:
        """Add a nested aggregation, merged by name under ``aggs``.

        Raises:
            ArgumentTypeError: If ``agg`` is not an aggregation.
        """
        if agg is None:
            return self._body.get("aggs")
        ensure(is_aggregation, agg, "an Aggregation")
        extend(self._body.setdefault("aggs", {}), snapshot(agg))
        return self

    def agg(self, agg: Any = None) -> Any:
        """Alias of ``aggregation``."""
        return self.aggregation(agg)


class _ValuesSourceMixin(AggregationMixin):
    """Aggregation whose settings live under ``{name: {type: {...}}}``."""

    def __init__(self, name: str, agg_type: str) -> None:
        super().__init__(name)
        self._agg_type = agg_type
        self._body[agg_type] = {}

    @property
    def _settings(self) -> dict[str, Any]:
        return self._body[self._agg_type]

    def field(self, field: str | None = None) -> Any:
        return self._accessor(self._settings, "field", field)

    def script(self, script: str | None = None) -> Any:
        """Generate or modify the values with an inline script."""
        return self._accessor(self._settings, "script", script)

    def script_id(self, script_id: str | None = None) -> Any:
        return self._accessor(self._settings, "script_id", script_id)

    def script_file(self, script_file: str | None = None) -> Any:
        return self._accessor(self._settings, "script_file", script_file)

    def lang(self, lang: str | None = None) -> Any:
        return self._accessor(self._settings, "lang", lang)

    def params(self, params: dict[str, Any] | None = None) -> Any:
        """Script parameters; replaces any previous mapping."""
        return self._accessor(self._settings, "params", params)


class BucketsAggregationMixin(_ValuesSourceMixin):
    """Value-source aggregation producing buckets; accepts sub-aggregations."""


class MetricsAggregationMixin(_ValuesSourceMixin):
    """Value-source aggregation producing a metric; has no sub-aggregations."""

    def aggregation(self, agg: Any = None) -> Any:
        if agg is None:
            return None
        raise ArgumentTypeError(f"{type(self).__name__} does not accept sub-aggregations")

    def agg(self, agg: Any = None) -> Any:
        return self.aggregation(agg)
