"""Single- and multi-value metric aggregations."""

from __future__ import annotations

from typing import Any

from ElasticDSL.aggregations.mixin import MetricsAggregationMixin


class AvgAggregation(MetricsAggregationMixin):
    def __init__(self, name: str) -> None:
        super().__init__(name, "avg")


class SumAggregation(MetricsAggregationMixin):
    def __init__(self, name: str) -> None:
        super().__init__(name, "sum")


class MinAggregation(MetricsAggregationMixin):
    def __init__(self, name: str) -> None:
        super().__init__(name, "min")


class MaxAggregation(MetricsAggregationMixin):
    def __init__(self, name: str) -> None:
        super().__init__(name, "max")


class StatsAggregation(MetricsAggregationMixin):
    """min, max, sum, count and avg in one pass."""

    def __init__(self, name: str) -> None:
        super().__init__(name, "stats")


class ValueCountAggregation(MetricsAggregationMixin):
    """Number of values extracted from the documents."""

    def __init__(self, name: str) -> None:
        super().__init__(name, "value_count")


class CardinalityAggregation(MetricsAggregationMixin):
    """Approximate count of distinct values."""

    def __init__(self, name: str) -> None:
        super().__init__(name, "cardinality")

    def precision_threshold(self, threshold: int | None = None) -> Any:
        """Counts below this threshold are expected to be close to accurate."""
        return self._accessor(self._settings, "precision_threshold", threshold)

    def rehash(self, rehash: bool | None = None) -> Any:
        return self._accessor(self._settings, "rehash", rehash)
