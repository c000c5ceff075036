"""Aggregation nodes."""

from ElasticDSL.aggregations.bucket import (
    FilterAggregation,
    GlobalAggregation,
    HistogramAggregation,
    MissingAggregation,
    NestedAggregation,
    RangeAggregation,
    TermsAggregation,
)
from ElasticDSL.aggregations.metrics import (
    AvgAggregation,
    CardinalityAggregation,
    MaxAggregation,
    MinAggregation,
    StatsAggregation,
    SumAggregation,
    ValueCountAggregation,
)
from ElasticDSL.aggregations.mixin import AggregationMixin, BucketsAggregationMixin, MetricsAggregationMixin

__all__ = [
    "AggregationMixin",
    "AvgAggregation",
    "BucketsAggregationMixin",
    "CardinalityAggregation",
    "FilterAggregation",
    "GlobalAggregation",
    "HistogramAggregation",
    "MaxAggregation",
    "MetricsAggregationMixin",
    "MinAggregation",
    "MissingAggregation",
    "NestedAggregation",
    "RangeAggregation",
    "StatsAggregation",
    "SumAggregation",
    "TermsAggregation",
    "ValueCountAggregation",
]
