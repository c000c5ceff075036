"""Filter nodes."""

from ElasticDSL.filter.basic import (
    ExistsFilter,
    IdsFilter,
    MatchAllFilter,
    MissingFilter,
    PrefixFilter,
    QueryFilter,
    RangeFilter,
    TermFilter,
    TermsFilter,
    TypeFilter,
)
from ElasticDSL.filter.compound import AndFilter, BoolFilter, NotFilter, OrFilter
from ElasticDSL.filter.geo import GeoBboxFilter, GeoDistanceFilter
from ElasticDSL.filter.mixin import FilterMixin

__all__ = [
    "AndFilter",
    "BoolFilter",
    "ExistsFilter",
    "FilterMixin",
    "GeoBboxFilter",
    "GeoDistanceFilter",
    "IdsFilter",
    "MatchAllFilter",
    "MissingFilter",
    "NotFilter",
    "OrFilter",
    "PrefixFilter",
    "QueryFilter",
    "RangeFilter",
    "TermFilter",
    "TermsFilter",
    "TypeFilter",
]
