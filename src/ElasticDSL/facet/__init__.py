"""Facet nodes."""

from ElasticDSL.facet.facets import FilterFacet, HistogramFacet, QueryFacet, StatisticalFacet, TermsFacet
from ElasticDSL.facet.mixin import FacetMixin

__all__ = [
    "FacetMixin",
    "FilterFacet",
    "HistogramFacet",
    "QueryFacet",
    "StatisticalFacet",
    "TermsFacet",
]
