"""Builder core: node base class, predicates and errors."""

from ElasticDSL.core.errors import ArgumentTypeError, ConfigurationError, ElasticDSLError
from ElasticDSL.core.node import Node
from ElasticDSL.core.util import (
    extend,
    is_aggregation,
    is_facet,
    is_filter,
    is_generator,
    is_geo_point,
    is_highlight,
    is_indexed_shape,
    is_node,
    is_query,
    is_rescore,
    is_score_function,
    is_script_field,
    is_shape,
    is_sort,
    is_span_query,
    is_suggest,
)

__all__ = [
    "ArgumentTypeError",
    "ConfigurationError",
    "ElasticDSLError",
    "Node",
    "extend",
    "is_aggregation",
    "is_facet",
    "is_filter",
    "is_generator",
    "is_geo_point",
    "is_highlight",
    "is_indexed_shape",
    "is_node",
    "is_query",
    "is_rescore",
    "is_score_function",
    "is_script_field",
    "is_shape",
    "is_sort",
    "is_span_query",
    "is_suggest",
]
