"""Query nodes and score functions."""

from ElasticDSL.query.basic import (
    IdsQuery,
    MatchAllQuery,
    MatchQuery,
    MultiMatchQuery,
    PrefixQuery,
    QueryStringQuery,
    RangeQuery,
    TermQuery,
    TermsQuery,
    WildcardQuery,
)
from ElasticDSL.query.compound import (
    BoolQuery,
    ConstantScoreQuery,
    DisMaxQuery,
    FilteredQuery,
    FunctionScoreQuery,
    NestedQuery,
)
from ElasticDSL.query.functions import (
    BoostFactorScoreFunction,
    DecayScoreFunction,
    FieldValueFactorFunction,
    RandomScoreFunction,
    ScoreFunction,
    ScoreFunctionMixin,
    ScriptScoreFunction,
)
from ElasticDSL.query.mixin import QueryMixin
from ElasticDSL.query.span import SpanFirstQuery, SpanNearQuery, SpanNotQuery, SpanOrQuery, SpanTermQuery

__all__ = [
    "BoolQuery",
    "BoostFactorScoreFunction",
    "ConstantScoreQuery",
    "DecayScoreFunction",
    "DisMaxQuery",
    "FieldValueFactorFunction",
    "FilteredQuery",
    "FunctionScoreQuery",
    "IdsQuery",
    "MatchAllQuery",
    "MatchQuery",
    "MultiMatchQuery",
    "NestedQuery",
    "PrefixQuery",
    "QueryMixin",
    "QueryStringQuery",
    "RandomScoreFunction",
    "RangeQuery",
    "ScoreFunction",
    "ScoreFunctionMixin",
    "ScriptScoreFunction",
    "SpanFirstQuery",
    "SpanNearQuery",
    "SpanNotQuery",
    "SpanOrQuery",
    "SpanTermQuery",
    "TermQuery",
    "TermsQuery",
    "WildcardQuery",
]
