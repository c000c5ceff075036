"""Search request and the helper nodes it accepts."""

from ElasticDSL.search.geo import GeoPoint, IndexedShape, Shape
from ElasticDSL.search.highlight import Highlight
from ElasticDSL.search.request import Request
from ElasticDSL.search.rescore import Rescore
from ElasticDSL.search.script_field import ScriptField
from ElasticDSL.search.sort import Sort
from ElasticDSL.search.suggest import (
    CompletionSuggester,
    DirectGenerator,
    PhraseSuggester,
    SuggestContextMixin,
    SuggesterMixin,
    TermSuggester,
)

__all__ = [
    "CompletionSuggester",
    "DirectGenerator",
    "GeoPoint",
    "Highlight",
    "IndexedShape",
    "PhraseSuggester",
    "Request",
    "Rescore",
    "ScriptField",
    "Shape",
    "Sort",
    "SuggestContextMixin",
    "SuggesterMixin",
    "TermSuggester",
]
