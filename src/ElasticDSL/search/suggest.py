"""Suggesters and the direct candidate generator used by phrase suggestions.

A suggester is keyed by its name, ``{name: {"text": ..., <type>: {...}}}``,
so several of them merge into the request's ``suggest`` section.
"""

from __future__ import annotations

from typing import Any

from ElasticDSL.core.node import Node
from ElasticDSL.core.util import GENERATOR, SUGGEST, is_generator

_SUGGEST_MODES = frozenset({"missing", "popular", "always"})
_SORTS = frozenset({"score", "frequency"})
_STRING_DISTANCES = frozenset({"internal", "damerau_levenshtein", "levenstein", "jarowinkler", "ngram"})


class SuggesterMixin(Node):
    """Named suggester envelope carrying the text to suggest for."""

    kind = SUGGEST

    def __init__(self, name: str) -> None:
        super().__init__({name: {}})
        self._name = name

    @property
    def _body(self) -> dict[str, Any]:
        return self._json[self._name]

    def text(self, text: str | None = None) -> Any:
        return self._accessor(self._body, "text", text)


class SuggestContextMixin(SuggesterMixin):
    """Suggester whose settings live under ``{name: {type: {...}}}``."""

    def __init__(self, name: str, suggest_type: str) -> None:
        super().__init__(name)
        self._suggest_type = suggest_type
        self._body[suggest_type] = {}

    @property
    def _settings(self) -> dict[str, Any]:
        return self._body[self._suggest_type]

    def analyzer(self, analyzer: str | None = None) -> Any:
        return self._accessor(self._settings, "analyzer", analyzer)

    def field(self, field: str | None = None) -> Any:
        return self._accessor(self._settings, "field", field)

    def size(self, size: int | None = None) -> Any:
        return self._accessor(self._settings, "size", size)

    def shard_size(self, size: int | None = None) -> Any:
        return self._accessor(self._settings, "shard_size", size)


class _CandidateOptions(Node):
    """Term candidate settings shared by term suggesters and direct generators.

    Subclasses provide the ``_settings`` mapping the options are written to.
    """

    _settings: dict[str, Any]

    def accuracy(self, accuracy: float | None = None) -> Any:
        return self._accessor(self._settings, "accuracy", accuracy)

    def suggest_mode(self, mode: str | None = None) -> Any:
        """Which terms get suggestions: missing, popular or always."""
        return self._enum_accessor(self._settings, "suggest_mode", mode, _SUGGEST_MODES)

    def sort(self, sort: str | None = None) -> Any:
        return self._enum_accessor(self._settings, "sort", sort, _SORTS)

    def string_distance(self, distance: str | None = None) -> Any:
        return self._enum_accessor(self._settings, "string_distance", distance, _STRING_DISTANCES)

    def max_edits(self, edits: int | None = None) -> Any:
        return self._accessor(self._settings, "max_edits", edits)

    def max_inspections(self, inspections: int | None = None) -> Any:
        return self._accessor(self._settings, "max_inspections", inspections)

    def max_term_freq(self, freq: float | None = None) -> Any:
        return self._accessor(self._settings, "max_term_freq", freq)

    def prefix_len(self, length: int | None = None) -> Any:
        return self._accessor(self._settings, "prefix_len", length)

    def min_word_len(self, length: int | None = None) -> Any:
        return self._accessor(self._settings, "min_word_len", length)

    def min_doc_freq(self, freq: float | None = None) -> Any:
        return self._accessor(self._settings, "min_doc_freq", freq)


class DirectGenerator(_CandidateOptions):
    """Candidate generator for ``PhraseSuggester.direct_generator``."""

    kind = GENERATOR

    def __init__(self) -> None:
        super().__init__({})

    @property
    def _settings(self) -> dict[str, Any]:
        return self._json

    def field(self, field: str | None = None) -> Any:
        return self._accessor(self._json, "field", field)

    def size(self, size: int | None = None) -> Any:
        return self._accessor(self._json, "size", size)

    def pre_filter(self, analyzer: str | None = None) -> Any:
        """Analyzer applied to each token before candidates are generated."""
        return self._accessor(self._json, "pre_filter", analyzer)

    def post_filter(self, analyzer: str | None = None) -> Any:
        return self._accessor(self._json, "post_filter", analyzer)


class TermSuggester(_CandidateOptions, SuggestContextMixin):
    """Suggests corrections per term of the input text."""

    def __init__(self, name: str) -> None:
        super().__init__(name, "term")


class PhraseSuggester(SuggestContextMixin):
    """Suggests corrected whole phrases using an n-gram language model."""

    def __init__(self, name: str) -> None:
        super().__init__(name, "phrase")

    def real_word_error_likelihood(self, likelihood: float | None = None) -> Any:
        return self._accessor(self._settings, "real_word_error_likelihood", likelihood)

    def confidence(self, confidence: float | None = None) -> Any:
        return self._accessor(self._settings, "confidence", confidence)

    def separator(self, separator: str | None = None) -> Any:
        return self._accessor(self._settings, "separator", separator)

    def max_errors(self, errors: float | None = None) -> Any:
        return self._accessor(self._settings, "max_errors", errors)

    def gram_size(self, size: int | None = None) -> Any:
        return self._accessor(self._settings, "gram_size", size)

    def force_unigrams(self, force: bool | None = None) -> Any:
        return self._accessor(self._settings, "force_unigrams", force)

    def token_limit(self, limit: int | None = None) -> Any:
        return self._accessor(self._settings, "token_limit", limit)

    def linear_smoothing(self, trigram: float, bigram: float, unigram: float) -> PhraseSuggester:
        self._settings["smoothing"] = {
            "linear": {"trigram_lambda": trigram, "bigram_lambda": bigram, "unigram_lambda": unigram}
        }
        return self

    def laplace_smoothing(self, alpha: float) -> PhraseSuggester:
        self._settings["smoothing"] = {"laplace": {"alpha": alpha}}
        return self

    def stupid_backoff_smoothing(self, discount: float) -> PhraseSuggester:
        self._settings["smoothing"] = {"stupid_backoff": {"discount": discount}}
        return self

    def highlight(self, pre_tag: str | None = None, post_tag: str | None = None) -> Any:
        """Wrap changed tokens of each suggestion in ``pre_tag``/``post_tag``."""
        if pre_tag is None and post_tag is None:
            return self._settings.get("highlight")
        self._settings["highlight"] = {"pre_tag": pre_tag, "post_tag": post_tag}
        return self

    def direct_generator(self, generator: Any = None) -> Any:
        """Append one generator, or replace all generators with a list."""
        return self._nodes_accessor(
            self._settings, "direct_generator", generator, is_generator, "a DirectGenerator"
        )


class CompletionSuggester(SuggestContextMixin):
    """Prefix completion backed by a completion field.

    Fuzzy settings are kept in a ``fuzzy`` object created on first use;
    ``fuzzy(False)`` removes it again.
    """

    def __init__(self, name: str) -> None:
        super().__init__(name, "completion")

    def _fuzzy_option(self, key: str, value: Any) -> Any:
        if value is None:
            return self._settings.get("fuzzy", {}).get(key)
        self._settings.setdefault("fuzzy", {})[key] = value
        return self

    def fuzzy(self, enabled: bool | None = None) -> Any:
        if enabled is None:
            return self._settings.get("fuzzy")
        if enabled:
            self._settings.setdefault("fuzzy", {})
        else:
            self._settings.pop("fuzzy", None)
        return self

    def transpositions(self, enabled: bool | None = None) -> Any:
        return self._fuzzy_option("transpositions", enabled)

    def unicode_aware(self, enabled: bool | None = None) -> Any:
        return self._fuzzy_option("unicode_aware", enabled)

    def edit_distance(self, distance: int | None = None) -> Any:
        return self._fuzzy_option("edit_distance", distance)

    def min_length(self, length: int | None = None) -> Any:
        return self._fuzzy_option("min_length", length)

    def prefix_length(self, length: int | None = None) -> Any:
        return self._fuzzy_option("prefix_length", length)
