"""Leaf queries over single fields or the whole index."""

from __future__ import annotations

from typing import Any

from ElasticDSL.core.errors import ArgumentTypeError
from ElasticDSL.core.util import as_str_list, is_sequence, rekey
from ElasticDSL.query.mixin import QueryMixin

_MATCH_OPERATORS = frozenset({"and", "or"})
_MATCH_TYPES = frozenset({"boolean", "phrase", "phrase_prefix"})
_ZERO_TERMS = frozenset({"all", "none"})
_MULTI_MATCH_TYPES = frozenset({"best_fields", "most_fields", "cross_fields", "phrase", "phrase_prefix"})
_DEFAULT_OPERATORS = frozenset({"AND", "OR"})
TERMS_EXECUTION = frozenset(
    {"plain", "bool", "and", "or", "fielddata", "bool_nocache", "and_nocache", "or_nocache"}
)


class MatchAllQuery(QueryMixin):
    """Matches every document."""

    def __init__(self) -> None:
        super().__init__("match_all")


class _FieldValueQuery(QueryMixin):
    """Queries shaped ``{kind: {field: {"value": v, ...}}}``.

    Boost lives next to the value instead of on the envelope.
    """

    def __init__(self, discriminator: str, field: str, value: Any) -> None:
        super().__init__(discriminator)
        self._field = field
        self._body[field] = {"value": value}

    @property
    def _options(self) -> dict[str, Any]:
        return self._body[self._field]

    def field(self, field: str | None = None) -> Any:
        """Get or rename the field this query runs against."""
        if field is None:
            return self._field
        rekey(self._body, self._field, field)
        self._field = field
        return self

    def value(self, value: Any = None) -> Any:
        return self._accessor(self._options, "value", value)

    def boost(self, boost: float | None = None) -> Any:
        return self._accessor(self._options, "boost", boost)


class TermQuery(_FieldValueQuery):
    """Matches documents whose field contains the exact, non-analyzed term."""

    def __init__(self, field: str, term: Any) -> None:
        super().__init__("term", field, term)

    def term(self, term: Any = None) -> Any:
        """Alias of ``value``."""
        return self.value(term)


class PrefixQuery(_FieldValueQuery):
    """Matches documents whose field starts with the given prefix."""

    def __init__(self, field: str, prefix: str) -> None:
        super().__init__("prefix", field, prefix)

    def prefix(self, prefix: str | None = None) -> Any:
        return self.value(prefix)

    def rewrite(self, method: str | None = None) -> Any:
        return self._accessor(self._options, "rewrite", method)


class WildcardQuery(_FieldValueQuery):
    """Matches documents with a field matching a ``*``/``?`` pattern."""

    def __init__(self, field: str, pattern: str) -> None:
        super().__init__("wildcard", field, pattern)

    def rewrite(self, method: str | None = None) -> Any:
        return self._accessor(self._options, "rewrite", method)


class TermsQuery(QueryMixin):
    """Matches documents containing any of the given terms."""

    def __init__(self, field: str, terms: Any) -> None:
        super().__init__("terms")
        self._field = field
        self._body[field] = list(terms) if is_sequence(terms) else [terms]

    def field(self, field: str | None = None) -> Any:
        if field is None:
            return self._field
        rekey(self._body, self._field, field)
        self._field = field
        return self

    def terms(self, terms: Any = None) -> Any:
        """Append one term, or replace all terms with a list."""
        if terms is None:
            return self._body[self._field]
        if is_sequence(terms):
            self._body[self._field] = list(terms)
        else:
            self._body[self._field].append(terms)
        return self

    def minimum_should_match(self, minimum: Any = None) -> Any:
        return self._accessor(self._body, "minimum_should_match", minimum)

    def disable_coord(self, disable: bool | None = None) -> Any:
        return self._accessor(self._body, "disable_coord", disable)

    def execution(self, execution: str | None = None) -> Any:
        return self._enum_accessor(self._body, "execution", execution, TERMS_EXECUTION)


class MatchQuery(QueryMixin):
    """Analyzed full text query against one field."""

    def __init__(self, field: str, query: str) -> None:
        super().__init__("match")
        self._field = field
        self._body[field] = {"query": query}

    @property
    def _options(self) -> dict[str, Any]:
        return self._body[self._field]

    def field(self, field: str | None = None) -> Any:
        if field is None:
            return self._field
        rekey(self._body, self._field, field)
        self._field = field
        return self

    def query(self, query: str | None = None) -> Any:
        return self._accessor(self._options, "query", query)

    def boost(self, boost: float | None = None) -> Any:
        return self._accessor(self._options, "boost", boost)

    def type(self, match_type: str | None = None) -> Any:
        """Set the match type: boolean, phrase or phrase_prefix."""
        return self._enum_accessor(self._options, "type", match_type, _MATCH_TYPES)

    def operator(self, operator: str | None = None) -> Any:
        return self._enum_accessor(self._options, "operator", operator, _MATCH_OPERATORS)

    def zero_terms_query(self, behaviour: str | None = None) -> Any:
        return self._enum_accessor(self._options, "zero_terms_query", behaviour, _ZERO_TERMS)

    def fuzziness(self, fuzziness: Any = None) -> Any:
        return self._accessor(self._options, "fuzziness", fuzziness)

    def prefix_length(self, length: int | None = None) -> Any:
        return self._accessor(self._options, "prefix_length", length)

    def max_expansions(self, expansions: int | None = None) -> Any:
        return self._accessor(self._options, "max_expansions", expansions)

    def analyzer(self, analyzer: str | None = None) -> Any:
        return self._accessor(self._options, "analyzer", analyzer)

    def slop(self, slop: int | None = None) -> Any:
        return self._accessor(self._options, "slop", slop)

    def minimum_should_match(self, minimum: Any = None) -> Any:
        return self._accessor(self._options, "minimum_should_match", minimum)


class MultiMatchQuery(QueryMixin):
    """Match query run against several fields at once."""

    def __init__(self, fields: Any, query: str) -> None:
        super().__init__("multi_match")
        self._body["query"] = query
        self._body["fields"] = as_str_list(fields, "fields")

    def fields(self, fields: Any = None) -> Any:
        """Append one field name, or replace the list."""
        if fields is None:
            return self._body["fields"]
        if isinstance(fields, str):
            self._body["fields"].append(fields)
        else:
            self._body["fields"] = as_str_list(fields, "fields")
        return self

    def query(self, query: str | None = None) -> Any:
        return self._accessor(self._body, "query", query)

    def type(self, match_type: str | None = None) -> Any:
        return self._enum_accessor(self._body, "type", match_type, _MULTI_MATCH_TYPES)

    def operator(self, operator: str | None = None) -> Any:
        return self._enum_accessor(self._body, "operator", operator, _MATCH_OPERATORS)

    def tie_breaker(self, tie_breaker: float | None = None) -> Any:
        return self._accessor(self._body, "tie_breaker", tie_breaker)

    def analyzer(self, analyzer: str | None = None) -> Any:
        return self._accessor(self._body, "analyzer", analyzer)

    def minimum_should_match(self, minimum: Any = None) -> Any:
        return self._accessor(self._body, "minimum_should_match", minimum)


class RangeQuery(QueryMixin):
    """Matches documents with field values inside a range."""

    def __init__(self, field: str) -> None:
        super().__init__("range")
        self._field = field
        self._body[field] = {}

    @property
    def _options(self) -> dict[str, Any]:
        return self._body[self._field]

    def field(self, field: str | None = None) -> Any:
        if field is None:
            return self._field
        rekey(self._body, self._field, field)
        self._field = field
        return self

    def boost(self, boost: float | None = None) -> Any:
        return self._accessor(self._options, "boost", boost)

    def from_(self, lower: Any = None) -> Any:
        return self._accessor(self._options, "from", lower)

    def to(self, upper: Any = None) -> Any:
        return self._accessor(self._options, "to", upper)

    def include_lower(self, include: bool | None = None) -> Any:
        return self._accessor(self._options, "include_lower", include)

    def include_upper(self, include: bool | None = None) -> Any:
        return self._accessor(self._options, "include_upper", include)

    def gt(self, value: Any = None) -> Any:
        return self._accessor(self._options, "gt", value)

    def gte(self, value: Any = None) -> Any:
        return self._accessor(self._options, "gte", value)

    def lt(self, value: Any = None) -> Any:
        return self._accessor(self._options, "lt", value)

    def lte(self, value: Any = None) -> Any:
        return self._accessor(self._options, "lte", value)


class IdsQuery(QueryMixin):
    """Matches documents by id, optionally restricted to types."""

    def __init__(self, ids: Any) -> None:
        super().__init__("ids")
        self._body["values"] = as_str_list(ids, "ids")

    def values(self, ids: Any = None) -> Any:
        """Append one id, or replace all ids with a list."""
        if ids is None:
            return self._body["values"]
        if isinstance(ids, str):
            self._body["values"].append(ids)
        else:
            self._body["values"] = as_str_list(ids, "ids")
        return self

    def type(self, types: Any = None) -> Any:
        if types is None:
            return self._body.get("type")
        self._body["type"] = as_str_list(types, "type")
        return self


class QueryStringQuery(QueryMixin):
    """Query parsed with the backend's Lucene query syntax."""

    def __init__(self, query: str) -> None:
        super().__init__("query_string")
        self._body["query"] = query

    def query(self, query: str | None = None) -> Any:
        return self._accessor(self._body, "query", query)

    def default_field(self, field: str | None = None) -> Any:
        return self._accessor(self._body, "default_field", field)

    def fields(self, fields: Any = None) -> Any:
        if fields is None:
            return self._body.get("fields")
        if not is_sequence(fields):
            raise ArgumentTypeError("fields must be a list of field names")
        self._body["fields"] = list(fields)
        return self

    def default_operator(self, operator: str | None = None) -> Any:
        """Set the operator joining terms: AND or OR (stored uppercase)."""
        return self._enum_accessor(self._body, "default_operator", operator, _DEFAULT_OPERATORS, upper=True)

    def analyzer(self, analyzer: str | None = None) -> Any:
        return self._accessor(self._body, "analyzer", analyzer)

    def allow_leading_wildcard(self, allow: bool | None = None) -> Any:
        return self._accessor(self._body, "allow_leading_wildcard", allow)

    def lowercase_expanded_terms(self, lowercase: bool | None = None) -> Any:
        return self._accessor(self._body, "lowercase_expanded_terms", lowercase)

    def analyze_wildcard(self, analyze: bool | None = None) -> Any:
        return self._accessor(self._body, "analyze_wildcard", analyze)

    def phrase_slop(self, slop: int | None = None) -> Any:
        return self._accessor(self._body, "phrase_slop", slop)

    def minimum_should_match(self, minimum: Any = None) -> Any:
        return self._accessor(self._body, "minimum_should_match", minimum)

    def lenient(self, lenient: bool | None = None) -> Any:
        return self._accessor(self._body, "lenient", lenient)
