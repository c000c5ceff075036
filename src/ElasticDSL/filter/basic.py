"""Leaf filters over single fields, ids and types."""

from __future__ import annotations

from typing import Any

from ElasticDSL.core.util import as_str_list, is_query, is_sequence, rekey
from ElasticDSL.filter.mixin import FilterMixin
from ElasticDSL.query.basic import TERMS_EXECUTION


class MatchAllFilter(FilterMixin):
    """Matches every document."""

    def __init__(self) -> None:
        super().__init__("match_all")


class _FieldFilter(FilterMixin):
    """Filters keyed by the field name: ``{kind: {field: value}}``."""

    def __init__(self, discriminator: str, field: str, value: Any) -> None:
        super().__init__(discriminator)
        self._field = field
        self._body[field] = value

    def field(self, field: str | None = None) -> Any:
        """Get or rename the field this filter runs against."""
        if field is None:
            return self._field
        rekey(self._body, self._field, field)
        self._field = field
        return self


class TermFilter(_FieldFilter):
    """Documents whose field contains the exact, non-analyzed term."""

    def __init__(self, field: str, term: Any) -> None:
        super().__init__("term", field, term)

    def term(self, term: Any = None) -> Any:
        return self._accessor(self._body, self._field, term)


class PrefixFilter(_FieldFilter):
    """Documents whose field starts with ``prefix``."""

    def __init__(self, field: str, prefix: str | None = None) -> None:
        super().__init__("prefix", field, prefix)

    def prefix(self, prefix: str | None = None) -> Any:
        return self._accessor(self._body, self._field, prefix)


class TermsFilter(_FieldFilter):
    """Documents whose field contains any of the given terms."""

    def __init__(self, field: str, terms: Any) -> None:
        super().__init__("terms", field, list(terms) if is_sequence(terms) else [terms])

    def terms(self, terms: Any = None) -> Any:
        """Append one term, or replace all terms with a list."""
        if terms is None:
            return self._body[self._field]
        if is_sequence(terms):
            self._body[self._field] = list(terms)
        else:
            self._body[self._field].append(terms)
        return self

    def execution(self, execution: str | None = None) -> Any:
        """How the terms are executed, e.g. plain, bool or and_nocache."""
        return self._enum_accessor(self._body, "execution", execution, TERMS_EXECUTION)


class RangeFilter(FilterMixin):
    """Documents with field values inside a range."""

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


class ExistsFilter(FilterMixin):
    """Documents where ``field`` has a value."""

    def __init__(self, field: str) -> None:
        super().__init__("exists")
        self._body["field"] = field

    def field(self, field: str | None = None) -> Any:
        return self._accessor(self._body, "field", field)


class MissingFilter(FilterMixin):
    """Documents where ``field`` has no value."""

    def __init__(self, field: str) -> None:
        super().__init__("missing")
        self._body["field"] = field

    def field(self, field: str | None = None) -> Any:
        return self._accessor(self._body, "field", field)

    def existence(self, existence: bool | None = None) -> Any:
        """Also match documents where the field does not exist at all."""
        return self._accessor(self._body, "existence", existence)

    def null_value(self, null_value: bool | None = None) -> Any:
        """Also match documents where the field is explicitly null."""
        return self._accessor(self._body, "null_value", null_value)


class IdsFilter(FilterMixin):
    """Documents with the given ids, optionally restricted to types."""

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
        """Append one type, or replace all types with a list."""
        if types is None:
            return self._body.get("type")
        if isinstance(types, str):
            self._body.setdefault("type", []).append(types)
        else:
            self._body["type"] = as_str_list(types, "type")
        return self


class TypeFilter(FilterMixin):
    """Documents of one mapping type."""

    def __init__(self, type_: str) -> None:
        super().__init__("type")
        self._body["value"] = type_

    def type(self, type_: str | None = None) -> Any:
        return self._accessor(self._body, "value", type_)


class QueryFilter(FilterMixin):
    """Wraps a query so it can be used wherever a filter is accepted."""

    def __init__(self, query: Any) -> None:
        super().__init__("fquery")
        self.query(query)

    def query(self, query: Any = None) -> Any:
        return self._node_accessor(self._body, "query", query, is_query, "a Query")
