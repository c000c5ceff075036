"""The search request: target indices/types plus the request body.

``Request`` accumulates the body with the same accessor conventions as the
nodes, then ``do_search`` POSTs it through a search client.
"""

from __future__ import annotations

import json
from typing import Any, Callable
from urllib.parse import quote

from ElasticDSL.clients.registry import current_client
from ElasticDSL.core.errors import ArgumentTypeError, ConfigurationError
from ElasticDSL.core.node import Node
from ElasticDSL.core.util import (
    REQUEST,
    as_str_list,
    dedup_preserve_order,
    ensure,
    extend,
    is_aggregation,
    is_facet,
    is_filter,
    is_highlight,
    is_query,
    is_rescore,
    is_script_field,
    is_sequence,
    is_sort,
    is_suggest,
    snapshot,
)
from ElasticDSL.search.sort import ORDERS
from ElasticDSL.utils.log import log

SEARCH_TYPES = frozenset(
    {"dfs_query_then_fetch", "dfs_query_and_fetch", "query_then_fetch", "query_and_fetch", "scan", "count"}
)
ALL_INDICES = "_all"


def _includes_value(value: Any, what: str) -> str | list[str]:
    if isinstance(value, str):
        return value
    return as_str_list(value, what)


class Request(Node):
    """A search against zero or more indices and types.

    Whenever the index list is empty while types are set, the index list is
    coerced to ``["_all"]`` so the type segment of the path stays addressable.
    """

    kind = REQUEST

    def __init__(self, indices: Any = None, types: Any = None, routing: str | None = None) -> None:
        super().__init__({})
        self._indices: list[str] = []
        self._types: list[str] = []
        self._routing = ""
        self._params: dict[str, str] = {}
        if indices is not None:
            self._indices = dedup_preserve_order(as_str_list(indices, "indices"))
        if types is not None:
            self._types = dedup_preserve_order(as_str_list(types, "types"))
        if routing is not None:
            self.routing(routing)
        self._coerce_indices()

    def _coerce_indices(self) -> None:
        if not self._indices and self._types:
            self._indices = [ALL_INDICES]

    def indices(self, indices: Any = None) -> Any:
        """Replace the searched indices with a name or a list of names."""
        if indices is None:
            return list(self._indices)
        self._indices = dedup_preserve_order(as_str_list(indices, "indices"))
        self._coerce_indices()
        return self

    def types(self, types: Any = None) -> Any:
        """Replace the searched types with a name or a list of names."""
        if types is None:
            return list(self._types)
        self._types = dedup_preserve_order(as_str_list(types, "types"))
        self._coerce_indices()
        return self

    def routing(self, routing: str | None = None) -> Any:
        """Route the search to the shards owning ``routing``; empty means none."""
        if routing is None:
            return self._routing
        if not isinstance(routing, str):
            raise ArgumentTypeError("routing must be a string")
        self._routing = routing
        return self

    def search_type(self, search_type: str | None = None) -> Any:
        """Execution type sent as a URL parameter, e.g. ``dfs_query_then_fetch``."""
        return self._enum_accessor(self._params, "search_type", search_type, SEARCH_TYPES)

    def preference(self, preference: str | None = None) -> Any:
        """Shard copy preference sent as a URL parameter, e.g. ``_local``."""
        return self._accessor(self._params, "preference", preference)

    def query(self, query: Any = None) -> Any:
        return self._node_accessor(self._json, "query", query, is_query, "a Query")

    def filter(self, filter_: Any = None) -> Any:
        """Filter hits after facets/aggregations are computed."""
        return self._node_accessor(self._json, "filter", filter_, is_filter, "a Filter")

    def sort(self, sort: Any = None, order: str | None = None) -> Any:
        """Add or replace sort clauses.

        - ``sort("field")`` appends a field name.
        - ``sort(Sort(...))`` appends the sort clause.
        - ``sort([...])`` replaces every clause with names and/or Sort nodes.
        - ``sort("field", "asc")`` appends ``{field: {"order": "asc"}}``; an
          unknown order is ignored.

        Raises:
            ArgumentTypeError: If an argument is not a name or a Sort.
        """
        if sort is None:
            return self._json.get("sort")
        if order is not None:
            if not isinstance(sort, str) or not isinstance(order, str):
                raise ArgumentTypeError("Arguments must be a field name and an order")
            normalized = order.lower()
            if normalized not in ORDERS:
                log.debug("Ignoring unsupported sort order for %s: %r", sort, order)
                return self
            self._json.setdefault("sort", []).append({sort: {"order": normalized}})
            return self
        if is_sequence(sort):
            clauses = []
            for item in sort:
                if isinstance(item, str):
                    clauses.append(item)
                elif is_sort(item):
                    clauses.append(snapshot(item))
                else:
                    raise ArgumentTypeError("Every list element must be a field name or a Sort")
            self._json["sort"] = clauses
            return self
        if isinstance(sort, str):
            self._json.setdefault("sort", []).append(sort)
        elif is_sort(sort):
            self._json.setdefault("sort", []).append(snapshot(sort))
        else:
            raise ArgumentTypeError("Argument must be a field name, a Sort or a list of them")
        return self

    def fields(self, fields: Any = None) -> Any:
        """Append one stored field to return, or replace them with a list."""
        if fields is None:
            return self._json.get("fields")
        if isinstance(fields, str):
            self._json.setdefault("fields", []).append(fields)
        else:
            self._json["fields"] = as_str_list(fields, "fields")
        return self

    def source(self, includes: Any = None, excludes: Any = None) -> Any:
        """Control which parts of ``_source`` are returned.

        ``source(False)`` disables ``_source`` entirely; otherwise ``includes``
        and ``excludes`` are a pattern or a list of patterns.

        Raises:
            ArgumentTypeError: If ``excludes`` is given without ``includes`` or
                either is not a pattern/list of patterns.
        """
        if includes is None and excludes is None:
            return self._json.get("_source")
        if isinstance(includes, bool):
            self._json["_source"] = includes
            return self
        if includes is None:
            raise ArgumentTypeError("excludes requires includes")
        source: dict[str, Any] = {"includes": _includes_value(includes, "includes")}
        if excludes is not None:
            source["excludes"] = _includes_value(excludes, "excludes")
        self._json["_source"] = source
        return self

    def highlight(self, highlight: Any = None) -> Any:
        return self._node_accessor(self._json, "highlight", highlight, is_highlight, "a Highlight")

    def rescore(self, rescore: Any = None) -> Any:
        return self._node_accessor(self._json, "rescore", rescore, is_rescore, "a Rescore")

    def size(self, size: int | None = None) -> Any:
        return self._accessor(self._json, "size", size)

    def from_(self, offset: int | None = None) -> Any:
        """Offset of the first hit to return."""
        return self._accessor(self._json, "from", offset)

    def timeout(self, timeout: Any = None) -> Any:
        return self._accessor(self._json, "timeout", timeout)

    def track_scores(self, track: bool | None = None) -> Any:
        """Compute scores even when sorting on a field."""
        return self._accessor(self._json, "track_scores", track)

    def explain(self, explain: bool | None = None) -> Any:
        return self._accessor(self._json, "explain", explain)

    def version(self, version: bool | None = None) -> Any:
        return self._accessor(self._json, "version", version)

    def min_score(self, score: float | None = None) -> Any:
        return self._accessor(self._json, "min_score", score)

    def _merge(self, key: str, node: Any, predicate: Callable[[object], bool], expected: str) -> Any:
        if node is None:
            return self._json.get(key)
        ensure(predicate, node, expected)
        extend(self._json.setdefault(key, {}), snapshot(node))
        return self

    def facet(self, facet: Any = None) -> Any:
        """Add a facet, merged by name under ``facets``."""
        return self._merge("facets", facet, is_facet, "a Facet")

    def aggregation(self, agg: Any = None) -> Any:
        """Add an aggregation, merged by name under ``aggs``."""
        return self._merge("aggs", agg, is_aggregation, "an Aggregation")

    def agg(self, agg: Any = None) -> Any:
        """Alias of ``aggregation``."""
        return self.aggregation(agg)

    def script_field(self, field: Any = None) -> Any:
        """Add a script field, merged by name under ``script_fields``."""
        return self._merge("script_fields", field, is_script_field, "a ScriptField")

    def suggest(self, suggest: Any = None) -> Any:
        """Set the global suggest text, or add a named suggester."""
        if suggest is None:
            return self._json.get("suggest")
        if isinstance(suggest, str):
            self._json.setdefault("suggest", {})["text"] = suggest
            return self
        return self._merge("suggest", suggest, is_suggest, "a string or a Suggester")

    def index_boost(self, index: str | None = None, boost: float | None = None) -> Any:
        """Boost hits from ``index`` by ``boost``; without ``boost`` read the stored value."""
        if index is None:
            return self._json.get("indices_boost")
        if boost is None:
            return self._json.get("indices_boost", {}).get(index)
        self._json.setdefault("indices_boost", {})[index] = boost
        return self

    def path(self) -> str:
        """Return the URL path (and query string) the search is sent to."""
        url = ""
        if self._indices:
            url += "/" + ",".join(self._indices)
        if self._types:
            url += "/" + ",".join(self._types)
        url += "/_search"
        params = []
        if self._routing:
            params.append(("routing", self._routing))
        params.extend(self._params.items())
        if params:
            url += "?" + "&".join(f"{key}={quote(str(value), safe='')}" for key, value in params)
        return url

    def do_search(
        self,
        on_success: Callable[[Any], Any] | None = None,
        on_error: Callable[[Exception], Any] | None = None,
        *,
        client: Any = None,
    ) -> Any:
        """POST the request body to ``<indices>/<types>/_search``.

        Args:
            on_success: Called with the decoded response.
            on_error: Called with the transport error.
            client: Client to use instead of the registered one.

        Returns:
            Whatever the client's ``post`` returns.

        Raises:
            ConfigurationError: If no client is given or registered.
        """
        search_client = client if client is not None else current_client()
        if search_client is None:
            raise ConfigurationError("No search client registered; call register_client() or pass client=")
        path = self.path()
        log.debug("Search request path=%s", path)
        return search_client.post(path, json.dumps(self._json), on_success, on_error)
