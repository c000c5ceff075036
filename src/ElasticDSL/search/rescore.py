"""Second pass scoring of the top hits."""

from __future__ import annotations

from numbers import Number
from typing import Any

from ElasticDSL.core.errors import ArgumentTypeError
from ElasticDSL.core.node import Node
from ElasticDSL.core.util import RESCORE, is_query

_SCORE_MODES = frozenset({"total", "min", "max", "multiply", "avg"})


def _is_number(value: Any) -> bool:
    return isinstance(value, Number) and not isinstance(value, bool)


class Rescore(Node):
    """Rescore the top ``window_size`` hits of every shard with another query."""

    kind = RESCORE

    def __init__(self, window_size: int | None = None, query: Any = None) -> None:
        super().__init__({"query": {}})
        if window_size is not None:
            self.window_size(window_size)
        if query is not None:
            self.rescore_query(query)

    @property
    def _query(self) -> dict[str, Any]:
        return self._json["query"]

    def window_size(self, size: int | None = None) -> Any:
        """Number of hits per shard to rescore.

        Raises:
            ArgumentTypeError: If ``size`` is not an integer.
        """
        if size is None:
            return self._json.get("window_size")
        if isinstance(size, bool) or not isinstance(size, int):
            raise ArgumentTypeError("window_size must be an integer")
        self._json["window_size"] = size
        return self

    def rescore_query(self, query: Any = None) -> Any:
        return self._node_accessor(self._query, "rescore_query", query, is_query, "a Query")

    def query_weight(self, weight: float | None = None) -> Any:
        """Weight of the original query score."""
        if weight is None:
            return self._query.get("query_weight")
        if not _is_number(weight):
            raise ArgumentTypeError("query_weight must be a number")
        self._query["query_weight"] = weight
        return self

    def rescore_query_weight(self, weight: float | None = None) -> Any:
        if weight is None:
            return self._query.get("rescore_query_weight")
        if not _is_number(weight):
            raise ArgumentTypeError("rescore_query_weight must be a number")
        self._query["rescore_query_weight"] = weight
        return self

    def score_mode(self, mode: str | None = None) -> Any:
        """How the two scores combine: total, min, max, multiply or avg."""
        return self._enum_accessor(self._query, "score_mode", mode, _SCORE_MODES)
