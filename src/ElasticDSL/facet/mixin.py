"""Common envelope shared by every facet node."""

from __future__ import annotations

from typing import Any

from ElasticDSL.core.node import Node
from ElasticDSL.core.util import FACET, is_filter

_MODES = frozenset({"collector", "post"})


class FacetMixin(Node):
    """Named facet envelope, ``{name: {...}}``, with the options every facet shares."""

    kind = FACET

    def __init__(self, name: str) -> None:
        super().__init__({name: {}})
        self._name = name

    @property
    def _body(self) -> dict[str, Any]:
        return self._json[self._name]

    def facet_filter(self, filter_: Any = None) -> Any:
        """Reduce the documents used to compute the facet."""
        return self._node_accessor(self._body, "facet_filter", filter_, is_filter, "a Filter")

    def global_(self, is_global: bool | None = None) -> Any:
        """Compute the facet across the whole index instead of the query hits."""
        return self._accessor(self._body, "global", is_global)

    def mode(self, mode: str | None = None) -> Any:
        return self._enum_accessor(self._body, "mode", mode, _MODES)

    def cache_filter(self, cache: bool | None = None) -> Any:
        return self._accessor(self._body, "cache_filter", cache)

    def nested(self, path: str | None = None) -> Any:
        """Path of the nested document when faceting on a nested field."""
        return self._accessor(self._body, "nested", path)


class _TypedFacet(FacetMixin):
    """Facet whose settings live under ``{name: {type: {...}}}``."""

    def __init__(self, name: str, facet_type: str) -> None:
        super().__init__(name)
        self._facet_type = facet_type
        self._body[facet_type] = {}

    @property
    def _settings(self) -> dict[str, Any]:
        return self._body[self._facet_type]
