"""Sort clauses: by field, by distance from a point, or by script."""

from __future__ import annotations

from typing import Any

from ElasticDSL.core.node import Node
from ElasticDSL.core.util import SORT, ensure, is_filter, is_geo_point, rekey, snapshot
from ElasticDSL.filter.geo import DISTANCE_TYPES, DISTANCE_UNITS

ORDERS = frozenset({"asc", "desc"})
_MODES = frozenset({"min", "max", "avg", "sum"})
_SCRIPT_TYPES = frozenset({"string", "number"})
_GEO_DISTANCE = "_geo_distance"
_SCRIPT = "_script"


class Sort(Node):
    """One sort clause, ``{field: {...}}``.

    ``geo_distance`` and ``script`` switch the clause to ``_geo_distance`` or
    ``_script`` sorting; options set afterwards go to the new clause.
    """

    kind = SORT

    def __init__(self, field: str = "_score") -> None:
        super().__init__({field: {}})
        self._field = field
        self._key = field

    @property
    def _body(self) -> dict[str, Any]:
        return self._json[self._key]

    def _switch(self, key: str, body: dict[str, Any]) -> Sort:
        self._json.clear()
        self._json[key] = body
        self._key = key
        return self

    def field(self, field: str | None = None) -> Any:
        """Get or rename the sorted field."""
        if field is None:
            return self._field
        if self._key == _GEO_DISTANCE:
            rekey(self._body, self._field, field)
        elif self._key != _SCRIPT:
            rekey(self._json, self._key, field)
            self._key = field
        self._field = field
        return self

    def order(self, order: str | None = None) -> Any:
        return self._enum_accessor(self._body, "order", order, ORDERS)

    def asc(self) -> Sort:
        self._body["order"] = "asc"
        return self

    def desc(self) -> Sort:
        self._body["order"] = "desc"
        return self

    def reverse(self, reverse: bool | None = None) -> Any:
        return self._accessor(self._body, "reverse", reverse)

    def missing(self, missing: Any = None) -> Any:
        """Placement of documents without the field: ``_last``, ``_first`` or a value."""
        return self._accessor(self._body, "missing", missing)

    def ignore_unmapped(self, ignore: bool | None = None) -> Any:
        return self._accessor(self._body, "ignore_unmapped", ignore)

    def mode(self, mode: str | None = None) -> Any:
        """Value picked from multi-valued fields: min, max, avg or sum."""
        return self._enum_accessor(self._body, "mode", mode, _MODES)

    def nested_path(self, path: str | None = None) -> Any:
        return self._accessor(self._body, "nested_path", path)

    def nested_filter(self, filter_: Any = None) -> Any:
        return self._node_accessor(self._body, "nested_filter", filter_, is_filter, "a Filter")

    def geo_distance(self, point: Any = None) -> Any:
        """Sort by distance from ``point`` (a GeoPoint)."""
        if point is None:
            return self._json.get(_GEO_DISTANCE, {}).get(self._field)
        ensure(is_geo_point, point, "a GeoPoint")
        return self._switch(_GEO_DISTANCE, {self._field: snapshot(point)})

    def unit(self, unit: str | None = None) -> Any:
        return self._enum_accessor(self._body, "unit", unit, DISTANCE_UNITS)

    def normalize(self, normalize: bool | None = None) -> Any:
        return self._accessor(self._body, "normalize", normalize)

    def distance_type(self, distance_type: str | None = None) -> Any:
        return self._enum_accessor(self._body, "distance_type", distance_type, DISTANCE_TYPES)

    def script(self, script: str | None = None) -> Any:
        """Sort by the value computed by ``script``."""
        if script is None:
            return self._json.get(_SCRIPT, {}).get("script")
        if self._key == _SCRIPT:
            self._body["script"] = script
            return self
        return self._switch(_SCRIPT, {"script": script})

    def lang(self, lang: str | None = None) -> Any:
        return self._accessor(self._body, "lang", lang)

    def params(self, params: dict[str, Any] | None = None) -> Any:
        return self._accessor(self._body, "params", params)

    def type(self, script_type: str | None = None) -> Any:
        """Type of the script result: string or number."""
        return self._enum_accessor(self._body, "type", script_type, _SCRIPT_TYPES)
