"""Geographic values: points, inline shapes and indexed shapes."""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any

from ElasticDSL.core.node import Node
from ElasticDSL.core.util import GEO_POINT, INDEXED_SHAPE, SHAPE, is_sequence
from ElasticDSL.utils.log import log

_SHAPE_TYPES = frozenset(
    {"point", "linestring", "polygon", "multipoint", "envelope", "multipolygon", "circle", "multilinestring"}
)
_GEOHASH_PRECISION = 12


def _lon_lat(point: Any) -> list[Any] | None:
    if is_sequence(point) and len(point) == 2:
        return [point[1], point[0]]
    return None


class GeoPoint(Node):
    """A point in any of the accepted formats.

    Array input is ``[lat, lon]`` and is stored GeoJSON style as ``[lon, lat]``.
    Invalid input is ignored and the previous point is kept.
    """

    kind = GEO_POINT

    def __init__(self, point: Any = None) -> None:
        super().__init__(_lon_lat(point) or [0, 0])

    def _set(self, point: Any) -> GeoPoint:
        self._json = point
        return self

    def properties(self, obj: Mapping[str, Any] | None = None) -> Any:
        """Set the point from ``{"lat", "lon"}`` or ``{"geohash"}``."""
        if obj is None:
            return self._json
        if isinstance(obj, Mapping):
            if "lat" in obj and "lon" in obj:
                return self._set({"lat": obj["lat"], "lon": obj["lon"]})
            if "geohash" in obj:
                return self._set({"geohash": obj["geohash"]})
        log.debug("Ignoring geo point properties without lat/lon or geohash: %r", obj)
        return self

    def string(self, text: str | None = None) -> Any:
        """Set the point from a ``"lat,lon"`` string."""
        if text is None:
            return self._json
        if isinstance(text, str) and "," in text:
            return self._set(text)
        return self

    def geohash(self, value: str | None = None, precision: int = _GEOHASH_PRECISION) -> Any:
        """Set the point from a geohash of ``precision`` characters."""
        if value is None:
            return self._json
        if isinstance(value, str) and len(value) == precision:
            return self._set(value)
        return self

    def array(self, point: Any = None) -> Any:
        """Set the point from ``[lat, lon]``."""
        if point is None:
            return self._json
        converted = _lon_lat(point)
        if converted is not None:
            self._set(converted)
        return self


class Shape(Node):
    """Inline GeoJSON-like shape used by geo shape queries and filters."""

    kind = SHAPE

    def __init__(self, shape_type: str, coordinates: Any) -> None:
        super().__init__({})
        self.type(shape_type)
        self._json["coordinates"] = coordinates

    def type(self, shape_type: str | None = None) -> Any:
        return self._enum_accessor(self._json, "type", shape_type, _SHAPE_TYPES)

    def coordinates(self, coordinates: Any = None) -> Any:
        return self._accessor(self._json, "coordinates", coordinates)

    def radius(self, radius: Any = None) -> Any:
        """Radius of a circle shape, e.g. ``"20km"``."""
        return self._accessor(self._json, "radius", radius)


class IndexedShape(Node):
    """Reference to a shape already indexed in another document."""

    kind = INDEXED_SHAPE

    def __init__(self, doc_type: str, doc_id: str) -> None:
        super().__init__({"type": doc_type, "id": doc_id})

    def type(self, doc_type: str | None = None) -> Any:
        return self._accessor(self._json, "type", doc_type)

    def id(self, doc_id: str | None = None) -> Any:
        return self._accessor(self._json, "id", doc_id)

    def index(self, index: str | None = None) -> Any:
        return self._accessor(self._json, "index", index)

    def shape_field_name(self, name: str | None = None) -> Any:
        return self._accessor(self._json, "shape_field_name", name)
