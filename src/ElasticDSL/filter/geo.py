"""Geo filters over ``geo_point`` fields.

Points may be given as a ``GeoPoint`` node or as ``(lat, lon)`` numbers.
"""

from __future__ import annotations

from typing import Any

from ElasticDSL.core.errors import ArgumentTypeError
from ElasticDSL.core.util import is_geo_point, is_node, rekey, snapshot
from ElasticDSL.filter.mixin import FilterMixin

DISTANCE_UNITS = frozenset(
    {
        "mi", "miles", "in", "inch", "yd", "yard", "ft", "feet",
        "km", "kilometers", "mm", "millimeters", "cm", "centimeters", "m", "meters",
    }
)
DISTANCE_TYPES = frozenset({"arc", "plane", "sloppy_arc"})
_OPTIMIZE_BBOX = frozenset({"memory", "indexed", "none"})
_BBOX_TYPES = frozenset({"memory", "indexed"})


def _point_value(point: Any, lon: Any, as_pair: bool) -> Any:
    if is_geo_point(point):
        return snapshot(point)
    if is_node(point) or lon is None:
        raise ArgumentTypeError("Argument must be a GeoPoint or a lat, lon pair")
    return [lon, point] if as_pair else {"lat": point, "lon": lon}


class GeoDistanceFilter(FilterMixin):
    """Documents within ``distance`` of a point."""

    def __init__(self, field: str) -> None:
        super().__init__("geo_distance")
        self._field = field

    def field(self, field: str | None = None) -> Any:
        if field is None:
            return self._field
        if self._field in self._body:
            rekey(self._body, self._field, field)
        self._field = field
        return self

    def distance(self, distance: Any = None) -> Any:
        return self._accessor(self._body, "distance", distance)

    def unit(self, unit: str | None = None) -> Any:
        return self._enum_accessor(self._body, "unit", unit, DISTANCE_UNITS)

    def point(self, point: Any = None, lon: Any = None) -> Any:
        """Set the origin as a GeoPoint, or as ``point(lat, lon)``.

        Raises:
            ArgumentTypeError: If neither form is given.
        """
        if point is None:
            return self._body.get(self._field)
        self._body[self._field] = _point_value(point, lon, as_pair=False)
        return self

    def distance_type(self, distance_type: str | None = None) -> Any:
        """Distance calculation: arc, plane or sloppy_arc."""
        return self._enum_accessor(self._body, "distance_type", distance_type, DISTANCE_TYPES)

    def normalize(self, normalize: bool | None = None) -> Any:
        return self._accessor(self._body, "normalize", normalize)

    def optimize_bbox(self, optimize: str | None = None) -> Any:
        """Bounding box pre-check: memory, indexed or none."""
        return self._enum_accessor(self._body, "optimize_bbox", optimize, _OPTIMIZE_BBOX)


class GeoBboxFilter(FilterMixin):
    """Documents inside a bounding box given by two corners."""

    def __init__(self, field: str) -> None:
        super().__init__("geo_bounding_box")
        self._field = field
        self._body[field] = {}

    @property
    def _corners(self) -> dict[str, Any]:
        return self._body[self._field]

    def field(self, field: str | None = None) -> Any:
        if field is None:
            return self._field
        rekey(self._body, self._field, field)
        self._field = field
        return self

    def top_left(self, point: Any = None, lon: Any = None) -> Any:
        """Set the top-left corner; ``(lat, lon)`` is stored as ``[lon, lat]``."""
        if point is None:
            return self._corners.get("top_left")
        self._corners["top_left"] = _point_value(point, lon, as_pair=True)
        return self

    def bottom_right(self, point: Any = None, lon: Any = None) -> Any:
        if point is None:
            return self._corners.get("bottom_right")
        self._corners["bottom_right"] = _point_value(point, lon, as_pair=True)
        return self

    def type(self, bbox_type: str | None = None) -> Any:
        """Execution type: memory or indexed."""
        return self._enum_accessor(self._body, "type", bbox_type, _BBOX_TYPES)

    def normalize(self, normalize: bool | None = None) -> Any:
        return self._accessor(self._body, "normalize", normalize)
