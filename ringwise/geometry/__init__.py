"""Mutable polygon model, exact orientation and in-place rewinding."""

from ringwise.geometry.model import (
    Geometry,
    MultiPolygon,
    OtherGeometry,
    Polygon,
    Ring,
    geometry_bounds,
)
from ringwise.geometry.orientation import is_ccw, orientation_index
from ringwise.geometry.rewind import fix_winding, reverse_ring

__all__ = [
    "Geometry",
    "MultiPolygon",
    "OtherGeometry",
    "Polygon",
    "Ring",
    "geometry_bounds",
    "is_ccw",
    "orientation_index",
    "fix_winding",
    "reverse_ring",
]
