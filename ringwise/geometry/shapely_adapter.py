"""Shapely interop.

Shapely geometries are immutable, so polygonal input is copied into the mutable
model (fresh, writeable numpy arrays) and rebuilt on the way out. Point order
is preserved exactly in both directions.
"""

from __future__ import annotations

from typing import Any

import numpy as np
from shapely.geometry import MultiPolygon as ShapelyMultiPolygon
from shapely.geometry import Polygon as ShapelyPolygon
from shapely.geometry.base import BaseGeometry

from ringwise.geometry.model import Geometry, MultiPolygon, OtherGeometry, Polygon, Ring


def _ring_from_shapely(ring: Any) -> Ring:
    return Ring(np.array(ring.coords, dtype=np.float64))


def from_shapely(geom: BaseGeometry) -> Geometry:
    if isinstance(geom, ShapelyPolygon):
        if geom.is_empty:
            return Polygon()
        return Polygon(
            exterior=_ring_from_shapely(geom.exterior),
            interiors=[_ring_from_shapely(hole) for hole in geom.interiors],
        )
    if isinstance(geom, ShapelyMultiPolygon):
        return MultiPolygon(geoms=[from_shapely(part) for part in geom.geoms])
    return OtherGeometry(kind=geom.geom_type, payload=geom)


def _polygon_to_shapely(polygon: Polygon) -> ShapelyPolygon:
    if polygon.exterior.is_empty:
        return ShapelyPolygon()
    return ShapelyPolygon(
        shell=polygon.exterior.coords,
        holes=[hole.coords for hole in polygon.interiors],
    )


def to_shapely(geometry: Geometry) -> BaseGeometry:
    if isinstance(geometry, Polygon):
        return _polygon_to_shapely(geometry)
    if isinstance(geometry, MultiPolygon):
        parts = [to_shapely(member) for member in geometry.geoms]
        return ShapelyMultiPolygon([p for p in parts if not p.is_empty])
    if isinstance(geometry, OtherGeometry):
        return geometry.payload
    raise TypeError(f"Unsupported geometry type: {type(geometry).__name__}")
