"""GeoJSON source and sink.

read_geojson() loads the whole document and validates its outer shape up
front; each record is then validated with pydantic and converted only when it
is pulled. Polygon and MultiPolygon coordinates map straight onto rings, so
points come back out exactly as they went in apart from their order. Other
geometry kinds pass through shapely untouched. The writer streams a
FeatureCollection one feature at a time.
"""

from __future__ import annotations

import json
import logging
from collections.abc import Iterable, Iterator
from pathlib import Path
from typing import Any, Literal, TextIO

from pydantic import BaseModel, Field
from shapely.geometry import mapping, shape

from ringwise.features.base import Feature, IterableFeatureIterator
from ringwise.geometry.model import Geometry, MultiPolygon, Polygon, Ring
from ringwise.geometry.shapely_adapter import from_shapely, to_shapely

logger = logging.getLogger(__name__)


class GeoJSONFeature(BaseModel):
    type: Literal["Feature"] = "Feature"
    id: str | int | float | None = None
    geometry: dict[str, Any] | None = None
    properties: dict[str, Any] | None = Field(default_factory=dict)

    model_config = {"extra": "allow"}


class GeoJSONFeatureCollection(BaseModel):
    type: Literal["FeatureCollection"] = "FeatureCollection"
    features: list[dict[str, Any]] = Field(default_factory=list)
    bbox: list[float] | None = None

    model_config = {"extra": "allow"}


def _polygon_from_coords(rings: list[Any]) -> Polygon:
    if not rings:
        return Polygon()
    return Polygon(exterior=Ring(rings[0]), interiors=[Ring(hole) for hole in rings[1:]])


def _polygon_coords(polygon: Polygon) -> list[Any]:
    if polygon.exterior.is_empty and not polygon.interiors:
        return []
    return [ring.coords.tolist() for ring in polygon.rings]


def geometry_from_geojson(data: dict[str, Any]) -> Geometry:
    """Convert a GeoJSON geometry object. Ring arrays are taken over point for point."""
    kind = data.get("type")
    if kind == "Polygon":
        return _polygon_from_coords(data.get("coordinates") or [])
    if kind == "MultiPolygon":
        return MultiPolygon([_polygon_from_coords(part) for part in data.get("coordinates") or []])
    return from_shapely(shape(data))


def geometry_to_geojson(geometry: Geometry) -> dict[str, Any]:
    if isinstance(geometry, Polygon):
        return {"type": "Polygon", "coordinates": _polygon_coords(geometry)}
    if isinstance(geometry, MultiPolygon):
        return {"type": "MultiPolygon", "coordinates": [_polygon_coords(p) for p in geometry.geoms]}
    return mapping(to_shapely(geometry))


def feature_from_geojson(data: dict[str, Any]) -> Feature:
    record = GeoJSONFeature.model_validate(data)
    geometry = geometry_from_geojson(record.geometry) if record.geometry else None
    return Feature(
        id=record.id,
        geometry=geometry,
        properties=record.properties,
        members=dict(record.model_extra or {}),
    )


def feature_to_geojson(feature: Any) -> dict[str, Any]:
    geometry = getattr(feature, "geometry", None)
    out: dict[str, Any] = {"type": "Feature"}
    feature_id = getattr(feature, "id", None)
    if feature_id is not None:
        out["id"] = feature_id
    out["geometry"] = geometry_to_geojson(geometry) if geometry is not None else None
    out["properties"] = getattr(feature, "properties", None)
    for key, value in getattr(feature, "members", {}).items():
        out.setdefault(key, value)
    return out


class GeoJSONSource:
    """FeatureCollection over a parsed GeoJSON document."""

    def __init__(self, data: dict[str, Any]) -> None:
        if data.get("type") == "Feature":
            data = {"type": "FeatureCollection", "features": [data]}
        self._document = GeoJSONFeatureCollection.model_validate(data)

    def _records(self) -> Iterator[Feature]:
        for record in self._document.features:
            yield feature_from_geojson(record)

    def features(self) -> IterableFeatureIterator:
        return IterableFeatureIterator(self._records())

    def __iter__(self) -> IterableFeatureIterator:
        return self.features()

    def __len__(self) -> int:
        return len(self._document.features)

    def size(self) -> int:
        return len(self._document.features)

    def bounds(self) -> tuple[float, ...] | None:
        if self._document.bbox is None:
            return None
        return tuple(self._document.bbox)

    def members(self) -> dict[str, Any]:
        """Top-level document members other than type and features (bbox, crs, name, ...)."""
        out: dict[str, Any] = {}
        if self._document.bbox is not None:
            out["bbox"] = list(self._document.bbox)
        out.update(self._document.model_extra or {})
        return out


def read_geojson(path: str | Path) -> GeoJSONSource:
    """Load a GeoJSON Feature or FeatureCollection file. Records are converted lazily."""
    with open(path, "r", encoding="utf-8") as f:
        data = json.load(f)
    source = GeoJSONSource(data)
    logger.info("Loaded %s: %d features", path, source.size())
    return source


def write_geojson(
    features: Iterable[Any],
    fp: TextIO,
    indent: int | None = None,
    members: dict[str, Any] | None = None,
) -> int:
    """Stream features into fp as a FeatureCollection. Returns the number written.

    members are extra top-level members written ahead of the features.
    """
    fp.write('{"type": "FeatureCollection"')
    for key, value in (members or {}).items():
        if key in ("type", "features"):
            continue
        fp.write(f", {json.dumps(key)}: {json.dumps(value)}")
    fp.write(', "features": [')

    sep = ",\n" if indent is not None else ", "
    count = 0
    for feature in features:
        if count:
            fp.write(sep)
        fp.write(json.dumps(feature_to_geojson(feature), indent=indent))
        count += 1
    fp.write("]}\n")
    return count
