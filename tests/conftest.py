"""Shared test fixtures."""

from __future__ import annotations

import pytest

from ringwise.features.base import Feature
from ringwise.geometry.model import MultiPolygon, OtherGeometry, Polygon


# Rings are listed in y-up coordinates: CCW means a left turn at every corner.

CCW_SQUARE = [(0.0, 0.0), (1.0, 0.0), (1.0, 1.0), (0.0, 1.0), (0.0, 0.0)]
CW_SQUARE = [(0.0, 0.0), (0.0, 1.0), (1.0, 1.0), (1.0, 0.0), (0.0, 0.0)]

CCW_BIG_SQUARE = [(0.0, 0.0), (10.0, 0.0), (10.0, 10.0), (0.0, 10.0), (0.0, 0.0)]
CW_BIG_SQUARE = [(0.0, 0.0), (0.0, 10.0), (10.0, 10.0), (10.0, 0.0), (0.0, 0.0)]

# Holes inside the big square
CW_HOLE = [(2.0, 2.0), (2.0, 4.0), (4.0, 4.0), (4.0, 2.0), (2.0, 2.0)]
CCW_HOLE = [(6.0, 6.0), (8.0, 6.0), (8.0, 8.0), (6.0, 8.0), (6.0, 6.0)]

# Highest vertex sits mid-way along a horizontal top edge: the apex turn is collinear
CCW_FLAT_TOP = [(1.0, 2.0), (0.0, 2.0), (0.0, 0.0), (2.0, 0.0), (2.0, 2.0), (1.0, 2.0)]
CW_FLAT_TOP = CCW_FLAT_TOP[::-1]

# Only two distinct vertices plus the closing repeat
DEGENERATE_RING = [(0.0, 0.0), (1.0, 1.0), (0.0, 0.0)]

GEOJSON_COLLECTION = {
    "type": "FeatureCollection",
    "bbox": [0.0, 0.0, 20.0, 10.0],
    "features": [
        {
            "type": "Feature",
            "id": "ccw",
            "geometry": {"type": "Polygon", "coordinates": [CCW_BIG_SQUARE, CW_HOLE]},
            "properties": {"name": "needs rewinding"},
        },
        {
            "type": "Feature",
            "id": "cw",
            "geometry": {"type": "Polygon", "coordinates": [CW_BIG_SQUARE]},
            "properties": {"name": "already clockwise"},
        },
        {
            "type": "Feature",
            "id": "point",
            "geometry": {"type": "Point", "coordinates": [15.0, 5.0]},
            "properties": {"name": "a point"},
        },
        {
            "type": "Feature",
            "id": "none",
            "geometry": None,
            "properties": {"name": "no geometry"},
        },
    ],
}


@pytest.fixture
def ccw_polygon() -> Polygon:
    return Polygon.from_coords(CCW_BIG_SQUARE, [CW_HOLE])


@pytest.fixture
def cw_polygon() -> Polygon:
    return Polygon.from_coords(CW_BIG_SQUARE, [CCW_HOLE])


@pytest.fixture
def mixed_multipolygon() -> MultiPolygon:
    return MultiPolygon(
        geoms=[
            Polygon.from_coords(CW_SQUARE),
            Polygon.from_coords([(x + 5.0, y) for x, y in CCW_SQUARE]),
        ]
    )


@pytest.fixture
def features() -> list[Feature]:
    return [
        Feature(id=1, geometry=Polygon.from_coords(CCW_BIG_SQUARE, [CW_HOLE]), properties={"n": 1}),
        Feature(id=2, geometry=Polygon.from_coords(CW_BIG_SQUARE), properties={"n": 2}),
        Feature(id=3, geometry=OtherGeometry(kind="Point", payload=(1.0, 2.0)), properties={"n": 3}),
        Feature(id=4, geometry=None, properties={"n": 4}),
    ]
