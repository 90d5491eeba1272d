"""Tests for the mutable geometry model and shapely interop."""

import numpy as np
import pytest
from shapely.geometry import LineString, Point
from shapely.geometry import MultiPolygon as ShapelyMultiPolygon
from shapely.geometry import Polygon as ShapelyPolygon

from ringwise.geometry.model import (
    MultiPolygon,
    OtherGeometry,
    Polygon,
    Ring,
    geometry_bounds,
)
from ringwise.geometry.rewind import fix_winding
from ringwise.geometry.shapely_adapter import from_shapely, to_shapely
from tests.conftest import CCW_BIG_SQUARE, CCW_SQUARE, CW_HOLE


def test_ring_copies_input():
    source = np.array(CCW_SQUARE)
    ring = Ring(source)
    ring.coords[0, 0] = 99.0
    assert source[0, 0] == 0.0


def test_ring_rejects_bad_shape():
    with pytest.raises(ValueError):
        Ring([1.0, 2.0, 3.0])
    with pytest.raises(ValueError):
        Ring([[1.0], [2.0]])


def test_ring_closed():
    assert Ring(CCW_SQUARE).is_closed
    assert not Ring(CCW_SQUARE[:-1]).is_closed
    assert not Ring().is_closed


def test_polygon_rings_do_not_alias():
    polygon = Polygon.from_coords(CCW_SQUARE, [CCW_SQUARE])
    assert polygon.exterior.coords is not polygon.interiors[0].coords


def test_geometry_bounds():
    polygon = Polygon.from_coords(CCW_BIG_SQUARE, [CW_HOLE])
    assert geometry_bounds(polygon) == (0.0, 0.0, 10.0, 10.0)

    multi = MultiPolygon(geoms=[polygon, Polygon.from_coords([(x + 20.0, y) for x, y in CCW_SQUARE])])
    assert geometry_bounds(multi) == (0.0, 0.0, 21.0, 10.0)

    assert geometry_bounds(OtherGeometry("Point", Point(3.0, 4.0))) == (3.0, 4.0, 3.0, 4.0)
    assert geometry_bounds(OtherGeometry("Unknown", object())) is None
    assert geometry_bounds(None) is None
    assert geometry_bounds(Polygon()) is None


def test_from_shapely_polygon_keeps_order_and_is_writeable():
    shp = ShapelyPolygon(CCW_BIG_SQUARE, [CW_HOLE])
    polygon = from_shapely(shp)
    assert isinstance(polygon, Polygon)
    assert polygon.exterior.points() == CCW_BIG_SQUARE
    assert polygon.interiors[0].points() == CW_HOLE
    assert polygon.exterior.coords.flags.writeable


def test_rewound_polygon_round_trips_through_shapely():
    shp = ShapelyPolygon(CCW_BIG_SQUARE, [CW_HOLE])
    polygon = from_shapely(shp)
    fix_winding(polygon)
    out = to_shapely(polygon)
    assert not out.exterior.is_ccw
    assert out.interiors[0].is_ccw
    assert out.equals(shp)
    # the source shapely geometry is immutable and keeps its original order
    assert shp.exterior.is_ccw


def test_from_shapely_multipolygon():
    shp = ShapelyMultiPolygon([ShapelyPolygon(CCW_SQUARE), ShapelyPolygon(CCW_BIG_SQUARE)])
    multi = from_shapely(shp)
    assert isinstance(multi, MultiPolygon)
    assert len(multi.geoms) == 2
    assert all(isinstance(g, Polygon) for g in multi.geoms)
    assert isinstance(to_shapely(multi), ShapelyMultiPolygon)


def test_other_kinds_keep_their_payload():
    line = LineString([(0, 0), (1, 1)])
    other = from_shapely(line)
    assert isinstance(other, OtherGeometry)
    assert other.kind == "LineString"
    assert to_shapely(other) is line


def test_empty_polygon_round_trip():
    polygon = from_shapely(ShapelyPolygon())
    assert polygon.exterior.is_empty
    assert to_shapely(polygon).is_empty


def test_to_shapely_rejects_unknown():
    with pytest.raises(TypeError):
        to_shapely(object())
