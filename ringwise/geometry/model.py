"""Mutable geometry model — rings own numpy coordinate arrays that can be rewound in place.

Geometry is a closed union: Polygon, MultiPolygon, or OtherGeometry (everything
the winding fixer leaves alone). No engine imports.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Union

import numpy as np
from numpy.typing import ArrayLike, NDArray

Point = tuple[float, float]
Bounds = tuple[float, float, float, float]


def equals_2d(a: NDArray[np.float64], b: NDArray[np.float64]) -> bool:
    """Exact x/y equality; extra ordinates are ignored."""
    return bool(a[0] == b[0] and a[1] == b[1])


@dataclass(eq=False)
class Ring:
    """Closed sequence of points stored as an (N, D) float64 array, D >= 2."""

    coords: NDArray[np.float64] = field(default_factory=lambda: np.empty((0, 2)))

    def __post_init__(self) -> None:
        coords = np.array(self.coords, dtype=np.float64)
        if coords.size == 0:
            coords = coords.reshape((0, 2))
        if coords.ndim != 2 or coords.shape[1] < 2:
            raise ValueError(f"ring coordinates must be an Nx2 (or NxD) array, got shape {coords.shape}")
        self.coords = coords

    def __len__(self) -> int:
        return len(self.coords)

    def point(self, index: int) -> Point:
        return (float(self.coords[index, 0]), float(self.coords[index, 1]))

    def points(self) -> list[Point]:
        return [self.point(i) for i in range(len(self.coords))]

    @property
    def is_empty(self) -> bool:
        return len(self.coords) == 0

    @property
    def is_closed(self) -> bool:
        if self.is_empty:
            return False
        return equals_2d(self.coords[0], self.coords[-1])

    @property
    def bounds(self) -> Bounds | None:
        if self.is_empty:
            return None
        xy = self.coords[:, :2]
        return (
            float(np.min(xy[:, 0])),
            float(np.min(xy[:, 1])),
            float(np.max(xy[:, 0])),
            float(np.max(xy[:, 1])),
        )


@dataclass(eq=False)
class Polygon:
    exterior: Ring = field(default_factory=Ring)
    interiors: list[Ring] = field(default_factory=list)

    @classmethod
    def from_coords(cls, shell: ArrayLike, holes: list[ArrayLike] | None = None) -> Polygon:
        return cls(Ring(shell), [Ring(h) for h in holes or []])

    @property
    def rings(self) -> list[Ring]:
        return [self.exterior, *self.interiors]


@dataclass(eq=False)
class MultiPolygon:
    geoms: list[Geometry] = field(default_factory=list)


@dataclass(eq=False)
class OtherGeometry:
    """Any geometry kind the winding fixer passes through untouched."""

    kind: str
    payload: Any = None


Geometry = Union[Polygon, MultiPolygon, OtherGeometry]


def merge_bounds(a: Bounds | None, b: Bounds | None) -> Bounds | None:
    if a is None:
        return b
    if b is None:
        return a
    return (min(a[0], b[0]), min(a[1], b[1]), max(a[2], b[2]), max(a[3], b[3]))


def geometry_bounds(geometry: Geometry | None) -> Bounds | None:
    """Compute (minx, miny, maxx, maxy), or None for empty/unknown geometry."""
    if geometry is None:
        return None
    if isinstance(geometry, Polygon):
        result = None
        for ring in geometry.rings:
            result = merge_bounds(result, ring.bounds)
        return result
    if isinstance(geometry, MultiPolygon):
        result = None
        for member in geometry.geoms:
            result = merge_bounds(result, geometry_bounds(member))
        return result
    payload_bounds = getattr(getattr(geometry, "payload", None), "bounds", None)
    if payload_bounds is None or len(payload_bounds) != 4:
        return None
    if any(np.isnan(v) for v in payload_bounds):
        return None
    return tuple(float(v) for v in payload_bounds)
