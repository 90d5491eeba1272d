"""Exact ring orientation.

orientation_index() decides the turn of an ordered point triple without any
epsilon: a floating-point determinant answers whenever its magnitude clears a
conservative error bound, and the remaining near-collinear cases are settled
with exact rational arithmetic (every finite float is an exact Fraction).

is_ccw() finds the highest vertex of a closed ring and inspects the turn made
there, which is robust to rings with repeated or collinear points.
"""

from __future__ import annotations

import math
from fractions import Fraction
from typing import Sequence

import numpy as np
from numpy.typing import NDArray

from ringwise.geometry.model import Ring, equals_2d

COUNTERCLOCKWISE = 1
CLOCKWISE = -1
COLLINEAR = 0

# Relative error bound for the float determinant filter.
_DP_SAFE_EPSILON = 1e-15


def _sign(value: float) -> int:
    return (value > 0) - (value < 0)


def _orientation_filter(ax: float, ay: float, bx: float, by: float, cx: float, cy: float) -> int | None:
    """Sign of the determinant when floating point is trustworthy, else None."""
    det_left = (ax - cx) * (by - cy)
    det_right = (ay - cy) * (bx - cx)
    det = det_left - det_right

    if det_left > 0.0:
        if det_right <= 0.0:
            return _sign(det)
        det_sum = det_left + det_right
    elif det_left < 0.0:
        if det_right >= 0.0:
            return _sign(det)
        det_sum = -det_left - det_right
    else:
        return _sign(det)

    err_bound = _DP_SAFE_EPSILON * det_sum
    if det >= err_bound or -det >= err_bound:
        return _sign(det)
    if not math.isfinite(det_sum):
        # overflow
        return _sign(det)
    return None


def _orientation_exact(ax: float, ay: float, bx: float, by: float, cx: float, cy: float) -> int:
    fax, fay = Fraction(ax), Fraction(ay)
    fbx, fby = Fraction(bx), Fraction(by)
    fcx, fcy = Fraction(cx), Fraction(cy)
    det = (fax - fcx) * (fby - fcy) - (fay - fcy) * (fbx - fcx)
    return _sign(det)


def orientation_index(p: Sequence[float], q: Sequence[float], r: Sequence[float]) -> int:
    """Turn made by r relative to the directed segment p -> q.

    Returns:
        1: r is to the left (p, q, r counter-clockwise)
        -1: r is to the right (clockwise)
        0: the three points are collinear
    """
    ax, ay = float(p[0]), float(p[1])
    bx, by = float(q[0]), float(q[1])
    cx, cy = float(r[0]), float(r[1])

    fast = _orientation_filter(ax, ay, bx, by, cx, cy)
    if fast is not None:
        return fast
    return _orientation_exact(ax, ay, bx, by, cx, cy)


def is_ccw(ring: Ring | NDArray[np.float64]) -> bool:
    """True if a closed ring is wound counter-clockwise.

    Rings with fewer than three distinct vertices, and rings whose highest
    vertex sits in an A-B-A (doubled back) configuration, report False.
    """
    coords = ring.coords if isinstance(ring, Ring) else np.asarray(ring, dtype=np.float64)

    # number of points without the closing endpoint
    n_pts = len(coords) - 1
    if n_pts < 3:
        return False

    # highest point, first occurrence on ties
    hi_index = 0
    hi_y = coords[0, 1]
    for i in range(1, n_pts):
        if coords[i, 1] > hi_y:
            hi_y = coords[i, 1]
            hi_index = i
    hi_pt = coords[hi_index]

    # distinct point before the highest point
    i_prev = hi_index
    while True:
        i_prev -= 1
        if i_prev < 0:
            i_prev = n_pts
        if not (equals_2d(coords[i_prev], hi_pt) and i_prev != hi_index):
            break

    # distinct point after the highest point
    i_next = hi_index
    while True:
        i_next = (i_next + 1) % n_pts
        if not (equals_2d(coords[i_next], hi_pt) and i_next != hi_index):
            break

    prev_pt = coords[i_prev]
    next_pt = coords[i_next]

    # A-B-A: fewer than 3 distinct points, or coincident segments at the apex
    if equals_2d(prev_pt, hi_pt) or equals_2d(next_pt, hi_pt) or equals_2d(prev_pt, next_pt):
        return False

    disc = orientation_index(prev_pt, hi_pt, next_pt)
    if disc == COLLINEAR:
        # flat top: prev to the right of next means counter-clockwise
        return bool(prev_pt[0] > next_pt[0])
    return disc == COUNTERCLOCKWISE
