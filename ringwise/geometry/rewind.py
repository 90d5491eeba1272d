"""Ring rewinding — exterior rings clockwise, holes flipped along with them."""

from __future__ import annotations

from ringwise.geometry.model import Geometry, MultiPolygon, Polygon, Ring
from ringwise.geometry.orientation import is_ccw


def reverse_ring(ring: Ring) -> bool:
    """Reverse a closed ring's point order in place. Returns False (untouched) for open or empty rings."""
    if len(ring) > 0 and ring.is_closed:
        coords = ring.coords
        coords[:] = coords[::-1].copy()
        return True
    return False


def fix_winding(geometry: Geometry) -> bool:
    """Rewind polygon rings in place so exteriors are clockwise.

    When an exterior ring has to be reversed every interior ring of that
    polygon is reversed too, without testing the holes on their own. Members
    of a multi-polygon are all visited. Any other geometry kind is left alone.

    Returns True if any ring changed.
    """
    changed = False

    if isinstance(geometry, Polygon):
        if is_ccw(geometry.exterior):
            changed |= reverse_ring(geometry.exterior)
            for hole in geometry.interiors:
                changed |= reverse_ring(hole)
    elif isinstance(geometry, MultiPolygon):
        for member in geometry.geoms:
            changed |= fix_winding(member)

    return changed
