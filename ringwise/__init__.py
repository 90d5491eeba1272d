"""ringwise — streaming polygon winding normalizer."""

from ringwise.features.normalizing import NormalizingFeatureCollection, NormalizingFeatureIterator
from ringwise.geometry.orientation import is_ccw
from ringwise.geometry.rewind import fix_winding, reverse_ring

__version__ = "0.1.0"

__all__ = [
    "NormalizingFeatureCollection",
    "NormalizingFeatureIterator",
    "is_ccw",
    "fix_winding",
    "reverse_ring",
]
