"""Feature streams and the winding-normalizing decorators over them."""

from ringwise.features.base import (
    Feature,
    FeatureCollection,
    FeatureIterator,
    IterableFeatureIterator,
    ListFeatureCollection,
    as_feature_iterator,
)
from ringwise.features.normalizing import (
    IteratorState,
    NormalizingFeatureCollection,
    NormalizingFeatureIterator,
)

__all__ = [
    "Feature",
    "FeatureCollection",
    "FeatureIterator",
    "IterableFeatureIterator",
    "ListFeatureCollection",
    "as_feature_iterator",
    "IteratorState",
    "NormalizingFeatureCollection",
    "NormalizingFeatureIterator",
]
