"""Feature records and the minimal iterator / collection capability set.

A feature is anything with an optional ``geometry`` attribute. Iterators follow
a has_next / next / close contract; exhaustion is signalled with StopIteration,
the same way Python's own iterators do it.
"""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from dataclasses import dataclass, field
from typing import Any, Protocol, runtime_checkable

from ringwise.geometry.model import Bounds, Geometry, merge_bounds, geometry_bounds


@dataclass(eq=False)
class Feature:
    """A feature with an optional geometry.

    properties may be None (a GeoJSON null). members holds any other top-level
    record members (bbox, foreign members) so they can be written back.
    """

    id: str | int | float | None = None
    geometry: Geometry | None = None
    properties: dict[str, Any] | None = field(default_factory=dict)
    members: dict[str, Any] = field(default_factory=dict)


@runtime_checkable
class FeatureIterator(Protocol):
    def has_next(self) -> bool: ...

    def next(self) -> Any: ...

    def close(self) -> None: ...


@runtime_checkable
class FeatureCollection(Protocol):
    def features(self) -> FeatureIterator: ...


_MISSING = object()


class IterableFeatureIterator:
    """FeatureIterator over any Python iterable.

    has_next() has to look one item ahead; nothing is pulled from the source
    until a caller asks.
    """

    def __init__(self, source: Iterable[Any]) -> None:
        self._iterator: Iterator[Any] = iter(source)
        self._peeked: Any = _MISSING
        self._closed = False

    def has_next(self) -> bool:
        if self._peeked is _MISSING:
            try:
                self._peeked = next(self._iterator)
            except StopIteration:
                return False
        return True

    def next(self) -> Any:
        if self._peeked is not _MISSING:
            item, self._peeked = self._peeked, _MISSING
            return item
        return next(self._iterator)

    def close(self) -> None:
        if self._closed:
            return
        self._closed = True
        self._peeked = _MISSING
        close = getattr(self._iterator, "close", None)
        if close is not None:
            close()

    def __iter__(self) -> IterableFeatureIterator:
        return self

    def __next__(self) -> Any:
        return self.next()


def as_feature_iterator(source: Any) -> FeatureIterator:
    """Return source if it already is a FeatureIterator, otherwise wrap it."""
    if isinstance(source, FeatureIterator):
        return source
    return IterableFeatureIterator(source)


class ListFeatureCollection:
    """In-memory feature collection."""

    def __init__(
        self,
        features: Iterable[Any] = (),
        *,
        id: str | None = None,
        schema: Any = None,
    ) -> None:
        self._features = list(features)
        self.id = id
        self.schema = schema

    def features(self) -> IterableFeatureIterator:
        return IterableFeatureIterator(self._features)

    def __iter__(self) -> IterableFeatureIterator:
        return self.features()

    def __len__(self) -> int:
        return len(self._features)

    def size(self) -> int:
        return len(self._features)

    def is_empty(self) -> bool:
        return not self._features

    def bounds(self) -> Bounds | None:
        result = None
        for feature in self._features:
            result = merge_bounds(result, geometry_bounds(getattr(feature, "geometry", None)))
        return result
