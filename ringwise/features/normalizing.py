"""Winding-normalizing decorators over feature iterators and collections.

Usage:
    with NormalizingFeatureCollection(source).features() as it:
        for feature in it:
            ...  # polygon exteriors are clockwise by the time feature arrives

Each pull fetches exactly one feature from the wrapped iterator, rewinds its
geometry in place and hands the same object on. Nothing is read ahead or
buffered; exhaustion and errors from the wrapped iterator pass through as-is.
"""

from __future__ import annotations

import enum
import logging
from collections.abc import Callable
from typing import Any

from ringwise.features.base import FeatureIterator, as_feature_iterator
from ringwise.geometry.model import Geometry
from ringwise.geometry.rewind import fix_winding

logger = logging.getLogger(__name__)


class IteratorState(enum.Enum):
    READY = "ready"
    EXHAUSTED = "exhausted"
    FAILED = "failed"


class NormalizingFeatureIterator:
    """Decorates a FeatureIterator, rewinding each feature's geometry as it is pulled."""

    def __init__(
        self,
        delegate: Any,
        fixer: Callable[[Geometry], bool] = fix_winding,
    ) -> None:
        self._delegate: FeatureIterator = as_feature_iterator(delegate)
        self._fixer = fixer
        self._closed = False
        self.state = IteratorState.READY
        self.features_read = 0
        self.features_changed = 0

    @property
    def delegate(self) -> FeatureIterator:
        return self._delegate

    @property
    def closed(self) -> bool:
        return self._closed

    def _fail(self) -> None:
        self.state = IteratorState.FAILED

    def has_next(self) -> bool:
        try:
            result = self._delegate.has_next()
        except Exception:
            self._fail()
            raise
        if not result and self.state is not IteratorState.FAILED:
            self.state = IteratorState.EXHAUSTED
        return result

    def next(self) -> Any:
        try:
            feature = self._delegate.next()
        except StopIteration:
            if self.state is not IteratorState.FAILED:
                self.state = IteratorState.EXHAUSTED
            raise
        except Exception:
            self._fail()
            raise

        self.features_read += 1
        geometry = getattr(feature, "geometry", None)
        if geometry is not None and self._fixer(geometry):
            self.features_changed += 1
            logger.debug("Rewound rings of feature %r", getattr(feature, "id", None))
        return feature

    def close(self) -> None:
        if self._closed:
            return
        self._closed = True
        logger.debug(
            "Closing normalizing iterator: %d features read, %d rewound",
            self.features_read,
            self.features_changed,
        )
        try:
            self._delegate.close()
        except Exception:
            self._fail()
            raise

    def __iter__(self) -> NormalizingFeatureIterator:
        return self

    def __next__(self) -> Any:
        return self.next()

    def __enter__(self) -> NormalizingFeatureIterator:
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.close()


class NormalizingFeatureCollection:
    """Decorates a feature collection so every iterator it hands out rewinds polygons.

    Everything else (size, bounds, schema, ...) is forwarded to the wrapped
    collection untouched; rewinding changes neither counts nor extents.
    """

    def __init__(
        self,
        delegate: Any,
        fixer: Callable[[Geometry], bool] = fix_winding,
    ) -> None:
        self._delegate = delegate
        self._fixer = fixer

    @property
    def delegate(self) -> Any:
        return self._delegate

    def features(self) -> NormalizingFeatureIterator:
        factory = getattr(self._delegate, "features", None)
        source = factory() if callable(factory) else iter(self._delegate)
        return NormalizingFeatureIterator(source, fixer=self._fixer)

    def __iter__(self) -> NormalizingFeatureIterator:
        return self.features()

    def __len__(self) -> int:
        return len(self._delegate)

    def __getattr__(self, name: str) -> Any:
        # Only reached for attributes not defined here
        if name.startswith("__") or name in ("_delegate", "_fixer"):
            raise AttributeError(name)
        return getattr(self._delegate, name)
