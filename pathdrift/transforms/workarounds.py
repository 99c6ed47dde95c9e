"""Caller-side workarounds wrapped around a (possibly defective) transform."""

from __future__ import annotations

import logging
import weakref

from pathdrift.harness.harness import Transform
from pathdrift.models.geometry import Rect
from pathdrift.models.path import PathInput

from .reference import simulated_defect_transform

logger = logging.getLogger(__name__)


class CopyBeforeConvert:
    """Hand the inner transform a fresh copy of the path on every read."""

    def __init__(self, inner: Transform = simulated_defect_transform):
        self.inner = inner

    def __call__(self, path: PathInput, view_frame: Rect) -> Rect:
        return self.inner(path.copy(), view_frame)


class CacheFirstRead:
    """Convert each path object once and replay that first result.

    The cache is keyed weakly on the path object, so nothing outlives the
    fixture run that created the path.
    """

    def __init__(self, inner: Transform = simulated_defect_transform):
        self.inner = inner
        self._cache: weakref.WeakKeyDictionary[PathInput, tuple[Rect, Rect]] = (
            weakref.WeakKeyDictionary()
        )

    def __call__(self, path: PathInput, view_frame: Rect) -> Rect:
        cached = self._cache.get(path)
        if cached is not None and cached[0] == view_frame:
            return cached[1]
        if cached is not None:
            logger.debug("View frame changed for %r, invalidating cached conversion", path)
        result = self.inner(path, view_frame)
        self._cache[path] = (view_frame, result)
        return result
