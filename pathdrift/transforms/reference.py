"""Built-in transforms: the correct conversion and a simulation of the defect."""

from __future__ import annotations

import logging

from pathdrift.drift.drift_model import is_drift_prone, screen_offset
from pathdrift.models.geometry import Rect
from pathdrift.models.path import PathInput

logger = logging.getLogger(__name__)


def reference_transform(path: PathInput, view_frame: Rect) -> Rect:
    """Convert to screen coordinates without touching the input path."""
    return path.bounds.offset_by(screen_offset(view_frame))


def simulated_defect_transform(path: PathInput, view_frame: Rect) -> Rect:
    """Reproduce the observed defect.

    Drift-prone paths are translated in place and the mutated bounds are
    returned, so every read of the same path adds the offset once more.
    Rect, oval and arc paths convert into a fresh copy.
    """
    offset = screen_offset(view_frame)
    if not is_drift_prone(path.kind):
        return path.bounds.offset_by(offset)
    path.translate(offset.x, offset.y)
    logger.debug("Mutated %r in place (mutation #%d)", path, path.mutation_count)
    return path.bounds
