"""Named transforms and resolution of caller-supplied bindings."""

from __future__ import annotations

import importlib
import logging
from typing import Callable

from pathdrift.errors import InvalidArgument
from pathdrift.harness.harness import Transform

from .reference import reference_transform, simulated_defect_transform
from .workarounds import CacheFirstRead, CopyBeforeConvert

logger = logging.getLogger(__name__)

# name -> (factory, description). Factories build a fresh transform per suite.
TRANSFORMS: dict[str, tuple[Callable[[], Transform], str]] = {
    "reference": (
        lambda: reference_transform,
        "Correct conversion; never mutates its input",
    ),
    "simulated_defect": (
        lambda: simulated_defect_transform,
        "Mutates rounded-rect and explicit-element paths in place",
    ),
    "copy_before_convert": (
        lambda: CopyBeforeConvert(simulated_defect_transform),
        "Defect wrapped so each read converts a fresh copy",
    ),
    "cache_first_read": (
        lambda: CacheFirstRead(simulated_defect_transform),
        "Defect wrapped so each path is converted once and replayed",
    ),
}


def resolve_transform(name: str) -> Transform:
    """Resolve a registered name or a ``module:attribute`` import path."""
    if name in TRANSFORMS:
        factory, _ = TRANSFORMS[name]
        return factory()

    if ":" not in name:
        raise InvalidArgument(
            f"Unknown transform '{name}'. Registered: {', '.join(sorted(TRANSFORMS))}"
        )

    module_name, _, attr = name.partition(":")
    try:
        module = importlib.import_module(module_name)
    except ImportError as e:
        raise InvalidArgument(f"Cannot import transform module '{module_name}': {e}") from e
    try:
        target = getattr(module, attr)
    except AttributeError as e:
        raise InvalidArgument(f"Module '{module_name}' has no attribute '{attr}'") from e

    if isinstance(target, type):
        target = target()
    if not callable(target):
        raise InvalidArgument(f"Transform '{name}' is not callable")
    logger.debug("Resolved custom transform %s", name)
    return target
