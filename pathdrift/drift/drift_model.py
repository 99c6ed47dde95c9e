"""Drift model: predicted read sequences under the correct and buggy hypotheses.

The buggy law is a curve fit over observed reports, not a derivation:
for drift-prone path kinds, read ``k`` (1-indexed) of the same path returns
the local bounds translated by ``k`` times the view's screen offset. Every
other case translates by the offset exactly once.
"""

from __future__ import annotations

from pathdrift.errors import InvalidArgument
from pathdrift.models.fixture import DRIFT_PRONE_KINDS, Fixture, Hypothesis, PathKind
from pathdrift.models.geometry import Point, Rect


def screen_offset(view_frame: Rect) -> Point:
    """Offset of an unrotated, unscaled view placed directly under the root."""
    return view_frame.origin


def is_drift_prone(kind: PathKind | str) -> bool:
    return PathKind.parse(kind) in DRIFT_PRONE_KINDS


def predict_read(
    bounds: Rect,
    offset: Point,
    read_index: int,
    hypothesis: Hypothesis | str,
    kind: PathKind | str,
) -> Rect:
    """Predict the rect returned by read ``read_index`` (1-indexed)."""
    kind = PathKind.parse(kind)
    hypothesis = Hypothesis.parse(hypothesis)
    if read_index < 1:
        raise InvalidArgument(f"read_index must be >= 1, got {read_index}")

    if hypothesis == Hypothesis.BUGGY and kind in DRIFT_PRONE_KINDS:
        return bounds.offset_by(offset, times=read_index)
    return bounds.offset_by(offset)


def predict_sequence(
    bounds: Rect,
    offset: Point,
    read_count: int,
    hypothesis: Hypothesis | str,
    kind: PathKind | str,
) -> list[Rect]:
    kind = PathKind.parse(kind)
    hypothesis = Hypothesis.parse(hypothesis)
    if read_count < 0:
        raise InvalidArgument(f"read_count must be >= 0, got {read_count}")
    return [
        predict_read(bounds, offset, k, hypothesis, kind)
        for k in range(1, read_count + 1)
    ]


def predict_fixture(fixture: Fixture, hypothesis: Hypothesis | str) -> list[Rect]:
    """Predicted sequence for every read of ``fixture``."""
    return predict_sequence(
        fixture.path_local_bounds,
        screen_offset(fixture.view_frame),
        fixture.read_count,
        hypothesis,
        fixture.path_kind,
    )


def hypotheses_coincide(fixture: Fixture) -> bool:
    """True when no observation of ``fixture`` can tell the hypotheses apart."""
    if fixture.read_count <= 1:
        return True
    return not is_drift_prone(fixture.path_kind) or screen_offset(fixture.view_frame).is_zero


def undrift(rect: Rect, offset: Point, read_index: int) -> Rect:
    """Remove the extra ``read_index - 1`` offsets a buggy read accumulated."""
    if read_index < 1:
        raise InvalidArgument(f"read_index must be >= 1, got {read_index}")
    return rect.offset_by(offset, times=-(read_index - 1))
