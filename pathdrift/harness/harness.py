"""Conformance harness: drives a transform through fixtures and classifies it."""

from __future__ import annotations

import logging
import math
import time
import uuid
from typing import Any, Callable, Iterable

from pathdrift.drift.drift_model import hypotheses_coincide, predict_fixture
from pathdrift.errors import InvalidArgument, TransformInvocationError
from pathdrift.models.fixture import Fixture, Hypothesis
from pathdrift.models.geometry import Rect
from pathdrift.models.path import PathInput
from pathdrift.models.result import Classification, FixtureResult, SuiteResult

logger = logging.getLogger(__name__)

DEFAULT_TOLERANCE = 0.5

Transform = Callable[[PathInput, Rect], Any]


def sequences_match(observed: list[Rect], predicted: list[Rect], tolerance: float) -> bool:
    if len(observed) != len(predicted):
        return False
    return all(o.approx_equal(p, tolerance) for o, p in zip(observed, predicted))


def _as_rect(value: Any) -> Rect | None:
    if isinstance(value, Rect):
        return value
    bounds = getattr(value, "bounds", None)
    if isinstance(bounds, Rect):
        return bounds
    return None


class ConformanceHarness:
    """Classifies a transform against the correct and buggy hypotheses.

    Holds only its tolerance; every ``run`` starts from a fresh path object.
    """

    def __init__(self, tolerance: float = DEFAULT_TOLERANCE):
        if not math.isfinite(tolerance) or tolerance < 0:
            raise InvalidArgument(f"tolerance must be a finite value >= 0, got {tolerance}")
        self.tolerance = tolerance

    def run(self, fixture: Fixture, transform: Transform) -> FixtureResult:
        """Read ``fixture`` ``read_count`` times through ``transform`` and classify."""
        correct = predict_fixture(fixture, Hypothesis.CORRECT)
        buggy = predict_fixture(fixture, Hypothesis.BUGGY)
        discriminating = not hypotheses_coincide(fixture)

        try:
            observed = self._read_all(fixture, transform)
        except TransformInvocationError as e:
            logger.warning("Transform failed on %s: %s", fixture.fixture_id, e)
            return FixtureResult(
                fixture_id=fixture.fixture_id,
                path_kind=fixture.path_kind,
                read_count=fixture.read_count,
                classification=None,
                discriminating=discriminating,
                failed_read=e.read_index,
                error=str(e),
            )

        if sequences_match(observed, correct, self.tolerance):
            classification = Classification.MATCHES_CORRECT
        elif sequences_match(observed, buggy, self.tolerance):
            classification = Classification.MATCHES_BUGGY
        else:
            classification = Classification.UNMODELED
            logger.warning(
                "Fixture %s matches neither hypothesis: observed %s",
                fixture.fixture_id, ", ".join(r.describe() for r in observed),
            )

        logger.debug("[%s] %s (%s, %d reads)", classification.value,
                     fixture.fixture_id, fixture.path_kind.value, fixture.read_count)
        return FixtureResult(
            fixture_id=fixture.fixture_id,
            path_kind=fixture.path_kind,
            read_count=fixture.read_count,
            classification=classification,
            observed=observed,
            discriminating=discriminating,
        )

    def run_suite(
        self,
        fixtures: Iterable[Fixture],
        transform: Transform,
        transform_name: str = "custom",
    ) -> SuiteResult:
        """Run every fixture in order; one result per fixture, no short-circuit."""
        fixtures = list(fixtures)
        seen: set[str] = set()
        for fx in fixtures:
            if fx.fixture_id in seen:
                raise InvalidArgument(f"Duplicate fixture id: {fx.fixture_id}")
            seen.add(fx.fixture_id)

        started_at = time.strftime("%Y-%m-%dT%H:%M:%SZ", time.gmtime())
        logger.info("Running %d fixtures against transform '%s' (tolerance %g)",
                    len(fixtures), transform_name, self.tolerance)

        results = []
        for index, fx in enumerate(fixtures):
            result = self.run(fx, transform)
            logger.info("[%d/%d] %s: %s", index + 1, len(fixtures), fx.fixture_id, result.status)
            results.append(result)

        suite = SuiteResult(
            suite_id=f"suite_{uuid.uuid4().hex[:8]}",
            transform_name=transform_name,
            tolerance=self.tolerance,
            started_at=started_at,
            completed_at=time.strftime("%Y-%m-%dT%H:%M:%SZ", time.gmtime()),
            total=len(results),
            matches_correct=sum(1 for r in results if r.classification == Classification.MATCHES_CORRECT),
            matches_buggy=sum(1 for r in results if r.classification == Classification.MATCHES_BUGGY),
            unmodeled=sum(1 for r in results if r.classification == Classification.UNMODELED),
            errors=sum(1 for r in results if r.classification is None),
            results=results,
        )
        logger.info(
            "Suite complete: %d correct, %d buggy, %d unmodeled, %d errors",
            suite.matches_correct, suite.matches_buggy, suite.unmodeled, suite.errors,
        )
        return suite

    @staticmethod
    def _read_all(fixture: Fixture, transform: Transform) -> list[Rect]:
        path = fixture.make_path()
        observed: list[Rect] = []
        for read_index in range(1, fixture.read_count + 1):
            try:
                value = transform(path, fixture.view_frame)
            except Exception as e:
                raise TransformInvocationError(fixture.fixture_id, read_index, e) from e
            rect = _as_rect(value)
            if rect is None:
                raise TransformInvocationError(
                    fixture.fixture_id, read_index,
                    f"transform returned {type(value).__name__}, expected a Rect",
                )
            observed.append(rect)
        return observed
