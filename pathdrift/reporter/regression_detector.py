"""Regression detection: compares suite results to find fixtures that stopped conforming."""

from __future__ import annotations

import json
import logging
from dataclasses import dataclass
from pathlib import Path

from pydantic import ValidationError

from pathdrift.errors import InvalidArgument
from pathdrift.models.result import Classification, SuiteResult

logger = logging.getLogger(__name__)


@dataclass
class Regression:
    fixture_id: str
    path_kind: str
    previous_status: str
    current_status: str
    error: str | None = None


def detect_regressions(previous: SuiteResult, current: SuiteResult) -> list[Regression]:
    """Find fixtures that matched the correct hypothesis before and no longer do.

    Fixtures are matched by id; ids missing from either run are ignored.
    """
    prev_by_id = {r.fixture_id: r for r in previous.results}

    regressions = []
    for result in current.results:
        prev = prev_by_id.get(result.fixture_id)
        if prev is None:
            continue
        if prev.classification == Classification.MATCHES_CORRECT and not result.ok:
            regressions.append(Regression(
                fixture_id=result.fixture_id,
                path_kind=result.path_kind.value,
                previous_status=prev.status,
                current_status=result.status,
                error=result.error,
            ))

    if regressions:
        logger.warning("Detected %d regressions", len(regressions))
    return regressions


def load_suite_result(path: str | Path) -> SuiteResult:
    """Load a suite result from a JSON report written by ``generate_json_report``."""
    path = Path(path)
    if not path.exists():
        raise FileNotFoundError(f"Previous report not found: {path}")
    with open(path) as f:
        try:
            data = json.load(f)
        except json.JSONDecodeError as e:
            raise InvalidArgument(f"{path}: not valid JSON: {e}") from e
    if not isinstance(data, dict):
        raise InvalidArgument(f"{path}: expected a JSON report object")
    data.pop("regressions", None)
    data.pop("all_correct", None)
    try:
        return SuiteResult(**data)
    except ValidationError as e:
        raise InvalidArgument(f"{path}: not a suite report: {e}") from e
