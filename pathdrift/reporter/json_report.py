"""JSON report output."""

from __future__ import annotations

import json
from pathlib import Path

from pathdrift.models.result import SuiteResult
from .regression_detector import Regression


def generate_json_report(
    suite_result: SuiteResult,
    regressions: list[Regression],
    output_path: Path,
) -> None:
    """Write a machine-readable JSON report."""
    report = suite_result.model_dump(mode="json")
    report["all_correct"] = suite_result.all_correct
    report["regressions"] = [
        {
            "fixture_id": r.fixture_id,
            "path_kind": r.path_kind,
            "previous_status": r.previous_status,
            "current_status": r.current_status,
            "error": r.error,
        }
        for r in regressions
    ]

    with open(output_path, "w") as f:
        json.dump(report, f, indent=2, default=str)
