"""Report generation orchestration."""

from __future__ import annotations

import logging
from pathlib import Path

from pathdrift.models.config import HarnessConfig
from pathdrift.models.result import SuiteResult

from .json_report import generate_json_report
from .regression_detector import Regression, detect_regressions
from .text_report import generate_text_report

logger = logging.getLogger(__name__)


class Reporter:
    """Generates reports from suite results."""

    def __init__(self, config: HarnessConfig):
        self.config = config

    def generate_reports(
        self,
        suite_result: SuiteResult,
        previous: SuiteResult | None = None,
        output_dir: Path | None = None,
    ) -> dict[str, str]:
        """Generate all configured report formats. Returns format -> file path."""
        out_dir = output_dir or Path(self.config.report_output_dir)
        out_dir.mkdir(parents=True, exist_ok=True)
        generated = {}
        logger.debug("Report output directory: %s", out_dir)

        regressions: list[Regression] = []
        if previous:
            logger.debug("Detecting regressions against suite %s...", previous.suite_id)
            regressions = detect_regressions(previous, suite_result)

        if "text" in self.config.report_formats:
            path = out_dir / f"report_{suite_result.suite_id}.tsv"
            generate_text_report(suite_result, path)
            generated["text"] = str(path)
            logger.info("Text report: %s", path)

        if "json" in self.config.report_formats:
            path = out_dir / f"report_{suite_result.suite_id}.json"
            generate_json_report(suite_result, regressions, path)
            generated["json"] = str(path)
            logger.info("JSON report: %s", path)

        return generated

    @staticmethod
    def summarize(suite_result: SuiteResult) -> str:
        parts = [
            f"Transform '{suite_result.transform_name}': {suite_result.total} fixtures.",
            f"{suite_result.matches_correct} correct, {suite_result.matches_buggy} buggy, "
            f"{suite_result.unmodeled} unmodeled, {suite_result.errors} errors.",
        ]
        failing = [r.fixture_id for r in suite_result.results if not r.ok]
        if failing:
            parts.append(f"Not correct: {', '.join(failing[:5])}")
        return " ".join(parts)
