"""Suite orchestrator: coordinates fixture loading, harness run and reporting."""

from __future__ import annotations

import logging
import time
from pathlib import Path

from pathdrift.fixtures.catalog import default_fixtures, load_fixtures
from pathdrift.harness.harness import ConformanceHarness
from pathdrift.models.config import HarnessConfig
from pathdrift.models.fixture import Fixture
from pathdrift.models.result import SuiteResult
from pathdrift.reporter.regression_detector import detect_regressions, load_suite_result
from pathdrift.reporter.reporter import Reporter
from pathdrift.transforms.registry import resolve_transform

logger = logging.getLogger(__name__)


class Orchestrator:
    """Runs the configured transform over the configured fixtures."""

    def __init__(self, config: HarnessConfig):
        self.config = config
        self.harness = ConformanceHarness(tolerance=config.tolerance)
        self.reporter = Reporter(config)

    def load_fixtures(self) -> list[Fixture]:
        if self.config.fixtures_file:
            logger.info("Loading fixtures from %s", self.config.fixtures_file)
            return load_fixtures(self.config.fixtures_file)
        return default_fixtures()

    def run_suite(self) -> SuiteResult:
        fixtures = self.load_fixtures()
        transform = resolve_transform(self.config.transform)
        return self.harness.run_suite(fixtures, transform, transform_name=self.config.transform)

    def run(self, previous_report: str | Path | None = None) -> dict:
        """Run the suite, write reports and return a summary."""
        start = time.time()
        previous = load_suite_result(previous_report) if previous_report else None

        suite = self.run_suite()
        reports = self.reporter.generate_reports(suite, previous=previous)
        regressions = detect_regressions(previous, suite) if previous else []

        duration = round(time.time() - start, 2)
        logger.info("=== Suite %s complete in %.2fs ===", suite.suite_id, duration)
        summary = self.reporter.summarize(suite)
        logger.info("%s", summary)
        return {
            "suite_id": suite.suite_id,
            "transform": suite.transform_name,
            "duration": duration,
            "results": {
                "total": suite.total,
                "matches_correct": suite.matches_correct,
                "matches_buggy": suite.matches_buggy,
                "unmodeled": suite.unmodeled,
                "errors": suite.errors,
            },
            "regressions": [r.fixture_id for r in regressions],
            "summary": summary,
            "reports": reports,
            "all_correct": suite.all_correct,
            "suite": suite,
        }
