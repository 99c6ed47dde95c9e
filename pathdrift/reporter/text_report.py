"""Tab-separated text report, one line per fixture."""

from __future__ import annotations

from pathlib import Path

from pathdrift.models.result import SuiteResult

HEADER = "fixture_id\tpath_kind\tread_count\tclassification"


def render_text_report(suite_result: SuiteResult, header: bool = True) -> str:
    lines = [HEADER] if header else []
    for r in suite_result.results:
        lines.append(f"{r.fixture_id}\t{r.path_kind.value}\t{r.read_count}\t{r.status}")
    return "\n".join(lines) + "\n"


def generate_text_report(suite_result: SuiteResult, output_path: Path) -> None:
    with open(output_path, "w") as f:
        f.write(render_text_report(suite_result))
