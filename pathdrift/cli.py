"""CLI entry point for the path drift conformance harness."""

from __future__ import annotations

import logging
import sys
from pathlib import Path
from typing import NoReturn, Optional

import click
from pydantic import ValidationError
from rich.console import Console
from rich.logging import RichHandler
from rich.table import Table

from pathdrift.drift.drift_model import predict_sequence
from pathdrift.errors import InvalidArgument
from pathdrift.fixtures.catalog import default_fixtures, load_fixtures
from pathdrift.models.config import HarnessConfig
from pathdrift.models.fixture import Hypothesis, PathKind
from pathdrift.models.geometry import Point, Rect
from pathdrift.orchestrator import Orchestrator
from pathdrift.reporter.text_report import render_text_report
from pathdrift.transforms.registry import TRANSFORMS

console = Console()

DEFAULT_CONFIG = "drift-config.json"

STATUS_STYLES = {
    "matches_correct": "green",
    "matches_buggy": "red",
    "unmodeled": "yellow",
    "transform_error": "magenta",
}


def setup_logging(verbose: bool = False) -> None:
    level = logging.DEBUG if verbose else logging.INFO
    logging.basicConfig(
        level=level,
        format="%(message)s",
        datefmt="[%X]",
        handlers=[RichHandler(console=console, rich_tracebacks=True)],
    )


def _load_config(config: Optional[str]) -> HarnessConfig:
    if config is None:
        if Path(DEFAULT_CONFIG).exists():
            return HarnessConfig.load(DEFAULT_CONFIG)
        return HarnessConfig()
    return HarnessConfig.load(config)


def _fail(message: str) -> NoReturn:
    console.print(f"[red]{message}[/red]")
    sys.exit(2)


@click.group()
@click.option("--verbose", "-v", is_flag=True, help="Enable debug logging")
def cli(verbose: bool) -> None:
    """Black-box conformance harness for path coordinate drift"""
    setup_logging(verbose)


@cli.command()
@click.option("--config", "-c", default=None, help=f"Config file path (default: {DEFAULT_CONFIG} if present)")
@click.option("--transform", "-t", default=None, help="Registered transform name or module:attribute")
@click.option("--fixtures", "-f", "fixtures_file", default=None, help="Fixtures JSON file")
@click.option("--tolerance", type=float, default=None, help="Per-component comparison tolerance")
@click.option("--output-dir", "-o", default=None, help="Report output directory")
@click.option("--previous", "-p", default=None, help="Previous JSON report for regression detection")
def run(
    config: Optional[str],
    transform: Optional[str],
    fixtures_file: Optional[str],
    tolerance: Optional[float],
    output_dir: Optional[str],
    previous: Optional[str],
) -> None:
    """Classify a transform against every fixture. Exits 0 only if all match the correct hypothesis."""
    overrides = {
        "transform": transform,
        "fixtures_file": fixtures_file,
        "tolerance": tolerance,
        "report_output_dir": output_dir,
    }
    try:
        cfg = _load_config(config)
        cfg = HarnessConfig(**{**cfg.model_dump(), **{k: v for k, v in overrides.items() if v is not None}})
        results = Orchestrator(cfg).run(previous_report=previous)
    except (FileNotFoundError, InvalidArgument, ValidationError) as e:
        _fail(f"Invalid configuration: {e}")

    suite = results["suite"]
    click.echo(render_text_report(suite), nl=False)

    table = Table(title=f"Conformance: {suite.transform_name}")
    table.add_column("Fixture", style="bold")
    table.add_column("Kind")
    table.add_column("Reads", justify="right")
    table.add_column("Status")
    for r in suite.results:
        style = STATUS_STYLES.get(r.status, "white")
        status = f"[{style}]{r.status}[/{style}]"
        if not r.discriminating and r.classification is not None:
            status += " [dim](non-discriminating)[/dim]"
        table.add_row(r.fixture_id, r.path_kind.value, str(r.read_count), status)
    console.print(table)

    counts = results["results"]
    console.print(
        f"[green]{counts['matches_correct']} correct[/green], "
        f"[red]{counts['matches_buggy']} buggy[/red], "
        f"[yellow]{counts['unmodeled']} unmodeled[/yellow], "
        f"[magenta]{counts['errors']} errors[/magenta]"
    )
    if results["regressions"]:
        console.print(f"[red]Regressions:[/red] {', '.join(results['regressions'])}")
    for fmt, path in results["reports"].items():
        console.print(f"  {fmt.upper()} report: [blue]{path}[/blue]")

    sys.exit(0 if results["all_correct"] else 1)


@cli.command()
@click.option("--kind", "-k", required=True, help="Path kind (rect, oval, arc, rounded_rect, explicit_elements)")
@click.option("--bounds", "-b", nargs=4, type=float, default=(0.0, 0.0, 60.0, 40.0),
              show_default=True, help="Path local bounds: X Y WIDTH HEIGHT")
@click.option("--offset", nargs=2, type=float, default=(100.0, 200.0),
              show_default=True, help="View screen offset: X Y")
@click.option("--reads", "-n", type=int, default=3, show_default=True, help="Number of reads")
@click.option("--hypothesis", type=click.Choice(["correct", "buggy", "both"]), default="both",
              show_default=True)
def predict(kind: str, bounds: tuple, offset: tuple, reads: int, hypothesis: str) -> None:
    """Print the predicted read sequence for one scenario."""
    try:
        path_kind = PathKind.parse(kind)
        local = Rect.of(*bounds)
        screen = Point(x=offset[0], y=offset[1])
        hypotheses = list(Hypothesis) if hypothesis == "both" else [Hypothesis.parse(hypothesis)]
        sequences = {h: predict_sequence(local, screen, reads, h, path_kind) for h in hypotheses}
    except (InvalidArgument, ValidationError) as e:
        _fail(str(e))

    table = Table(title=f"Predicted reads: {path_kind.value}")
    table.add_column("Read", justify="right")
    for h in hypotheses:
        table.add_column(h.value.capitalize())
    for i in range(reads):
        table.add_row(str(i + 1), *(sequences[h][i].describe() for h in hypotheses))
    console.print(table)


@cli.command("fixtures")
@click.option("--fixtures", "-f", "fixtures_file", default=None, help="Fixtures JSON file")
def list_fixtures(fixtures_file: Optional[str]) -> None:
    """List the fixtures a run would use."""
    try:
        fixtures = load_fixtures(fixtures_file) if fixtures_file else default_fixtures()
    except (FileNotFoundError, InvalidArgument) as e:
        _fail(str(e))

    table = Table(title="Fixtures")
    table.add_column("ID", style="bold")
    table.add_column("Kind")
    table.add_column("View frame")
    table.add_column("Local bounds")
    table.add_column("Reads", justify="right")
    table.add_column("Description")
    for fx in fixtures:
        table.add_row(
            fx.fixture_id, fx.path_kind.value, fx.view_frame.describe(),
            fx.path_local_bounds.describe(), str(fx.read_count), fx.description,
        )
    console.print(table)


@cli.command("transforms")
def list_transforms() -> None:
    """List registered transforms."""
    for name, (_, description) in TRANSFORMS.items():
        console.print(f"  [bold]{name}[/bold]: {description}")


@cli.command()
@click.option("--path", "config_path", default=DEFAULT_CONFIG, help="Where to write the config")
@click.option("--transform", "-t", default="reference", help="Transform to test")
def init(config_path: str, transform: str) -> None:
    """Create a default configuration file."""
    path = Path(config_path)
    if path.exists():
        if not click.confirm(f"{path} already exists. Overwrite?"):
            return

    cfg = HarnessConfig(transform=transform)
    cfg.save(path)
    console.print(f"[green]Created {path}[/green]")
    console.print("\nYou can now run:")
    console.print("  [blue]pathdrift run[/blue]")


if __name__ == "__main__":
    cli()
