"""Pytest configuration and shared fixtures."""

from pathlib import Path

import pytest

from pathdrift.harness.harness import ConformanceHarness
from pathdrift.models.config import HarnessConfig
from pathdrift.models.fixture import Fixture, PathKind
from pathdrift.models.geometry import Rect


# ============================================================================
# Geometry Fixtures
# ============================================================================


@pytest.fixture
def view_frame() -> Rect:
    """A 60x40 view at screen offset (100, 200)."""
    return Rect.of(100, 200, 60, 40)


@pytest.fixture
def local_bounds() -> Rect:
    """Path bounds in view-local coordinates."""
    return Rect.of(0, 0, 60, 40)


# ============================================================================
# Fixture Fixtures
# ============================================================================


def _make_fixture(
    fixture_id: str = "fx",
    kind: PathKind | str = PathKind.ROUNDED_RECT,
    view: Rect | None = None,
    bounds: Rect | None = None,
    reads: int = 3,
) -> Fixture:
    return Fixture(
        fixture_id=fixture_id,
        view_frame=view or Rect.of(100, 200, 60, 40),
        path_kind=kind,
        path_local_bounds=bounds or Rect.of(0, 0, 60, 40),
        read_count=reads,
    )


@pytest.fixture
def make_fixture():
    """Factory for fixtures with a 60x40 view at (100, 200) by default."""
    return _make_fixture


@pytest.fixture
def rounded_rect_fixture() -> Fixture:
    """Scenario A: drift-prone rounded rect read three times."""
    return _make_fixture("scenario_a", PathKind.ROUNDED_RECT)


@pytest.fixture
def rect_fixture() -> Fixture:
    """Scenario B: drift-immune rect read three times."""
    return _make_fixture("scenario_b", PathKind.RECT)


@pytest.fixture
def origin_fixture() -> Fixture:
    """Scenario C: view at the origin, five reads."""
    return _make_fixture("scenario_c", PathKind.EXPLICIT_ELEMENTS, view=Rect.of(0, 0, 60, 40), reads=5)


# ============================================================================
# Harness & Config Fixtures
# ============================================================================


@pytest.fixture
def harness() -> ConformanceHarness:
    return ConformanceHarness()


@pytest.fixture
def harness_config(tmp_path: Path) -> HarnessConfig:
    """Config writing reports into a temporary directory."""
    return HarnessConfig(
        tolerance=0.5,
        transform="reference",
        report_formats=["text", "json"],
        report_output_dir=str(tmp_path / "reports"),
    )


@pytest.fixture
def temp_config_file(harness_config: HarnessConfig, tmp_path: Path) -> Path:
    config_file = tmp_path / "drift-config.json"
    harness_config.save(config_file)
    return config_file
