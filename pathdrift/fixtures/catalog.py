"""Built-in fixture catalog and JSON fixture files."""

from __future__ import annotations

import json
import logging
from pathlib import Path

from pathdrift.errors import InvalidArgument
from pathdrift.models.fixture import Fixture, PathKind
from pathdrift.models.geometry import Rect

logger = logging.getLogger(__name__)

STANDARD_VIEW = Rect.of(100, 200, 60, 40)
STANDARD_BOUNDS = Rect.of(0, 0, 60, 40)


def _standard(fixture_id: str, kind: PathKind, description: str,
              bounds: Rect = STANDARD_BOUNDS, view: Rect = STANDARD_VIEW,
              reads: int = 3) -> Fixture:
    return Fixture(
        fixture_id=fixture_id,
        view_frame=view,
        path_kind=kind,
        path_local_bounds=bounds,
        read_count=reads,
        description=description,
    )


def default_fixtures() -> list[Fixture]:
    """Scenarios covered by the collected reproduction reports."""
    return [
        _standard("rect", PathKind.RECT, "Rect convenience initializer"),
        _standard("oval", PathKind.OVAL, "Oval convenience initializer"),
        _standard("arc", PathKind.ARC, "Full-circle arc centred in the view",
                  bounds=Rect.of(10, 0, 40, 40)),
        _standard("rounded_rect", PathKind.ROUNDED_RECT, "Rounded rect, corner radius 10"),
        _standard("add_line", PathKind.EXPLICIT_ELEMENTS, "Closed rectangle built from addLine"),
        _standard("quad_curve", PathKind.EXPLICIT_ELEMENTS, "Quad curve from (0,20) to (60,20)",
                  bounds=Rect.of(0, 10, 60, 10)),
        _standard("short_line", PathKind.EXPLICIT_ELEMENTS, "Line from (5,5) to (15,15), five reads",
                  bounds=Rect.of(5, 5, 10, 10), view=Rect.of(50, 100, 60, 40), reads=5),
        _standard("view_at_origin", PathKind.EXPLICIT_ELEMENTS,
                  "View at (0,0): hypotheses coincide", view=Rect.of(0, 0, 60, 40), reads=5),
        _standard("negative_coordinates", PathKind.EXPLICIT_ELEMENTS,
                  "Path with negative local coordinates", bounds=Rect.of(-50, -50, 100, 100)),
        _standard("large_coordinates", PathKind.EXPLICIT_ELEMENTS,
                  "Path with large local coordinates", bounds=Rect.of(10000, 10000, 100, 100)),
        _standard("no_reads", PathKind.ROUNDED_RECT, "Zero reads: empty sequence", reads=0),
    ]


def load_fixtures(path: str | Path) -> list[Fixture]:
    """Load fixtures from a JSON list of fixture objects."""
    path = Path(path)
    if not path.exists():
        raise FileNotFoundError(f"Fixtures file not found: {path}")
    with open(path) as f:
        try:
            data = json.load(f)
        except json.JSONDecodeError as e:
            raise InvalidArgument(f"{path}: not valid JSON: {e}") from e
    if not isinstance(data, list):
        raise InvalidArgument(f"{path}: expected a JSON list of fixtures")

    fixtures = []
    for index, entry in enumerate(data):
        if not isinstance(entry, dict):
            raise InvalidArgument(f"{path}: entry {index} is not an object")
        try:
            fixtures.append(Fixture(**entry))
        except InvalidArgument as e:
            raise InvalidArgument(f"{path}: entry {index}: {e}") from e
    logger.debug("Loaded %d fixtures from %s", len(fixtures), path)
    return fixtures


def save_fixtures(fixtures: list[Fixture], path: str | Path) -> None:
    path = Path(path)
    path.parent.mkdir(parents=True, exist_ok=True)
    with open(path, "w") as f:
        json.dump([fx.model_dump(mode="json") for fx in fixtures], f, indent=2)
