"""Configuration model for the conformance harness."""

from __future__ import annotations

import json
import math
from pathlib import Path
from typing import Optional

from pydantic import BaseModel, Field, field_validator

from pathdrift.errors import InvalidArgument

REPORT_FORMATS = ("text", "json")


class HarnessConfig(BaseModel):
    # Comparison
    tolerance: float = 0.5

    # Transform under test: registered name or "module:attribute"
    transform: str = "reference"

    # Fixtures: JSON file, or the built-in catalog when unset
    fixtures_file: Optional[str] = None

    # Reporting
    report_formats: list[str] = Field(default_factory=lambda: ["text", "json"])
    report_output_dir: str = "./drift-reports"

    @field_validator("tolerance")
    @classmethod
    def check_tolerance(cls, v: float) -> float:
        if not math.isfinite(v) or v < 0:
            raise ValueError(f"tolerance must be a finite value >= 0, got {v}")
        return v

    @field_validator("report_formats")
    @classmethod
    def check_formats(cls, v: list[str]) -> list[str]:
        unknown = [fmt for fmt in v if fmt not in REPORT_FORMATS]
        if unknown:
            raise ValueError(f"Unknown report formats: {', '.join(unknown)}")
        return v

    @classmethod
    def load(cls, path: str | Path) -> "HarnessConfig":
        """Load config from a JSON file."""
        path = Path(path)
        if not path.exists():
            raise FileNotFoundError(f"Config file not found: {path}")
        with open(path) as f:
            try:
                data = json.load(f)
            except json.JSONDecodeError as e:
                raise InvalidArgument(f"{path}: not valid JSON: {e}") from e
        if not isinstance(data, dict):
            raise InvalidArgument(f"{path}: expected a JSON object")
        return cls(**data)

    def save(self, path: str | Path) -> None:
        """Save config to a JSON file."""
        path = Path(path)
        path.parent.mkdir(parents=True, exist_ok=True)
        with open(path, "w") as f:
            json.dump(self.model_dump(), f, indent=2)
