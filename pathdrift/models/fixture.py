"""Fixture data structures consumed by the drift model and the harness."""

from __future__ import annotations

import re
from enum import Enum

from pydantic import BaseModel, ConfigDict, StrictInt, ValidationError, field_validator

from pathdrift.errors import InvalidArgument

from .geometry import Point, Rect
from .path import PathInput

_CAMEL_BOUNDARY = re.compile(r"(?<=[a-z0-9])(?=[A-Z])")


class PathKind(str, Enum):
    RECT = "rect"
    OVAL = "oval"
    ARC = "arc"
    ROUNDED_RECT = "rounded_rect"
    EXPLICIT_ELEMENTS = "explicit_elements"

    @classmethod
    def parse(cls, value: "PathKind | str") -> "PathKind":
        """Map a member, value or CamelCase name onto the closed enum."""
        if isinstance(value, cls):
            return value
        if isinstance(value, str):
            key = _CAMEL_BOUNDARY.sub("_", value.strip()).replace("-", "_").lower()
            for kind in cls:
                if kind.value == key:
                    return kind
        raise InvalidArgument(f"Unrecognized path kind: {value!r}")


# Kinds whose conversion mutates the input path in the observed reports.
DRIFT_PRONE_KINDS = frozenset({PathKind.ROUNDED_RECT, PathKind.EXPLICIT_ELEMENTS})


class Hypothesis(str, Enum):
    CORRECT = "correct"
    BUGGY = "buggy"

    @classmethod
    def parse(cls, value: "Hypothesis | str") -> "Hypothesis":
        if isinstance(value, cls):
            return value
        if isinstance(value, str):
            for hyp in cls:
                if hyp.value == value.strip().lower():
                    return hyp
        raise InvalidArgument(f"Unrecognized hypothesis: {value!r}")


class Fixture(BaseModel):
    """One immutable scenario: a view at a known offset holding a path read N times."""

    model_config = ConfigDict(frozen=True)

    fixture_id: str
    view_frame: Rect
    path_kind: PathKind
    path_local_bounds: Rect
    read_count: StrictInt
    description: str = ""

    def __init__(self, **data) -> None:
        try:
            super().__init__(**data)
        except ValidationError as e:
            raise InvalidArgument(
                f"Invalid fixture {data.get('fixture_id', '<unnamed>')!r}: {e}"
            ) from e

    @classmethod
    def model_validate(cls, obj, **kwargs) -> "Fixture":
        try:
            return super().model_validate(obj, **kwargs)
        except ValidationError as e:
            name = obj.get("fixture_id", "<unnamed>") if isinstance(obj, dict) else "<unnamed>"
            raise InvalidArgument(f"Invalid fixture {name!r}: {e}") from e

    @classmethod
    def model_validate_json(cls, json_data, **kwargs) -> "Fixture":
        try:
            return super().model_validate_json(json_data, **kwargs)
        except ValidationError as e:
            raise InvalidArgument(f"Invalid fixture: {e}") from e

    @field_validator("fixture_id")
    @classmethod
    def check_fixture_id(cls, v: str) -> str:
        if not v.strip():
            raise ValueError("fixture_id must not be empty")
        return v

    @field_validator("path_kind", mode="before")
    @classmethod
    def parse_path_kind(cls, v):
        return PathKind.parse(v)

    @field_validator("read_count")
    @classmethod
    def check_read_count(cls, v: int) -> int:
        if v < 0:
            raise ValueError(f"read_count must be >= 0, got {v}")
        return v

    @property
    def screen_offset(self) -> Point:
        return self.view_frame.origin

    @property
    def drift_prone(self) -> bool:
        return self.path_kind in DRIFT_PRONE_KINDS

    def make_path(self) -> PathInput:
        """Build the single path object reused across every read of one run."""
        return PathInput(kind=self.path_kind, bounds=self.path_local_bounds)
