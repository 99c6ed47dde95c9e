"""Geometry value types: points and axis-aligned rects."""

from __future__ import annotations

import math

from pydantic import BaseModel, ConfigDict, ValidationError, field_validator

from pathdrift.errors import InvalidArgument


class Point(BaseModel):
    model_config = ConfigDict(frozen=True)

    x: float = 0.0
    y: float = 0.0

    @field_validator("x", "y")
    @classmethod
    def check_finite(cls, v: float) -> float:
        if not math.isfinite(v):
            raise ValueError(f"coordinate must be finite, got {v}")
        return v

    @property
    def is_zero(self) -> bool:
        return self.x == 0 and self.y == 0

    def scaled(self, factor: float) -> "Point":
        return Point(x=self.x * factor, y=self.y * factor)


class Rect(BaseModel):
    """Axis-aligned bounding box in some coordinate space."""

    model_config = ConfigDict(frozen=True)

    origin_x: float = 0.0
    origin_y: float = 0.0
    width: float = 0.0
    height: float = 0.0

    @field_validator("origin_x", "origin_y", "width", "height")
    @classmethod
    def check_finite(cls, v: float) -> float:
        if not math.isfinite(v):
            raise ValueError(f"rect component must be finite, got {v}")
        return v

    @field_validator("width", "height")
    @classmethod
    def check_non_negative(cls, v: float) -> float:
        if v < 0:
            raise ValueError(f"rect size must be >= 0, got {v}")
        return v

    @classmethod
    def of(cls, x: float, y: float, width: float, height: float) -> "Rect":
        try:
            return cls(origin_x=x, origin_y=y, width=width, height=height)
        except ValidationError as e:
            raise InvalidArgument(f"Invalid rect ({x}, {y}, {width}, {height}): {e}") from e

    @property
    def origin(self) -> Point:
        return Point(x=self.origin_x, y=self.origin_y)

    def translated(self, dx: float, dy: float) -> "Rect":
        return Rect(
            origin_x=self.origin_x + dx,
            origin_y=self.origin_y + dy,
            width=self.width,
            height=self.height,
        )

    def offset_by(self, offset: Point, times: float = 1) -> "Rect":
        """Translate the origin by ``times`` copies of ``offset``; size is kept."""
        return self.translated(offset.x * times, offset.y * times)

    def approx_equal(self, other: "Rect", tolerance: float) -> bool:
        return (
            abs(self.origin_x - other.origin_x) <= tolerance
            and abs(self.origin_y - other.origin_y) <= tolerance
            and abs(self.width - other.width) <= tolerance
            and abs(self.height - other.height) <= tolerance
        )

    def describe(self) -> str:
        return f"({self.origin_x:g}, {self.origin_y:g}, {self.width:g}, {self.height:g})"
