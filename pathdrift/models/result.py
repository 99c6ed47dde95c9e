"""Harness result data structures."""

from __future__ import annotations

from enum import Enum
from typing import Optional

from pydantic import BaseModel, Field

from .fixture import PathKind
from .geometry import Rect

TRANSFORM_ERROR_STATUS = "transform_error"


class Classification(str, Enum):
    MATCHES_CORRECT = "matches_correct"
    MATCHES_BUGGY = "matches_buggy"
    UNMODELED = "unmodeled"


class FixtureResult(BaseModel):
    """Outcome of driving one fixture through a transform."""
    fixture_id: str
    path_kind: PathKind
    read_count: int
    classification: Optional[Classification] = None  # None when the transform failed
    observed: list[Rect] = Field(default_factory=list)
    discriminating: bool = True
    failed_read: Optional[int] = None  # 1-indexed
    error: Optional[str] = None

    @property
    def status(self) -> str:
        if self.classification is None:
            return TRANSFORM_ERROR_STATUS
        return self.classification.value

    @property
    def ok(self) -> bool:
        return self.classification == Classification.MATCHES_CORRECT


class SuiteResult(BaseModel):
    suite_id: str
    transform_name: str
    tolerance: float
    started_at: str
    completed_at: str
    total: int = 0
    matches_correct: int = 0
    matches_buggy: int = 0
    unmodeled: int = 0
    errors: int = 0
    results: list[FixtureResult] = Field(default_factory=list)

    @property
    def all_correct(self) -> bool:
        return self.total == self.matches_correct

    def classifications(self) -> dict[str, str]:
        """Fixture id -> status, in evaluation order."""
        return {r.fixture_id: r.status for r in self.results}
