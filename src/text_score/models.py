"""Data models

Score containers returned by the public API. Pydantic keeps the
[0, 1] range of every metric validated at construction time.
"""

from __future__ import annotations

from enum import Enum
from typing import Any

from pydantic import BaseModel, ConfigDict, Field

from text_score.exceptions import InvalidArgumentError


class Aggregation(str, Enum):
    """Policy for collapsing per-reference scores into one result."""

    MAX = "max"
    AVERAGE = "average"

    @classmethod
    def from_value(cls, value: Aggregation | str) -> Aggregation:
        """Coerce an enum member or its string value."""
        if isinstance(value, cls):
            return value
        try:
            return cls(str(value).lower())
        except ValueError:
            choices = ", ".join(member.value for member in cls)
            raise InvalidArgumentError(
                f"Unknown aggregation {value!r} (expected one of: {choices})"
            ) from None


class Score(BaseModel):
    """Precision, recall and F1 for one candidate."""

    model_config = ConfigDict(frozen=True)

    precision: float = Field(default=0.0, ge=0.0, le=1.0)
    recall: float = Field(default=0.0, ge=0.0, le=1.0)
    f1: float = Field(default=0.0, ge=0.0, le=1.0)

    def to_dict(self) -> dict[str, float]:
        """Convert to dictionary representation."""
        return {
            "precision": self.precision,
            "recall": self.recall,
            "f1": self.f1,
        }


class BatchResult(BaseModel):
    """Mean scores over a batch of candidate/reference pairs."""

    precision: float = 0.0
    recall: float = 0.0
    f1: float = 0.0
    num_samples: int = 0
    individual_scores: list[Score] | None = None

    def to_dict(self) -> dict[str, Any]:
        """Convert to dictionary, omitting individual scores when absent."""
        return self.model_dump(exclude_none=True)
