"""
Progression recommendation models.

A ProgressionRecommendation is the single live recommendation for a
(user_id, exercise_id) pair. Each computation overwrites the previous one.
"""

from enum import Enum

from pydantic import BaseModel, Field, model_validator


class RecommendationType(str, Enum):
    """What the user should change next session."""

    INCREASE_WEIGHT = "increase_weight"
    INCREASE_REPS = "increase_reps"
    MAINTAIN = "maintain"
    DELOAD = "deload"


class RepRange(BaseModel):
    """Target rep range parsed from a template string such as "8-12"."""

    low: int = Field(..., ge=0)
    high: int = Field(..., ge=0)

    @model_validator(mode="after")
    def validate_order(self) -> "RepRange":
        if self.low > self.high:
            raise ValueError("low must not exceed high")
        return self

    def __str__(self) -> str:
        if self.low == self.high:
            return str(self.low)
        return f"{self.low}-{self.high}"


class ProgressionRecommendation(BaseModel):
    """
    Recommendation row stored in `progression_recommendations`.

    Keyed uniquely by (user_id, exercise_id).
    """

    user_id: str
    exercise_id: str
    exercise_name: str = ""
    recommended_weight: float = Field(..., ge=0)
    recommended_reps: str
    recommendation_type: RecommendationType
    reason: str
    based_on_sessions: int = Field(default=0, ge=0)

    def to_row(self) -> dict:
        """Serialize to the column set of the recommendations table."""
        return {
            "user_id": self.user_id,
            "exercise_id": self.exercise_id,
            "recommended_weight": self.recommended_weight,
            "recommended_reps": self.recommended_reps,
            "recommendation_type": self.recommendation_type.value,
            "reason": self.reason,
            "based_on_sessions": self.based_on_sessions,
        }
