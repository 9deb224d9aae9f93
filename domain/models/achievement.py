"""
Achievement and personal record models.
"""

from datetime import datetime
from typing import Any, Dict

from pydantic import BaseModel, Field


PR_WEIGHT = "pr_weight"


class PersonalRecord(BaseModel):
    """A weight PR detected for one exercise in a finished workout."""

    exercise_id: str
    exercise_name: str
    new_weight: float
    previous_best: float
    reps: int
    improvement: float


class Achievement(BaseModel):
    """
    Row appended to `user_achievements`.

    Achievements are append-only; a new row is written for every PR detected.
    """

    user_id: str
    achievement_type: str = PR_WEIGHT
    achievement_value: Dict[str, Any] = Field(default_factory=dict)
    achieved_at: datetime

    @classmethod
    def from_personal_record(
        cls,
        user_id: str,
        record: PersonalRecord,
        achieved_at: datetime,
    ) -> "Achievement":
        """Build the weight-PR achievement for a detected record."""
        return cls(
            user_id=user_id,
            achievement_type=PR_WEIGHT,
            achievement_value={
                "exercise_id": record.exercise_id,
                "exercise_name": record.exercise_name,
                "weight": record.new_weight,
                "previous_best": record.previous_best,
                "reps": record.reps,
            },
            achieved_at=achieved_at,
        )

    def to_row(self) -> Dict[str, Any]:
        return {
            "user_id": self.user_id,
            "achievement_type": self.achievement_type,
            "achievement_value": self.achievement_value,
            "achieved_at": self.achieved_at.isoformat(),
        }
