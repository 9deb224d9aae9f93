"""
Training streak summary.
"""

from typing import Optional

from pydantic import BaseModel, Field


class StreakData(BaseModel):
    """
    Weekly training streak derived from workout completion timestamps.

    A streak week is an ISO week (Monday start) with at least one workout.
    Never persisted; recomputed on every read.
    """

    current_streak: int = Field(default=0, ge=0, description="Consecutive active weeks up to now")
    longest_streak: int = Field(default=0, ge=0)
    total_workouts: int = Field(default=0, ge=0)
    this_week_workouts: int = Field(default=0, ge=0)
    last_workout_date: Optional[str] = Field(
        default=None, description="ISO timestamp of the most recent workout"
    )
