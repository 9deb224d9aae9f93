"""
Workout template rows.

Rows of `workout_exercises` are written when a program is generated and are
read-only while the user logs sets against them.
"""

from typing import Optional

from pydantic import BaseModel, Field, field_validator


class WorkoutExerciseTemplate(BaseModel):
    """
    Target prescription for one exercise of a workout.

    `reps` keeps the raw range string ("8-12", "10", "AMRAP") so it can be
    echoed back in recommendations; parse it with
    `backend.core.progression_engine.parse_rep_range`.
    """

    workout_id: str
    exercise_id: str
    exercise_name: str = "Unknown"
    muscle_group: Optional[str] = None
    sets: int = Field(default=3, ge=0)
    reps: str = ""
    rest_seconds: Optional[int] = Field(default=None, ge=0)

    @field_validator("reps", mode="before")
    @classmethod
    def reps_as_string(cls, v):
        """Templates sometimes store a bare integer."""
        if v is None:
            return ""
        return str(v).strip()
