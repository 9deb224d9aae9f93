"""
Set log value objects.

A SetLog is one completed set as recorded by the workout logger. Sessions are
never persisted; they are derived at read time by grouping set logs.
"""

from datetime import datetime
from typing import List, Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator


class SetLog(BaseModel):
    """
    One completed set from the `logs` table.

    Examples:
        >>> log = SetLog(
        ...     user_id="u1",
        ...     exercise_id="ex-bench",
        ...     workout_id="w1",
        ...     set_number=1,
        ...     weight=135,
        ...     reps_completed=10,
        ...     rpe=8,
        ...     created_at="2024-03-04T18:00:00Z",
        ... )
        >>> log.has_rpe
        True
    """

    model_config = ConfigDict(frozen=True)

    user_id: str
    exercise_id: str
    workout_id: Optional[str] = Field(
        default=None,
        description="Workout the set was logged under (null once a plan is regenerated)",
    )
    set_number: int = Field(default=1, ge=0)
    weight: float = Field(default=0.0, ge=0, description="Weight in pounds")
    reps_completed: int = Field(default=0, ge=0)
    rpe: Optional[int] = Field(
        default=None,
        ge=6,
        le=10,
        description="Rate of perceived exertion (6-10); None when not recorded",
    )
    created_at: datetime

    # Joined from the exercises table when the query asks for it
    exercise_name: Optional[str] = None
    muscle_group: Optional[str] = None

    @field_validator("weight", "reps_completed", mode="before")
    @classmethod
    def null_as_zero(cls, v):
        """Database nulls for weight/reps are treated as zero."""
        return 0 if v is None else v

    @field_validator("rpe", mode="before")
    @classmethod
    def zero_rpe_is_unknown(cls, v):
        """The logger stores 0 when the RPE picker was skipped."""
        if v is None or v == 0:
            return None
        return v

    @property
    def has_rpe(self) -> bool:
        """True if an RPE value was recorded for this set."""
        return self.rpe is not None


class Session(BaseModel):
    """A group of set logs performed together, newest session first in lists."""

    model_config = ConfigDict(frozen=True)

    key: str = Field(..., description="workout_id, or 'date:YYYY-MM-DD' for unattached logs")
    set_logs: List[SetLog] = Field(default_factory=list)

    @property
    def max_weight(self) -> float:
        """Heaviest weight lifted in the session."""
        return max((log.weight for log in self.set_logs), default=0.0)

    @property
    def average_reps(self) -> float:
        """Mean reps across all sets (0 for an empty session)."""
        if not self.set_logs:
            return 0.0
        return sum(log.reps_completed for log in self.set_logs) / len(self.set_logs)

    @property
    def average_rpe(self) -> Optional[float]:
        """
        Mean RPE over sets that recorded one.

        Returns:
            Average RPE, or None when no set in the session has an RPE.
        """
        values = [log.rpe for log in self.set_logs if log.rpe is not None]
        if not values:
            return None
        return sum(values) / len(values)
