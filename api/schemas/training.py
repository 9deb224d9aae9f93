"""
Pydantic models for the training API.

Request and response models for progression, program matching/generation
and progress analytics. Domain models (ProgressionRecommendation,
ProgramMatches, StreakData, PersonalRecord) are returned as-is where they
already have the right shape.
"""

from datetime import datetime
from typing import Dict, List, Optional

from pydantic import BaseModel, Field

from domain.models import (
    ExperienceLevel,
    Gender,
    PersonalRecord,
    ProgressionRecommendation,
)


# =============================================================================
# Progression
# =============================================================================


class ComputeProgressionResponse(BaseModel):
    """Recommendations stored for a completed workout."""
    workout_id: str
    recommendations: List[ProgressionRecommendation] = Field(default_factory=list)
    skipped_exercise_ids: List[str] = Field(default_factory=list)
    count: int = 0


class RecommendationsResponse(BaseModel):
    """Stored recommendations keyed by exercise_id."""
    recommendations: Dict[str, ProgressionRecommendation] = Field(default_factory=dict)


# =============================================================================
# Programs
# =============================================================================


class MatchProgramsRequest(BaseModel):
    """Onboarding answers used to rank programs."""
    goals: List[str] = Field(
        default_factory=list,
        max_length=8,
        description="Goals in priority order, e.g. ['strength', 'bodybuilding']",
    )
    experience: ExperienceLevel = ExperienceLevel.BEGINNER
    days_per_week: int = Field(default=3, ge=1, le=7)


class GenerateProgramRequest(BaseModel):
    """Onboarding answers used to build the user's plan."""
    experience: ExperienceLevel = ExperienceLevel.BEGINNER
    days_per_week: int = Field(default=3, ge=1, le=7)
    goal: str = "general"
    equipment: List[str] = Field(default_factory=list)
    program_slug: Optional[str] = None
    gender: Optional[Gender] = None


class GeneratedWorkoutSummary(BaseModel):
    id: str
    name: str
    exercise_count: int


class GenerateProgramResponse(BaseModel):
    """The plan created for the user."""
    program_slug: str
    program_name: str
    workouts: List[GeneratedWorkoutSummary] = Field(default_factory=list)


# =============================================================================
# Progress
# =============================================================================


class PersonalRecordsResponse(BaseModel):
    """PRs detected for a workout, for the completion celebration."""
    workout_id: str
    records: List[PersonalRecord] = Field(default_factory=list)
    count: int = 0


class MuscleGroupVolumeItem(BaseModel):
    muscle_group: str
    sets: int
    target: int
    remaining: int
    on_target: bool


class WeeklyVolumeResponse(BaseModel):
    """Sets per muscle group over the last seven days."""
    goal: str
    target: int
    since: datetime
    total_sets: int
    muscle_groups: List[MuscleGroupVolumeItem] = Field(default_factory=list)
