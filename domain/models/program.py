"""
Training program reference data and program matching/generation models.

Training programs, their workout templates and template exercises are static
reference data seeded in the database; this service only reads them.
"""

from enum import Enum
from typing import List, Optional

from pydantic import BaseModel, Field, field_validator, model_validator


class ExperienceLevel(str, Enum):
    """User (and program difficulty) experience levels."""

    BEGINNER = "beginner"
    INTERMEDIATE = "intermediate"
    ADVANCED = "advanced"

    @property
    def rank(self) -> int:
        """Ordinal position used for experience alignment (beginner=0)."""
        return _EXPERIENCE_RANK[self]


_EXPERIENCE_RANK = {
    ExperienceLevel.BEGINNER: 0,
    ExperienceLevel.INTERMEDIATE: 1,
    ExperienceLevel.ADVANCED: 2,
}


class Gender(str, Enum):
    MALE = "male"
    FEMALE = "female"
    PREFER_NOT_TO_SAY = "prefer_not_to_say"


class TrainingProgram(BaseModel):
    """
    A row of `training_programs`.

    `category` is the program's goal tag (e.g. "strength"); `tags` are the
    finer-grained descriptors used for goal affinity scoring.
    """

    id: Optional[str] = None
    slug: str = Field(..., min_length=1)
    name: str = ""
    description: Optional[str] = None
    category: str = ""
    tags: List[str] = Field(default_factory=list)
    difficulty: Optional[str] = None
    min_days: int = Field(default=1, ge=1, le=7)
    max_days: int = Field(default=7, ge=1, le=7)

    @field_validator("category", mode="before")
    @classmethod
    def normalize_category(cls, v):
        return (v or "").strip().lower()

    @field_validator("tags", mode="before")
    @classmethod
    def normalize_tags(cls, v):
        """Lowercase and de-duplicate tags, keeping first-seen order."""
        if v is None:
            return []
        seen: List[str] = []
        for tag in v:
            tag = str(tag).strip().lower()
            if tag and tag not in seen:
                seen.append(tag)
        return seen

    @field_validator("difficulty", mode="before")
    @classmethod
    def normalize_difficulty(cls, v):
        return v.strip().lower() if isinstance(v, str) else v

    @model_validator(mode="after")
    def validate_day_range(self) -> "TrainingProgram":
        if self.max_days < self.min_days:
            raise ValueError("max_days must be >= min_days")
        return self

    @property
    def difficulty_level(self) -> Optional[ExperienceLevel]:
        """Difficulty as an ExperienceLevel, or None for unknown values."""
        try:
            return ExperienceLevel(self.difficulty)
        except ValueError:
            return None


class ScoredProgram(BaseModel):
    """A program with its normalized match score (0-99) and reasons."""

    program: TrainingProgram
    score: int = Field(..., ge=0, le=99)
    match_reasons: List[str] = Field(default_factory=list)


class ProgramMatches(BaseModel):
    """Ranked programs split into strong and weaker matches."""

    top_picks: List[ScoredProgram] = Field(default_factory=list)
    other_options: List[ScoredProgram] = Field(default_factory=list)


# =============================================================================
# Program generation
# =============================================================================


class Exercise(BaseModel):
    """A row of the `exercises` catalog."""

    id: str
    name: str
    muscle_group: Optional[str] = None
    equipment_type: List[str] = Field(
        default_factory=list,
        description="Equipment required; empty means no equipment needed",
    )

    @field_validator("equipment_type", mode="before")
    @classmethod
    def null_equipment(cls, v):
        return v or []


class ProgramWorkoutExercise(BaseModel):
    """Exercise slot inside a program workout template."""

    exercise_name: str
    default_sets: int = Field(default=3, ge=1)
    default_reps: str = "8-12"
    default_rest_seconds: int = Field(default=90, ge=0)
    order_num: int = 0
    rationale: str = ""


class ProgramWorkout(BaseModel):
    """
    A workout template of a program (`program_workouts`).

    Programs ship variants for several weekly frequencies; `days_per_week`
    says which variant this template belongs to.
    """

    id: Optional[str] = None
    program_id: Optional[str] = None
    name: str
    day_number: int = 1
    days_per_week: int = Field(default=3, ge=1, le=7)
    exercises: List[ProgramWorkoutExercise] = Field(default_factory=list)


class UserTrainingProfile(BaseModel):
    """Onboarding answers that drive program generation."""

    experience: ExperienceLevel = ExperienceLevel.BEGINNER
    days_per_week: int = Field(default=3, ge=1, le=7)
    goal: str = "general"
    equipment: List[str] = Field(default_factory=list)
    program_slug: Optional[str] = None
    gender: Optional[Gender] = None


class PlannedExercise(BaseModel):
    """An exercise chosen for the user's generated workout."""

    exercise_id: str
    exercise_name: str
    sets: int
    reps: str
    rest_seconds: int
    order: int
    rationale: str = ""


class PlannedWorkout(BaseModel):
    """A workout of the user's generated plan, ready to be persisted."""

    name: str
    program_id: Optional[str] = None
    description: str = ""
    exercises: List[PlannedExercise] = Field(default_factory=list)
