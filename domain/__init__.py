"""
Domain layer for the Liftlog API.

This package contains pure domain models that are independent of
infrastructure concerns (database, API, external services).
"""

from domain.models import (
    Achievement,
    ExperienceLevel,
    PersonalRecord,
    ProgressionRecommendation,
    RecommendationType,
    SetLog,
    StreakData,
    TrainingProgram,
    WorkoutExerciseTemplate,
)

__all__ = [
    "Achievement",
    "ExperienceLevel",
    "PersonalRecord",
    "ProgressionRecommendation",
    "RecommendationType",
    "SetLog",
    "StreakData",
    "TrainingProgram",
    "WorkoutExerciseTemplate",
]
