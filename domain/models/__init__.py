"""
Domain models for the Liftlog API.

This package contains pure domain models that are independent of
infrastructure concerns (database, API, external services).

These models represent the core training concepts:
- SetLog / Session: completed sets and their derived grouping
- WorkoutExerciseTemplate: the target prescription a set is logged against
- ProgressionRecommendation: the live next-session recommendation per exercise
- TrainingProgram / ScoredProgram: reference programs and match results
- Achievement / PersonalRecord: weight PRs
- StreakData: weekly training streak summary

Usage:
    >>> from domain.models import SetLog, RecommendationType

    >>> log = SetLog.model_validate(row_from_supabase)
"""

from domain.models.achievement import PR_WEIGHT, Achievement, PersonalRecord
from domain.models.program import (
    Exercise,
    ExperienceLevel,
    Gender,
    PlannedExercise,
    PlannedWorkout,
    ProgramMatches,
    ProgramWorkout,
    ProgramWorkoutExercise,
    ScoredProgram,
    TrainingProgram,
    UserTrainingProfile,
)
from domain.models.progression import (
    ProgressionRecommendation,
    RecommendationType,
    RepRange,
)
from domain.models.set_log import Session, SetLog
from domain.models.streak import StreakData
from domain.models.workout import WorkoutExerciseTemplate

__all__ = [
    # Logging
    "SetLog",
    "Session",
    "WorkoutExerciseTemplate",
    # Progression
    "ProgressionRecommendation",
    "RecommendationType",
    "RepRange",
    # Programs
    "TrainingProgram",
    "ScoredProgram",
    "ProgramMatches",
    "ExperienceLevel",
    "Gender",
    "Exercise",
    "ProgramWorkout",
    "ProgramWorkoutExercise",
    "UserTrainingProfile",
    "PlannedWorkout",
    "PlannedExercise",
    # Records and streaks
    "Achievement",
    "PersonalRecord",
    "PR_WEIGHT",
    "StreakData",
]
