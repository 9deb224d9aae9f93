"""
Repository Interfaces (Ports) for the Liftlog API.

This package defines abstract interfaces that decouple the training
computations from infrastructure (Supabase). Implementations are provided
in the infrastructure layer; tests use in-memory fakes.

Architecture follows the Ports & Adapters (Hexagonal) pattern:
- Ports: Abstract interfaces defined here (what the use cases need)
- Adapters: Concrete implementations in infrastructure/ (how it's provided)

Usage:
    from application.ports import SetLogRepository, WorkoutRepository

    class ComputeProgressionUseCase:
        def __init__(self, set_log_repo: SetLogRepository, workout_repo: WorkoutRepository):
            self._set_logs = set_log_repo
            self._workouts = workout_repo
"""

# Set logs
from application.ports.set_log_repository import SetLogRepository

# Workout plan
from application.ports.workout_repository import WorkoutRepository

# Reference data
from application.ports.program_repository import ProgramRepository
from application.ports.exercise_repository import ExerciseRepository

# Derived results
from application.ports.recommendation_repository import RecommendationRepository
from application.ports.achievement_repository import AchievementRepository

__all__ = [
    "SetLogRepository",
    "WorkoutRepository",
    "ProgramRepository",
    "ExerciseRepository",
    "RecommendationRepository",
    "AchievementRepository",
]
