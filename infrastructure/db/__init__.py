"""
Infrastructure Database Layer.

This package provides Supabase-backed implementations of the repository
interfaces defined in application.ports. These implementations are injected
into use cases by api.deps.

Usage:
    from supabase import create_client
    from infrastructure.db import SupabaseSetLogRepository, SupabaseWorkoutRepository

    # Create Supabase client
    client = create_client(SUPABASE_URL, SUPABASE_KEY)

    # Instantiate repositories with injected client
    set_log_repo = SupabaseSetLogRepository(client)
    workout_repo = SupabaseWorkoutRepository(client)
"""

from infrastructure.db.set_log_repository import SupabaseSetLogRepository
from infrastructure.db.workout_repository import SupabaseWorkoutRepository
from infrastructure.db.program_repository import SupabaseProgramRepository
from infrastructure.db.exercise_repository import SupabaseExerciseRepository
from infrastructure.db.recommendation_repository import SupabaseRecommendationRepository
from infrastructure.db.achievement_repository import SupabaseAchievementRepository

__all__ = [
    # Set history
    "SupabaseSetLogRepository",

    # Workout plan
    "SupabaseWorkoutRepository",

    # Reference data
    "SupabaseProgramRepository",
    "SupabaseExerciseRepository",

    # Derived results
    "SupabaseRecommendationRepository",
    "SupabaseAchievementRepository",
]
