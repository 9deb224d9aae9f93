"""
Infrastructure Layer for the Liftlog API.

This package contains concrete implementations of repository interfaces:
- db/: Supabase database implementations
"""

# Re-export database repositories for convenient access
from infrastructure.db import (
    SupabaseAchievementRepository,
    SupabaseExerciseRepository,
    SupabaseProgramRepository,
    SupabaseRecommendationRepository,
    SupabaseSetLogRepository,
    SupabaseWorkoutRepository,
)

__all__ = [
    "SupabaseSetLogRepository",
    "SupabaseWorkoutRepository",
    "SupabaseProgramRepository",
    "SupabaseExerciseRepository",
    "SupabaseRecommendationRepository",
    "SupabaseAchievementRepository",
]
