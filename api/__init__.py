"""
API package for the Liftlog API.

This package contains:
- deps.py: FastAPI dependency providers for DI
- routers/: API route handlers
- schemas/: Request and response models
"""

# Re-export dependency providers for convenient access
from api.deps import (
    get_settings,
    get_supabase_client,
    get_supabase_client_required,
    get_set_log_repo,
    get_workout_repo,
    get_program_repo,
    get_exercise_repo,
    get_recommendation_repo,
    get_achievement_repo,
    get_current_user,
)

__all__ = [
    # Settings
    "get_settings",
    # Database
    "get_supabase_client",
    "get_supabase_client_required",
    # Repositories
    "get_set_log_repo",
    "get_workout_repo",
    "get_program_repo",
    "get_exercise_repo",
    "get_recommendation_repo",
    "get_achievement_repo",
    # Authentication
    "get_current_user",
]
