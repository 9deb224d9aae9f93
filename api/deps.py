"""
FastAPI Dependency Providers for the Liftlog API.

This module provides FastAPI dependency injection functions that return
interface types (Protocols) rather than concrete implementations. This
enables clean separation of concerns and easy testing with in-memory fakes.

Architecture:
- Settings and Supabase client are cached per-process (lru_cache)
- Repository and use case providers create new instances per-request
- Auth provider wraps backend.auth

Usage in routers:
    from api.deps import get_current_user, get_track_progress_use_case
    from application.use_cases import TrackProgressUseCase

    @router.get("/progress/streak")
    def get_streak(
        user_id: str = Depends(get_current_user),
        use_case: TrackProgressUseCase = Depends(get_track_progress_use_case),
    ):
        return use_case.compute_streak(user_id)

Testing:
    # Override dependencies in tests
    app.dependency_overrides[get_set_log_repo] = lambda: FakeSetLogRepository()
"""

from functools import lru_cache
from typing import Optional

from fastapi import Depends, Header, HTTPException
from supabase import Client, ClientOptions, create_client

# Protocol types (interfaces)
from application.ports import (
    AchievementRepository,
    ExerciseRepository,
    ProgramRepository,
    RecommendationRepository,
    SetLogRepository,
    WorkoutRepository,
)
from application.use_cases import (
    ComputeProgressionUseCase,
    GenerateProgramUseCase,
    MatchProgramsUseCase,
    TrackProgressUseCase,
)

# Concrete implementations
from infrastructure import (
    SupabaseAchievementRepository,
    SupabaseExerciseRepository,
    SupabaseProgramRepository,
    SupabaseRecommendationRepository,
    SupabaseSetLogRepository,
    SupabaseWorkoutRepository,
)

from backend.settings import Settings, get_settings as _get_settings
from backend.auth import get_current_user as _get_current_user


# =============================================================================
# Settings Provider
# =============================================================================


def get_settings() -> Settings:
    """
    Get application settings.

    Returns cached Settings instance from backend.settings.
    Use this as a FastAPI dependency for settings access.

    Returns:
        Settings: Application settings instance
    """
    return _get_settings()


# =============================================================================
# Supabase Client Provider
# =============================================================================


@lru_cache
def get_supabase_client() -> Optional[Client]:
    """
    Get Supabase client instance (cached).

    Creates a Supabase client using credentials from settings, with
    PostgREST requests bounded by fetch_timeout_seconds.
    Returns None if credentials are not configured.

    Returns:
        Client: Supabase client instance, or None if not configured
    """
    settings = _get_settings()

    if not settings.supabase_url or not settings.supabase_key:
        return None

    options = ClientOptions(postgrest_client_timeout=settings.fetch_timeout_seconds)
    return create_client(settings.supabase_url, settings.supabase_key, options=options)


def get_supabase_client_required() -> Client:
    """
    Get Supabase client instance, raising if not configured.

    Use this dependency when the endpoint requires database access.

    Returns:
        Client: Supabase client instance

    Raises:
        HTTPException: 503 if Supabase is not configured
    """
    client = get_supabase_client()
    if client is None:
        raise HTTPException(
            status_code=503,
            detail="Database not available. Supabase credentials not configured.",
        )
    return client


# =============================================================================
# Repository Providers
# =============================================================================


def get_set_log_repo(
    client: Client = Depends(get_supabase_client_required),
) -> SetLogRepository:
    """
    Get SetLogRepository implementation.

    Returns a SupabaseSetLogRepository instance with injected client.
    The return type is the Protocol to enable easy mocking.

    Args:
        client: Supabase client (injected)

    Returns:
        SetLogRepository: Repository for set history
    """
    return SupabaseSetLogRepository(client)


def get_workout_repo(
    client: Client = Depends(get_supabase_client_required),
) -> WorkoutRepository:
    """
    Get WorkoutRepository implementation.

    Args:
        client: Supabase client (injected)

    Returns:
        WorkoutRepository: Repository for the user's workout plan
    """
    return SupabaseWorkoutRepository(client)


def get_program_repo(
    client: Client = Depends(get_supabase_client_required),
) -> ProgramRepository:
    """Get ProgramRepository implementation."""
    return SupabaseProgramRepository(client)


def get_exercise_repo(
    client: Client = Depends(get_supabase_client_required),
) -> ExerciseRepository:
    """Get ExerciseRepository implementation."""
    return SupabaseExerciseRepository(client)


def get_recommendation_repo(
    client: Client = Depends(get_supabase_client_required),
) -> RecommendationRepository:
    """Get RecommendationRepository implementation."""
    return SupabaseRecommendationRepository(client)


def get_achievement_repo(
    client: Client = Depends(get_supabase_client_required),
) -> AchievementRepository:
    """Get AchievementRepository implementation."""
    return SupabaseAchievementRepository(client)


# =============================================================================
# Use Case Providers
# =============================================================================


def get_compute_progression_use_case(
    set_log_repo: SetLogRepository = Depends(get_set_log_repo),
    workout_repo: WorkoutRepository = Depends(get_workout_repo),
    recommendation_repo: RecommendationRepository = Depends(get_recommendation_repo),
    settings: Settings = Depends(get_settings),
) -> ComputeProgressionUseCase:
    """Get ComputeProgressionUseCase with injected repositories."""
    return ComputeProgressionUseCase(
        set_log_repo=set_log_repo,
        workout_repo=workout_repo,
        recommendation_repo=recommendation_repo,
        history_limit=settings.progression_history_limit,
    )


def get_match_programs_use_case(
    program_repo: ProgramRepository = Depends(get_program_repo),
) -> MatchProgramsUseCase:
    """Get MatchProgramsUseCase with injected repositories."""
    return MatchProgramsUseCase(program_repo=program_repo)


def get_generate_program_use_case(
    program_repo: ProgramRepository = Depends(get_program_repo),
    exercise_repo: ExerciseRepository = Depends(get_exercise_repo),
    workout_repo: WorkoutRepository = Depends(get_workout_repo),
    recommendation_repo: RecommendationRepository = Depends(get_recommendation_repo),
) -> GenerateProgramUseCase:
    """Get GenerateProgramUseCase with injected repositories."""
    return GenerateProgramUseCase(
        program_repo=program_repo,
        exercise_repo=exercise_repo,
        workout_repo=workout_repo,
        recommendation_repo=recommendation_repo,
    )


def get_track_progress_use_case(
    set_log_repo: SetLogRepository = Depends(get_set_log_repo),
    workout_repo: WorkoutRepository = Depends(get_workout_repo),
    achievement_repo: AchievementRepository = Depends(get_achievement_repo),
    settings: Settings = Depends(get_settings),
) -> TrackProgressUseCase:
    """Get TrackProgressUseCase; streak weeks follow settings.streak_timezone."""
    return TrackProgressUseCase(
        set_log_repo=set_log_repo,
        workout_repo=workout_repo,
        achievement_repo=achievement_repo,
        tz=settings.streak_tz,
    )


# =============================================================================
# Authentication Providers
# =============================================================================


async def get_current_user(
    authorization: Optional[str] = Header(None),
    x_api_key: Optional[str] = Header(None, alias="X-API-Key"),
) -> str:
    """
    Get the current authenticated user ID.

    Wraps backend.auth.get_current_user for dependency injection.
    Supports Supabase access tokens and API keys.

    Args:
        authorization: Bearer token header
        x_api_key: API key header

    Returns:
        str: User ID from authentication

    Raises:
        HTTPException: 401 if authentication fails
    """
    return await _get_current_user(
        authorization=authorization,
        x_api_key=x_api_key,
    )


# =============================================================================
# Exports
# =============================================================================

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
    # Use cases
    "get_compute_progression_use_case",
    "get_match_programs_use_case",
    "get_generate_program_use_case",
    "get_track_progress_use_case",
    # Authentication
    "get_current_user",
]
