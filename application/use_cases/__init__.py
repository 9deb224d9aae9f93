"""
Application Use Cases for the Liftlog API.

This package contains application-level use cases that orchestrate the pure
training computations in backend/core and coordinate between repository
ports. Use cases are the entry points for business operations.

Architecture follows Clean Architecture / Hexagonal pattern:
- Use cases orchestrate domain objects and repository ports
- Dependencies are injected via constructors for testability
- Use cases return domain models, not API responses

Usage:
    from application.use_cases import ComputeProgressionUseCase

    use_case = ComputeProgressionUseCase(
        set_log_repo=set_log_repo,
        workout_repo=workout_repo,
        recommendation_repo=recommendation_repo,
    )
    result = use_case.execute(user_id="user-123", workout_id="w-123")
"""

from application.use_cases.compute_progression import (
    ComputeProgressionResult,
    ComputeProgressionUseCase,
)
from application.use_cases.generate_program import (
    GenerateProgramResult,
    GenerateProgramUseCase,
)
from application.use_cases.match_programs import MatchProgramsUseCase
from application.use_cases.track_progress import (
    TrackProgressUseCase,
    WeeklyVolumeResult,
)

__all__ = [
    # Progression
    "ComputeProgressionUseCase",
    "ComputeProgressionResult",
    # Programs
    "MatchProgramsUseCase",
    "GenerateProgramUseCase",
    "GenerateProgramResult",
    # Progress
    "TrackProgressUseCase",
    "WeeklyVolumeResult",
]
