"""
Pydantic schemas for API requests and responses.

Organized by feature/domain:
- training: Progression, program and progress models
"""

from api.schemas.training import (
    ComputeProgressionResponse,
    GeneratedWorkoutSummary,
    GenerateProgramRequest,
    GenerateProgramResponse,
    MatchProgramsRequest,
    MuscleGroupVolumeItem,
    PersonalRecordsResponse,
    RecommendationsResponse,
    WeeklyVolumeResponse,
)

__all__ = [
    "ComputeProgressionResponse",
    "RecommendationsResponse",
    "MatchProgramsRequest",
    "GenerateProgramRequest",
    "GenerateProgramResponse",
    "GeneratedWorkoutSummary",
    "PersonalRecordsResponse",
    "MuscleGroupVolumeItem",
    "WeeklyVolumeResponse",
]
