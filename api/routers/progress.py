"""
Progress router.

Endpoints for the progress screen and workout completion:
- Weekly training streak
- Personal record detection for a completed workout
- Weekly volume per muscle group
"""
from typing import Optional

from fastapi import APIRouter, Depends, Path, Query

from api.deps import get_current_user, get_track_progress_use_case
from api.schemas import (
    MuscleGroupVolumeItem,
    PersonalRecordsResponse,
    WeeklyVolumeResponse,
)
from application.use_cases import TrackProgressUseCase
from domain.models import StreakData

router = APIRouter(
    prefix="/progress",
    tags=["Progress"],
)


@router.get("/streak", response_model=StreakData)
def get_streak(
    user_id: str = Depends(get_current_user),
    use_case: TrackProgressUseCase = Depends(get_track_progress_use_case),
) -> StreakData:
    """Get the user's weekly training streak."""
    return use_case.compute_streak(user_id)


@router.post(
    "/workouts/{workout_id}/records",
    response_model=PersonalRecordsResponse,
)
def detect_personal_records(
    workout_id: str = Path(..., min_length=1, description="Completed workout ID"),
    user_id: str = Depends(get_current_user),
    use_case: TrackProgressUseCase = Depends(get_track_progress_use_case),
) -> PersonalRecordsResponse:
    """
    Detect weight PRs set in a completed workout.

    Each PR is also recorded as an achievement.
    """
    records = use_case.detect_prs(user_id, workout_id)
    return PersonalRecordsResponse(workout_id=workout_id, records=records, count=len(records))


@router.get("/volume", response_model=WeeklyVolumeResponse)
def get_weekly_volume(
    goal: Optional[str] = Query(None, description="strength, hypertrophy or general"),
    user_id: str = Depends(get_current_user),
    use_case: TrackProgressUseCase = Depends(get_track_progress_use_case),
) -> WeeklyVolumeResponse:
    """Get sets per muscle group over the last seven days against the goal's target."""
    result = use_case.weekly_volume(user_id, goal)
    return WeeklyVolumeResponse(
        goal=result.goal,
        target=result.target,
        since=result.since,
        total_sets=result.total_sets,
        muscle_groups=[
            MuscleGroupVolumeItem(
                muscle_group=group.muscle_group,
                sets=group.sets,
                target=group.target,
                remaining=group.remaining,
                on_target=group.on_target,
            )
            for group in result.muscle_groups
        ],
    )
