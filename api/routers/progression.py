"""
Progression router.

Endpoints for the double progression engine:
- Compute recommendations after a workout is completed
- Read stored recommendations for the exercises of the next workout
"""
from typing import Optional

from fastapi import APIRouter, Depends, Path, Query

from api.deps import get_compute_progression_use_case, get_current_user
from api.schemas import ComputeProgressionResponse, RecommendationsResponse
from application.use_cases import ComputeProgressionUseCase

router = APIRouter(
    prefix="/progression",
    tags=["Progression"],
)


@router.post(
    "/workouts/{workout_id}/compute",
    response_model=ComputeProgressionResponse,
)
def compute_progression(
    workout_id: str = Path(..., min_length=1, description="Completed workout ID"),
    user_id: str = Depends(get_current_user),
    use_case: ComputeProgressionUseCase = Depends(get_compute_progression_use_case),
) -> ComputeProgressionResponse:
    """
    Compute next-session recommendations for every exercise in a workout.

    Exercises without history are skipped; a workout with no exercises
    returns an empty list.
    """
    result = use_case.execute(user_id=user_id, workout_id=workout_id)
    return ComputeProgressionResponse(
        workout_id=result.workout_id,
        recommendations=result.recommendations,
        skipped_exercise_ids=result.skipped_exercise_ids,
        count=len(result.recommendations),
    )


@router.get("/recommendations", response_model=RecommendationsResponse)
def get_recommendations(
    exercise_ids: Optional[str] = Query(
        None, description="Comma-separated exercise IDs"
    ),
    user_id: str = Depends(get_current_user),
    use_case: ComputeProgressionUseCase = Depends(get_compute_progression_use_case),
) -> RecommendationsResponse:
    """
    Get the current recommendation for each requested exercise.

    Exercises without a stored recommendation are omitted from the map.
    """
    ids = [eid.strip() for eid in (exercise_ids or "").split(",") if eid.strip()]
    return RecommendationsResponse(
        recommendations=use_case.get_recommendations(user_id, ids),
    )
