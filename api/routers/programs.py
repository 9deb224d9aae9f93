"""
Programs router.

Endpoints for choosing and generating a training program:
- Rank programs against onboarding answers
- Generate the user's workout plan from a program
"""
import logging

from fastapi import APIRouter, Depends

from api.deps import (
    get_current_user,
    get_generate_program_use_case,
    get_match_programs_use_case,
)
from api.schemas import (
    GeneratedWorkoutSummary,
    GenerateProgramRequest,
    GenerateProgramResponse,
    MatchProgramsRequest,
)
from application.use_cases import GenerateProgramUseCase, MatchProgramsUseCase
from domain.models import ProgramMatches, UserTrainingProfile

logger = logging.getLogger(__name__)

router = APIRouter(
    prefix="/programs",
    tags=["Programs"],
)


@router.post("/match", response_model=ProgramMatches)
def match_programs(
    request: MatchProgramsRequest,
    user_id: str = Depends(get_current_user),
    use_case: MatchProgramsUseCase = Depends(get_match_programs_use_case),
) -> ProgramMatches:
    """
    Rank training programs for the user's goals, experience and schedule.

    Returns top picks (score >= 40) and other options (score 1-39).
    """
    return use_case.execute(
        goals=request.goals,
        experience=request.experience,
        days_per_week=request.days_per_week,
    )


@router.post("/generate", response_model=GenerateProgramResponse, status_code=201)
def generate_program(
    request: GenerateProgramRequest,
    user_id: str = Depends(get_current_user),
    use_case: GenerateProgramUseCase = Depends(get_generate_program_use_case),
) -> GenerateProgramResponse:
    """
    Replace the user's plan with workouts generated from a program.

    Uses `program_slug` when given, otherwise the default program for `goal`.
    """
    profile = UserTrainingProfile(**request.model_dump())
    result = use_case.execute(user_id=user_id, profile=profile)
    return GenerateProgramResponse(
        program_slug=result.program.slug,
        program_name=result.program.name,
        workouts=[
            GeneratedWorkoutSummary(
                id=workout_id,
                name=workout.name,
                exercise_count=len(workout.exercises),
            )
            for workout_id, workout in zip(result.workout_ids, result.workouts)
        ],
    )
