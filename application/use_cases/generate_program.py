"""
Generate Program Use Case.

Creates the user's workout plan from a training program after onboarding (or
when they switch programs). The previous plan is replaced; set history is
kept so progression and PRs carry over.
"""
import logging
from dataclasses import dataclass, field
from typing import List

from application.exceptions import ProgramNotFoundError
from application.ports import (
    ExerciseRepository,
    ProgramRepository,
    RecommendationRepository,
    WorkoutRepository,
)
from backend.core.program_builder import build_plan, resolve_program_slug
from domain.models import PlannedWorkout, TrainingProgram, UserTrainingProfile

logger = logging.getLogger(__name__)


@dataclass
class GenerateProgramResult:
    """Result of generating a plan."""
    program: TrainingProgram
    workout_ids: List[str] = field(default_factory=list)
    workouts: List[PlannedWorkout] = field(default_factory=list)


class GenerateProgramUseCase:
    """
    Use case for building and persisting a user's plan.
    """

    def __init__(
        self,
        program_repo: ProgramRepository,
        exercise_repo: ExerciseRepository,
        workout_repo: WorkoutRepository,
        recommendation_repo: RecommendationRepository,
    ):
        """
        Initialize with required dependencies.

        Args:
            program_repo: Repository for programs and their templates
            exercise_repo: Repository for the exercise catalog
            workout_repo: Repository the plan is written to
            recommendation_repo: Repository cleared when the plan is replaced
        """
        self._programs = program_repo
        self._exercises = exercise_repo
        self._workouts = workout_repo
        self._recommendations = recommendation_repo

    def execute(self, user_id: str, profile: UserTrainingProfile) -> GenerateProgramResult:
        """
        Generate and store the user's plan.

        The plan is built completely before anything is written, so a
        generation failure leaves the existing plan untouched.

        Args:
            user_id: User ID
            profile: Onboarding answers

        Returns:
            GenerateProgramResult with the created workout IDs

        Raises:
            ProgramNotFoundError: If the program slug does not exist
            ProgramGenerationError: If no plan can be built from the program
        """
        slug = resolve_program_slug(profile)
        program = self._programs.get_by_slug(slug)
        if program is None:
            raise ProgramNotFoundError(slug)

        templates = self._programs.fetch_program_workouts(program.id) if program.id else []
        catalog = self._exercises.fetch_exercises()
        plan = build_plan(program, templates, catalog, profile)

        workout_ids = self._workouts.replace_user_plan(user_id, plan)
        self._recommendations.delete_for_user(user_id)

        logger.info(
            f"Generated {len(workout_ids)} workouts for user {user_id} from program {slug}"
        )
        return GenerateProgramResult(program=program, workout_ids=workout_ids, workouts=plan)
