"""
Compute Progression Use Case.

Runs after a workout is completed: for every exercise of the workout, reads
the user's recent sets, asks the progression engine for a recommendation and
upserts it so the next session can show it.
"""
import logging
from dataclasses import dataclass, field
from typing import Dict, List

from application.exceptions import FetchTimeoutError
from application.ports import (
    RecommendationRepository,
    SetLogRepository,
    WorkoutRepository,
)
from backend.core.progression_engine import group_into_sessions, recommend
from domain.models import ProgressionRecommendation

logger = logging.getLogger(__name__)

DEFAULT_HISTORY_LIMIT = 30


@dataclass
class ComputeProgressionResult:
    """Result of computing recommendations for a workout."""
    workout_id: str
    recommendations: List[ProgressionRecommendation] = field(default_factory=list)
    skipped_exercise_ids: List[str] = field(default_factory=list)


class ComputeProgressionUseCase:
    """
    Use case for the double progression engine.

    Absent data is never an error: exercises without usable history are
    skipped, and a workout without template rows yields no recommendations.
    """

    def __init__(
        self,
        set_log_repo: SetLogRepository,
        workout_repo: WorkoutRepository,
        recommendation_repo: RecommendationRepository,
        history_limit: int = DEFAULT_HISTORY_LIMIT,
    ):
        """
        Initialize with required dependencies.

        Args:
            set_log_repo: Repository for set history
            workout_repo: Repository for workout template rows
            recommendation_repo: Repository recommendations are upserted into
            history_limit: Number of recent sets read per exercise
        """
        self._set_logs = set_log_repo
        self._workouts = workout_repo
        self._recommendations = recommendation_repo
        self._history_limit = history_limit

    def execute(self, user_id: str, workout_id: str) -> ComputeProgressionResult:
        """
        Compute and store a recommendation for each exercise in a workout.

        Args:
            user_id: User who completed the workout
            workout_id: Completed workout

        Returns:
            ComputeProgressionResult with the stored recommendations

        Raises:
            RepositoryError: If a fetch or the upsert failed (timeouts excepted)
        """
        result = ComputeProgressionResult(workout_id=workout_id)

        try:
            templates = self._workouts.fetch_workout_exercises(workout_id)
        except FetchTimeoutError:
            logger.warning(f"Timed out fetching exercises for workout {workout_id}")
            return result

        if not templates:
            logger.info(f"Workout {workout_id} has no exercises, nothing to compute")
            return result

        for template in templates:
            try:
                logs = self._set_logs.fetch_set_logs(
                    user_id,
                    template.exercise_id,
                    limit=self._history_limit,
                )
            except FetchTimeoutError:
                logger.warning(
                    f"Timed out fetching history for exercise {template.exercise_id}, skipping"
                )
                result.skipped_exercise_ids.append(template.exercise_id)
                continue

            recommendation = recommend(user_id, template, group_into_sessions(logs))
            if recommendation is None:
                result.skipped_exercise_ids.append(template.exercise_id)
                continue

            self._recommendations.upsert_recommendation(recommendation)
            result.recommendations.append(recommendation)

        logger.info(
            f"Computed {len(result.recommendations)} recommendations for workout {workout_id} "
            f"({len(result.skipped_exercise_ids)} skipped)"
        )
        return result

    def get_recommendations(
        self,
        user_id: str,
        exercise_ids: List[str],
    ) -> Dict[str, ProgressionRecommendation]:
        """
        Get the stored recommendations for the given exercises.

        Args:
            user_id: User ID
            exercise_ids: Exercises to look up (duplicates ignored)

        Returns:
            Mapping of exercise_id to its current recommendation
        """
        unique_ids = list(dict.fromkeys(eid for eid in exercise_ids if eid))
        if not unique_ids:
            return {}
        return self._recommendations.fetch_recommendations(user_id, unique_ids)
