"""
Workout Repository Interface (Port).

This module defines the abstract interface for the user's workout plan:
template rows (`workout_exercises`), completion records (`workout_logs`)
and plan replacement after program generation.
"""
from datetime import datetime
from typing import List, Protocol

from domain.models import PlannedWorkout, WorkoutExerciseTemplate


class WorkoutRepository(Protocol):
    """
    Abstract interface for workout plan persistence.
    """

    def fetch_workout_exercises(self, workout_id: str) -> List[WorkoutExerciseTemplate]:
        """
        Get the exercise template rows of a workout, joined with exercise name
        and muscle group.

        Args:
            workout_id: Workout ID

        Returns:
            Template rows (empty if the workout has none)
        """
        ...

    def fetch_workout_log_timestamps(self, user_id: str) -> List[datetime]:
        """
        Get the completion timestamps of all of a user's workouts.

        Args:
            user_id: User ID

        Returns:
            Timestamps ordered newest first
        """
        ...

    def replace_user_plan(
        self,
        user_id: str,
        workouts: List[PlannedWorkout],
    ) -> List[str]:
        """
        Replace the user's current plan with newly generated workouts.

        Old workouts, their template rows and workout logs are removed.
        Set logs are preserved with their workout reference cleared so that
        exercise history survives a plan change.

        Args:
            user_id: User ID
            workouts: Workouts to create, in order

        Returns:
            IDs of the created workouts
        """
        ...
