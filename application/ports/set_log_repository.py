"""
Set Log Repository Interface (Port).

This module defines the abstract interface for reading completed sets from
the `logs` table. Used by the progression engine, PR detection and weekly
volume analytics.
"""
from datetime import datetime
from typing import List, Protocol

from domain.models import SetLog


class SetLogRepository(Protocol):
    """
    Abstract interface for set log access.

    Implementations validate rows into SetLog at the boundary; callers
    never see raw dictionaries.
    """

    def fetch_set_logs(
        self,
        user_id: str,
        exercise_id: str,
        *,
        limit: int = 30,
    ) -> List[SetLog]:
        """
        Get the most recent sets of an exercise for a user.

        Args:
            user_id: User ID
            exercise_id: Exercise ID
            limit: Maximum number of sets to return

        Returns:
            Set logs ordered by created_at descending (newest first)

        Raises:
            FetchTimeoutError: If the query exceeded the fetch timeout
            RepositoryError: If the query failed
        """
        ...

    def fetch_workout_set_logs(
        self,
        user_id: str,
        workout_id: str,
    ) -> List[SetLog]:
        """
        Get every set the user logged under a workout, with exercise names.

        Args:
            user_id: User ID
            workout_id: Workout ID

        Returns:
            Set logs for the workout (any order)
        """
        ...

    def fetch_historical_max_weight(
        self,
        user_id: str,
        exercise_id: str,
        *,
        exclude_workout_id: str,
    ) -> float:
        """
        Get the heaviest weight ever logged for an exercise.

        Args:
            user_id: User ID
            exercise_id: Exercise ID
            exclude_workout_id: Workout whose sets are ignored (the current one)

        Returns:
            Highest weight, or 0.0 when there is no other history
        """
        ...

    def fetch_set_logs_since(
        self,
        user_id: str,
        since: datetime,
    ) -> List[SetLog]:
        """
        Get all sets logged since a point in time, with muscle groups.

        Args:
            user_id: User ID
            since: Inclusive lower bound on created_at

        Returns:
            Set logs ordered by created_at descending
        """
        ...
