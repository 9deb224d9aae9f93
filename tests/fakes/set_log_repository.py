"""
Fake Set Log Repository for Testing.

In-memory implementation of SetLogRepository for fast, isolated testing.
"""
from datetime import datetime, timezone
from typing import Any, Dict, List, Optional, Set, Union

from application.exceptions import FetchTimeoutError, RepositoryError
from domain.models import SetLog


def _aware(value: datetime) -> datetime:
    return value if value.tzinfo else value.replace(tzinfo=timezone.utc)


class FakeSetLogRepository:
    """
    In-memory fake implementation of SetLogRepository.

    Set `timeout_exercise_ids` or `timeout_workout_ids` to make fetches for
    those exercises or workouts time out, or `fail_with` to make every call
    raise.
    """

    def __init__(self, logs: Optional[List[Union[SetLog, Dict[str, Any]]]] = None):
        self._logs: List[SetLog] = []
        self.timeout_exercise_ids: Set[str] = set()
        self.timeout_workout_ids: Set[str] = set()
        self.fail_with: Optional[Exception] = None
        self.fetch_calls: List[Dict[str, Any]] = []
        if logs:
            self.seed(logs)

    def reset(self) -> None:
        """Clear all stored data."""
        self._logs.clear()
        self.timeout_exercise_ids.clear()
        self.timeout_workout_ids.clear()
        self.fail_with = None
        self.fetch_calls.clear()

    def seed(self, logs: List[Union[SetLog, Dict[str, Any]]]) -> None:
        """Add set logs (models or row dicts)."""
        for log in logs:
            self._logs.append(log if isinstance(log, SetLog) else SetLog.model_validate(log))

    def get_all(self) -> List[SetLog]:
        return list(self._logs)

    def _check(self, exercise_id: Optional[str] = None) -> None:
        if self.fail_with is not None:
            raise self.fail_with
        if exercise_id is not None and exercise_id in self.timeout_exercise_ids:
            raise FetchTimeoutError(f"Timed out fetching set logs for exercise {exercise_id}")

    def _newest_first(self, logs: List[SetLog]) -> List[SetLog]:
        return sorted(logs, key=lambda log: _aware(log.created_at), reverse=True)

    def fetch_set_logs(
        self,
        user_id: str,
        exercise_id: str,
        *,
        limit: int = 30,
    ) -> List[SetLog]:
        self.fetch_calls.append({"user_id": user_id, "exercise_id": exercise_id, "limit": limit})
        self._check(exercise_id)
        matching = [
            log for log in self._logs
            if log.user_id == user_id and log.exercise_id == exercise_id
        ]
        return self._newest_first(matching)[:limit]

    def fetch_workout_set_logs(self, user_id: str, workout_id: str) -> List[SetLog]:
        self._check()
        if workout_id in self.timeout_workout_ids:
            raise FetchTimeoutError(f"Timed out fetching set logs for workout {workout_id}")
        return [
            log for log in self._logs
            if log.user_id == user_id and log.workout_id == workout_id
        ]

    def fetch_historical_max_weight(
        self,
        user_id: str,
        exercise_id: str,
        *,
        exclude_workout_id: str,
    ) -> float:
        self._check(exercise_id)
        weights = [
            log.weight for log in self._logs
            if log.user_id == user_id
            and log.exercise_id == exercise_id
            and log.workout_id != exclude_workout_id
        ]
        return max(weights, default=0.0)

    def fetch_set_logs_since(self, user_id: str, since: datetime) -> List[SetLog]:
        self._check()
        since = _aware(since)
        matching = [
            log for log in self._logs
            if log.user_id == user_id and _aware(log.created_at) >= since
        ]
        return self._newest_first(matching)


class FailingSetLogRepository(FakeSetLogRepository):
    """Set log repository whose every call fails."""

    def __init__(self):
        super().__init__()
        self.fail_with = RepositoryError("connection refused")
