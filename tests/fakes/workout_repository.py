"""
Fake Workout Repository for Testing.

In-memory implementation of WorkoutRepository for fast, isolated testing.
"""
import uuid
from datetime import datetime
from typing import Any, Dict, List, Optional, Union

from application.exceptions import FetchTimeoutError, RepositoryError
from domain.models import PlannedWorkout, WorkoutExerciseTemplate


class FakeWorkoutRepository:
    """
    In-memory fake implementation of WorkoutRepository.

    Template rows and completion timestamps are seeded directly; plans
    written by replace_user_plan are kept per user for assertions.
    """

    def __init__(self):
        self._templates: Dict[str, List[WorkoutExerciseTemplate]] = {}
        self._completions: Dict[str, List[datetime]] = {}
        self._plans: Dict[str, List[Dict[str, Any]]] = {}
        self.timeout_workout_ids: set = set()
        self.timeout_user_ids: set = set()
        self.replace_error: Optional[RepositoryError] = None
        self.replace_calls: int = 0

    def reset(self) -> None:
        """Clear all stored data."""
        self._templates.clear()
        self._completions.clear()
        self._plans.clear()
        self.timeout_workout_ids.clear()
        self.timeout_user_ids.clear()
        self.replace_error = None
        self.replace_calls = 0

    def seed_templates(
        self,
        workout_id: str,
        templates: List[Union[WorkoutExerciseTemplate, Dict[str, Any]]],
    ) -> None:
        rows = []
        for template in templates:
            if isinstance(template, dict):
                template = WorkoutExerciseTemplate.model_validate(
                    {"workout_id": workout_id, **template}
                )
            rows.append(template)
        self._templates.setdefault(workout_id, []).extend(rows)

    def seed_completions(self, user_id: str, timestamps: List[datetime]) -> None:
        self._completions.setdefault(user_id, []).extend(timestamps)

    def get_plan(self, user_id: str) -> List[Dict[str, Any]]:
        """Workouts created for a user by replace_user_plan."""
        return list(self._plans.get(user_id, []))

    def fetch_workout_exercises(self, workout_id: str) -> List[WorkoutExerciseTemplate]:
        if workout_id in self.timeout_workout_ids:
            raise FetchTimeoutError(f"Timed out fetching exercises for workout {workout_id}")
        return list(self._templates.get(workout_id, []))

    def fetch_workout_log_timestamps(self, user_id: str) -> List[datetime]:
        if user_id in self.timeout_user_ids:
            raise FetchTimeoutError(f"Timed out fetching workout logs for user {user_id}")
        return sorted(self._completions.get(user_id, []), reverse=True)

    def replace_user_plan(self, user_id: str, workouts: List[PlannedWorkout]) -> List[str]:
        self.replace_calls += 1
        if self.replace_error is not None:
            raise self.replace_error
        created = []
        for workout in workouts:
            workout_id = str(uuid.uuid4())
            created.append({"id": workout_id, "workout": workout})
        self._plans[user_id] = created
        return [item["id"] for item in created]

    def get_workout(self, user_id: str, workout_id: str) -> Optional[PlannedWorkout]:
        for item in self._plans.get(user_id, []):
            if item["id"] == workout_id:
                return item["workout"]
        return None
