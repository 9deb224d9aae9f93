"""
Supabase implementation of WorkoutRepository.

Covers the user's plan: `workouts`, their `workout_exercises` template rows
and the `workout_logs` completion records.
"""
import logging
from datetime import datetime
from typing import List

from pydantic import TypeAdapter, ValidationError
from supabase import Client

from application.exceptions import RepositoryError
from domain.models import PlannedWorkout, WorkoutExerciseTemplate
from infrastructure.db.query import execute, parse_rows
from infrastructure.db.set_log_repository import EXERCISE_EMBED, flatten_exercise

logger = logging.getLogger(__name__)

_timestamp = TypeAdapter(datetime)


class SupabaseWorkoutRepository:
    """
    Supabase implementation of WorkoutRepository protocol.

    The client is injected via constructor for testability.
    """

    def __init__(self, client: Client):
        """
        Initialize with Supabase client.

        Args:
            client: Supabase client instance (injected, not global)
        """
        self._client = client

    def fetch_workout_exercises(self, workout_id: str) -> List[WorkoutExerciseTemplate]:
        rows = execute(
            self._client.table("workout_exercises")
            .select(f"*, {EXERCISE_EMBED}")
            .eq("workout_id", workout_id)
            .order("order"),
            f"fetching exercises for workout {workout_id}",
        )
        templates = []
        for row in rows:
            flat = flatten_exercise(row)
            if not flat.get("exercise_id"):
                continue
            if not flat.get("exercise_name"):
                flat.pop("exercise_name", None)
            templates.append(flat)
        return parse_rows(WorkoutExerciseTemplate, templates, "workout_exercises")

    def fetch_workout_log_timestamps(self, user_id: str) -> List[datetime]:
        rows = execute(
            self._client.table("workout_logs")
            .select("completed_at")
            .eq("user_id", user_id)
            .order("completed_at", desc=True),
            "fetching workout completions",
        )
        timestamps = []
        for row in rows:
            value = row.get("completed_at")
            if not value:
                continue
            try:
                timestamps.append(_timestamp.validate_python(value))
            except ValidationError:
                logger.warning(f"Skipping workout log with bad completed_at: {value!r}")
        return timestamps

    def replace_user_plan(self, user_id: str, workouts: List[PlannedWorkout]) -> List[str]:
        """
        Replace the user's workouts with a newly generated plan.

        Order matters: template rows and completion records go before the
        workouts they reference, and set logs are detached rather than deleted.
        """
        existing = execute(
            self._client.table("workouts").select("id").eq("user_id", user_id),
            "fetching existing workouts",
        )
        old_ids = [row["id"] for row in existing if row.get("id")]

        if old_ids:
            execute(
                self._client.table("workout_exercises").delete().in_("workout_id", old_ids),
                "deleting old workout exercises",
            )
            execute(
                self._client.table("logs").update({"workout_id": None}).in_("workout_id", old_ids),
                "detaching set logs from old workouts",
            )
            execute(
                self._client.table("workout_logs").delete().in_("workout_id", old_ids),
                "deleting old workout logs",
            )
            execute(
                self._client.table("workouts").delete().eq("user_id", user_id),
                "deleting old workouts",
            )
            logger.info(f"Removed {len(old_ids)} old workouts for user {user_id}")

        created_ids: List[str] = []
        for workout in workouts:
            created = execute(
                self._client.table("workouts").insert({
                    "user_id": user_id,
                    "name": workout.name,
                    "program_id": workout.program_id,
                    "description": workout.description,
                }),
                f"creating workout {workout.name}",
            )
            if not created or not created[0].get("id"):
                raise RepositoryError(f"Insert of workout {workout.name} returned no id")
            workout_id = created[0]["id"]
            created_ids.append(workout_id)

            if workout.exercises:
                execute(
                    self._client.table("workout_exercises").insert([
                        {
                            "workout_id": workout_id,
                            "exercise_id": exercise.exercise_id,
                            "sets": exercise.sets,
                            "reps": exercise.reps,
                            "rest_seconds": exercise.rest_seconds,
                            "order": exercise.order,
                            "rationale": exercise.rationale,
                        }
                        for exercise in workout.exercises
                    ]),
                    f"adding exercises to {workout.name}",
                )

        return created_ids
