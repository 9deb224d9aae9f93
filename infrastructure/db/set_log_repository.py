"""
Supabase implementation of SetLogRepository.

Reads completed sets from the `logs` table. Queries that need the exercise's
name or muscle group embed it through the `exercises` foreign key.
"""
import logging
from datetime import datetime
from typing import Any, Dict, List

from supabase import Client

from domain.models import SetLog
from infrastructure.db.query import execute, parse_rows

logger = logging.getLogger(__name__)

EXERCISE_EMBED = "exercise:exercises(id, name, muscle_group)"


def flatten_exercise(row: Dict[str, Any]) -> Dict[str, Any]:
    """Lift the embedded exercise's name and muscle group onto the row."""
    exercise = row.get("exercise") or {}
    flat = {k: v for k, v in row.items() if k != "exercise"}
    if exercise:
        flat.setdefault("exercise_id", exercise.get("id"))
        flat["exercise_name"] = exercise.get("name")
        flat["muscle_group"] = exercise.get("muscle_group")
    return flat


class SupabaseSetLogRepository:
    """
    Supabase implementation of SetLogRepository protocol.

    The client is injected via constructor for testability.
    """

    def __init__(self, client: Client):
        """
        Initialize with Supabase client.

        Args:
            client: Supabase client instance (injected, not global)
        """
        self._client = client

    def fetch_set_logs(
        self,
        user_id: str,
        exercise_id: str,
        *,
        limit: int = 30,
    ) -> List[SetLog]:
        rows = execute(
            self._client.table("logs")
            .select("*")
            .eq("user_id", user_id)
            .eq("exercise_id", exercise_id)
            .order("created_at", desc=True)
            .limit(limit),
            f"fetching set logs for exercise {exercise_id}",
        )
        return parse_rows(SetLog, rows, "logs")

    def fetch_workout_set_logs(self, user_id: str, workout_id: str) -> List[SetLog]:
        rows = execute(
            self._client.table("logs")
            .select(f"*, {EXERCISE_EMBED}")
            .eq("user_id", user_id)
            .eq("workout_id", workout_id)
            .order("created_at"),
            f"fetching set logs for workout {workout_id}",
        )
        return parse_rows(SetLog, [flatten_exercise(r) for r in rows], "logs")

    def fetch_historical_max_weight(
        self,
        user_id: str,
        exercise_id: str,
        *,
        exclude_workout_id: str,
    ) -> float:
        """
        Heaviest weight outside the given workout.

        Sets whose workout reference was cleared by a plan change still count
        as history.
        """
        rows = execute(
            self._client.table("logs")
            .select("weight")
            .eq("user_id", user_id)
            .eq("exercise_id", exercise_id)
            .or_(f"workout_id.is.null,workout_id.neq.{exclude_workout_id}")
            .gt("weight", 0)
            .order("weight", desc=True)
            .limit(1),
            f"fetching best weight for exercise {exercise_id}",
        )
        if not rows:
            return 0.0
        return float(rows[0].get("weight") or 0.0)

    def fetch_set_logs_since(self, user_id: str, since: datetime) -> List[SetLog]:
        rows = execute(
            self._client.table("logs")
            .select(f"*, {EXERCISE_EMBED}")
            .eq("user_id", user_id)
            .gte("created_at", since.isoformat())
            .order("created_at", desc=True),
            "fetching recent set logs",
        )
        return parse_rows(SetLog, [flatten_exercise(r) for r in rows], "logs")
