"""
Supabase implementation of ExerciseRepository.

Reads the `exercises` catalog used for equipment-based substitution.
"""
import logging
from typing import List

from supabase import Client

from domain.models import Exercise
from infrastructure.db.query import execute, parse_rows

logger = logging.getLogger(__name__)


class SupabaseExerciseRepository:
    """
    Supabase implementation of ExerciseRepository protocol.
    """

    def __init__(self, client: Client):
        """
        Initialize with Supabase client.

        Args:
            client: Supabase client instance (injected, not global)
        """
        self._client = client

    def fetch_exercises(self) -> List[Exercise]:
        rows = execute(
            self._client.table("exercises")
            .select("id, name, muscle_group, equipment_type")
            .order("name"),
            "fetching exercise catalog",
        )
        exercises = parse_rows(Exercise, rows, "exercises")
        logger.info(f"Loaded {len(exercises)} exercises")
        return exercises
