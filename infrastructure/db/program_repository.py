"""
Supabase implementation of ProgramRepository.

Training programs, their workout templates and template exercises are static
reference data; this repository only reads them.
"""
import logging
from typing import List, Optional

from supabase import Client

from domain.models import ProgramWorkout, TrainingProgram
from infrastructure.db.query import execute, parse_rows

logger = logging.getLogger(__name__)


class SupabaseProgramRepository:
    """
    Supabase implementation of ProgramRepository protocol.
    """

    def __init__(self, client: Client):
        """
        Initialize with Supabase client.

        Args:
            client: Supabase client instance (injected, not global)
        """
        self._client = client

    def fetch_training_programs(self) -> List[TrainingProgram]:
        rows = execute(
            self._client.table("training_programs").select("*").order("category"),
            "fetching training programs",
        )
        return parse_rows(TrainingProgram, rows, "training_programs")

    def get_by_slug(self, slug: str) -> Optional[TrainingProgram]:
        rows = execute(
            self._client.table("training_programs").select("*").eq("slug", slug).limit(1),
            f"fetching program {slug}",
        )
        programs = parse_rows(TrainingProgram, rows, "training_programs")
        return programs[0] if programs else None

    def fetch_program_workouts(self, program_id: str) -> List[ProgramWorkout]:
        rows = execute(
            self._client.table("program_workouts")
            .select("*, program_workout_exercises(*)")
            .eq("program_id", program_id)
            .order("day_number"),
            f"fetching workouts for program {program_id}",
        )
        workouts = []
        for row in rows:
            flat = {k: v for k, v in row.items() if k != "program_workout_exercises"}
            flat["exercises"] = row.get("program_workout_exercises") or []
            workouts.append(flat)
        return parse_rows(ProgramWorkout, workouts, "program_workouts")
