"""
Program Repository Interface (Port).

Training programs and their workout templates are static reference data.
"""
from typing import List, Optional, Protocol

from domain.models import ProgramWorkout, TrainingProgram


class ProgramRepository(Protocol):
    """
    Read-only access to `training_programs` and `program_workouts`.
    """

    def fetch_training_programs(self) -> List[TrainingProgram]:
        """
        Get every training program.

        Returns:
            Programs ordered by category ascending
        """
        ...

    def get_by_slug(self, slug: str) -> Optional[TrainingProgram]:
        """
        Get a program by its slug.

        Args:
            slug: Program slug (e.g. "starting_strength")

        Returns:
            The program, or None if not found
        """
        ...

    def fetch_program_workouts(self, program_id: str) -> List[ProgramWorkout]:
        """
        Get a program's workout templates with their exercise slots.

        Args:
            program_id: Program ID

        Returns:
            Templates ordered by day_number ascending
        """
        ...
