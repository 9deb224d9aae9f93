"""
Exercise Repository Interface (Port).

This module defines the abstract interface for querying the exercises catalog.
Used by program generation to substitute exercises by equipment.
"""
from typing import List, Protocol

from domain.models import Exercise


class ExerciseRepository(Protocol):
    """
    Abstract interface for querying the exercises catalog.
    """

    def fetch_exercises(self) -> List[Exercise]:
        """
        Get all exercises from the catalog.

        Returns:
            List of exercises with name, muscle group and equipment
        """
        ...
