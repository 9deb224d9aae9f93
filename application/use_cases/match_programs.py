"""
Match Programs Use Case.

Ranks the training program catalog for a user's onboarding answers.
"""
import logging
from typing import List

from application.ports import ProgramRepository
from backend.core.program_matcher import rank_programs
from domain.models import ExperienceLevel, ProgramMatches

logger = logging.getLogger(__name__)


class MatchProgramsUseCase:
    """Use case for scoring and ranking training programs."""

    def __init__(self, program_repo: ProgramRepository):
        self._programs = program_repo

    def execute(
        self,
        goals: List[str],
        experience: ExperienceLevel,
        days_per_week: int,
    ) -> ProgramMatches:
        """
        Rank all programs for the user.

        Args:
            goals: Goals in priority order (may be empty)
            experience: User's experience level
            days_per_week: Days per week the user can train

        Returns:
            ProgramMatches (empty when there are no programs)
        """
        programs = self._programs.fetch_training_programs()
        if not programs:
            logger.info("No training programs available to match")
            return ProgramMatches()
        return rank_programs(programs, goals, experience, days_per_week)
