"""
Achievement Repository Interface (Port).
"""
from typing import Protocol

from domain.models import Achievement


class AchievementRepository(Protocol):
    """
    Append-only store for `user_achievements`.
    """

    def insert_achievement(self, achievement: Achievement) -> None:
        """
        Append an achievement row. Never upserts.

        Args:
            achievement: Achievement to record
        """
        ...
