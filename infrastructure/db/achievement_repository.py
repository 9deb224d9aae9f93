"""
Supabase implementation of AchievementRepository.
"""
import logging

from supabase import Client

from domain.models import Achievement
from infrastructure.db.query import execute

logger = logging.getLogger(__name__)


class SupabaseAchievementRepository:
    """
    Appends rows to `user_achievements`. Rows are never updated.
    """

    def __init__(self, client: Client):
        self._client = client

    def insert_achievement(self, achievement: Achievement) -> None:
        execute(
            self._client.table("user_achievements").insert(achievement.to_row()),
            f"recording {achievement.achievement_type} achievement",
        )
        logger.info(
            f"Recorded {achievement.achievement_type} for user {achievement.user_id}: "
            f"{achievement.achievement_value.get('exercise_name')}"
        )
