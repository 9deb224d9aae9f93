"""
Supabase implementation of RecommendationRepository.

`progression_recommendations` has a unique constraint on
(user_id, exercise_id); writes upsert on it so the latest computation wins.
"""
import logging
from datetime import datetime, timezone
from typing import Dict, List

from supabase import Client

from domain.models import ProgressionRecommendation
from infrastructure.db.query import execute, parse_rows

logger = logging.getLogger(__name__)

CONFLICT_KEY = "user_id,exercise_id"


class SupabaseRecommendationRepository:
    """
    Supabase implementation of RecommendationRepository protocol.
    """

    def __init__(self, client: Client):
        """
        Initialize with Supabase client.

        Args:
            client: Supabase client instance (injected, not global)
        """
        self._client = client

    def upsert_recommendation(self, recommendation: ProgressionRecommendation) -> None:
        row = recommendation.to_row()
        row["created_at"] = datetime.now(timezone.utc).isoformat()
        execute(
            self._client.table("progression_recommendations").upsert(
                row, on_conflict=CONFLICT_KEY
            ),
            f"saving recommendation for exercise {recommendation.exercise_id}",
        )

    def fetch_recommendations(
        self,
        user_id: str,
        exercise_ids: List[str],
    ) -> Dict[str, ProgressionRecommendation]:
        if not exercise_ids:
            return {}
        rows = execute(
            self._client.table("progression_recommendations")
            .select("*")
            .eq("user_id", user_id)
            .in_("exercise_id", exercise_ids),
            "fetching recommendations",
        )
        recommendations = parse_rows(ProgressionRecommendation, rows, "progression_recommendations")
        return {rec.exercise_id: rec for rec in recommendations}

    def delete_for_user(self, user_id: str) -> None:
        execute(
            self._client.table("progression_recommendations").delete().eq("user_id", user_id),
            f"deleting recommendations for user {user_id}",
        )
