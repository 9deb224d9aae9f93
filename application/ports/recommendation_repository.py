"""
Recommendation Repository Interface (Port).

`progression_recommendations` holds at most one live row per
(user_id, exercise_id). Writes are upserts with last-write-wins semantics.
"""
from typing import Dict, List, Protocol

from domain.models import ProgressionRecommendation


class RecommendationRepository(Protocol):
    """
    Keyed table of progression recommendations.
    """

    def upsert_recommendation(self, recommendation: ProgressionRecommendation) -> None:
        """
        Insert or overwrite the recommendation for (user_id, exercise_id).

        Args:
            recommendation: Recommendation to store
        """
        ...

    def fetch_recommendations(
        self,
        user_id: str,
        exercise_ids: List[str],
    ) -> Dict[str, ProgressionRecommendation]:
        """
        Get the stored recommendations for a set of exercises.

        Args:
            user_id: User ID
            exercise_ids: Exercises to look up

        Returns:
            Mapping of exercise_id to recommendation (missing ids are absent)
        """
        ...

    def delete_for_user(self, user_id: str) -> None:
        """
        Remove all of a user's recommendations (used when the plan is replaced).

        Args:
            user_id: User ID
        """
        ...
