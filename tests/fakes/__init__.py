"""
Fake Repository Implementations for Testing.

This package provides in-memory fake implementations of repository interfaces
for fast, isolated testing. No database or external dependencies required.

Features:
- All fakes implement the same Protocol interfaces as real implementations
- Supports seeding with test data
- Supports reset() for test isolation
- Factory functions for common test scenarios

Usage:
    from tests.fakes import FakeSetLogRepository, make_set_log

    repo = FakeSetLogRepository()
    repo.seed([make_set_log(weight=135, reps_completed=10)])
"""
from datetime import datetime, timezone
from typing import Optional

from domain.models import SetLog

from tests.fakes.set_log_repository import FakeSetLogRepository, FailingSetLogRepository
from tests.fakes.workout_repository import FakeWorkoutRepository
from tests.fakes.program_repository import FakeProgramRepository
from tests.fakes.exercise_repository import FakeExerciseRepository
from tests.fakes.recommendation_repository import FakeRecommendationRepository
from tests.fakes.achievement_repository import FakeAchievementRepository


# =============================================================================
# Factory Functions
# =============================================================================


def make_set_log(
    *,
    user_id: str = "user-1",
    exercise_id: str = "ex-bench",
    workout_id: Optional[str] = "w1",
    set_number: int = 1,
    weight: float = 135.0,
    reps_completed: int = 10,
    rpe: Optional[int] = None,
    created_at: Optional[datetime] = None,
    exercise_name: Optional[str] = None,
    muscle_group: Optional[str] = None,
) -> SetLog:
    """Build a SetLog with sensible defaults."""
    return SetLog(
        user_id=user_id,
        exercise_id=exercise_id,
        workout_id=workout_id,
        set_number=set_number,
        weight=weight,
        reps_completed=reps_completed,
        rpe=rpe,
        created_at=created_at or datetime(2024, 3, 4, 18, 0, tzinfo=timezone.utc),
        exercise_name=exercise_name,
        muscle_group=muscle_group,
    )


__all__ = [
    # Fakes
    "FakeSetLogRepository",
    "FailingSetLogRepository",
    "FakeWorkoutRepository",
    "FakeProgramRepository",
    "FakeExerciseRepository",
    "FakeRecommendationRepository",
    "FakeAchievementRepository",
    # Factories
    "make_set_log",
]
