"""
Track Progress Use Case.

Streaks, personal records and weekly volume for the progress screen and the
workout completion celebration.
"""
import logging
from dataclasses import dataclass, field
from datetime import datetime, timedelta, timezone, tzinfo
from typing import Callable, List, Optional

from application.exceptions import FetchTimeoutError
from application.ports import (
    AchievementRepository,
    SetLogRepository,
    WorkoutRepository,
)
from backend.core.personal_records import heaviest_sets, personal_record
from backend.core.streaks import compute_streak_data
from backend.core.volume import (
    VOLUME_WINDOW_DAYS,
    MuscleGroupVolume,
    volume_report,
    volume_target,
)
from domain.models import Achievement, PersonalRecord, StreakData

logger = logging.getLogger(__name__)


def utc_now() -> datetime:
    return datetime.now(timezone.utc)


@dataclass
class WeeklyVolumeResult:
    """Sets per muscle group over the last week against the goal's target."""
    goal: str
    target: int
    since: datetime
    muscle_groups: List[MuscleGroupVolume] = field(default_factory=list)

    @property
    def total_sets(self) -> int:
        return sum(group.sets for group in self.muscle_groups)


class TrackProgressUseCase:
    """
    Use case for streaks, PR detection and weekly volume.

    Args:
        set_log_repo: Repository for set history
        workout_repo: Repository for workout completion timestamps
        achievement_repo: Repository PR achievements are appended to
        tz: Timezone whose calendar defines streak weeks
        clock: Returns the current time (injected for tests)
    """

    def __init__(
        self,
        set_log_repo: SetLogRepository,
        workout_repo: WorkoutRepository,
        achievement_repo: AchievementRepository,
        tz: tzinfo = timezone.utc,
        clock: Callable[[], datetime] = utc_now,
    ):
        self._set_logs = set_log_repo
        self._workouts = workout_repo
        self._achievements = achievement_repo
        self._tz = tz
        self._clock = clock

    def compute_streak(self, user_id: str) -> StreakData:
        """
        Compute the user's weekly training streak.

        Returns:
            StreakData, zeroed when the user has no completed workouts or the
            completion history could not be read in time
        """
        try:
            timestamps = self._workouts.fetch_workout_log_timestamps(user_id)
        except FetchTimeoutError:
            logger.warning(f"Timed out fetching workout logs for user {user_id}")
            return StreakData()

        streak = compute_streak_data(timestamps, self._clock(), self._tz)
        logger.info(
            f"Streak for user {user_id}: current={streak.current_streak} "
            f"longest={streak.longest_streak} total={streak.total_workouts}"
        )
        return streak

    def detect_prs(self, user_id: str, workout_id: str) -> List[PersonalRecord]:
        """
        Detect weight PRs set in a workout and record them as achievements.

        Each detected PR appends one achievement row; running detection twice
        for the same workout appends twice.

        Args:
            user_id: User who completed the workout
            workout_id: Completed workout

        Returns:
            Detected PRs in the order their exercises were first logged
        """
        try:
            logs = self._set_logs.fetch_workout_set_logs(user_id, workout_id)
        except FetchTimeoutError:
            logger.warning(f"Timed out fetching set logs for workout {workout_id}")
            return []

        if not logs:
            return []

        records: List[PersonalRecord] = []
        achieved_at = self._clock()
        for exercise_id, top_set in heaviest_sets(logs).items():
            if top_set.weight <= 0:
                continue
            try:
                previous_best = self._set_logs.fetch_historical_max_weight(
                    user_id,
                    exercise_id,
                    exclude_workout_id=workout_id,
                )
            except FetchTimeoutError:
                logger.warning(
                    f"Timed out fetching best weight for exercise {exercise_id}, skipping"
                )
                continue

            record = personal_record(top_set, previous_best)
            if record is None:
                continue

            self._achievements.insert_achievement(
                Achievement.from_personal_record(user_id, record, achieved_at)
            )
            records.append(record)

        if records:
            logger.info(f"User {user_id} set {len(records)} PRs in workout {workout_id}")
        return records

    def weekly_volume(self, user_id: str, goal: Optional[str] = None) -> WeeklyVolumeResult:
        """
        Sets per muscle group over the last seven days.

        Args:
            user_id: User ID
            goal: Training goal selecting the target (default "general")

        Returns:
            WeeklyVolumeResult
        """
        goal = (goal or "general").strip().lower()
        since = self._clock() - timedelta(days=VOLUME_WINDOW_DAYS)
        logs = self._set_logs.fetch_set_logs_since(user_id, since)
        return WeeklyVolumeResult(
            goal=goal,
            target=volume_target(goal),
            since=since,
            muscle_groups=volume_report(logs, goal),
        )
