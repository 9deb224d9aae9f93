"""
Weekly training streaks.

A streak week is a Monday-start week with at least one completed workout.
Week keys are computed on the local calendar of the configured timezone so a
late-evening workout lands in the week the user saw it in.
"""
from datetime import date, datetime, timedelta, timezone, tzinfo
from typing import Iterable, List, Set

from domain.models import StreakData

CONSECUTIVE_MIN_DAYS = 6
CONSECUTIVE_MAX_DAYS = 8


def _local_date(value: datetime, tz: tzinfo) -> date:
    if value.tzinfo is None:
        value = value.replace(tzinfo=timezone.utc)
    return value.astimezone(tz).date()


def week_key(value: datetime, tz: tzinfo = timezone.utc) -> date:
    """Monday of the week containing value, on tz's calendar."""
    local = _local_date(value, tz)
    return local - timedelta(days=local.weekday())


def are_consecutive_weeks(a: date, b: date) -> bool:
    """True if two week keys are adjacent (6 to 8 days apart, either order)."""
    return CONSECUTIVE_MIN_DAYS <= abs((b - a).days) <= CONSECUTIVE_MAX_DAYS


def longest_streak(weeks: Iterable[date]) -> int:
    """
    Longest run of consecutive week keys anywhere in history.

    Args:
        weeks: Week keys (duplicates and order do not matter)

    Returns:
        Length of the longest run, 0 for no weeks
    """
    ordered = sorted(set(weeks))
    if not ordered:
        return 0

    longest = current = 1
    for previous, week in zip(ordered, ordered[1:]):
        if are_consecutive_weeks(previous, week):
            current += 1
            longest = max(longest, current)
        else:
            current = 1
    return longest


def current_streak(weeks: Set[date], this_week: date) -> int:
    """
    Consecutive active weeks ending at this week.

    When this week has no workouts yet but last week does, counting starts
    from last week instead (one week of grace).
    """
    cursor = this_week
    if cursor not in weeks:
        cursor = this_week - timedelta(days=7)
        if cursor not in weeks:
            return 0

    streak = 0
    while cursor in weeks:
        streak += 1
        cursor -= timedelta(days=7)
    return streak


def compute_streak_data(
    completed_at: List[datetime],
    now: datetime,
    tz: tzinfo = timezone.utc,
) -> StreakData:
    """
    Summarize workout completion timestamps into streak statistics.

    Args:
        completed_at: Completion timestamps (any order)
        now: Current time
        tz: Timezone whose calendar defines week boundaries

    Returns:
        StreakData; all zeros when there are no workouts
    """
    if not completed_at:
        return StreakData()

    this_week = week_key(now, tz)
    keys = [week_key(ts, tz) for ts in completed_at]
    weeks = set(keys)

    current = current_streak(weeks, this_week)
    last = max(completed_at, key=_aware)

    return StreakData(
        current_streak=current,
        longest_streak=max(current, longest_streak(weeks)),
        total_workouts=len(completed_at),
        this_week_workouts=sum(1 for key in keys if key == this_week),
        last_workout_date=_aware(last).isoformat(),
    )


def _aware(value: datetime) -> datetime:
    if value.tzinfo is None:
        return value.replace(tzinfo=timezone.utc)
    return value
