"""
Weight personal record detection.

A PR is declared when the heaviest set of an exercise in a workout beats the
heaviest set ever logged for it outside that workout. A first-ever log has no
baseline and is never a PR.
"""
from typing import Dict, List, Optional

from domain.models import PersonalRecord, SetLog


def heaviest_sets(logs: List[SetLog]) -> Dict[str, SetLog]:
    """
    Heaviest set per exercise.

    On equal weight the first set seen is kept, so its reps are the ones
    reported.

    Args:
        logs: Set logs of one workout

    Returns:
        Mapping of exercise_id to its heaviest set, in first-seen order
    """
    best: Dict[str, SetLog] = {}
    for log in logs:
        current = best.get(log.exercise_id)
        if current is None or log.weight > current.weight:
            best[log.exercise_id] = log
    return best


def personal_record(top_set: SetLog, previous_best: float) -> Optional[PersonalRecord]:
    """
    Compare a workout's heaviest set to the historical best.

    Args:
        top_set: Heaviest set of the exercise in the workout
        previous_best: Heaviest weight logged outside the workout (0 if none)

    Returns:
        PersonalRecord, or None if the set is not a PR
    """
    if top_set.weight <= 0 or previous_best <= 0:
        return None
    if top_set.weight <= previous_best:
        return None

    return PersonalRecord(
        exercise_id=top_set.exercise_id,
        exercise_name=top_set.exercise_name or "Unknown",
        new_weight=top_set.weight,
        previous_best=previous_best,
        reps=top_set.reps_completed,
        improvement=round(top_set.weight - previous_best, 4),
    )
