"""
Double Progression Engine.

Given a user's recent sets for an exercise and the workout template the
exercise is prescribed in, decide what the user should do next session:

- All sets at the top of the rep range, effort manageable -> increase weight
- All sets inside the range but effort high (RPE 9-10)   -> maintain
- Below the range for two sessions at high effort        -> deload (-10%)
- Anything else                                          -> increase reps

Everything in this module is a pure function of its inputs. Fetching
history and persisting the result is done by ComputeProgressionUseCase.
"""
import math
import re
from datetime import datetime, timezone
from typing import Dict, List, Optional

from domain.models import (
    ProgressionRecommendation,
    RecommendationType,
    RepRange,
    Session,
    SetLog,
    WorkoutExerciseTemplate,
)


# =============================================================================
# Constants
# =============================================================================

# Used when a template's rep string is empty or cannot be parsed.
DEFAULT_REP_RANGE = RepRange(low=8, high=12)

# Highest average RPE that still allows adding weight.
MAX_RPE_FOR_INCREASE = 8

# Average RPE at which a session counts as a hard effort.
HIGH_EFFORT_RPE = 9

DELOAD_FACTOR = 0.9
DELOAD_ROUNDING = 2.5

LOWER_BODY_COMPOUND_KEYWORDS = ("squat", "deadlift", "leg press")
UPPER_BODY_COMPOUND_KEYWORDS = ("bench", "row", "press", "pull")

LOWER_BODY_INCREMENT = 10.0
UPPER_BODY_INCREMENT = 5.0
LIGHT_INCREMENT = 2.5
DEFAULT_INCREMENT = 5.0
LIGHT_WEIGHT_THRESHOLD = 50.0

_RANGE_PATTERN = re.compile(r"^\s*(\d+)\s*-\s*(\d+)\s*$")
_SINGLE_PATTERN = re.compile(r"^\s*(\d+)\s*$")


# =============================================================================
# Parsing and arithmetic helpers
# =============================================================================


def parse_rep_range(reps: Optional[str]) -> RepRange:
    """
    Parse a template rep string into a RepRange.

    Accepts "<low>-<high>" (whitespace tolerated) and a single number, which
    means low == high. A reversed range ("12-8") is put back in order.
    Anything else resolves to DEFAULT_REP_RANGE; this never raises.

    Args:
        reps: Raw rep string from workout_exercises (may be None)

    Returns:
        Parsed rep range

    Examples:
        >>> parse_rep_range("8-12")
        RepRange(low=8, high=12)
        >>> parse_rep_range("10")
        RepRange(low=10, high=10)
        >>> parse_rep_range("AMRAP") == DEFAULT_REP_RANGE
        True
    """
    if not reps:
        return DEFAULT_REP_RANGE

    match = _RANGE_PATTERN.match(reps)
    if match:
        low, high = sorted((int(match.group(1)), int(match.group(2))))
        if high == 0:
            return DEFAULT_REP_RANGE
        return RepRange(low=low, high=high)

    match = _SINGLE_PATTERN.match(reps)
    if match:
        value = int(match.group(1))
        if value == 0:
            return DEFAULT_REP_RANGE
        return RepRange(low=value, high=value)

    return DEFAULT_REP_RANGE


def round_to_nearest(value: float, increment: float) -> float:
    """
    Round to the nearest multiple of increment, ties rounding up.

    Args:
        value: Value to round
        increment: Step size (values <= 0 return the input unchanged)

    Returns:
        Rounded value
    """
    if increment <= 0:
        return value
    steps = math.floor(value / increment + 0.5)
    return round(steps * increment, 4)


def weight_increment(exercise_name: str, last_weight: float) -> float:
    """
    Choose the weight jump for an exercise.

    Lower body compounds move in 10 lb steps, upper body compounds in 5 lb
    steps. Anything else lighter than 50 lbs moves in 2.5 lb steps.

    Args:
        exercise_name: Exercise display name (matched case-insensitively)
        last_weight: Heaviest weight used last session

    Returns:
        Increment in pounds
    """
    name = (exercise_name or "").lower()
    if any(keyword in name for keyword in LOWER_BODY_COMPOUND_KEYWORDS):
        return LOWER_BODY_INCREMENT
    if any(keyword in name for keyword in UPPER_BODY_COMPOUND_KEYWORDS):
        return UPPER_BODY_INCREMENT
    if last_weight < LIGHT_WEIGHT_THRESHOLD:
        return LIGHT_INCREMENT
    return DEFAULT_INCREMENT


def _as_utc(value: datetime) -> datetime:
    if value.tzinfo is None:
        return value.replace(tzinfo=timezone.utc)
    return value.astimezone(timezone.utc)


def session_key(log: SetLog) -> str:
    """Grouping key: the workout, or the UTC calendar day when there is none."""
    if log.workout_id:
        return log.workout_id
    return f"date:{_as_utc(log.created_at).date().isoformat()}"


def group_into_sessions(logs: List[SetLog]) -> List[Session]:
    """
    Group set logs into training sessions.

    Logs sharing a workout_id form one session. Logs whose workout_id was
    cleared (the plan was regenerated) fall back to grouping by UTC date.
    Sessions are ordered by their newest set, newest session first.

    Args:
        logs: Set logs for a single exercise, in any order

    Returns:
        Sessions, newest first
    """
    groups: Dict[str, List[SetLog]] = {}
    for log in logs:
        groups.setdefault(session_key(log), []).append(log)

    ordered = sorted(
        groups.items(),
        key=lambda item: max(_as_utc(log.created_at) for log in item[1]),
        reverse=True,
    )
    return [Session(key=key, set_logs=set_logs) for key, set_logs in ordered]


def _missed_low_end(session: Session, rep_range: RepRange) -> bool:
    return any(log.reps_completed < rep_range.low for log in session.set_logs)


# =============================================================================
# Decision
# =============================================================================


def recommend(
    user_id: str,
    template: WorkoutExerciseTemplate,
    sessions: List[Session],
) -> Optional[ProgressionRecommendation]:
    """
    Compute the next-session recommendation for one exercise.

    Rules are evaluated in order and the first match wins.

    Args:
        user_id: Owner of the history
        template: Template row the exercise is prescribed by
        sessions: History grouped by group_into_sessions(), newest first

    Returns:
        Recommendation, or None when there is nothing to base one on (no
        sessions, or the latest session has no weight recorded)
    """
    if not sessions or not sessions[0].set_logs:
        return None

    latest = sessions[0]
    last_weight = latest.max_weight
    if last_weight <= 0:
        return None

    rep_range = parse_rep_range(template.reps)
    target_reps = template.reps or str(rep_range)
    avg_rpe = latest.average_rpe
    avg_reps = latest.average_reps
    hit_high = all(log.reps_completed >= rep_range.high for log in latest.set_logs)
    hit_low = all(log.reps_completed >= rep_range.low for log in latest.set_logs)
    high_effort = avg_rpe is not None and avg_rpe >= HIGH_EFFORT_RPE

    if hit_high and (avg_rpe is None or avg_rpe <= MAX_RPE_FOR_INCREASE):
        increment = weight_increment(template.exercise_name, last_weight)
        new_weight = round_to_nearest(last_weight + increment, increment)
        effort = f" at RPE {avg_rpe:.0f}" if avg_rpe is not None else ""
        recommendation_type = RecommendationType.INCREASE_WEIGHT
        reason = (
            f"All sets hit {rep_range.high} reps{effort}. "
            f"Time to go heavier: {new_weight:g} lbs."
        )
    elif hit_low and high_effort:
        new_weight = last_weight
        recommendation_type = RecommendationType.MAINTAIN
        reason = (
            f"Hit your reps but RPE was {avg_rpe:.0f}. "
            "Repeat this weight and own it before adding more."
        )
    elif (
        len(sessions) >= 2
        and _missed_low_end(latest, rep_range)
        and _missed_low_end(sessions[1], rep_range)
        and high_effort
    ):
        new_weight = round_to_nearest(last_weight * DELOAD_FACTOR, DELOAD_ROUNDING)
        recommendation_type = RecommendationType.DELOAD
        reason = (
            f"Below {rep_range.low} reps for 2 sessions at high RPE. "
            f"Drop to {new_weight:g} lbs and build back up."
        )
    else:
        new_weight = last_weight
        recommendation_type = RecommendationType.INCREASE_REPS
        reason = (
            f"Averaging {avg_reps:.0f} reps. Keep the weight and push "
            f"for {rep_range.high} across all sets."
        )

    return ProgressionRecommendation(
        user_id=user_id,
        exercise_id=template.exercise_id,
        exercise_name=template.exercise_name,
        recommended_weight=new_weight,
        recommended_reps=target_reps,
        recommendation_type=recommendation_type,
        reason=reason,
        based_on_sessions=len(sessions),
    )
