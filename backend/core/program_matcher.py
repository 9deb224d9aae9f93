"""
Program Matcher.

Scores training programs against a user's prioritized goals, experience and
weekly availability, then ranks them into top picks and other options.

Scoring is additive:
- Direct category match:  50 x priority weight
- Tag affinity:           5 per matching tag x priority weight
- Experience alignment:   +10 same level, +5 one level apart
- Schedule fit:           +8 inside [min_days, max_days], +3 within one day

The raw score is normalized against the best achievable raw score (93) and
capped at 99 so a match is never reported as certain.
"""
import logging
import math
from typing import Dict, FrozenSet, List, Sequence, Tuple

from domain.models import (
    ExperienceLevel,
    ProgramMatches,
    ScoredProgram,
    TrainingProgram,
)

logger = logging.getLogger(__name__)


# =============================================================================
# Scoring tables
# =============================================================================

# Goal -> program tags that indicate the program serves that goal.
GOAL_TAG_AFFINITY: Dict[str, FrozenSet[str]] = {
    "strength": frozenset(
        {"compound_only", "linear_progression", "low_rep", "barbell", "powerlifting"}
    ),
    "hypertrophy": frozenset(
        {"high_volume", "isolation", "split", "moderate_rep", "time_under_tension"}
    ),
    "bodybuilding": frozenset(
        {"high_volume", "isolation", "split", "aesthetics", "pump"}
    ),
    "general": frozenset(
        {"full_body", "balanced", "beginner_friendly", "minimal_equipment", "conditioning"}
    ),
    "power": frozenset(
        {"explosive", "plyometric", "olympic", "speed", "low_rep"}
    ),
    "endurance": frozenset(
        {"high_rep", "circuit", "conditioning", "cardio", "short_rest"}
    ),
    "flexibility": frozenset(
        {"mobility", "stretching", "yoga", "recovery", "low_impact"}
    ),
    "athletic": frozenset(
        {"functional", "explosive", "agility", "full_body", "conditioning"}
    ),
}

GOAL_PRIORITY_WEIGHTS: Tuple[float, ...] = (0.60, 0.30, 0.10)
EXTRA_GOAL_WEIGHT = 0.05

CATEGORY_MATCH_POINTS = 50
TAG_MATCH_POINTS = 5
EXPERIENCE_EXACT_POINTS = 10
EXPERIENCE_ADJACENT_POINTS = 5
SCHEDULE_FIT_POINTS = 8
SCHEDULE_NEAR_POINTS = 3

# 50 (category) + 25 (five affinity tags) + 10 (experience) + 8 (schedule)
MAX_RAW_SCORE = 93
MAX_REPORTED_SCORE = 99

TOP_PICK_THRESHOLD = 40

_PRIORITY_LABELS = ("primary", "secondary", "tertiary")


def goal_weight(index: int) -> float:
    """Priority weight of the goal at the given position."""
    if 0 <= index < len(GOAL_PRIORITY_WEIGHTS):
        return GOAL_PRIORITY_WEIGHTS[index]
    return EXTRA_GOAL_WEIGHT


def normalize_score(raw: float, max_raw: float = MAX_RAW_SCORE) -> int:
    """
    Convert a raw score to a 0-99 percentage, rounding half up.

    Args:
        raw: Raw additive score
        max_raw: Best achievable raw score

    Returns:
        Normalized score, 0 when max_raw is not positive
    """
    if max_raw <= 0:
        return 0
    percent = int(math.floor(raw / max_raw * 100 + 0.5))
    return max(0, min(MAX_REPORTED_SCORE, percent))


# =============================================================================
# Scoring
# =============================================================================


def score_program(
    program: TrainingProgram,
    goals: Sequence[str],
    experience: ExperienceLevel,
    days_per_week: int,
) -> ScoredProgram:
    """
    Score a single program for a user.

    Pure function of its arguments.

    Args:
        program: Candidate program
        goals: Goal identifiers in priority order (first = primary)
        experience: User's experience level
        days_per_week: Days per week the user can train

    Returns:
        ScoredProgram with the normalized score and the reasons that
        contributed to it, in rule order
    """
    raw = 0.0
    reasons: List[str] = []
    # Blank goals are ignored but keep their priority slot
    normalized_goals = [
        (index, goal.strip().lower())
        for index, goal in enumerate(goals)
        if goal and goal.strip()
    ]

    # Rule 1: direct category match
    for index, goal in normalized_goals:
        if program.category and program.category == goal:
            raw += CATEGORY_MATCH_POINTS * goal_weight(index)
            if index < len(_PRIORITY_LABELS):
                reasons.append(f"Direct {_PRIORITY_LABELS[index]} goal match")
            else:
                reasons.append("Direct goal match")

    # Rule 2: tag affinity
    program_tags = set(program.tags)
    for index, goal in normalized_goals:
        hits = len(GOAL_TAG_AFFINITY.get(goal, frozenset()) & program_tags)
        if hits:
            raw += hits * TAG_MATCH_POINTS * goal_weight(index)
            noun = "tag matches" if hits == 1 else "tags match"
            reasons.append(f'{hits} {noun} "{goal.upper()}"')

    # Rule 3: experience alignment
    difficulty = program.difficulty_level
    if difficulty is not None:
        distance = abs(difficulty.rank - experience.rank)
        if distance == 0:
            raw += EXPERIENCE_EXACT_POINTS
            reasons.append("Matches your experience")
        elif distance == 1:
            raw += EXPERIENCE_ADJACENT_POINTS
            reasons.append("Close to your experience level")

    # Rule 4: schedule fit
    if program.min_days <= days_per_week <= program.max_days:
        raw += SCHEDULE_FIT_POINTS
        reasons.append("Fits your schedule")
    elif program.min_days - 1 <= days_per_week <= program.max_days + 1:
        raw += SCHEDULE_NEAR_POINTS
        reasons.append("Close to your schedule")

    return ScoredProgram(
        program=program,
        score=normalize_score(raw),
        match_reasons=reasons,
    )


def rank_programs(
    programs: Sequence[TrainingProgram],
    goals: Sequence[str],
    experience: ExperienceLevel,
    days_per_week: int,
) -> ProgramMatches:
    """
    Score, sort and partition candidate programs.

    Programs needing more than one day beyond the user's availability are
    excluded before scoring. Sorting is stable, so ties keep the order of
    the reference data. Programs scoring 0 are dropped.

    Args:
        programs: Candidates in reference order (category ascending)
        goals: Goal identifiers in priority order
        experience: User's experience level
        days_per_week: Days per week the user can train

    Returns:
        ProgramMatches with top picks (score >= 40) and other options
    """
    candidates = [p for p in programs if p.min_days - 1 <= days_per_week]
    scored = [score_program(p, goals, experience, days_per_week) for p in candidates]
    scored = sorted(scored, key=lambda s: s.score, reverse=True)

    top_picks = [s for s in scored if s.score >= TOP_PICK_THRESHOLD]
    other_options = [s for s in scored if 0 < s.score < TOP_PICK_THRESHOLD]

    logger.info(
        f"Ranked {len(candidates)}/{len(programs)} programs for goals={list(goals)}: "
        f"{len(top_picks)} top picks, {len(other_options)} other options"
    )
    return ProgramMatches(top_picks=top_picks, other_options=other_options)
