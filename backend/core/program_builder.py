"""
Program generation.

Turns a training program's workout templates into a concrete plan for one
user: picks the weekly-frequency variant that fits their schedule, swaps in
exercises their equipment allows and scales volume to their experience.
"""
import logging
import re
from typing import Iterable, List, Optional

from application.exceptions import ProgramGenerationError
from domain.models import (
    Exercise,
    ExperienceLevel,
    Gender,
    PlannedExercise,
    PlannedWorkout,
    ProgramWorkout,
    TrainingProgram,
    UserTrainingProfile,
)

logger = logging.getLogger(__name__)


GOAL_DEFAULT_PROGRAMS = {
    "strength": "starting_strength",
    "hypertrophy": "modern_bodybuilding",
    "general": "dad_bod_destroyer",
    "bodybuilding": "modern_bodybuilding",
    "power": "plyometric_power",
    "endurance": "muscular_endurance",
    "flexibility": "mobility_flow",
    "athletic": "functional_fitness",
}
FALLBACK_PROGRAM_SLUG = "dad_bod_destroyer"

ALWAYS_AVAILABLE_EQUIPMENT = "bodyweight"

# Equipment words ignored when looking for a same-movement substitute.
EQUIPMENT_WORDS = frozenset({"barbell", "dumbbell", "cable", "machine", "band"})

MIN_SETS = 2
MAX_SETS = 6

FEMALE_REP_SHIFT = 2
FEMALE_MAX_LOW_REPS = 25
FEMALE_MAX_HIGH_REPS = 30

FULL_GYM_EQUIPMENT_COUNT = 3

_RANGE_PATTERN = re.compile(r"^(\d+)-(\d+)$")


def resolve_program_slug(profile: UserTrainingProfile) -> str:
    """Explicit program choice first, then the goal's default program."""
    if profile.program_slug:
        return profile.program_slug
    return GOAL_DEFAULT_PROGRAMS.get(profile.goal.strip().lower(), FALLBACK_PROGRAM_SLUG)


def select_program_workouts(
    templates: List[ProgramWorkout],
    days_per_week: int,
) -> List[ProgramWorkout]:
    """
    Pick the templates for the user's weekly frequency.

    Uses the largest frequency variant not exceeding the user's days, or the
    smallest variant when every variant needs more days. The result never
    has more workouts than the user has days.

    Args:
        templates: All workout templates of a program, day_number order
        days_per_week: Days the user can train

    Returns:
        Selected templates (empty only when templates is empty)
    """
    if not templates:
        return []

    day_counts = sorted({t.days_per_week for t in templates})
    target = day_counts[0]
    for count in day_counts:
        if count <= days_per_week:
            target = count

    selected = [t for t in templates if t.days_per_week == target][:days_per_week]
    if not selected:
        selected = templates[:days_per_week]
    return selected


def available_exercises(catalog: List[Exercise], equipment: Iterable[str]) -> List[Exercise]:
    """
    Exercises the user can perform with their equipment.

    Exercises with no equipment requirement are always available, and so is
    anything that can be done with bodyweight.
    """
    owned = {item.strip().lower() for item in equipment if item}
    owned.add(ALWAYS_AVAILABLE_EQUIPMENT)
    return [
        exercise
        for exercise in catalog
        if not exercise.equipment_type
        or any(required.lower() in owned for required in exercise.equipment_type)
    ]


def find_best_match(
    target_name: str,
    catalog: List[Exercise],
    available: List[Exercise],
) -> Exercise:
    """
    Find the exercise to program in place of a template exercise.

    Tries, in order: the exercise itself if available; an available exercise
    for the same muscle group sharing a movement keyword; any available
    exercise for the same muscle group; an available exercise containing the
    first word of the name; the first available exercise.

    Args:
        target_name: Exercise name from the template
        catalog: Full exercise catalog
        available: Exercises the user's equipment allows (non-empty)

    Returns:
        Chosen exercise
    """
    target = target_name.strip().lower()

    for exercise in available:
        if exercise.name.lower() == target:
            return exercise

    canonical = next((e for e in catalog if e.name.lower() == target), None)
    if canonical is not None and canonical.muscle_group:
        same_muscle = [e for e in available if e.muscle_group == canonical.muscle_group]
        if same_muscle:
            keywords = [w for w in target.split() if w not in EQUIPMENT_WORDS]
            for exercise in same_muscle:
                if any(keyword in exercise.name.lower() for keyword in keywords):
                    return exercise
            return same_muscle[0]

    first_word = target.split()[0] if target.split() else ""
    if first_word:
        for exercise in available:
            if first_word in exercise.name.lower():
                return exercise
    return available[0]


def adjust_sets_for_experience(sets: int, experience: ExperienceLevel) -> int:
    """Beginners do one set fewer (min 2), advanced lifters one more (max 6)."""
    if experience == ExperienceLevel.BEGINNER:
        return max(MIN_SETS, sets - 1)
    if experience == ExperienceLevel.ADVANCED:
        return min(MAX_SETS, sets + 1)
    return sets


def adjust_reps_for_gender(reps: str, gender: Optional[Gender]) -> str:
    """
    Shift "<low>-<high>" rep ranges two reps higher for female users.

    Other rep strings are returned unchanged.
    """
    if gender != Gender.FEMALE:
        return reps
    match = _RANGE_PATTERN.match(reps.strip())
    if not match:
        return reps
    low = min(int(match.group(1)) + FEMALE_REP_SHIFT, FEMALE_MAX_LOW_REPS)
    high = min(int(match.group(2)) + FEMALE_REP_SHIFT, FEMALE_MAX_HIGH_REPS)
    return f"{low}-{high}"


def workout_description(program: TrainingProgram, profile: UserTrainingProfile) -> str:
    setup = "Full Gym" if len(profile.equipment) > FULL_GYM_EQUIPMENT_COUNT else "Limited Equipment"
    return f"{program.name} | {program.category} | {profile.experience.value} | {setup}"


def build_plan(
    program: TrainingProgram,
    templates: List[ProgramWorkout],
    catalog: List[Exercise],
    profile: UserTrainingProfile,
) -> List[PlannedWorkout]:
    """
    Build the user's workouts from a program.

    Args:
        program: Program being generated
        templates: The program's workout templates
        catalog: Full exercise catalog
        profile: User's onboarding answers

    Returns:
        Planned workouts in template order

    Raises:
        ProgramGenerationError: If the program has no templates, the catalog
            is empty or nothing in it fits the user's equipment
    """
    selected = select_program_workouts(templates, profile.days_per_week)
    if not selected:
        raise ProgramGenerationError(f'No workouts defined for program "{program.name}"')
    if not catalog:
        raise ProgramGenerationError("No exercises found in catalog")

    available = available_exercises(catalog, profile.equipment)
    if not available:
        raise ProgramGenerationError("No exercises match your equipment profile")

    description = workout_description(program, profile)
    plan: List[PlannedWorkout] = []
    substitutions = 0

    for template in selected:
        exercises: List[PlannedExercise] = []
        for slot in sorted(template.exercises, key=lambda s: s.order_num):
            chosen = find_best_match(slot.exercise_name, catalog, available)
            rationale = slot.rationale
            if chosen.name.lower() != slot.exercise_name.strip().lower():
                substitutions += 1
                rationale += f" (Substituted: {chosen.name} based on equipment)"
            exercises.append(
                PlannedExercise(
                    exercise_id=chosen.id,
                    exercise_name=chosen.name,
                    sets=adjust_sets_for_experience(slot.default_sets, profile.experience),
                    reps=adjust_reps_for_gender(slot.default_reps, profile.gender),
                    rest_seconds=slot.default_rest_seconds,
                    order=slot.order_num,
                    rationale=rationale.strip(),
                )
            )
        plan.append(
            PlannedWorkout(
                name=template.name,
                program_id=program.id,
                description=description,
                exercises=exercises,
            )
        )

    logger.info(
        f"Built {len(plan)} workouts from program {program.slug} "
        f"({substitutions} equipment substitutions)"
    )
    return plan
