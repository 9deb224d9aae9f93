"""
Unit tests for program generation.

Tests cover:
- Program slug resolution
- Frequency variant selection
- Equipment filtering and exercise substitution
- Experience and gender adjustments
- Plan assembly and its failure modes
"""
import pytest

from application.exceptions import ProgramGenerationError
from backend.core.program_builder import (
    FALLBACK_PROGRAM_SLUG,
    adjust_reps_for_gender,
    adjust_sets_for_experience,
    available_exercises,
    build_plan,
    find_best_match,
    resolve_program_slug,
    select_program_workouts,
    workout_description,
)
from domain.models import (
    Exercise,
    ExperienceLevel,
    Gender,
    ProgramWorkout,
    ProgramWorkoutExercise,
    TrainingProgram,
    UserTrainingProfile,
)


CATALOG = [
    Exercise(id="ex-pushup", name="Push-up", muscle_group="chest", equipment_type=[]),
    Exercise(id="ex-bench", name="Barbell Bench Press", muscle_group="chest",
             equipment_type=["barbell", "bench"]),
    Exercise(id="ex-db-bench", name="Dumbbell Bench Press", muscle_group="chest",
             equipment_type=["dumbbell"]),
    Exercise(id="ex-squat", name="Barbell Back Squat", muscle_group="legs",
             equipment_type=["barbell"]),
    Exercise(id="ex-goblet", name="Goblet Squat", muscle_group="legs",
             equipment_type=["dumbbell"]),
    Exercise(id="ex-pullup", name="Pull-up", muscle_group="back",
             equipment_type=["bodyweight", "pullup_bar"]),
]

PROGRAM = TrainingProgram(
    id="prog-1",
    slug="starting_strength",
    name="Starting Strength",
    category="strength",
    min_days=3,
    max_days=5,
)


def _template(name: str, days_per_week: int = 3, day_number: int = 1, exercises=None):
    return ProgramWorkout(
        program_id="prog-1",
        name=name,
        day_number=day_number,
        days_per_week=days_per_week,
        exercises=exercises or [],
    )


def _slot(name: str, order: int = 1, sets: int = 3, reps: str = "8-12"):
    return ProgramWorkoutExercise(
        exercise_name=name,
        default_sets=sets,
        default_reps=reps,
        order_num=order,
        rationale="Main lift",
    )


@pytest.mark.unit
class TestResolveProgramSlug:
    """Tests for resolve_program_slug."""

    def test_explicit_slug_wins(self):
        profile = UserTrainingProfile(goal="strength", program_slug="gzclp")
        assert resolve_program_slug(profile) == "gzclp"

    def test_goal_default(self):
        assert resolve_program_slug(UserTrainingProfile(goal="strength")) == "starting_strength"

    def test_goal_is_normalized(self):
        profile = UserTrainingProfile(goal=" Hypertrophy ")
        assert resolve_program_slug(profile) == "modern_bodybuilding"

    def test_unknown_goal_falls_back(self):
        assert resolve_program_slug(UserTrainingProfile(goal="crossfit")) == FALLBACK_PROGRAM_SLUG


@pytest.mark.unit
class TestSelectProgramWorkouts:
    """Tests for select_program_workouts."""

    TEMPLATES = (
        [_template(f"3d-{i}", 3, i) for i in range(1, 4)]
        + [_template(f"4d-{i}", 4, i) for i in range(1, 5)]
        + [_template(f"5d-{i}", 5, i) for i in range(1, 6)]
    )

    def test_exact_variant(self):
        selected = select_program_workouts(self.TEMPLATES, 4)
        assert [t.name for t in selected] == ["4d-1", "4d-2", "4d-3", "4d-4"]

    def test_largest_variant_that_fits(self):
        selected = select_program_workouts(self.TEMPLATES, 7)
        assert len(selected) == 5
        assert all(t.days_per_week == 5 for t in selected)

    def test_too_few_days_truncates_smallest_variant(self):
        selected = select_program_workouts(self.TEMPLATES, 2)
        assert [t.name for t in selected] == ["3d-1", "3d-2"]

    def test_empty(self):
        assert select_program_workouts([], 3) == []


@pytest.mark.unit
class TestEquipmentMatching:
    """Tests for available_exercises and find_best_match."""

    def test_bodyweight_and_unequipped_always_available(self):
        names = [e.name for e in available_exercises(CATALOG, [])]
        assert names == ["Push-up", "Pull-up"]

    def test_owned_equipment(self):
        names = [e.name for e in available_exercises(CATALOG, ["Dumbbell"])]
        assert "Dumbbell Bench Press" in names
        assert "Goblet Squat" in names
        assert "Barbell Bench Press" not in names

    def test_exact_match_when_available(self):
        available = available_exercises(CATALOG, ["barbell"])
        assert find_best_match("Barbell Back Squat", CATALOG, available).id == "ex-squat"

    def test_same_muscle_with_shared_keyword(self):
        available = available_exercises(CATALOG, ["dumbbell"])
        chosen = find_best_match("Barbell Bench Press", CATALOG, available)
        assert chosen.id == "ex-db-bench"

    def test_same_muscle_without_keyword(self):
        available = available_exercises(CATALOG, [])
        chosen = find_best_match("Barbell Bench Press", CATALOG, available)
        assert chosen.id == "ex-pushup"

    def test_first_word_fallback(self):
        available = available_exercises(CATALOG, ["dumbbell"])
        chosen = find_best_match("Goblet Lunge", CATALOG, available)
        assert chosen.id == "ex-goblet"

    def test_first_available_as_last_resort(self):
        available = available_exercises(CATALOG, [])
        assert find_best_match("Kettlebell Swing", CATALOG, available).id == "ex-pushup"


@pytest.mark.unit
class TestAdjustments:
    """Tests for experience and gender adjustments."""

    @pytest.mark.parametrize(
        "sets,experience,expected",
        [
            (3, ExperienceLevel.BEGINNER, 2),
            (2, ExperienceLevel.BEGINNER, 2),
            (3, ExperienceLevel.INTERMEDIATE, 3),
            (5, ExperienceLevel.ADVANCED, 6),
            (6, ExperienceLevel.ADVANCED, 6),
        ],
    )
    def test_sets(self, sets, experience, expected):
        assert adjust_sets_for_experience(sets, experience) == expected

    def test_female_rep_shift(self):
        assert adjust_reps_for_gender("8-12", Gender.FEMALE) == "10-14"

    def test_female_rep_shift_is_capped(self):
        assert adjust_reps_for_gender("24-29", Gender.FEMALE) == "25-30"

    @pytest.mark.parametrize("reps", ["AMRAP", "5", "30s"])
    def test_non_range_reps_unchanged(self, reps):
        assert adjust_reps_for_gender(reps, Gender.FEMALE) == reps

    @pytest.mark.parametrize("gender", [Gender.MALE, Gender.PREFER_NOT_TO_SAY, None])
    def test_other_genders_unchanged(self, gender):
        assert adjust_reps_for_gender("8-12", gender) == "8-12"

    def test_description_full_gym(self):
        profile = UserTrainingProfile(equipment=["barbell", "dumbbell", "cable", "machine"])
        assert workout_description(PROGRAM, profile).endswith("Full Gym")

    def test_description_limited_equipment(self):
        profile = UserTrainingProfile(equipment=["dumbbell"])
        assert workout_description(PROGRAM, profile) == (
            "Starting Strength | strength | beginner | Limited Equipment"
        )


@pytest.mark.unit
class TestBuildPlan:
    """Tests for build_plan."""

    def _templates(self):
        return [
            _template(
                "Day A",
                exercises=[
                    _slot("Barbell Back Squat", order=1, sets=5, reps="5"),
                    _slot("Barbell Bench Press", order=2),
                ],
            ),
            _template("Day B", day_number=2, exercises=[_slot("Pull-up")]),
        ]

    def test_builds_one_workout_per_selected_template(self):
        profile = UserTrainingProfile(
            experience=ExperienceLevel.INTERMEDIATE,
            days_per_week=3,
            equipment=["barbell", "bench"],
        )
        plan = build_plan(PROGRAM, self._templates(), CATALOG, profile)

        assert [w.name for w in plan] == ["Day A", "Day B"]
        assert all(w.program_id == "prog-1" for w in plan)
        day_a = plan[0].exercises
        assert [e.exercise_id for e in day_a] == ["ex-squat", "ex-bench"]
        assert day_a[0].sets == 5
        assert day_a[0].rationale == "Main lift"

    def test_exercises_follow_slot_order(self):
        templates = [
            _template(
                "Day A",
                exercises=[_slot("Pull-up", order=2), _slot("Push-up", order=1)],
            )
        ]
        plan = build_plan(PROGRAM, templates, CATALOG, UserTrainingProfile())

        assert [e.exercise_name for e in plan[0].exercises] == ["Push-up", "Pull-up"]

    def test_substitution_is_noted(self):
        profile = UserTrainingProfile(equipment=["dumbbell"])
        plan = build_plan(PROGRAM, self._templates(), CATALOG, profile)
        bench = plan[0].exercises[1]

        assert bench.exercise_id == "ex-db-bench"
        assert bench.rationale == (
            "Main lift (Substituted: Dumbbell Bench Press based on equipment)"
        )

    def test_profile_adjustments_applied(self):
        profile = UserTrainingProfile(
            experience=ExperienceLevel.BEGINNER,
            equipment=["barbell", "bench"],
            gender=Gender.FEMALE,
        )
        plan = build_plan(PROGRAM, self._templates(), CATALOG, profile)
        bench = plan[0].exercises[1]

        assert bench.sets == 2
        assert bench.reps == "10-14"

    def test_no_templates(self):
        with pytest.raises(ProgramGenerationError, match="No workouts defined"):
            build_plan(PROGRAM, [], CATALOG, UserTrainingProfile())

    def test_empty_catalog(self):
        with pytest.raises(ProgramGenerationError, match="No exercises found"):
            build_plan(PROGRAM, self._templates(), [], UserTrainingProfile())

    def test_nothing_matches_equipment(self):
        catalog = [e for e in CATALOG if "barbell" in e.equipment_type]
        with pytest.raises(ProgramGenerationError, match="equipment profile"):
            build_plan(PROGRAM, self._templates(), catalog, UserTrainingProfile())
