"""
Unit tests for weekly volume per muscle group.
"""
import pytest

from backend.core.volume import (
    DEFAULT_VOLUME_TARGET,
    MuscleGroupVolume,
    sets_per_muscle_group,
    volume_report,
    volume_target,
)
from tests.fakes import make_set_log


@pytest.mark.unit
class TestVolumeTarget:
    """Tests for volume_target."""

    @pytest.mark.parametrize(
        "goal,target",
        [("strength", 10), ("hypertrophy", 15), ("general", 12), (" Hypertrophy ", 15)],
    )
    def test_known_goals(self, goal, target):
        assert volume_target(goal) == target

    @pytest.mark.parametrize("goal", [None, "", "yoga"])
    def test_unknown_goal_uses_default(self, goal):
        assert volume_target(goal) == DEFAULT_VOLUME_TARGET


@pytest.mark.unit
class TestVolumeReport:
    """Tests for sets_per_muscle_group and volume_report."""

    def test_counts_sets(self):
        logs = [
            make_set_log(muscle_group="chest"),
            make_set_log(muscle_group="chest", set_number=2),
            make_set_log(exercise_id="ex-squat", muscle_group="legs"),
        ]

        assert sets_per_muscle_group(logs) == {"chest": 2, "legs": 1}

    def test_sets_without_muscle_group_are_ignored(self):
        assert sets_per_muscle_group([make_set_log(muscle_group=None)]) == {}

    def test_report_orders_by_sets_then_name(self):
        logs = [
            make_set_log(muscle_group="legs"),
            make_set_log(muscle_group="back"),
            make_set_log(muscle_group="chest"),
            make_set_log(muscle_group="chest"),
        ]
        report = volume_report(logs, "strength")

        assert [g.muscle_group for g in report] == ["chest", "back", "legs"]
        assert all(g.target == 10 for g in report)

    def test_remaining_and_on_target(self):
        short = MuscleGroupVolume(muscle_group="chest", sets=4, target=10)
        done = MuscleGroupVolume(muscle_group="legs", sets=12, target=10)

        assert (short.remaining, short.on_target) == (6, False)
        assert (done.remaining, done.on_target) == (0, True)

    def test_empty(self):
        assert volume_report([], "general") == []
