"""
Tests for repository protocol definitions.

These tests verify that:
1. Protocol definitions are importable from application.ports
2. Both the Supabase implementations and the in-memory fakes provide
   every method their Protocol declares
"""
import inspect

import pytest

from application import ports
import infrastructure
import tests.fakes as fakes

# All tests in this module are pure logic tests (no TestClient) - mark as unit
pytestmark = pytest.mark.unit


IMPLEMENTATIONS = [
    ("SetLogRepository", "SupabaseSetLogRepository", "FakeSetLogRepository"),
    ("WorkoutRepository", "SupabaseWorkoutRepository", "FakeWorkoutRepository"),
    ("ProgramRepository", "SupabaseProgramRepository", "FakeProgramRepository"),
    ("ExerciseRepository", "SupabaseExerciseRepository", "FakeExerciseRepository"),
    ("RecommendationRepository", "SupabaseRecommendationRepository", "FakeRecommendationRepository"),
    ("AchievementRepository", "SupabaseAchievementRepository", "FakeAchievementRepository"),
]


def protocol_methods(protocol) -> list:
    return [
        name for name, member in vars(protocol).items()
        if inspect.isfunction(member) and not name.startswith("_")
    ]


class TestProtocolImports:
    """Test that all protocols can be imported."""

    def test_all_protocols_exported(self):
        for protocol_name, _, _ in IMPLEMENTATIONS:
            assert protocol_name in ports.__all__


class TestImplementationsMatchProtocols:
    """Implementations must provide every protocol method."""

    @pytest.mark.parametrize("protocol_name,supabase_name,fake_name", IMPLEMENTATIONS)
    def test_supabase_implementation(self, protocol_name, supabase_name, fake_name):
        protocol = getattr(ports, protocol_name)
        implementation = getattr(infrastructure, supabase_name)

        for method in protocol_methods(protocol):
            assert callable(getattr(implementation, method, None)), (
                f"{supabase_name} is missing {method}"
            )

    @pytest.mark.parametrize("protocol_name,supabase_name,fake_name", IMPLEMENTATIONS)
    def test_fake_implementation(self, protocol_name, supabase_name, fake_name):
        protocol = getattr(ports, protocol_name)
        implementation = getattr(fakes, fake_name)

        for method in protocol_methods(protocol):
            assert callable(getattr(implementation, method, None)), (
                f"{fake_name} is missing {method}"
            )

    def test_protocols_declare_methods(self):
        for protocol_name, _, _ in IMPLEMENTATIONS:
            assert protocol_methods(getattr(ports, protocol_name)), protocol_name
