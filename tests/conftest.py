"""
Shared pytest fixtures for the Liftlog API tests.

Provides in-memory fake repositories and a FastAPI TestClient whose
repository and auth dependencies are overridden with them.
"""
from typing import Generator

import pytest
from fastapi.testclient import TestClient

from api.deps import (
    get_achievement_repo,
    get_current_user,
    get_exercise_repo,
    get_program_repo,
    get_recommendation_repo,
    get_set_log_repo,
    get_settings,
    get_workout_repo,
)
from backend.main import create_app
from backend.settings import Settings
from tests.fakes import (
    FakeAchievementRepository,
    FakeExerciseRepository,
    FakeProgramRepository,
    FakeRecommendationRepository,
    FakeSetLogRepository,
    FakeWorkoutRepository,
)


# ---------------------------------------------------------------------------
# Auth Mock
# ---------------------------------------------------------------------------

TEST_USER_ID = "test-user-123"
OTHER_USER_ID = "other-user-456"


async def mock_get_current_user() -> str:
    """Mock auth dependency that returns a test user."""
    return TEST_USER_ID


# ---------------------------------------------------------------------------
# Fake Repositories
# ---------------------------------------------------------------------------


@pytest.fixture
def set_log_repo() -> FakeSetLogRepository:
    return FakeSetLogRepository()


@pytest.fixture
def workout_repo() -> FakeWorkoutRepository:
    return FakeWorkoutRepository()


@pytest.fixture
def program_repo() -> FakeProgramRepository:
    return FakeProgramRepository()


@pytest.fixture
def exercise_repo() -> FakeExerciseRepository:
    return FakeExerciseRepository()


@pytest.fixture
def recommendation_repo() -> FakeRecommendationRepository:
    return FakeRecommendationRepository()


@pytest.fixture
def achievement_repo() -> FakeAchievementRepository:
    return FakeAchievementRepository()


# ---------------------------------------------------------------------------
# Test App and Client
# ---------------------------------------------------------------------------


@pytest.fixture
def test_settings() -> Settings:
    """Test settings with minimal configuration."""
    return Settings(
        environment="test",
        supabase_url="https://test.supabase.co",
        supabase_service_role_key="test-key",
        _env_file=None,
    )


@pytest.fixture
def app(test_settings):
    """Create test application instance."""
    return create_app(settings=test_settings)


@pytest.fixture
def client(
    app,
    test_settings,
    set_log_repo,
    workout_repo,
    program_repo,
    exercise_repo,
    recommendation_repo,
    achievement_repo,
) -> Generator[TestClient, None, None]:
    """
    FastAPI TestClient wired to the fake repositories.
    Properly cleans up dependency overrides after each test.
    """
    app.dependency_overrides[get_current_user] = mock_get_current_user
    app.dependency_overrides[get_settings] = lambda: test_settings
    app.dependency_overrides[get_set_log_repo] = lambda: set_log_repo
    app.dependency_overrides[get_workout_repo] = lambda: workout_repo
    app.dependency_overrides[get_program_repo] = lambda: program_repo
    app.dependency_overrides[get_exercise_repo] = lambda: exercise_repo
    app.dependency_overrides[get_recommendation_repo] = lambda: recommendation_repo
    app.dependency_overrides[get_achievement_repo] = lambda: achievement_repo
    yield TestClient(app)
    app.dependency_overrides.clear()


# ---------------------------------------------------------------------------
# Mock Environment Variables
# ---------------------------------------------------------------------------


@pytest.fixture(autouse=True)
def mock_env_vars(monkeypatch):
    """Set mock environment variables for tests."""
    monkeypatch.setenv("ENVIRONMENT", "test")
