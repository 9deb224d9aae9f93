"""
Unit tests for backend/main.py
"""

import pytest
from fastapi import FastAPI
from fastapi.testclient import TestClient
from unittest.mock import patch

from backend.main import create_app, _init_sentry
from backend.settings import Settings


@pytest.mark.unit
class TestCreateApp:
    """Test the create_app() factory function."""

    def test_create_app_returns_fastapi_instance(self):
        settings = Settings(environment="test", _env_file=None)
        app = create_app(settings=settings)
        assert isinstance(app, FastAPI)

    def test_create_app_uses_default_settings_when_none_provided(self):
        """create_app() should use get_settings() when no settings provided."""
        with patch("backend.main.get_settings") as mock_get_settings:
            mock_get_settings.return_value = Settings(environment="test", _env_file=None)

            app = create_app(settings=None)

            mock_get_settings.assert_called_once()
            assert isinstance(app, FastAPI)

    def test_create_app_configures_app_metadata(self):
        app = create_app(settings=Settings(environment="test", _env_file=None))

        assert app.title == "Liftlog API"
        assert app.version == "1.0.0"

    def test_routes_registered(self):
        app = create_app(settings=Settings(environment="test", _env_file=None))
        paths = {route.path for route in app.routes}

        assert {
            "/health",
            "/progression/workouts/{workout_id}/compute",
            "/progression/recommendations",
            "/programs/match",
            "/programs/generate",
            "/progress/streak",
            "/progress/workouts/{workout_id}/records",
            "/progress/volume",
        } <= paths


@pytest.mark.unit
class TestInitSentry:
    """Test Sentry initialization."""

    def test_init_sentry_skipped_when_no_dsn(self):
        with patch("backend.main.sentry_sdk") as mock_sentry:
            _init_sentry(Settings(environment="test", sentry_dsn=None, _env_file=None))
            mock_sentry.init.assert_not_called()

    def test_init_sentry_called_with_dsn(self):
        with patch("backend.main.sentry_sdk") as mock_sentry:
            _init_sentry(
                Settings(
                    environment="production",
                    sentry_dsn="https://key@sentry.example.com/1",
                    _env_file=None,
                )
            )
            mock_sentry.init.assert_called_once()
            assert mock_sentry.init.call_args.kwargs["environment"] == "production"


@pytest.mark.unit
class TestCors:
    """Test CORS configuration."""

    def test_configured_origin_allowed(self):
        settings = Settings(
            environment="test",
            cors_allowed_origins="https://app.example.com",
            _env_file=None,
        )
        client = TestClient(create_app(settings=settings))

        response = client.options(
            "/health",
            headers={
                "Origin": "https://app.example.com",
                "Access-Control-Request-Method": "GET",
            },
        )

        assert response.headers["access-control-allow-origin"] == "https://app.example.com"

    def test_unknown_origin_not_allowed(self):
        client = TestClient(create_app(settings=Settings(environment="test", _env_file=None)))

        response = client.options(
            "/health",
            headers={
                "Origin": "https://evil.example.com",
                "Access-Control-Request-Method": "GET",
            },
        )

        assert "access-control-allow-origin" not in response.headers
