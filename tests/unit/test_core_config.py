"""Unit tests for configuration management and the composition root.

Tests cover:
- Settings defaults and GAMELINK_ environment overrides
- Validation (URL normalization, initiate path, timing values)
- Cached get_settings()
- Container factories (logger selection, client wiring, session wiring)
"""

import os
from datetime import timedelta
from unittest.mock import MagicMock, patch

import pytest
from pydantic import ValidationError

from gamelink.application.services import LinkSession
from gamelink.core import container
from gamelink.core.config import Settings, get_settings
from gamelink.core.constants import AUTHORIZATION_TIMEOUT, POLL_INTERVAL_SECONDS
from gamelink.core.enums import Environment
from gamelink.domain.enums import LinkStatus
from gamelink.infrastructure.scheduling import ManualPoller


@pytest.fixture(autouse=True)
def clear_caches():
    """Reset cached singletons around each test."""
    get_settings.cache_clear()
    container.get_logger.cache_clear()
    container.get_linking_client.cache_clear()
    yield
    get_settings.cache_clear()
    container.get_logger.cache_clear()
    container.get_linking_client.cache_clear()


@pytest.mark.unit
class TestSettings:
    """Test Settings loading and validation."""

    def test_defaults_match_constants(self):
        """Test timing defaults equal the module constants."""
        with patch.dict(os.environ, {}, clear=True):
            settings = Settings(_env_file=None)

        assert settings.environment == Environment.DEVELOPMENT
        assert settings.poll_interval_seconds == POLL_INTERVAL_SECONDS
        assert settings.authorization_timeout == AUTHORIZATION_TIMEOUT
        assert settings.auth_token is None
        assert settings.open_authorization_surface is True
        assert settings.is_development is True

    def test_environment_overrides(self):
        env = {
            "GAMELINK_ENVIRONMENT": "testing",
            "GAMELINK_API_BASE_URL": "https://api.example.com/",
            "GAMELINK_AUTH_TOKEN": "tok-123",
            "GAMELINK_POLL_INTERVAL_SECONDS": "2.5",
            "GAMELINK_AUTHORIZATION_TIMEOUT_MINUTES": "1",
        }
        with patch.dict(os.environ, env, clear=True):
            settings = get_settings()

        assert settings.is_testing is True
        assert settings.api_base_url == "https://api.example.com"
        assert settings.auth_token.get_secret_value() == "tok-123"
        assert "tok-123" not in repr(settings)
        assert settings.poll_interval_seconds == 2.5
        assert settings.authorization_timeout == timedelta(minutes=1)

    def test_get_settings_is_cached(self):
        with patch.dict(os.environ, {}, clear=True):
            assert get_settings() is get_settings()

    def test_initiate_path_requires_slug_placeholder(self):
        with pytest.raises(ValidationError):
            Settings(_env_file=None, initiate_path_template="/api/initiate")

    @pytest.mark.parametrize("field", ["poll_interval_seconds", "authorization_timeout_minutes"])
    def test_timing_values_must_be_positive(self, field):
        with pytest.raises(ValidationError):
            Settings(_env_file=None, **{field: 0})


@pytest.mark.unit
class TestContainer:
    """Test container factories."""

    @pytest.mark.parametrize(
        ("environment", "use_json"),
        [
            (Environment.DEVELOPMENT, False),
            (Environment.TESTING, True),
            (Environment.CI, True),
            (Environment.PRODUCTION, False),
        ],
    )
    def test_get_logger_selects_renderer(self, environment, use_json):
        """Test JSON output in testing/ci, human-readable elsewhere."""
        settings = Settings(_env_file=None, environment=environment, log_level="DEBUG")
        with (
            patch("gamelink.core.container.get_settings", return_value=settings),
            patch("gamelink.infrastructure.logging.ConsoleAdapter") as mock_console,
        ):
            mock_console.return_value = MagicMock()

            logger = container.get_logger()

        mock_console.assert_called_once_with(use_json=use_json, level="DEBUG")
        assert logger is mock_console.return_value

    def test_get_linking_client_uses_settings(self):
        settings = Settings(
            _env_file=None,
            api_base_url="https://api.example.com",
            auth_token="tok-123",
            http_timeout_seconds=7.0,
        )
        with patch("gamelink.core.container.get_settings", return_value=settings):
            client = container.get_linking_client()

            assert container.get_linking_client() is client

        assert client._base_url == "https://api.example.com"
        assert client._timeout == 7.0
        assert client._headers()["Authorization"] == "Bearer tok-123"

    def test_build_link_session(self):
        """Test the session factory wires an idle session with the given poller."""
        settings = Settings(
            _env_file=None, environment=Environment.TESTING, open_authorization_surface=False
        )
        poller = ManualPoller()
        with patch("gamelink.core.container.get_settings", return_value=settings):
            session = container.build_link_session(poller=poller)

        assert isinstance(session, LinkSession)
        assert session.status == LinkStatus.IDLE
        assert session.catalog.providers == ()
        assert session.registry.snapshot == ()
