"""Pytest configuration and shared test helpers.

Provides:
1. Marker registration
2. Entity builders (providers, connections)
3. Fixtures wiring a LinkSession to in-memory fakes
"""

from datetime import UTC, datetime
from unittest.mock import MagicMock

import pytest
import pytest_asyncio

from gamelink.application.services import (
    ConnectionRegistry,
    LinkSession,
    ProviderCatalog,
)
from gamelink.domain.entities import Connection, Provider
from gamelink.domain.enums import AuthKind
from gamelink.infrastructure.scheduling import ManualPoller
from tests.utils.fakes import FakeBackend, FakeClock, RecordingSurface

# Test helper functions for domain entities


def create_provider(
    provider_id: str = "destiny-2",
    display_name: str = "Destiny 2",
    *,
    canonical_id: str | None = None,
    vendor: str = "bungie",
    slug: str | None = None,
    auth_kind: AuthKind = AuthKind.OAUTH,
    requires_authorization: bool = True,
) -> Provider:
    """Helper to create a Provider for testing."""
    return Provider(
        id=provider_id,
        display_name=display_name,
        auth_kind=auth_kind,
        requires_authorization=requires_authorization,
        slug=slug,
        canonical_id=canonical_id,
        vendor=vendor,
    )


def create_connection(
    provider_id: str = "destiny-2",
    *,
    connection_id: str = "conn-1",
    canonical_account_id: str | None = None,
    is_active: bool = True,
    provider_display_name: str | None = None,
) -> Connection:
    """Helper to create a Connection for testing."""
    return Connection(
        connection_id=connection_id,
        provider_id=provider_id,
        canonical_account_id=canonical_account_id,
        is_active=is_active,
        connected_at=datetime(2025, 1, 1, 12, 0, tzinfo=UTC),
        provider_display_name=provider_display_name,
    )


def create_logger() -> MagicMock:
    """Mock logger whose bound children record into the same mock."""
    logger = MagicMock()
    logger.bind.return_value = logger
    return logger


# Pytest markers for different test types
def pytest_configure(config):
    """Register custom markers."""
    config.addinivalue_line("markers", "unit: Unit tests with mocked dependencies")
    config.addinivalue_line(
        "markers", "integration: Integration tests against mocked HTTP transports"
    )


# =============================================================================
# Link session fixtures
# =============================================================================


@pytest.fixture
def destiny() -> Provider:
    """OAuth provider with a known canonical id."""
    return create_provider(canonical_id="6f1c3b7e-destiny")


@pytest.fixture
def path_of_exile() -> Provider:
    """Second OAuth provider, vendor 'ggg'."""
    return create_provider("path-of-exile", "Path of Exile", vendor="ggg")


@pytest.fixture
def backend(destiny: Provider, path_of_exile: Provider) -> FakeBackend:
    """Backend serving two providers and no connections."""
    return FakeBackend(providers=[destiny, path_of_exile])


@pytest.fixture
def clock() -> FakeClock:
    return FakeClock()


@pytest.fixture
def poller() -> ManualPoller:
    return ManualPoller()


@pytest.fixture
def surface() -> RecordingSurface:
    return RecordingSurface()


@pytest.fixture
def mock_logger() -> MagicMock:
    return create_logger()


@pytest_asyncio.fixture
async def session(
    backend: FakeBackend,
    clock: FakeClock,
    poller: ManualPoller,
    surface: RecordingSurface,
    mock_logger: MagicMock,
) -> LinkSession:
    """LinkSession with the catalog and connections already loaded."""
    link_session = LinkSession(
        catalog=ProviderCatalog(backend=backend, logger=mock_logger),
        registry=ConnectionRegistry(backend=backend, logger=mock_logger),
        backend=backend,
        surface=surface,
        poller=poller,
        clock=clock,
        logger=mock_logger,
    )
    await link_session.load()
    return link_session
