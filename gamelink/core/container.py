"""Dependency factories (composition root).

Application-scoped singletons for infrastructure, plus a factory wiring a
complete linking workflow from settings:
- Logging (console, JSON in testing/ci)
- Linking backend client (httpx)
- Provider catalog, connection registry and link session

Infrastructure imports are deferred into the factories so the core
package keeps no import-time dependency on other layers.

Usage:
    from gamelink.core.container import build_link_session

    session = build_link_session()
    await session.load()
    session.select_by_id("destiny-2")
"""

from functools import lru_cache
from typing import TYPE_CHECKING

from gamelink.core.config import get_settings

if TYPE_CHECKING:
    from gamelink.application.services import LinkSession
    from gamelink.domain.protocols import LoggerProtocol, PollerProtocol
    from gamelink.infrastructure.backend import LinkingAPIClient


# ============================================================================
# Application-Scoped Dependencies (Singletons)
# ============================================================================


@lru_cache()
def get_logger() -> "LoggerProtocol":
    """Return the application-scoped logger singleton.

    - development/production: ConsoleAdapter (human-readable)
    - testing/ci: ConsoleAdapter (JSON)

    Returns:
        LoggerProtocol: Logger instance implementing the protocol.
    """
    from gamelink.infrastructure.logging import ConsoleAdapter

    settings = get_settings()
    env = settings.environment.value
    use_json = env in {"testing", "ci"}
    return ConsoleAdapter(use_json=use_json, level=settings.log_level)


@lru_cache()
def get_linking_client() -> "LinkingAPIClient":
    """Return the linking backend client singleton.

    Returns:
        LinkingAPIClient: Client configured from settings.
    """
    from gamelink.infrastructure.backend import LinkingAPIClient

    settings = get_settings()
    token = settings.auth_token.get_secret_value() if settings.auth_token else None
    return LinkingAPIClient(
        base_url=settings.api_base_url,
        auth_token=token,
        graphql_path=settings.graphql_path,
        initiate_path_template=settings.initiate_path_template,
        timeout=settings.http_timeout_seconds,
    )


# ============================================================================
# Request-Scoped Dependencies (New Instance Each Time)
# ============================================================================


def build_link_session(*, poller: "PollerProtocol | None" = None) -> "LinkSession":
    """Wire a link session with its catalog and registry.

    Args:
        poller: Scheduler override (e.g. ManualPoller for hosts with their
            own timer). Defaults to AsyncioPoller.

    Returns:
        LinkSession: Idle session; load the catalog before selecting.
    """
    from gamelink.application.services import (
        ConnectionRegistry,
        LinkSession,
        ProviderCatalog,
    )
    from gamelink.infrastructure.browser_surface import BrowserAuthorizationSurface
    from gamelink.infrastructure.clock import SystemClock
    from gamelink.infrastructure.scheduling import AsyncioPoller

    settings = get_settings()
    logger = get_logger()
    backend = get_linking_client()

    return LinkSession(
        catalog=ProviderCatalog(backend=backend, logger=logger),
        registry=ConnectionRegistry(backend=backend, logger=logger),
        backend=backend,
        surface=BrowserAuthorizationSurface(
            logger=logger, enabled=settings.open_authorization_surface
        ),
        poller=poller if poller is not None else AsyncioPoller(logger=logger),
        clock=SystemClock(),
        logger=logger,
        poll_interval_seconds=settings.poll_interval_seconds,
        authorization_timeout=settings.authorization_timeout,
    )
