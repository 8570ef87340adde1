"""Connection mapper.

Converts `userProviderConnections` GraphQL entries to Connection entities.

Connection Entry Structure:
    {
        "id": "conn-42",
        "providerId": "bungie",           # slug or canonical id
        "providerName": "bungie",
        "providerDisplayName": "Bungie.net",
        "canonicalAccountId": "4611686018467284386",
        "isActive": true,
        "connectedAt": "2025-03-01T12:00:00Z",
        "lastSuccessfulCall": "2025-03-02T08:30:00Z"
    }
"""

from typing import Any

import structlog

from gamelink.domain.entities import Connection
from gamelink.infrastructure.backend.mappers._timestamps import parse_timestamp

logger = structlog.get_logger(__name__)


class ConnectionMapper:
    """Mapper for converting registry entries to Connection.

    Thread-safe: No mutable state, can be shared across requests.
    """

    def map_connection(self, data: dict[str, Any]) -> Connection | None:
        """Map a registry entry to Connection.

        Args:
            data: Entry from the `userProviderConnections` list.

        Returns:
            Connection if mapping succeeds, None if the entry is invalid.
        """
        try:
            return self._map_connection_internal(data)
        except (KeyError, TypeError, ValueError, AttributeError) as e:
            logger.warning(
                "connection_mapping_failed",
                error=str(e),
                error_type=type(e).__name__,
            )
            return None

    def _map_connection_internal(self, data: dict[str, Any]) -> Connection | None:
        """Internal mapping logic.

        Raises exceptions on invalid data (caught by map_connection).
        """
        connected_at = parse_timestamp(data["connectedAt"])
        if connected_at is None:
            logger.debug("connection_missing_connected_at", connection_id=data.get("id"))
            return None

        canonical = data.get("canonicalAccountId") or data.get("gameId")

        return Connection(
            connection_id=str(data["id"]),
            provider_id=str(data["providerId"]),
            canonical_account_id=str(canonical) if canonical else None,
            is_active=bool(data.get("isActive", False)),
            connected_at=connected_at,
            last_successful_sync=parse_timestamp(
                data.get("lastSuccessfulSync") or data.get("lastSuccessfulCall")
            ),
            provider_display_name=(
                data.get("providerDisplayName") or data.get("providerName")
            ),
        )
