"""Catalog provider mapper.

Converts `supportedGames` GraphQL entries to Provider entities.

Catalog Entry Structure:
    {
        "id": "destiny-2",
        "slug": "destiny-2",
        "gameId": "6f1c...",          # canonical uuid, may be null
        "name": "Destiny 2",
        "provider": "bungie",
        "connectionType": "api",      # api | preference | manual
        "requiresOAuth": true,
        "description": "...",
        "iconUrl": "https://...",
        "scopes": ["ReadBasicUserProfile"]
    }
"""

from typing import Any

import structlog

from gamelink.domain.entities import Provider
from gamelink.domain.enums import AuthKind

logger = structlog.get_logger(__name__)


class ProviderMapper:
    """Mapper for converting catalog entries to Provider.

    Thread-safe: No mutable state, can be shared across requests.

    Example:
        >>> mapper = ProviderMapper()
        >>> provider = mapper.map_provider({"id": "poe", "name": "Path of Exile"})
        >>> provider.auth_kind
        <AuthKind.MANUAL: 'manual'>
    """

    def map_provider(self, data: dict[str, Any]) -> Provider | None:
        """Map a catalog entry to Provider.

        Args:
            data: Entry from the `supportedGames` list.

        Returns:
            Provider if mapping succeeds, None if the entry is invalid.
        """
        try:
            return self._map_provider_internal(data)
        except (KeyError, TypeError, ValueError, AttributeError) as e:
            logger.warning(
                "catalog_provider_mapping_failed",
                error=str(e),
                error_type=type(e).__name__,
            )
            return None

    def _map_provider_internal(self, data: dict[str, Any]) -> Provider | None:
        """Internal mapping logic.

        Raises exceptions on invalid data (caught by map_provider).
        """
        provider_id = data.get("id") or data.get("slug")
        if not provider_id:
            logger.debug("catalog_provider_missing_id")
            return None

        requires_oauth = bool(data.get("requiresOAuth", False))
        scopes = data.get("scopes") or []

        return Provider(
            id=str(provider_id),
            display_name=data["name"],
            auth_kind=AuthKind.from_connection_type(
                data.get("connectionType"), requires_oauth=requires_oauth
            ),
            requires_authorization=requires_oauth,
            slug=data.get("slug") or None,
            canonical_id=data.get("gameId") or None,
            vendor=data.get("provider") or "",
            description=data.get("description"),
            icon_url=data.get("iconUrl"),
            scopes=tuple(str(scope) for scope in scopes),
        )
