"""Provider authorization mechanism.

Usage:
    from gamelink.domain.enums import AuthKind

    if provider.auth_kind == AuthKind.OAUTH:
        # Requires the out-of-band authorization surface
"""

from enum import Enum


class AuthKind(str, Enum):
    """How a provider account gets linked.

    String Enum:
        Inherits from str for easy serialization.
        Values are lowercase for consistency.
    """

    OAUTH = "oauth"
    """Linked through the provider's OAuth consent page (external window)."""

    PREFERENCE = "preference"
    """No external account; the link records a user preference."""

    MANUAL = "manual"
    """User enters account details by hand."""

    @classmethod
    def values(cls) -> list[str]:
        """Get all auth kind values as strings.

        Returns:
            list[str]: List of auth kind values.
        """
        return [kind.value for kind in cls]

    @classmethod
    def from_connection_type(
        cls, connection_type: str | None, *, requires_oauth: bool = False
    ) -> "AuthKind":
        """Map the backend's `connectionType` field to an AuthKind.

        The catalog reports API-backed providers as `api`; those are linked
        through OAuth. Unknown values fall back to OAUTH when the provider
        requires authorization, MANUAL otherwise.

        Args:
            connection_type: Raw `connectionType` value.
            requires_oauth: Backend `requiresOAuth` flag.

        Returns:
            AuthKind: Normalized kind.
        """
        normalized = (connection_type or "").strip().lower()
        if normalized in ("api", cls.OAUTH.value):
            return cls.OAUTH
        if normalized in cls.values():
            return cls(normalized)
        return cls.OAUTH if requires_oauth else cls.MANUAL
