"""Connection domain entity.

A linked external account as recorded by the backend. The client never
builds one for linking purposes; it only observes connections arriving in
a registry refresh.
"""

from dataclasses import dataclass
from datetime import datetime


@dataclass(frozen=True, kw_only=True)
class Connection:
    """Successfully linked provider account.

    Attributes:
        connection_id: Backend identifier of the connection record.
        provider_id: Provider reference. Backend records use either the
            provider slug or its canonical id here.
        canonical_account_id: Provider-assigned identifier of the linked
            account (opaque).
        is_active: Whether the connection is currently usable.
        connected_at: When the backend recorded the connection.
        last_successful_sync: Last successful data pull, if any.
        provider_display_name: Backend-supplied provider name.
    """

    connection_id: str
    provider_id: str
    canonical_account_id: str | None
    is_active: bool
    connected_at: datetime
    last_successful_sync: datetime | None = None
    provider_display_name: str | None = None

    def __post_init__(self) -> None:
        """Validate connection after initialization.

        Raises:
            ValueError: If identifiers are empty.
        """
        if not self.connection_id:
            raise ValueError("Connection id cannot be empty")

        if not self.provider_id:
            raise ValueError("Connection provider id cannot be empty")

    def matches_canonical(self, canonical_id: str) -> bool:
        """Check whether this connection references a canonical id.

        Args:
            canonical_id: Canonical identifier of the target.

        Returns:
            bool: True if either the account or provider reference matches.
        """
        return canonical_id in (self.canonical_account_id, self.provider_id)

    def matches_provider(self, provider_id: str) -> bool:
        """Check whether this connection references a provider slug."""
        return self.provider_id == provider_id
