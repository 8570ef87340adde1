"""Provider domain entity.

Describes an external account system (a gaming platform's account
service) that a user can link. Providers are loaded once per session from
the catalog and never mutated locally.
"""

from dataclasses import dataclass

from gamelink.domain.enums import AuthKind


@dataclass(frozen=True, kw_only=True)
class Provider:
    """Linkable provider descriptor.

    Attributes:
        id: Stable slug identifying the provider (e.g., "destiny-2").
        display_name: Human-readable name (e.g., "Destiny 2").
        auth_kind: How the account gets linked.
        requires_authorization: Whether linking needs the external
            authorization surface.
        slug: Route slug for the initiate endpoint when it differs from id.
        canonical_id: Backend canonical identifier, when already known.
            Used as the success predicate for the attempt.
        vendor: Backing platform name (e.g., "bungie"), searchable.
        description: Optional description for display.
        icon_url: Optional icon URL for display.
        scopes: OAuth scopes the backend will request (informational).

    Example:
        >>> provider = Provider(
        ...     id="destiny-2",
        ...     display_name="Destiny 2",
        ...     auth_kind=AuthKind.OAUTH,
        ...     requires_authorization=True,
        ...     vendor="bungie",
        ... )
        >>> provider.route_slug
        'destiny-2'
    """

    id: str
    display_name: str
    auth_kind: AuthKind
    requires_authorization: bool
    slug: str | None = None
    canonical_id: str | None = None
    vendor: str = ""
    description: str | None = None
    icon_url: str | None = None
    scopes: tuple[str, ...] = ()

    def __post_init__(self) -> None:
        """Validate provider after initialization.

        Raises:
            ValueError: If id or display name are invalid.
        """
        if not self.id or not self.id.strip():
            raise ValueError("Provider id cannot be empty")

        if any(ch.isspace() for ch in self.id):
            raise ValueError("Provider id cannot contain whitespace")

        if not self.display_name:
            raise ValueError("Provider display name cannot be empty")

    @property
    def route_slug(self) -> str:
        """Slug used to address the provider on the initiate endpoint."""
        return self.slug or self.id
