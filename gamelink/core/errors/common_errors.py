"""Generic error values shared by all layers."""

from dataclasses import dataclass

from gamelink.core.errors.domain_error import DomainError


@dataclass(frozen=True, slots=True, kw_only=True)
class NotFoundError(DomainError):
    """Resource not found.

    Attributes:
        resource_type: Type of resource (Provider, Connection, ...).
        resource_id: Identifier that was looked up.
    """

    resource_type: str
    resource_id: str
