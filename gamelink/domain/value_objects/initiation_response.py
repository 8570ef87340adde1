"""Initiate authorization response value object."""

from dataclasses import dataclass


@dataclass(frozen=True, slots=True, kw_only=True)
class InitiationResponse:
    """Backend answer to an initiate-authorization request.

    A response is usable only when `success` is true AND a URL is present;
    anything else is an initiation failure.

    Attributes:
        success: Backend-reported success flag.
        authorization_url: Opaque URL of the authorization surface.
        error: Backend-supplied failure reason.
    """

    success: bool
    authorization_url: str | None = None
    error: str | None = None

    @property
    def is_usable(self) -> bool:
        """Check if the response carries an authorization URL to open."""
        return self.success and bool(self.authorization_url)
