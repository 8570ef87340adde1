"""AuthorizationSurfaceProtocol - opens the provider's consent page.

The surface is cross-origin and outside this system's control: it is
opened fire-and-forget and then ignored. There is no reliable signal for
the user closing it, so the workflow keeps polling until a match or the
deadline.
"""

from typing import Protocol


class AuthorizationSurfaceProtocol(Protocol):
    """Opens an authorization URL in a detached window or tab."""

    def open(self, authorization_url: str) -> None:
        """Open the URL. Must not raise; failures are the adapter's to log.

        Args:
            authorization_url: Opaque URL returned by the backend.
        """
        ...
