"""Browser authorization surface adapter.

Opens the provider's consent page in a new browser tab. The page is
cross-origin, so after opening nothing more is known about it.
"""

import webbrowser
from urllib.parse import urlsplit

from gamelink.domain.protocols.logger_protocol import LoggerProtocol


class BrowserAuthorizationSurface:
    """AuthorizationSurfaceProtocol implementation using `webbrowser`.

    Failures to open are logged and swallowed at this boundary: the URL
    stays on the attempt so a host can offer it to the user directly.

    Args:
        logger: Structured logger.
        enabled: When False the URL is only logged (headless hosts).
    """

    def __init__(self, *, logger: LoggerProtocol, enabled: bool = True) -> None:
        self._logger = logger
        self._enabled = enabled

    def open(self, authorization_url: str) -> None:
        """Open the URL in a new tab.

        Args:
            authorization_url: Opaque URL from the backend.
        """
        host = urlsplit(authorization_url).netloc
        if not self._enabled:
            self._logger.info("authorization_surface_skipped", authorization_host=host)
            return

        try:
            opened = webbrowser.open_new_tab(authorization_url)
        except webbrowser.Error as e:
            self._logger.warning(
                "authorization_surface_open_failed",
                authorization_host=host,
                error=str(e),
            )
            return

        if not opened:
            self._logger.warning(
                "authorization_surface_not_opened",
                authorization_host=host,
            )
            return

        self._logger.info("authorization_surface_opened", authorization_host=host)
