"""Initiate-authorization response mapper.

Response Structure:
    {"success": true, "authUrl": "https://www.bungie.net/en/OAuth/..."}
    {"success": false, "error": "provider unavailable"}

`authorizationUrl` is accepted as an alias of `authUrl`.
"""

from typing import Any

from gamelink.domain.value_objects import InitiationResponse


class InitiationMapper:
    """Mapper for converting initiate responses to InitiationResponse."""

    def map_response(self, data: dict[str, Any]) -> InitiationResponse:
        """Map an initiate response body.

        Non-string URL or error values are dropped rather than coerced.

        Args:
            data: Decoded JSON body.

        Returns:
            InitiationResponse: Normalized response.
        """
        url = data.get("authorizationUrl") or data.get("authUrl")
        error = data.get("error")

        return InitiationResponse(
            success=data.get("success") is True,
            authorization_url=url if isinstance(url, str) and url else None,
            error=error if isinstance(error, str) and error else None,
        )
