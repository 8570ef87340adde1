"""Linking backend adapter."""

from gamelink.infrastructure.backend.linking_api_client import LinkingAPIClient

__all__ = ["LinkingAPIClient"]
