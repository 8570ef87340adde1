"""Backend payload mappers."""

from gamelink.infrastructure.backend.mappers.connection_mapper import ConnectionMapper
from gamelink.infrastructure.backend.mappers.initiation_mapper import InitiationMapper
from gamelink.infrastructure.backend.mappers.provider_mapper import ProviderMapper

__all__ = ["ConnectionMapper", "InitiationMapper", "ProviderMapper"]
