"""Domain value objects package."""

from gamelink.domain.value_objects.initiation_response import InitiationResponse

__all__ = ["InitiationResponse"]
