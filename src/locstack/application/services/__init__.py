"""Application services - Use case implementations."""

from .location_service import LocationStackService

__all__ = [
    "LocationStackService",
]
