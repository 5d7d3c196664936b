"""
locstack - named bookmarks for filesystem locations.
"""

__version__ = "0.1.0"

from .application.container import ServiceContainer
from .application.dtos import NavigationResult, OperationResult
from .application.services.location_service import LocationStackService
from .domain.entities.location_store import LAST, LocationStore

__all__ = [
    "__version__",
    "LAST",
    "LocationStore",
    "LocationStackService",
    "NavigationResult",
    "OperationResult",
    "ServiceContainer",
]
