"""
Application layer - Orchestrates domain operations and use cases.

This layer contains:
- The location stack service
- DTOs carrying operation outcomes
- Application-level errors and the service container
"""

from . import exceptions
from . import dtos
from . import services

__all__ = [
    "exceptions",
    "dtos",
    "services"
]
