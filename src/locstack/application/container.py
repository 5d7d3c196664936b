"""
Application service container for dependency injection.

Wires configuration, the snapshot repository, the shell adapter and the
location service together for the interface layer. One container hosts one
location store, so a container lives as long as the session it serves.
"""

from typing import Optional
import logging

from ..core.config import LocstackConfig
from ..infrastructure.adapters.local_shell import LocalShellAdapter
from ..infrastructure.repositories.json_snapshot_repository import JsonSnapshotRepository
from .ports import IShellAdapter
from .services.location_service import LocationStackService

logger = logging.getLogger(__name__)


class ServiceContainer:
    """Dependency injection container for locstack services."""

    def __init__(self, config: Optional[LocstackConfig] = None,
                 shell: Optional[IShellAdapter] = None):
        self._config = config or LocstackConfig.from_env()
        self._shell = shell
        self._location_service: Optional[LocationStackService] = None

    @property
    def config(self) -> LocstackConfig:
        return self._config

    @property
    def location_service(self) -> LocationStackService:
        """Get or create the location service."""
        if self._location_service is None:
            shell = self._shell or LocalShellAdapter()
            repository = JsonSnapshotRepository(self._config.snapshot_dir)
            self._location_service = LocationStackService(
                snapshot_repository=repository,
                shell=shell,
                seed_last=self._config.seed_last,
            )
            logger.info(f"Location service initialized (snapshots in {self._config.snapshot_dir})")
        return self._location_service

    def reset(self):
        """Reset the container, discarding the location store (useful for testing)."""
        self._location_service = None
        logger.debug("Service container reset")
