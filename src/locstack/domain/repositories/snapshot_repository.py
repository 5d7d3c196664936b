"""
Repository interface for snapshot persistence.
"""

from abc import ABC, abstractmethod
from typing import Dict, List


class ISnapshotRepository(ABC):
    """
    Abstract repository interface for named location snapshots.

    A snapshot is a named mapping of identifiers to paths. Names passed to
    implementations are already validated and normalized (the empty name has
    been mapped to ``default``).
    """

    @abstractmethod
    def exists(self, name: str) -> bool:
        """
        Check if a snapshot exists.

        Raises:
            RepositoryError: If the storage cannot be queried
        """
        pass

    @abstractmethod
    def save(self, name: str, entries: Dict[str, str]) -> None:
        """
        Write a snapshot, overwriting any existing one of the same name.

        Raises:
            RepositoryError: If the write fails
        """
        pass

    @abstractmethod
    def load(self, name: str) -> Dict[str, str]:
        """
        Read a snapshot.

        Returns:
            The identifier to path mapping stored under ``name``

        Raises:
            RepositoryError: If the snapshot is missing or unreadable
            SnapshotCorruptError: If the snapshot does not hold a valid mapping
        """
        pass

    @abstractmethod
    def list_names(self) -> List[str]:
        """
        Enumerate stored snapshot names, de-aliased and sorted.

        Raises:
            RepositoryError: If the storage cannot be listed
        """
        pass

    @abstractmethod
    def delete(self, name: str) -> bool:
        """
        Delete a snapshot.

        Returns:
            True if a snapshot was deleted, False if none existed
        """
        pass

    @abstractmethod
    def describe(self, name: str) -> str:
        """Return a human-readable location of the snapshot (used in messages)."""
        pass
