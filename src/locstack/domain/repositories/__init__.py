"""Repository interfaces."""

from .exceptions import RepositoryError, SnapshotCorruptError
from .snapshot_repository import ISnapshotRepository

__all__ = [
    "ISnapshotRepository",
    "RepositoryError",
    "SnapshotCorruptError",
]
