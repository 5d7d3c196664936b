"""Repository implementations for data persistence."""

from .json_snapshot_repository import JsonSnapshotRepository

__all__ = [
    'JsonSnapshotRepository',
]
