"""
Repository-level exceptions.
"""


class RepositoryError(Exception):
    """Base exception for snapshot persistence failures."""
    pass


class SnapshotCorruptError(RepositoryError):
    """Raised when a snapshot file exists but cannot be decoded into a mapping."""

    def __init__(self, name: str, reason: str):
        self.name = name
        self.reason = reason
        super().__init__(f"Snapshot '{name}' is corrupt: {reason}")
