"""Domain entities."""

from .location_store import LAST, LocationStore, is_valid_identifier
from .snapshot import DEFAULT_SNAPSHOT, normalize_snapshot_name

__all__ = [
    "LAST",
    "LocationStore",
    "is_valid_identifier",
    "DEFAULT_SNAPSHOT",
    "normalize_snapshot_name",
]
