"""
Snapshot naming rules.
"""

import re

DEFAULT_SNAPSHOT = "default"

SNAPSHOT_NAME_PATTERN = re.compile(r"^[A-Za-z0-9]*$")
SNAPSHOT_FILTER_PATTERN = re.compile(r"^[A-Za-z0-9*]*$")


def is_valid_snapshot_name(name: str) -> bool:
    return isinstance(name, str) and bool(SNAPSHOT_NAME_PATTERN.match(name))


def is_valid_snapshot_filter(pattern: str) -> bool:
    return isinstance(pattern, str) and bool(SNAPSHOT_FILTER_PATTERN.match(pattern))


def normalize_snapshot_name(name: str) -> str:
    """Map the empty name to the default snapshot."""
    return name or DEFAULT_SNAPSHOT
