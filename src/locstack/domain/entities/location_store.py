"""
Core location store entity - identifier to path bookmarks without infrastructure dependencies.
"""

import fnmatch
import re
from typing import Dict, Iterable, List, Optional, Tuple

from ..exceptions import (
    EntryNotFoundError,
    IdentifierExistsError,
    InvalidIdentifierError,
    PathExistsError,
)

LAST = "last"

IDENTIFIER_PATTERN = re.compile(r"^[A-Za-z0-9_]+$")
ID_FILTER_PATTERN = re.compile(r"^[A-Za-z0-9_*]+$")


def is_valid_identifier(identifier: str) -> bool:
    """Check an identifier against the alphanumeric/underscore character class."""
    return isinstance(identifier, str) and bool(IDENTIFIER_PATTERN.match(identifier))


def is_valid_id_filter(pattern: str) -> bool:
    """Check an identifier filter; like an identifier but may contain '*'."""
    return isinstance(pattern, str) and bool(ID_FILTER_PATTERN.match(pattern))


def split_id_filters(patterns: Iterable[str]) -> Tuple[List[str], List[str]]:
    """
    Partition identifier filters into usable and invalid ones.

    Returns:
        Tuple of (valid patterns, invalid patterns), each in input order
    """
    valid, invalid = [], []
    for pattern in patterns:
        (valid if is_valid_id_filter(pattern) else invalid).append(pattern)
    return valid, invalid


class LocationStore:
    """
    Mapping of bookmark identifiers to absolute directory paths.

    A store starts uninitialized (``entries`` is None), which is a distinct
    state from an initialized but empty store. Every mutating method
    initializes it. The reserved ``last`` identifier is a regular entry that is
    exempt from non-forced clearing and from identifier syntax checks. Adding a
    path held by ``last`` is a collision like any other; a forced add re-keys it.
    Navigation writes ``last`` directly via ``set_last``.

    Paths handed to the store are expected to be resolved already; the store
    itself performs no filesystem access.
    """

    def __init__(self, entries: Optional[Dict[str, str]] = None):
        self._entries: Optional[Dict[str, str]] = dict(entries) if entries is not None else None

    @property
    def initialized(self) -> bool:
        return self._entries is not None

    @property
    def entries(self) -> Dict[str, str]:
        """A shallow copy of the current mapping (empty if uninitialized)."""
        return dict(self._entries or {})

    def __len__(self) -> int:
        return len(self._entries or {})

    def __contains__(self, identifier: str) -> bool:
        return identifier in (self._entries or {})

    def is_empty(self) -> bool:
        return not self._entries

    def get(self, identifier: str) -> Optional[str]:
        return (self._entries or {}).get(identifier)

    @property
    def last(self) -> Optional[str]:
        return self.get(LAST)

    def initialize(self, last: Optional[str] = None) -> bool:
        """
        Initialize an uninitialized store, optionally seeding ``last``.

        Returns:
            True if the store was initialized by this call
        """
        if self._entries is not None:
            return False
        self._entries = {}
        if last is not None:
            self._entries[LAST] = last
        return True

    def find_identifiers(self, path: str) -> List[str]:
        """Return every identifier, ``last`` included, that points at ``path``."""
        return [k for k, existing in (self._entries or {}).items() if existing == path]

    def add(self, identifier: str, path: str, force: bool = False) -> List[str]:
        """
        Bookmark ``path`` under ``identifier``.

        Args:
            identifier: Bookmark identifier
            path: Resolved absolute path
            force: Overwrite an existing identifier and re-key an existing path

        Returns:
            The identifiers that previously held ``path`` and were removed by a
            forced re-key (empty if none)

        Raises:
            InvalidIdentifierError: If the identifier is malformed
            IdentifierExistsError: If the identifier exists and force is False
            PathExistsError: If the path is bookmarked elsewhere and force is False
        """
        if identifier != LAST and not is_valid_identifier(identifier):
            raise InvalidIdentifierError(identifier)

        self.initialize()
        entries = self._entries

        if identifier in entries and not force:
            raise IdentifierExistsError(identifier, entries[identifier])

        owners = [k for k in self.find_identifiers(path) if k != identifier]
        if owners and not force:
            raise PathExistsError(path, owners[0])

        for owner in owners:
            del entries[owner]
        entries[identifier] = path
        return owners

    def remove(self, identifier: str) -> str:
        """
        Delete an entry.

        Returns:
            The path the identifier pointed to

        Raises:
            EntryNotFoundError: If the identifier is not present
        """
        if identifier not in self:
            raise EntryNotFoundError(identifier)
        return self._entries.pop(identifier)

    def set_last(self, path: str) -> None:
        self.initialize()
        self._entries[LAST] = path

    def restore_last(self, path: Optional[str]) -> None:
        """Put ``last`` back to a previous value, dropping it when there was none."""
        if path is None:
            if self._entries is not None:
                self._entries.pop(LAST, None)
        else:
            self.set_last(path)

    def clear(self, force: bool = False) -> None:
        """Drop every entry but ``last``; with ``force`` return to the uninitialized state."""
        if force:
            self._entries = None
            return
        if self._entries is None:
            return
        self._entries = {k: v for k, v in self._entries.items() if k == LAST}

    def replace(self, entries: Dict[str, str]) -> None:
        """Replace the whole mapping with ``entries``."""
        self._entries = dict(entries)

    def match(self, id_patterns: List[str], path_patterns: List[str]) -> Dict[str, str]:
        """
        Select entries by glob patterns.

        Identifier patterns are matched case-sensitively against keys, path
        patterns against values. The two selections are merged as a plain
        union. With no patterns at all the full mapping is returned.
        """
        entries = self._entries or {}
        if not id_patterns and not path_patterns:
            return dict(entries)

        selected: Dict[str, str] = {}
        for identifier, path in entries.items():
            if any(fnmatch.fnmatchcase(identifier, p) for p in id_patterns):
                selected[identifier] = path
            elif any(fnmatch.fnmatch(path, p) for p in path_patterns):
                selected[identifier] = path
        return selected
