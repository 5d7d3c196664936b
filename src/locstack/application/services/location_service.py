"""
Application service for location bookmarks and their snapshots.
"""

import fnmatch
import logging
from typing import Dict, List, Optional, Sequence, Tuple

from ...domain.entities.location_store import (
    LAST,
    LocationStore,
    is_valid_identifier,
    split_id_filters,
)
from ...domain.entities.snapshot import (
    is_valid_snapshot_filter,
    is_valid_snapshot_name,
    normalize_snapshot_name,
)
from ...domain.exceptions import IdentifierExistsError, PathExistsError
from ...domain.repositories.exceptions import RepositoryError, SnapshotCorruptError
from ...domain.repositories.snapshot_repository import ISnapshotRepository
from ..dtos import NavigationResult, OperationResult
from ..exceptions import (
    ExternalServiceError,
    PathResolutionError,
    SnapshotError,
    UsageError,
    ValidationError,
)
from ..ports import IShellAdapter

logger = logging.getLogger(__name__)


class LocationStackService:
    """
    Application service for bookmarking, navigating and snapshotting locations.

    The service owns one ``LocationStore`` for its lifetime and drives the
    shell and snapshot collaborators around it. Every operation either
    returns an ``OperationResult`` (recoverable outcomes, including refusals
    that need a force flag) or raises an ``ApplicationError`` (fatal outcomes).
    No operation leaves the store half-updated.

    Parameters
    ----------
    snapshot_repository : ISnapshotRepository
        Storage for named snapshots of the store.
    shell : IShellAdapter
        Path resolver, working directory access and file browser.
    store : LocationStore, optional
        Store to operate on. A fresh uninitialized store is used if omitted.
    seed_last : bool
        Seed ``last`` with the startup directory when the store is initialized.
    """

    def __init__(
        self,
        snapshot_repository: ISnapshotRepository,
        shell: IShellAdapter,
        store: Optional[LocationStore] = None,
        seed_last: bool = True,
    ):
        self._snapshots = snapshot_repository
        self._shell = shell
        self._store = store if store is not None else LocationStore()
        self._startup_directory: Optional[str] = None
        if seed_last:
            try:
                self._startup_directory = self._resolve(None)
            except PathResolutionError as e:
                logger.warning(f"Not seeding last location: {e}")

    @property
    def store(self) -> LocationStore:
        return self._store

    # Helpers

    def _resolve(self, path: Optional[str]) -> str:
        """Resolve ``path``, defaulting to the current directory."""
        if path is None:
            path = self._shell.current_directory()
        return self._shell.resolve(path)

    def _ensure_store(self) -> None:
        if self._store.initialize(self._startup_directory):
            logger.debug(f"Initialized location store (last={self._startup_directory})")

    def _require_identifier(self, identifier: Optional[str]) -> str:
        if not identifier:
            raise UsageError("An identifier is required")
        if identifier != LAST and not is_valid_identifier(identifier):
            raise ValidationError(
                f"Invalid identifier '{identifier}': only letters, digits and '_' are allowed"
            )
        return identifier

    def _snapshot_name(self, name: Optional[str]) -> str:
        name = name or ""
        if not is_valid_snapshot_name(name):
            raise ValidationError(
                f"Invalid snapshot name '{name}': only letters and digits are allowed"
            )
        return normalize_snapshot_name(name)

    def _select(
        self, id_patterns: Sequence[str], path_patterns: Sequence[str]
    ) -> Tuple[Dict[str, str], List[str]]:
        """Apply identifier and path filters; returns (matches, warnings)."""
        id_patterns = list(id_patterns or [])
        path_patterns = list(path_patterns or [])
        valid, invalid = split_id_filters(id_patterns)
        warnings = [f"Invalid identifier filter '{p}' ignored" for p in invalid]

        if (id_patterns or path_patterns) and not (valid or path_patterns):
            return {}, warnings
        return self._store.match(valid, path_patterns), warnings

    # Mutations

    def add(self, identifier: str, path: Optional[str] = None, force: bool = False) -> OperationResult:
        """
        Bookmark ``path`` (default: the current directory) under ``identifier``.

        A forced add overwrites an existing identifier and re-keys a path that
        is already bookmarked under another identifier.
        """
        identifier = self._require_identifier(identifier)
        target = self._resolve(path)
        self._ensure_store()

        try:
            replaced = self._store.add(identifier, target, force=force)
        except IdentifierExistsError as e:
            return OperationResult.failure(
                f"Identifier '{identifier}' already exists ({e.path}). Use --force to overwrite.",
                entries={identifier: e.path},
            )
        except PathExistsError as e:
            return OperationResult.failure(
                f"Path '{target}' already exists under identifier '{e.identifier}'. "
                f"Use --force to re-key it.",
                entries={e.identifier: target},
            )

        logger.info(f"Added location {identifier} -> {target}")
        message = f"Added location '{identifier}' -> {target}"
        if replaced:
            names = ", ".join(f"'{r}'" for r in replaced)
            logger.info(f"Re-keyed {target} from {', '.join(replaced)} to {identifier}")
            message += f" (replaces {names})"
        return OperationResult.success(message, entries={identifier: target})

    def remove(self, identifier: str, force: bool = False) -> OperationResult:
        """Remove one bookmark. Without ``force`` only reports what would be removed."""
        if self._store.is_empty():
            return OperationResult.failure("No locations stored")
        if not identifier or not is_valid_identifier(identifier):
            return OperationResult.failure(
                f"Invalid identifier '{identifier}': only letters, digits and '_' are allowed"
            )
        path = self._store.get(identifier)
        if path is None:
            return OperationResult.failure(f"Identifier '{identifier}' not found")

        if not force:
            return OperationResult.failure(
                f"Would remove '{identifier}' -> {path}. Use --force to confirm.",
                entries={identifier: path},
            )

        self._store.remove(identifier)
        logger.info(f"Removed location {identifier} -> {path}")
        return OperationResult.success(
            f"Removed location '{identifier}' -> {path}", entries={identifier: path}
        )

    def clear(self, force: bool = False) -> OperationResult:
        """Drop all bookmarks but ``last``; with ``force`` discard the whole store."""
        if force:
            count = len(self._store)
            self._store.clear(force=True)
            logger.info(f"Discarded location store ({count} entries)")
            return OperationResult.success(f"Discarded all {count} location(s)")

        before = len(self._store)
        self._store.clear()
        removed = before - len(self._store)
        logger.info(f"Cleared {removed} location(s)")
        return OperationResult.success(
            f"Cleared {removed} location(s)", entries=self._store.entries
        )

    # Queries

    def show(
        self,
        id_patterns: Optional[Sequence[str]] = None,
        path_patterns: Optional[Sequence[str]] = None,
    ) -> OperationResult:
        """
        List bookmarks, optionally filtered by identifier and path glob patterns.

        The returned mapping is a copy; changing it does not affect the store.
        """
        if self._store.is_empty():
            return OperationResult.failure("No locations stored")
        entries, warnings = self._select(id_patterns or [], path_patterns or [])
        return OperationResult.success(entries=entries, warnings=warnings)

    def goto(self, identifier: Optional[str] = None, path: Optional[str] = None) -> NavigationResult:
        """
        Change to a bookmarked location, an explicit path, or back to ``last``.

        The current directory is recorded as ``last`` before moving, so
        repeated calls without arguments toggle between two directories.
        """
        if identifier is not None and path is not None:
            raise UsageError("Specify either an identifier or a path, not both")

        if identifier is not None:
            identifier = self._require_identifier(identifier)
            target = self._store.get(identifier)
            if target is None:
                logger.warning(f"Unknown location identifier: {identifier}")
                return NavigationResult.failure(f"Identifier '{identifier}' not found")
        elif path is not None:
            target = self._resolve(path)
        else:
            target = self._store.last if self._store.initialized else self._startup_directory
            if target is None:
                return NavigationResult.failure("No last location to return to")

        current = self._resolve(None)
        was_initialized = self._store.initialized
        self._ensure_store()
        previous = self._store.last
        self._store.set_last(current)
        try:
            self._shell.change_directory(target)
        except OSError as e:
            if was_initialized:
                self._store.restore_last(previous)
            else:
                self._store.clear(force=True)
            raise ExternalServiceError("shell", f"cannot change directory to {target}: {e}")

        logger.info(f"Moved from {current} to {target}")
        return NavigationResult.success(target, target=target, previous=current)

    def open(
        self,
        id_patterns: Optional[Sequence[str]] = None,
        path_patterns: Optional[Sequence[str]] = None,
    ) -> OperationResult:
        """Open matching bookmarks (all of them without filters) in the file browser."""
        if self._store.is_empty():
            return OperationResult.failure("No locations stored")
        entries, warnings = self._select(id_patterns or [], path_patterns or [])

        paths = list(dict.fromkeys(entries.values()))
        for path in paths:
            logger.debug(f"Opening {path} in file browser")
            self._shell.open_in_browser(path)

        if not paths:
            return OperationResult.success("No matching locations", warnings=warnings)
        return OperationResult.success(
            f"Opened {len(paths)} location(s)", entries=entries, paths=paths, warnings=warnings
        )

    # Snapshots

    def export(self, name: Optional[str] = None, force: bool = False) -> OperationResult:
        """Write the store to the named snapshot (``default`` when unnamed)."""
        name = self._snapshot_name(name)
        try:
            if self._snapshots.exists(name) and not force:
                return OperationResult.failure(
                    f"Snapshot '{name}' already exists ({self._snapshots.describe(name)}). "
                    f"Use --force to overwrite."
                )
            entries = self._store.entries
            self._snapshots.save(name, entries)
        except RepositoryError as e:
            raise ExternalServiceError("snapshot storage", str(e))

        return OperationResult.success(
            f"Exported {len(entries)} location(s) to snapshot '{name}'",
            entries=entries,
            names=[name],
        )

    def import_snapshot(
        self, name: Optional[str] = None, force: bool = False, merge: bool = False
    ) -> OperationResult:
        """
        Load the named snapshot into the store.

        The live store is replaced wholesale, or with ``merge`` the snapshot's
        entries are force-added on top of it. Requires ``force`` either way.
        """
        name = self._snapshot_name(name)
        try:
            if not self._snapshots.exists(name):
                return OperationResult.failure(
                    f"Snapshot '{name}' not found ({self._snapshots.describe(name)})"
                )
            if not force:
                verb = "merge into" if merge else "replace"
                return OperationResult.failure(
                    f"Importing snapshot '{name}' will {verb} the current locations. "
                    f"Use --force to confirm."
                )
            entries = self._snapshots.load(name)
        except SnapshotCorruptError as e:
            raise SnapshotError(str(e))
        except RepositoryError as e:
            raise ExternalServiceError("snapshot storage", str(e))

        invalid = [k for k in entries if k != LAST and not is_valid_identifier(k)]
        if invalid:
            raise SnapshotError(
                f"Snapshot '{name}' contains invalid identifiers: {', '.join(sorted(invalid))}"
            )

        if merge:
            self._ensure_store()
            for identifier, path in entries.items():
                if identifier == LAST:
                    self._store.set_last(path)
                else:
                    self._store.add(identifier, path, force=True)
            logger.info(f"Merged {len(entries)} location(s) from snapshot {name}")
            message = f"Merged {len(entries)} location(s) from snapshot '{name}'"
        else:
            self._store.replace(entries)
            logger.info(f"Imported {len(entries)} location(s) from snapshot {name}")
            message = f"Imported {len(entries)} location(s) from snapshot '{name}'"

        return OperationResult.success(message, entries=self._store.entries, names=[name])

    def list_snapshots(self, name_patterns: Optional[Sequence[str]] = None) -> OperationResult:
        """List stored snapshot names matching any of the glob patterns (default ``*``)."""
        patterns = list(name_patterns) if name_patterns else ["*"]
        valid = [normalize_snapshot_name(p) for p in patterns if is_valid_snapshot_filter(p)]
        warnings = [
            f"Invalid snapshot filter '{p}' ignored"
            for p in patterns
            if not is_valid_snapshot_filter(p)
        ]

        try:
            names = self._snapshots.list_names()
        except RepositoryError as e:
            raise ExternalServiceError("snapshot storage", str(e))

        selected = [n for n in names if any(fnmatch.fnmatchcase(n, p) for p in valid)]
        return OperationResult.success(names=selected, warnings=warnings)

    def delete_snapshot(self, name: Optional[str], force: bool = False) -> OperationResult:
        """Delete a snapshot. The name is mandatory and ``force`` confirms the deletion."""
        if not name:
            raise UsageError("A snapshot name is required")
        name = self._snapshot_name(name)
        location = self._snapshots.describe(name)

        try:
            if not self._snapshots.exists(name):
                return OperationResult.failure(f"Snapshot '{name}' not found ({location})")
            if not force:
                return OperationResult.failure(
                    f"Would delete snapshot '{name}' ({location}). Use --force to confirm."
                )
            self._snapshots.delete(name)
        except RepositoryError as e:
            raise ExternalServiceError("snapshot storage", str(e))

        logger.info(f"Deleted snapshot {name}")
        return OperationResult.success(f"Deleted snapshot '{name}'", names=[name])
