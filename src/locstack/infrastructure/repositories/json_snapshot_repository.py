"""
JSON-based snapshot repository implementation.

Snapshots live side by side in one directory as ``locstack.json`` (the
``default`` snapshot) or ``locstack_<name>.json``. The directory may be a
local path or any fsspec URL.
"""

import json
from pathlib import Path
from typing import Dict, List, Optional

from fsspec.core import url_to_fs
from loguru import logger

from ...domain.entities.snapshot import DEFAULT_SNAPSHOT
from ...domain.repositories.exceptions import RepositoryError, SnapshotCorruptError
from ...domain.repositories.snapshot_repository import ISnapshotRepository

FILE_PREFIX = "locstack"
FILE_SUFFIX = ".json"


def snapshot_filename(name: str) -> str:
    """Map a snapshot name to its file name."""
    if name == DEFAULT_SNAPSHOT:
        return f"{FILE_PREFIX}{FILE_SUFFIX}"
    return f"{FILE_PREFIX}_{name}{FILE_SUFFIX}"


def snapshot_name(filename: str) -> Optional[str]:
    """Map a file name back to its snapshot name, or None if it is not a snapshot file."""
    if filename == f"{FILE_PREFIX}{FILE_SUFFIX}":
        return DEFAULT_SNAPSHOT
    prefix = f"{FILE_PREFIX}_"
    if filename.startswith(prefix) and filename.endswith(FILE_SUFFIX):
        name = filename[len(prefix):-len(FILE_SUFFIX)]
        return name or None
    return None


class JsonSnapshotRepository(ISnapshotRepository):
    """
    fsspec-backed JSON snapshot repository.

    Writes are plain overwrites; there is no locking between processes.
    """

    def __init__(self, directory: Optional[str] = None):
        """
        Initialize repository with a snapshot directory.

        Args:
            directory: Local path or fsspec URL of the snapshot directory.
                      Defaults to ~/.local/locstack
        """
        if directory is None:
            directory = str(Path.home() / ".local" / "locstack")

        self._directory = str(directory)
        self._fs, root = url_to_fs(self._directory)
        self._root = root.rstrip("/") or "/"
        self._logger = logger.bind(repository="JsonSnapshotRepository")

    @property
    def directory(self) -> str:
        return self._directory

    def _path(self, name: str) -> str:
        return f"{self._root.rstrip('/')}/{snapshot_filename(name)}"

    def describe(self, name: str) -> str:
        return self._path(name)

    def exists(self, name: str) -> bool:
        try:
            return self._fs.exists(self._path(name))
        except Exception as e:
            raise RepositoryError(f"Failed to check snapshot '{name}': {e}")

    def save(self, name: str, entries: Dict[str, str]) -> None:
        path = self._path(name)
        try:
            self._fs.makedirs(self._root, exist_ok=True)
            with self._fs.open(path, "w", encoding="utf-8") as f:
                json.dump(entries, f, indent=2, sort_keys=True, ensure_ascii=False)
        except Exception as e:
            raise RepositoryError(f"Failed to save snapshot '{name}' to {path}: {e}")

        self._logger.info(f"Saved snapshot '{name}' with {len(entries)} entries to {path}")

    def load(self, name: str) -> Dict[str, str]:
        path = self._path(name)
        try:
            with self._fs.open(path, "r", encoding="utf-8") as f:
                data = json.load(f)
        except json.JSONDecodeError as e:
            raise SnapshotCorruptError(name, f"invalid JSON in {path}: {e}")
        except FileNotFoundError:
            raise RepositoryError(f"Snapshot '{name}' not found at {path}")
        except Exception as e:
            raise RepositoryError(f"Failed to load snapshot '{name}' from {path}: {e}")

        if not isinstance(data, dict):
            raise SnapshotCorruptError(name, f"expected a JSON object, got {type(data).__name__}")
        for key, value in data.items():
            if not isinstance(value, str):
                raise SnapshotCorruptError(name, f"path for '{key}' is not a string")

        self._logger.debug(f"Loaded snapshot '{name}' with {len(data)} entries from {path}")
        return data

    def list_names(self) -> List[str]:
        try:
            if not self._fs.exists(self._root):
                return []
            files = self._fs.ls(self._root, detail=False)
        except Exception as e:
            raise RepositoryError(f"Failed to list snapshots in {self._directory}: {e}")

        names = set()
        for file_path in files:
            name = snapshot_name(file_path.rstrip("/").rsplit("/", 1)[-1])
            if name is not None:
                names.add(name)
        return sorted(names)

    def delete(self, name: str) -> bool:
        path = self._path(name)
        try:
            if not self._fs.exists(path):
                return False
            self._fs.rm(path)
        except Exception as e:
            raise RepositoryError(f"Failed to delete snapshot '{name}' at {path}: {e}")

        self._logger.info(f"Deleted snapshot '{name}' at {path}")
        return True
