"""
Shell adapter backed by the local process and filesystem.
"""

import logging
import os
from pathlib import Path

import click

from ...application.exceptions import PathResolutionError
from ...application.ports import IShellAdapter

logger = logging.getLogger(__name__)


def strip_trailing_separators(path: str) -> str:
    """Remove trailing separators, keeping a bare root intact."""
    stripped = path.rstrip("/\\")
    if not stripped:
        return path[:1]
    if stripped.endswith(":"):
        # Windows drive root, e.g. C:\
        return path[:len(stripped) + 1]
    return stripped


class LocalShellAdapter(IShellAdapter):
    """Uses the current process' working directory and ``click.launch`` for browsing."""

    def resolve(self, path: str) -> str:
        try:
            resolved = Path(path).expanduser().resolve(strict=True)
        except (OSError, RuntimeError) as e:
            raise PathResolutionError(path, str(e))
        return strip_trailing_separators(str(resolved))

    def current_directory(self) -> str:
        return os.getcwd()

    def change_directory(self, path: str) -> None:
        os.chdir(path)
        logger.debug(f"Changed directory to {path}")

    def open_in_browser(self, path: str) -> None:
        try:
            click.launch(path)
        except Exception as e:
            logger.warning(f"Failed to open {path} in file browser: {e}")
