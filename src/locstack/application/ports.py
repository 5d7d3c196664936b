"""
Ports for the shell collaborators the location service drives.
"""

from abc import ABC, abstractmethod


class IShellAdapter(ABC):
    """
    Access to the hosting shell: path resolution, working directory and file browser.
    """

    @abstractmethod
    def resolve(self, path: str) -> str:
        """
        Resolve a possibly relative path to an absolute one without trailing separators.

        Raises:
            PathResolutionError: If the path cannot be resolved
        """
        pass

    @abstractmethod
    def current_directory(self) -> str:
        """Return the current working directory."""
        pass

    @abstractmethod
    def change_directory(self, path: str) -> None:
        """
        Make ``path`` the current working directory.

        Raises:
            OSError: If the directory cannot be entered
        """
        pass

    @abstractmethod
    def open_in_browser(self, path: str) -> None:
        """Open ``path`` in the system file browser. Fire and forget."""
        pass
