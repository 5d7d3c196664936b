import posixpath

import pytest

from locstack.application.container import ServiceContainer
from locstack.application.exceptions import PathResolutionError
from locstack.application.ports import IShellAdapter
from locstack.application.services.location_service import LocationStackService
from locstack.core.config import LocstackConfig
from locstack.infrastructure.repositories.json_snapshot_repository import JsonSnapshotRepository


class FakeShell(IShellAdapter):
    """In-memory shell: POSIX path arithmetic, recorded directory changes and launches."""

    def __init__(self, cwd="/home/user"):
        self.cwd = cwd
        self.missing = set()
        self.unenterable = set()
        self.opened = []
        self.visited = []

    def resolve(self, path):
        if not path.startswith("/"):
            path = posixpath.join(self.cwd, path)
        path = posixpath.normpath(path)
        if path in self.missing:
            raise PathResolutionError(path, "No such file or directory")
        return path.rstrip("/") or "/"

    def current_directory(self):
        return self.cwd

    def change_directory(self, path):
        if path in self.unenterable:
            raise PermissionError(f"Permission denied: '{path}'")
        self.cwd = path
        self.visited.append(path)

    def open_in_browser(self, path):
        self.opened.append(path)


@pytest.fixture
def fake_shell():
    return FakeShell()


@pytest.fixture
def snapshot_dir(tmp_path):
    return tmp_path / "snapshots"


@pytest.fixture
def snapshot_repository(snapshot_dir):
    return JsonSnapshotRepository(str(snapshot_dir))


@pytest.fixture
def service(snapshot_repository, fake_shell):
    return LocationStackService(snapshot_repository=snapshot_repository, shell=fake_shell)


@pytest.fixture
def container(snapshot_dir, fake_shell):
    config = LocstackConfig(snapshot_dir=str(snapshot_dir))
    return ServiceContainer(config, shell=fake_shell)
