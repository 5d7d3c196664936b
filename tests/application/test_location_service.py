"""
Unit tests for LocationStackService.

Uses a fake shell so that navigation and browsing can be observed without
touching the real working directory.
"""

import json

import pytest

from locstack.application.exceptions import (
    ExternalServiceError,
    PathResolutionError,
    SnapshotError,
    UsageError,
    ValidationError,
)
from locstack.application.services.location_service import LocationStackService
from locstack.domain.entities.location_store import LAST, LocationStore


class TestAdd:

    def test_add_defaults_to_current_directory(self, service, fake_shell):
        fake_shell.cwd = "/work/proj"
        result = service.add("proj")

        assert result.ok
        assert service.store.get("proj") == "/work/proj"

    def test_add_resolves_relative_path(self, service):
        result = service.add("docs", path="docs/")
        assert result.ok
        assert result.entries == {"docs": "/home/user/docs"}

    def test_store_is_seeded_with_startup_directory(self, service):
        service.add("a", path="/a")
        assert service.store.entries == {LAST: "/home/user", "a": "/a"}

    def test_store_is_not_seeded_when_disabled(self, snapshot_repository, fake_shell):
        service = LocationStackService(snapshot_repository, fake_shell, seed_last=False)
        service.add("a", path="/a")
        assert service.store.entries == {"a": "/a"}

    def test_missing_identifier_is_fatal(self, service):
        with pytest.raises(UsageError):
            service.add("")

    def test_malformed_identifier_is_fatal(self, service):
        with pytest.raises(ValidationError, match="Invalid identifier"):
            service.add("no-dashes", path="/a")
        assert not service.store.initialized

    def test_unresolvable_path_is_fatal(self, service, fake_shell):
        fake_shell.missing.add("/gone")
        with pytest.raises(PathResolutionError):
            service.add("gone", path="/gone")

    def test_identifier_collision_is_reported(self, service):
        service.add("a", path="/a")
        result = service.add("a", path="/b")

        assert not result.ok
        assert "already exists" in result.message
        assert service.store.get("a") == "/a"

    def test_path_collision_is_reported(self, service):
        service.add("a", path="/a")
        result = service.add("b", path="/a/")

        assert not result.ok
        assert "under identifier 'a'" in result.message
        assert "b" not in service.store

    def test_forced_add_rekeys_path(self, service):
        service.add("a", path="/p")
        result = service.add("b", path="/p", force=True)

        assert result.ok
        assert "replaces 'a'" in result.message
        assert service.store.entries == {LAST: "/home/user", "b": "/p"}

    def test_path_held_by_last_is_reported(self, service):
        result = service.add("home")

        assert not result.ok
        assert "under identifier 'last'" in result.message
        assert service.store.entries == {LAST: "/home/user"}

    def test_forced_add_rekeys_last(self, service):
        result = service.add("home", force=True)

        assert result.ok
        assert "replaces 'last'" in result.message
        assert service.store.entries == {"home": "/home/user"}


class TestRemove:

    def test_remove_on_empty_store(self, service):
        result = service.remove("a", force=True)
        assert not result.ok
        assert "No locations" in result.message

    def test_remove_requires_force(self, service):
        service.add("a", path="/a")
        result = service.remove("a")

        assert not result.ok
        assert result.entries == {"a": "/a"}
        assert "Use --force" in result.message
        assert service.store.get("a") == "/a"

    def test_forced_remove(self, service):
        service.add("a", path="/a")
        result = service.remove("a", force=True)

        assert result.ok
        assert result.entries == {"a": "/a"}
        assert "a" not in service.store

    def test_remove_unknown_identifier(self, service):
        service.add("a", path="/a")
        result = service.remove("b", force=True)
        assert not result.ok
        assert "not found" in result.message

    def test_remove_malformed_identifier_is_reported(self, service):
        service.add("a", path="/a")
        result = service.remove("a*", force=True)
        assert not result.ok
        assert "Invalid identifier" in result.message
        assert "a" in service.store


class TestClear:

    def test_clear_keeps_last(self, service):
        service.add("a", path="/1")
        service.add("b", path="/2")
        result = service.clear()

        assert result.ok
        assert service.store.entries == {LAST: "/home/user"}

    def test_forced_clear_resets_store(self, service):
        service.add("a", path="/1")
        service.clear(force=True)

        assert not service.store.initialized
        assert not service.show().ok


class TestShow:

    @pytest.fixture
    def populated(self, snapshot_repository, fake_shell):
        store = LocationStore({"proj1": "/a", "proj2": "/b", "home": "/c"})
        return LocationStackService(snapshot_repository, fake_shell, store=store)

    def test_show_on_uninitialized_store(self, service):
        result = service.show()
        assert not result.ok
        assert "No locations" in result.message

    def test_show_everything(self, populated):
        result = populated.show()
        assert result.ok
        assert result.entries == {"proj1": "/a", "proj2": "/b", "home": "/c"}

    def test_show_returns_a_copy(self, populated):
        result = populated.show()
        result.entries["evil"] = "/x"
        assert "evil" not in populated.store

    def test_wildcard_filter(self, populated):
        assert populated.show(["proj*"]).entries == {"proj1": "/a", "proj2": "/b"}

    def test_invalid_filter_is_reported_not_fatal(self, populated):
        result = populated.show(["proj?", "home"])
        assert result.ok
        assert result.entries == {"home": "/c"}
        assert result.warnings == ["Invalid identifier filter 'proj?' ignored"]

    def test_only_invalid_filters_match_nothing(self, populated):
        result = populated.show(["a-b"])
        assert result.ok
        assert result.entries == {}

    def test_union_of_id_and_path_filters(self, populated):
        result = populated.show(["proj1"], ["/c"])
        assert result.entries == {"proj1": "/a", "home": "/c"}


class TestGoto:

    def test_goto_identifier(self, service, fake_shell):
        service.add("proj", path="/work/proj")
        result = service.goto("proj")

        assert result.ok
        assert result.target == "/work/proj"
        assert result.previous == "/home/user"
        assert fake_shell.cwd == "/work/proj"
        assert service.store.last == "/home/user"

    def test_goto_path(self, service, fake_shell):
        service.goto(path="/tmp/")
        assert fake_shell.cwd == "/tmp"
        assert service.store.last == "/home/user"

    def test_toggle_between_two_directories(self, snapshot_repository, fake_shell):
        fake_shell.cwd = "/L1"
        store = LocationStore({LAST: "/L0"})
        service = LocationStackService(snapshot_repository, fake_shell, store=store)

        service.goto()
        assert fake_shell.cwd == "/L0"
        assert store.last == "/L1"

        service.goto()
        assert fake_shell.cwd == "/L1"
        assert store.last == "/L0"

    def test_goto_last_uses_seeded_startup_directory(self, service, fake_shell):
        fake_shell.cwd = "/elsewhere"
        service.goto()
        assert fake_shell.cwd == "/home/user"

    def test_goto_without_last(self, snapshot_repository, fake_shell):
        service = LocationStackService(snapshot_repository, fake_shell, seed_last=False)
        result = service.goto()
        assert not result.ok
        assert fake_shell.visited == []

    def test_identifier_and_path_are_exclusive(self, service):
        with pytest.raises(UsageError):
            service.goto("a", path="/a")

    def test_malformed_identifier_is_fatal(self, service):
        with pytest.raises(ValidationError):
            service.goto("bad-id")
        assert not service.store.initialized

    def test_unknown_identifier_warns_and_stays(self, service, fake_shell):
        result = service.goto("nope")
        assert not result.ok
        assert fake_shell.visited == []
        assert not service.store.initialized

    def test_unresolvable_path_leaves_store_untouched(self, service, fake_shell):
        fake_shell.missing.add("/gone")
        with pytest.raises(PathResolutionError):
            service.goto(path="/gone")
        assert not service.store.initialized

    def test_failed_first_change_leaves_store_uninitialized(self, service, fake_shell):
        fake_shell.unenterable.add("/locked")
        with pytest.raises(ExternalServiceError):
            service.goto(path="/locked")
        assert not service.store.initialized
        assert fake_shell.cwd == "/home/user"

    def test_failed_change_restores_last(self, service, fake_shell):
        service.add("locked", path="/locked")
        fake_shell.cwd = "/here"
        fake_shell.unenterable.add("/locked")

        with pytest.raises(ExternalServiceError):
            service.goto("locked")
        assert service.store.last == "/home/user"
        assert fake_shell.cwd == "/here"


class TestOpen:

    def test_open_on_empty_store(self, service, fake_shell):
        assert not service.open().ok
        assert fake_shell.opened == []

    def test_open_everything_deduplicates_paths(self, snapshot_repository, fake_shell):
        store = LocationStore({LAST: "/a", "a": "/a", "b": "/b"})
        service = LocationStackService(snapshot_repository, fake_shell, store=store)

        result = service.open()
        assert result.ok
        assert sorted(fake_shell.opened) == ["/a", "/b"]
        assert len(result.paths) == 2

    def test_open_filtered(self, snapshot_repository, fake_shell):
        store = LocationStore({"proj1": "/a", "proj2": "/b", "home": "/c"})
        service = LocationStackService(snapshot_repository, fake_shell, store=store)

        service.open(path_patterns=["/c"])
        assert fake_shell.opened == ["/c"]

    def test_open_without_matches(self, service, fake_shell):
        service.add("a", path="/a")
        result = service.open(["zzz"])
        assert result.ok
        assert fake_shell.opened == []


class TestSnapshots:

    def test_export_default(self, service, snapshot_dir):
        service.add("a", path="/a")
        result = service.export()

        assert result.ok
        assert result.names == ["default"]
        data = json.loads((snapshot_dir / "locstack.json").read_text())
        assert data == {LAST: "/home/user", "a": "/a"}

    def test_export_malformed_name_is_fatal(self, service):
        with pytest.raises(ValidationError):
            service.export("my_snap")

    def test_export_existing_requires_force(self, service, snapshot_dir):
        service.add("a", path="/a")
        service.export("x")
        service.add("b", path="/b")

        result = service.export("x")
        assert not result.ok
        assert "already exists" in result.message
        assert "b" not in json.loads((snapshot_dir / "locstack_x.json").read_text())

        assert service.export("x", force=True).ok
        assert "b" in json.loads((snapshot_dir / "locstack_x.json").read_text())

    def test_round_trip(self, service):
        service.add("a", path="/a")
        service.add("b", path="/b")
        original = service.store.entries

        service.export("x", force=True)
        service.clear(force=True)
        result = service.import_snapshot("x", force=True)

        assert result.ok
        assert service.store.entries == original

    def test_import_requires_force(self, service):
        service.add("a", path="/a")
        service.export("x")
        service.add("b", path="/b")

        result = service.import_snapshot("x")
        assert not result.ok
        assert "b" in service.store

    def test_import_missing_snapshot(self, service):
        result = service.import_snapshot("nothing", force=True)
        assert not result.ok
        assert "not found" in result.message

    def test_import_replaces_store(self, service):
        service.add("a", path="/a")
        service.export("x")
        service.add("b", path="/b")

        service.import_snapshot("x", force=True)
        assert "b" not in service.store
        assert service.store.get("a") == "/a"

    def test_import_merge(self, service, snapshot_repository):
        snapshot_repository.save("x", {"a": "/a", "c": "/shared"})
        service.add("b", path="/b")
        service.add("d", path="/shared")

        result = service.import_snapshot("x", force=True, merge=True)
        assert result.ok
        assert service.store.entries == {
            LAST: "/home/user", "a": "/a", "b": "/b", "c": "/shared",
        }

    def test_import_corrupt_snapshot_is_fatal(self, service, snapshot_dir):
        snapshot_dir.mkdir(parents=True)
        (snapshot_dir / "locstack_bad.json").write_text("{oops")

        with pytest.raises(SnapshotError):
            service.import_snapshot("bad", force=True)

    def test_import_invalid_identifiers_is_fatal(self, service, snapshot_repository):
        snapshot_repository.save("bad", {"a b": "/a"})
        with pytest.raises(SnapshotError, match="invalid identifiers"):
            service.import_snapshot("bad", force=True)

    def test_list_snapshots(self, service):
        service.export()
        service.export("work")
        service.export("home")

        assert service.list_snapshots().names == ["default", "home", "work"]
        assert service.list_snapshots(["w*"]).names == ["work"]
        assert service.list_snapshots([""]).names == ["default"]

    def test_list_snapshots_invalid_pattern(self, service):
        service.export("work")
        result = service.list_snapshots(["w-*", "*"])
        assert result.names == ["work"]
        assert result.warnings == ["Invalid snapshot filter 'w-*' ignored"]

    def test_delete_snapshot_requires_name(self, service):
        with pytest.raises(UsageError):
            service.delete_snapshot("")

    def test_delete_snapshot_requires_force(self, service, snapshot_repository):
        service.export("x")
        result = service.delete_snapshot("x")
        assert not result.ok
        assert snapshot_repository.exists("x")

        assert service.delete_snapshot("x", force=True).ok
        assert not snapshot_repository.exists("x")

    def test_delete_missing_snapshot(self, service):
        result = service.delete_snapshot("x", force=True)
        assert not result.ok
        assert "not found" in result.message
