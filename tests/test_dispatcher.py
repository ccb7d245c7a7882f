"""Tests for incremental index maintenance.

Events are produced by LocalVaultFileSystem's user-side mutations, which
announce changes the same way the host application does.
"""

import logging

import pytest

from vault_indexer.core.context import EngineContext
from vault_indexer.core.dispatcher import EventDispatcher
from vault_indexer.core.store import IndexDocumentStore
from vault_indexer.core.walker import rebuild_all
from vault_indexer.data_models import ChildKind, EventType, VaultEvent


def _read(root, relative):
    return (root / relative).read_text(encoding="utf-8")


@pytest.fixture
def engine(fs):
    """A rebuilt vault with an enabled dispatcher subscribed to it."""
    context = EngineContext(enabled=True)
    store = IndexDocumentStore(fs)
    rebuild_all(context, store, fs.root())
    dispatcher = EventDispatcher(context, store)
    fs.subscribe(dispatcher.handle)
    return dispatcher


class TestCreate:
    def test_new_note_appends_one_link(self, vault_root, fs, engine):
        before = _read(vault_root, "Projects/Projects_index.md")

        fs.write_note("Projects/note.md", "hello")

        after = _read(vault_root, "Projects/Projects_index.md")
        assert after == before + "[[note]]\n"

    def test_new_note_at_top_level_updates_root_index(self, vault_root, fs, engine):
        fs.write_note("gamma.md")
        assert _read(vault_root, "Notes_index.md").splitlines()[-1] == "[[gamma]]"

    def test_duplicate_create_does_not_duplicate_link(self, vault_root, fs, engine):
        fs.write_note("Projects/note.md")
        engine.handle(VaultEvent(EventType.CREATE, "Projects/note.md"))
        assert _read(vault_root, "Projects/Projects_index.md").count("[[note]]") == 1

    def test_new_folder_gets_embed_link_and_own_index(self, vault_root, fs, engine):
        fs.make_folder("Ideas")

        assert "![[Ideas_index.md]]" in _read(vault_root, "Notes_index.md").splitlines()
        assert _read(vault_root, "Ideas/Ideas_index.md") == ""
        assert "[[Ideas_index]]" not in _read(vault_root, "Ideas/Ideas_index.md")

    def test_missing_parent_index_is_logged_not_created(self, vault_root, fs, engine, caplog):
        (vault_root / "Archive" / "Archive_index.md").unlink()

        with caplog.at_level(logging.WARNING, logger="vault_indexer.core.dispatcher"):
            fs.write_note("Archive/old.md")

        assert not (vault_root / "Archive" / "Archive_index.md").exists()
        assert "Archive/Archive_index.md" in caplog.text

    def test_creates_during_rebuild_are_ignored(self, vault_root, fs, engine):
        before = _read(vault_root, "Notes_index.md")
        with engine.context.rebuild_guard():
            fs.write_note("gamma.md")
        assert _read(vault_root, "Notes_index.md") == before

    def test_events_ignored_while_disabled(self, vault_root, fs, engine):
        engine.context.set_enabled(False)
        before = _read(vault_root, "Notes_index.md")
        fs.write_note("gamma.md")
        fs.delete("alpha.md")
        assert _read(vault_root, "Notes_index.md") == before


class TestDelete:
    def test_deleting_note_removes_exactly_its_line(self, vault_root, fs, engine):
        fs.delete("alpha.md")
        assert _read(vault_root, "Notes_index.md") == "![[Archive_index.md]]\n![[Projects_index.md]]\n[[beta]]\n"

    def test_deleting_folder_removes_embed_link(self, vault_root, fs, engine):
        fs.remove_folder("Archive")
        assert "![[Archive_index.md]]" not in _read(vault_root, "Notes_index.md")

    def test_delete_inside_vanished_folder_is_noop(self, vault_root, fs, engine):
        before = _read(vault_root, "Notes_index.md")
        engine.handle(VaultEvent(EventType.DELETE, "Gone/nothing.md"))
        assert _read(vault_root, "Notes_index.md") == before

    def test_deleting_index_document_is_ignored(self, vault_root, fs, engine):
        before = _read(vault_root, "Notes_index.md")
        fs.delete("Projects/Projects_index.md")
        assert _read(vault_root, "Notes_index.md") == before

    def test_manual_lines_survive_delete(self, vault_root, fs, engine):
        index = vault_root / "Projects" / "Projects_index.md"
        index.write_text("Overview\n" + index.read_text(encoding="utf-8"), encoding="utf-8")

        fs.delete("Projects/plan.md")

        assert index.read_text(encoding="utf-8") == "Overview\n![[Q4_index.md]]\n"


class TestRename:
    def test_move_between_folders_relinks(self, vault_root, fs, engine):
        fs.rename("Projects/plan.md", "Archive/plan.md")

        assert "[[plan]]" in _read(vault_root, "Archive/Archive_index.md").splitlines()
        assert "[[plan]]" not in _read(vault_root, "Projects/Projects_index.md").splitlines()

    def test_rename_in_place_replaces_link(self, vault_root, fs, engine):
        fs.rename("alpha.md", "omega.md")

        lines = _read(vault_root, "Notes_index.md").splitlines()
        assert "[[omega]]" in lines
        assert "[[alpha]]" not in lines

    def test_extension_change_keeps_link(self, vault_root, fs, engine):
        fs.rename("alpha.md", "alpha.txt")
        assert "[[alpha]]" in _read(vault_root, "Notes_index.md").splitlines()

    def test_folder_move_builds_indexes_for_subtree(self, vault_root, fs, engine):
        fs.rename("Projects/Q4", "Archive/Q4")

        assert "![[Q4_index.md]]" in _read(vault_root, "Archive/Archive_index.md").splitlines()
        assert "![[Q4_index.md]]" not in _read(vault_root, "Projects/Projects_index.md").splitlines()
        assert _read(vault_root, "Archive/Q4/Q4_index.md") == "[[goals]]\n"

    def test_rename_without_old_path_still_rebuilds(self, vault_root, fs, engine):
        (vault_root / "Archive" / "late.md").write_text("", encoding="utf-8")
        engine.handle(VaultEvent(EventType.RENAME, "Archive/late.md", ChildKind.FILE))
        assert "[[late]]" in _read(vault_root, "Archive/Archive_index.md").splitlines()
        assert not engine.context.is_rebuilding()
