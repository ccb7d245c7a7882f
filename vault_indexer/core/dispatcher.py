"""Incremental index maintenance driven by file-system notifications."""

from __future__ import annotations

import logging
from typing import Callable, Optional

from vault_indexer.core.context import EngineContext
from vault_indexer.core.links import link_for
from vault_indexer.core.paths import index_path_for, is_own_index, name_of, parent_path
from vault_indexer.core.store import IndexDocumentStore
from vault_indexer.core.updater import add_links, expected_links, remove_link, sync_folder_index
from vault_indexer.core.walker import rebuild_all
from vault_indexer.data_models import ChildKind, ChildRef, EventType, FolderRef, VaultEvent
from vault_indexer.errors import DocumentNotFound, IndexingError, StructuralAmbiguity

logger = logging.getLogger(__name__)


class EventDispatcher:
    """Routes each vault notification to a targeted index patch.

    Creates append one link to the parent folder's index, deletes remove one
    link, and renames fall back to a full rebuild. Nothing happens while the
    engine is disabled. Events are handled one at a time, in the order
    :meth:`handle` is called.
    """

    def __init__(self, context: EngineContext, store: IndexDocumentStore) -> None:
        self.context = context
        self.store = store
        self._handlers: dict[EventType, Callable[[VaultEvent], None]] = {
            EventType.CREATE: self._on_create,
            EventType.DELETE: self._on_delete,
            EventType.RENAME: self._on_rename,
        }

    @property
    def root(self) -> FolderRef:
        return self.store.fs.root()

    def handle(self, event: VaultEvent) -> None:
        """Apply one notification. Failures are logged, never raised."""
        if not self.context.is_enabled():
            return
        if self._is_index_document(event.path, event.kind):
            return

        logger.info("Handling %s of '%s'", event.type.value, event.path)
        try:
            self._handlers[event.type](event)
        except IndexingError as exc:
            logger.warning("Could not update index for %s of '%s': %s", event.type.value, event.path, exc)

    # -- helpers -------------------------------------------------------------

    def _is_index_document(self, path: str, kind: ChildKind) -> bool:
        if kind is not ChildKind.FILE:
            return False
        parent = parent_path(path)
        folder_name = self.root.name if parent == "" else name_of(parent)
        return is_own_index(name_of(path), folder_name)

    def _parent_index(self, path: str) -> Optional[str]:
        """Return the derived index path of the folder containing ``path``.

        Returns ``None`` when that folder no longer exists.
        """
        parent = self.store.fs.get_folder(parent_path(path))
        if parent is None:
            return None
        return index_path_for(parent, self.root)

    @staticmethod
    def _link(path: str, kind: ChildKind) -> str:
        return link_for(ChildRef(name=name_of(path), kind=kind, path=path))

    # -- handlers ------------------------------------------------------------

    def _on_create(self, event: VaultEvent) -> None:
        if self.context.is_rebuilding():
            return

        index_path = self._parent_index(event.path)
        if index_path is None or not self.store.exists(index_path):
            # No automatic retry; re-enabling indexing rebuilds everything
            raise DocumentNotFound(index_path or parent_path(event.path))

        add_links(self.store, index_path, [self._link(event.path, event.kind)])

        if event.kind is ChildKind.FOLDER:
            folder = self.store.fs.get_folder(event.path)
            if folder is not None:
                sync_folder_index(self.store, folder, self.root)

    def _on_delete(self, event: VaultEvent) -> None:
        if self.context.is_rebuilding():
            return

        index_path = self._parent_index(event.path)
        if index_path is None:
            logger.debug("Parent of '%s' is gone; nothing to update", event.path)
            return
        if not self.store.exists(index_path):
            raise DocumentNotFound(index_path)

        remove_link(self.store, index_path, self._link(event.path, event.kind))

    def _on_rename(self, event: VaultEvent) -> None:
        """Rebuild everything, then drop the stale link left in the old folder."""
        if event.old_path is None or self.store.fs.get_folder(parent_path(event.path)) is None:
            ambiguity = StructuralAmbiguity(
                f"Cannot resolve folders for rename of '{event.old_path}' to '{event.path}'"
            )
            logger.info("%s; falling back to a full rebuild", ambiguity)

        rebuild_all(self.context, self.store, self.root)

        if event.old_path is not None:
            self._prune_old_link(event.old_path, event.kind)

    def _prune_old_link(self, old_path: str, kind: ChildKind) -> None:
        old_parent = self.store.fs.get_folder(parent_path(old_path))
        if old_parent is None:
            return

        index_path = index_path_for(old_parent, self.root)
        if not self.store.exists(index_path):
            return

        stale = self._link(old_path, kind)
        # A sibling may still produce the same line (e.g. note.md renamed to note.txt)
        if stale in expected_links(self.store, old_parent):
            return
        remove_link(self.store, index_path, stale)
