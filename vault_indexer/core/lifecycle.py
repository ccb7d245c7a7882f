"""Start, stop, and enable/disable handling for one vault's indexer."""

from __future__ import annotations

import logging
from typing import Optional

from vault_indexer.core.context import EngineContext
from vault_indexer.core.dispatcher import EventDispatcher
from vault_indexer.core.filesystem import VaultFileSystem
from vault_indexer.core.store import IndexDocumentStore
from vault_indexer.core.walker import rebuild_all
from vault_indexer.data_models import RebuildReport
from vault_indexer.errors import IndexingError

logger = logging.getLogger(__name__)


class LifecycleManager:
    """Owns the indexing engine of a single vault.

    Indexing starts disabled. :meth:`start` still rebuilds every index once so
    the documents reflect the tree at load time, and subscribes the event
    dispatcher; the dispatcher ignores events until :meth:`enable` is called.
    :meth:`stop` removes every generated index document whatever the state.
    """

    def __init__(self, fs: VaultFileSystem, context: Optional[EngineContext] = None) -> None:
        self.fs = fs
        self.context = context or EngineContext()
        self.store = IndexDocumentStore(fs)
        self.dispatcher = EventDispatcher(self.context, self.store)
        self.started = False

    def start(self) -> RebuildReport:
        logger.info("Loading indexer for vault '%s'", self.fs.root().name)
        report = self.rebuild()
        self.fs.subscribe(self.dispatcher.handle)
        self.started = True
        return report

    def stop(self) -> list[str]:
        logger.info("Unloading indexer for vault '%s'", self.fs.root().name)
        self.fs.unsubscribe(self.dispatcher.handle)
        self.started = False
        return self.delete_all_indexes()

    def rebuild(self) -> RebuildReport:
        return rebuild_all(self.context, self.store, self.fs.root())

    def enable(self) -> RebuildReport:
        """Rebuild all indexes, then start reacting to vault events."""
        report = self.rebuild()
        self.context.set_enabled(True)
        logger.info("Indexes enabled")
        return report

    def disable(self) -> list[str]:
        """Delete all index documents, then stop reacting to vault events."""
        deleted = self.delete_all_indexes()
        self.context.set_enabled(False)
        logger.info("Indexes disabled")
        return deleted

    def toggle(self) -> bool:
        """Flip between enabled and disabled; returns the new state."""
        if self.context.is_enabled():
            self.disable()
        else:
            self.enable()
        return self.context.is_enabled()

    def delete_all_indexes(self) -> list[str]:
        """Delete every file named like an index document.

        Returns:
            Vault-relative paths of the documents that were deleted.
        """
        deleted: list[str] = []
        try:
            candidates = self.store.index_documents()
        except IndexingError as exc:
            logger.error("Could not scan vault for index documents: %s", exc)
            return deleted

        for path in candidates:
            try:
                self.store.delete(path)
            except IndexingError as exc:
                logger.warning("Could not delete index document '%s': %s", path, exc)
                continue
            deleted.append(path)

        logger.info("Deleted %d index document(s)", len(deleted))
        return deleted

    def status(self) -> dict[str, object]:
        payload: dict[str, object] = {"vault": self.fs.root().name, "started": self.started}
        payload.update(self.context.as_payload())
        payload["index_documents"] = self.store.index_documents()
        return payload
