"""Full-tree rebuild of every folder's index document."""

from __future__ import annotations

import logging

from vault_indexer.core.context import EngineContext
from vault_indexer.core.store import IndexDocumentStore
from vault_indexer.core.updater import sync_folder_index
from vault_indexer.data_models import ChildKind, FolderRecord, FolderRef, RebuildReport
from vault_indexer.errors import IndexingError

logger = logging.getLogger(__name__)


def collect_folders(store: IndexDocumentStore, root: FolderRef) -> dict[str, FolderRecord]:
    """Build the folder arena for the tree under ``root``.

    Traversal uses an explicit stack, so deep trees do not grow the call stack.
    Records are inserted root first and every folder appears after its parent.
    A folder that cannot be listed is kept in the arena without subfolders.

    Returns:
        Mapping of folder path to :class:`FolderRecord`, in visiting order.
    """
    arena: dict[str, FolderRecord] = {}
    stack: list[FolderRef] = [root]

    while stack:
        folder = stack.pop()
        if folder.path in arena:
            continue

        record = FolderRecord(folder=folder)
        arena[folder.path] = record
        try:
            children = store.list_children(folder)
        except IndexingError as exc:
            logger.warning("Could not list folder '%s': %s", folder.path or folder.name, exc)
            continue

        subfolders = [child.as_folder() for child in children if child.kind is ChildKind.FOLDER]
        record.subfolders = [sub.path for sub in subfolders]
        # Reversed so the first child by name is visited first
        stack.extend(reversed(subfolders))

    return arena


def rebuild_all(context: EngineContext, store: IndexDocumentStore, root: FolderRef) -> RebuildReport:
    """Synchronize the index document of every folder under ``root``.

    Each folder is visited exactly once, parents before their children. A
    failure on one folder is logged and recorded in the report; the rebuild
    carries on with the remaining folders.

    Args:
        context: Engine state; its rebuild guard is held for the whole walk.
        store: Document store.
        root: The vault root folder.

    Returns:
        A :class:`RebuildReport` describing visited and failed folders.
    """
    report = RebuildReport()
    with context.rebuild_guard():
        logger.info("Rebuilding indexes starting from '%s'", root.name)
        arena = collect_folders(store, root)

        for path, record in arena.items():
            report.folders.append(path)
            try:
                appended = sync_folder_index(store, record.folder, root)
            except IndexingError as exc:
                logger.error("Failed to update index for folder '%s': %s", path or root.name, exc)
                report.failed.append(path)
                continue
            report.appended += len(appended)

    logger.info(
        "Rebuild finished: %d folder(s), %d link(s) added, %d failure(s)",
        len(report.folders),
        report.appended,
        len(report.failed),
    )
    return report
