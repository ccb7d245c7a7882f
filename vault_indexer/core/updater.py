"""Synchronization of a single folder's index document.

The updater only ever appends missing link lines or removes one specific
line. Lines it did not author (manual notes, stale links) are left alone.
"""

from __future__ import annotations

import logging
from typing import Iterable

from vault_indexer.core.links import link_for
from vault_indexer.core.paths import index_path_for, is_own_index
from vault_indexer.core.store import IndexDocumentStore
from vault_indexer.data_models import ChildKind, FolderRef

logger = logging.getLogger(__name__)


def _append_missing(
    store: IndexDocumentStore,
    index_path: str,
    body: str,
    lines: Iterable[str],
) -> list[str]:
    """Append each line of ``lines`` that ``body`` does not already contain.

    Args:
        store: Document store.
        index_path: Vault-relative path of the index document.
        body: Current document body, read by the caller.
        lines: Candidate link lines, in the order they should be appended.

    Returns:
        The lines that were appended.
    """
    existing = set(body.split("\n"))
    # Manual edits can leave the body without a trailing newline
    needs_break = bool(body) and not body.endswith("\n")
    appended: list[str] = []

    for line in lines:
        if line in existing:
            continue
        store.append(index_path, ("\n" if needs_break else "") + line + "\n")
        needs_break = False
        existing.add(line)
        appended.append(line)

    return appended


def expected_links(store: IndexDocumentStore, folder: FolderRef) -> list[str]:
    """Compute the link lines ``folder``'s index document should contain."""
    lines: list[str] = []
    for child in store.list_children(folder):
        if child.kind is ChildKind.FILE and is_own_index(child.name, folder.name):
            continue
        lines.append(link_for(child))
    return lines


def sync_folder_index(
    store: IndexDocumentStore,
    folder: FolderRef,
    root: FolderRef,
) -> list[str]:
    """Bring one folder's index document up to date with its children.

    Creates the document (empty) when it is missing, then appends a link line
    for every child that is not yet listed. Running it twice without a tree
    change in between writes nothing the second time.

    Args:
        store: Document store.
        folder: Folder whose index document is synchronized.
        root: The vault root, needed to place the root folder's index.

    Returns:
        The lines appended by this call.

    Raises:
        DocumentNotFound: If the folder vanished while being indexed.
        ReadWriteFailure: If the underlying storage fails. The document keeps
            whatever was written before the failure.
    """
    index_path = index_path_for(folder, root)
    if not store.exists(index_path):
        logger.debug("Creating index document '%s'", index_path)
        store.create(index_path, "")

    body = store.read(index_path)
    appended = _append_missing(store, index_path, body, expected_links(store, folder))
    if appended:
        logger.debug("Appended %d link(s) to '%s'", len(appended), index_path)
    return appended


def add_links(store: IndexDocumentStore, index_path: str, lines: Iterable[str]) -> list[str]:
    """Append the given link lines to an existing index document, skipping duplicates.

    Raises:
        DocumentNotFound: If the index document does not exist.
    """
    body = store.read(index_path)
    return _append_missing(store, index_path, body, lines)


def remove_link(store: IndexDocumentStore, index_path: str, line: str) -> bool:
    """Remove every line equal to ``line`` from an index document.

    The remaining lines keep their order. Nothing is written when the line is
    not present.

    Returns:
        ``True`` if the document was rewritten.

    Raises:
        DocumentNotFound: If the index document does not exist.
    """
    existing = store.read(index_path).split("\n")
    if line not in existing:
        return False

    store.overwrite(index_path, "\n".join(entry for entry in existing if entry != line))
    return True
