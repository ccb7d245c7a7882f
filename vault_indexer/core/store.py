"""Index document storage scoped to the indexing engine."""

from __future__ import annotations

from vault_indexer.core.filesystem import VaultFileSystem
from vault_indexer.core.paths import is_index_document_name, name_of
from vault_indexer.data_models import ChildRef, FolderRef


class IndexDocumentStore:
    """Thin adapter over a :class:`VaultFileSystem` for index documents."""

    def __init__(self, fs: VaultFileSystem) -> None:
        self.fs = fs

    def exists(self, path: str) -> bool:
        return self.fs.exists(path)

    def create(self, path: str, text: str = "") -> None:
        self.fs.create(path, text)

    def read(self, path: str) -> str:
        return self.fs.read(path)

    def append(self, path: str, text: str) -> None:
        self.fs.append(path, text)

    def overwrite(self, path: str, text: str) -> None:
        self.fs.overwrite(path, text)

    def delete(self, path: str) -> None:
        self.fs.delete(path)

    def list_children(self, folder: FolderRef) -> list[ChildRef]:
        return self.fs.list_children(folder)

    def index_documents(self) -> list[str]:
        """Every file in the vault named like an index document."""
        return [path for path in self.fs.list_files() if is_index_document_name(name_of(path))]
