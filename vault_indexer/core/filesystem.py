"""File-system collaborator used by the indexing engine.

:class:`VaultFileSystem` is the interface the engine depends on: document
primitives, directory listing, and a notification channel delivering
create/delete/rename events. :class:`LocalVaultFileSystem` implements it on
top of a vault directory on disk.
"""

from __future__ import annotations

import logging
import os
import shutil
from abc import ABC, abstractmethod
from pathlib import Path
from typing import Callable, Optional

from vault_indexer.core.paths import join_path
from vault_indexer.data_models import ChildKind, ChildRef, EventType, FolderRef, VaultEvent
from vault_indexer.errors import DocumentNotFound, ReadWriteFailure

logger = logging.getLogger(__name__)

EventListener = Callable[[VaultEvent], None]


class VaultFileSystem(ABC):
    """Abstract vault storage plus its event bus."""

    def __init__(self) -> None:
        self._listeners: list[EventListener] = []

    # -- notifications -------------------------------------------------------

    def subscribe(self, listener: EventListener) -> None:
        if listener not in self._listeners:
            self._listeners.append(listener)

    def unsubscribe(self, listener: EventListener) -> None:
        if listener in self._listeners:
            self._listeners.remove(listener)

    def notify(self, event: VaultEvent) -> None:
        """Deliver ``event`` to every subscriber, in subscription order."""
        for listener in list(self._listeners):
            listener(event)

    # -- storage primitives --------------------------------------------------

    @abstractmethod
    def root(self) -> FolderRef: ...

    @abstractmethod
    def read(self, path: str) -> str: ...

    @abstractmethod
    def create(self, path: str, text: str) -> None: ...

    @abstractmethod
    def append(self, path: str, text: str) -> None: ...

    @abstractmethod
    def overwrite(self, path: str, text: str) -> None: ...

    @abstractmethod
    def delete(self, path: str) -> None: ...

    @abstractmethod
    def exists(self, path: str) -> bool: ...

    @abstractmethod
    def get_folder(self, path: str) -> Optional[FolderRef]: ...

    @abstractmethod
    def list_children(self, folder: FolderRef) -> list[ChildRef]: ...

    @abstractmethod
    def list_files(self) -> list[str]: ...


def _is_hidden(name: str) -> bool:
    return name.startswith(".")


class LocalVaultFileSystem(VaultFileSystem):
    """Vault storage backed by a directory.

    Entries whose name starts with ``.`` (``.obsidian``, ``.git``, ...) are not
    part of the tree. Mutations made through this object are announced to
    subscribers the same way user edits are, including mutations the indexer
    performs itself.
    """

    def __init__(self, root_path: Path, name: Optional[str] = None) -> None:
        super().__init__()
        self.root_path = Path(root_path).expanduser().resolve(strict=False)
        self.name = name or self.root_path.name

    def root(self) -> FolderRef:
        return FolderRef(path="", name=self.name)

    def resolve(self, path: str) -> Path:
        """Resolve a vault-relative path to an absolute path inside the vault.

        Raises:
            ValueError: If the resolved path escapes the vault root.
        """
        candidate = (self.root_path / path).resolve(strict=False)
        if not candidate.is_relative_to(self.root_path):
            raise ValueError(f"Path '{path}' escapes the vault.")
        return candidate

    def relative(self, absolute: Path) -> str:
        return absolute.relative_to(self.root_path).as_posix()

    # -- documents -----------------------------------------------------------

    def read(self, path: str) -> str:
        target = self.resolve(path)
        if not target.is_file():
            raise DocumentNotFound(path)
        try:
            return target.read_text(encoding="utf-8")
        except (OSError, UnicodeDecodeError) as exc:
            raise ReadWriteFailure(path, "read", exc) from exc

    def create(self, path: str, text: str) -> None:
        target = self.resolve(path)
        try:
            with target.open("x", encoding="utf-8") as handle:
                handle.write(text)
        except OSError as exc:
            raise ReadWriteFailure(path, "create", exc) from exc
        logger.debug("Created '%s'", path)
        self.notify(VaultEvent(EventType.CREATE, path, ChildKind.FILE))

    def append(self, path: str, text: str) -> None:
        target = self.resolve(path)
        if not target.is_file():
            raise DocumentNotFound(path)
        try:
            with target.open("a", encoding="utf-8") as handle:
                handle.write(text)
        except OSError as exc:
            raise ReadWriteFailure(path, "append to", exc) from exc

    def overwrite(self, path: str, text: str) -> None:
        target = self.resolve(path)
        if not target.is_file():
            raise DocumentNotFound(path)
        try:
            target.write_text(text, encoding="utf-8")
        except OSError as exc:
            raise ReadWriteFailure(path, "overwrite", exc) from exc

    def delete(self, path: str) -> None:
        target = self.resolve(path)
        if not target.is_file():
            raise DocumentNotFound(path)
        try:
            target.unlink()
        except OSError as exc:
            raise ReadWriteFailure(path, "delete", exc) from exc
        logger.debug("Deleted '%s'", path)
        self.notify(VaultEvent(EventType.DELETE, path, ChildKind.FILE))

    def exists(self, path: str) -> bool:
        return self.resolve(path).is_file()

    # -- tree ----------------------------------------------------------------

    def get_folder(self, path: str) -> Optional[FolderRef]:
        if path == "":
            return self.root()
        if any(_is_hidden(part) for part in path.split("/")):
            return None
        if not self.resolve(path).is_dir():
            return None
        return FolderRef(path=path, name=path.rpartition("/")[2])

    def list_children(self, folder: FolderRef) -> list[ChildRef]:
        """List the visible direct children of ``folder``, ordered by name."""
        directory = self.resolve(folder.path)
        if not directory.is_dir():
            raise DocumentNotFound(folder.path)

        children: list[ChildRef] = []
        try:
            with os.scandir(directory) as entries:
                for entry in entries:
                    if _is_hidden(entry.name):
                        continue
                    try:
                        is_dir = entry.is_dir(follow_symlinks=False)
                    except OSError:
                        is_dir = False
                    kind = ChildKind.FOLDER if is_dir else ChildKind.FILE
                    children.append(ChildRef(entry.name, kind, join_path(folder.path, entry.name)))
        except OSError as exc:
            raise ReadWriteFailure(folder.path, "list", exc) from exc

        children.sort(key=lambda child: child.name)
        return children

    def list_files(self) -> list[str]:
        files: list[str] = []
        for path in self.root_path.rglob("*"):
            relative = path.relative_to(self.root_path)
            if any(_is_hidden(part) for part in relative.parts):
                continue
            if path.is_file():
                files.append(relative.as_posix())
        files.sort()
        return files

    # -- user-side mutations -------------------------------------------------
    # These mirror what the host application does when a user edits the vault:
    # change the tree, then announce the change.

    def write_note(self, path: str, text: str = "") -> None:
        """Create a new file (and missing parent folders) and announce it."""
        target = self.resolve(path)
        target.parent.mkdir(parents=True, exist_ok=True)
        self.create(path, text)

    def make_folder(self, path: str) -> None:
        target = self.resolve(path)
        try:
            target.mkdir(parents=True)
        except OSError as exc:
            raise ReadWriteFailure(path, "create folder", exc) from exc
        self.notify(VaultEvent(EventType.CREATE, path, ChildKind.FOLDER))

    def remove_folder(self, path: str) -> None:
        target = self.resolve(path)
        if not target.is_dir():
            raise DocumentNotFound(path)
        try:
            shutil.rmtree(target)
        except OSError as exc:
            raise ReadWriteFailure(path, "delete folder", exc) from exc
        self.notify(VaultEvent(EventType.DELETE, path, ChildKind.FOLDER))

    def rename(self, old_path: str, new_path: str) -> None:
        """Move a file or folder, creating the destination's parents."""
        source = self.resolve(old_path)
        destination = self.resolve(new_path)
        if not source.exists():
            raise DocumentNotFound(old_path)
        kind = ChildKind.FOLDER if source.is_dir() else ChildKind.FILE
        try:
            destination.parent.mkdir(parents=True, exist_ok=True)
            source.rename(destination)
        except OSError as exc:
            raise ReadWriteFailure(old_path, "rename", exc) from exc
        self.notify(VaultEvent(EventType.RENAME, new_path, kind, old_path=old_path))
