"""Data models for vault configuration and the folder tree the indexer observes."""

from __future__ import annotations
from dataclasses import dataclass, field
from enum import Enum
from pathlib import Path
from typing import Any, Optional


@dataclass(frozen=True)
class VaultMetadata:
    """Normalized metadata describing an Obsidian vault."""

    name: str
    path: Path
    description: str
    exists: bool

    def as_payload(self) -> dict[str, Any]:
        """Return a serializable payload representation."""
        return {
            "name": self.name,
            "path": str(self.path),
            "description": self.description,
            "exists": self.path.is_dir(),
        }


class VaultConfiguration:
    """Holds vault metadata and default resolution helpers.

    Loaded once from vaults.yaml on first use.
    Provides vault lookup by name.
    """

    def __init__(self, default_vault: str, vaults: dict[str, VaultMetadata]) -> None:
        self.default_vault = default_vault
        self.vaults = vaults

    def get(self, name: str) -> VaultMetadata:
        """Get vault metadata by name.

        Args:
            name: The name of the vault to retrieve.

        Returns:
            VaultMetadata for the requested vault.

        Raises:
            ValueError: If the vault name is not found in configuration.
        """
        try:
            return self.vaults[name]
        except KeyError as exc:
            raise ValueError(f"Unknown vault '{name}'") from exc


class ChildKind(str, Enum):
    """Whether a tree entry is a file or a folder."""

    FILE = "file"
    FOLDER = "folder"


@dataclass(frozen=True)
class FolderRef:
    """A folder in the vault tree, identified by its vault-relative path.

    The vault root has the empty path and is named after the vault directory.
    """

    path: str
    name: str


@dataclass(frozen=True)
class ChildRef:
    """A direct child of a folder as reported by the file system."""

    name: str
    kind: ChildKind
    path: str

    def as_folder(self) -> FolderRef:
        return FolderRef(path=self.path, name=self.name)


class EventType(str, Enum):
    CREATE = "create"
    DELETE = "delete"
    RENAME = "rename"


@dataclass(frozen=True)
class VaultEvent:
    """A single file-system notification.

    ``old_path`` is only set for renames; ``path`` is then the new location.
    """

    type: EventType
    path: str
    kind: ChildKind = ChildKind.FILE
    old_path: Optional[str] = None


@dataclass
class FolderRecord:
    """Arena entry built by the tree walker for one folder."""

    folder: FolderRef
    subfolders: list[str] = field(default_factory=list)


@dataclass
class RebuildReport:
    """Outcome of a full rebuild."""

    folders: list[str] = field(default_factory=list)
    failed: list[str] = field(default_factory=list)
    appended: int = 0

    def as_payload(self) -> dict[str, Any]:
        return {
            "folders": len(self.folders),
            "failed": list(self.failed),
            "appended": self.appended,
        }
