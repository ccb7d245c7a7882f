"""Pydantic input models for index maintenance operations.

This module defines input models for the indexing tools:
- Query indexing status
- Toggle, enable, or disable indexing
- Trigger a full rebuild
- Report a vault change (create, delete, rename)
"""

from __future__ import annotations

from typing import Literal, Optional
from pydantic import ConfigDict, Field, field_validator, model_validator

from vault_indexer.data_models import ChildKind, EventType, VaultEvent

from .base import BaseVaultInput, validate_vault_path


class IndexingStatusInput(BaseVaultInput):
    """Input model for get_indexing_status tool."""


class ToggleIndexingInput(BaseVaultInput):
    """Input model for toggle_indexing, enable_indexing and disable_indexing tools.

    Examples:
        >>> ToggleIndexingInput()
        >>> ToggleIndexingInput(vault="work")
    """

    model_config = ConfigDict(
        json_schema_extra={
            "examples": [
                {"vault": None},
                {"vault": "work"},
            ]
        }
    )


class RebuildIndexesInput(BaseVaultInput):
    """Input model for rebuild_indexes tool."""


class VaultEventInput(BaseVaultInput):
    """Input model for report_vault_event tool.

    Describes one change the host made to the vault tree. For renames,
    ``path`` is the new location and ``old_path`` the previous one.

    Examples:
        >>> VaultEventInput(event="create", path="Projects/Plan.md")
        >>> VaultEventInput(event="delete", path="Archive", is_folder=True)
        >>> VaultEventInput(event="rename", path="b/x.md", old_path="a/x.md")
    """

    event: Literal["create", "delete", "rename"] = Field(
        description="Kind of change: 'create', 'delete' or 'rename'."
    )

    path: str = Field(
        min_length=1,
        description=(
            "Vault-relative path of the affected file or folder, with extension. "
            "Examples: 'Projects/Plan.md', 'Daily Notes'."
        ),
        examples=["Projects/Plan.md", "Daily Notes/2025-10-27.md"]
    )

    is_folder: bool = Field(
        False,
        description="True when the affected entry is a folder."
    )

    old_path: Optional[str] = Field(
        None,
        description="Previous vault-relative path. Required for 'rename', rejected otherwise."
    )

    @field_validator('path')
    @classmethod
    def validate_path(cls, v: str) -> str:
        return validate_vault_path(v, "path")

    @field_validator('old_path')
    @classmethod
    def validate_old_path(cls, v: Optional[str]) -> Optional[str]:
        if v is None:
            return None
        return validate_vault_path(v, "old_path")

    @model_validator(mode='after')
    def check_old_path_matches_event(self) -> "VaultEventInput":
        """Require ``old_path`` exactly when the event is a rename."""
        if self.event == "rename" and self.old_path is None:
            raise ValueError("A 'rename' event requires 'old_path'.")
        if self.event != "rename" and self.old_path is not None:
            raise ValueError(f"'old_path' is only valid for 'rename' events, not '{self.event}'.")
        return self

    def to_event(self) -> VaultEvent:
        """Convert the validated input into an engine event."""
        return VaultEvent(
            type=EventType(self.event),
            path=self.path,
            kind=ChildKind.FOLDER if self.is_folder else ChildKind.FILE,
            old_path=self.old_path,
        )
