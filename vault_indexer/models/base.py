"""Base Pydantic models for MCP tool input validation.

Base Models:
- BaseVaultInput: Optional vault selector shared by every indexing tool
- validate_vault_path: Shared validation for vault-relative paths
"""

from __future__ import annotations

from typing import Optional
from pydantic import BaseModel, Field, field_validator


def validate_vault_path(value: str, field_name: str = "path") -> str:
    """Normalize and validate a vault-relative path.

    Enforces:
    - Non-empty path
    - Forward slashes only (backslashes are converted)
    - No '.' or '..' segments
    - Relative path only (no leading '/')

    Raises:
        ValueError: If the path is empty, absolute, or attempts traversal.
    """
    cleaned = value.strip().replace("\\", "/").rstrip("/")

    if not cleaned:
        raise ValueError(
            f"The {field_name} cannot be empty. "
            "Provide a vault-relative path like 'Projects/Plan.md'."
        )

    if cleaned.startswith("/"):
        raise ValueError(
            f"The {field_name} must be relative to the vault root. "
            "Do not start with '/'. "
            f"Invalid {field_name}: '{cleaned}'"
        )

    parts = cleaned.split("/")
    if any(part in {"", ".", ".."} for part in parts):
        raise ValueError(
            f"The {field_name} cannot contain empty, '.' or '..' segments. "
            f"Invalid {field_name}: '{cleaned}'"
        )

    return cleaned


class BaseVaultInput(BaseModel):
    """Base model for tools that act on one vault."""

    vault: Optional[str] = Field(
        None,
        description=(
            "Vault name (omit to use active vault). "
            "Use list_vaults() to discover available vaults."
        )
    )

    @field_validator('vault')
    @classmethod
    def validate_vault(cls, v: Optional[str]) -> Optional[str]:
        """Validate vault name format.

        Raises:
            ValueError: If vault name is an empty string
        """
        if v is not None and not v.strip():
            raise ValueError(
                "Vault name cannot be empty. "
                "Either omit the vault parameter to use the active vault, "
                "or provide a valid vault name from list_vaults()."
            )

        return v.strip() if v else None
