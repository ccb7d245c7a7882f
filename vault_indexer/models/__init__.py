"""Pydantic input models for MCP tool validation.

Architecture:
- base: BaseVaultInput and shared path validation
- index_models: Input models for indexing status, toggling, rebuilds and events
- vault_models: Input models for vault management operations

Usage:
    from vault_indexer.models import VaultEventInput, ToggleIndexingInput
    from vault_indexer.models import ListVaultsInput, SetActiveVaultInput
"""

from .base import BaseVaultInput, validate_vault_path
from .index_models import (
    IndexingStatusInput,
    ToggleIndexingInput,
    RebuildIndexesInput,
    VaultEventInput,
)
from .vault_models import (
    ListVaultsInput,
    SetActiveVaultInput,
)

__all__ = [
    # Base models
    "BaseVaultInput",
    "validate_vault_path",
    # Indexing models
    "IndexingStatusInput",
    "ToggleIndexingInput",
    "RebuildIndexesInput",
    "VaultEventInput",
    # Vault models
    "ListVaultsInput",
    "SetActiveVaultInput",
]
