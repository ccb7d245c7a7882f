"""Index maintenance MCP tools.

This module exposes the indexing engine to MCP clients:
- Inspect indexing state
- Toggle, enable, or disable incremental indexing
- Force a full rebuild
- Report vault changes so affected index documents are patched

All tools delegate to the per-vault engine returned by
vault_indexer.session.get_engine.
"""
from __future__ import annotations

import logging
from typing import Any

from mcp.server.fastmcp import Context

from vault_indexer.server import mcp
from vault_indexer.session import get_engine, resolve_vault
from vault_indexer.models import (
    IndexingStatusInput,
    ToggleIndexingInput,
    RebuildIndexesInput,
    VaultEventInput,
)

logger = logging.getLogger(__name__)


# ==============================================================================
# STATUS
# ==============================================================================

@mcp.tool()
async def get_indexing_status(
    input: IndexingStatusInput,
    ctx: Context | None = None,
) -> dict[str, Any]:
    """Report whether indexing is enabled and list generated index documents.

    Returns:
        {
            "vault": str,
            "started": bool,
            "enabled": bool,
            "rebuilding": bool,
            "index_documents": [str]   # Vault-relative paths
        }
    """
    metadata = resolve_vault(input.vault, ctx)
    return get_engine(metadata).status()


# ==============================================================================
# TOGGLING
# ==============================================================================

@mcp.tool()
async def toggle_indexing(
    input: ToggleIndexingInput,
    ctx: Context | None = None,
) -> dict[str, Any]:
    """Enable indexing if it is off, disable it if it is on.

    Enabling rebuilds every folder's index document. Disabling deletes every
    index document in the vault.

    Returns:
        {"vault": str, "enabled": bool, "message": str}
    """
    metadata = resolve_vault(input.vault, ctx)
    enabled = get_engine(metadata).toggle()
    return {
        "vault": metadata.name,
        "enabled": enabled,
        "message": "Indexes enabled" if enabled else "Indexes disabled",
    }


@mcp.tool()
async def enable_indexing(
    input: ToggleIndexingInput,
    ctx: Context | None = None,
) -> dict[str, Any]:
    """Rebuild all index documents and start patching them on vault changes.

    Returns:
        {"vault": str, "enabled": true, "rebuild": {"folders": int, "failed": [str], "appended": int}}
    """
    metadata = resolve_vault(input.vault, ctx)
    report = get_engine(metadata).enable()
    return {
        "vault": metadata.name,
        "enabled": True,
        "rebuild": report.as_payload(),
    }


@mcp.tool()
async def disable_indexing(
    input: ToggleIndexingInput,
    ctx: Context | None = None,
) -> dict[str, Any]:
    """Delete every index document and stop reacting to vault changes.

    Returns:
        {"vault": str, "enabled": false, "deleted": [str]}
    """
    metadata = resolve_vault(input.vault, ctx)
    deleted = get_engine(metadata).disable()
    return {
        "vault": metadata.name,
        "enabled": False,
        "deleted": deleted,
    }


# ==============================================================================
# REBUILD AND EVENTS
# ==============================================================================

@mcp.tool()
async def rebuild_indexes(
    input: RebuildIndexesInput,
    ctx: Context | None = None,
) -> dict[str, Any]:
    """Synchronize every folder's index document with the current tree.

    Safe to run repeatedly: links already present are never duplicated.

    Returns:
        {"vault": str, "rebuild": {"folders": int, "failed": [str], "appended": int}}
    """
    metadata = resolve_vault(input.vault, ctx)
    report = get_engine(metadata).rebuild()
    return {
        "vault": metadata.name,
        "rebuild": report.as_payload(),
    }


@mcp.tool()
async def report_vault_event(
    input: VaultEventInput,
    ctx: Context | None = None,
) -> dict[str, Any]:
    """Tell the indexer that a file or folder was created, deleted or renamed.

    The change must already have happened on disk. Creates and deletes patch
    the parent folder's index document; renames trigger a full rebuild.
    Ignored while indexing is disabled.

    Returns:
        {"vault": str, "event": str, "path": str, "status": "handled" | "ignored"}

    Error Handling:
        - ValidationError: Empty or absolute path, traversal attempt,
          missing old_path for a rename
        - Index update failures are logged, not raised
    """
    metadata = resolve_vault(input.vault, ctx)
    engine = get_engine(metadata)
    enabled = engine.context.is_enabled()

    logger.info("Received %s event for '%s' in vault '%s'", input.event, input.path, metadata.name)
    engine.fs.notify(input.to_event())
    return {
        "vault": metadata.name,
        "event": input.event,
        "path": input.path,
        "status": "handled" if enabled else "ignored",
    }
