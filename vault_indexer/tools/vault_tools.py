"""MCP tools for choosing which vault's folder indexes are maintained."""

import logging
from typing import Any
from mcp.server.fastmcp import Context

from vault_indexer.server import mcp
from vault_indexer.models import ListVaultsInput, SetActiveVaultInput
from vault_indexer.config import get_vault_configuration
from vault_indexer.session import (
    set_active_vault as set_active_vault_session,
    get_active_vault,
    get_session_key,
    find_engine,
)

logger = logging.getLogger(__name__)


def _vault_entry(metadata) -> dict[str, Any]:
    """Vault payload plus the state of its indexer, if one is running."""
    entry = metadata.as_payload()
    engine = find_engine(metadata.name)
    entry["indexer_started"] = engine is not None and engine.started
    entry["indexing_enabled"] = engine is not None and engine.context.is_enabled()
    return entry


@mcp.tool()
async def list_vaults(
    input: ListVaultsInput,
    ctx: Context | None = None,
) -> dict[str, Any]:
    """List the vaults the indexer can maintain and whether indexing is on.

    A vault's indexer starts (and rebuilds every folder index once) when the
    server starts or when a tool first touches that vault.

    Returns:
        {
            "default": str,    # Vault used when no vault is given
            "active": str,     # Vault selected for this session (or None)
            "vaults": [
                {
                    "name": str,
                    "path": str,
                    "description": str,
                    "exists": bool,
                    "indexer_started": bool,
                    "indexing_enabled": bool
                }
            ]
        }

    Error Handling:
        - vaults.yaml missing → Error with expected config path
        - Invalid config format → Error describing expected YAML structure
    """
    configuration = get_vault_configuration()
    active = None
    if ctx is not None:
        try:
            active = get_active_vault(ctx).name
        except ValueError:
            active = None

    return {
        "default": configuration.default_vault,
        "active": active,
        "vaults": [_vault_entry(metadata) for metadata in configuration.vaults.values()],
    }


@mcp.tool()
async def set_active_vault(
    input: SetActiveVaultInput,
    ctx: Context,
) -> dict[str, Any]:
    """Choose the vault that indexing tools act on for this session.

    toggle_indexing(), rebuild_indexes(), report_vault_event() and the other
    indexing tools use this vault whenever their ``vault`` field is omitted.

    Returns:
        {"vault": str, "path": str, "status": "active"}

    Error Handling:
        - Unknown vault → Error naming the vault, use list_vaults()
    """
    metadata = set_active_vault_session(ctx, input.vault)
    logger.info("Session %s now maintains indexes of vault '%s'", get_session_key(ctx), metadata.name)
    return {
        "vault": metadata.name,
        "path": str(metadata.path),
        "status": "active",
    }
