"""Session state: active vault selection and per-vault indexing engines."""

import logging
from typing import Dict, Optional
from mcp.server.fastmcp import Context

from vault_indexer.config import get_vault_configuration
from vault_indexer.core.filesystem import LocalVaultFileSystem
from vault_indexer.core.lifecycle import LifecycleManager
from vault_indexer.data_models import VaultMetadata

logger = logging.getLogger(__name__)

# Session state storage
_ACTIVE_VAULTS: Dict[int, str] = {}

# One engine per vault name, shared by every session
_ENGINES: Dict[str, LifecycleManager] = {}


def get_session_key(ctx: Context) -> int:
    """Produce a stable per-session key for active vault tracking.

    Args:
        ctx: The request context supplied by FastMCP.

    Returns:
        An integer derived from the underlying session object identity.
    """
    return id(ctx.session)


def set_active_vault(ctx: Context, vault_name: str) -> VaultMetadata:
    """Set the active vault for a client session.

    Raises:
        ValueError: If ``vault_name`` is not present in the configuration.
    """
    metadata = get_vault_configuration().get(vault_name)
    _ACTIVE_VAULTS[get_session_key(ctx)] = metadata.name
    return metadata


def get_active_vault(ctx: Context) -> VaultMetadata:
    """Retrieve the active vault for a session, falling back to the default."""
    configuration = get_vault_configuration()
    vault_name = _ACTIVE_VAULTS.get(get_session_key(ctx), configuration.default_vault)
    return configuration.get(vault_name)


def resolve_vault(vault: Optional[str], ctx: Optional[Context] = None) -> VaultMetadata:
    """Resolve which vault metadata should be used for an operation.

    Args:
        vault: Optional friendly vault name provided directly by the caller.
        ctx: Optional FastMCP context used to infer the active vault when ``vault``
            is not supplied.

    Raises:
        ValueError: If the supplied ``vault`` name is not recognized.
    """
    if vault:
        return get_vault_configuration().get(vault)

    if ctx is not None:
        return get_active_vault(ctx)

    configuration = get_vault_configuration()
    return configuration.get(configuration.default_vault)


def get_engine(vault: VaultMetadata) -> LifecycleManager:
    """Return the running engine for ``vault``, starting it on first use.

    Starting an engine performs one full rebuild of the vault's indexes.

    Raises:
        FileNotFoundError: If the vault directory does not exist.
    """
    engine = _ENGINES.get(vault.name)
    if engine is not None:
        return engine

    if not vault.path.is_dir():
        raise FileNotFoundError(f"Vault '{vault.name}' is not accessible at {vault.path}")

    engine = LifecycleManager(LocalVaultFileSystem(vault.path))
    engine.start()
    _ENGINES[vault.name] = engine
    return engine


def find_engine(name: str) -> Optional[LifecycleManager]:
    """Return the engine already started for vault ``name``, if any."""
    return _ENGINES.get(name)


def shutdown_engines() -> dict[str, list[str]]:
    """Stop every started engine, deleting its generated index documents.

    Returns:
        Mapping of vault name to the index documents that were deleted.
    """
    deleted: dict[str, list[str]] = {}
    while _ENGINES:
        name, engine = _ENGINES.popitem()
        deleted[name] = engine.stop()
        logger.info("Stopped indexer for vault '%s'", name)
    return deleted
