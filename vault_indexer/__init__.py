"""Vault Indexer MCP Server

Keeps a generated index document in every folder of an Obsidian vault,
listing links to the folder's notes and embedding its subfolders' indexes.
"""

from vault_indexer.data_models import VaultMetadata, VaultConfiguration
from vault_indexer.session import resolve_vault, set_active_vault, get_active_vault, get_engine
from vault_indexer.server import mcp, run_server

# Import tools to register them with the MCP server
from vault_indexer import tools  # noqa: F401

__version__ = "0.1.0"
__all__ = [
    "VaultMetadata",
    "VaultConfiguration",
    "resolve_vault",
    "set_active_vault",
    "get_active_vault",
    "get_engine",
    "mcp",
    "run_server",
]
