"""MCP tool definitions for vault indexing.

This module imports all tool submodules to register them with the MCP server.
Each tool module uses the @mcp.tool() decorator to auto-register its tools.
"""

# Import all tool modules to register their @mcp.tool() decorated functions
from vault_indexer.tools import vault_tools
from vault_indexer.tools import index_tools

__all__ = [
    "vault_tools",
    "index_tools",
]
