"""FastMCP server initialization and tool registration."""

import logging
from contextlib import asynccontextmanager
from typing import AsyncIterator

from mcp.server.fastmcp import FastMCP

from vault_indexer.config import get_vault_configuration
from vault_indexer.constants import LOG_LEVEL
from vault_indexer.session import get_engine, shutdown_engines

# Initialize logger
logging.basicConfig(level=LOG_LEVEL)
logger = logging.getLogger(__name__)


@asynccontextmanager
async def indexer_lifespan(server: FastMCP) -> AsyncIterator[None]:
    """Start an engine for every reachable vault and tear them down on exit.

    Startup rebuilds each vault's indexes once. Teardown deletes all generated
    index documents, whether or not indexing was enabled at the time.
    """
    for vault in get_vault_configuration().vaults.values():
        if not vault.path.is_dir():
            logger.warning("Skipping vault '%s': %s is not a directory", vault.name, vault.path)
            continue
        get_engine(vault)

    try:
        yield
    finally:
        shutdown_engines()


# Initialize FastMCP server
mcp = FastMCP("vault_indexer", lifespan=indexer_lifespan)

# Tool modules are imported in __init__.py to register all @mcp.tool() decorators


def run_server():
    """Start the MCP server with stdio transport."""
    logger.info("Starting Vault Indexer MCP Server")
    mcp.run(transport="stdio")


if __name__ == "__main__":
    run_server()
