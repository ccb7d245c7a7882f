"""Module-level constants for the vault indexer."""

from pathlib import Path

# Configuration
CONFIG_PATH = Path(__file__).parent.parent / "vaults.yaml"

# Index document naming
INDEX_SUFFIX = "_index.md"
GENERIC_INDEX_NAME = "index.md"

# Logging
LOG_LEVEL = "INFO"
