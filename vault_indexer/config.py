"""Reads `vaults.yaml`: which vault directories get folder indexes, and the default one."""

import logging
from functools import lru_cache
from pathlib import Path
import yaml

from vault_indexer.constants import CONFIG_PATH
from vault_indexer.data_models import VaultMetadata, VaultConfiguration

logger = logging.getLogger(__name__)


def load_vault_configuration(config_path: Path = CONFIG_PATH) -> VaultConfiguration:
    """Read the vaults the indexer may maintain from ``config_path``.

    Each entry names a vault directory; its folders get `<folder>_index.md`
    documents once an engine is started for it. A missing directory is only
    logged, so the rest of the configuration stays usable.

    Args:
        config_path: YAML file to read. Defaults to ``vaults.yaml`` at the
            project root.

    Returns:
        :class:`VaultConfiguration` with one :class:`VaultMetadata` per vault and
        the name used when a tool call omits ``vault``.

    Raises:
        FileNotFoundError: If the configuration file is missing.
        ValueError: If the file exists but does not provide the expected structure
            (missing default, empty mapping, invalid entries, etc.).
    """
    if not config_path.exists():
        raise FileNotFoundError(f"Vault configuration file not found at {config_path}")

    raw_config = yaml.safe_load(config_path.read_text(encoding="utf-8")) or {}
    vaults_section = raw_config.get("vaults")
    if not isinstance(vaults_section, dict) or not vaults_section:
        raise ValueError("Vault configuration must include a non-empty 'vaults' mapping")

    processed: dict[str, VaultMetadata] = {}
    for name, entry in vaults_section.items():
        if not isinstance(entry, dict):
            raise ValueError(f"Vault '{name}' must map to a dictionary of settings")

        raw_path = entry.get("path")
        if not isinstance(raw_path, str) or not raw_path.strip():
            raise ValueError(f"Vault '{name}' is missing a valid 'path' string")

        resolved_path = Path(raw_path).expanduser().resolve(strict=False)
        description = (entry.get("description") or "").strip()
        exists = resolved_path.is_dir()
        if not exists:
            logger.warning("Vault '%s' points at missing directory %s", name, resolved_path)

        processed[name] = VaultMetadata(
            name=name,
            path=resolved_path,
            description=description,
            exists=exists,
        )

    default_vault = raw_config.get("default")
    if not isinstance(default_vault, str) or default_vault not in processed:
        raise ValueError("Vault configuration must specify a 'default' vault present in the mapping")

    return VaultConfiguration(default_vault=default_vault, vaults=processed)


@lru_cache(maxsize=1)
def get_vault_configuration() -> VaultConfiguration:
    """Return the configuration from ``CONFIG_PATH``, loading it on first use."""
    return load_vault_configuration()
