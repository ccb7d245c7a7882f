"""Shared fixtures: a small vault tree on disk."""

from pathlib import Path

import pytest

from vault_indexer.core.filesystem import LocalVaultFileSystem


def build_vault(base: Path) -> Path:
    """Create the sample vault used across the test suite.

    Notes/
        alpha.md
        beta.md
        Archive/
        Projects/
            plan.md
            Q4/
                goals.md
        .obsidian/app.json   (hidden, never indexed)
    """
    root = base / "Notes"
    (root / "Archive").mkdir(parents=True)
    (root / "Projects" / "Q4").mkdir(parents=True)
    (root / ".obsidian").mkdir()
    (root / "alpha.md").write_text("# Alpha\n", encoding="utf-8")
    (root / "beta.md").write_text("# Beta\n", encoding="utf-8")
    (root / "Projects" / "plan.md").write_text("plan\n", encoding="utf-8")
    (root / "Projects" / "Q4" / "goals.md").write_text("goals\n", encoding="utf-8")
    (root / ".obsidian" / "app.json").write_text("{}", encoding="utf-8")
    return root


@pytest.fixture
def vault_root(tmp_path):
    return build_vault(tmp_path)


@pytest.fixture
def fs(vault_root):
    return LocalVaultFileSystem(vault_root)
