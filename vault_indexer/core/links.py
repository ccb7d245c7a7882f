"""Link lines written into index document bodies."""

from vault_indexer.core.paths import index_name_for
from vault_indexer.data_models import ChildKind, ChildRef


def strip_extension(name: str) -> str:
    """Drop the last extension of a file name, keeping dots inside the stem.

    Hidden-style names such as ``.profile`` have no extension to strip.
    """
    stem, dot, _ = name.rpartition(".")
    return stem if dot and stem else name


def file_link(child_name: str) -> str:
    """Direct wikilink to a sibling file: ``[[name]]``."""
    return f"[[{strip_extension(child_name)}]]"


def folder_embed_link(folder_name: str) -> str:
    """Embedded link to a subfolder's index document: ``![[name_index.md]]``."""
    return f"![[{index_name_for(folder_name)}]]"


def link_for(child: ChildRef) -> str:
    """Return the line an index document should carry for ``child``."""
    if child.kind is ChildKind.FOLDER:
        return folder_embed_link(child.name)
    return file_link(child.name)
