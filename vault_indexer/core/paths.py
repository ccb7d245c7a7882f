"""Path resolution for index documents.

All paths handled here are vault-relative and forward-slash separated. The
vault root is the empty string.
"""

from vault_indexer.constants import GENERIC_INDEX_NAME, INDEX_SUFFIX
from vault_indexer.data_models import FolderRef


def index_name_for(folder_name: str) -> str:
    """Return the file name of the index document owned by ``folder_name``."""
    return f"{folder_name}{INDEX_SUFFIX}"


def index_path_for(folder: FolderRef, root: FolderRef) -> str:
    """Map a folder to the vault-relative path of its index document.

    The root folder's index lives at the top level of the vault; every other
    folder's index lives directly inside that folder.

    Examples:
        >>> index_path_for(FolderRef("", "Vault"), FolderRef("", "Vault"))
        'Vault_index.md'
        >>> index_path_for(FolderRef("Projects/Q4", "Q4"), FolderRef("", "Vault"))
        'Projects/Q4/Q4_index.md'
    """
    if folder.path == root.path:
        return index_name_for(root.name)
    return f"{folder.path}/{index_name_for(folder.name)}"


def join_path(parent: str, name: str) -> str:
    """Join a child name onto a vault-relative folder path."""
    return f"{parent}/{name}" if parent else name


def parent_path(path: str) -> str:
    """Return the vault-relative path of the folder containing ``path``.

    Top-level entries belong to the root, whose path is ``""``.
    """
    head, sep, _ = path.rpartition("/")
    return head if sep else ""


def name_of(path: str) -> str:
    """Return the last segment of a vault-relative path."""
    return path.rpartition("/")[2]


def is_index_document_name(name: str) -> bool:
    """Recognize a generated index document by its naming convention alone."""
    return name.endswith(INDEX_SUFFIX)


def is_own_index(name: str, folder_name: str) -> bool:
    """Check whether a file in ``folder_name`` is that folder's own index."""
    return name == GENERIC_INDEX_NAME or name == index_name_for(folder_name)
