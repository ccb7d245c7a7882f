from vault_indexer.core.links import file_link, folder_embed_link, link_for, strip_extension
from vault_indexer.core.paths import (
    index_name_for,
    index_path_for,
    is_index_document_name,
    is_own_index,
    join_path,
    name_of,
    parent_path,
)
from vault_indexer.data_models import ChildKind, ChildRef, FolderRef

ROOT = FolderRef(path="", name="Notes")


def test_root_index_lives_at_top_level():
    assert index_path_for(ROOT, ROOT) == "Notes_index.md"


def test_nested_folder_index_lives_inside_folder():
    folder = FolderRef(path="Projects/Q4", name="Q4")
    assert index_path_for(folder, ROOT) == "Projects/Q4/Q4_index.md"


def test_parent_path_of_top_level_entry_is_root():
    assert parent_path("alpha.md") == ""
    assert parent_path("Projects/Q4/goals.md") == "Projects/Q4"


def test_join_and_name_of():
    assert join_path("", "alpha.md") == "alpha.md"
    assert join_path("Projects", "plan.md") == "Projects/plan.md"
    assert name_of("Projects/Q4") == "Q4"
    assert name_of("alpha.md") == "alpha.md"


def test_index_document_recognized_by_suffix_only():
    assert is_index_document_name("Projects_index.md")
    assert is_index_document_name(index_name_for("Anything"))
    assert not is_index_document_name("index.md")
    assert not is_index_document_name("Projects_index.txt")


def test_own_index_matches_generic_and_derived_names():
    assert is_own_index("index.md", "Projects")
    assert is_own_index("Projects_index.md", "Projects")
    assert not is_own_index("Archive_index.md", "Projects")
    assert not is_own_index("plan.md", "Projects")


def test_file_link_strips_only_last_extension():
    assert file_link("note.md") == "[[note]]"
    assert file_link("v1.4 Release Notes.md") == "[[v1.4 Release Notes]]"
    assert file_link("diagram.png") == "[[diagram]]"
    assert file_link("README") == "[[README]]"


def test_strip_extension_keeps_dotfiles():
    assert strip_extension(".profile") == ".profile"


def test_folder_embed_link():
    assert folder_embed_link("Q4") == "![[Q4_index.md]]"


def test_link_for_dispatches_on_kind():
    assert link_for(ChildRef("plan.md", ChildKind.FILE, "Projects/plan.md")) == "[[plan]]"
    assert link_for(ChildRef("Q4", ChildKind.FOLDER, "Projects/Q4")) == "![[Q4_index.md]]"


def test_special_characters_are_not_escaped():
    assert file_link("a]]b.md") == "[[a]]b]]"
