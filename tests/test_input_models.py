"""Tests for Pydantic input models used by the indexing tools."""

import pytest
from pydantic import ValidationError

from vault_indexer.data_models import ChildKind, EventType
from vault_indexer.models import (
    SetActiveVaultInput,
    ToggleIndexingInput,
    VaultEventInput,
    validate_vault_path,
)


class TestValidateVaultPath:
    def test_normalizes_backslashes_and_trailing_slash(self):
        assert validate_vault_path("Projects\\Q4\\") == "Projects/Q4"

    def test_keeps_dots_inside_names(self):
        assert validate_vault_path("Docs/v1.4 notes.md") == "Docs/v1.4 notes.md"

    @pytest.mark.parametrize("bad", ["", "   ", "/abs.md", "../outside.md", "a/./b.md", "a//b.md"])
    def test_rejects_invalid_paths(self, bad):
        with pytest.raises(ValueError):
            validate_vault_path(bad)


class TestVaultEventInput:
    def test_create_event_converts_to_engine_event(self):
        model = VaultEventInput(event="create", path="Projects/plan.md")
        event = model.to_event()
        assert event.type is EventType.CREATE
        assert event.path == "Projects/plan.md"
        assert event.kind is ChildKind.FILE
        assert event.old_path is None

    def test_folder_delete(self):
        event = VaultEventInput(event="delete", path="Archive", is_folder=True).to_event()
        assert event.type is EventType.DELETE
        assert event.kind is ChildKind.FOLDER

    def test_rename_requires_old_path(self):
        with pytest.raises(ValidationError) as exc_info:
            VaultEventInput(event="rename", path="b/x.md")
        assert "old_path" in str(exc_info.value)

    def test_rename_carries_old_path(self):
        event = VaultEventInput(event="rename", path="b/x.md", old_path="a/x.md").to_event()
        assert event.type is EventType.RENAME
        assert event.old_path == "a/x.md"

    def test_old_path_rejected_for_create(self):
        with pytest.raises(ValidationError):
            VaultEventInput(event="create", path="x.md", old_path="y.md")

    def test_unknown_event_rejected(self):
        with pytest.raises(ValidationError):
            VaultEventInput(event="modify", path="x.md")

    def test_traversal_rejected(self):
        with pytest.raises(ValidationError):
            VaultEventInput(event="create", path="../x.md")


class TestVaultSelectors:
    def test_vault_is_optional(self):
        assert ToggleIndexingInput().vault is None

    def test_vault_is_stripped(self):
        assert ToggleIndexingInput(vault="  work ").vault == "work"

    def test_blank_vault_rejected(self):
        with pytest.raises(ValidationError):
            ToggleIndexingInput(vault="   ")

    def test_set_active_vault_requires_name(self):
        with pytest.raises(ValidationError):
            SetActiveVaultInput(vault="")

    def test_schema_examples_come_from_model_config(self):
        examples = SetActiveVaultInput.model_json_schema()["examples"]
        assert {"vault": "work"} in examples
        assert {"vault": None} in ToggleIndexingInput.model_json_schema()["examples"]
