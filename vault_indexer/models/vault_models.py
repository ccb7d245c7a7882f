"""Pydantic input models for choosing which vault the indexing tools act on.

- ListVaultsInput: discover the vaults an indexer can run against
- SetActiveVaultInput: pick the vault whose indexes later calls maintain
"""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field, field_validator


class ListVaultsInput(BaseModel):
    """Input model for list_vaults tool. Takes no parameters."""

    model_config = ConfigDict(json_schema_extra={"examples": [{}]})


class SetActiveVaultInput(BaseModel):
    """Input model for set_active_vault tool.

    After this call, toggle_indexing(), rebuild_indexes() and
    report_vault_event() default to the chosen vault.

    Examples:
        >>> SetActiveVaultInput(vault="personal")
    """

    model_config = ConfigDict(
        json_schema_extra={
            "examples": [
                {"vault": "personal"},
                {"vault": "work"},
            ]
        }
    )

    vault: str = Field(
        min_length=1,
        description=(
            "Vault name from vaults.yaml whose folder indexes should be "
            "maintained by default. Use list_vaults() to see valid names."
        ),
        examples=["personal", "work"]
    )

    @field_validator('vault')
    @classmethod
    def validate_vault(cls, v: str) -> str:
        """Strip surrounding whitespace and reject blank names.

        Raises:
            ValueError: If the vault name is empty or only whitespace
        """
        cleaned = v.strip()

        if not cleaned:
            raise ValueError(
                "Vault name cannot be empty. "
                "Pick one of the vaults returned by list_vaults()."
            )

        return cleaned
