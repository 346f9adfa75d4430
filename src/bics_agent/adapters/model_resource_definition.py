# SPDX-License-Identifier: MIT
# Copyright (c) 2025 OmniNode Team
"""Resource Definition Model - the static binding table of one backend API."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field, model_validator

from bics_agent.adapters.model_operation_binding import ModelOperationBinding
from bics_agent.models.model_operation_descriptor import ModelOperationDescriptor


class ModelResourceDefinition(BaseModel):
    """One backend resource and its operations.

    Attributes:
        name: Resource name used for registry lookups (``connect``)
        settings_key: Configuration section holding the base URL (``connect_api``)
        description: Human-readable description for discovery
        operations: Ordered operation bindings with unique names
    """

    model_config = ConfigDict(
        frozen=True,
        extra="forbid",
    )

    name: str = Field(..., pattern=r"^[a-z][a-z0-9_]*$")
    settings_key: str = Field(..., pattern=r"^[a-z][a-z0-9_]*$")
    description: str = Field(..., min_length=1)
    operations: tuple[ModelOperationBinding, ...] = Field(..., min_length=1)

    @model_validator(mode="after")
    def _check_unique_operations(self) -> ModelResourceDefinition:
        names = [binding.name for binding in self.operations]
        duplicates = sorted({name for name in names if names.count(name) > 1})
        if duplicates:
            raise ValueError(f"Duplicate operations in resource '{self.name}': {duplicates}")
        return self

    @property
    def operation_names(self) -> tuple[str, ...]:
        return tuple(binding.name for binding in self.operations)

    @property
    def descriptors(self) -> tuple[ModelOperationDescriptor, ...]:
        return tuple(binding.descriptor for binding in self.operations)

    def get_binding(self, operation: str) -> ModelOperationBinding | None:
        for binding in self.operations:
            if binding.name == operation:
                return binding
        return None


__all__ = ["ModelResourceDefinition"]
