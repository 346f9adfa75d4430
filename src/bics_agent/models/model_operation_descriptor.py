# SPDX-License-Identifier: MIT
# Copyright (c) 2025 OmniNode Team
"""Operation Descriptor Model."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field, model_validator

from bics_agent.models.model_parameter_descriptor import ModelParameterDescriptor


class ModelOperationDescriptor(BaseModel):
    """Immutable self-description of one callable operation.

    Created when the resource tables are defined and never mutated. Used for
    discovery only; dispatch goes through the adapter directly.
    """

    model_config = ConfigDict(
        frozen=True,
        extra="forbid",
    )

    name: str = Field(
        ...,
        pattern=r"^[a-z][a-z0-9_]*$",
        description="Operation name",
    )
    description: str = Field(
        ...,
        min_length=1,
        description="Human-readable description for discovery",
    )
    parameters: tuple[ModelParameterDescriptor, ...] = Field(
        default=(),
        description="Ordered parameter descriptors (positional order)",
    )
    result_description: str = Field(
        ...,
        min_length=1,
        description="Description of the result shape",
    )

    @model_validator(mode="after")
    def _check_unique_parameters(self) -> ModelOperationDescriptor:
        names = [parameter.name for parameter in self.parameters]
        duplicates = sorted({name for name in names if names.count(name) > 1})
        if duplicates:
            raise ValueError(f"Duplicate parameter names in '{self.name}': {duplicates}")
        return self

    @property
    def parameter_names(self) -> tuple[str, ...]:
        return tuple(parameter.name for parameter in self.parameters)

    def get_parameter(self, name: str) -> ModelParameterDescriptor | None:
        """Return the descriptor for ``name``, or None if not declared."""
        for parameter in self.parameters:
            if parameter.name == name:
                return parameter
        return None


__all__ = ["ModelOperationDescriptor"]
