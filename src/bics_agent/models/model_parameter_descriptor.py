# SPDX-License-Identifier: MIT
# Copyright (c) 2025 OmniNode Team
"""Parameter Descriptor Model.

Self-description of one operation input. Each descriptor maps 1:1 to an
argument checked by the input validator before the operation body runs.
"""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field, model_validator

from bics_agent.enums import EnumParameterType


class ModelParameterDescriptor(BaseModel):
    """Immutable description of a single operation parameter.

    Attributes:
        name: Python-style argument name (``connection_id``)
        description: Human-readable description for discovery
        required: Whether the argument must be supplied and non-empty
        default: Value used when an optional argument is not supplied.
            ``None`` means the argument is omitted from the request.
        value_type: Declared value type (string or integer)
        json_payload: Whether the value is a JSON document that must parse

    Example:
        >>> ModelParameterDescriptor(
        ...     name="count",
        ...     description="Number of available numbers to return",
        ...     required=False,
        ...     default=10,
        ...     value_type=EnumParameterType.INTEGER,
        ... )
    """

    model_config = ConfigDict(
        frozen=True,
        extra="forbid",
    )

    name: str = Field(
        ...,
        pattern=r"^[a-z][a-z0-9_]*$",
        description="Argument name",
    )
    description: str = Field(
        ...,
        min_length=1,
        description="Human-readable description for discovery",
    )
    required: bool = Field(
        default=True,
        description="Whether the argument is required",
    )
    default: int | str | None = Field(
        default=None,
        description="Default for optional arguments (None = omit)",
    )
    value_type: EnumParameterType = Field(
        default=EnumParameterType.STRING,
        description="Declared value type",
    )
    json_payload: bool = Field(
        default=False,
        description="Whether the value must be a syntactically valid JSON document",
    )

    @model_validator(mode="after")
    def _check_consistency(self) -> ModelParameterDescriptor:
        if self.required and self.default is not None:
            raise ValueError(f"Required parameter '{self.name}' cannot declare a default")
        if self.json_payload and self.value_type is not EnumParameterType.STRING:
            raise ValueError(f"JSON payload parameter '{self.name}' must be a string")
        return self


__all__ = ["ModelParameterDescriptor"]
