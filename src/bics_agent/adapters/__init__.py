# SPDX-License-Identifier: MIT
# Copyright (c) 2025 OmniNode Team
"""Generic resource adapter and its static binding models."""

from bics_agent.adapters.model_operation_binding import (
    ModelOperationBinding,
    path_placeholders,
)
from bics_agent.adapters.model_resource_definition import ModelResourceDefinition
from bics_agent.adapters.resource_adapter import OperationCallable, ResourceAdapter

__all__: list[str] = [
    "ModelOperationBinding",
    "ModelResourceDefinition",
    "OperationCallable",
    "ResourceAdapter",
    "path_placeholders",
]
