# SPDX-License-Identifier: MIT
# Copyright (c) 2025 OmniNode Team
"""Runtime configuration models."""

from bics_agent.runtime.models.model_api_settings import (
    RESOURCE_SETTINGS_KEYS,
    ModelApiSettings,
)
from bics_agent.runtime.models.model_resource_settings import ModelResourceSettings

__all__: list[str] = [
    "RESOURCE_SETTINGS_KEYS",
    "ModelApiSettings",
    "ModelResourceSettings",
]
