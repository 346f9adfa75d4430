# SPDX-License-Identifier: MIT
# Copyright (c) 2025 OmniNode Team
"""Runtime host: configuration, bootstrap and the operation registry."""

from bics_agent.runtime.bootstrap import (
    build_adapters,
    build_registry,
    build_transport,
    configure_logging,
)
from bics_agent.runtime.config import base_url_env_var, load_api_settings
from bics_agent.runtime.models import (
    RESOURCE_SETTINGS_KEYS,
    ModelApiSettings,
    ModelResourceSettings,
)
from bics_agent.runtime.operation_registry import OperationRegistry, RegisteredOperation

__all__: list[str] = [
    "RESOURCE_SETTINGS_KEYS",
    "ModelApiSettings",
    "ModelResourceSettings",
    "OperationRegistry",
    "RegisteredOperation",
    "base_url_env_var",
    "build_adapters",
    "build_registry",
    "build_transport",
    "configure_logging",
    "load_api_settings",
]
