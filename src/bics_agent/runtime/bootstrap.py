# SPDX-License-Identifier: MIT
# Copyright (c) 2025 OmniNode Team
"""Host bootstrap: logging, transport, adapters and registry.

Startup is all-or-nothing. A resource without a base URL is a fatal
configuration error, raised before any adapter is built.

Environment Variables:
    BICS_AGENT_LOG_LEVEL: Logging level (DEBUG, INFO, WARNING, ERROR, CRITICAL)
        Default: INFO
"""

from __future__ import annotations

import logging
import os
import sys
from collections.abc import Sequence
from typing import Optional

from bics_agent.adapters import ModelResourceDefinition, ResourceAdapter
from bics_agent.errors import AdapterConfigurationError, ModelAdapterErrorContext
from bics_agent.protocols import ProtocolTransport
from bics_agent.resources import ALL_RESOURCES
from bics_agent.runtime.config import base_url_env_var
from bics_agent.runtime.models import ModelApiSettings
from bics_agent.runtime.operation_registry import OperationRegistry
from bics_agent.transport import HttpTransport

logger = logging.getLogger(__name__)

LOG_LEVEL_ENV: str = "BICS_AGENT_LOG_LEVEL"


def configure_logging() -> None:
    """Configure process logging from ``BICS_AGENT_LOG_LEVEL``.

    Log Format Example:
        2025-01-15 10:30:45 [ERROR] bics_agent.diagnostics.error_classifier:
            HTTP error during connect.get_connection. Status: 401, ...
    """
    log_level = os.getenv(LOG_LEVEL_ENV, "INFO").upper()

    valid_levels = {"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"}
    if log_level not in valid_levels:
        print(
            f"Warning: Invalid {LOG_LEVEL_ENV} '{log_level}', using INFO. "
            f"Valid levels: {', '.join(sorted(valid_levels))}",
            file=sys.stderr,
        )
        log_level = "INFO"

    logging.basicConfig(
        level=getattr(logging, log_level, logging.INFO),
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
    )


def build_transport(settings: ModelApiSettings) -> HttpTransport:
    return HttpTransport(
        timeout_seconds=settings.timeout_seconds,
        max_response_size=settings.max_response_size,
        default_headers=settings.default_headers,
    )


def build_adapters(
    settings: ModelApiSettings,
    transport: ProtocolTransport,
    resources: Sequence[ModelResourceDefinition] = ALL_RESOURCES,
    sink: Optional[logging.Logger] = None,
) -> list[ResourceAdapter]:
    """Build one adapter per resource.

    Raises:
        AdapterConfigurationError: If any resource has no base URL. Every
            missing section is reported at once.
    """
    missing = [
        resource.settings_key
        for resource in resources
        if not settings.resource_settings(resource.settings_key).is_configured
    ]
    if missing:
        raise AdapterConfigurationError(
            "Missing base URL for: "
            + ", ".join(f"{key} (set {base_url_env_var(key)})" for key in missing),
            context=ModelAdapterErrorContext(operation="build_adapters"),
            missing_settings=missing,
        )

    adapters = [
        ResourceAdapter(
            resource,
            settings.resource_settings(resource.settings_key).base_url,
            transport,
            sink=sink,
        )
        for resource in resources
    ]
    logger.info(
        "Built %d resource adapters",
        len(adapters),
        extra={"resources": [adapter.name for adapter in adapters]},
    )
    return adapters


def build_registry(
    settings: ModelApiSettings,
    transport: ProtocolTransport,
    resources: Sequence[ModelResourceDefinition] = ALL_RESOURCES,
) -> OperationRegistry:
    """Build adapters for ``resources`` and register all their operations."""
    registry = OperationRegistry.from_adapters(build_adapters(settings, transport, resources))
    logger.info("Registered %d operations", len(registry))
    return registry


__all__: list[str] = [
    "LOG_LEVEL_ENV",
    "build_adapters",
    "build_registry",
    "build_transport",
    "configure_logging",
]
