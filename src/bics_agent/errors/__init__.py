# SPDX-License-Identifier: MIT
# Copyright (c) 2025 OmniNode Team
"""bics_agent Errors Module.

Exports:
    ModelAdapterErrorContext: Configuration model for bundled error context
    AdapterError: Base error class
    AdapterConfigurationError: Fatal configuration errors
    RegistryError: Operation registry lookup errors
    TransportError: Transport failures (no HTTP response obtained)
    TransportTimeoutError: Transport timeouts
    TransportConnectionError: Connection, DNS and protocol failures

Error Sanitization Guidelines:
    NEVER include in error messages or context:
        - API keys, tokens or Authorization header values
        - Full URLs carrying credentials in the query string

    SAFE to include:
        - Resource and operation names
        - Correlation IDs
        - Base URLs without credentials
        - Status codes and timeout values
"""

from bics_agent.errors.adapter_errors import (
    AdapterConfigurationError,
    AdapterError,
    RegistryError,
    TransportConnectionError,
    TransportError,
    TransportTimeoutError,
)
from bics_agent.errors.model_adapter_error_context import ModelAdapterErrorContext

__all__: list[str] = [
    "ModelAdapterErrorContext",
    "AdapterError",
    "AdapterConfigurationError",
    "RegistryError",
    "TransportError",
    "TransportTimeoutError",
    "TransportConnectionError",
]
