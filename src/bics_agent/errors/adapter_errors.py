# SPDX-License-Identifier: MIT
# Copyright (c) 2025 OmniNode Team
"""Adapter Error Classes.

Raised exceptions are reserved for the seams owned by the host process:
configuration loading, adapter construction, registry lookups and the
concrete HTTP transport. Operation bodies never let these escape; they are
converted into fault results at the adapter boundary.

Error Hierarchy:
    AdapterError (base)
    ├── AdapterConfigurationError
    ├── RegistryError
    └── TransportError
        ├── TransportTimeoutError
        └── TransportConnectionError
"""

from __future__ import annotations

from bics_agent.errors.model_adapter_error_context import ModelAdapterErrorContext


class AdapterError(Exception):
    """Base error class for bics_agent.

    Structured Fields (via ModelAdapterErrorContext):
        resource: Backend resource name
        operation: Operation being performed
        target_name: Target endpoint or configuration path
        correlation_id: Request correlation ID for tracing

    Example:
        >>> context = ModelAdapterErrorContext(resource="sms", operation="send_message")
        >>> raise AdapterError("Operation failed", context=context, attempt=1)
    """

    def __init__(
        self,
        message: str,
        context: ModelAdapterErrorContext | None = None,
        **extra_context: object,
    ) -> None:
        """Initialize AdapterError with structured fields.

        Args:
            message: Human-readable error message
            context: Bundled adapter context (resource, operation, ...)
            **extra_context: Additional context information
        """
        super().__init__(message)
        self.message = message
        self.context = context or ModelAdapterErrorContext()
        self.extra_context: dict[str, object] = dict(extra_context)

    @property
    def correlation_id(self) -> object:
        """Correlation ID from the bundled context, if any."""
        return self.context.correlation_id

    def to_log_fields(self) -> dict[str, object]:
        """Flatten context and extras into ``logging`` ``extra`` fields."""
        fields: dict[str, object] = {
            key: value
            for key, value in self.context.model_dump(mode="json").items()
            if value is not None
        }
        fields.update(self.extra_context)
        fields["error_type"] = type(self).__name__
        return fields

    def __str__(self) -> str:
        if self.context.correlation_id is not None:
            return f"{self.message} (correlation_id: {self.context.correlation_id})"
        return self.message


class AdapterConfigurationError(AdapterError):
    """Raised when configuration is missing or invalid.

    This is the one fatal error of the system: an adapter that cannot
    resolve its base URL must fail to start rather than serve degraded
    behavior.

    Example:
        >>> raise AdapterConfigurationError(
        ...     "Connect API base URL is not configured",
        ...     context=ModelAdapterErrorContext(resource="connect"),
        ...     settings_key="connect_api",
        ... )
    """


class RegistryError(AdapterError):
    """Raised when an operation registry lookup fails.

    Example:
        >>> try:
        ...     registry.get("connect", "unknown")
        ... except RegistryError as e:
        ...     print(e.extra_context["registered_operations"])
    """


class TransportError(AdapterError):
    """Raised by a transport when no HTTP response could be obtained."""


class TransportTimeoutError(TransportError):
    """Raised when a request exceeds the transport timeout.

    Example:
        >>> raise TransportTimeoutError(
        ...     "HTTP GET request timed out after 30.0s",
        ...     context=context,
        ...     timeout_seconds=30.0,
        ... )
    """


class TransportConnectionError(TransportError):
    """Raised for DNS failures, refused connections and protocol errors."""


__all__ = [
    "AdapterError",
    "AdapterConfigurationError",
    "RegistryError",
    "TransportError",
    "TransportTimeoutError",
    "TransportConnectionError",
]
