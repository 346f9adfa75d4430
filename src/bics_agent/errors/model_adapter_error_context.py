# SPDX-License-Identifier: MIT
# Copyright (c) 2025 OmniNode Team
"""Adapter Error Context Model.

Bundles the structured fields shared by all raised adapter errors so that
error constructors stay small and strongly typed.
"""

from __future__ import annotations

from uuid import UUID

from pydantic import BaseModel, ConfigDict, Field


class ModelAdapterErrorContext(BaseModel):
    """Structured context attached to raised adapter errors.

    Attributes:
        resource: Backend resource name (connect, sms, ...)
        operation: Operation being performed (get_connection, load_config, ...)
        target_name: Target endpoint, URL or configuration path
        correlation_id: Request correlation ID for tracing

    Example:
        >>> context = ModelAdapterErrorContext(
        ...     resource="connect",
        ...     operation="initialize",
        ...     target_name="connect_api",
        ... )
        >>> raise AdapterConfigurationError("Base URL is not configured", context=context)
    """

    model_config = ConfigDict(
        frozen=True,
        extra="forbid",
    )

    resource: str | None = Field(
        default=None,
        description="Backend resource name",
    )
    operation: str | None = Field(
        default=None,
        description="Operation being performed",
    )
    target_name: str | None = Field(
        default=None,
        description="Target endpoint, URL or configuration path",
    )
    correlation_id: UUID | None = Field(
        default=None,
        description="Request correlation ID for tracing",
    )


__all__ = ["ModelAdapterErrorContext"]
