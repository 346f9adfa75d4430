# SPDX-License-Identifier: MIT
# Copyright (c) 2025 OmniNode Team
"""Transport protocol consumed by resource adapters.

A transport issues one HTTP request and returns its status and body. It
must be safe for concurrent use by many in-flight operations. When no HTTP
response can be obtained it raises ``TransportError`` (or a subclass);
adapters convert that into a transport fault.
"""

from __future__ import annotations

from typing import Protocol, runtime_checkable

from bics_agent.models.model_transport import (
    ModelTransportRequest,
    ModelTransportResponse,
)


@runtime_checkable
class ProtocolTransport(Protocol):
    """Minimal asynchronous HTTP transport."""

    async def request(self, request: ModelTransportRequest) -> ModelTransportResponse:
        """Send ``request`` and return the response status and body.

        Raises:
            TransportError: If no HTTP response could be obtained.
        """
        ...


__all__ = ["ProtocolTransport"]
