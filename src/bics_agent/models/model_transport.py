# SPDX-License-Identifier: MIT
# Copyright (c) 2025 OmniNode Team
"""Transport request/response models exchanged with ``ProtocolTransport``."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field

from bics_agent.enums import EnumHttpMethod


class ModelTransportRequest(BaseModel):
    """A fully built HTTP request.

    ``content`` is the caller's JSON text, passed through without being
    re-encoded. ``params`` keeps query parameters in declaration order.
    """

    model_config = ConfigDict(
        frozen=True,
        extra="forbid",
    )

    method: EnumHttpMethod
    url: str = Field(..., min_length=1)
    params: tuple[tuple[str, str], ...] = Field(default=())
    content: str | None = Field(default=None)
    headers: dict[str, str] = Field(default_factory=dict)


class ModelTransportResponse(BaseModel):
    """Status and decoded body of an HTTP response."""

    model_config = ConfigDict(
        frozen=True,
        extra="forbid",
    )

    status_code: int = Field(..., ge=100, le=599)
    body: str = Field(default="")
    headers: dict[str, str] = Field(default_factory=dict)

    @property
    def is_success(self) -> bool:
        return 200 <= self.status_code <= 299


__all__ = ["ModelTransportRequest", "ModelTransportResponse"]
