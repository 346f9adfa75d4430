# SPDX-License-Identifier: MIT
# Copyright (c) 2025 OmniNode Team
"""Fault Model.

A fault is the value carried by ``Err``: the kind of failure plus whatever
detail the detecting component has. It is created fresh per failed call and
only outlives the call through the log record the classifier emits.
"""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field

from bics_agent.enums import EnumFaultKind


class ModelFault(BaseModel):
    """Classified failure of one operation call.

    Attributes:
        kind: Fault kind from the closed taxonomy
        detail: Human-readable detail (validator message, exception message)
        argument_name: Offending argument for validation faults
        status_code: Upstream status code for HTTP faults
        upstream_body: Best-effort upstream body for HTTP faults
        timed_out: Whether a transport fault was a timeout or cancellation
    """

    model_config = ConfigDict(
        frozen=True,
        extra="forbid",
    )

    kind: EnumFaultKind
    detail: str = Field(default="")
    argument_name: str | None = Field(default=None)
    status_code: int | None = Field(default=None)
    upstream_body: str | None = Field(default=None)
    timed_out: bool = Field(default=False)

    @classmethod
    def missing_argument(cls, name: str) -> ModelFault:
        return cls(
            kind=EnumFaultKind.MISSING_ARGUMENT,
            detail=f"Parameter '{name}' is required and cannot be null or empty",
            argument_name=name,
        )

    @classmethod
    def malformed_argument(cls, name: str, detail: str) -> ModelFault:
        return cls(
            kind=EnumFaultKind.MALFORMED_ARGUMENT,
            detail=detail,
            argument_name=name,
        )

    @classmethod
    def transport(cls, detail: str, *, timed_out: bool = False) -> ModelFault:
        return cls(kind=EnumFaultKind.TRANSPORT_FAULT, detail=detail, timed_out=timed_out)

    @classmethod
    def http(cls, status_code: int, upstream_body: str | None) -> ModelFault:
        return cls(
            kind=EnumFaultKind.HTTP_FAULT,
            detail=f"HTTP {status_code}",
            status_code=status_code,
            upstream_body=upstream_body,
        )

    @classmethod
    def unexpected(cls, detail: str) -> ModelFault:
        return cls(kind=EnumFaultKind.UNEXPECTED_FAULT, detail=detail)


__all__ = ["ModelFault"]
