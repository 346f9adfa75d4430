# SPDX-License-Identifier: MIT
# Copyright (c) 2025 OmniNode Team
"""Diagnosis Record Model.

Structured counterpart of the user-facing diagnosis string. It is emitted
to the log sink once per classified failure and never returned to callers.
"""

from __future__ import annotations

from uuid import UUID, uuid4

from pydantic import BaseModel, ConfigDict, Field

from bics_agent.enums import EnumFaultKind


class ModelDiagnosisRecord(BaseModel):
    """Operator-facing detail of one failed operation call.

    Attributes:
        resource: Backend resource name
        operation: Operation that failed
        fault_kind: Fault kind from the taxonomy
        context: Optional context string (e.g. the entity ID)
        status_code: Upstream status code (HTTP faults)
        upstream_body: Full upstream body (HTTP faults), untruncated
        detail: Fault detail
        correlation_id: Correlation ID of the call
    """

    model_config = ConfigDict(
        frozen=True,
        extra="forbid",
    )

    resource: str
    operation: str
    fault_kind: EnumFaultKind
    context: str | None = None
    status_code: int | None = None
    upstream_body: str | None = None
    detail: str = ""
    correlation_id: UUID = Field(default_factory=uuid4)

    def to_log_extra(self) -> dict[str, object]:
        """Return the record as ``logging`` ``extra`` fields."""
        return self.model_dump(mode="json")


__all__ = ["ModelDiagnosisRecord"]
