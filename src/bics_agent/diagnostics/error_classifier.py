# SPDX-License-Identifier: MIT
# Copyright (c) 2025 OmniNode Team
"""Error Classifier - terminal handler for every failed operation call.

Maps a fault into one user-facing diagnosis string and emits exactly one
structured log record for operators. Classification is the end of the line:
it never raises and never retries.

Diagnosis Formats:
    - Validation faults:
      ``Error: {operation} failed — invalid or missing argument: {detail}``
    - HTTP faults: ``Error: {operation} failed. {phrase}.`` followed by
      `` Details: {body}`` when the upstream body is non-empty
    - Transport faults:
      ``Error: {operation} failed. Request timed out: {detail}`` or
      ``Error: {operation} failed. Network request failed: {detail}``
    - Unexpected faults: ``Error: {operation} failed. {detail}``

Status Code Table:
    - 400 -> Bad request, invalid parameters
    - 401 -> Unauthorized, check credentials
    - 403 -> Forbidden
    - 404 -> Not found
    - 429 -> Too many requests: rate limit exceeded, retry later
    - 500 -> Internal server error: upstream internal error
    - 503 -> Service unavailable: upstream unavailable
    - other -> HTTP error {code}

The diagnosis carries a truncated body; the log record carries the full
body together with status code, context and correlation ID.
"""

from __future__ import annotations

import logging
from http import HTTPStatus
from uuid import UUID, uuid4

from bics_agent.enums import EnumFaultKind
from bics_agent.models.model_diagnosis_record import ModelDiagnosisRecord
from bics_agent.models.model_fault import ModelFault
from bics_agent.utils.util_error_sanitization import truncate_text

logger = logging.getLogger(__name__)

# Upstream bodies appended to a diagnosis are cut at this length.
MAX_DIAGNOSIS_BODY_LENGTH: int = 1000

HTTP_STATUS_MESSAGES: dict[int, str] = {
    400: "Bad request, invalid parameters",
    401: "Unauthorized, check credentials",
    403: "Forbidden: you don't have permission to perform this operation",
    404: "Not found: the requested resource was not found",
    429: "Too many requests: rate limit exceeded, retry later",
    500: "Internal server error: upstream internal error",
    503: "Service unavailable: upstream unavailable",
}


def describe_http_status(status_code: int) -> str:
    """Return the classification phrase for an upstream status code."""
    message = HTTP_STATUS_MESSAGES.get(status_code)
    if message is not None:
        return message
    try:
        reason = HTTPStatus(status_code).phrase
    except ValueError:
        return f"HTTP error {status_code}"
    return f"HTTP error {status_code}: {reason}"


def format_diagnosis(operation: str, fault: ModelFault) -> str:
    """Render the user-facing diagnosis for ``fault`` without logging."""
    if fault.kind.is_validation:
        return f"Error: {operation} failed — invalid or missing argument: {fault.detail}"

    if fault.kind is EnumFaultKind.HTTP_FAULT:
        status_code = fault.status_code if fault.status_code is not None else 0
        details = ""
        if fault.upstream_body and fault.upstream_body.strip():
            body = truncate_text(fault.upstream_body.strip(), MAX_DIAGNOSIS_BODY_LENGTH)
            details = f" Details: {body}"
        return f"Error: {operation} failed. {describe_http_status(status_code)}.{details}"

    if fault.kind is EnumFaultKind.TRANSPORT_FAULT:
        if fault.timed_out:
            return f"Error: {operation} failed. Request timed out: {fault.detail}"
        return f"Error: {operation} failed. Network request failed: {fault.detail}"

    return f"Error: {operation} failed. {fault.detail}"


def classify_fault(
    resource: str,
    operation: str,
    fault: ModelFault,
    *,
    context: str | None = None,
    correlation_id: UUID | None = None,
    sink: logging.Logger | None = None,
) -> str:
    """Classify a fault into a diagnosis string and log one structured record.

    Args:
        resource: Backend resource name (``connect``, ``sms``, ...)
        operation: Operation that failed
        fault: The fault carried by ``Err``
        context: Optional context string, typically the entity identifier
        correlation_id: Correlation ID of the call (generated if missing)
        sink: Logger receiving the record (defaults to this module's logger)

    Returns:
        Diagnosis string starting with ``"Error:"``.
    """
    record = ModelDiagnosisRecord(
        resource=resource,
        operation=operation,
        fault_kind=fault.kind,
        context=context,
        status_code=fault.status_code,
        upstream_body=fault.upstream_body,
        detail=fault.detail,
        correlation_id=correlation_id or uuid4(),
    )
    diagnosis = format_diagnosis(operation, fault)

    log = sink or logger
    if fault.kind is EnumFaultKind.HTTP_FAULT:
        log.error(
            "HTTP error during %s.%s. Status: %s, Content: %s (correlation_id=%s)",
            resource,
            operation,
            fault.status_code,
            fault.upstream_body or "No content",
            record.correlation_id,
            extra=record.to_log_extra(),
        )
    else:
        context_info = f" (Context: {context})" if context else ""
        log.error(
            "Error during %s.%s%s: %s (correlation_id=%s)",
            resource,
            operation,
            context_info,
            fault.detail,
            record.correlation_id,
            extra=record.to_log_extra(),
        )
    return diagnosis


__all__ = [
    "HTTP_STATUS_MESSAGES",
    "MAX_DIAGNOSIS_BODY_LENGTH",
    "classify_fault",
    "describe_http_status",
    "format_diagnosis",
]
