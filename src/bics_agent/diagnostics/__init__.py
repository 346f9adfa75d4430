# SPDX-License-Identifier: MIT
# Copyright (c) 2025 OmniNode Team
"""Failure classification and diagnosis rendering."""

from bics_agent.diagnostics.error_classifier import (
    HTTP_STATUS_MESSAGES,
    classify_fault,
    describe_http_status,
    format_diagnosis,
)

__all__: list[str] = [
    "HTTP_STATUS_MESSAGES",
    "classify_fault",
    "describe_http_status",
    "format_diagnosis",
]
