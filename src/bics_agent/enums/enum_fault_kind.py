# SPDX-License-Identifier: MIT
# Copyright (c) 2025 OmniNode Team
"""Fault Kind Enumeration.

Defines the closed taxonomy of failures an operation can end in. Every
failure path of a resource operation is tagged with exactly one of these
kinds before it reaches the error classifier.
"""

from enum import Enum


class EnumFaultKind(str, Enum):
    """Fault kinds produced by validation, transport and response handling.

    Attributes:
        MISSING_ARGUMENT: A required argument was null, empty or whitespace
        MALFORMED_ARGUMENT: An argument was present but not well-formed
            (invalid JSON, not an integer, unexpected name)
        TRANSPORT_FAULT: The request never produced an HTTP response
            (DNS failure, refused connection, timeout, cancellation)
        HTTP_FAULT: The upstream answered with a status outside 200-299
        UNEXPECTED_FAULT: Anything else, including response deserialization
    """

    MISSING_ARGUMENT = "missing_argument"
    MALFORMED_ARGUMENT = "malformed_argument"
    TRANSPORT_FAULT = "transport_fault"
    HTTP_FAULT = "http_fault"
    UNEXPECTED_FAULT = "unexpected_fault"

    @property
    def is_validation(self) -> bool:
        """Whether the fault was detected before any network call."""
        return self in (EnumFaultKind.MISSING_ARGUMENT, EnumFaultKind.MALFORMED_ARGUMENT)


__all__ = ["EnumFaultKind"]
