# SPDX-License-Identifier: MIT
# Copyright (c) 2025 OmniNode Team
"""Error message sanitization utilities.

Diagnosis strings are returned to whatever invoked the operation (often an
LLM agent), so exception messages and upstream bodies are bounded in size
and screened for credential material before they are included.

Example:
    >>> sanitize_error_string("401 for token=abc123")
    '[REDACTED - potentially sensitive data]'
    >>> truncate_text("x" * 2000, max_length=10)
    'xxxxxxxxxx... [truncated]'
"""

from __future__ import annotations

# Checked case-insensitively against the message.
SENSITIVE_PATTERNS: tuple[str, ...] = (
    # Credentials
    "password",
    "passwd",
    # Secrets and keys
    "secret",
    "token=",
    "access_token",
    "api_key",
    "apikey",
    "api-key",
    "private_key",
    "client_secret",
    # Authentication headers
    "bearer ",
    "basic ",
    # Certificate and key material
    "-----begin",
    "-----end",
)

DEFAULT_MAX_LENGTH: int = 500
TRUNCATION_SUFFIX: str = "... [truncated]"


def truncate_text(text: str, max_length: int = DEFAULT_MAX_LENGTH) -> str:
    """Bound ``text`` to ``max_length`` characters, marking the cut."""
    if len(text) > max_length:
        return text[:max_length] + TRUNCATION_SUFFIX
    return text


def sanitize_error_string(error_str: str, max_length: int = DEFAULT_MAX_LENGTH) -> str:
    """Sanitize a raw error string for safe inclusion in diagnoses and logs.

    Sanitization rules:
        1. If a sensitive pattern is present, return a generic redacted message
        2. Otherwise truncate long messages

    Args:
        error_str: The error string to sanitize
        max_length: Maximum length of the sanitized message (default 500)

    Returns:
        Sanitized error message.
    """
    if not error_str:
        return ""

    error_lower = error_str.lower()
    for pattern in SENSITIVE_PATTERNS:
        if pattern in error_lower:
            return "[REDACTED - potentially sensitive data]"

    return truncate_text(error_str, max_length)


def sanitize_error_message(exception: BaseException, max_length: int = DEFAULT_MAX_LENGTH) -> str:
    """Sanitize an exception for inclusion in a diagnosis.

    Exceptions with an empty message (``TimeoutError()``, ``CancelledError()``)
    are described by their type name so the diagnosis is never blank.

    Args:
        exception: The exception to describe
        max_length: Maximum length of the sanitized message

    Returns:
        Sanitized message, falling back to the exception type name.
    """
    message = str(exception).strip()
    if not message:
        return type(exception).__name__
    return sanitize_error_string(message, max_length)


__all__ = [
    "DEFAULT_MAX_LENGTH",
    "SENSITIVE_PATTERNS",
    "TRUNCATION_SUFFIX",
    "sanitize_error_message",
    "sanitize_error_string",
    "truncate_text",
]
