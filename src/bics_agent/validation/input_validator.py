# SPDX-License-Identifier: MIT
# Copyright (c) 2025 OmniNode Team
"""Input Validator.

Synchronous checks applied to caller-supplied arguments before any network
request is built. Validators return ``Ok``/``Err`` and never log; the fault
is logged once, by the error classifier.

Example:
    >>> require_non_empty("connection_id", "  ")
    Err(fault=ModelFault(kind=<EnumFaultKind.MISSING_ARGUMENT: ...>, ...))
    >>> require_valid_json("payload", '{"a": 1}')
    Ok(value='{"a": 1}')
"""

from __future__ import annotations

import json

from bics_agent.models.model_fault import ModelFault
from bics_agent.models.model_result import Err, Ok, Result


def _reject_constant(constant: str) -> object:
    raise ValueError(f"{constant} is not valid JSON")


def require_non_empty(name: str, value: object) -> Result[str]:
    """Fail with MISSING_ARGUMENT when ``value`` is None, empty or whitespace.

    Non-string values (e.g. integers from a keyword call) are converted with
    ``str()`` before the check.

    Args:
        name: Declared argument name, referenced by the diagnosis
        value: Caller-supplied value

    Returns:
        ``Ok(value)`` with the original text, or ``Err`` with a
        MISSING_ARGUMENT fault.
    """
    if value is None:
        return Err(ModelFault.missing_argument(name))
    text = value if isinstance(value, str) else str(value)
    if not text.strip():
        return Err(ModelFault.missing_argument(name))
    return Ok(text)


def require_valid_json(name: str, value: object) -> Result[str]:
    """Require a non-empty, syntactically valid JSON document.

    Only syntax is checked; ``{"a": 1}`` passes regardless of whether the
    upstream API understands it. The non-standard ``NaN``, ``Infinity`` and
    ``-Infinity`` literals that ``json.loads`` tolerates are rejected. The
    text is returned unchanged so it can be sent as-is.

    Args:
        name: Declared argument name
        value: Caller-supplied JSON text

    Returns:
        ``Ok(value)`` or ``Err`` with MISSING_ARGUMENT / MALFORMED_ARGUMENT.
    """
    present = require_non_empty(name, value)
    if isinstance(present, Err):
        return present
    try:
        json.loads(present.value, parse_constant=_reject_constant)
    except ValueError as e:
        return Err(
            ModelFault.malformed_argument(
                name, f"Parameter '{name}' contains invalid JSON: {e}"
            )
        )
    return present


def coerce_integer(name: str, value: object) -> Result[int]:
    """Convert an integer argument supplied as text.

    ``bool`` is rejected even though it subclasses ``int``.
    """
    if isinstance(value, bool):
        return Err(
            ModelFault.malformed_argument(name, f"Parameter '{name}' must be an integer")
        )
    if isinstance(value, int):
        return Ok(value)
    if isinstance(value, str):
        try:
            return Ok(int(value.strip()))
        except ValueError:
            pass
    return Err(
        ModelFault.malformed_argument(
            name, f"Parameter '{name}' must be an integer, got {value!r}"
        )
    )


__all__ = ["coerce_integer", "require_non_empty", "require_valid_json"]
