# SPDX-License-Identifier: MIT
# Copyright (c) 2025 OmniNode Team
"""Explicit result type threaded through validator, adapter and classifier.

Failures between components travel as ``Err(fault)`` values instead of
raised exceptions; only the outermost operation boundary turns an ``Err``
into a diagnosis string.

Example:
    >>> result = require_non_empty("connection_id", "42")
    >>> if isinstance(result, Err):
    ...     return classify_fault("connect", "get_connection", result.fault)
    >>> result.value
    '42'
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Generic, TypeVar, Union

from bics_agent.models.model_fault import ModelFault

T = TypeVar("T")


@dataclass(frozen=True)
class Ok(Generic[T]):
    """Successful outcome carrying a value."""

    value: T


@dataclass(frozen=True)
class Err:
    """Failed outcome carrying a classified fault."""

    fault: ModelFault


Result = Union[Ok[T], Err]

__all__ = ["Ok", "Err", "Result"]
