# SPDX-License-Identifier: MIT
# Copyright (c) 2025 OmniNode Team
"""Parameter value types exposed in operation descriptors."""

from enum import Enum


class EnumParameterType(str, Enum):
    """Value types accepted by operation parameters."""

    STRING = "string"
    INTEGER = "integer"


__all__ = ["EnumParameterType"]
