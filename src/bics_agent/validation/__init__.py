# SPDX-License-Identifier: MIT
# Copyright (c) 2025 OmniNode Team
"""Argument validation applied before any network request."""

from bics_agent.validation.input_validator import (
    coerce_integer,
    require_non_empty,
    require_valid_json,
)

__all__: list[str] = ["coerce_integer", "require_non_empty", "require_valid_json"]
