# SPDX-License-Identifier: MIT
# Copyright (c) 2025 OmniNode Team
"""Shared type aliases for response models.

``AttributeMap`` replaces untyped attribute bags (``additionalAttributes``,
``additionalData``, ``configuration``, reference ``data``). Values are
pydantic's ``JsonValue`` variant (str | int | float | bool | None | list |
nested mapping), and dict insertion order is preserved, so a payload
validated into a model serializes back deterministically.
"""

from __future__ import annotations

from typing import TypeAlias

from pydantic import JsonValue

AttributeMap: TypeAlias = dict[str, JsonValue]

__all__ = ["AttributeMap", "JsonValue"]
