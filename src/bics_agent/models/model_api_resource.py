# SPDX-License-Identifier: MIT
# Copyright (c) 2025 OmniNode Team
"""Base class for typed upstream response models.

Upstream APIs use camelCase keys; models declare snake_case fields with
camelCase aliases. Unknown upstream keys are kept (``extra="allow"``) so a
typed response never silently drops fields on re-serialization.

Every declared field is nullable: upstream sends ``null`` for absent
values, and ``null`` serializes back as ``null``.
"""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel


class ModelApiResource(BaseModel):
    """Common configuration for typed response models."""

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        extra="allow",
        frozen=True,
    )

    def to_pretty_json(self) -> str:
        """Serialize with upstream key names, indented for readability."""
        return self.model_dump_json(by_alias=True, indent=2)


__all__ = ["ModelApiResource"]
