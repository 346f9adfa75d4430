# SPDX-License-Identifier: MIT
# Copyright (c) 2025 OmniNode Team
"""Per-resource connection settings."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field


class ModelResourceSettings(BaseModel):
    """Connection settings of one backend API.

    An empty ``base_url`` means "not configured"; the bootstrap refuses to
    start in that case rather than building a degraded adapter.
    """

    model_config = ConfigDict(
        frozen=True,
        extra="forbid",
    )

    base_url: str = Field(
        default="",
        description="Base URL of the API, e.g. https://api.example.com/connect/v1",
    )

    @property
    def is_configured(self) -> bool:
        return bool(self.base_url.strip())


__all__ = ["ModelResourceSettings"]
