# SPDX-License-Identifier: MIT
# Copyright (c) 2025 OmniNode Team
"""Connect API connection list model."""

from __future__ import annotations

from pydantic import Field

from bics_agent.models.connect.model_connection import ModelConnection
from bics_agent.models.model_api_resource import ModelApiResource


class ModelConnectionList(ModelApiResource):
    connections: list[ModelConnection] | None = Field(default_factory=list)
    total_count: int | None = 0


__all__ = ["ModelConnectionList"]
