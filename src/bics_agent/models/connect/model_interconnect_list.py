# SPDX-License-Identifier: MIT
# Copyright (c) 2025 OmniNode Team
"""Connect API interconnect list model."""

from __future__ import annotations

from pydantic import Field

from bics_agent.models.connect.model_interconnect import ModelInterconnect
from bics_agent.models.model_api_resource import ModelApiResource


class ModelInterconnectList(ModelApiResource):
    interconnects: list[ModelInterconnect] | None = Field(default_factory=list)
    total_count: int | None = 0


__all__ = ["ModelInterconnectList"]
