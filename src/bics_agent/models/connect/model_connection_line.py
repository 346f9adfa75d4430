# SPDX-License-Identifier: MIT
# Copyright (c) 2025 OmniNode Team
"""Connect API connection line model."""

from __future__ import annotations

from pydantic import Field

from bics_agent.models.connect.model_interconnect import ModelInterconnect
from bics_agent.models.model_api_resource import ModelApiResource
from bics_agent.models.types import AttributeMap


class ModelConnectionLine(ModelApiResource):
    """One line (primary or secondary) of a cloud connection."""

    line_type: str | None = ""
    customer_reference: str | None = ""
    additional_attributes: AttributeMap | None = Field(default_factory=dict)
    interconnect: ModelInterconnect | None = Field(default_factory=ModelInterconnect)
    vlan: int | None = 0
    cloud_service_key: str | None = ""


__all__ = ["ModelConnectionLine"]
