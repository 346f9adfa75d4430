# SPDX-License-Identifier: MIT
# Copyright (c) 2025 OmniNode Team
"""Connect API interconnect model."""

from __future__ import annotations

from bics_agent.models.model_api_resource import ModelApiResource
from bics_agent.models.types import AttributeMap


class ModelInterconnect(ModelApiResource):
    """Physical interconnect (port) a connection line lands on."""

    id: str | None = ""
    type: str | None = ""
    label: str | None = ""
    city: str | None = ""
    country_iso3: str | None = ""
    houser: str | None = ""
    datacenter: str | None = ""
    capacity: str | None = ""
    capacity_label: str | None = ""
    usage: str | None = None
    port_mode: str | None = None
    status: str | None = ""
    port_tag: str | None = None
    additional_data: AttributeMap | None = None


__all__ = ["ModelInterconnect"]
