# SPDX-License-Identifier: MIT
# Copyright (c) 2025 OmniNode Team
"""SMS API delivery info list model."""

from __future__ import annotations

from pydantic import Field

from bics_agent.models.model_api_resource import ModelApiResource
from bics_agent.models.sms.model_delivery_info import ModelDeliveryInfo


class ModelDeliveryInfoList(ModelApiResource):
    delivery_infos: list[ModelDeliveryInfo] | None = Field(
        default_factory=list, alias="deliveryInfo"
    )


__all__ = ["ModelDeliveryInfoList"]
