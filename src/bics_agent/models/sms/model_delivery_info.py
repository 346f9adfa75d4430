# SPDX-License-Identifier: MIT
# Copyright (c) 2025 OmniNode Team
"""SMS API delivery info model."""

from __future__ import annotations

from bics_agent.models.model_api_resource import ModelApiResource


class ModelDeliveryInfo(ModelApiResource):
    """Delivery status of a sent message for one recipient address."""

    address: str | None = ""
    delivery_status: str | None = ""
    description: str | None = None


__all__ = ["ModelDeliveryInfo"]
