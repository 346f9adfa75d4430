# SPDX-License-Identifier: MIT
# Copyright (c) 2025 OmniNode Team
"""SMS API inbound message model."""

from __future__ import annotations

from bics_agent.models.model_api_resource import ModelApiResource


class ModelInboundMessage(ModelApiResource):
    date_time: str | None = ""
    destination_address: str | None = ""
    message_id: str | None = ""
    message: str | None = ""
    sender_address: str | None = ""


__all__ = ["ModelInboundMessage"]
