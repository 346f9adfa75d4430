# SPDX-License-Identifier: MIT
# Copyright (c) 2025 OmniNode Team
"""SMS API inbound message batch model."""

from __future__ import annotations

from pydantic import Field

from bics_agent.models.model_api_resource import ModelApiResource
from bics_agent.models.sms.model_inbound_message import ModelInboundMessage


class ModelInboundMessageList(ModelApiResource):
    """A batch of inbound messages retrieved for one registration."""

    inbound_sms_messages: list[ModelInboundMessage] | None = Field(
        default_factory=list, alias="inboundSMSMessage"
    )
    number_of_messages_in_this_batch: int | None = 0
    resource_url: str | None = Field(default=None, alias="resourceURL")
    total_number_of_pending_messages: int | None = None


__all__ = ["ModelInboundMessageList"]
