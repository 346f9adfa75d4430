# SPDX-License-Identifier: MIT
# Copyright (c) 2025 OmniNode Team
"""Typed response models for the SMS API."""

from bics_agent.models.sms.model_delivery_info import ModelDeliveryInfo
from bics_agent.models.sms.model_delivery_info_list import ModelDeliveryInfoList
from bics_agent.models.sms.model_inbound_message import ModelInboundMessage
from bics_agent.models.sms.model_inbound_message_list import ModelInboundMessageList

__all__: list[str] = [
    "ModelDeliveryInfo",
    "ModelDeliveryInfoList",
    "ModelInboundMessage",
    "ModelInboundMessageList",
]
