# SPDX-License-Identifier: MIT
# Copyright (c) 2025 OmniNode Team
"""SMS API - outbound and inbound messaging, subscriptions and conversions.

Subscription endpoints address a single per-account subscription, so the
get/delete operations take no arguments.
"""

from __future__ import annotations

from bics_agent.adapters import ModelOperationBinding, ModelResourceDefinition
from bics_agent.enums import EnumHttpMethod, EnumOutputContract
from bics_agent.models import ModelOperationDescriptor, ModelParameterDescriptor
from bics_agent.models.sms import ModelDeliveryInfoList, ModelInboundMessageList

_SUBSCRIPTION_REQUEST_DESCRIPTION = (
    "JSON string containing subscription request with callback URL and optional criteria"
)

SMS_RESOURCE = ModelResourceDefinition(
    name="sms",
    settings_key="sms_api",
    description=(
        "BICS SMS API for sending and receiving SMS messages, managing "
        "subscriptions, and tracking delivery status"
    ),
    operations=(
        ModelOperationBinding(
            descriptor=ModelOperationDescriptor(
                name="send_message",
                description=(
                    "Send an SMS message to one or more recipients with optional "
                    "delivery receipt request"
                ),
                parameters=(
                    ModelParameterDescriptor(
                        name="sender_address",
                        description="The sender address or phone number",
                    ),
                    ModelParameterDescriptor(
                        name="message_request_json",
                        description=(
                            "JSON string containing SMS message request with addresses, "
                            "message text, and optional receipt settings"
                        ),
                        json_payload=True,
                    ),
                ),
                result_description="Outbound request resource as returned by the API",
            ),
            method=EnumHttpMethod.POST,
            path="/outbound/{sender_address}/requests",
            body_parameter="message_request_json",
        ),
        ModelOperationBinding(
            descriptor=ModelOperationDescriptor(
                name="get_delivery_infos",
                description=(
                    "Get delivery status information for a previously sent SMS message"
                ),
                parameters=(
                    ModelParameterDescriptor(
                        name="sender_address",
                        description="The sender address used for the original message",
                    ),
                    ModelParameterDescriptor(
                        name="request_id",
                        description="The request ID of the SMS message",
                    ),
                ),
                result_description="Per-recipient delivery statuses as indented JSON",
            ),
            method=EnumHttpMethod.GET,
            path="/outbound/{sender_address}/requests/{request_id}/deliveryInfos",
            output_contract=EnumOutputContract.TYPED,
            response_model=ModelDeliveryInfoList,
        ),
        ModelOperationBinding(
            descriptor=ModelOperationDescriptor(
                name="get_inbound_messages",
                description="Retrieve inbound SMS messages for a specific registered number",
                parameters=(
                    ModelParameterDescriptor(
                        name="inbound_number",
                        description="The inbound number to check for received messages",
                    ),
                ),
                result_description=(
                    "Inbound message batch with numberOfMessagesInThisBatch as indented JSON"
                ),
            ),
            method=EnumHttpMethod.GET,
            path="/inbound/registrations/{inbound_number}/messages",
            output_contract=EnumOutputContract.TYPED,
            response_model=ModelInboundMessageList,
        ),
        ModelOperationBinding(
            descriptor=ModelOperationDescriptor(
                name="create_inbound_subscription",
                description=(
                    "Create a subscription to receive notifications when inbound SMS "
                    "messages arrive"
                ),
                parameters=(
                    ModelParameterDescriptor(
                        name="subscription_request_json",
                        description=_SUBSCRIPTION_REQUEST_DESCRIPTION,
                        json_payload=True,
                    ),
                ),
                result_description="Created subscription as returned by the API",
            ),
            method=EnumHttpMethod.POST,
            path="/inbound/subscriptions",
            body_parameter="subscription_request_json",
        ),
        ModelOperationBinding(
            descriptor=ModelOperationDescriptor(
                name="get_inbound_subscription",
                description="Get details of the current inbound message subscription",
                result_description="Subscription as returned by the API",
            ),
            method=EnumHttpMethod.GET,
            path="/inbound/subscriptions",
        ),
        ModelOperationBinding(
            descriptor=ModelOperationDescriptor(
                name="delete_inbound_subscription",
                description="Delete the current inbound message subscription",
                result_description="Confirmation message",
            ),
            method=EnumHttpMethod.DELETE,
            path="/inbound/subscriptions",
            output_contract=EnumOutputContract.CONFIRMATION,
            confirmation_template="Inbound message subscription successfully deleted",
        ),
        ModelOperationBinding(
            descriptor=ModelOperationDescriptor(
                name="create_delivery_subscription",
                description=(
                    "Create a subscription to receive delivery status notifications "
                    "for sent SMS messages"
                ),
                parameters=(
                    ModelParameterDescriptor(
                        name="subscription_request_json",
                        description=(
                            "JSON string containing delivery subscription request with "
                            "callback URL"
                        ),
                        json_payload=True,
                    ),
                ),
                result_description="Created subscription as returned by the API",
            ),
            method=EnumHttpMethod.POST,
            path="/outbound/subscriptions",
            body_parameter="subscription_request_json",
        ),
        ModelOperationBinding(
            descriptor=ModelOperationDescriptor(
                name="get_delivery_subscription",
                description="Get details of the current delivery information subscription",
                result_description="Subscription as returned by the API",
            ),
            method=EnumHttpMethod.GET,
            path="/outbound/subscriptions",
        ),
        ModelOperationBinding(
            descriptor=ModelOperationDescriptor(
                name="delete_delivery_subscription",
                description="Delete the current delivery information subscription",
                result_description="Confirmation message",
            ),
            method=EnumHttpMethod.DELETE,
            path="/outbound/subscriptions",
            output_contract=EnumOutputContract.CONFIRMATION,
            confirmation_template="Delivery information subscription successfully deleted",
        ),
        ModelOperationBinding(
            descriptor=ModelOperationDescriptor(
                name="process_conversion_info",
                description=(
                    "Process SMS conversion information for tracking campaign "
                    "effectiveness and analytics"
                ),
                parameters=(
                    ModelParameterDescriptor(
                        name="conversion_info_json",
                        description=(
                            "JSON string containing conversion information including "
                            "message IDs, conversion types, and values"
                        ),
                        json_payload=True,
                    ),
                ),
                result_description="Processing result as returned by the API",
            ),
            method=EnumHttpMethod.POST,
            path="/conversions",
            body_parameter="conversion_info_json",
        ),
        ModelOperationBinding(
            descriptor=ModelOperationDescriptor(
                name="process_conversion_infos",
                description=(
                    "Process batch SMS conversion information for multiple messages "
                    "and campaigns"
                ),
                parameters=(
                    ModelParameterDescriptor(
                        name="conversion_infos_json",
                        description=(
                            "JSON string containing batch conversion information for "
                            "multiple messages"
                        ),
                        json_payload=True,
                    ),
                ),
                result_description="Processing result as returned by the API",
            ),
            method=EnumHttpMethod.POST,
            path="/conversionsinfos",
            body_parameter="conversion_infos_json",
        ),
    ),
)

__all__ = ["SMS_RESOURCE"]
