# SPDX-License-Identifier: MIT
# Copyright (c) 2025 OmniNode Team
"""MyNumbers Disconnection API - number disconnection requests."""

from __future__ import annotations

from bics_agent.adapters import ModelOperationBinding, ModelResourceDefinition
from bics_agent.enums import EnumHttpMethod
from bics_agent.models import ModelOperationDescriptor, ModelParameterDescriptor

DISCONNECTION_RESOURCE = ModelResourceDefinition(
    name="disconnection",
    settings_key="my_numbers_disconnection_api",
    description=(
        "BICS MyNumbers Disconnection API for managing number disconnection processes"
    ),
    operations=(
        ModelOperationBinding(
            descriptor=ModelOperationDescriptor(
                name="request_disconnection",
                description="Request disconnection of a telephone number",
                parameters=(
                    ModelParameterDescriptor(
                        name="disconnection_request_json",
                        description="JSON string containing disconnection request details",
                        json_payload=True,
                    ),
                ),
                result_description="Disconnection request as returned by the API",
            ),
            method=EnumHttpMethod.POST,
            path="/disconnection-requests",
            body_parameter="disconnection_request_json",
        ),
        ModelOperationBinding(
            descriptor=ModelOperationDescriptor(
                name="get_disconnection_status",
                description="Get status of a disconnection request",
                parameters=(
                    ModelParameterDescriptor(
                        name="request_id",
                        description="The disconnection request ID",
                    ),
                ),
                result_description="Disconnection request status as returned by the API",
            ),
            method=EnumHttpMethod.GET,
            path="/disconnection-requests/{request_id}",
        ),
    ),
)

__all__ = ["DISCONNECTION_RESOURCE"]
