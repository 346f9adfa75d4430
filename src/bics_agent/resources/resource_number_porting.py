# SPDX-License-Identifier: MIT
# Copyright (c) 2025 OmniNode Team
"""MyNumbers Number Porting API - number portability requests."""

from __future__ import annotations

from bics_agent.adapters import ModelOperationBinding, ModelResourceDefinition
from bics_agent.enums import EnumHttpMethod, EnumOutputContract
from bics_agent.models import ModelOperationDescriptor, ModelParameterDescriptor

NUMBER_PORTING_RESOURCE = ModelResourceDefinition(
    name="number_porting",
    settings_key="my_numbers_number_porting_api",
    description=(
        "BICS MyNumbers Number Porting API for managing number portability operations"
    ),
    operations=(
        ModelOperationBinding(
            descriptor=ModelOperationDescriptor(
                name="submit_porting_request",
                description="Submit a number porting request",
                parameters=(
                    ModelParameterDescriptor(
                        name="porting_request_json",
                        description="JSON string containing porting request details",
                        json_payload=True,
                    ),
                ),
                result_description="Porting request as returned by the API",
            ),
            method=EnumHttpMethod.POST,
            path="/porting-requests",
            body_parameter="porting_request_json",
        ),
        ModelOperationBinding(
            descriptor=ModelOperationDescriptor(
                name="get_porting_status",
                description="Get status of a number porting request",
                parameters=(
                    ModelParameterDescriptor(
                        name="request_id",
                        description="The porting request ID",
                    ),
                ),
                result_description="Porting request status as returned by the API",
            ),
            method=EnumHttpMethod.GET,
            path="/porting-requests/{request_id}",
        ),
        ModelOperationBinding(
            descriptor=ModelOperationDescriptor(
                name="cancel_porting_request",
                description="Cancel a pending number porting request",
                parameters=(
                    ModelParameterDescriptor(
                        name="request_id",
                        description="The porting request ID to cancel",
                    ),
                ),
                result_description="Confirmation message",
            ),
            method=EnumHttpMethod.DELETE,
            path="/porting-requests/{request_id}",
            output_contract=EnumOutputContract.CONFIRMATION,
            confirmation_template="Porting request {request_id} has been successfully cancelled",
        ),
    ),
)

__all__ = ["NUMBER_PORTING_RESOURCE"]
