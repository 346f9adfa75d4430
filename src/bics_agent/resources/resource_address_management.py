# SPDX-License-Identifier: MIT
# Copyright (c) 2025 OmniNode Team
"""MyNumbers Address Management API - addresses attached to telephone numbers."""

from __future__ import annotations

from bics_agent.adapters import ModelOperationBinding, ModelResourceDefinition
from bics_agent.enums import EnumHttpMethod
from bics_agent.models import ModelOperationDescriptor, ModelParameterDescriptor

ADDRESS_MANAGEMENT_RESOURCE = ModelResourceDefinition(
    name="address_management",
    settings_key="my_numbers_address_management_api",
    description=(
        "BICS MyNumbers Address Management API for managing address information "
        "associated with telephone numbers"
    ),
    operations=(
        ModelOperationBinding(
            descriptor=ModelOperationDescriptor(
                name="get_address",
                description="Get address information for a specific telephone number",
                parameters=(
                    ModelParameterDescriptor(
                        name="phone_number",
                        description="The telephone number to get address information for",
                    ),
                ),
                result_description="Address information as returned by the API",
            ),
            method=EnumHttpMethod.GET,
            path="/addresses/{phone_number}",
        ),
        ModelOperationBinding(
            descriptor=ModelOperationDescriptor(
                name="update_address",
                description="Update address information for a telephone number",
                parameters=(
                    ModelParameterDescriptor(
                        name="phone_number",
                        description="The telephone number to update",
                    ),
                    ModelParameterDescriptor(
                        name="address_json",
                        description="JSON string containing address information",
                        json_payload=True,
                    ),
                ),
                result_description="Updated address as returned by the API",
            ),
            method=EnumHttpMethod.PUT,
            path="/addresses/{phone_number}",
            body_parameter="address_json",
        ),
        ModelOperationBinding(
            descriptor=ModelOperationDescriptor(
                name="validate_address",
                description="Validate an address for emergency services compliance",
                parameters=(
                    ModelParameterDescriptor(
                        name="address_json",
                        description="JSON string containing address to validate",
                        json_payload=True,
                    ),
                ),
                result_description="Validation result as returned by the API",
            ),
            method=EnumHttpMethod.POST,
            path="/addresses/validate",
            body_parameter="address_json",
        ),
    ),
)

__all__ = ["ADDRESS_MANAGEMENT_RESOURCE"]
