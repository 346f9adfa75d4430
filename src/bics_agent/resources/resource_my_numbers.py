# SPDX-License-Identifier: MIT
# Copyright (c) 2025 OmniNode Team
"""MyNumbers API - telephone number provisioning, configuration and lifecycle."""

from __future__ import annotations

from bics_agent.adapters import ModelOperationBinding, ModelResourceDefinition
from bics_agent.enums import EnumHttpMethod, EnumOutputContract, EnumParameterType
from bics_agent.models import ModelOperationDescriptor, ModelParameterDescriptor
from bics_agent.models.my_numbers import ModelNumber, ModelNumberList

MY_NUMBERS_RESOURCE = ModelResourceDefinition(
    name="my_numbers",
    settings_key="my_numbers_api",
    description=(
        "BICS MyNumbers API for telephone number provisioning, configuration, "
        "and lifecycle management"
    ),
    operations=(
        ModelOperationBinding(
            descriptor=ModelOperationDescriptor(
                name="list_numbers",
                description="Get a list of all telephone numbers managed by the customer",
                parameters=(
                    ModelParameterDescriptor(
                        name="page",
                        description="Page to return (optional, upstream default when omitted)",
                        required=False,
                        value_type=EnumParameterType.INTEGER,
                    ),
                    ModelParameterDescriptor(
                        name="page_size",
                        description="Numbers per page (optional, upstream default when omitted)",
                        required=False,
                        value_type=EnumParameterType.INTEGER,
                    ),
                ),
                result_description=(
                    "Number list with totalCount, pageSize and currentPage as indented JSON"
                ),
            ),
            method=EnumHttpMethod.GET,
            path="/numbers",
            query=(("page", "page"), ("page_size", "pageSize")),
            output_contract=EnumOutputContract.TYPED,
            response_model=ModelNumberList,
        ),
        ModelOperationBinding(
            descriptor=ModelOperationDescriptor(
                name="get_number",
                description=(
                    "Get detailed information about a specific telephone number "
                    "including configuration and enabled features"
                ),
                parameters=(
                    ModelParameterDescriptor(
                        name="phone_number",
                        description="The telephone number to query (e.g., +1234567890)",
                    ),
                ),
                result_description="Number details as indented JSON",
            ),
            method=EnumHttpMethod.GET,
            path="/numbers/{phone_number}",
            output_contract=EnumOutputContract.TYPED,
            response_model=ModelNumber,
        ),
        ModelOperationBinding(
            descriptor=ModelOperationDescriptor(
                name="provision_number",
                description=(
                    "Provision a new telephone number with specified region, service "
                    "type, and capabilities"
                ),
                parameters=(
                    ModelParameterDescriptor(
                        name="number_request_json",
                        description=(
                            "JSON string containing number provisioning request with "
                            "region, serviceType, capabilities, and other configuration"
                        ),
                        json_payload=True,
                    ),
                ),
                result_description="Provisioned number as returned by the API",
            ),
            method=EnumHttpMethod.POST,
            path="/numbers",
            body_parameter="number_request_json",
        ),
        ModelOperationBinding(
            descriptor=ModelOperationDescriptor(
                name="update_number_configuration",
                description=(
                    "Update the configuration of an existing telephone number "
                    "including features and routing settings"
                ),
                parameters=(
                    ModelParameterDescriptor(
                        name="phone_number",
                        description="The telephone number to update",
                    ),
                    ModelParameterDescriptor(
                        name="configuration_json",
                        description=(
                            "JSON string containing updated configuration including "
                            "features, routing, and other settings"
                        ),
                        json_payload=True,
                    ),
                ),
                result_description="Updated configuration as returned by the API",
            ),
            method=EnumHttpMethod.PUT,
            path="/numbers/{phone_number}/configuration",
            body_parameter="configuration_json",
        ),
        ModelOperationBinding(
            descriptor=ModelOperationDescriptor(
                name="release_number",
                description=(
                    "Release a telephone number from service and return it to the "
                    "available pool"
                ),
                parameters=(
                    ModelParameterDescriptor(
                        name="phone_number",
                        description="The telephone number to release from service",
                    ),
                ),
                result_description="Confirmation message",
            ),
            method=EnumHttpMethod.DELETE,
            path="/numbers/{phone_number}",
            output_contract=EnumOutputContract.CONFIRMATION,
            confirmation_template="Number {phone_number} has been successfully released from service",
        ),
        ModelOperationBinding(
            descriptor=ModelOperationDescriptor(
                name="get_available_numbers",
                description=(
                    "Search for available telephone numbers that can be provisioned "
                    "in a specific region or area code"
                ),
                parameters=(
                    ModelParameterDescriptor(
                        name="region",
                        description="The region, area code, or location to search for available numbers",
                    ),
                    ModelParameterDescriptor(
                        name="count",
                        description="Number of available numbers to return (optional, default 10)",
                        required=False,
                        default=10,
                        value_type=EnumParameterType.INTEGER,
                    ),
                ),
                result_description="Available numbers as returned by the API",
            ),
            method=EnumHttpMethod.GET,
            path="/available-numbers",
            query=(("region", "region"), ("count", "count")),
        ),
        ModelOperationBinding(
            descriptor=ModelOperationDescriptor(
                name="get_service_status",
                description="Get the current operational status and health of the MyNumbers service",
                result_description="Service status as returned by the API",
            ),
            method=EnumHttpMethod.GET,
            path="/status",
        ),
    ),
)

__all__ = ["MY_NUMBERS_RESOURCE"]
