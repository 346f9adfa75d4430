# SPDX-License-Identifier: MIT
# Copyright (c) 2025 OmniNode Team
"""MyNumbers Emergency Services API - E911/E112 configuration per number."""

from __future__ import annotations

from bics_agent.adapters import ModelOperationBinding, ModelResourceDefinition
from bics_agent.enums import EnumHttpMethod
from bics_agent.models import ModelOperationDescriptor, ModelParameterDescriptor

EMERGENCY_SERVICES_RESOURCE = ModelResourceDefinition(
    name="emergency_services",
    settings_key="my_numbers_emergency_services_api",
    description=(
        "BICS MyNumbers Emergency Services API for configuring emergency services "
        "and E911/E112 compliance"
    ),
    operations=(
        ModelOperationBinding(
            descriptor=ModelOperationDescriptor(
                name="configure_emergency_services",
                description="Configure emergency services for a telephone number",
                parameters=(
                    ModelParameterDescriptor(
                        name="phone_number",
                        description="The telephone number to configure",
                    ),
                    ModelParameterDescriptor(
                        name="configuration_json",
                        description="JSON string containing emergency services configuration",
                        json_payload=True,
                    ),
                ),
                result_description="Emergency services configuration as returned by the API",
            ),
            method=EnumHttpMethod.PUT,
            path="/emergency-services/{phone_number}",
            body_parameter="configuration_json",
        ),
        ModelOperationBinding(
            descriptor=ModelOperationDescriptor(
                name="get_emergency_services_configuration",
                description="Get emergency services configuration for a telephone number",
                parameters=(
                    ModelParameterDescriptor(
                        name="phone_number",
                        description="The telephone number to query",
                    ),
                ),
                result_description="Emergency services configuration as returned by the API",
            ),
            method=EnumHttpMethod.GET,
            path="/emergency-services/{phone_number}",
        ),
    ),
)

__all__ = ["EMERGENCY_SERVICES_RESOURCE"]
