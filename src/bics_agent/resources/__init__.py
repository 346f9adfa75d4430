# SPDX-License-Identifier: MIT
# Copyright (c) 2025 OmniNode Team
"""Static binding tables for every supported backend API.

``ALL_RESOURCES`` is the explicit, ordered list the bootstrap builds
adapters from; adding a resource means adding its table here.
"""

from bics_agent.adapters import ModelResourceDefinition
from bics_agent.resources.resource_address_management import (
    ADDRESS_MANAGEMENT_RESOURCE,
)
from bics_agent.resources.resource_cdr import CDR_RESOURCE
from bics_agent.resources.resource_connect import CONNECT_RESOURCE
from bics_agent.resources.resource_disconnection import DISCONNECTION_RESOURCE
from bics_agent.resources.resource_emergency_services import (
    EMERGENCY_SERVICES_RESOURCE,
)
from bics_agent.resources.resource_my_numbers import MY_NUMBERS_RESOURCE
from bics_agent.resources.resource_number_porting import NUMBER_PORTING_RESOURCE
from bics_agent.resources.resource_sms import SMS_RESOURCE

ALL_RESOURCES: tuple[ModelResourceDefinition, ...] = (
    CONNECT_RESOURCE,
    MY_NUMBERS_RESOURCE,
    ADDRESS_MANAGEMENT_RESOURCE,
    CDR_RESOURCE,
    DISCONNECTION_RESOURCE,
    EMERGENCY_SERVICES_RESOURCE,
    NUMBER_PORTING_RESOURCE,
    SMS_RESOURCE,
)

__all__: list[str] = [
    "ADDRESS_MANAGEMENT_RESOURCE",
    "ALL_RESOURCES",
    "CDR_RESOURCE",
    "CONNECT_RESOURCE",
    "DISCONNECTION_RESOURCE",
    "EMERGENCY_SERVICES_RESOURCE",
    "MY_NUMBERS_RESOURCE",
    "NUMBER_PORTING_RESOURCE",
    "SMS_RESOURCE",
]
