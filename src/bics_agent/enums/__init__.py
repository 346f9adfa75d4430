# SPDX-License-Identifier: MIT
# Copyright (c) 2025 OmniNode Team
"""Enumerations for bics_agent.

Exports:
    EnumFaultKind: Failure taxonomy used by validation and classification
    EnumHttpMethod: HTTP methods used by operation bindings
    EnumOutputContract: How successful responses are rendered
    EnumParameterType: Value types of operation parameters
"""

from bics_agent.enums.enum_fault_kind import EnumFaultKind
from bics_agent.enums.enum_http_method import EnumHttpMethod
from bics_agent.enums.enum_output_contract import EnumOutputContract
from bics_agent.enums.enum_parameter_type import EnumParameterType

__all__: list[str] = [
    "EnumFaultKind",
    "EnumHttpMethod",
    "EnumOutputContract",
    "EnumParameterType",
]
