# SPDX-License-Identifier: MIT
# Copyright (c) 2025 OmniNode Team
"""Models for bics_agent.

Descriptor models describe operations for discovery; fault, result and
diagnosis models carry failures; transport models carry requests and
responses. Typed upstream response models live in the per-API subpackages
(``connect``, ``my_numbers``, ``sms``).
"""

from bics_agent.models.model_api_resource import ModelApiResource
from bics_agent.models.model_diagnosis_record import ModelDiagnosisRecord
from bics_agent.models.model_fault import ModelFault
from bics_agent.models.model_operation_descriptor import ModelOperationDescriptor
from bics_agent.models.model_parameter_descriptor import ModelParameterDescriptor
from bics_agent.models.model_result import Err, Ok, Result
from bics_agent.models.model_transport import (
    ModelTransportRequest,
    ModelTransportResponse,
)
from bics_agent.models.types import AttributeMap

__all__: list[str] = [
    "AttributeMap",
    "Err",
    "ModelApiResource",
    "ModelDiagnosisRecord",
    "ModelFault",
    "ModelOperationDescriptor",
    "ModelParameterDescriptor",
    "ModelTransportRequest",
    "ModelTransportResponse",
    "Ok",
    "Result",
]
