# SPDX-License-Identifier: MIT
# Copyright (c) 2025 OmniNode Team
"""Typed response models for the Connect API."""

from bics_agent.models.connect.model_connection import ModelConnection
from bics_agent.models.connect.model_connection_line import ModelConnectionLine
from bics_agent.models.connect.model_connection_list import ModelConnectionList
from bics_agent.models.connect.model_interconnect import ModelInterconnect
from bics_agent.models.connect.model_interconnect_list import ModelInterconnectList
from bics_agent.models.connect.model_reference_data import ModelReferenceData

__all__: list[str] = [
    "ModelConnection",
    "ModelConnectionLine",
    "ModelConnectionList",
    "ModelInterconnect",
    "ModelInterconnectList",
    "ModelReferenceData",
]
