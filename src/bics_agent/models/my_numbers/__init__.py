# SPDX-License-Identifier: MIT
# Copyright (c) 2025 OmniNode Team
"""Typed response models for the MyNumbers API."""

from bics_agent.models.my_numbers.model_number import ModelNumber
from bics_agent.models.my_numbers.model_number_list import ModelNumberList

__all__: list[str] = ["ModelNumber", "ModelNumberList"]
