# SPDX-License-Identifier: MIT
# Copyright (c) 2025 OmniNode Team
"""MyNumbers CDR API - call detail records and usage analytics."""

from __future__ import annotations

from bics_agent.adapters import ModelOperationBinding, ModelResourceDefinition
from bics_agent.enums import EnumHttpMethod
from bics_agent.models import ModelOperationDescriptor, ModelParameterDescriptor

CDR_RESOURCE = ModelResourceDefinition(
    name="cdr",
    settings_key="my_numbers_cdr_api",
    description=(
        "BICS MyNumbers CDR API for accessing call detail records and usage analytics"
    ),
    operations=(
        ModelOperationBinding(
            descriptor=ModelOperationDescriptor(
                name="get_call_detail_records",
                description="Get call detail records for a specific telephone number",
                parameters=(
                    ModelParameterDescriptor(
                        name="phone_number",
                        description="The telephone number to get CDR data for",
                    ),
                    ModelParameterDescriptor(
                        name="start_date",
                        description="Start date for CDR query (YYYY-MM-DD)",
                    ),
                    ModelParameterDescriptor(
                        name="end_date",
                        description="End date for CDR query (YYYY-MM-DD)",
                    ),
                ),
                result_description="Call detail records as returned by the API",
            ),
            method=EnumHttpMethod.GET,
            path="/cdr/{phone_number}",
            query=(("start_date", "startDate"), ("end_date", "endDate")),
        ),
        ModelOperationBinding(
            descriptor=ModelOperationDescriptor(
                name="get_usage_analytics",
                description="Get usage analytics and statistics for telephone numbers",
                parameters=(
                    ModelParameterDescriptor(
                        name="phone_number",
                        description="The telephone number or range to analyze",
                    ),
                    ModelParameterDescriptor(
                        name="period",
                        description="Time period for analytics (daily, weekly, monthly)",
                    ),
                ),
                result_description="Usage analytics as returned by the API",
            ),
            method=EnumHttpMethod.GET,
            path="/analytics/{phone_number}",
            query=(("period", "period"),),
        ),
    ),
)

__all__ = ["CDR_RESOURCE"]
