# SPDX-License-Identifier: MIT
# Copyright (c) 2025 OmniNode Team
"""Connect API connection model."""

from __future__ import annotations

from pydantic import Field

from bics_agent.models.connect.model_connection_line import ModelConnectionLine
from bics_agent.models.model_api_resource import ModelApiResource
from bics_agent.models.types import AttributeMap


class ModelConnection(ModelApiResource):
    """A cloud connection with its commercial terms, status and lines.

    Every ``*_label`` field is the display text of the matching code field
    as returned by the reference data endpoint.
    """

    id: str | None = ""
    service_type: str | None = ""
    cloud_service_provider: str | None = ""
    cloud_service_provider_label: str | None = ""
    cloud_service_region: str | None = ""
    cloud_service_region_label: str | None = ""
    order_id: int | None = 0
    price: str | None = ""
    currency: str | None = ""
    currency_label: str | None = ""
    bandwidth: str | None = ""
    bandwidth_label: str | None = ""
    contract_term: str | None = ""
    contract_term_label: str | None = ""
    protection_scheme: str | None = ""
    protection_scheme_label: str | None = ""
    company_name: str | None = ""
    customer_comment: str | None = ""
    customer_purchase_id: str | None = ""
    contact_email_address: str | None = ""
    activation_date: str | None = ""
    status: str | None = ""
    additional_attributes: AttributeMap | None = Field(default_factory=dict)
    lines: list[ModelConnectionLine] | None = Field(default_factory=list)


__all__ = ["ModelConnection"]
