# SPDX-License-Identifier: MIT
# Copyright (c) 2025 OmniNode Team
"""Connect API reference data model."""

from __future__ import annotations

from pydantic import Field

from bics_agent.models.model_api_resource import ModelApiResource
from bics_agent.models.types import AttributeMap


class ModelReferenceData(ModelApiResource):
    """Service types, providers, regions, bandwidths and contract options.

    The catalogue shape varies per provider, so it is kept as an ordered
    attribute map rather than modelled field by field.
    """

    data: AttributeMap | None = Field(default_factory=dict)


__all__ = ["ModelReferenceData"]
