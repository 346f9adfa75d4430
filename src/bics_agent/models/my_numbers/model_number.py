# SPDX-License-Identifier: MIT
# Copyright (c) 2025 OmniNode Team
"""MyNumbers API telephone number model."""

from __future__ import annotations

from pydantic import Field

from bics_agent.models.model_api_resource import ModelApiResource


class ModelNumber(ModelApiResource):
    """A telephone number with its status and enabled capabilities.

    Timestamps are kept as the upstream ISO-8601 strings so re-serialization
    returns them unchanged.
    """

    phone_number: str | None = ""
    status: str | None = ""
    service_type: str | None = ""
    region: str | None = ""
    capabilities: list[str] | None = Field(default_factory=list)
    activation_date: str | None = None
    last_modified: str | None = None


__all__ = ["ModelNumber"]
