# SPDX-License-Identifier: MIT
# Copyright (c) 2025 OmniNode Team
"""MyNumbers API paged number list model."""

from __future__ import annotations

from pydantic import Field

from bics_agent.models.model_api_resource import ModelApiResource
from bics_agent.models.my_numbers.model_number import ModelNumber


class ModelNumberList(ModelApiResource):
    """One page of telephone numbers.

    Pagination fields are surfaced verbatim; fetching further pages is one
    call per page.
    """

    numbers: list[ModelNumber] | None = Field(default_factory=list)
    total_count: int | None = 0
    page_size: int | None = 0
    current_page: int | None = 0


__all__ = ["ModelNumberList"]
