# SPDX-License-Identifier: MIT
# Copyright (c) 2025 OmniNode Team
"""HTTP method enumeration for operation bindings."""

from enum import Enum


class EnumHttpMethod(str, Enum):
    """HTTP methods an operation binding may use."""

    GET = "GET"
    POST = "POST"
    PUT = "PUT"
    DELETE = "DELETE"

    @property
    def accepts_body(self) -> bool:
        """Whether requests with this method carry a JSON payload."""
        return self in (EnumHttpMethod.POST, EnumHttpMethod.PUT)


__all__ = ["EnumHttpMethod"]
