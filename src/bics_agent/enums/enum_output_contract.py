# SPDX-License-Identifier: MIT
# Copyright (c) 2025 OmniNode Team
"""Output Contract Enumeration.

Describes how a successful upstream response is turned into the string an
operation returns.
"""

from enum import Enum


class EnumOutputContract(str, Enum):
    """Output contracts for resource operations.

    Attributes:
        OPAQUE: The upstream body is returned verbatim
        TYPED: The body is validated into a response model and re-serialized
            as indented JSON
        CONFIRMATION: A short human-readable confirmation is returned instead
            of the body (delete-style operations)
    """

    OPAQUE = "opaque"
    TYPED = "typed"
    CONFIRMATION = "confirmation"


__all__ = ["EnumOutputContract"]
