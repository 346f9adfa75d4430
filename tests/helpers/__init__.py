# SPDX-License-Identifier: MIT
# Copyright (c) 2025 OmniNode Team
"""Test helpers for bics_agent unit tests.

Available Utilities:
    Transports:
        - SpyTransport: Records every request and replies with a canned response

    Log Helpers:
        - filter_error_records: Filter ERROR records emitted by a module
        - get_error_messages: Extract formatted ERROR messages
"""

from tests.helpers.log_helpers import filter_error_records, get_error_messages
from tests.helpers.spy_transport import SpyTransport

__all__: list[str] = [
    "SpyTransport",
    "filter_error_records",
    "get_error_messages",
]
