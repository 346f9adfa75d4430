# SPDX-License-Identifier: MIT
# Copyright (c) 2025 OmniNode Team
"""Concrete transports."""

from bics_agent.transport.transport_http import HttpTransport

__all__: list[str] = ["HttpTransport"]
