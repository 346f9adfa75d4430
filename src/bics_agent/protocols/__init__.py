# SPDX-License-Identifier: MIT
# Copyright (c) 2025 OmniNode Team
"""Protocols for bics_agent collaborators."""

from bics_agent.protocols.protocol_transport import ProtocolTransport

__all__: list[str] = ["ProtocolTransport"]
