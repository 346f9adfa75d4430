# SPDX-License-Identifier: MIT
# Copyright (c) 2025 OmniNode Team
"""Command line host for the BICS agent."""

from bics_agent.cli.commands import cli

__all__: list[str] = ["cli"]
