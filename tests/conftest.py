# SPDX-License-Identifier: MIT
# Copyright (c) 2025 OmniNode Team
"""Pytest configuration and shared fixtures for bics_agent tests."""

from __future__ import annotations

import pytest

from bics_agent.runtime.config import base_url_env_var
from bics_agent.runtime.models import RESOURCE_SETTINGS_KEYS, ModelApiSettings

BASE_URL: str = "https://api.example.test"


@pytest.fixture
def base_url() -> str:
    """Base URL shared by adapter tests."""
    return BASE_URL


@pytest.fixture
def full_settings() -> ModelApiSettings:
    """Settings with a base URL configured for every resource."""
    return ModelApiSettings.model_validate(
        {key: {"base_url": f"{BASE_URL}/{key}"} for key in RESOURCE_SETTINGS_KEYS}
    )


@pytest.fixture
def clean_env(monkeypatch: pytest.MonkeyPatch) -> None:
    """Remove every BICS configuration variable from the environment."""
    monkeypatch.delenv("BICS_AGENT_CONFIG", raising=False)
    monkeypatch.delenv("BICS_AGENT_TIMEOUT_SECONDS", raising=False)
    monkeypatch.delenv("BICS_AGENT_LOG_LEVEL", raising=False)
    for key in RESOURCE_SETTINGS_KEYS:
        monkeypatch.delenv(base_url_env_var(key), raising=False)
