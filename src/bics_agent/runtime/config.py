# SPDX-License-Identifier: MIT
# Copyright (c) 2025 OmniNode Team
"""Layered configuration loading.

Settings are assembled from three layers, later layers winning:

    1. YAML file (``--config`` or ``BICS_AGENT_CONFIG``), section ``api_settings``
    2. Environment variables:
       - ``BICS_<SETTINGS_KEY>_BASE_URL`` (e.g. ``BICS_CONNECT_API_BASE_URL``)
       - ``BICS_AGENT_TIMEOUT_SECONDS``
    3. Explicit overrides (``--base-url connect_api=https://...``)

Environment Variables:
    BICS_AGENT_CONFIG: Path of the YAML configuration file
    BICS_AGENT_TIMEOUT_SECONDS: Transport timeout in seconds
    BICS_<SETTINGS_KEY>_BASE_URL: Base URL of one backend API
"""

from __future__ import annotations

import logging
import os
from collections.abc import Mapping
from pathlib import Path
from typing import Optional
from uuid import uuid4

import yaml
from pydantic import ValidationError

from bics_agent.errors import AdapterConfigurationError, ModelAdapterErrorContext
from bics_agent.runtime.models import RESOURCE_SETTINGS_KEYS, ModelApiSettings

logger = logging.getLogger(__name__)

CONFIG_PATH_ENV: str = "BICS_AGENT_CONFIG"
TIMEOUT_ENV: str = "BICS_AGENT_TIMEOUT_SECONDS"
CONFIG_SECTION: str = "api_settings"


def base_url_env_var(settings_key: str) -> str:
    """Return the environment variable holding the base URL of ``settings_key``."""
    return f"BICS_{settings_key.upper()}_BASE_URL"


def _read_config_file(path: Path, context: ModelAdapterErrorContext) -> dict[str, object]:
    try:
        with open(path, encoding="utf-8") as f:
            raw_config = yaml.safe_load(f) or {}
    except yaml.YAMLError as e:
        raise AdapterConfigurationError(
            f"Failed to parse config YAML at {path}: {e}",
            context=context,
            config_path=str(path),
        ) from e
    except UnicodeDecodeError as e:
        raise AdapterConfigurationError(
            f"Config file contains binary or non-UTF-8 content: {path}",
            context=context,
            config_path=str(path),
        ) from e
    except OSError as e:
        raise AdapterConfigurationError(
            f"Failed to read config at {path}: {e}",
            context=context,
            config_path=str(path),
        ) from e

    if not isinstance(raw_config, dict):
        raise AdapterConfigurationError(
            f"Config at {path} must be a mapping, got {type(raw_config).__name__}",
            context=context,
            config_path=str(path),
        )
    section = raw_config.get(CONFIG_SECTION) or {}
    if not isinstance(section, dict):
        raise AdapterConfigurationError(
            f"'{CONFIG_SECTION}' in {path} must be a mapping",
            context=context,
            config_path=str(path),
        )
    return dict(section)


def _set_base_url(raw: dict[str, object], settings_key: str, base_url: str) -> None:
    section = raw.get(settings_key)
    merged = dict(section) if isinstance(section, dict) else {}
    merged["base_url"] = base_url
    raw[settings_key] = merged


def load_api_settings(
    config_path: Optional[Path] = None,
    environ: Optional[Mapping[str, str]] = None,
    overrides: Optional[Mapping[str, str]] = None,
) -> ModelApiSettings:
    """Load API settings from file, environment and explicit overrides.

    Missing base URLs are not an error here; the bootstrap decides whether
    the loaded settings are complete.

    Args:
        config_path: YAML file to read (defaults to ``$BICS_AGENT_CONFIG``)
        environ: Environment mapping (defaults to ``os.environ``)
        overrides: ``settings_key -> base_url`` pairs that win over everything

    Returns:
        Validated, immutable settings.

    Raises:
        AdapterConfigurationError: If the file cannot be read or parsed, an
            override names an unknown section, or validation fails.
    """
    env = os.environ if environ is None else environ
    if config_path is None and env.get(CONFIG_PATH_ENV):
        config_path = Path(env[CONFIG_PATH_ENV])

    correlation_id = uuid4()
    context = ModelAdapterErrorContext(
        operation="load_config",
        target_name=str(config_path) if config_path is not None else "environment",
        correlation_id=correlation_id,
    )

    raw: dict[str, object] = {}
    if config_path is not None:
        logger.info(
            "Loading API settings from %s (correlation_id=%s)",
            config_path,
            correlation_id,
        )
        raw = _read_config_file(config_path, context)

    for settings_key in RESOURCE_SETTINGS_KEYS:
        env_value = env.get(base_url_env_var(settings_key))
        if env_value:
            _set_base_url(raw, settings_key, env_value)
    if env.get(TIMEOUT_ENV):
        raw["timeout_seconds"] = env[TIMEOUT_ENV]

    for settings_key, base_url in (overrides or {}).items():
        if settings_key not in RESOURCE_SETTINGS_KEYS:
            raise AdapterConfigurationError(
                f"Unknown API settings section '{settings_key}'",
                context=context,
                valid_sections=list(RESOURCE_SETTINGS_KEYS),
            )
        _set_base_url(raw, settings_key, base_url)

    try:
        settings = ModelApiSettings.model_validate(raw)
    except ValidationError as e:
        errors = [
            f"{'.'.join(str(loc) for loc in err['loc'])}: {err['msg']}"
            for err in e.errors()
        ]
        raise AdapterConfigurationError(
            f"API settings validation failed: {e.error_count()} error(s). "
            f"First errors: {'; '.join(errors[:3])}",
            context=context,
            validation_errors=errors,
        ) from e

    logger.debug(
        "API settings loaded (correlation_id=%s)",
        correlation_id,
        extra={
            "timeout_seconds": settings.timeout_seconds,
            "missing_base_urls": settings.missing_base_urls(),
        },
    )
    return settings


__all__ = [
    "CONFIG_PATH_ENV",
    "CONFIG_SECTION",
    "TIMEOUT_ENV",
    "base_url_env_var",
    "load_api_settings",
]
