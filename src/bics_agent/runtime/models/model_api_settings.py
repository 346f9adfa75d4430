# SPDX-License-Identifier: MIT
# Copyright (c) 2025 OmniNode Team
"""API Settings Model - the ``api_settings`` configuration section."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field

from bics_agent.runtime.models.model_resource_settings import ModelResourceSettings

RESOURCE_SETTINGS_KEYS: tuple[str, ...] = (
    "connect_api",
    "my_numbers_api",
    "my_numbers_address_management_api",
    "my_numbers_cdr_api",
    "my_numbers_disconnection_api",
    "my_numbers_emergency_services_api",
    "my_numbers_number_porting_api",
    "sms_api",
)


class ModelApiSettings(BaseModel):
    """Base URLs of every backend API plus shared transport settings.

    Example YAML:
        ```yaml
        api_settings:
          connect_api:
            base_url: https://api.example.com/connect/v1
          sms_api:
            base_url: https://api.example.com/sms/v1
          timeout_seconds: 30
          default_headers:
            Authorization: Bearer <token>
        ```
    """

    model_config = ConfigDict(
        frozen=True,
        extra="forbid",
    )

    connect_api: ModelResourceSettings = Field(default_factory=ModelResourceSettings)
    my_numbers_api: ModelResourceSettings = Field(default_factory=ModelResourceSettings)
    my_numbers_address_management_api: ModelResourceSettings = Field(
        default_factory=ModelResourceSettings
    )
    my_numbers_cdr_api: ModelResourceSettings = Field(default_factory=ModelResourceSettings)
    my_numbers_disconnection_api: ModelResourceSettings = Field(
        default_factory=ModelResourceSettings
    )
    my_numbers_emergency_services_api: ModelResourceSettings = Field(
        default_factory=ModelResourceSettings
    )
    my_numbers_number_porting_api: ModelResourceSettings = Field(
        default_factory=ModelResourceSettings
    )
    sms_api: ModelResourceSettings = Field(default_factory=ModelResourceSettings)

    timeout_seconds: float = Field(default=30.0, gt=0)
    max_response_size: int = Field(default=50 * 1024 * 1024, gt=0)
    default_headers: dict[str, str] = Field(default_factory=dict)

    def resource_settings(self, settings_key: str) -> ModelResourceSettings:
        """Return the settings section named ``settings_key``.

        Raises:
            KeyError: If ``settings_key`` is not a resource section.
        """
        if settings_key not in RESOURCE_SETTINGS_KEYS:
            raise KeyError(settings_key)
        settings: ModelResourceSettings = getattr(self, settings_key)
        return settings

    def missing_base_urls(self) -> list[str]:
        """Return the resource sections that have no base URL."""
        return [
            key for key in RESOURCE_SETTINGS_KEYS if not self.resource_settings(key).is_configured
        ]


__all__ = ["RESOURCE_SETTINGS_KEYS", "ModelApiSettings"]
