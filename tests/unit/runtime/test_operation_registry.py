# SPDX-License-Identifier: MIT
# Copyright (c) 2025 OmniNode Team
"""Unit tests for OperationRegistry.

Tests cover:
- Registration from adapters and duplicate detection
- Lookup, listing and description
- Invocation through the registry
"""

from __future__ import annotations

import pytest

from bics_agent.adapters import ResourceAdapter
from bics_agent.errors import RegistryError
from bics_agent.resources import ALL_RESOURCES, CONNECT_RESOURCE, SMS_RESOURCE
from bics_agent.runtime import OperationRegistry, RegisteredOperation
from tests.helpers import SpyTransport


def _registry(transport: SpyTransport, base_url: str) -> OperationRegistry:
    return OperationRegistry.from_adapters(
        [
            ResourceAdapter(CONNECT_RESOURCE, base_url, transport),
            ResourceAdapter(SMS_RESOURCE, base_url, transport),
        ]
    )


class TestOperationRegistryConstruction:
    """Tests for building the registry."""

    def test_registers_every_operation(self, base_url: str) -> None:
        registry = _registry(SpyTransport(), base_url)

        assert len(registry) == len(CONNECT_RESOURCE.operations) + len(SMS_RESOURCE.operations)
        assert ("connect", "get_connection") in registry
        assert registry.is_registered("sms", "send_message") is True

    def test_all_resources_register_without_collisions(self, base_url: str) -> None:
        transport = SpyTransport()
        registry = OperationRegistry.from_adapters(
            ResourceAdapter(resource, base_url, transport) for resource in ALL_RESOURCES
        )

        assert len(registry) == sum(len(r.operations) for r in ALL_RESOURCES)
        assert registry.list_resources() == sorted(r.name for r in ALL_RESOURCES)

    def test_duplicate_entry_raises(self, base_url: str) -> None:
        adapter = ResourceAdapter(CONNECT_RESOURCE, base_url, SpyTransport())

        with pytest.raises(RegistryError, match="registered twice"):
            OperationRegistry.from_adapters([adapter, adapter])


class TestOperationRegistryLookup:
    """Tests for lookup, listing and description."""

    def test_get_returns_entry(self, base_url: str) -> None:
        entry = _registry(SpyTransport(), base_url).get("connect", "delete_connection")

        assert isinstance(entry, RegisteredOperation)
        assert entry.resource == "connect"
        assert entry.name == "delete_connection"
        assert entry.descriptor.parameters[0].name == "connection_id"

    def test_get_unknown_raises_with_known_operations(self, base_url: str) -> None:
        registry = _registry(SpyTransport(), base_url)

        with pytest.raises(RegistryError) as exc_info:
            registry.get("connect", "teleport")

        assert "connect.teleport" in exc_info.value.message
        registered = exc_info.value.extra_context["registered_operations"]
        assert isinstance(registered, list)
        assert "connect.get_connection" in registered

    def test_list_operations_is_sorted_and_filterable(self, base_url: str) -> None:
        registry = _registry(SpyTransport(), base_url)

        everything = registry.list_operations()
        connect_only = registry.list_operations("connect")

        assert everything == sorted(everything)
        assert all(resource == "connect" for resource, _ in connect_only)
        assert len(connect_only) == len(CONNECT_RESOURCE.operations)

    def test_describe_groups_by_resource(self, base_url: str) -> None:
        described = _registry(SpyTransport(), base_url).describe()

        assert set(described) == {"connect", "sms"}
        names = [item["name"] for item in described["connect"]]
        assert "get_connection" in names

    def test_iteration_follows_sorted_keys(self, base_url: str) -> None:
        registry = _registry(SpyTransport(), base_url)

        keys = [(entry.resource, entry.name) for entry in registry]

        assert keys == registry.list_operations()

    def test_entries_cannot_be_replaced(self, base_url: str) -> None:
        registry = _registry(SpyTransport(), base_url)

        with pytest.raises(TypeError):
            registry._operations[("connect", "get_connection")] = None  # type: ignore[index]


class TestOperationRegistryInvoke:
    """Tests for invoking operations through the registry."""

    @pytest.mark.asyncio
    async def test_invoke_dispatches_to_adapter(self, base_url: str) -> None:
        transport = SpyTransport(status_code=204)
        registry = _registry(transport, base_url)

        result = await registry.invoke("connect", "delete_connection", "42")

        assert result == "Connection 42 has been successfully scheduled for disconnection"
        assert transport.last_request.url == f"{base_url}/connections/42"

    @pytest.mark.asyncio
    async def test_entry_is_callable(self, base_url: str) -> None:
        transport = SpyTransport(status_code=204)
        entry = _registry(transport, base_url).get("connect", "delete_connection")

        result = await entry(connection_id="7")

        assert "Connection 7" in result

    @pytest.mark.asyncio
    async def test_invoke_unknown_raises(self, base_url: str) -> None:
        transport = SpyTransport()

        with pytest.raises(RegistryError):
            await _registry(transport, base_url).invoke("fax", "send")

        assert transport.call_count == 0
