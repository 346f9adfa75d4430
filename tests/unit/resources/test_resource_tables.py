# SPDX-License-Identifier: MIT
# Copyright (c) 2025 OmniNode Team
"""Unit tests over every resource table.

Every operation of every resource is driven through a real adapter with a
spy transport, so a broken binding shows up as a failing parameter case.
"""

from __future__ import annotations

import pytest

from bics_agent.adapters import ModelOperationBinding, ModelResourceDefinition, ResourceAdapter
from bics_agent.enums import EnumOutputContract, EnumParameterType
from bics_agent.resources import ALL_RESOURCES
from bics_agent.runtime.models import RESOURCE_SETTINGS_KEYS
from tests.helpers import SpyTransport

BASE_URL = "https://api.example.test"

ALL_BINDINGS: list[tuple[ModelResourceDefinition, ModelOperationBinding]] = [
    (resource, binding) for resource in ALL_RESOURCES for binding in resource.operations
]


def _binding_id(case: tuple[ModelResourceDefinition, ModelOperationBinding]) -> str:
    resource, binding = case
    return f"{resource.name}.{binding.name}"


def _valid_arguments(binding: ModelOperationBinding) -> dict[str, object]:
    arguments: dict[str, object] = {}
    for parameter in binding.descriptor.parameters:
        if parameter.json_payload:
            arguments[parameter.name] = '{"key": "value"}'
        elif parameter.value_type is EnumParameterType.INTEGER:
            arguments[parameter.name] = "5"
        else:
            arguments[parameter.name] = "abc123"
    return arguments


class TestResourceCatalogue:
    """Test suite for the catalogue as a whole."""

    def test_operation_counts(self) -> None:
        counts = {resource.name: len(resource.operations) for resource in ALL_RESOURCES}

        assert counts == {
            "connect": 7,
            "my_numbers": 7,
            "address_management": 3,
            "cdr": 2,
            "disconnection": 2,
            "emergency_services": 2,
            "number_porting": 3,
            "sms": 11,
        }

    def test_every_resource_has_its_own_settings_section(self) -> None:
        keys = [resource.settings_key for resource in ALL_RESOURCES]

        assert sorted(keys) == sorted(RESOURCE_SETTINGS_KEYS)

    def test_resource_names_are_unique(self) -> None:
        names = [resource.name for resource in ALL_RESOURCES]

        assert len(names) == len(set(names))

    @pytest.mark.parametrize(
        ("resource_name", "operation", "arguments", "expected"),
        [
            (
                "connect",
                "delete_connection",
                ("99",),
                "Connection 99 has been successfully scheduled for disconnection",
            ),
            (
                "my_numbers",
                "release_number",
                ("+3212345678",),
                "Number +3212345678 has been successfully released from service",
            ),
            (
                "number_porting",
                "cancel_porting_request",
                ("PR-1",),
                "Porting request PR-1 has been successfully cancelled",
            ),
            ("sms", "delete_inbound_subscription", (), "Inbound message subscription successfully deleted"),
            (
                "sms",
                "delete_delivery_subscription",
                (),
                "Delivery information subscription successfully deleted",
            ),
        ],
    )
    @pytest.mark.asyncio
    async def test_confirmation_texts(
        self,
        resource_name: str,
        operation: str,
        arguments: tuple[str, ...],
        expected: str,
    ) -> None:
        resource = next(r for r in ALL_RESOURCES if r.name == resource_name)
        adapter = ResourceAdapter(resource, BASE_URL, SpyTransport(204, ""))

        assert await adapter.execute(operation, *arguments) == expected


@pytest.mark.parametrize("case", ALL_BINDINGS, ids=_binding_id)
class TestEveryOperation:
    """Test suite applied to every operation of every resource."""

    def test_descriptor_is_self_describing(
        self, case: tuple[ModelResourceDefinition, ModelOperationBinding]
    ) -> None:
        _, binding = case

        assert binding.descriptor.description
        assert binding.descriptor.result_description
        assert all(p.description for p in binding.descriptor.parameters)

    @pytest.mark.asyncio
    async def test_success_returns_string(
        self, case: tuple[ModelResourceDefinition, ModelOperationBinding]
    ) -> None:
        resource, binding = case
        transport = SpyTransport(200, "{}")
        adapter = ResourceAdapter(resource, BASE_URL, transport)

        result = await adapter.execute(binding.name, **_valid_arguments(binding))

        assert isinstance(result, str)
        assert not result.startswith("Error:")
        assert transport.call_count == 1
        request = transport.last_request
        assert request.method is binding.method
        assert request.url.startswith(BASE_URL + "/")
        if binding.output_contract is EnumOutputContract.OPAQUE:
            assert result == "{}"

    @pytest.mark.asyncio
    async def test_missing_required_arguments_skip_transport(
        self, case: tuple[ModelResourceDefinition, ModelOperationBinding]
    ) -> None:
        resource, binding = case
        required = [p for p in binding.descriptor.parameters if p.required]
        if not required:
            pytest.skip("operation has no required parameters")
        transport = SpyTransport(200, "{}")
        adapter = ResourceAdapter(resource, BASE_URL, transport)

        result = await adapter.execute(binding.name)

        assert result.startswith(f"Error: {binding.name} failed — invalid or missing argument:")
        assert required[0].name in result
        assert transport.call_count == 0

    @pytest.mark.asyncio
    @pytest.mark.parametrize("blank", ["", "   ", "\t\n"])
    async def test_blank_required_arguments_skip_transport(
        self, case: tuple[ModelResourceDefinition, ModelOperationBinding], blank: str
    ) -> None:
        resource, binding = case
        required = [p for p in binding.descriptor.parameters if p.required]
        if not required:
            pytest.skip("operation has no required parameters")

        for parameter in required:
            transport = SpyTransport(200, "{}")
            adapter = ResourceAdapter(resource, BASE_URL, transport)
            arguments = {**_valid_arguments(binding), parameter.name: blank}

            result = await adapter.execute(binding.name, **arguments)

            assert result.startswith(
                f"Error: {binding.name} failed — invalid or missing argument:"
            ), parameter.name
            assert parameter.name in result
            assert transport.call_count == 0

    @pytest.mark.asyncio
    @pytest.mark.parametrize("malformed", ["{not json", '{"a": }', "NaN"])
    async def test_malformed_json_payloads_skip_transport(
        self, case: tuple[ModelResourceDefinition, ModelOperationBinding], malformed: str
    ) -> None:
        resource, binding = case
        payloads = [p for p in binding.descriptor.parameters if p.json_payload]
        if not payloads:
            pytest.skip("operation takes no JSON payload")

        for parameter in payloads:
            transport = SpyTransport(200, "{}")
            adapter = ResourceAdapter(resource, BASE_URL, transport)
            arguments = {**_valid_arguments(binding), parameter.name: malformed}

            result = await adapter.execute(binding.name, **arguments)

            assert result.startswith(
                f"Error: {binding.name} failed — invalid or missing argument:"
            ), parameter.name
            assert parameter.name in result
            assert transport.call_count == 0

    @pytest.mark.asyncio
    async def test_server_error_is_diagnosed(
        self, case: tuple[ModelResourceDefinition, ModelOperationBinding]
    ) -> None:
        resource, binding = case
        adapter = ResourceAdapter(resource, BASE_URL, SpyTransport(500, "boom"))

        result = await adapter.execute(binding.name, **_valid_arguments(binding))

        assert result.startswith(f"Error: {binding.name} failed.")
        assert "upstream internal error" in result
