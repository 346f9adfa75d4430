# SPDX-License-Identifier: MIT
# Copyright (c) 2025 OmniNode Team
"""Unit tests for operation bindings and resource definitions."""

from __future__ import annotations

import pytest
from pydantic import ValidationError

from bics_agent.adapters import (
    ModelOperationBinding,
    ModelResourceDefinition,
    path_placeholders,
)
from bics_agent.enums import EnumHttpMethod, EnumOutputContract
from bics_agent.models import ModelOperationDescriptor, ModelParameterDescriptor
from bics_agent.models.connect import ModelConnection


def _descriptor(*parameters: ModelParameterDescriptor, name: str = "op") -> ModelOperationDescriptor:
    return ModelOperationDescriptor(
        name=name,
        description="Operation",
        parameters=parameters,
        result_description="Result",
    )


_ID = ModelParameterDescriptor(name="item_id", description="Item ID")
_PAYLOAD = ModelParameterDescriptor(name="payload", description="Payload", json_payload=True)


class TestPathPlaceholders:
    """Test suite for path_placeholders."""

    def test_extracts_in_order(self) -> None:
        assert path_placeholders("/outbound/{sender}/requests/{request_id}") == (
            "sender",
            "request_id",
        )

    def test_no_placeholders(self) -> None:
        assert path_placeholders("/refdata") == ()


class TestModelOperationBindingValidation:
    """Test suite for binding invariants checked at construction."""

    def test_path_placeholder_must_be_declared(self) -> None:
        with pytest.raises(ValidationError, match="undeclared parameters"):
            ModelOperationBinding(
                descriptor=_descriptor(),
                method=EnumHttpMethod.GET,
                path="/items/{item_id}",
            )

    def test_query_parameter_must_be_declared(self) -> None:
        with pytest.raises(ValidationError, match="undeclared parameters"):
            ModelOperationBinding(
                descriptor=_descriptor(),
                method=EnumHttpMethod.GET,
                path="/items",
                query=(("page", "page"),),
            )

    def test_body_parameter_must_be_json_payload(self) -> None:
        with pytest.raises(ValidationError, match="must be a JSON payload"):
            ModelOperationBinding(
                descriptor=_descriptor(_ID),
                method=EnumHttpMethod.POST,
                path="/items",
                body_parameter="item_id",
            )

    def test_body_requires_write_method(self) -> None:
        with pytest.raises(ValidationError, match="sends a body with GET"):
            ModelOperationBinding(
                descriptor=_descriptor(_PAYLOAD),
                method=EnumHttpMethod.GET,
                path="/items",
                body_parameter="payload",
            )

    def test_typed_requires_response_model(self) -> None:
        with pytest.raises(ValidationError, match="requires a response model"):
            ModelOperationBinding(
                descriptor=_descriptor(),
                method=EnumHttpMethod.GET,
                path="/items",
                output_contract=EnumOutputContract.TYPED,
            )

    def test_confirmation_requires_template(self) -> None:
        with pytest.raises(ValidationError, match="requires a template"):
            ModelOperationBinding(
                descriptor=_descriptor(_ID),
                method=EnumHttpMethod.DELETE,
                path="/items/{item_id}",
                output_contract=EnumOutputContract.CONFIRMATION,
            )

    def test_path_must_be_absolute(self) -> None:
        with pytest.raises(ValidationError):
            ModelOperationBinding(descriptor=_descriptor(), method=EnumHttpMethod.GET, path="items")


class TestModelOperationBindingBehavior:
    """Test suite for request building and success rendering."""

    def test_build_request_for_write(self) -> None:
        binding = ModelOperationBinding(
            descriptor=_descriptor(_ID, _PAYLOAD),
            method=EnumHttpMethod.PUT,
            path="/items/{item_id}",
            body_parameter="payload",
        )

        request = binding.build_request(
            "https://api.example.test", {"item_id": "a b", "payload": '{"x":1}'}
        )

        assert request.url == "https://api.example.test/items/a%20b"
        assert request.content == '{"x":1}'
        assert request.headers == {"Content-Type": "application/json"}

    def test_describe_context(self) -> None:
        binding = ModelOperationBinding(
            descriptor=_descriptor(_ID),
            method=EnumHttpMethod.GET,
            path="/items/{item_id}",
        )

        assert binding.describe_context({"item_id": "42"}) == "item_id=42"

    def test_describe_context_without_path_arguments(self) -> None:
        binding = ModelOperationBinding(
            descriptor=_descriptor(), method=EnumHttpMethod.GET, path="/items"
        )

        assert binding.describe_context({}) is None

    def test_render_typed(self) -> None:
        binding = ModelOperationBinding(
            descriptor=_descriptor(_ID),
            method=EnumHttpMethod.GET,
            path="/items/{item_id}",
            output_contract=EnumOutputContract.TYPED,
            response_model=ModelConnection,
        )

        rendered = binding.render_success('{"id":"42"}', {"item_id": "42"})

        assert '"id": "42"' in rendered

    def test_render_confirmation_uses_arguments(self) -> None:
        binding = ModelOperationBinding(
            descriptor=_descriptor(_ID),
            method=EnumHttpMethod.DELETE,
            path="/items/{item_id}",
            output_contract=EnumOutputContract.CONFIRMATION,
            confirmation_template="Item {item_id} deleted",
        )

        assert binding.render_success("ignored", {"item_id": "9"}) == "Item 9 deleted"


class TestModelResourceDefinition:
    """Test suite for resource definitions."""

    def test_duplicate_operations_rejected(self) -> None:
        binding = ModelOperationBinding(
            descriptor=_descriptor(name="same"), method=EnumHttpMethod.GET, path="/a"
        )

        with pytest.raises(ValidationError, match="Duplicate operations"):
            ModelResourceDefinition(
                name="demo",
                settings_key="demo_api",
                description="Demo",
                operations=(binding, binding),
            )

    def test_lookup(self) -> None:
        binding = ModelOperationBinding(
            descriptor=_descriptor(name="list_items"), method=EnumHttpMethod.GET, path="/items"
        )
        resource = ModelResourceDefinition(
            name="demo", settings_key="demo_api", description="Demo", operations=(binding,)
        )

        assert resource.get_binding("list_items") is binding
        assert resource.get_binding("missing") is None
        assert resource.operation_names == ("list_items",)
