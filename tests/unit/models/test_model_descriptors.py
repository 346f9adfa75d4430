# SPDX-License-Identifier: MIT
# Copyright (c) 2025 OmniNode Team
"""Unit tests for parameter and operation descriptors."""

from __future__ import annotations

import pytest
from pydantic import ValidationError

from bics_agent.enums import EnumParameterType
from bics_agent.models import ModelOperationDescriptor, ModelParameterDescriptor


class TestModelParameterDescriptor:
    """Test suite for ModelParameterDescriptor invariants."""

    def test_defaults(self) -> None:
        parameter = ModelParameterDescriptor(name="connection_id", description="ID")

        assert parameter.required is True
        assert parameter.default is None
        assert parameter.value_type is EnumParameterType.STRING
        assert parameter.json_payload is False

    def test_required_parameter_cannot_have_default(self) -> None:
        with pytest.raises(ValidationError, match="cannot declare a default"):
            ModelParameterDescriptor(name="count", description="Count", default=10)

    def test_optional_parameter_may_have_default(self) -> None:
        parameter = ModelParameterDescriptor(
            name="count",
            description="Count",
            required=False,
            default=10,
            value_type=EnumParameterType.INTEGER,
        )

        assert parameter.default == 10

    def test_json_payload_must_be_string(self) -> None:
        with pytest.raises(ValidationError, match="must be a string"):
            ModelParameterDescriptor(
                name="payload",
                description="Payload",
                json_payload=True,
                value_type=EnumParameterType.INTEGER,
            )

    @pytest.mark.parametrize("name", ["ConnectionId", "1st", "connection-id", ""])
    def test_rejects_non_identifier_names(self, name: str) -> None:
        with pytest.raises(ValidationError):
            ModelParameterDescriptor(name=name, description="x")

    def test_is_immutable(self) -> None:
        parameter = ModelParameterDescriptor(name="connection_id", description="ID")

        with pytest.raises(ValidationError):
            parameter.required = False  # type: ignore[misc]


class TestModelOperationDescriptor:
    """Test suite for ModelOperationDescriptor."""

    def test_parameter_order_is_preserved(self) -> None:
        descriptor = ModelOperationDescriptor(
            name="get_call_detail_records",
            description="Get CDRs",
            parameters=(
                ModelParameterDescriptor(name="phone_number", description="Number"),
                ModelParameterDescriptor(name="start_date", description="Start"),
                ModelParameterDescriptor(name="end_date", description="End"),
            ),
            result_description="CDRs",
        )

        assert descriptor.parameter_names == ("phone_number", "start_date", "end_date")
        assert descriptor.get_parameter("start_date") is descriptor.parameters[1]
        assert descriptor.get_parameter("unknown") is None

    def test_duplicate_parameters_rejected(self) -> None:
        with pytest.raises(ValidationError, match="Duplicate parameter names"):
            ModelOperationDescriptor(
                name="op",
                description="Op",
                parameters=(
                    ModelParameterDescriptor(name="a", description="A"),
                    ModelParameterDescriptor(name="a", description="A again"),
                ),
                result_description="Result",
            )
