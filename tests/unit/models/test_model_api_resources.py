# SPDX-License-Identifier: MIT
# Copyright (c) 2025 OmniNode Team
"""Unit tests for typed upstream response models.

Typed output must never lose upstream data: unknown keys survive
re-serialization and camelCase keys come back under their upstream names.
"""

from __future__ import annotations

import json

import pytest
from pydantic import ValidationError
from pydantic.alias_generators import to_camel

from bics_agent.adapters import ResourceAdapter
from bics_agent.models.connect import (
    ModelConnection,
    ModelConnectionLine,
    ModelConnectionList,
    ModelInterconnect,
    ModelInterconnectList,
    ModelReferenceData,
)
from bics_agent.models.model_api_resource import ModelApiResource
from bics_agent.models.my_numbers import ModelNumber, ModelNumberList
from bics_agent.models.sms import (
    ModelDeliveryInfo,
    ModelDeliveryInfoList,
    ModelInboundMessage,
    ModelInboundMessageList,
)
from bics_agent.resources import CONNECT_RESOURCE, MY_NUMBERS_RESOURCE, SMS_RESOURCE
from tests.helpers import SpyTransport

RESPONSE_MODELS: list[type[ModelApiResource]] = [
    ModelConnection,
    ModelConnectionLine,
    ModelConnectionList,
    ModelInterconnect,
    ModelInterconnectList,
    ModelReferenceData,
    ModelNumber,
    ModelNumberList,
    ModelDeliveryInfo,
    ModelDeliveryInfoList,
    ModelInboundMessage,
    ModelInboundMessageList,
]


class TestModelConnection:
    """Test suite for the Connect connection model."""

    def test_minimal_body_round_trips_declared_values(self) -> None:
        connection = ModelConnection.model_validate_json('{"id":"42","status":"ACTIVE"}')

        rendered = json.loads(connection.to_pretty_json())

        assert rendered["id"] == "42"
        assert rendered["status"] == "ACTIVE"
        assert rendered["serviceType"] == ""
        assert rendered["lines"] == []

    def test_output_is_indented(self) -> None:
        rendered = ModelConnection.model_validate_json('{"id":"42"}').to_pretty_json()

        assert '\n  "id": "42"' in rendered

    def test_unknown_fields_are_preserved(self) -> None:
        body = '{"id":"42","futureField":{"nested":[1,2,null]}}'

        rendered = json.loads(ModelConnection.model_validate_json(body).to_pretty_json())

        assert rendered["futureField"] == {"nested": [1, 2, None]}

    def test_additional_attributes_keep_order_and_variants(self) -> None:
        """Test attribute bags hold any JSON variant in upstream order."""
        body = json.dumps(
            {
                "id": "7",
                "additionalAttributes": {"vlan": 100, "tagged": True, "note": None, "tags": ["a"]},
            }
        )

        connection = ModelConnection.model_validate_json(body)

        assert list(connection.additional_attributes) == ["vlan", "tagged", "note", "tags"]
        assert connection.additional_attributes["tags"] == ["a"]

    def test_lines_are_typed(self) -> None:
        body = '{"id":"1","lines":[{"lineType":"PRIMARY","vlan":100}]}'

        connection = ModelConnection.model_validate_json(body)

        assert connection.lines[0].line_type == "PRIMARY"
        assert connection.lines[0].vlan == 100

    def test_wrong_type_raises(self) -> None:
        with pytest.raises(ValidationError):
            ModelConnection.model_validate_json('{"id":"1","orderId":"not-a-number"}')


class TestCollectionModels:
    """Test suite for wrapped and paged collections."""

    def test_connection_list_surfaces_total_count(self) -> None:
        body = '{"connections":[{"id":"1"},{"id":"2"}],"totalCount":2}'

        rendered = json.loads(ModelConnectionList.model_validate_json(body).to_pretty_json())

        assert rendered["totalCount"] == 2
        assert [c["id"] for c in rendered["connections"]] == ["1", "2"]

    def test_number_list_surfaces_paging_verbatim(self) -> None:
        body = '{"numbers":[{"phoneNumber":"+3212345678"}],"totalCount":120,"pageSize":50,"currentPage":2}'

        rendered = json.loads(ModelNumberList.model_validate_json(body).to_pretty_json())

        assert rendered["totalCount"] == 120
        assert rendered["pageSize"] == 50
        assert rendered["currentPage"] == 2
        assert rendered["numbers"][0]["phoneNumber"] == "+3212345678"

    def test_delivery_info_list_uses_upstream_key(self) -> None:
        body = '{"deliveryInfo":[{"address":"tel:+32","deliveryStatus":"DeliveredToTerminal"}]}'

        model = ModelDeliveryInfoList.model_validate_json(body)
        rendered = json.loads(model.to_pretty_json())

        assert model.delivery_infos[0].delivery_status == "DeliveredToTerminal"
        assert rendered["deliveryInfo"][0]["deliveryStatus"] == "DeliveredToTerminal"

    def test_inbound_message_list_keeps_batch_fields(self) -> None:
        body = json.dumps(
            {
                "inboundSMSMessage": [{"message": "hello"}],
                "numberOfMessagesInThisBatch": 1,
                "resourceURL": "https://api.example.test/inbound/1",
                "totalNumberOfPendingMessages": 0,
            }
        )

        rendered = json.loads(ModelInboundMessageList.model_validate_json(body).to_pretty_json())

        assert rendered["numberOfMessagesInThisBatch"] == 1
        assert rendered["resourceURL"] == "https://api.example.test/inbound/1"
        assert rendered["inboundSMSMessage"][0]["message"] == "hello"

    def test_reference_data_keeps_catalogue(self) -> None:
        body = '{"data":{"serviceTypes":["CLOUD"],"regions":{"eu":"Europe"}}}'

        model = ModelReferenceData.model_validate_json(body)

        assert model.data["regions"] == {"eu": "Europe"}


class TestNullValues:
    """Test suite for upstream ``null`` values in typed responses."""

    @pytest.mark.parametrize("model", RESPONSE_MODELS, ids=lambda m: m.__name__)
    def test_every_declared_field_accepts_null(self, model: type[ModelApiResource]) -> None:
        body = {
            field.alias or to_camel(name): None for name, field in model.model_fields.items()
        }

        rendered = json.loads(model.model_validate(body).to_pretty_json())

        assert rendered == body

    def test_null_renders_as_null_next_to_values(self) -> None:
        body = '{"id":"42","orderId":null,"lines":[{"vlan":null,"interconnect":null}]}'

        rendered = json.loads(ModelConnection.model_validate_json(body).to_pretty_json())

        assert rendered["id"] == "42"
        assert rendered["orderId"] is None
        assert rendered["lines"][0]["vlan"] is None
        assert rendered["lines"][0]["interconnect"] is None

    @pytest.mark.asyncio
    @pytest.mark.parametrize(
        ("resource", "operation", "arguments", "body", "key"),
        [
            (
                CONNECT_RESOURCE,
                "get_connection",
                ("42",),
                '{"id":"42","status":"ACTIVE","companyName":null}',
                "companyName",
            ),
            (
                CONNECT_RESOURCE,
                "list_connections",
                (),
                '{"connections":null,"totalCount":0}',
                "connections",
            ),
            (
                MY_NUMBERS_RESOURCE,
                "get_number",
                ("+3212345678",),
                '{"phoneNumber":"+3212345678","capabilities":null}',
                "capabilities",
            ),
            (
                SMS_RESOURCE,
                "get_inbound_messages",
                ("+3212345678",),
                '{"inboundSMSMessage":[],"resourceURL":null}',
                "resourceURL",
            ),
        ],
    )
    async def test_typed_operation_passes_null_through(
        self,
        base_url: str,
        resource: object,
        operation: str,
        arguments: tuple[str, ...],
        body: str,
        key: str,
    ) -> None:
        transport = SpyTransport(200, body)
        adapter = ResourceAdapter(resource, base_url, transport)  # type: ignore[arg-type]

        result = await adapter.execute(operation, *arguments)

        assert not result.startswith("Error:"), result
        assert json.loads(result)[key] is None
