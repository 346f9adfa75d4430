# SPDX-License-Identifier: MIT
# Copyright (c) 2025 OmniNode Team
"""Connect API - cloud connectivity services, connections and interconnects."""

from __future__ import annotations

from bics_agent.adapters import ModelOperationBinding, ModelResourceDefinition
from bics_agent.enums import EnumHttpMethod, EnumOutputContract
from bics_agent.models import ModelOperationDescriptor, ModelParameterDescriptor
from bics_agent.models.connect import (
    ModelConnection,
    ModelConnectionList,
    ModelInterconnectList,
    ModelReferenceData,
)

_CONNECTION_ID = ModelParameterDescriptor(
    name="connection_id",
    description="The unique identifier of the connection",
)

CONNECT_RESOURCE = ModelResourceDefinition(
    name="connect",
    settings_key="connect_api",
    description=(
        "BICS Connect API for managing cloud connectivity services, "
        "connections, and interconnects"
    ),
    operations=(
        ModelOperationBinding(
            descriptor=ModelOperationDescriptor(
                name="get_connection",
                description=(
                    "Get detailed information about a specific connection including "
                    "configuration, status, and line details"
                ),
                parameters=(_CONNECTION_ID,),
                result_description="Connection details as indented JSON",
            ),
            method=EnumHttpMethod.GET,
            path="/connections/{connection_id}",
            output_contract=EnumOutputContract.TYPED,
            response_model=ModelConnection,
        ),
        ModelOperationBinding(
            descriptor=ModelOperationDescriptor(
                name="list_connections",
                description="Get a list of all connections for the current customer",
                result_description="Connection list with total count as indented JSON",
            ),
            method=EnumHttpMethod.GET,
            path="/connections",
            output_contract=EnumOutputContract.TYPED,
            response_model=ModelConnectionList,
        ),
        ModelOperationBinding(
            descriptor=ModelOperationDescriptor(
                name="create_connection",
                description=(
                    "Create a new connection with specified service type, provider, "
                    "region, bandwidth, and other configuration details"
                ),
                parameters=(
                    ModelParameterDescriptor(
                        name="connection_request_json",
                        description=(
                            "JSON string containing connection request details including "
                            "serviceType, cloudServiceProvider, cloudServiceRegion, "
                            "bandwidth, contractTerm, protectionScheme, companyName, "
                            "customerComment, customerPurchaseId, contactEmailAddress, "
                            "and lines array"
                        ),
                        json_payload=True,
                    ),
                ),
                result_description="Created connection as returned by the API",
            ),
            method=EnumHttpMethod.POST,
            path="/connections",
            body_parameter="connection_request_json",
        ),
        ModelOperationBinding(
            descriptor=ModelOperationDescriptor(
                name="modify_connection",
                description=(
                    "Modify an existing connection's configuration such as bandwidth, "
                    "contract terms, or other attributes"
                ),
                parameters=(
                    ModelParameterDescriptor(
                        name="connection_id",
                        description="The unique identifier of the connection to modify",
                    ),
                    ModelParameterDescriptor(
                        name="modification_request_json",
                        description="JSON string containing modification request details",
                        json_payload=True,
                    ),
                ),
                result_description="Modification result as returned by the API",
            ),
            method=EnumHttpMethod.POST,
            path="/connections/{connection_id}/modify",
            body_parameter="modification_request_json",
        ),
        ModelOperationBinding(
            descriptor=ModelOperationDescriptor(
                name="delete_connection",
                description="Disconnect and remove a connection from service",
                parameters=(
                    ModelParameterDescriptor(
                        name="connection_id",
                        description="The unique identifier of the connection to disconnect",
                    ),
                ),
                result_description="Confirmation message",
            ),
            method=EnumHttpMethod.DELETE,
            path="/connections/{connection_id}",
            output_contract=EnumOutputContract.CONFIRMATION,
            confirmation_template=(
                "Connection {connection_id} has been successfully scheduled for disconnection"
            ),
        ),
        ModelOperationBinding(
            descriptor=ModelOperationDescriptor(
                name="list_interconnects",
                description=(
                    "Get a list of available interconnects showing locations, "
                    "datacenters, capacities, and current status"
                ),
                result_description="Interconnect list with total count as indented JSON",
            ),
            method=EnumHttpMethod.GET,
            path="/interconnects",
            output_contract=EnumOutputContract.TYPED,
            response_model=ModelInterconnectList,
        ),
        ModelOperationBinding(
            descriptor=ModelOperationDescriptor(
                name="get_reference_data",
                description=(
                    "Get reference data including available service types, cloud "
                    "providers, regions, bandwidth options, contract terms, and "
                    "protection schemes"
                ),
                result_description="Reference data as indented JSON",
            ),
            method=EnumHttpMethod.GET,
            path="/refdata",
            output_contract=EnumOutputContract.TYPED,
            response_model=ModelReferenceData,
        ),
    ),
)

__all__ = ["CONNECT_RESOURCE"]
