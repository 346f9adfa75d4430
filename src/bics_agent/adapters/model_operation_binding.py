# SPDX-License-Identifier: MIT
# Copyright (c) 2025 OmniNode Team
"""Operation Binding Model.

Static description of how one operation maps onto its backend endpoint:
the descriptor advertised for discovery, the HTTP method, the path
template, query and body mapping, and how a successful response is turned
into the operation's return string.

Example:
    >>> ModelOperationBinding(
    ...     descriptor=ModelOperationDescriptor(
    ...         name="delete_connection",
    ...         description="Disconnect and remove a connection from service",
    ...         parameters=(
    ...             ModelParameterDescriptor(
    ...                 name="connection_id",
    ...                 description="The unique identifier of the connection",
    ...             ),
    ...         ),
    ...         result_description="Confirmation message",
    ...     ),
    ...     method=EnumHttpMethod.DELETE,
    ...     path="/connections/{connection_id}",
    ...     output_contract=EnumOutputContract.CONFIRMATION,
    ...     confirmation_template=(
    ...         "Connection {connection_id} has been successfully scheduled for disconnection"
    ...     ),
    ... )
"""

from __future__ import annotations

from collections.abc import Mapping
from string import Formatter
from urllib.parse import quote

from pydantic import BaseModel, ConfigDict, Field, model_validator

from bics_agent.enums import EnumHttpMethod, EnumOutputContract
from bics_agent.models.model_api_resource import ModelApiResource
from bics_agent.models.model_operation_descriptor import ModelOperationDescriptor
from bics_agent.models.model_transport import ModelTransportRequest

JSON_CONTENT_TYPE: str = "application/json"


def path_placeholders(path: str) -> tuple[str, ...]:
    """Return the ``{name}`` placeholders of a path template in order."""
    return tuple(
        field_name
        for _, field_name, _, _ in Formatter().parse(path)
        if field_name is not None
    )


class ModelOperationBinding(BaseModel):
    """Endpoint binding for a single operation.

    Attributes:
        descriptor: Self-description advertised for discovery
        method: Fixed HTTP method
        path: Path template relative to the resource base URL
        query: Ordered ``(parameter name, query key)`` pairs
        body_parameter: Parameter whose JSON text is sent verbatim as the body
        output_contract: How a 2xx response becomes the return string
        response_model: Model validating the body for typed output
        confirmation_template: ``str.format`` template for confirmation output
    """

    model_config = ConfigDict(
        frozen=True,
        extra="forbid",
    )

    descriptor: ModelOperationDescriptor
    method: EnumHttpMethod
    path: str = Field(..., pattern=r"^/")
    query: tuple[tuple[str, str], ...] = Field(default=())
    body_parameter: str | None = Field(default=None)
    output_contract: EnumOutputContract = Field(default=EnumOutputContract.OPAQUE)
    response_model: type[ModelApiResource] | None = Field(default=None)
    confirmation_template: str | None = Field(default=None)

    @model_validator(mode="after")
    def _check_binding(self) -> ModelOperationBinding:
        declared = set(self.descriptor.parameter_names)
        name = self.descriptor.name

        unknown = [p for p in path_placeholders(self.path) if p not in declared]
        if unknown:
            raise ValueError(f"Path of '{name}' references undeclared parameters: {unknown}")

        unknown = [p for p, _ in self.query if p not in declared]
        if unknown:
            raise ValueError(f"Query of '{name}' references undeclared parameters: {unknown}")

        if self.body_parameter is not None:
            parameter = self.descriptor.get_parameter(self.body_parameter)
            if parameter is None:
                raise ValueError(
                    f"Body of '{name}' references undeclared parameter '{self.body_parameter}'"
                )
            if not parameter.json_payload:
                raise ValueError(f"Body parameter '{self.body_parameter}' must be a JSON payload")
            if not self.method.accepts_body:
                raise ValueError(f"'{name}' sends a body with {self.method.value}")

        if self.output_contract is EnumOutputContract.TYPED and self.response_model is None:
            raise ValueError(f"Typed operation '{name}' requires a response model")
        if (
            self.output_contract is EnumOutputContract.CONFIRMATION
            and not self.confirmation_template
        ):
            raise ValueError(f"Confirmation operation '{name}' requires a template")
        return self

    @property
    def name(self) -> str:
        return self.descriptor.name

    def build_request(
        self, base_url: str, arguments: Mapping[str, object]
    ) -> ModelTransportRequest:
        """Build the transport request from validated arguments.

        Path values are percent-encoded; query parameters whose value is
        None are omitted; the body parameter's JSON text is passed through
        without being re-encoded.
        """
        path = self.path.format(
            **{
                placeholder: quote(str(arguments[placeholder]), safe="+")
                for placeholder in path_placeholders(self.path)
            }
        )
        params = tuple(
            (key, str(arguments[parameter]))
            for parameter, key in self.query
            if arguments.get(parameter) is not None
        )

        content: str | None = None
        headers: dict[str, str] = {}
        if self.body_parameter is not None:
            content = str(arguments[self.body_parameter])
            headers["Content-Type"] = JSON_CONTENT_TYPE

        return ModelTransportRequest(
            method=self.method,
            url=f"{base_url}{path}",
            params=params,
            content=content,
            headers=headers,
        )

    def describe_context(self, arguments: Mapping[str, object]) -> str | None:
        """Render the identifying path arguments for diagnostics."""
        parts = [
            f"{placeholder}={arguments[placeholder]}"
            for placeholder in path_placeholders(self.path)
            if placeholder in arguments
        ]
        return ", ".join(parts) or None

    def render_success(self, body: str, arguments: Mapping[str, object]) -> str:
        """Turn a 2xx body into the operation result.

        Raises:
            pydantic.ValidationError: If a typed body does not match its model.
        """
        if self.output_contract is EnumOutputContract.CONFIRMATION:
            assert self.confirmation_template is not None
            return self.confirmation_template.format(**arguments)
        if self.output_contract is EnumOutputContract.TYPED:
            assert self.response_model is not None
            return self.response_model.model_validate_json(body).to_pretty_json()
        return body


__all__ = ["JSON_CONTENT_TYPE", "ModelOperationBinding", "path_placeholders"]
