# SPDX-License-Identifier: MIT
# Copyright (c) 2025 OmniNode Team
"""Resource Adapter - generic executor for one backend resource.

Every operation of every resource runs the same five-step protocol:

    1. Validate: bind arguments to descriptors and check them. Any failure
       returns a diagnosis without touching the transport.
    2. Build: method, ``{base_url}{path}``, query parameters and, for writes,
       the caller's JSON text with ``Content-Type: application/json``.
    3. Send: await the transport exactly once. Transport failures and
       cancellation become transport faults. No retry.
    4. Check: any status outside 200-299 becomes an HTTP fault.
    5. Render: opaque body, re-serialized typed model or confirmation text.

An operation always returns a string. Failures come back as diagnosis
strings produced by the error classifier; nothing escapes as an exception.

Example:
    >>> adapter = ResourceAdapter(CONNECT_RESOURCE, "https://api.example.com", transport)
    >>> await adapter.execute("get_connection", "42")
    '{\\n  "id": "42",\\n  ...'
"""

from __future__ import annotations

import asyncio
import logging
from collections.abc import Awaitable, Callable
from typing import Optional
from uuid import UUID, uuid4

from pydantic import ValidationError

from bics_agent.adapters.model_operation_binding import ModelOperationBinding
from bics_agent.adapters.model_resource_definition import ModelResourceDefinition
from bics_agent.diagnostics.error_classifier import classify_fault
from bics_agent.enums import EnumParameterType
from bics_agent.errors import (
    AdapterConfigurationError,
    ModelAdapterErrorContext,
    RegistryError,
    TransportError,
    TransportTimeoutError,
)
from bics_agent.models.model_fault import ModelFault
from bics_agent.models.model_operation_descriptor import ModelOperationDescriptor
from bics_agent.models.model_result import Err, Ok, Result
from bics_agent.protocols import ProtocolTransport
from bics_agent.utils.util_error_sanitization import (
    sanitize_error_message,
    sanitize_error_string,
)
from bics_agent.validation import coerce_integer, require_non_empty, require_valid_json

logger = logging.getLogger(__name__)

OperationCallable = Callable[..., Awaitable[str]]


class ResourceAdapter:
    """Exposes one backend resource as a set of callable operations.

    Stateless between calls; safe to share across concurrent tasks as long
    as the transport is.

    Args:
        resource: Static binding table of the resource
        base_url: Resource base URL (a trailing slash is dropped)
        transport: Transport used for every request
        sink: Diagnostics logger (defaults to this module's logger)

    Raises:
        AdapterConfigurationError: If ``base_url`` is empty or whitespace.
    """

    def __init__(
        self,
        resource: ModelResourceDefinition,
        base_url: Optional[str],
        transport: ProtocolTransport,
        sink: Optional[logging.Logger] = None,
    ) -> None:
        if base_url is None or not base_url.strip():
            raise AdapterConfigurationError(
                f"{resource.name} API base URL is not configured",
                context=ModelAdapterErrorContext(
                    resource=resource.name,
                    operation="initialize",
                    target_name=resource.settings_key,
                ),
                settings_key=resource.settings_key,
            )
        self._resource = resource
        self._base_url = base_url.strip().rstrip("/")
        self._transport = transport
        self._logger = sink or logger

    @property
    def name(self) -> str:
        return self._resource.name

    @property
    def base_url(self) -> str:
        return self._base_url

    @property
    def resource(self) -> ModelResourceDefinition:
        return self._resource

    def describe(self) -> tuple[ModelOperationDescriptor, ...]:
        """Return the descriptors of every operation, in declaration order."""
        return self._resource.descriptors

    def operation(self, operation_name: str) -> OperationCallable:
        """Return an async callable bound to ``operation_name``.

        Raises:
            RegistryError: If the resource has no such operation.
        """
        binding = self._require_binding(operation_name)

        async def invoke(*args: object, **kwargs: object) -> str:
            return await self.execute(operation_name, *args, **kwargs)

        invoke.__name__ = operation_name
        invoke.__qualname__ = f"{type(self).__name__}.{self.name}.{operation_name}"
        invoke.__doc__ = binding.descriptor.description
        return invoke

    async def execute(self, operation_name: str, *args: object, **kwargs: object) -> str:
        """Run one operation through the five-step protocol.

        Raises:
            RegistryError: If the resource has no such operation. This is a
                wiring error, not an operation failure.
        """
        binding = self._require_binding(operation_name)
        correlation_id = uuid4()

        bound = self._bind_arguments(binding, args, kwargs)
        if isinstance(bound, Err):
            return self._classify(binding, bound.fault, None, correlation_id)
        arguments = bound.value
        context = binding.describe_context(arguments)

        try:
            request = binding.build_request(self._base_url, arguments)
            self._logger.info(
                "Executing %s.%s",
                self.name,
                operation_name,
                extra={
                    "resource": self.name,
                    "operation": operation_name,
                    "method": request.method.value,
                    "correlation_id": str(correlation_id),
                },
            )
            try:
                response = await self._transport.request(request)
            except TransportTimeoutError as e:
                fault = ModelFault.transport(sanitize_error_string(e.message), timed_out=True)
                return self._classify(binding, fault, context, correlation_id)
            except TransportError as e:
                fault = ModelFault.transport(sanitize_error_string(e.message))
                return self._classify(binding, fault, context, correlation_id)
            except OSError as e:
                fault = ModelFault.transport(sanitize_error_message(e))
                return self._classify(binding, fault, context, correlation_id)
            except asyncio.CancelledError:
                fault = ModelFault.transport("the request was cancelled", timed_out=True)
                return self._classify(binding, fault, context, correlation_id)

            if not response.is_success:
                fault = ModelFault.http(response.status_code, response.body)
                return self._classify(binding, fault, context, correlation_id)

            try:
                return binding.render_success(response.body, arguments)
            except (ValidationError, ValueError) as e:
                fault = ModelFault.unexpected(
                    f"Failed to parse {operation_name} response: {sanitize_error_message(e)}"
                )
                return self._classify(binding, fault, context, correlation_id)

        except Exception as e:
            fault = ModelFault.unexpected(sanitize_error_message(e))
            return self._classify(binding, fault, context, correlation_id)

    def _require_binding(self, operation_name: str) -> ModelOperationBinding:
        binding = self._resource.get_binding(operation_name)
        if binding is None:
            raise RegistryError(
                f"Resource '{self.name}' has no operation '{operation_name}'",
                context=ModelAdapterErrorContext(resource=self.name, operation=operation_name),
                registered_operations=list(self._resource.operation_names),
            )
        return binding

    def _bind_arguments(
        self,
        binding: ModelOperationBinding,
        args: tuple[object, ...],
        kwargs: dict[str, object],
    ) -> Result[dict[str, object]]:
        """Bind positional and keyword arguments to descriptors and validate them."""
        descriptor = binding.descriptor
        names = descriptor.parameter_names

        if len(args) > len(names):
            return Err(
                ModelFault.malformed_argument(
                    descriptor.name,
                    f"{descriptor.name} takes {len(names)} argument(s) but {len(args)} were given",
                )
            )
        supplied: dict[str, object] = dict(zip(names, args))
        for key, value in kwargs.items():
            if key not in names:
                return Err(
                    ModelFault.malformed_argument(
                        key, f"{descriptor.name} got an unexpected argument '{key}'"
                    )
                )
            if key in supplied:
                return Err(
                    ModelFault.malformed_argument(
                        key, f"{descriptor.name} got multiple values for argument '{key}'"
                    )
                )
            supplied[key] = value

        arguments: dict[str, object] = {}
        for parameter in descriptor.parameters:
            value = supplied.get(parameter.name)
            if not parameter.required and value is None:
                arguments[parameter.name] = parameter.default
                continue

            checked: Result[object]
            if parameter.value_type is EnumParameterType.INTEGER:
                checked = (
                    Err(ModelFault.missing_argument(parameter.name))
                    if value is None
                    else coerce_integer(parameter.name, value)
                )
            elif parameter.json_payload:
                checked = require_valid_json(parameter.name, value)
            else:
                checked = require_non_empty(parameter.name, value)

            if isinstance(checked, Err):
                return checked
            arguments[parameter.name] = checked.value
        return Ok(arguments)

    def _classify(
        self,
        binding: ModelOperationBinding,
        fault: ModelFault,
        context: Optional[str],
        correlation_id: UUID,
    ) -> str:
        return classify_fault(
            self.name,
            binding.name,
            fault,
            context=context,
            correlation_id=correlation_id,
            sink=self._logger,
        )


__all__ = ["OperationCallable", "ResourceAdapter"]
