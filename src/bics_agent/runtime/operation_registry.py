# SPDX-License-Identifier: MIT
# Copyright (c) 2025 OmniNode Team
"""Operation Registry - explicit lookup table of every callable operation.

Replaces reflection-based discovery: the registry is built once from the
adapters at startup and is immutable afterwards, so lookups need no lock.

Example Usage:
    ```python
    registry = OperationRegistry.from_adapters(adapters)

    for resource, operation in registry.list_operations():
        print(resource, operation)

    result = await registry.invoke("connect", "get_connection", "42")
    ```
"""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from dataclasses import dataclass
from types import MappingProxyType

from bics_agent.adapters import OperationCallable, ResourceAdapter
from bics_agent.errors import ModelAdapterErrorContext, RegistryError
from bics_agent.models import ModelOperationDescriptor


@dataclass(frozen=True)
class RegisteredOperation:
    """One registry entry: where the operation lives, what it is, how to call it."""

    resource: str
    descriptor: ModelOperationDescriptor
    invoke: OperationCallable

    @property
    def name(self) -> str:
        return self.descriptor.name

    async def __call__(self, *args: object, **kwargs: object) -> str:
        return await self.invoke(*args, **kwargs)


class OperationRegistry:
    """Immutable ``(resource, operation) -> RegisteredOperation`` table.

    Raises:
        RegistryError: At construction if two entries share a key.
    """

    def __init__(self, operations: Iterable[RegisteredOperation]) -> None:
        entries: dict[tuple[str, str], RegisteredOperation] = {}
        for entry in operations:
            key = (entry.resource, entry.name)
            if key in entries:
                raise RegistryError(
                    f"Operation {entry.resource}.{entry.name} is registered twice",
                    context=ModelAdapterErrorContext(
                        resource=entry.resource, operation=entry.name
                    ),
                )
            entries[key] = entry
        self._operations = MappingProxyType(entries)

    @classmethod
    def from_adapters(cls, adapters: Iterable[ResourceAdapter]) -> OperationRegistry:
        """Register every operation of every adapter."""
        return cls(
            RegisteredOperation(
                resource=adapter.name,
                descriptor=descriptor,
                invoke=adapter.operation(descriptor.name),
            )
            for adapter in adapters
            for descriptor in adapter.describe()
        )

    def get(self, resource: str, operation: str) -> RegisteredOperation:
        """Resolve one operation.

        Raises:
            RegistryError: If no such operation is registered.
        """
        entry = self._operations.get((resource, operation))
        if entry is None:
            raise RegistryError(
                f"No operation registered for {resource}.{operation}",
                context=ModelAdapterErrorContext(resource=resource, operation=operation),
                registered_operations=[f"{r}.{o}" for r, o in self.list_operations()],
            )
        return entry

    def is_registered(self, resource: str, operation: str) -> bool:
        return (resource, operation) in self._operations

    def list_resources(self) -> list[str]:
        return sorted({resource for resource, _ in self._operations})

    def list_operations(self, resource: str | None = None) -> list[tuple[str, str]]:
        """Return sorted ``(resource, operation)`` keys, optionally for one resource."""
        return sorted(
            key for key in self._operations if resource is None or key[0] == resource
        )

    def describe(self) -> dict[str, list[dict[str, object]]]:
        """Return JSON-ready descriptors grouped by resource."""
        described: dict[str, list[dict[str, object]]] = {}
        for resource, operation in self.list_operations():
            descriptor = self._operations[(resource, operation)].descriptor
            described.setdefault(resource, []).append(descriptor.model_dump(mode="json"))
        return described

    async def invoke(
        self, resource: str, operation: str, *args: object, **kwargs: object
    ) -> str:
        """Look up and call one operation.

        Raises:
            RegistryError: If no such operation is registered.
        """
        return await self.get(resource, operation)(*args, **kwargs)

    def __len__(self) -> int:
        return len(self._operations)

    def __contains__(self, key: object) -> bool:
        return key in self._operations

    def __iter__(self) -> Iterator[RegisteredOperation]:
        return (self._operations[key] for key in self.list_operations())


__all__: list[str] = ["OperationRegistry", "RegisteredOperation"]
