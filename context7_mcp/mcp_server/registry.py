"""Operation registry: named tools, their parameter schemas and handlers."""

import logging
from collections.abc import Awaitable, Callable
from dataclasses import dataclass
from typing import Any

import mcp.types as mcp_types
from pydantic import BaseModel
from pydantic import ValidationError as PydanticValidationError

from context7_mcp.mcp_server.errors import (
    DuplicateOperationError,
    RegistryFrozenError,
    UnknownOperationError,
    ValidationError,
)

logger = logging.getLogger(__name__)

Handler = Callable[[Any], Awaitable[mcp_types.CallToolResult]]


@dataclass(frozen=True)
class ParameterSpec:
    """Declared shape of a single operation parameter."""

    name: str
    type: str
    required: bool
    description: str = ""


@dataclass(frozen=True)
class OperationDescriptor:
    """A named operation and the pydantic model declaring its parameters."""

    name: str
    description: str
    params_model: type[BaseModel]

    def input_schema(self) -> dict[str, Any]:
        """JSON schema advertised through `tools/list`, keyed by wire names."""
        return self.params_model.model_json_schema(by_alias=True)

    @property
    def parameters(self) -> dict[str, ParameterSpec]:
        """Parameter specs keyed by wire name."""
        schema = self.input_schema()
        required = set(schema.get("required", []))
        return {
            name: ParameterSpec(
                name=name,
                type=_schema_type(prop),
                required=name in required,
                description=prop.get("description", ""),
            )
            for name, prop in schema.get("properties", {}).items()
        }

    def to_tool(self) -> mcp_types.Tool:
        return mcp_types.Tool(
            name=self.name,
            description=self.description,
            input_schema=self.input_schema(),
        )


def _schema_type(prop: dict[str, Any]) -> str:
    """Type name of a schema property; Optional fields report their inner type."""
    if "type" in prop:
        return prop["type"]
    for option in prop.get("anyOf", []):
        if option.get("type") not in (None, "null"):
            return option["type"]
    return "object"


class OperationRegistry:
    """In-memory registry of MCP operations.

    The registry is populated at startup and frozen when it is connected to
    the transport; after that it is only read.
    """

    def __init__(self) -> None:
        self._operations: dict[str, tuple[OperationDescriptor, Handler]] = {}
        self._frozen = False

    def register(self, descriptor: OperationDescriptor, handler: Handler) -> None:
        """Register an operation handler under its descriptor's name."""
        if self._frozen:
            raise RegistryFrozenError(descriptor.name)
        if descriptor.name in self._operations:
            raise DuplicateOperationError(descriptor.name)
        self._operations[descriptor.name] = (descriptor, handler)
        logger.info(
            f"Registered operation: {descriptor.name} "
            f"(params: {', '.join(descriptor.parameters) or 'none'})"
        )

    def resolve(self, name: str) -> Handler:
        """Return the handler for an operation or raise UnknownOperationError."""
        return self._lookup(name)[1]

    def describe(self, name: str) -> OperationDescriptor:
        """Return the descriptor for an operation or raise UnknownOperationError."""
        return self._lookup(name)[0]

    def validate(self, name: str, raw_params: dict[str, Any] | None) -> BaseModel:
        """Check raw arguments against the operation's schema.

        Args:
            name: Operation name
            raw_params: Arguments as decoded from the request

        Returns:
            Instance of the operation's parameter model

        Raises:
            UnknownOperationError: If the operation is not registered
            ValidationError: On the first missing, mistyped or unknown field
        """
        descriptor = self.describe(name)
        if raw_params is None:
            raw_params = {}
        if not isinstance(raw_params, dict):
            raise ValidationError("arguments", "arguments must be an object")

        try:
            return descriptor.params_model.model_validate(raw_params)
        except PydanticValidationError as e:
            first = e.errors()[0]
            field = ".".join(str(part) for part in first["loc"]) or "arguments"
            raise ValidationError(field, first["msg"]) from e

    def descriptors(self) -> list[OperationDescriptor]:
        """Return all descriptors sorted by name."""
        return [self._operations[name][0] for name in sorted(self._operations)]

    def freeze(self) -> None:
        """Make the registry read-only."""
        self._frozen = True

    @property
    def frozen(self) -> bool:
        return self._frozen

    def _lookup(self, name: str) -> tuple[OperationDescriptor, Handler]:
        try:
            return self._operations[name]
        except KeyError:
            raise UnknownOperationError(name) from None

    def __contains__(self, name: object) -> bool:
        return name in self._operations

    def __len__(self) -> int:
        return len(self._operations)
