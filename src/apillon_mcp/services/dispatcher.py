"""Generic per-domain tool dispatcher.

A domain is a declarative table of operations. Each entry pairs a tool name
and description with its input contract and the collaborator call that
executes it; the dispatcher applies the same validate, call, wrap sequence
to every entry.
"""

import logging
from dataclasses import dataclass
from typing import Any, Awaitable, Callable, Dict, List, Optional, Type

from mcp.types import CallToolResult, Tool

from ..models.tool import ToolArguments, build_descriptor, text_result
from .errors import DuplicateToolError, ToolExecutionError, UnknownToolError
from .validation import validate_arguments

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Operation:
    """One tool: its contract, the call behind it and how failures are named."""
    name: str
    description: str
    contract: Type[ToolArguments]
    call: Callable[[Any], Awaitable[Any]]
    failure_prefix: str
    present: Optional[Callable[[Any], Any]] = None


class DomainDispatcher:
    """Validates and executes the operations of one capability domain."""

    def __init__(self, domain: str, operations: List[Operation]):
        self.domain = domain
        self._operations: Dict[str, Operation] = {}
        for operation in operations:
            if operation.name in self._operations:
                raise DuplicateToolError(operation.name, [domain])
            self._operations[operation.name] = operation

        self._descriptors = tuple(
            build_descriptor(op.name, op.description, op.contract) for op in operations
        )

    @property
    def descriptors(self) -> List[Tool]:
        """Tool descriptors in declaration order."""
        return list(self._descriptors)

    @property
    def tool_names(self) -> List[str]:
        return list(self._operations)

    def handles(self, name: str) -> bool:
        return name in self._operations

    def validate(self, name: str, arguments: Optional[Dict[str, Any]]) -> ToolArguments:
        operation = self.get_operation(name)
        return validate_arguments(name, operation.contract, arguments)

    async def dispatch(self, name: str, arguments: Optional[Dict[str, Any]]) -> CallToolResult:
        """Validate arguments, run the collaborator call and wrap its result.

        Raises:
            UnknownToolError: if the name is not part of this domain
            ArgumentValidationError: if the arguments break the contract
            ToolExecutionError: if the collaborator call fails
        """
        operation = self.get_operation(name)
        args = self.validate(name, arguments)

        logger.debug(f"Dispatching {self.domain}.{name}")
        try:
            result = await operation.call(args)
            if operation.present is not None:
                result = operation.present(result)
        except Exception as e:
            cause = str(e) or type(e).__name__
            logger.error(f"{self.domain}.{name} failed: {cause}")
            raise ToolExecutionError(
                f"{operation.failure_prefix}: {cause}",
                {"tool": name, "domain": self.domain, "error_type": type(e).__name__},
            ) from e

        return text_result(result)

    def get_operation(self, name: str) -> Operation:
        operation = self._operations.get(name)
        if operation is None:
            raise UnknownToolError(name)
        return operation
