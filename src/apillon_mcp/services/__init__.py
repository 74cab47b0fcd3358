"""Services for the Apillon MCP server."""

from .apillon_client import ApillonClient, UploadItem
from .dispatcher import DomainDispatcher, Operation
from .errors import (
    ApillonAPIError,
    ApillonMCPError,
    ArgumentValidationError,
    DuplicateToolError,
    ToolExecutionError,
    UnknownToolError,
)
from .router import ToolRouter

__all__ = [
    "ApillonAPIError",
    "ApillonClient",
    "ApillonMCPError",
    "ArgumentValidationError",
    "DomainDispatcher",
    "DuplicateToolError",
    "Operation",
    "ToolExecutionError",
    "ToolRouter",
    "UnknownToolError",
    "UploadItem",
]
