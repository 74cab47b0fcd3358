# Tool domain models
# Input contract base and MCP response envelope helpers

import json
from typing import Any

from mcp.types import CallToolResult, TextContent, Tool
from pydantic import BaseModel, ConfigDict


class ToolArguments(BaseModel):
    """Base class for every operation's input contract.

    Strict mode keeps JSON types honest: "10" is not a number and 1 is not a
    boolean. Keys the contract does not declare are ignored.
    """

    model_config = ConfigDict(strict=True, extra="ignore")

    @classmethod
    def input_schema(cls) -> dict[str, Any]:
        """JSON Schema advertised to the client as the tool's inputSchema."""
        schema = cls.model_json_schema()
        schema.pop("title", None)
        schema.setdefault("type", "object")
        schema.setdefault("properties", {})
        return schema


def build_descriptor(name: str, description: str, contract: type[ToolArguments]) -> Tool:
    """Render one operation as an MCP tool descriptor."""
    return Tool(name=name, description=description, inputSchema=contract.input_schema())


def serialize_result(result: Any) -> str:
    """Pretty-print a collaborator result as JSON text."""
    if isinstance(result, BaseModel):
        result = result.model_dump(mode="json")
    return json.dumps(result, indent=2, default=str)


def text_result(result: Any) -> CallToolResult:
    """Successful envelope holding a single JSON text block."""
    return CallToolResult(
        content=[TextContent(type="text", text=serialize_result(result))],
        isError=False,
    )


def error_result(message: str) -> CallToolResult:
    """Error envelope with the failure message."""
    return CallToolResult(
        content=[TextContent(type="text", text=f"Error: {message}")],
        isError=True,
    )
