"""Error types raised while validating and executing Apillon tools."""

from typing import Any, Dict, List, Optional


class ApillonMCPError(Exception):
    """Base exception class for tool call failures."""
    def __init__(self, message: str, error_code: str = "MCP_ERROR", details: Optional[Dict[str, Any]] = None):
        self.message = message
        self.error_code = error_code
        self.details = details or {}
        super().__init__(self.message)


class FieldViolation:
    """A single field that failed its input contract."""

    MISSING = "missing"
    WRONG_TYPE = "wrong_type"
    INVALID_ENUM = "invalid_enum"
    INVALID_VALUE = "invalid_value"

    def __init__(self, field: str, kind: str, message: str):
        self.field = field
        self.kind = kind
        self.message = message

    def to_dict(self) -> Dict[str, str]:
        return {"field": self.field, "kind": self.kind, "message": self.message}

    def __repr__(self) -> str:
        return f"FieldViolation({self.field!r}, {self.kind!r}, {self.message!r})"


class ArgumentValidationError(ApillonMCPError):
    """Raw arguments do not satisfy an operation's input contract."""
    def __init__(self, tool_name: str, violations: List[FieldViolation]):
        self.tool_name = tool_name
        self.violations = violations
        problems = "; ".join(f"{v.field}: {v.message}" for v in violations)
        super().__init__(
            f"Invalid arguments for {tool_name}: {problems}",
            "VALIDATION_ERROR",
            {"tool": tool_name, "violations": [v.to_dict() for v in violations]},
        )


class UnknownToolError(ApillonMCPError):
    """No domain registers the requested tool."""
    def __init__(self, tool_name: str):
        self.tool_name = tool_name
        super().__init__(f"Unknown tool: {tool_name}", "UNKNOWN_TOOL", {"tool": tool_name})


class DuplicateToolError(ApillonMCPError):
    """Two domains declare the same tool name."""
    def __init__(self, tool_name: str, domains: List[str]):
        super().__init__(
            f"Tool {tool_name} is registered by more than one domain: {', '.join(domains)}",
            "DUPLICATE_TOOL",
            {"tool": tool_name, "domains": domains},
        )


class ToolExecutionError(ApillonMCPError):
    """The collaborator call behind a tool failed."""
    def __init__(self, message: str, details: Optional[Dict[str, Any]] = None):
        super().__init__(message, "TOOL_EXEC_ERROR", details)


class ApillonAPIError(ApillonMCPError):
    """The Apillon platform rejected a request or could not be reached."""
    def __init__(self, message: str, status_code: Optional[int] = None, details: Optional[Dict[str, Any]] = None):
        self.status_code = status_code
        super().__init__(message, "API_ERROR", details)
