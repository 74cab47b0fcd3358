"""Routes tool calls to the domain that owns them"""

import logging
from typing import Any, Dict, List, Optional

from mcp.types import CallToolResult, Tool

from ..models.tool import error_result
from .dispatcher import DomainDispatcher
from .errors import ApillonMCPError, DuplicateToolError, UnknownToolError

logger = logging.getLogger(__name__)


class ToolRouter:
    """Merges domain tool sets and is the single failure boundary for calls"""

    def __init__(self, domains: List[DomainDispatcher]):
        self.domains = list(domains)

        owners: Dict[str, str] = {}
        for domain in self.domains:
            for name in domain.tool_names:
                if name in owners:
                    raise DuplicateToolError(name, [owners[name], domain.domain])
                owners[name] = domain.domain

    def list_tools(self) -> List[Tool]:
        """All descriptors, in domain registration order then declaration order"""
        tools: List[Tool] = []
        for domain in self.domains:
            tools.extend(domain.descriptors)
        return tools

    def find_domain(self, name: str) -> Optional[DomainDispatcher]:
        for domain in self.domains:
            if domain.handles(name):
                return domain
        return None

    async def call_tool(self, name: str, arguments: Optional[Dict[str, Any]] = None) -> CallToolResult:
        """Execute a tool and always answer with an envelope, never an exception"""
        try:
            domain = self.find_domain(name)
            if domain is None:
                raise UnknownToolError(name)
            return await domain.dispatch(name, arguments)
        except ApillonMCPError as e:
            if e.error_code == "TOOL_EXEC_ERROR":
                logger.error(f"Tool {name} failed: {e.message}")
            else:
                logger.info(f"Rejected call to {name}: {e.message}")
            return error_result(e.message)
        except Exception as e:
            logger.exception(f"Unexpected error while calling {name}")
            return error_result(str(e) or type(e).__name__)
