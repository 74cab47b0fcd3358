"""
MCP server for the Apillon platform

Wires the tool router into a low-level MCP server and runs it over process
stdio. stdout carries the protocol, so all logging goes to stderr.
"""

import logging
import sys

import mcp.types as types
from mcp.server import Server
from mcp.server.stdio import stdio_server

from . import __version__
from .config import Settings
from .domains import build_domains
from .services.apillon_client import ApillonClient
from .services.router import ToolRouter

SERVER_NAME = "apillon-mcp-server"

_log_formatter = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
logger = logging.getLogger(__name__)


def configure_logging(level: str = "INFO") -> None:
    logging.basicConfig(
        level=getattr(logging, level.upper(), logging.INFO),
        format=_log_formatter,
        stream=sys.stderr,
    )


def create_server(router: ToolRouter) -> Server:
    """Build the MCP server answering tools/list and tools/call from the router."""
    server = Server(SERVER_NAME, version=__version__)

    @server.list_tools()
    async def list_tools() -> list[types.Tool]:
        return router.list_tools()

    # Registered directly so the router, not the SDK, validates arguments and
    # shapes every error envelope.
    async def call_tool(req: types.CallToolRequest) -> types.ServerResult:
        result = await router.call_tool(req.params.name, req.params.arguments)
        return types.ServerResult(result)

    server.request_handlers[types.CallToolRequest] = call_tool
    return server


async def serve(settings: Settings) -> None:
    """Run the server on stdio until the client disconnects."""
    if not settings.has_credentials:
        logger.warning(
            "APILLON_API_KEY or APILLON_API_SECRET is not set; Apillon will reject tool calls"
        )

    async with ApillonClient(settings) as client:
        router = ToolRouter(build_domains(client))
        server = create_server(router)
        logger.info(f"Registered {len(router.list_tools())} tools")

        async with stdio_server() as (read_stream, write_stream):
            logger.info(f"Apillon MCP Server v{__version__} running on stdio")
            await server.run(read_stream, write_stream, server.create_initialization_options())
