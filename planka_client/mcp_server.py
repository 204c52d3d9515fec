import asyncio
import json
import logging
import os
from typing import Any

from mcp.server import Server
from mcp.server.stdio import stdio_server
from mcp.types import TextContent, Tool

from .client import PlankaClient
from .logging_config import configure_logging
from .tool_executor import ToolExecutor
from .tool_schemas import TOOLS

logger = logging.getLogger(__name__)


class PlankaMCPServer:
    def __init__(
        self,
        base_url: str,
        token: str | None = None,
        email: str | None = None,
        password: str | None = None,
    ):
        self.client = PlankaClient(base_url=base_url, token=token, email=email, password=password)
        self.executor = ToolExecutor(self.client)
        self.server = Server("planka-mcp")
        self._setup_handlers()

    def _setup_handlers(self):
        @self.server.list_tools()
        async def list_tools() -> list[Tool]:
            return [Tool(name=t["name"], description=t["description"], inputSchema=t["input_schema"]) for t in TOOLS]

        @self.server.call_tool()
        async def call_tool(name: str, arguments: dict[str, Any]) -> list[TextContent]:
            return self.call(name, arguments)

    def call(self, name: str, arguments: dict[str, Any] | None) -> list[TextContent]:
        """Run a tool and wrap its result (or error) as MCP text content."""
        try:
            result = self.executor.execute(name, arguments or {})
            return [TextContent(type="text", text=json.dumps(result, indent=2))]
        except Exception as e:
            logger.error(f"Tool {name} failed: {e}")
            return [TextContent(type="text", text=f"Error: {str(e)}")]

    async def run(self):
        async with stdio_server() as (read_stream, write_stream):
            await self.server.run(read_stream, write_stream, self.server.create_initialization_options())


def main():
    import argparse

    parser = argparse.ArgumentParser(description="Planka MCP Server")
    parser.add_argument("--base-url", help="Planka base URL (or set PLANKA_BASE_URL env var)")
    parser.add_argument("--token", help="Access token (or set PLANKA_TOKEN env var)")
    parser.add_argument("--email", help="Login email or username (or set PLANKA_AGENT_EMAIL env var)")
    parser.add_argument("--password", help="Login password (or set PLANKA_AGENT_PASSWORD env var)")
    parser.add_argument("-v", "--verbose", action="store_true", help="Enable debug logging")
    args = parser.parse_args()

    # Use CLI args, fall back to env vars
    base_url = args.base_url or os.environ.get("PLANKA_BASE_URL")
    token = args.token or os.environ.get("PLANKA_TOKEN")
    email = args.email or os.environ.get("PLANKA_AGENT_EMAIL")
    password = args.password or os.environ.get("PLANKA_AGENT_PASSWORD")

    if not base_url:
        parser.error("--base-url is required (or set PLANKA_BASE_URL)")
    if not token and not (email and password):
        parser.error("--token or --email and --password are required (or set PLANKA_TOKEN)")

    configure_logging(verbose=args.verbose)
    server = PlankaMCPServer(base_url, token=token, email=email, password=password)
    asyncio.run(server.run())


if __name__ == "__main__":
    main()
