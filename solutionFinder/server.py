"""MCP tool server exposing the solution finder over stdio."""

from __future__ import annotations

import logging
from typing import Any, Dict

from mcp.server import Server
from mcp.types import Tool

from solutionFinder.config.settings import ServerSettings
from solutionFinder.errors import SolutionFinderError
from solutionFinder.finder import SolutionFinder
from solutionFinder.schemas import ChallengeRequest, SolutionsResponse
from solutionFinder.utils import log_error, log_tool_call, log_tool_result

LOGGER = logging.getLogger(__name__)


def build_tool(settings: ServerSettings) -> Tool:
    """Describe the finder tool with schemas derived from the models."""
    return Tool(
        name=settings.tool_name,
        description=settings.tool_description,
        inputSchema=ChallengeRequest.model_json_schema(),
        outputSchema=SolutionsResponse.model_json_schema(),
    )


def build_server(
    finder: SolutionFinder,
    settings: ServerSettings,
    log_result_max_length: int = 500,
) -> Server:
    """Create the MCP server with the finder tool registered.

    Tool errors are re-raised so the SDK reports them as ``isError`` results
    carrying the error message.
    """
    app = Server(settings.name, version=settings.version)
    tool = build_tool(settings)

    @app.list_tools()
    async def list_tools() -> list[Tool]:
        """List available tools."""
        return [tool]

    @app.call_tool()
    async def call_tool(name: str, arguments: Dict[str, Any]) -> Dict[str, Any]:
        """Handle tool calls."""
        if name != tool.name:
            raise ValueError(f"Unknown tool: {name}")

        arguments = arguments or {}
        log_tool_call(LOGGER, name, arguments)
        try:
            response = await finder.find(arguments.get("challenge"))
        except SolutionFinderError as e:
            log_tool_result(LOGGER, name, f"{e.kind.value}: {e}", success=False,
                            max_length=log_result_max_length)
            raise
        except Exception as e:
            log_error(LOGGER, e, context=f"tool {name}")
            raise

        result = response.model_dump()
        log_tool_result(LOGGER, name, result, max_length=log_result_max_length)
        return result

    return app


__all__ = ["build_server", "build_tool"]
