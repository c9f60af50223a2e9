"""
Tool registry and dispatcher.

``call_tool`` never raises: unknown tools and handler failures come back as
``CallToolResult`` objects with ``isError`` set.
"""

import logging
from typing import Any, Awaitable, Callable, Dict, List, Optional

import mcp.types as types

from .client import UniFuncsClient
from .tools import WEB_READER_TOOL, WEB_SEARCH_TOOL, web_reader, web_search

logger = logging.getLogger("unifuncs-mcp.dispatcher")

ToolHandler = Callable[[UniFuncsClient, Dict[str, Any]], Awaitable[types.CallToolResult]]


def error_result(text: str) -> types.CallToolResult:
    return types.CallToolResult(
        content=[types.TextContent(type="text", text=text)],
        isError=True
    )


class ToolDispatcher:
    """Routes tool calls by name to their handlers"""

    def __init__(self, client: UniFuncsClient):
        self.client = client
        self._tools: Dict[str, types.Tool] = {}
        self._handlers: Dict[str, ToolHandler] = {}

    def register(self, tool: types.Tool, handler: ToolHandler) -> None:
        if tool.name in self._tools:
            raise ValueError(f"Tool '{tool.name}' is already registered")
        self._tools[tool.name] = tool
        self._handlers[tool.name] = handler

    def list_tools(self) -> List[types.Tool]:
        return list(self._tools.values())

    async def call_tool(self, name: str, arguments: Optional[Dict[str, Any]]) -> types.CallToolResult:
        handler = self._handlers.get(name)
        if handler is None:
            logger.warning(f"Unknown tool: {name}")
            return error_result(f"Unknown tool: {name}")

        logger.info(f"Tool called: {name}")
        try:
            return await handler(self.client, arguments or {})
        except Exception as e:
            logger.error(f"Tool {name} failed: {e}")
            return error_result(f"Error: {e}")


def create_dispatcher(client: UniFuncsClient) -> ToolDispatcher:
    """Dispatcher with the web-search and web-reader tools registered"""
    dispatcher = ToolDispatcher(client)
    dispatcher.register(WEB_SEARCH_TOOL, web_search)
    dispatcher.register(WEB_READER_TOOL, web_reader)
    return dispatcher
