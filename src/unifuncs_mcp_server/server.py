#!/usr/bin/env python3
"""
UniFuncs MCP Server - Web Search and Web Reader over MCP

Serves the ``web-search`` and ``web-reader`` tools either over stdio (the
default) or over HTTP with Server-Sent Events (``--sse`` or
``UNIFUNCS_SSE_SERVER``).

SSE endpoints:
    GET  /sse                          Open an event stream
    POST /messages/?session_id=<id>    Post a client message to a session
    GET  /health                       Liveness check
"""

import sys
import asyncio
import logging
import argparse
from typing import List, Optional

import dotenv
import uvicorn
import mcp.types as types
from fastapi import FastAPI, Request
from fastapi.responses import Response
from mcp.server.lowlevel import Server
from mcp.server.sse import SseServerTransport
from mcp.server.stdio import stdio_server

from . import SERVER_NAME, __version__
from .client import UniFuncsClient
from .config import Settings, configure_logging, load_settings
from .dispatcher import ToolDispatcher, create_dispatcher
from .errors import ConfigurationError

logger = logging.getLogger("unifuncs-mcp")


# ============================================================================
# MCP SERVER
# ============================================================================

def build_server(dispatcher: ToolDispatcher) -> Server:
    """Low-level MCP server whose tool handlers delegate to ``dispatcher``"""
    server = Server(SERVER_NAME, version=__version__)

    @server.list_tools()
    async def handle_list_tools() -> List[types.Tool]:
        return dispatcher.list_tools()

    # Arguments are validated by the tool handlers themselves
    @server.call_tool(validate_input=False)
    async def handle_call_tool(name: str, arguments: dict) -> types.CallToolResult:
        return await dispatcher.call_tool(name, arguments)

    return server


# ============================================================================
# TRANSPORTS
# ============================================================================

async def run_stdio(server: Server) -> None:
    logger.info("UniFuncs MCP Server running on stdio")
    async with stdio_server() as (read_stream, write_stream):
        await server.run(read_stream, write_stream, server.create_initialization_options())


def create_sse_app(server: Server) -> FastAPI:
    """FastAPI app exposing ``server`` over SSE; sessions are tracked by the SDK transport"""
    sse = SseServerTransport("/messages/")
    app = FastAPI(title="UniFuncs MCP Server", version=__version__)

    @app.get("/sse")
    async def handle_sse(request: Request):
        async with sse.connect_sse(request.scope, request.receive, request._send) as (read_stream, write_stream):
            await server.run(read_stream, write_stream, server.create_initialization_options())
        return Response()

    @app.get("/health")
    async def health_check():
        return {
            "status": "healthy",
            "service": SERVER_NAME,
            "version": __version__
        }

    app.mount("/messages/", app=sse.handle_post_message)
    return app


def run_sse(server: Server, settings: Settings) -> None:
    app = create_sse_app(server)
    logger.info(f"UniFuncs MCP Server running on http://localhost:{settings.sse_port}")
    uvicorn.run(app, host=settings.sse_host, port=settings.sse_port, log_level="info")


# ============================================================================
# ENTRY POINT
# ============================================================================

def parse_args(argv: Optional[List[str]] = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        prog="unifuncs-mcp-server",
        description="Expose the UniFuncs web-search and web-reader APIs as MCP tools"
    )
    parser.add_argument(
        "--sse",
        action="store_true",
        help="Serve over HTTP with Server-Sent Events instead of stdio"
    )
    return parser.parse_args(argv)


def main(argv: Optional[List[str]] = None) -> None:
    """Main entry point for the UniFuncs MCP server"""
    args = parse_args(argv)
    dotenv.load_dotenv()
    configure_logging()

    try:
        settings = load_settings(sse=args.sse)
    except ConfigurationError as e:
        print(str(e), file=sys.stderr)
        sys.exit(1)

    dispatcher = create_dispatcher(UniFuncsClient(settings))
    server = build_server(dispatcher)
    logger.info(f"Registered tools: {', '.join(tool.name for tool in dispatcher.list_tools())}")

    try:
        if settings.sse_enabled:
            run_sse(server, settings)
        else:
            asyncio.run(run_stdio(server))
    except KeyboardInterrupt:
        logger.info("Shutting down UniFuncs MCP Server...")
    except Exception as e:
        logger.error(f"UniFuncs MCP Server failed: {e}")
        sys.exit(1)


if __name__ == "__main__":
    main()
