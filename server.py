#!/usr/bin/env python3
"""
UniFuncs MCP Server - Entry Point

This is the entry point for running the UniFuncs MCP server from a source
checkout. It imports and runs main() from the unifuncs_mcp_server package.

    python server.py          # stdio transport (default)
    python server.py --sse    # HTTP + Server-Sent Events on UNIFUNCS_SSE_SERVER_PORT

UNIFUNCS_API_KEY must be set; the server exits with status 1 without it.
"""

import sys
import os

# Add src directory to Python path
sys.path.insert(0, os.path.join(os.path.dirname(__file__), 'src'))

from unifuncs_mcp_server.server import main

if __name__ == "__main__":
    main()
