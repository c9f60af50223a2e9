"""
UniFuncs MCP Server

Exposes the UniFuncs web-search and web-reader APIs as MCP tools.
"""

__version__ = "0.0.6"
SERVER_NAME = "mcp-server/unifuncs"
