"""
Tool definitions and handlers for the UniFuncs MCP server.

Each tool validates its arguments with a pydantic model, forwards them to one
UniFuncs endpoint and wraps the answer in a text content block.
"""

import json
import logging
from typing import Any, Dict, Literal

import mcp.types as types
from pydantic import BaseModel, ConfigDict, Field

from .client import JsonPayload, TextPayload, UniFuncsClient, GatewayResponse

logger = logging.getLogger("unifuncs-mcp.tools")

WEB_SEARCH_PATH = "/api/web-search/search"
WEB_READER_PATH = "/api/web-reader/read"


# ============================================================================
# PARAMETER MODELS
# ============================================================================

class WebSearchParams(BaseModel):
    """
    Arguments accepted by the web-search tool.

    Optional fields default to None without allowing an explicit null, and
    strict mode rejects values of the wrong JSON type instead of coercing them.
    """
    model_config = ConfigDict(extra="ignore", strict=True)

    query: str
    freshness: Literal["Day", "Week", "Month", "Year"] = None
    page: int = Field(default=None, ge=1)
    count: int = Field(default=None, ge=1, le=50)
    format: Literal["markdown", "text", "json"] = None


class WebReaderParams(BaseModel):
    """Arguments accepted by the web-reader tool"""
    model_config = ConfigDict(extra="ignore", strict=True)

    url: str
    format: Literal["markdown"] = None
    includeImages: bool = None
    linkSummary: bool = None


def request_body(params: BaseModel) -> Dict[str, Any]:
    """The validated arguments, limited to the keys the caller supplied"""
    return params.model_dump(exclude_unset=True)


# ============================================================================
# TOOL DESCRIPTORS
# ============================================================================

WEB_SEARCH_TOOL = types.Tool(
    name="web-search",
    description="Search the internet by keyword and return a list of matching pages",
    inputSchema={
        "type": "object",
        "properties": {
            "query": {"type": "string", "description": "Search phrase"},
            "freshness": {
                "type": "string",
                "enum": ["Day", "Week", "Month", "Year"],
                "description": "Only return pages published within this period"
            },
            "page": {"type": "integer", "minimum": 1, "description": "Result page, starting at 1"},
            "count": {
                "type": "integer",
                "minimum": 1,
                "maximum": 50,
                "description": "Number of results per page"
            },
            "format": {
                "type": "string",
                "enum": ["markdown", "text", "json"],
                "description": "Format of the returned results"
            }
        },
        "required": ["query"]
    }
)

WEB_READER_TOOL = types.Tool(
    name="web-reader",
    description="Fetch the detailed content of the page at the given URL",
    inputSchema={
        "type": "object",
        "properties": {
            "url": {"type": "string", "description": "URL of the page to read"},
            "format": {"type": "string", "enum": ["markdown"], "description": "Output format"},
            "includeImages": {"type": "boolean", "description": "Keep images in the content"},
            "linkSummary": {"type": "boolean", "description": "Append a summary of the page links"}
        },
        "required": ["url"]
    }
)


# ============================================================================
# HANDLERS
# ============================================================================

def text_result(text: str) -> types.CallToolResult:
    return types.CallToolResult(content=[types.TextContent(type="text", text=text)])


def to_json(value: Any) -> str:
    return json.dumps(value, ensure_ascii=False, separators=(",", ":"))


def _serialize(payload: GatewayResponse) -> str:
    if isinstance(payload, TextPayload):
        return to_json(payload.text)
    return to_json(payload.data)


async def web_search(client: UniFuncsClient, arguments: Dict[str, Any]) -> types.CallToolResult:
    """Forward a keyword search; the results are passed through as JSON"""
    params = WebSearchParams.model_validate(arguments)
    logger.debug(f"web-search: query={params.query!r}")
    payload = await client.post(WEB_SEARCH_PATH, request_body(params))
    return text_result(_serialize(payload))


async def web_reader(client: UniFuncsClient, arguments: Dict[str, Any]) -> types.CallToolResult:
    """Read a single page; plain-text bodies are returned verbatim"""
    params = WebReaderParams.model_validate(arguments)
    logger.debug(f"web-reader: url={params.url}")
    payload = await client.post(WEB_READER_PATH, request_body(params))

    if isinstance(payload, TextPayload):
        return text_result(payload.text)
    if isinstance(payload, JsonPayload) and isinstance(payload.data, str):
        return text_result(payload.data)
    return text_result(_serialize(payload))
