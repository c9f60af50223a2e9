"""
HTTP client for the UniFuncs API.

Every endpoint answers either with a JSON envelope ``{code, message, data}``
or with a plain body (e.g. markdown from the web reader). ``unwrap_response``
turns both into a tagged ``GatewayResponse``.
"""

import logging
from dataclasses import dataclass
from typing import Any, Dict, Optional, Union

import httpx

from .config import CONNECT_TIMEOUT, Settings
from .errors import ApiError

logger = logging.getLogger("unifuncs-mcp.client")


@dataclass(frozen=True)
class JsonPayload:
    """The ``data`` field of a successful JSON envelope"""
    data: Any


@dataclass(frozen=True)
class TextPayload:
    """A non-JSON response body, returned verbatim"""
    text: str


GatewayResponse = Union[JsonPayload, TextPayload]


def is_json_response(response: httpx.Response) -> bool:
    return "application/json" in response.headers.get("content-type", "")


def unwrap_response(response: httpx.Response) -> GatewayResponse:
    """
    Normalize a UniFuncs response.

    Raises:
        ApiError: If the JSON envelope carries a non-zero code
        json.JSONDecodeError: If the body claims to be JSON but is not
    """
    if not is_json_response(response):
        return TextPayload(response.text)

    envelope = response.json()
    code = envelope.get("code")
    if code != 0:
        message = envelope.get("message") or ""
        raise ApiError(message, code=code)
    return JsonPayload(envelope.get("data"))


class UniFuncsClient:
    """Authenticated client for the UniFuncs API"""

    def __init__(self, settings: Settings, transport: Optional[httpx.AsyncBaseTransport] = None):
        self.settings = settings
        self._transport = transport

    def build_url(self, path: str) -> str:
        base = self.settings.api_base.rstrip("/")
        return f"{base}/{path[1:] if path.startswith('/') else path}"

    def _headers(self) -> Dict[str, str]:
        return {
            "Content-Type": "application/json",
            "Authorization": f"Bearer {self.settings.api_key}",
        }

    async def request(self, method: str, path: str, data: Dict[str, Any]) -> GatewayResponse:
        """
        Send ``data`` as a JSON body and unwrap the answer.

        Network failures (``httpx.HTTPError``) and API failures (``ApiError``)
        propagate to the caller; nothing is retried.
        """
        url = self.build_url(path)
        logger.debug(f"{method} {url}")

        timeout = httpx.Timeout(self.settings.request_timeout, connect=CONNECT_TIMEOUT)
        async with httpx.AsyncClient(timeout=timeout, transport=self._transport) as client:
            response = await client.request(method, url, json=data, headers=self._headers())

        try:
            return unwrap_response(response)
        except ApiError as e:
            logger.warning(f"UniFuncs API error on {path} (code={e.code}): {e.message}")
            raise

    async def post(self, path: str, data: Dict[str, Any]) -> GatewayResponse:
        return await self.request("POST", path, data)
