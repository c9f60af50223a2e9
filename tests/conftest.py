import json

import httpx
import pytest

from unifuncs_mcp_server.client import UniFuncsClient
from unifuncs_mcp_server.config import Settings


@pytest.fixture
def anyio_backend():
    return "asyncio"


@pytest.fixture
def settings():
    return Settings(api_key="test-key", api_base="https://api.unifuncs.test/")


class RecordingTransport(httpx.MockTransport):
    """MockTransport that keeps every request it receives"""

    def __init__(self, handler):
        self.requests = []

        def record(request):
            self.requests.append(request)
            return handler(request)

        super().__init__(record)

    def bodies(self):
        return [json.loads(request.content) for request in self.requests]


@pytest.fixture
def make_client(settings):
    def factory(handler):
        transport = RecordingTransport(handler)
        return UniFuncsClient(settings, transport=transport), transport

    return factory
