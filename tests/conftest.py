import json
from typing import Any, Dict, List, Optional

import httpx
import pytest

from vpsnet_mcp.api_client import VpsNetClient
from vpsnet_mcp.config import UpstreamConfig
from vpsnet_mcp.main import create_registry

BASE_URL = "https://api.test.vpsnet.local"
API_KEY = "test-api-key"


class FakeUpstream:
    """Records every request and answers with a configurable response."""

    def __init__(self) -> None:
        self.requests: List[httpx.Request] = []
        self.status_code = 200
        self.content: bytes = b'{"ok": true}'
        self.headers: Dict[str, str] = {"Content-Type": "application/json"}
        self.streamed = False
        self.error: Optional[Exception] = None

    def respond_json(self, data: Any, status_code: int = 200) -> None:
        self.content = json.dumps(data).encode()
        self.status_code = status_code

    def respond_raw(self, content: bytes, status_code: int = 200) -> None:
        self.content = content
        self.status_code = status_code

    def respond_streamed(self, content: bytes, headers: Dict[str, str], status_code: int = 200) -> None:
        # Body is left unread until the client reads it, as on a real connection.
        self.content = content
        self.headers = headers
        self.status_code = status_code
        self.streamed = True

    def handler(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        if self.error is not None:
            raise self.error
        if self.streamed:
            return httpx.Response(
                self.status_code,
                headers=self.headers,
                stream=httpx.ByteStream(self.content),
            )
        return httpx.Response(self.status_code, content=self.content, headers=self.headers)

    @property
    def last(self) -> httpx.Request:
        assert self.requests, "no upstream request was made"
        return self.requests[-1]

    def last_body(self) -> Any:
        return json.loads(self.last.content) if self.last.content else None


@pytest.fixture
def upstream():
    return FakeUpstream()


@pytest.fixture
def upstream_config():
    return UpstreamConfig(base_url=BASE_URL, api_key=API_KEY)


@pytest.fixture
def api_client(upstream, upstream_config):
    return VpsNetClient(upstream_config, transport=httpx.MockTransport(upstream.handler))


@pytest.fixture
def registry(api_client):
    return create_registry(api_client)


@pytest.fixture
def payment():
    return {"payment": 1, "successUrl": "", "cancelUrl": ""}
