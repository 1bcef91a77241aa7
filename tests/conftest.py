"""
Shared fixtures: settings, a fake CallZero backend and clients wired to it.
"""
import json
from typing import Any, Dict, List, Optional

import httpx
import pytest

from callzero_mcp.config import Settings
from callzero_mcp.http_client import CallZeroClient
from callzero_mcp.main import build_registry
from callzero_mcp.rate_limit import SlidingWindowRateLimiter

TEST_API_KEY = "callzero_test_key"


class FakeClock:
    """Manually advanced monotonic clock."""

    def __init__(self, start: float = 1000.0):
        self.now = start

    def __call__(self) -> float:
        return self.now

    def advance(self, seconds: float) -> None:
        self.now += seconds


class FakeBackend:
    """
    Records every request and answers with canned responses per endpoint.

    Endpoints without a canned response get `200 {}`.
    """

    def __init__(self):
        self.requests: List[httpx.Request] = []
        self._responses: Dict[str, Any] = {}

    def respond(
        self,
        endpoint: str,
        status_code: int = 200,
        json_body: Any = None,
        content: Optional[bytes] = None,
    ) -> None:
        self._responses[endpoint] = (status_code, json_body, content)

    def raise_on(self, endpoint: str, exc_factory) -> None:
        self._responses[endpoint] = exc_factory

    def handler(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        endpoint = request.url.path.rsplit("/", 1)[-1]
        canned = self._responses.get(endpoint, (200, {}, None))
        if callable(canned):
            raise canned(request)
        status_code, json_body, content = canned
        if content is not None:
            return httpx.Response(status_code, content=content)
        return httpx.Response(status_code, json=json_body)

    @property
    def transport(self) -> httpx.MockTransport:
        return httpx.MockTransport(self.handler)

    @property
    def last_body(self) -> Dict[str, Any]:
        return json.loads(self.requests[-1].content)


def make_settings(api_url: Optional[str] = None, **overrides) -> Settings:
    return Settings(api_key=TEST_API_KEY, api_url=api_url, **overrides)


@pytest.fixture
def settings():
    return make_settings()


@pytest.fixture
def backend():
    return FakeBackend()


@pytest.fixture
def clock():
    return FakeClock()


@pytest.fixture
def client(settings, backend, clock):
    return CallZeroClient(
        settings,
        transport=backend.transport,
        rate_limiter=SlidingWindowRateLimiter(max_requests=50, window_seconds=60.0, clock=clock),
    )


@pytest.fixture
def registry(client):
    return build_registry(client)
