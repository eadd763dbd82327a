from collections.abc import Callable
from http import HTTPStatus
from typing import Any

import httpx


class MockResponse:
    def __init__(self, status_code: int, payload: Any = None, text: str = "") -> None:
        self.status_code = status_code
        self._payload = {} if payload is None else payload
        self.text = text

    def json(self) -> Any:
        return self._payload


class BadJsonResponse(MockResponse):
    """Response whose body is not JSON."""

    def json(self) -> Any:
        raise ValueError("not json")


class MockAsyncClient:
    """Minimal async context-manager mock for httpx.AsyncClient.

    Serves the queued responses in order and records every GET as (url, params).
    """

    def __init__(self, responses: list[MockResponse], requests: list[tuple[str, dict[str, Any] | None]]) -> None:
        self._responses = responses
        self._requests = requests

    async def __aenter__(self) -> "MockAsyncClient":
        return self

    async def __aexit__(self, exc_type, exc, tb) -> None:
        return None

    async def get(self, url: str, params: dict[str, Any] | None = None) -> MockResponse:
        self._requests.append((url, params))
        return self._responses.pop(0)


class FailingAsyncClient:
    """Async client that raises a RequestError on enter to simulate network failure.

    The target URL is provided at construction time, so tests for different providers
    can reuse this implementation with different base URLs.
    """

    def __init__(self, url: str, *args: Any, **kwargs: Any) -> None:
        self._url = url

    async def __aenter__(self) -> "FailingAsyncClient":
        request = httpx.Request("GET", self._url)
        raise httpx.ConnectError("Network failure", request=request)

    async def __aexit__(self, exc_type, exc, tb) -> None:
        return None

    async def get(self, url: str, params: dict[str, Any] | None = None) -> MockResponse:
        return MockResponse(status_code=HTTPStatus.OK, payload={})


def make_fake_async_client(
    *responses: MockResponse,
    requests: list[tuple[str, dict[str, Any] | None]] | None = None,
) -> Callable[..., MockAsyncClient]:
    """Factory for a fake httpx.AsyncClient returning the given responses in order.

    Every client built by the factory shares the same response queue, so a chain
    of lookups can be scripted end to end. Pass `requests` to capture the calls.
    """
    queue = list(responses)
    recorded = requests if requests is not None else []

    def _fake_client(*args: Any, **kwargs: Any) -> MockAsyncClient:
        return MockAsyncClient(queue, recorded)

    return _fake_client
