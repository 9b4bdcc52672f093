"""Testing utilities for code built on the Autumn client.

Example:
    ```python
    from autumn.testing import create_mock_response, mock_client_class


    async def test_check_allows_feature(monkeypatch):
        monkeypatch.setenv("AUTUMN_SECRET_KEY", "am_sk_test")
        MockAutumn = mock_client_class(lambda request: create_mock_response({"allowed": True}))

        result = await MockAutumn.check(customer_id="cus_123", feature_id="messages")
        assert result.data == {"allowed": True}
    ```
"""

from collections.abc import Callable, Mapping
from typing import Any

import httpx

from autumn.client import Autumn

RequestHandler = Callable[[httpx.Request], httpx.Response]


def create_mock_response(data: Any = None, status_code: int = 200) -> httpx.Response:
    """JSON response with the given body."""
    return httpx.Response(status_code, json=data)


def create_error_response(status_code: int, message: str, code: str | int) -> httpx.Response:
    """Error response shaped like the ones the Autumn API sends."""
    return httpx.Response(status_code, json={"message": message, "code": code})


def mock_client_class(
    handler: RequestHandler,
    environ: Mapping[str, str] | None = None,
    base: type[Autumn] = Autumn,
) -> type[Autumn]:
    """Autumn subclass whose class-level calls are served by ``handler``.

    Instances built with ``from_env`` (which is what class-level calls use)
    read credentials from ``environ`` (or the process environment) and send
    every request to ``httpx.MockTransport(handler)``.
    """
    transport = httpx.MockTransport(handler)

    class MockAutumn(base):
        @classmethod
        def from_env(cls) -> Autumn:
            return cls(environ=environ, transport=transport)

    return MockAutumn


__all__ = ["create_error_response", "create_mock_response", "mock_client_class"]
