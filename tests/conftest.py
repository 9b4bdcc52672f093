"""Pytest configuration and shared fixtures for autumn tests."""

import json

import httpx
import pytest

from autumn import Autumn


@pytest.fixture(autouse=True)
def clear_env(monkeypatch):
    """Auto-cleanup: Clear Autumn environment variables before each test.

    This prevents a developer's real keys from leaking into credential tests.
    """
    import os

    for key in list(os.environ.keys()):
        if key.startswith("AUTUMN_"):
            monkeypatch.delenv(key, raising=False)

    yield


@pytest.fixture
def requests_seen():
    """Requests captured by the ``echo_transport`` fixture."""
    return []


@pytest.fixture
def echo_transport(requests_seen):
    """Transport answering 200 with a summary of each request it receives."""

    def handler(request: httpx.Request) -> httpx.Response:
        requests_seen.append(request)
        return httpx.Response(
            200,
            json={
                "method": request.method,
                "path": request.url.path,
                "params": dict(request.url.params),
                "body": json.loads(request.content) if request.content else None,
            },
        )

    return httpx.MockTransport(handler)


@pytest.fixture
def client(echo_transport):
    """Client with a secret key talking to ``echo_transport``."""
    return Autumn(secret_key="am_sk_test", transport=echo_transport)
