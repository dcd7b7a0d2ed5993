"""Shared test fixtures."""

import httpx
import pytest

from notifykit.options import Options

PROVIDER_ENV_VARS = (
    "DISCORD_WEBHOOK_URL",
    "LINE_CHANNEL_TOKEN",
    "LINE_USER_ID",
    "TELEGRAM_TOKEN",
    "TELEGRAM_CHAT_ID",
    "MSTEAMS_WEBHOOK_URL",
    "HTTP_TIMEOUT",
)


@pytest.fixture(autouse=True)
def clean_env(monkeypatch):
    """Keep provider credentials from the outer environment out of tests."""
    for name in PROVIDER_ENV_VARS:
        monkeypatch.delenv(name, raising=False)


@pytest.fixture
def mock_http():
    """
    Factory returning (Options, requests) wired to an in-memory transport.

    Every request the provider makes is appended to ``requests``.
    """

    def make(status_code: int = 200, text: str = "", connect_error: bool = False):
        requests: list[httpx.Request] = []

        def handler(request: httpx.Request) -> httpx.Response:
            requests.append(request)
            if connect_error:
                raise httpx.ConnectError("connection refused", request=request)
            return httpx.Response(status_code, text=text)

        client = httpx.AsyncClient(transport=httpx.MockTransport(handler))
        return Options().with_client(client), requests

    return make
