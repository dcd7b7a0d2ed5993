"""HTTP delivery tests."""

import math

import httpx
import pytest

from notifykit import transport
from notifykit.channels import ChannelPayload, encode_json
from notifykit.errors import EncodingError, RemoteError, TransportError
from notifykit.options import Options
from notifykit.schemas.discord import WebhookPayload


def _payload() -> ChannelPayload:
    return ChannelPayload(
        method="POST",
        url="https://hooks.example.com/notify",
        headers={"Content-Type": "application/json"},
        body='{"text": "hi"}',
    )


class TestHttpClient:
    def test_default_timeout(self):
        client = transport.http_client()
        assert client.timeout.read == 10.0

    def test_custom_timeout(self):
        client = transport.http_client(2.5)
        assert client.timeout.connect == 2.5


class TestEncodeJson:
    def test_models_are_dumped_by_alias_without_unset_fields(self):
        assert encode_json({"wrapped": WebhookPayload(content="x")}) == '{"wrapped": {"content": "x"}}'

    def test_unserializable_value(self):
        with pytest.raises(EncodingError):
            encode_json({"value": object()})

    @pytest.mark.parametrize("value", [math.nan, math.inf, -math.inf])
    def test_non_finite_numbers(self, value):
        with pytest.raises(EncodingError):
            encode_json({"value": value})


class TestDeliver:
    @pytest.mark.asyncio
    async def test_sends_method_headers_and_body(self, mock_http):
        options, requests = mock_http()

        response = await transport.deliver("test", _payload(), options)

        assert response.status_code == 200
        request = requests[0]
        assert request.method == "POST"
        assert str(request.url) == "https://hooks.example.com/notify"
        assert request.headers["Content-Type"] == "application/json"
        assert request.content == b'{"text": "hi"}'

    @pytest.mark.asyncio
    async def test_accepted_statuses(self, mock_http):
        options, _ = mock_http(status_code=202)
        await transport.deliver("test", _payload(), options, accepted={200, 202})

        with pytest.raises(RemoteError) as exc:
            await transport.deliver("test", _payload(), options, accepted={200})
        assert exc.value.status_code == 202
        assert exc.value.service == "test"

    @pytest.mark.asyncio
    async def test_any_2xx_by_default(self, mock_http):
        options, _ = mock_http(status_code=204)
        await transport.deliver("test", _payload(), options)

    @pytest.mark.asyncio
    async def test_remote_error_is_logged(self, mock_http, caplog):
        options, _ = mock_http(status_code=500, text="boom")

        with pytest.raises(RemoteError):
            await transport.deliver("test", _payload(), options)

        assert any("500" in r.getMessage() for r in caplog.records)

    @pytest.mark.asyncio
    async def test_transport_error_is_chained(self, mock_http):
        options, _ = mock_http(connect_error=True)

        with pytest.raises(TransportError) as exc:
            await transport.deliver("test", _payload(), options)

        assert isinstance(exc.value.__cause__, httpx.ConnectError)

    @pytest.mark.asyncio
    async def test_timeout_is_transport_error(self):
        def handler(request):
            raise httpx.ReadTimeout("timed out", request=request)

        client = httpx.AsyncClient(transport=httpx.MockTransport(handler))

        with pytest.raises(TransportError):
            await transport.deliver("test", _payload(), Options(client=client))

    @pytest.mark.asyncio
    async def test_short_lived_client_without_override(self, monkeypatch):
        seen = []

        def handler(request):
            seen.append(request)
            return httpx.Response(200)

        def fake_http_client(timeout=None):
            seen_timeout = transport.DEFAULT_TIMEOUT if timeout is None else timeout
            return httpx.AsyncClient(
                transport=httpx.MockTransport(handler), timeout=seen_timeout
            )

        monkeypatch.setattr(transport, "http_client", fake_http_client)

        await transport.deliver("test", _payload(), Options())

        assert len(seen) == 1
        assert seen[0].extensions["timeout"]["read"] == transport.DEFAULT_TIMEOUT
