"""HTTP delivery of rendered channel payloads."""

import logging
from typing import Container, Optional

import httpx

from notifykit.channels import ChannelPayload
from notifykit.errors import RemoteError, TransportError
from notifykit.options import DEFAULT_TIMEOUT, Options

logger = logging.getLogger(__name__)

SUCCESS_STATUSES = range(200, 300)


def http_client(timeout: Optional[float] = None, **kwargs) -> httpx.AsyncClient:
    """Create a short-lived client for a single send."""
    return httpx.AsyncClient(
        timeout=DEFAULT_TIMEOUT if timeout is None else timeout,
        **kwargs,
    )


async def deliver(
    service: str,
    payload: ChannelPayload,
    options: Options,
    accepted: Container[int] = SUCCESS_STATUSES,
) -> httpx.Response:
    """
    Send a single payload and check the response status.

    Args:
        service: Provider type, used in log lines and errors
        payload: ChannelPayload instance
        options: Provider options (client override, timeout)
        accepted: Status codes the service uses for success

    Raises:
        TransportError: the request could not be built or sent
        RemoteError: the service answered with a status outside ``accepted``
    """
    try:
        if options.client is not None:
            response = await _request(options.client, payload, options.timeout)
        else:
            async with http_client(options.timeout) as client:
                response = await _request(client, payload)
    except (httpx.HTTPError, httpx.InvalidURL, UnicodeEncodeError) as e:
        # Header values must be ASCII; a non-ASCII credential fails request building
        logger.error("Failed to send %s notification: %s", service, e)
        raise TransportError(f"{service}: failed to send request: {e}") from e

    if response.status_code not in accepted:
        logger.warning(
            "%s returned status %s: %s", service, response.status_code, response.text[:200]
        )
        raise RemoteError(service, response.status_code, response.text)

    logger.debug("%s accepted notification with status %s", service, response.status_code)
    return response


async def _request(
    client: httpx.AsyncClient,
    payload: ChannelPayload,
    timeout: Optional[float] = None,
) -> httpx.Response:
    return await client.request(
        method=payload.method,
        url=payload.url,
        headers=payload.headers,
        content=payload.body,
        timeout=httpx.USE_CLIENT_DEFAULT if timeout is None else timeout,
    )
