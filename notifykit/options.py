"""Per-provider construction options."""

from dataclasses import dataclass, replace
from typing import Optional

import httpx

DEFAULT_TIMEOUT = 10.0


@dataclass(frozen=True)
class Options:
    """
    HTTP settings shared by every provider.

    Instances are immutable; the ``with_*`` builders return a new copy so one
    Options value can seed several providers without leaking changes.

    Fields:
        - client: caller-owned ``httpx.AsyncClient`` used for every request.
          The library never closes it.
        - timeout: request timeout in seconds. Without a client, ``None``
          means DEFAULT_TIMEOUT; with a client, ``None`` keeps the client's own.
    """
    client: Optional[httpx.AsyncClient] = None
    timeout: Optional[float] = None

    def with_client(self, client: httpx.AsyncClient) -> "Options":
        return replace(self, client=client)

    def with_timeout(self, timeout: float) -> "Options":
        return replace(self, timeout=timeout)
