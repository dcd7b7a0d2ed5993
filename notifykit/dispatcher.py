"""Send one payload to many providers."""

import asyncio
import logging
from dataclasses import dataclass
from typing import Any, Iterable, Optional

from notifykit.errors import NotifyError
from notifykit.providers.base import Notifier

logger = logging.getLogger(__name__)


@dataclass
class DispatchResult:
    """Outcome of sending to a single provider."""
    provider_type: str
    error: Optional[Exception] = None

    @property
    def ok(self) -> bool:
        return self.error is None


async def dispatch(providers: Iterable[Notifier], payload: Any) -> list[DispatchResult]:
    """
    Send ``payload`` to all providers concurrently.

    A failing provider is logged and reported in its result; the others
    still send. Results follow the order of ``providers``.
    """
    providers = list(providers)
    outcomes = await asyncio.gather(
        *(_send(provider, payload) for provider in providers),
    )
    return list(outcomes)


async def _send(provider: Notifier, payload: Any) -> DispatchResult:
    try:
        await provider.send(payload)
    except NotifyError as e:
        logger.error("Failed to send notification via %s: %s", provider.provider_type, e)
        return DispatchResult(provider.provider_type, e)
    except Exception as e:
        logger.exception("Unexpected error sending notification via %s", provider.provider_type)
        return DispatchResult(provider.provider_type, e)
    return DispatchResult(provider.provider_type)
