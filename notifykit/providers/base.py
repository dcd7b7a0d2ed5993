"""Base notification provider interface."""

from abc import ABC, abstractmethod
from typing import Any, Optional

from notifykit.errors import ConfigError
from notifykit.options import Options


class Notifier(ABC):
    """
    Common interface for all notification providers.
    Each provider implements send() against its own HTTP API.

    Providers are configured once at construction and keep no other state,
    so one instance may be shared by concurrent tasks.
    """

    def __init__(self, options: Optional[Options] = None):
        self._options = options or Options()

    @property
    @abstractmethod
    def provider_type(self) -> str:
        ...

    @property
    def options(self) -> Options:
        return self._options

    @abstractmethod
    async def send(self, payload: Any) -> None:
        """
        Render ``payload`` for the service and deliver it.

        Raises:
            ConfigError: a credential or target is missing
            UnsupportedPayloadError: payload is not an accepted variant
            EncodingError: payload could not be serialized
            TransportError: the request failed before a response arrived
            RemoteError: the service rejected the request
        """
        ...

    def _require(self, **fields: str) -> None:
        """Raise ConfigError naming every empty field."""
        missing = [name for name, value in fields.items() if not value]
        if missing:
            raise ConfigError(f"{self.provider_type}: missing {', '.join(missing)}")
