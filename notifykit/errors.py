"""Exception hierarchy raised by notification providers."""

from typing import Optional


class NotifyError(Exception):
    """Base class for every error raised while sending a notification."""


class ConfigError(NotifyError):
    """A required credential, URL or target ID is missing."""


class UnsupportedPayloadError(NotifyError, TypeError):
    """The payload is not one of the variants the provider accepts."""

    def __init__(self, provider_type: str, payload: object):
        self.provider_type = provider_type
        self.payload_type = type(payload).__name__
        super().__init__(f"{provider_type}: unsupported payload type: {self.payload_type}")


class EmptyMessageError(NotifyError, ValueError):
    """The payload maps to nothing the service can deliver."""


class EncodingError(NotifyError):
    """The payload could not be serialized to JSON."""


class TransportError(NotifyError):
    """The request could not be built or the network call failed."""


class RemoteError(NotifyError):
    """The remote service answered with a status it does not use for success."""

    def __init__(self, service: str, status_code: int, body: Optional[str] = None):
        self.service = service
        self.status_code = status_code
        self.body = body
        super().__init__(f"{service} returned status {status_code}")
