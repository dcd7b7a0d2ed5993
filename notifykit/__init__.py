"""Send notifications to Discord, LINE, Telegram and Microsoft Teams."""

from notifykit.dispatcher import DispatchResult, dispatch
from notifykit.errors import (
    ConfigError,
    EmptyMessageError,
    EncodingError,
    NotifyError,
    RemoteError,
    TransportError,
    UnsupportedPayloadError,
)
from notifykit.message import Message
from notifykit.options import Options
from notifykit.providers import (
    DiscordProvider,
    LineProvider,
    Notifier,
    TeamsProvider,
    TelegramProvider,
    build_provider,
    providers_from_settings,
)

__all__ = [
    "Message",
    "Options",
    "Notifier",
    "DiscordProvider",
    "LineProvider",
    "TelegramProvider",
    "TeamsProvider",
    "build_provider",
    "providers_from_settings",
    "dispatch",
    "DispatchResult",
    "NotifyError",
    "ConfigError",
    "UnsupportedPayloadError",
    "EmptyMessageError",
    "EncodingError",
    "TransportError",
    "RemoteError",
]
