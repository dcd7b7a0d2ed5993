"""Build providers from configuration."""

import logging
from typing import Optional

from notifykit.channels.detect import detect_channel_type
from notifykit.config import Settings
from notifykit.errors import ConfigError
from notifykit.options import Options
from notifykit.providers.base import Notifier
from notifykit.providers.discord import DiscordProvider
from notifykit.providers.line import LineProvider
from notifykit.providers.teams import TeamsProvider
from notifykit.providers.telegram import TelegramProvider

logger = logging.getLogger(__name__)

_PROVIDERS: dict[str, type] = {
    "discord": DiscordProvider,
    "line": LineProvider,
    "telegram": TelegramProvider,
    "teams": TeamsProvider,
}


def build_provider(
    provider_type: str,
    config: dict,
    options: Optional[Options] = None,
) -> Notifier:
    """
    Instantiate a provider from a type name and its config dict.

    Type 'webhook' is resolved from the URL in the config.
    """
    if provider_type == "webhook":
        url = config.get("url") or config.get("webhook_url") or ""
        provider_type = detect_channel_type(url)
        if provider_type == "webhook":
            raise ConfigError(f"Cannot detect provider type from webhook URL: {url!r}")

    provider_cls = _PROVIDERS.get(provider_type)
    if provider_cls is None:
        raise ConfigError(f"Unknown provider type: {provider_type}")
    return provider_cls.from_config(config, options)


def providers_from_settings(
    settings: Optional[Settings] = None,
    options: Optional[Options] = None,
) -> list[Notifier]:
    """
    Return every provider whose credentials are configured.

    Order: Discord, LINE, Telegram, Teams.
    """
    if settings is None:
        from notifykit.config import settings

    options = options or Options()
    if options.timeout is None:
        options = options.with_timeout(settings.http_timeout)

    providers = []
    for provider_cls in _PROVIDERS.values():
        provider = provider_cls.from_settings(settings, options)
        if provider is not None:
            providers.append(provider)

    if not providers:
        logger.warning("No notification providers configured")
    return providers
