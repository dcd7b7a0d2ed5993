"""Discord webhook provider."""

import logging
from typing import Optional

from notifykit.channels.discord import DiscordPayload, format_discord
from notifykit.config import Settings
from notifykit.options import Options
from notifykit.providers.base import Notifier
from notifykit.transport import deliver

logger = logging.getLogger(__name__)


class DiscordProvider(Notifier):
    """Send notifications through a Discord webhook."""

    @property
    def provider_type(self) -> str:
        return "discord"

    def __init__(self, webhook_url: str, options: Optional[Options] = None):
        super().__init__(options)
        self._webhook_url = webhook_url

    @classmethod
    def from_settings(
        cls,
        settings: Optional[Settings] = None,
        options: Optional[Options] = None,
    ) -> Optional["DiscordProvider"]:
        """Create a DiscordProvider from settings. Returns None if not configured."""
        if settings is None:
            from notifykit.config import settings

        if not settings.discord_webhook_url:
            return None
        return cls(settings.discord_webhook_url, options)

    @classmethod
    def from_config(cls, config: dict, options: Optional[Options] = None) -> "DiscordProvider":
        """
        Config shape: { "webhook_url": str }
        """
        return cls(config.get("webhook_url") or config.get("url", ""), options)

    async def send(self, payload: DiscordPayload) -> None:
        self._require(webhook_url=self._webhook_url)

        request = format_discord(self._webhook_url, payload)
        await deliver(self.provider_type, request, self.options)

        logger.info("Notification sent via Discord")
