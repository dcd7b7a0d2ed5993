"""Microsoft Teams incoming webhook provider."""

import logging
from typing import Optional

from notifykit.channels.teams import TeamsPayload, format_teams
from notifykit.config import Settings
from notifykit.options import Options
from notifykit.providers.base import Notifier
from notifykit.transport import deliver

logger = logging.getLogger(__name__)


class TeamsProvider(Notifier):
    """Post Adaptive Cards to a Microsoft Teams incoming webhook."""

    @property
    def provider_type(self) -> str:
        return "teams"

    def __init__(self, webhook_url: str, options: Optional[Options] = None):
        super().__init__(options)
        self._webhook_url = webhook_url

    @classmethod
    def from_settings(
        cls,
        settings: Optional[Settings] = None,
        options: Optional[Options] = None,
    ) -> Optional["TeamsProvider"]:
        """Create a TeamsProvider from settings. Returns None if not configured."""
        if settings is None:
            from notifykit.config import settings

        if not settings.msteams_webhook_url:
            return None
        return cls(settings.msteams_webhook_url, options)

    @classmethod
    def from_config(cls, config: dict, options: Optional[Options] = None) -> "TeamsProvider":
        """
        Config shape: { "webhook_url": str }
        """
        return cls(config.get("webhook_url") or config.get("url", ""), options)

    async def send(self, payload: TeamsPayload) -> None:
        self._require(webhook_url=self._webhook_url)

        request = format_teams(self._webhook_url, payload)
        # Teams answers 202 when the card is queued
        await deliver(self.provider_type, request, self.options, accepted={200, 202})

        logger.info("Notification sent via Teams")
