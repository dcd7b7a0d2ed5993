"""LINE Messaging API provider."""

import logging
from typing import Optional

from notifykit.channels.line import LinePayload, format_line
from notifykit.config import Settings
from notifykit.options import Options
from notifykit.providers.base import Notifier
from notifykit.transport import deliver

logger = logging.getLogger(__name__)


class LineProvider(Notifier):
    """Push messages to a LINE user, group or room via the Messaging API."""

    @property
    def provider_type(self) -> str:
        return "line"

    def __init__(self, channel_token: str, target_id: str, options: Optional[Options] = None):
        super().__init__(options)
        self._channel_token = channel_token
        self._target_id = target_id

    @classmethod
    def from_settings(
        cls,
        settings: Optional[Settings] = None,
        options: Optional[Options] = None,
    ) -> Optional["LineProvider"]:
        """Create a LineProvider from settings. Returns None if not configured."""
        if settings is None:
            from notifykit.config import settings

        if not settings.line_channel_token or not settings.line_user_id:
            return None
        return cls(settings.line_channel_token, settings.line_user_id, options)

    @classmethod
    def from_config(cls, config: dict, options: Optional[Options] = None) -> "LineProvider":
        """
        Config shape: { "channel_token": str, "target_id": str }
        """
        return cls(config.get("channel_token", ""), config.get("target_id", ""), options)

    async def send(self, payload: LinePayload) -> None:
        self._require(channel_token=self._channel_token, target_id=self._target_id)

        request = format_line(self._channel_token, self._target_id, payload)
        await deliver(self.provider_type, request, self.options, accepted={200})

        logger.info("Notification sent via LINE to=%s", self._target_id)
