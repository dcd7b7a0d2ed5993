"""Telegram Bot API provider."""

import logging
from typing import Optional

from notifykit.channels.telegram import TelegramInput, format_telegram, telegram_method
from notifykit.config import Settings
from notifykit.options import Options
from notifykit.providers.base import Notifier
from notifykit.transport import deliver

logger = logging.getLogger(__name__)


class TelegramProvider(Notifier):
    """Send messages and photos to a Telegram chat through a bot."""

    @property
    def provider_type(self) -> str:
        return "telegram"

    def __init__(self, token: str, chat_id: str, options: Optional[Options] = None):
        super().__init__(options)
        self._token = token
        self._chat_id = chat_id

    @classmethod
    def from_settings(
        cls,
        settings: Optional[Settings] = None,
        options: Optional[Options] = None,
    ) -> Optional["TelegramProvider"]:
        """Create a TelegramProvider from settings. Returns None if not configured."""
        if settings is None:
            from notifykit.config import settings

        if not settings.telegram_token or not settings.telegram_chat_id:
            return None
        return cls(settings.telegram_token, settings.telegram_chat_id, options)

    @classmethod
    def from_config(cls, config: dict, options: Optional[Options] = None) -> "TelegramProvider":
        """
        Config shape: { "token": str, "chat_id": str }
        """
        return cls(config.get("token", ""), str(config.get("chat_id", "")), options)

    async def send(self, payload: TelegramInput) -> None:
        self._require(token=self._token, chat_id=self._chat_id)

        request = format_telegram(self._token, self._chat_id, payload)
        await deliver(self.provider_type, request, self.options, accepted={200})

        # The request URL carries the bot token, so only the method is logged
        logger.info(
            "Notification sent via Telegram method=%s chat_id=%s",
            telegram_method(payload),
            self._chat_id,
        )
