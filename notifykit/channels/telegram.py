"""Telegram Bot API channel mapper."""

from typing import Union

from notifykit.channels import ChannelPayload, encode_json
from notifykit.errors import UnsupportedPayloadError
from notifykit.message import Message
from notifykit.schemas.telegram import TelegramPayload

TELEGRAM_API_BASE = "https://api.telegram.org/bot"

SEND_MESSAGE = "sendMessage"
SEND_PHOTO = "sendPhoto"

TelegramInput = Union[str, Message, TelegramPayload]


def telegram_method(payload: TelegramInput) -> str:
    """Return the Bot API method a payload is delivered with."""
    match payload:
        case Message(image_url=image_url) if image_url:
            return SEND_PHOTO
        case TelegramPayload(photo=photo) if photo:
            return SEND_PHOTO
    return SEND_MESSAGE


def format_telegram(token: str, chat_id: str, payload: TelegramInput) -> ChannelPayload:
    """
    Format a notification for the Telegram Bot API.

    The method (sendMessage or sendPhoto) is chosen from the payload and
    appended to the bot URL, which embeds the token.
    """
    match payload:
        case str():
            request = TelegramPayload(chat_id=chat_id, text=payload, parse_mode="Markdown")
        case Message():
            text = payload.content
            if payload.title:
                text = f"*{payload.title}*\n{payload.content}"
            if payload.image_url:
                request = TelegramPayload(
                    chat_id=chat_id,
                    photo=payload.image_url,
                    caption=text,
                    parse_mode="Markdown",
                )
            else:
                request = TelegramPayload(chat_id=chat_id, text=text, parse_mode="Markdown")
        case TelegramPayload():
            request = payload
            if not request.chat_id:
                request = payload.model_copy(update={"chat_id": chat_id})
        case _:
            raise UnsupportedPayloadError("telegram", payload)

    return ChannelPayload(
        method="POST",
        url=f"{TELEGRAM_API_BASE}{token}/{telegram_method(payload)}",
        headers={"Content-Type": "application/json"},
        body=encode_json(request),
    )
