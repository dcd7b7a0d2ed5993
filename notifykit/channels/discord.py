"""Discord channel mapper."""

import re
from typing import Optional, Union

from notifykit.channels import ChannelPayload, encode_json
from notifykit.errors import UnsupportedPayloadError
from notifykit.message import Message
from notifykit.schemas.discord import Embed, EmbedImage, WebhookPayload

DiscordPayload = Union[str, Message, WebhookPayload, Embed]

HEX_COLOR = re.compile(r"[0-9A-Fa-f]{1,6}")


def format_discord(webhook_url: str, payload: DiscordPayload) -> ChannelPayload:
    """
    Format a notification for a Discord webhook.

    Accepts:
        - str: plain message content
        - Message: rendered as a single embed
        - WebhookPayload: sent unchanged
        - Embed: wrapped in a webhook payload
    """
    match payload:
        case str():
            webhook_body = WebhookPayload(content=payload or None)
        case Message():
            webhook_body = WebhookPayload(embeds=[_message_embed(payload)])
        case WebhookPayload():
            webhook_body = payload
        case Embed():
            webhook_body = WebhookPayload(embeds=[payload])
        case _:
            raise UnsupportedPayloadError("discord", payload)

    return ChannelPayload(
        method="POST",
        url=webhook_url,
        headers={"Content-Type": "application/json"},
        body=encode_json(webhook_body),
    )


def _message_embed(message: Message) -> Embed:
    embed = Embed(description=message.content or None)
    if message.title:
        embed.title = message.title
    if message.image_url:
        embed.image = EmbedImage(url=message.image_url)
    if message.color:
        # Unparseable colors are dropped rather than rejected
        embed.color = parse_color(message.color)
    return embed


def parse_color(value: str) -> Optional[int]:
    """Parse a hex color such as ``#00FF00`` into Discord's integer form."""
    digits = value.removeprefix("#")
    if not HEX_COLOR.fullmatch(digits):
        return None
    return int(digits, 16)
