"""Microsoft Teams channel mapper."""

from typing import Union

from notifykit.channels import ChannelPayload, encode_json
from notifykit.errors import UnsupportedPayloadError
from notifykit.message import Message
from notifykit.schemas.teams import (
    ADAPTIVE_CARD_SCHEMA,
    ADAPTIVE_CARD_VERSION,
    AdaptiveCard,
    Attachment,
    CardElement,
    Image,
    TeamsWebhookPayload,
    TextBlock,
)

TeamsPayload = Union[str, Message, AdaptiveCard]


def format_teams(webhook_url: str, payload: TeamsPayload) -> ChannelPayload:
    """
    Format a notification for a Teams incoming webhook using Adaptive Cards.

    Accepts:
        - str: a card with a single text block
        - Message: title, content and image blocks
        - AdaptiveCard: sent with missing type/version/$schema filled in
    """
    match payload:
        case str():
            card = AdaptiveCard(body=[TextBlock(text=payload, wrap=True)])
        case Message():
            card = AdaptiveCard(body=_message_body(payload))
        case AdaptiveCard():
            card = payload
        case _:
            raise UnsupportedPayloadError("teams", payload)

    teams_body = TeamsWebhookPayload(attachments=[Attachment(content=with_card_defaults(card))])

    return ChannelPayload(
        method="POST",
        url=webhook_url,
        headers={"Content-Type": "application/json"},
        body=encode_json(teams_body),
    )


def with_card_defaults(card: AdaptiveCard) -> AdaptiveCard:
    """Return a copy of ``card`` with unset envelope fields filled in."""
    defaults = {}
    if not card.type:
        defaults["type"] = "AdaptiveCard"
    if not card.version:
        defaults["version"] = ADAPTIVE_CARD_VERSION
    if not card.schema_:
        defaults["schema_"] = ADAPTIVE_CARD_SCHEMA
    return card.model_copy(update=defaults)


def _message_body(message: Message) -> list[CardElement]:
    body: list[CardElement] = []

    if message.title:
        body.append(TextBlock(text=message.title, weight="Bolder", size="Medium"))

    if message.content:
        body.append(TextBlock(text=message.content, wrap=True))

    if message.image_url:
        body.append(Image(url=message.image_url, size="Stretch"))

    return body
