"""LINE Messaging API channel mapper."""

from typing import Any, Union

from notifykit.channels import ChannelPayload, encode_json
from notifykit.errors import EmptyMessageError, UnsupportedPayloadError
from notifykit.message import Message
from notifykit.schemas.line import FlexMessage

LINE_PUSH_URL = "https://api.line.me/v2/bot/message/push"

LinePayload = Union[str, Message, FlexMessage]


def format_line(channel_token: str, target_id: str, payload: LinePayload) -> ChannelPayload:
    """
    Format a push message for the LINE Messaging API.

    Args:
        channel_token: Channel access token
        target_id: User, group or room ID to push to
        payload: str, Message or FlexMessage
    """
    match payload:
        case str():
            messages = [_text(payload)]
        case Message():
            messages = _message_objects(payload)
        case FlexMessage():
            messages = [
                {
                    "type": "flex",
                    "altText": payload.alt_text,
                    "contents": payload.contents,
                }
            ]
        case _:
            raise UnsupportedPayloadError("line", payload)

    if not messages:
        raise EmptyMessageError("line: no messages to send")

    return ChannelPayload(
        method="POST",
        url=LINE_PUSH_URL,
        headers={
            "Content-Type": "application/json",
            "Authorization": f"Bearer {channel_token}",
        },
        body=encode_json({"to": target_id, "messages": messages}),
    )


def _message_objects(message: Message) -> list[dict[str, Any]]:
    """Image first, then text; a title without content is not sent."""
    messages = []
    if message.image_url:
        messages.append(
            {
                "type": "image",
                "originalContentUrl": message.image_url,
                "previewImageUrl": message.image_url,
            }
        )
    if message.content:
        text = message.content
        if message.title:
            text = f"{message.title}\n{message.content}"
        messages.append(_text(text))
    return messages


def _text(text: str) -> dict[str, Any]:
    return {"type": "text", "text": text}
