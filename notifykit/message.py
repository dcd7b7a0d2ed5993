"""Canonical notification message shared by every provider."""

from dataclasses import dataclass
from typing import Optional


@dataclass(frozen=True)
class Message:
    """
    A provider-neutral notification.

    Each provider renders the fields it supports:
        - title: subject line (Discord, LINE, Telegram, Teams)
        - content: main body text
        - image_url: URL of an image to attach
        - color: hex string such as "#FF0000" (Discord embeds)
    """
    title: Optional[str] = None
    content: str = ""
    image_url: Optional[str] = None
    color: Optional[str] = None
