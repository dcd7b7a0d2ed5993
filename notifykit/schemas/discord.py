"""Pydantic models for the Discord webhook API."""

from typing import Optional

from pydantic import BaseModel


class EmbedFooter(BaseModel):
    text: str
    icon_url: Optional[str] = None
    proxy_icon_url: Optional[str] = None


class EmbedImage(BaseModel):
    url: str
    proxy_url: Optional[str] = None
    height: Optional[int] = None
    width: Optional[int] = None


class EmbedVideo(BaseModel):
    url: Optional[str] = None
    proxy_url: Optional[str] = None
    height: Optional[int] = None
    width: Optional[int] = None


class EmbedProvider(BaseModel):
    name: Optional[str] = None
    url: Optional[str] = None


class EmbedAuthor(BaseModel):
    name: str
    url: Optional[str] = None
    icon_url: Optional[str] = None
    proxy_icon_url: Optional[str] = None


class EmbedField(BaseModel):
    name: str
    value: str
    inline: Optional[bool] = None


class Embed(BaseModel):
    """A Discord embed (rich content block)."""
    title: Optional[str] = None
    type: Optional[str] = None  # "rich"
    description: Optional[str] = None
    url: Optional[str] = None
    timestamp: Optional[str] = None  # ISO8601
    color: Optional[int] = None
    footer: Optional[EmbedFooter] = None
    image: Optional[EmbedImage] = None
    thumbnail: Optional[EmbedImage] = None
    video: Optional[EmbedVideo] = None
    provider: Optional[EmbedProvider] = None
    author: Optional[EmbedAuthor] = None
    fields: Optional[list[EmbedField]] = None


class WebhookPayload(BaseModel):
    """Body of an ``Execute Webhook`` request."""
    content: Optional[str] = None
    username: Optional[str] = None
    avatar_url: Optional[str] = None
    tts: Optional[bool] = None
    embeds: Optional[list[Embed]] = None
