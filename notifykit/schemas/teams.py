"""Pydantic models for Microsoft Teams Adaptive Cards."""

from typing import Any, Literal, Optional, Union

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

ADAPTIVE_CARD_CONTENT_TYPE = "application/vnd.microsoft.card.adaptive"
ADAPTIVE_CARD_SCHEMA = "http://adaptivecards.io/schemas/adaptive-card.json"
ADAPTIVE_CARD_VERSION = "1.2"


class CardModel(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class TextBlock(CardModel):
    type: Literal["TextBlock"] = "TextBlock"
    text: str
    size: Optional[str] = None
    weight: Optional[str] = None
    color: Optional[str] = None
    wrap: Optional[bool] = None


class Image(CardModel):
    type: Literal["Image"] = "Image"
    url: str
    size: Optional[str] = None
    alt_text: Optional[str] = None


class Fact(CardModel):
    title: str
    value: str


class FactSet(CardModel):
    type: Literal["FactSet"] = "FactSet"
    facts: list[Fact]


class ActionOpenUrl(CardModel):
    type: Literal["Action.OpenUrl"] = "Action.OpenUrl"
    title: str
    url: str


# Elements without a model here (ColumnSet, Container, ...) may be given as dicts
CardElement = Union[TextBlock, Image, FactSet, dict[str, Any]]
CardAction = Union[ActionOpenUrl, dict[str, Any]]


class AdaptiveCard(CardModel):
    """
    An Adaptive Card.

    ``type``, ``version`` and ``$schema`` are filled in when the card is sent
    if left unset.
    """
    type: Optional[str] = None  # "AdaptiveCard"
    version: Optional[str] = None
    schema_: Optional[str] = Field(None, alias="$schema")
    body: list[CardElement] = []
    actions: Optional[list[CardAction]] = None


class Attachment(CardModel):
    content_type: str = ADAPTIVE_CARD_CONTENT_TYPE
    content: AdaptiveCard


class TeamsWebhookPayload(CardModel):
    """Envelope posted to a Teams incoming webhook."""
    type: str = "message"
    attachments: list[Attachment]
