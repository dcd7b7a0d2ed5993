"""Pydantic models for LINE Flex Messages."""

from typing import Annotated, Literal, Optional, Union

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel


class LineModel(BaseModel):
    """Base for LINE wire models; fields are sent in camelCase."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class Action(LineModel):
    type: str  # "uri", "postback", "message"
    label: Optional[str] = None
    uri: Optional[str] = None
    data: Optional[str] = None
    text: Optional[str] = None


class BlockStyle(LineModel):
    background_color: Optional[str] = None
    separator: Optional[bool] = None
    separator_color: Optional[str] = None


class BubbleStyles(LineModel):
    header: Optional[BlockStyle] = None
    hero: Optional[BlockStyle] = None
    body: Optional[BlockStyle] = None
    footer: Optional[BlockStyle] = None


class TextComponent(LineModel):
    type: Literal["text"] = "text"
    text: str
    flex: Optional[int] = None
    margin: Optional[str] = None
    size: Optional[str] = None
    align: Optional[str] = None
    weight: Optional[str] = None
    color: Optional[str] = None
    wrap: Optional[bool] = None
    action: Optional[Action] = None


class ImageComponent(LineModel):
    type: Literal["image"] = "image"
    url: str
    flex: Optional[int] = None
    margin: Optional[str] = None
    align: Optional[str] = None
    gravity: Optional[str] = None
    size: Optional[str] = None
    aspect_ratio: Optional[str] = None
    aspect_mode: Optional[str] = None
    action: Optional[Action] = None


class ButtonComponent(LineModel):
    type: Literal["button"] = "button"
    action: Action
    flex: Optional[int] = None
    margin: Optional[str] = None
    height: Optional[str] = None
    style: Optional[str] = None  # "link", "primary", "secondary"
    color: Optional[str] = None


class SeparatorComponent(LineModel):
    type: Literal["separator"] = "separator"
    margin: Optional[str] = None
    color: Optional[str] = None


class BoxComponent(LineModel):
    type: Literal["box"] = "box"
    layout: str  # "horizontal", "vertical", "baseline"
    contents: list["FlexComponent"] = []
    flex: Optional[int] = None
    spacing: Optional[str] = None
    margin: Optional[str] = None
    action: Optional[Action] = None


FlexComponent = Annotated[
    Union[BoxComponent, TextComponent, ImageComponent, ButtonComponent, SeparatorComponent],
    Field(discriminator="type"),
]

BoxComponent.model_rebuild()


class BubbleContainer(LineModel):
    type: Literal["bubble"] = "bubble"
    header: Optional[BoxComponent] = None
    hero: Optional[ImageComponent] = None
    body: Optional[BoxComponent] = None
    footer: Optional[BoxComponent] = None
    styles: Optional[BubbleStyles] = None


class CarouselContainer(LineModel):
    type: Literal["carousel"] = "carousel"
    contents: list[BubbleContainer]


FlexContainer = Annotated[
    Union[BubbleContainer, CarouselContainer],
    Field(discriminator="type"),
]


class FlexMessage(LineModel):
    """A Flex Message: alternative text plus a bubble or carousel layout."""
    alt_text: str
    contents: FlexContainer
