"""Pydantic models for the Telegram Bot API."""

from typing import Any, Optional, Union

from pydantic import BaseModel


class InlineKeyboardButton(BaseModel):
    text: str
    url: Optional[str] = None
    callback_data: Optional[str] = None


class InlineKeyboardMarkup(BaseModel):
    inline_keyboard: list[list[InlineKeyboardButton]]


class KeyboardButton(BaseModel):
    text: str


class ReplyKeyboardMarkup(BaseModel):
    keyboard: list[list[KeyboardButton]]
    resize_keyboard: Optional[bool] = None
    one_time_keyboard: Optional[bool] = None


class TelegramPayload(BaseModel):
    """
    Body of a ``sendMessage`` or ``sendPhoto`` call.

    A non-empty ``photo`` selects ``sendPhoto``; ``caption`` is its text.
    """
    chat_id: str = ""
    text: Optional[str] = None
    parse_mode: Optional[str] = None  # "MarkdownV2", "HTML", "Markdown"
    disable_web_page_preview: Optional[bool] = None
    disable_notification: Optional[bool] = None
    reply_to_message_id: Optional[int] = None
    # Other markups (ForceReply, ReplyKeyboardRemove) may be given as plain dicts
    reply_markup: Optional[
        Union[InlineKeyboardMarkup, ReplyKeyboardMarkup, dict[str, Any]]
    ] = None
    photo: Optional[str] = None  # URL for sendPhoto
    caption: Optional[str] = None
