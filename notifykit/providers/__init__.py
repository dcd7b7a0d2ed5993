"""Notification provider implementations."""

from notifykit.providers.base import Notifier
from notifykit.providers.discord import DiscordProvider
from notifykit.providers.line import LineProvider
from notifykit.providers.telegram import TelegramProvider
from notifykit.providers.teams import TeamsProvider
from notifykit.providers.resolver import build_provider, providers_from_settings

__all__ = [
    "Notifier",
    "DiscordProvider",
    "LineProvider",
    "TelegramProvider",
    "TeamsProvider",
    "build_provider",
    "providers_from_settings",
]
