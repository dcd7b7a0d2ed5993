"""Provider resolution tests."""

import pytest

from notifykit.channels.detect import detect_channel_type
from notifykit.config import Settings
from notifykit.errors import ConfigError
from notifykit.options import Options
from notifykit.providers import (
    DiscordProvider,
    LineProvider,
    TeamsProvider,
    TelegramProvider,
    build_provider,
    providers_from_settings,
)


class TestDetectChannelType:
    @pytest.mark.parametrize(
        "url, expected",
        [
            ("https://discord.com/api/webhooks/1/abc", "discord"),
            ("https://DiscordApp.com/api/webhooks/1/abc", "discord"),
            ("https://contoso.webhook.office.com/webhookb2/x", "teams"),
            ("https://prod-00.westus.logic.azure.com/workflows/x", "teams"),
            ("https://hooks.example.com/notify", "webhook"),
        ],
    )
    def test_detect(self, url, expected):
        assert detect_channel_type(url) == expected


class TestBuildProvider:
    def test_discord(self):
        provider = build_provider("discord", {"webhook_url": "https://discord.com/api/webhooks/1/a"})
        assert isinstance(provider, DiscordProvider)

    def test_line(self):
        provider = build_provider("line", {"channel_token": "t", "target_id": "U1"})
        assert isinstance(provider, LineProvider)
        assert provider._target_id == "U1"

    def test_telegram_chat_id_is_stringified(self):
        provider = build_provider("telegram", {"token": "t", "chat_id": -100200})
        assert isinstance(provider, TelegramProvider)
        assert provider._chat_id == "-100200"

    def test_options_are_passed(self):
        options = Options().with_timeout(4)
        provider = build_provider("teams", {"webhook_url": "https://x.webhook.office.com/y"}, options)
        assert isinstance(provider, TeamsProvider)
        assert provider.options is options

    def test_webhook_detects_discord(self):
        provider = build_provider("webhook", {"url": "https://discord.com/api/webhooks/1/a"})
        assert isinstance(provider, DiscordProvider)
        assert provider._webhook_url == "https://discord.com/api/webhooks/1/a"

    def test_webhook_detects_teams(self):
        provider = build_provider("webhook", {"webhook_url": "https://x.webhook.office.com/y"})
        assert isinstance(provider, TeamsProvider)

    def test_webhook_unknown_url(self):
        with pytest.raises(ConfigError):
            build_provider("webhook", {"url": "https://hooks.example.com/x"})

    def test_unknown_type(self):
        with pytest.raises(ConfigError, match="Unknown provider type: slack"):
            build_provider("slack", {})


class TestProvidersFromSettings:
    def test_only_configured_providers_in_order(self):
        settings = Settings(
            msteams_webhook_url="https://x.webhook.office.com/y",
            telegram_token="t",
            telegram_chat_id="1",
            discord_webhook_url="https://discord.com/api/webhooks/1/a",
        )

        providers = providers_from_settings(settings)

        assert [p.provider_type for p in providers] == ["discord", "telegram", "teams"]

    def test_settings_timeout_applied(self):
        providers = providers_from_settings(
            Settings(discord_webhook_url="https://discord.com/api/webhooks/1/a", http_timeout=3)
        )
        assert providers[0].options.timeout == 3

    def test_explicit_timeout_wins(self):
        providers = providers_from_settings(
            Settings(discord_webhook_url="https://discord.com/api/webhooks/1/a", http_timeout=3),
            Options().with_timeout(7),
        )
        assert providers[0].options.timeout == 7

    def test_nothing_configured(self, caplog):
        assert providers_from_settings(Settings()) == []
        assert "No notification providers configured" in caplog.text
