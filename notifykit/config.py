from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    # Discord
    discord_webhook_url: str = ""

    # LINE Messaging API
    line_channel_token: str = ""
    line_user_id: str = ""  # user, group or room ID

    # Telegram Bot API
    telegram_token: str = ""
    telegram_chat_id: str = ""

    # Microsoft Teams incoming webhook
    msteams_webhook_url: str = ""

    # HTTP request timeout (seconds)
    http_timeout: float = 10

    model_config = {"env_file": ".env", "extra": "ignore"}


settings = Settings()
