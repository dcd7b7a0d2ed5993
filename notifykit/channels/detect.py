"""Auto-detection of channel type from a webhook URL."""


def detect_channel_type(url: str) -> str:
    """
    Detect the channel type from a webhook URL.

    Returns:
        Channel type string: 'discord', 'teams', or 'webhook' when unknown
    """
    url_lower = url.lower()

    if "discord.com/api/webhooks" in url_lower or "discordapp.com/api/webhooks" in url_lower:
        return "discord"

    if "webhook.office.com" in url_lower or "logic.azure.com" in url_lower:
        return "teams"

    return "webhook"
