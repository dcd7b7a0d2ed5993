#!/usr/bin/env python3
"""
Send a test notification to every configured provider.

Providers are enabled by environment variables (or a .env file):
    DISCORD_WEBHOOK_URL
    LINE_CHANNEL_TOKEN + LINE_USER_ID
    TELEGRAM_TOKEN + TELEGRAM_CHAT_ID
    MSTEAMS_WEBHOOK_URL

Usage:
    pip install -e .
    python scripts/send_notification.py --title "Hello" --content "It works"
"""

import argparse
import asyncio
import logging
import sys

from notifykit import Message, dispatch, providers_from_settings
from notifykit.config import Settings


def parse_args(argv=None):
    parser = argparse.ArgumentParser(description=__doc__.splitlines()[1])
    parser.add_argument("--title", default="Hello from notifykit!")
    parser.add_argument(
        "--content",
        default="This is a test notification sent from the notifykit library.",
    )
    parser.add_argument("--image-url", default=None)
    parser.add_argument("--color", default="#00FF00", help="Hex color, used by Discord")
    parser.add_argument("-v", "--verbose", action="store_true")
    return parser.parse_args(argv)


async def run(args) -> int:
    providers = providers_from_settings(Settings())
    if not providers:
        print("ERROR: no providers configured. Set DISCORD_WEBHOOK_URL, LINE_CHANNEL_TOKEN,")
        print("TELEGRAM_TOKEN or MSTEAMS_WEBHOOK_URL (see the top of this script).")
        return 1

    message = Message(
        title=args.title,
        content=args.content,
        image_url=args.image_url,
        color=args.color,
    )

    failed = 0
    for result in await dispatch(providers, message):
        if result.ok:
            print(f"{result.provider_type}: sent")
        else:
            failed += 1
            print(f"{result.provider_type}: FAILED ({result.error})")

    return 1 if failed else 0


def main(argv=None) -> int:
    args = parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    return asyncio.run(run(args))


if __name__ == "__main__":
    sys.exit(main())
