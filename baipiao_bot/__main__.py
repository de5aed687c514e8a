"""Dispatch one event envelope from the JSON environment variable or stdin.

    JSON="$(cat event.json)" python -m baipiao_bot
    python -m baipiao_bot < event.json
"""

from __future__ import annotations

import asyncio
import json
import logging
import sys

from baipiao_bot.bots import create_bot
from baipiao_bot.config import Settings, settings
from baipiao_bot.core.dispatcher import Dispatcher
from baipiao_bot.core.errors import DecodeError

logger = logging.getLogger("baipiao_bot")


async def run(config: Settings) -> int:
    """Read, decode and dispatch a single envelope. Returns the process exit code."""
    content = config.event_json or sys.stdin.read()
    try:
        payload = json.loads(content)
    except ValueError:
        logger.error("Event envelope is not valid JSON")
        return 1

    dispatcher = Dispatcher(
        create_bot(config.bot),
        require_running_info=config.require_running_info,
    )
    try:
        await dispatcher.dispatch_event(payload)
    except DecodeError as exc:
        logger.error("Cannot dispatch event: %s", exc)
        return 1
    return 0


def main() -> None:
    settings.configure_logging()
    sys.exit(asyncio.run(run(settings)))


if __name__ == "__main__":
    main()
