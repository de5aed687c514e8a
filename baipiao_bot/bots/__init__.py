"""Registry of bots that the entry points can host by name."""

from __future__ import annotations

from baipiao_bot.bots.echo import EchoBot
from baipiao_bot.core.types import Bot

BOTS: dict[str, type[Bot]] = {
    "echo": EchoBot,
    "noop": Bot,
}


def create_bot(name: str) -> Bot:
    """Instantiate the bot registered under `name`. Raises KeyError if unknown."""
    try:
        bot_cls = BOTS[name]
    except KeyError:
        raise KeyError(f"Unknown bot {name!r} (available: {', '.join(sorted(BOTS))})") from None
    return bot_cls()
