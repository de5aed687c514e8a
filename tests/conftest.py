from __future__ import annotations

import pytest

from baipiao_bot.core.dispatcher import Dispatcher
from tests.helpers import RecordingBot


@pytest.fixture
def bot() -> RecordingBot:
    return RecordingBot()


@pytest.fixture
def dispatcher(bot: RecordingBot) -> Dispatcher:
    return Dispatcher(bot)
