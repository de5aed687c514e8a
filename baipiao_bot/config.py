from __future__ import annotations

import logging

from pydantic import Field
from pydantic_settings import BaseSettings

LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    model_config = {"env_file": ".env", "extra": "ignore", "populate_by_name": True}

    log_level: str = "INFO"
    bot: str = "echo"  # name in baipiao_bot.bots.BOTS
    require_running_info: bool = False  # reject envelopes without run_id / run_number

    # Envelope for `python -m baipiao_bot`; stdin is read when empty
    event_json: str = Field("", validation_alias="JSON")

    def configure_logging(self) -> None:
        logging.basicConfig(
            level=self.log_level.upper(),
            format=LOG_FORMAT,
        )


settings = Settings()
