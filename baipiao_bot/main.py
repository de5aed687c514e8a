"""FastAPI app assembly: lifespan, dispatch endpoint, health check."""

from __future__ import annotations

import json
import logging
from collections.abc import AsyncIterator
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse

from baipiao_bot.bots import create_bot
from baipiao_bot.config import settings
from baipiao_bot.core.dispatcher import Dispatcher
from baipiao_bot.core.errors import DecodeError

logger = logging.getLogger(__name__)

# Module-level reference for access during requests
_dispatcher: Dispatcher | None = None


def get_dispatcher() -> Dispatcher:
    if _dispatcher is None:
        raise RuntimeError("Dispatcher is not initialised; is the app lifespan running?")
    return _dispatcher


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncIterator[None]:
    """App lifespan: build the dispatcher around the configured bot."""
    global _dispatcher

    settings.configure_logging()

    _dispatcher = Dispatcher(
        create_bot(settings.bot),
        require_running_info=settings.require_running_info,
    )
    logger.info("baipiao-bot started (bot: %s)", settings.bot)

    yield

    logger.info("Shutting down baipiao-bot...")
    _dispatcher = None


app = FastAPI(
    title="baipiao-bot",
    description="Decodes GitHub issue, pull request and comment events and dispatches them to a bot",
    version="0.1.0",
    lifespan=lifespan,
)


@app.post("/dispatch")
async def dispatch(request: Request) -> JSONResponse:
    raw_body = await request.body()
    try:
        payload = json.loads(raw_body)
    except ValueError:
        logger.warning("Dispatch request body is not valid JSON")
        return JSONResponse(status_code=400, content={"error": "invalid_json"})

    try:
        decoded = await get_dispatcher().dispatch_event(payload)
    except DecodeError as exc:
        return JSONResponse(
            status_code=422,
            content={"error": exc.kind.value, "detail": str(exc), "path": exc.path},
        )

    return JSONResponse(content={"status": "ok", "hook": decoded.hook})


@app.get("/health")
async def health() -> dict[str, str]:
    return {
        "status": "ok",
        "bot": settings.bot,
    }
