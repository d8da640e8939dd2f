"""
FastAPI entry point — Telegram webhook server.

This module is the Composition Root for the HTTP deployment: it wires the
quote provider and the Telegram delivery channel and hands inbound messages
to the ConversationRegistry. The webhook acknowledges immediately; the reply
is produced in a background task and sent through the Bot API.

Run locally:
    uvicorn src.infrastructure.entrypoints.fastapi_app:app --reload --port 8000
"""

import hmac
import logging
from contextlib import asynccontextmanager

import httpx
from fastapi import BackgroundTasks, Depends, FastAPI, HTTPException, Request
from fastapi.responses import PlainTextResponse
from pydantic import BaseModel

from src.domain.ports.delivery_channel_port import IDeliveryChannel
from src.domain.ports.stock_data_port import IQuoteProvider
from src.infrastructure.config.settings import Settings, load_settings
from src.infrastructure.delivery.telegram_channel import TelegramDeliveryChannel
from src.infrastructure.entrypoints.composition import build_quote_provider, build_registry
from src.infrastructure.observability.logging_setup import configure_logging

logger = logging.getLogger(__name__)

SECRET_HEADER = "X-Telegram-Bot-Api-Secret-Token"


class TelegramChat(BaseModel):
    id: int


class TelegramMessage(BaseModel):
    chat: TelegramChat
    text: str | None = None


class TelegramUpdate(BaseModel):
    """The subset of a Telegram Update the bot reads; other fields are ignored."""

    update_id: int | None = None
    message: TelegramMessage | None = None


def create_app(
    settings: Settings | None = None,
    *,
    quote_provider: IQuoteProvider | None = None,
    telegram_channel: IDeliveryChannel | None = None,
) -> FastAPI:
    """Build the FastAPI app.

    Args:
        settings:         Settings to use; read from the environment when omitted.
        quote_provider:   Overrides the provider named in settings (tests).
        telegram_channel: Overrides the Telegram Bot API channel (tests).
    """
    settings = settings or load_settings()
    configure_logging(settings.log_level)

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        async with httpx.AsyncClient(timeout=settings.http_timeout) as http:
            provider = quote_provider or build_quote_provider(settings, http)
            app.state.registry = build_registry(provider, clock=settings.market_clock())
            app.state.telegram = telegram_channel or TelegramDeliveryChannel(
                settings.telegram_bot_token, http=http
            )
            if telegram_channel is None and not settings.has_telegram():
                logger.warning("TELEGRAM_BOT_TOKEN not set; replies cannot be delivered")
            logger.info("Quote bot ready (provider=%s)", settings.quote_provider)
            yield

    app = FastAPI(title="Stock Quote Bot", lifespan=lifespan)

    async def verify_telegram_secret(request: Request) -> None:
        """FastAPI dependency: check Telegram's secret-token header when one is configured."""
        expected = settings.telegram_webhook_secret
        received = request.headers.get(SECRET_HEADER, "")
        if expected and not hmac.compare_digest(received.encode(), expected.encode()):
            raise HTTPException(status_code=401, detail="Invalid webhook secret token.")

    @app.get("/", response_class=PlainTextResponse)
    async def root():
        return "Running app"

    @app.get("/health")
    async def health():
        return {"status": "ok"}

    @app.post(
        "/telegram",
        response_class=PlainTextResponse,
        dependencies=[Depends(verify_telegram_secret)],
    )
    async def telegram_webhook(
        update: TelegramUpdate,
        request: Request,
        background_tasks: BackgroundTasks,
    ):
        """Acknowledge a Telegram update and answer its message in the background."""
        if update.message is None:
            logger.debug("Ignoring update %s without a message", update.update_id)
            return "ok"
        background_tasks.add_task(
            request.app.state.registry.dispatch,
            str(update.message.chat.id),
            update.message.text,
            request.app.state.telegram,
        )
        return "ok"

    return app


app = create_app()
