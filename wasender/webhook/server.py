"""Webhook receiver: a small FastAPI app in front of the dispatcher.

``POST /webhook`` checks the signature header, dispatches the body and hands
the event to the registered handlers.  Unknown and malformed deliveries are
acknowledged with 200 so the platform does not retry them; they reach the
fallback handlers instead.
"""

from __future__ import annotations

from collections.abc import AsyncIterator
from contextlib import asynccontextmanager

from fastapi import Depends, FastAPI, Request
from loguru import logger

from wasender.settings import WasenderSettings, get_settings
from wasender.webhook.deps import Handlers, require_valid_signature
from wasender.webhook.dispatcher import parse_webhook_body
from wasender.webhook.handlers import WebhookHandlerRegistry


def create_webhook_app(
    settings: WasenderSettings | None = None,
    handlers: WebhookHandlerRegistry | None = None,
) -> FastAPI:
    """Build the receiver app.

    ``settings`` defaults to ``get_settings()``; ``handlers`` defaults to an
    empty registry (deliveries are acknowledged and dropped).
    """
    settings = settings or get_settings()
    handlers = handlers if handlers is not None else WebhookHandlerRegistry()

    @asynccontextmanager
    async def lifespan(_app: FastAPI) -> AsyncIterator[None]:
        logger.info("Webhook receiver starting (handlers={})", handlers.handler_count)
        if settings.webhook_secret_value() is None:
            logger.warning("WASENDER_WEBHOOK_SECRET not set -- all deliveries will be refused")
        yield
        logger.info("Webhook receiver shutting down")

    app = FastAPI(title="Wasender Webhook Receiver", lifespan=lifespan)
    app.state.settings = settings
    app.state.handlers = handlers

    @app.get("/health")
    async def health() -> dict[str, str]:
        return {"status": "ok"}

    @app.post("/webhook", dependencies=[Depends(require_valid_signature)])
    async def receive_webhook(request: Request, registry: Handlers) -> dict[str, str | int]:
        """Accept one webhook delivery."""
        event = parse_webhook_body(await request.body())
        called = await registry.emit(event)
        logger.info("Webhook: {} delivered to {} handler(s)", event.kind, called)
        return {"status": "ok", "event": event.kind, "handled": called}

    return app
