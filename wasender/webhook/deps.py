"""FastAPI dependencies for the webhook receiver.

Usage in route handlers::

    @app.post("/webhook", dependencies=[Depends(require_valid_signature)])
    async def receive(handlers: Handlers) -> dict:
        ...

The receiver refuses deliveries with HTTP 503 while no webhook secret is
configured, and with HTTP 401 when the signature header does not match.
"""

from __future__ import annotations

from typing import Annotated

from fastapi import Depends, Header, HTTPException, Request, status
from loguru import logger

from wasender.settings import WasenderSettings
from wasender.webhook.handlers import WebhookHandlerRegistry
from wasender.webhook.signature import WEBHOOK_SIGNATURE_HEADER, verify_wasender_webhook_signature


def get_settings_dep(request: Request) -> WasenderSettings:
    return request.app.state.settings


def get_handlers(request: Request) -> WebhookHandlerRegistry:
    return request.app.state.handlers


Settings = Annotated[WasenderSettings, Depends(get_settings_dep)]
"""Annotated dependency: the receiver's settings."""

Handlers = Annotated[WebhookHandlerRegistry, Depends(get_handlers)]
"""Annotated dependency: the receiver's handler registry."""


async def require_valid_signature(
    settings: Settings,
    signature: Annotated[str | None, Header(alias=WEBHOOK_SIGNATURE_HEADER)] = None,
) -> None:
    """Reject the request unless its signature header matches the secret."""
    secret = settings.webhook_secret_value()
    if secret is None:
        raise HTTPException(
            status_code=status.HTTP_503_SERVICE_UNAVAILABLE,
            detail="Webhook secret not configured (WASENDER_WEBHOOK_SECRET is unset or empty).",
        )
    if not verify_wasender_webhook_signature(signature, secret):
        logger.warning("Webhook: rejected delivery with invalid signature")
        raise HTTPException(status_code=status.HTTP_401_UNAUTHORIZED, detail="Invalid webhook signature.")
