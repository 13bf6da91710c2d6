"""Wasender SDK - typed client and webhook dispatcher for the Wasender API."""

from loguru import logger

from wasender.client import WasenderClient
from wasender.errors import WasenderAPIError
from wasender.models.enums import UNKNOWN_EVENT, WebhookEventType
from wasender.models.events import (
    WEBHOOK_EVENT_REGISTRY,
    AnyWebhookEvent,
    FallbackWebhookEvent,
    InvalidWebhookEvent,
    WebhookEvent,
)
from wasender.webhook import (
    WEBHOOK_SIGNATURE_HEADER,
    WebhookHandlerRegistry,
    dispatch_webhook_event,
    parse_webhook_body,
    verify_wasender_webhook_signature,
)

__version__ = "0.1.0"

# Library default: silent until the application calls ``setup_logging``
# or ``logger.enable("wasender")``.
logger.disable("wasender")

__all__ = [
    "UNKNOWN_EVENT",
    "WEBHOOK_EVENT_REGISTRY",
    "WEBHOOK_SIGNATURE_HEADER",
    "AnyWebhookEvent",
    "FallbackWebhookEvent",
    "InvalidWebhookEvent",
    "WasenderAPIError",
    "WasenderClient",
    "WebhookEvent",
    "WebhookEventType",
    "WebhookHandlerRegistry",
    "dispatch_webhook_event",
    "parse_webhook_body",
    "verify_wasender_webhook_signature",
]
