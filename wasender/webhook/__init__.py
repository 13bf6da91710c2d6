"""Webhook verification, dispatch and receiving."""

from wasender.webhook.dispatcher import dispatch_webhook_event, parse_webhook_body
from wasender.webhook.handlers import WebhookHandler, WebhookHandlerRegistry
from wasender.webhook.signature import WEBHOOK_SIGNATURE_HEADER, verify_wasender_webhook_signature

__all__ = [
    "WEBHOOK_SIGNATURE_HEADER",
    "WebhookHandler",
    "WebhookHandlerRegistry",
    "dispatch_webhook_event",
    "parse_webhook_body",
    "verify_wasender_webhook_signature",
]
