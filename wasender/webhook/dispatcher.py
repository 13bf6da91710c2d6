"""Webhook dispatch -- resolves a raw delivery to a typed event.

``dispatch_webhook_event`` never raises.  The outcome is always one of:

- a typed event from ``WEBHOOK_EVENT_REGISTRY`` (known name, payload fits),
- ``InvalidWebhookEvent`` (known name, payload does not fit),
- ``FallbackWebhookEvent`` with the original name (unknown name),
- ``FallbackWebhookEvent`` with ``kind="unknown"`` (no usable name).

Payloads are validated in strict mode by wire name only: values are never
coerced, Python attribute names are not accepted as keys, and fields the
models do not declare are kept.  The input is never mutated.
"""

from __future__ import annotations

import json
from collections.abc import Mapping
from typing import Any

from loguru import logger
from pydantic import ValidationError

from wasender.models.enums import UNKNOWN_EVENT
from wasender.models.events import (
    WEBHOOK_EVENT_REGISTRY,
    AnyWebhookEvent,
    FallbackWebhookEvent,
    InvalidWebhookEvent,
)


def _malformed(raw: Any) -> FallbackWebhookEvent:
    logger.debug("Webhook: delivery without event name ({})", type(raw).__name__)
    return FallbackWebhookEvent(kind=UNKNOWN_EVENT, payload=raw, raw=raw)


def dispatch_webhook_event(raw: Any) -> AnyWebhookEvent:
    """Resolve a JSON-decoded webhook delivery to an event value."""
    if not isinstance(raw, Mapping):
        return _malformed(raw)

    name = raw.get("event")
    if not isinstance(name, str) or not name:
        return _malformed(raw)

    event_cls = WEBHOOK_EVENT_REGISTRY.get(name)
    if event_cls is None:
        logger.info("Webhook: unrecognised event {!r}, passing through", name)
        return FallbackWebhookEvent(
            kind=name,
            timestamp=raw.get("timestamp"),
            session_id=raw.get("sessionId"),
            payload=raw.get("data"),
            raw=raw,
        )

    try:
        event = event_cls.model_validate(dict(raw), strict=True, by_alias=True, by_name=False)
    except ValidationError as exc:
        logger.warning("Webhook: {} payload does not match its shape ({} errors)", name, exc.error_count())
        return InvalidWebhookEvent(
            kind=name,
            timestamp=raw.get("timestamp"),
            session_id=raw.get("sessionId"),
            payload=raw.get("data"),
            raw=raw,
            errors=exc.errors(include_url=False, include_context=False, include_input=False),
        )

    logger.debug("Webhook: dispatched {} (session={})", name, event.session_id)
    return event


def parse_webhook_body(body: bytes | str) -> AnyWebhookEvent:
    """Decode a raw HTTP body as JSON and dispatch it.

    Bodies that are not valid UTF-8 JSON become a ``kind="unknown"`` fallback
    whose ``raw`` is the body as received (bytes stay bytes).  JSON nested
    too deeply to decode is treated the same way.
    """
    if isinstance(body, bytes):
        try:
            text = body.decode("utf-8")
        except UnicodeDecodeError:
            logger.warning("Webhook: body is not valid UTF-8 ({} bytes)", len(body))
            return _malformed(body)
    else:
        text = body
    try:
        raw = json.loads(text)
    except (ValueError, RecursionError):
        logger.warning("Webhook: body is not decodable JSON ({} chars)", len(text))
        return _malformed(text)
    return dispatch_webhook_event(raw)
