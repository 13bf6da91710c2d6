"""In-process registry of webhook event handlers.

Maps event names to the callables interested in them.  Handlers may be plain
functions or coroutines; ``emit`` awaits the latter.  Registration order is
call order.  Errors raised by a handler propagate to the caller of ``emit``.
"""

from __future__ import annotations

import inspect
from collections import defaultdict
from collections.abc import Awaitable, Callable
from typing import Any

from loguru import logger

from wasender.models.events import AnyWebhookEvent, FallbackWebhookEvent

WebhookHandler = Callable[[Any], Awaitable[None] | None]


class WebhookHandlerRegistry:
    """Routes dispatched events to application handlers.

    Handlers registered for a name receive every event with that ``kind``,
    including fallback events for names the SDK does not know yet.
    Fallback handlers receive every ``FallbackWebhookEvent`` (and so every
    ``InvalidWebhookEvent``) regardless of name.

    Usage::

        handlers = WebhookHandlerRegistry()

        @handlers.on(WebhookEventType.MESSAGES_UPSERT)
        async def on_message(event: MessagesUpsertEvent) -> None:
            ...
    """

    def __init__(self) -> None:
        self._handlers: dict[str, list[WebhookHandler]] = defaultdict(list)
        self._fallback_handlers: list[WebhookHandler] = []

    # -- Registration ----------------------------------------------------------

    def register(self, kind: str, handler: WebhookHandler) -> None:
        logger.debug("Handlers: register {} for {}", getattr(handler, "__name__", handler), kind)
        self._handlers[str(kind)].append(handler)

    def on(self, kind: str) -> Callable[[WebhookHandler], WebhookHandler]:
        """Decorator form of ``register``."""

        def decorator(handler: WebhookHandler) -> WebhookHandler:
            self.register(kind, handler)
            return handler

        return decorator

    def on_fallback(self, handler: WebhookHandler) -> WebhookHandler:
        """Register a handler for unknown, malformed and invalid deliveries."""
        self._fallback_handlers.append(handler)
        return handler

    # -- Query -----------------------------------------------------------------

    def handlers_for(self, event: AnyWebhookEvent) -> list[WebhookHandler]:
        handlers = list(self._handlers.get(event.kind, ()))
        if isinstance(event, FallbackWebhookEvent):
            handlers.extend(self._fallback_handlers)
        return handlers

    @property
    def handler_count(self) -> int:
        return sum(len(h) for h in self._handlers.values()) + len(self._fallback_handlers)

    # -- Delivery --------------------------------------------------------------

    async def emit(self, event: AnyWebhookEvent) -> int:
        """Call every handler interested in *event*.

        Returns the number of handlers called.
        """
        handlers = self.handlers_for(event)
        if not handlers:
            logger.debug("Handlers: no handler for {}", event.kind)
            return 0
        for handler in handlers:
            result = handler(event)
            if inspect.isawaitable(result):
                await result
        return len(handlers)
