"""Webhook event models and the event-name registry.

Every delivery is ``{event, timestamp?, data, sessionId?}``.  Each known event
name has one class here whose ``kind`` field is a ``Literal`` of that name and
whose ``payload`` is the registered shape.  Names the SDK does not know become
``FallbackWebhookEvent``; known names whose payload does not fit become
``InvalidWebhookEvent``.

Adding an event: one ``WebhookEventType`` member, one class below, and one
member of the ``WebhookEvent`` union.
"""

from __future__ import annotations

from collections.abc import Mapping
from types import MappingProxyType
from typing import Any, Generic, Literal, TypeVar, get_args

from pydantic import Field

from wasender.models.common import WasenderModel
from wasender.models.contacts import ContactEntry, ContactEntryUpdate
from wasender.models.enums import UNKNOWN_EVENT, WebhookEventType
from wasender.models.groups import GroupMetadata, GroupMetadataUpdate
from wasender.models.payloads import (
    CallReceivedData,
    ChatEntry,
    ChatEntryUpdate,
    GroupParticipantsUpdateData,
    IncomingMessageData,
    MessageReceiptUpdateEntry,
    MessagesDeleteData,
    MessageSentData,
    MessagesReactionEntry,
    MessagesUpdateEntry,
    MessagesUpsertData,
    PollResultsData,
    QrCodeUpdatedData,
    SessionStatusData,
)

PayloadT = TypeVar("PayloadT")


class WebhookEnvelope(WasenderModel, Generic[PayloadT]):
    """Fields common to every typed webhook event."""

    timestamp: int | float | None = None
    """Unix timestamp (seconds) when the platform generated the event."""
    session_id: str | None = None
    payload: PayloadT = Field(alias="data")


# -- Chat --------------------------------------------------------------------


class ChatsUpsertEvent(WebhookEnvelope[list[ChatEntry]]):
    kind: Literal["chats.upsert"] = Field(alias="event")


class ChatsUpdateEvent(WebhookEnvelope[list[ChatEntryUpdate]]):
    kind: Literal["chats.update"] = Field(alias="event")


class ChatsDeleteEvent(WebhookEnvelope[list[str]]):
    """Payload is the list of deleted chat ids."""

    kind: Literal["chats.delete"] = Field(alias="event")


# -- Group -------------------------------------------------------------------


class GroupsUpsertEvent(WebhookEnvelope[list[GroupMetadata]]):
    kind: Literal["groups.upsert"] = Field(alias="event")


class GroupsUpdateEvent(WebhookEnvelope[list[GroupMetadataUpdate]]):
    kind: Literal["groups.update"] = Field(alias="event")


class GroupParticipantsUpdateEvent(WebhookEnvelope[GroupParticipantsUpdateData]):
    kind: Literal["group-participants.update"] = Field(alias="event")


# -- Contact -----------------------------------------------------------------


class ContactsUpsertEvent(WebhookEnvelope[list[ContactEntry]]):
    kind: Literal["contacts.upsert"] = Field(alias="event")


class ContactsUpdateEvent(WebhookEnvelope[list[ContactEntryUpdate]]):
    kind: Literal["contacts.update"] = Field(alias="event")


# -- Message -----------------------------------------------------------------


class MessagesUpsertEvent(WebhookEnvelope[MessagesUpsertData]):
    kind: Literal["messages.upsert"] = Field(alias="event")


class PersonalMessageReceivedEvent(WebhookEnvelope[IncomingMessageData]):
    kind: Literal["messages-personal.received"] = Field(alias="event")


class NewsletterMessageReceivedEvent(WebhookEnvelope[IncomingMessageData]):
    kind: Literal["messages-newsletter.received"] = Field(alias="event")


class GroupMessageReceivedEvent(WebhookEnvelope[IncomingMessageData]):
    kind: Literal["messages-group.received"] = Field(alias="event")


class MessageReceivedEvent(WebhookEnvelope[IncomingMessageData]):
    kind: Literal["messages.received"] = Field(alias="event")


class MessagesUpdateEvent(WebhookEnvelope[list[MessagesUpdateEntry]]):
    kind: Literal["messages.update"] = Field(alias="event")


class MessagesDeleteEvent(WebhookEnvelope[MessagesDeleteData]):
    kind: Literal["messages.delete"] = Field(alias="event")


class MessagesReactionEvent(WebhookEnvelope[list[MessagesReactionEntry]]):
    kind: Literal["messages.reaction"] = Field(alias="event")


class MessageReceiptUpdateEvent(WebhookEnvelope[list[MessageReceiptUpdateEntry]]):
    kind: Literal["message-receipt.update"] = Field(alias="event")


class MessageSentEvent(WebhookEnvelope[MessageSentData]):
    """A message left this session successfully."""

    kind: Literal["message.sent"] = Field(alias="event")


# -- Call / poll -------------------------------------------------------------


class CallReceivedEvent(WebhookEnvelope[CallReceivedData]):
    kind: Literal["call.received"] = Field(alias="event")


class PollResultsEvent(WebhookEnvelope[PollResultsData]):
    kind: Literal["poll.results"] = Field(alias="event")


# -- Session -----------------------------------------------------------------


class SessionStatusEvent(WebhookEnvelope[SessionStatusData]):
    kind: Literal["session.status"] = Field(alias="event")


class QrCodeUpdatedEvent(WebhookEnvelope[QrCodeUpdatedData]):
    kind: Literal["qrcode.updated"] = Field(alias="event")


# -- Fallback ----------------------------------------------------------------


class FallbackWebhookEvent(WasenderModel):
    """A delivery whose event name is unknown or missing.

    ``kind`` is the original event name verbatim, or ``"unknown"`` when the
    delivery had none.  The envelope fields are passed through untyped and
    ``raw`` holds the complete original value.
    """

    kind: str = Field(alias="event")
    timestamp: Any = None
    session_id: Any = None
    payload: Any = Field(default=None, alias="data")
    raw: Any = None


class InvalidWebhookEvent(FallbackWebhookEvent):
    """A known event name whose payload does not match its registered shape."""

    errors: list[dict[str, Any]] = Field(default_factory=list)
    """Validation error records (``loc``, ``msg``, ``type``)."""


# -- Registry ----------------------------------------------------------------

WebhookEvent = (
    ChatsUpsertEvent
    | ChatsUpdateEvent
    | ChatsDeleteEvent
    | GroupsUpsertEvent
    | GroupsUpdateEvent
    | GroupParticipantsUpdateEvent
    | ContactsUpsertEvent
    | ContactsUpdateEvent
    | MessagesUpsertEvent
    | PersonalMessageReceivedEvent
    | NewsletterMessageReceivedEvent
    | GroupMessageReceivedEvent
    | MessageReceivedEvent
    | CallReceivedEvent
    | PollResultsEvent
    | MessagesUpdateEvent
    | MessagesDeleteEvent
    | MessagesReactionEvent
    | MessageReceiptUpdateEvent
    | MessageSentEvent
    | SessionStatusEvent
    | QrCodeUpdatedEvent
)
"""Union of all typed events; ``match`` on the class or on ``kind``."""

AnyWebhookEvent = WebhookEvent | FallbackWebhookEvent

_EVENT_CLASSES: tuple[type[WebhookEnvelope[Any]], ...] = get_args(WebhookEvent)


def event_name_of(event_cls: type[WebhookEnvelope[Any]]) -> str:
    """Return the event name an event class is registered under."""
    (name,) = get_args(event_cls.model_fields["kind"].annotation)
    return name


WEBHOOK_EVENT_REGISTRY: Mapping[str, type[WebhookEnvelope[Any]]] = MappingProxyType(
    {event_name_of(cls): cls for cls in _EVENT_CLASSES}
)
"""Read-only map from event name to event class, built once at import."""

__all__ = [
    "UNKNOWN_EVENT",
    "WEBHOOK_EVENT_REGISTRY",
    "AnyWebhookEvent",
    "CallReceivedEvent",
    "ChatsDeleteEvent",
    "ChatsUpdateEvent",
    "ChatsUpsertEvent",
    "ContactsUpdateEvent",
    "ContactsUpsertEvent",
    "FallbackWebhookEvent",
    "GroupMessageReceivedEvent",
    "GroupParticipantsUpdateEvent",
    "GroupsUpdateEvent",
    "GroupsUpsertEvent",
    "InvalidWebhookEvent",
    "MessageReceiptUpdateEvent",
    "MessageReceivedEvent",
    "MessageSentEvent",
    "MessagesDeleteEvent",
    "MessagesReactionEvent",
    "MessagesUpdateEvent",
    "MessagesUpsertEvent",
    "NewsletterMessageReceivedEvent",
    "PersonalMessageReceivedEvent",
    "PollResultsEvent",
    "QrCodeUpdatedEvent",
    "SessionStatusEvent",
    "WebhookEnvelope",
    "WebhookEvent",
    "WebhookEventType",
    "event_name_of",
]
