"""Typed shapes for the Wasender API and its webhook events."""

from wasender.models.common import (
    RateLimitInfo,
    WasenderModel,
    WasenderResult,
    WasenderSuccessResponse,
    parse_rate_limit_headers,
)
from wasender.models.contacts import Contact, ContactEntry, ContactEntryUpdate
from wasender.models.enums import UNKNOWN_EVENT, WebhookEventType, WhatsAppSessionStatus
from wasender.models.events import (
    WEBHOOK_EVENT_REGISTRY,
    AnyWebhookEvent,
    CallReceivedEvent,
    ChatsDeleteEvent,
    ChatsUpdateEvent,
    ChatsUpsertEvent,
    ContactsUpdateEvent,
    ContactsUpsertEvent,
    FallbackWebhookEvent,
    GroupMessageReceivedEvent,
    GroupParticipantsUpdateEvent,
    GroupsUpdateEvent,
    GroupsUpsertEvent,
    InvalidWebhookEvent,
    MessageReceiptUpdateEvent,
    MessageReceivedEvent,
    MessageSentEvent,
    MessagesDeleteEvent,
    MessagesReactionEvent,
    MessagesUpdateEvent,
    MessagesUpsertEvent,
    NewsletterMessageReceivedEvent,
    PersonalMessageReceivedEvent,
    PollResultsEvent,
    QrCodeUpdatedEvent,
    SessionStatusEvent,
    WebhookEvent,
)
from wasender.models.groups import BasicGroupInfo, GroupMetadata, GroupMetadataUpdate, GroupParticipant
from wasender.models.messages import (
    AudioUrlMessage,
    ContactCardMessage,
    ContactCardPayload,
    DocumentUrlMessage,
    ImageUrlMessage,
    LocationPinMessage,
    LocationPinPayload,
    StickerUrlMessage,
    TextOnlyMessage,
    VideoUrlMessage,
    WasenderMessagePayload,
)
from wasender.models.payloads import (
    CallInfo,
    ChatEntry,
    ChatEntryUpdate,
    IncomingMessageData,
    IncomingMessageKey,
    MessageContent,
    MessageKey,
)
from wasender.models.sessions import WhatsAppSession

__all__ = [
    "UNKNOWN_EVENT",
    "WEBHOOK_EVENT_REGISTRY",
    "AnyWebhookEvent",
    "AudioUrlMessage",
    "BasicGroupInfo",
    "CallInfo",
    "CallReceivedEvent",
    "ChatEntry",
    "ChatEntryUpdate",
    "ChatsDeleteEvent",
    "ChatsUpdateEvent",
    "ChatsUpsertEvent",
    "Contact",
    "ContactCardMessage",
    "ContactCardPayload",
    "ContactEntry",
    "ContactEntryUpdate",
    "ContactsUpdateEvent",
    "ContactsUpsertEvent",
    "DocumentUrlMessage",
    "FallbackWebhookEvent",
    "GroupMessageReceivedEvent",
    "GroupMetadata",
    "GroupMetadataUpdate",
    "GroupParticipant",
    "GroupParticipantsUpdateEvent",
    "GroupsUpdateEvent",
    "GroupsUpsertEvent",
    "ImageUrlMessage",
    "IncomingMessageData",
    "IncomingMessageKey",
    "InvalidWebhookEvent",
    "LocationPinMessage",
    "LocationPinPayload",
    "MessageContent",
    "MessageKey",
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
    "RateLimitInfo",
    "SessionStatusEvent",
    "StickerUrlMessage",
    "TextOnlyMessage",
    "VideoUrlMessage",
    "WasenderMessagePayload",
    "WasenderModel",
    "WasenderResult",
    "WasenderSuccessResponse",
    "WebhookEvent",
    "WebhookEventType",
    "WhatsAppSession",
    "WhatsAppSessionStatus",
    "parse_rate_limit_headers",
]
