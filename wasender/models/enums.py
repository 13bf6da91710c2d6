"""Closed value sets shared by webhook events and REST shapes.

Event names are a ``StrEnum`` so application code can compare and
``match`` against members.  The smaller status / action vocabularies are
``Literal`` aliases: webhook payloads are validated in strict mode, where a
plain string is accepted for a ``Literal`` but not for an ``Enum``.
"""

from __future__ import annotations

from enum import StrEnum
from typing import Literal

# -- Webhook events ----------------------------------------------------------


class WebhookEventType(StrEnum):
    """Event names delivered by the Wasender webhook."""

    # Chat
    CHATS_UPSERT = "chats.upsert"
    CHATS_UPDATE = "chats.update"
    CHATS_DELETE = "chats.delete"

    # Group
    GROUPS_UPSERT = "groups.upsert"
    GROUPS_UPDATE = "groups.update"
    GROUP_PARTICIPANTS_UPDATE = "group-participants.update"

    # Contact
    CONTACTS_UPSERT = "contacts.upsert"
    CONTACTS_UPDATE = "contacts.update"

    # Message
    MESSAGES_UPSERT = "messages.upsert"
    MESSAGES_UPDATE = "messages.update"
    MESSAGES_DELETE = "messages.delete"
    MESSAGES_REACTION = "messages.reaction"
    MESSAGES_PERSONAL_RECEIVED = "messages-personal.received"
    MESSAGES_NEWSLETTER_RECEIVED = "messages-newsletter.received"
    MESSAGES_GROUP_RECEIVED = "messages-group.received"
    MESSAGES_RECEIVED = "messages.received"
    MESSAGE_RECEIPT_UPDATE = "message-receipt.update"
    MESSAGE_SENT = "message.sent"

    # Call / poll
    CALL_RECEIVED = "call.received"
    POLL_RESULTS = "poll.results"

    # Session
    SESSION_STATUS = "session.status"
    QRCODE_UPDATED = "qrcode.updated"


UNKNOWN_EVENT = "unknown"
"""Sentinel ``kind`` for deliveries that carry no usable event name."""

# -- Session -----------------------------------------------------------------

WhatsAppSessionStatus = Literal[
    "connected",
    "disconnected",
    "connecting",
    "error",
    "logged_out",
    "need_scan",
]

# -- Group -------------------------------------------------------------------

GroupParticipantAction = Literal["add", "remove", "promote", "demote"]

GroupAdminRole = Literal["admin", "superadmin"]

AddressingMode = Literal["lid", "pn"]

# -- Message -----------------------------------------------------------------

MessageUpdateStatus = Literal["delivered", "read", "played", "error", "pending"]

ReceiptStatus = Literal["sent", "delivered", "read", "played"]

MessageType = Literal["text", "image", "video", "document", "audio", "sticker", "contact", "location"]
