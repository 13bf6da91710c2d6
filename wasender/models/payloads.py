"""Leaf data carried in webhook event payloads.

These are pure Pydantic models.  Every field the platform marks optional is
optional here too; consumers must handle ``None`` for those.  Undeclared
fields are kept (``extra="allow"``) and round-trip through
``model_dump(by_alias=True)``.
"""

from __future__ import annotations

from pydantic import Field

from wasender.models.common import WasenderModel
from wasender.models.enums import (
    GroupParticipantAction,
    MessageUpdateStatus,
    ReceiptStatus,
    WhatsAppSessionStatus,
)
from wasender.models.groups import GroupParticipant

# -- Message keys ------------------------------------------------------------


class MessageKey(WasenderModel):
    """Identity of a message.

    Attributes
    ----------
    id:
        Message id.
    from_me:
        ``True`` when the message was sent by this session.
    remote_jid:
        Recipient for outgoing messages, sender (or group) for incoming ones.
    sender_pn / clean_sender_pn / sender_lid:
        Alternate identities of the sender.
    participant / participant_lid / participant_pn / clean_participant_pn:
        The actual author inside a group.
    """

    id: str
    from_me: bool
    remote_jid: str
    sender_pn: str | None = None
    clean_sender_pn: str | None = None
    sender_lid: str | None = None
    participant: str | None = None
    participant_lid: str | None = None
    participant_pn: str | None = None
    clean_participant_pn: str | None = None


class IncomingMessageKey(WasenderModel):
    """Narrower key used by the ``*.received`` events and poll results."""

    id: str
    from_me: bool
    remote_jid: str
    participant: str | None = None
    """Group sender, when applicable."""


# -- Message content ---------------------------------------------------------


class ExtendedTextMessage(WasenderModel):
    text: str | None = None


class ImageMessage(WasenderModel):
    url: str | None = None
    caption: str | None = None
    mimetype: str | None = None
    direct_path: str | None = None


class VideoMessage(WasenderModel):
    url: str | None = None
    caption: str | None = None
    mimetype: str | None = None
    direct_path: str | None = None


class DocumentMessage(WasenderModel):
    url: str | None = None
    title: str | None = None
    mimetype: str | None = None
    file_name: str | None = None
    direct_path: str | None = None


class AudioMessage(WasenderModel):
    url: str | None = None
    mimetype: str | None = None
    duration: int | None = None
    direct_path: str | None = None


class StickerMessage(WasenderModel):
    url: str | None = None
    mimetype: str | None = None


class ContactMessage(WasenderModel):
    display_name: str | None = None
    vcard: str | None = None


class LocationMessage(WasenderModel):
    degrees_latitude: int | float | None = None
    degrees_longitude: int | float | None = None
    name: str | None = None
    address: str | None = None


class MessageContent(WasenderModel):
    """Message body.  At most one of the content variants is usually set."""

    conversation: str | None = None
    extended_text_message: ExtendedTextMessage | None = None
    message_body: str | None = None
    image_message: ImageMessage | None = None
    video_message: VideoMessage | None = None
    document_message: DocumentMessage | None = None
    audio_message: AudioMessage | None = None
    sticker_message: StickerMessage | None = None
    contact_message: ContactMessage | None = None
    location_message: LocationMessage | None = None

    @property
    def text(self) -> str | None:
        """First available text: plain, extended, body, then media caption."""
        if self.conversation:
            return self.conversation
        if self.extended_text_message and self.extended_text_message.text:
            return self.extended_text_message.text
        if self.message_body:
            return self.message_body
        for media in (self.image_message, self.video_message):
            if media and media.caption:
                return media.caption
        return None


# -- Chats -------------------------------------------------------------------


class ChatEntry(WasenderModel):
    """A chat (direct conversation or group)."""

    id: str
    name: str | None = None
    conversation_timestamp: int | None = None
    unread_count: int | None = None
    mute_end_time: int | None = None
    is_spam: bool | None = None


class ChatEntryUpdate(ChatEntry):
    """Partial chat carried by ``chats.update``."""

    id: str | None = None


# -- Groups ------------------------------------------------------------------


class GroupParticipantsUpdateData(WasenderModel):
    id: str
    """Group JID."""
    participants: list[str | GroupParticipant]
    action: GroupParticipantAction


# -- Messages ----------------------------------------------------------------


class MessagesUpsertData(WasenderModel):
    key: MessageKey
    message: MessageContent | None = None
    push_name: str | None = None
    message_timestamp: int | None = None


class IncomingMessageData(WasenderModel):
    """Payload shared by the four ``*.received`` message events."""

    key: IncomingMessageKey
    message: MessageContent


class MessageUpdate(WasenderModel):
    status: MessageUpdateStatus


class MessagesUpdateEntry(WasenderModel):
    key: MessageKey
    update: MessageUpdate


class MessagesDeleteData(WasenderModel):
    keys: list[MessageKey]


class Reaction(WasenderModel):
    text: str
    """The emoji; empty when a reaction is removed."""
    key: MessageKey
    """Key of the message reacted to."""
    sender_timestamp_ms: str | int | None = None
    read: bool | None = None


class MessagesReactionEntry(WasenderModel):
    key: MessageKey
    reaction: Reaction


class Receipt(WasenderModel):
    user_jid: str
    status: ReceiptStatus
    t: int | None = None


class MessageReceiptUpdateEntry(WasenderModel):
    key: MessageKey
    receipt: Receipt


class MessageSentData(WasenderModel):
    key: MessageKey
    message: MessageContent | None = None
    status: str | None = None


# -- Calls and polls ---------------------------------------------------------


class CallInfo(WasenderModel):
    id: str
    from_: str = Field(alias="from")
    date: str
    """ISO-8601 timestamp."""
    is_group: bool
    is_video: bool | None = None
    status: str | None = None


class CallReceivedData(WasenderModel):
    call: CallInfo


class PollResultEntry(WasenderModel):
    name: str
    voters: list[str]


class PollResultsData(WasenderModel):
    key: IncomingMessageKey
    poll_result: list[PollResultEntry]


# -- Session -----------------------------------------------------------------


class SessionStatusData(WasenderModel):
    status: WhatsAppSessionStatus
    session_id: str | None = Field(default=None, alias="session_id")
    reason: str | None = None


class QrCodeUpdatedData(WasenderModel):
    qr: str
    """Base64 image data URI."""
    session_id: str | None = Field(default=None, alias="session_id")
