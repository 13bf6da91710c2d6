"""Outgoing message payloads.

``message_type`` discriminates the union but is an SDK-side tag only; it is
stripped from the request body by ``to_request_body``.
"""

from __future__ import annotations

from typing import Annotated, Any, Literal

from pydantic import Field

from wasender.models.common import WasenderModel, WasenderSuccessResponse


class BaseMessage(WasenderModel):
    to: str
    """E.164 phone number, group JID or channel JID."""
    text: str | None = None
    """Message text, or caption for media messages."""

    def to_request_body(self) -> dict[str, Any]:
        """Render the ``/send-message`` JSON body."""
        return self.model_dump(by_alias=True, exclude_none=True, exclude={"message_type"})


class TextOnlyMessage(BaseMessage):
    message_type: Literal["text"] = "text"
    text: str


class ImageUrlMessage(BaseMessage):
    """JPEG or PNG, up to 5MB."""

    message_type: Literal["image"] = "image"
    image_url: str


class VideoUrlMessage(BaseMessage):
    """MP4 or 3GPP, up to 16MB."""

    message_type: Literal["video"] = "video"
    video_url: str


class DocumentUrlMessage(BaseMessage):
    """PDF, DOCX, XLSX and similar, up to 100MB."""

    message_type: Literal["document"] = "document"
    document_url: str


class AudioUrlMessage(BaseMessage):
    """Sent as a voice note.  AAC, MP3, OGG or AMR, up to 16MB."""

    message_type: Literal["audio"] = "audio"
    audio_url: str


class StickerUrlMessage(BaseMessage):
    """A ``.webp`` sticker, up to 100KB.  Stickers carry no text."""

    message_type: Literal["sticker"] = "sticker"
    sticker_url: str
    text: None = None


class ContactCardPayload(WasenderModel):
    name: str
    phone: str


class ContactCardMessage(BaseMessage):
    message_type: Literal["contact"] = "contact"
    contact: ContactCardPayload


class LocationPinPayload(WasenderModel):
    latitude: float | str
    longitude: float | str
    name: str | None = None
    address: str | None = None


class LocationPinMessage(BaseMessage):
    message_type: Literal["location"] = "location"
    location: LocationPinPayload


WasenderMessagePayload = Annotated[
    TextOnlyMessage
    | ImageUrlMessage
    | VideoUrlMessage
    | DocumentUrlMessage
    | AudioUrlMessage
    | StickerUrlMessage
    | ContactCardMessage
    | LocationPinMessage,
    Field(discriminator="message_type"),
]
"""Any outgoing message; accepted by ``WasenderClient.send``."""


# -- Responses ---------------------------------------------------------------


class SendMessageResponse(WasenderSuccessResponse):
    """Success envelope of ``/send-message``; ``data`` is kept as sent."""

    data: Any = None


class MessageInfoResponse(WasenderSuccessResponse):
    data: Any = None
