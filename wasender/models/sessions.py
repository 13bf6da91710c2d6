"""WhatsApp session models for the account-scoped session endpoints.

Unlike the message / contact / group APIs, the session API speaks
snake_case on the wire, so these models disable the camelCase alias
generator.
"""

from __future__ import annotations

from datetime import datetime

from pydantic import ConfigDict, Field

from wasender.models.common import WasenderModel, WasenderSuccessResponse
from wasender.models.enums import WhatsAppSessionStatus


class SessionModel(WasenderModel):
    """snake_case wire model."""

    model_config = ConfigDict(alias_generator=None)


class WhatsAppSession(SessionModel):
    """A WhatsApp session registered on the account."""

    id: int
    name: str
    phone_number: str
    status: WhatsAppSessionStatus
    account_protection: bool
    log_messages: bool
    webhook_url: str | None = None
    webhook_enabled: bool | None = None
    webhook_events: list[str] | None = None
    created_at: datetime
    updated_at: datetime


# -- Request payloads --------------------------------------------------------


class CreateWhatsAppSessionPayload(SessionModel):
    name: str
    phone_number: str
    """E.164 phone number."""
    account_protection: bool
    log_messages: bool
    webhook_url: str | None = None
    webhook_enabled: bool | None = None
    webhook_events: list[str] | None = None


class UpdateWhatsAppSessionPayload(SessionModel):
    """Partial update -- only fields explicitly set are sent.

    The client serialises this with ``model_dump(exclude_unset=True)``.
    """

    name: str | None = None
    phone_number: str | None = None
    account_protection: bool | None = None
    log_messages: bool | None = None
    webhook_url: str | None = None
    webhook_enabled: bool | None = None
    webhook_events: list[str] | None = None


class ConnectSessionPayload(SessionModel):
    qr_as_image: bool | None = None
    """Return the QR code as a base64 image instead of a raw string."""


# -- Response data -----------------------------------------------------------


class ConnectSessionResponseData(SessionModel):
    status: WhatsAppSessionStatus
    qr_code: str | None = Field(default=None, alias="qrCode")
    """Set when ``status`` is ``need_scan``."""
    message: str | None = None


class QRCodeResponseData(SessionModel):
    qr_code: str = Field(alias="qrCode")


class DisconnectSessionResponseData(SessionModel):
    status: WhatsAppSessionStatus
    message: str


class GetAllWhatsAppSessionsResponse(WasenderSuccessResponse):
    data: list[WhatsAppSession]


class GetWhatsAppSessionDetailsResponse(WasenderSuccessResponse):
    data: WhatsAppSession


class CreateWhatsAppSessionResponse(WasenderSuccessResponse):
    data: WhatsAppSession


class UpdateWhatsAppSessionResponse(WasenderSuccessResponse):
    data: WhatsAppSession


class DeleteWhatsAppSessionResponse(WasenderSuccessResponse):
    data: None = None


class ConnectSessionResponse(WasenderSuccessResponse):
    data: ConnectSessionResponseData


class GetQRCodeResponse(WasenderSuccessResponse):
    data: QRCodeResponseData


class DisconnectSessionResponse(WasenderSuccessResponse):
    data: DisconnectSessionResponseData


class RegenerateApiKeyResponse(SessionModel):
    """Returned by the regenerate-key endpoint (no ``message`` field)."""

    success: bool = True
    api_key: str


class SessionStatusResponse(SessionModel):
    """``GET /status`` returns a bare ``{"status": ...}`` object."""

    status: WhatsAppSessionStatus
