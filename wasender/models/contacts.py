"""Contact models for the REST endpoints and ``contacts.*`` webhook events."""

from __future__ import annotations

from wasender.models.common import WasenderModel, WasenderSuccessResponse


class Contact(WasenderModel):
    """A contact as returned by the contacts endpoints."""

    id: str
    name: str | None = None
    """Name saved in the address book."""
    notify: str | None = None
    """Push name chosen by the contact."""
    verified_name: str | None = None
    img_url: str | None = None
    status: str | None = None
    exists: bool | None = None
    """Whether the number is registered on WhatsApp."""


class ContactEntry(WasenderModel):
    """A contact as delivered by ``contacts.upsert``.

    ``img_url`` is ``"changed"`` when the picture changed, ``None`` when the
    contact has no picture, otherwise the picture URL.
    """

    id: str
    lid: str | None = None
    phone_number: str | None = None
    name: str | None = None
    notify: str | None = None
    verified_name: str | None = None
    img_url: str | None = None
    status: str | None = None


class ContactEntryUpdate(ContactEntry):
    """Partial contact carried by ``contacts.update``."""

    id: str | None = None


# -- Responses ---------------------------------------------------------------


class ProfilePictureData(WasenderModel):
    img_url: str | None = None


class ContactActionData(WasenderModel):
    message: str


class GetAllContactsResponse(WasenderSuccessResponse):
    data: list[Contact]


class GetContactInfoResponse(WasenderSuccessResponse):
    data: Contact


class GetContactProfilePictureResponse(WasenderSuccessResponse):
    data: ProfilePictureData


class ContactActionResponse(WasenderSuccessResponse):
    """Response for block / unblock."""

    data: ContactActionData
