"""Group models.

``GroupMetadata`` and ``GroupParticipant`` are shared between the REST
responses and the ``groups.*`` / ``group-participants.update`` webhook
payloads.
"""

from __future__ import annotations

from pydantic import Field

from wasender.models.common import WasenderModel, WasenderSuccessResponse
from wasender.models.enums import AddressingMode, GroupAdminRole

# -- Group data --------------------------------------------------------------


class GroupParticipant(WasenderModel):
    """A member of a group."""

    id: str
    is_admin: bool | None = None
    is_super_admin: bool | None = None
    admin: GroupAdminRole | None = None
    """Admin role; unset for regular members."""


class BasicGroupInfo(WasenderModel):
    """Entry of the group list endpoint."""

    id: str
    name: str | None = None
    img_url: str | None = None


class GroupMetadata(WasenderModel):
    """Full group metadata."""

    id: str
    notify: str | None = None
    addressing_mode: AddressingMode | None = None
    """Whether the group sends messages with ``lid`` or ``pn`` addressing."""
    owner: str | None = None
    owner_pn: str | None = None
    owner_country_code: str | None = Field(default=None, alias="owner_country_code")
    subject: str
    subject_owner: str | None = None
    subject_owner_pn: str | None = None
    subject_time: int | None = None
    creation: int | None = None
    desc: str | None = None
    desc_owner: str | None = None
    desc_owner_pn: str | None = None
    desc_id: str | None = None
    desc_time: int | None = None
    linked_parent: str | None = None
    """JID of the parent community, if any."""
    restrict: bool | None = None
    """Only admins may change group settings."""
    announce: bool | None = None
    """Only admins may send messages."""
    member_add_mode: bool | None = None
    join_approval_mode: bool | None = None
    is_community: bool | None = None
    is_community_announce: bool | None = None
    size: int | None = None
    participants: list[GroupParticipant]
    ephemeral_duration: int | None = None
    invite_code: str | None = None
    author: str | None = None
    """Who added you to the group or last changed its settings."""
    author_pn: str | None = None


class GroupMetadataUpdate(GroupMetadata):
    """Partial group metadata carried by ``groups.update``."""

    id: str | None = None
    subject: str | None = None
    participants: list[GroupParticipant] | None = None


# -- Request payloads --------------------------------------------------------


class ModifyGroupParticipantsPayload(WasenderModel):
    """Participants (E.164 numbers or JIDs) to add or remove."""

    participants: list[str]


class UpdateGroupSettingsPayload(WasenderModel):
    """Group settings to change; unset fields are left untouched."""

    subject: str | None = None
    description: str | None = None
    announce: bool | None = None
    restrict: bool | None = None


# -- Response data -----------------------------------------------------------


class ParticipantActionStatus(WasenderModel):
    """Outcome of an add/remove operation for one participant."""

    status: int
    id: str
    message: str


class UpdateGroupSettingsResponseData(WasenderModel):
    subject: str | None = None
    description: str | None = None


class GetAllGroupsResponse(WasenderSuccessResponse):
    data: list[BasicGroupInfo]


class GetGroupMetadataResponse(WasenderSuccessResponse):
    data: GroupMetadata


class GetGroupParticipantsResponse(WasenderSuccessResponse):
    data: list[GroupParticipant]


class ModifyGroupParticipantsResponse(WasenderSuccessResponse):
    data: list[ParticipantActionStatus]


class UpdateGroupSettingsResponse(WasenderSuccessResponse):
    data: UpdateGroupSettingsResponseData
