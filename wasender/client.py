"""Async REST client for the Wasender API.

A thin wrapper: each method maps to one endpoint, sends JSON, validates the
JSON response into its model and returns it together with the rate-limit
info of the call.  No retries, no backoff.

Two credentials exist:

- the **session API key**, used by every endpoint that acts on behalf of one
  WhatsApp session (messages, contacts, groups, ``/status``);
- the **personal access token**, required by the account-scoped
  ``/whatsapp-sessions`` endpoints.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, TypeVar
from urllib.parse import quote

import httpx
from loguru import logger
from pydantic import BaseModel, TypeAdapter, ValidationError

from wasender.errors import WasenderAPIError
from wasender.models.common import WasenderResult, parse_rate_limit_headers
from wasender.models.contacts import (
    ContactActionResponse,
    GetAllContactsResponse,
    GetContactInfoResponse,
    GetContactProfilePictureResponse,
)
from wasender.models.groups import (
    GetAllGroupsResponse,
    GetGroupMetadataResponse,
    GetGroupParticipantsResponse,
    ModifyGroupParticipantsPayload,
    ModifyGroupParticipantsResponse,
    UpdateGroupSettingsPayload,
    UpdateGroupSettingsResponse,
)
from wasender.models.messages import (
    AudioUrlMessage,
    ContactCardMessage,
    ContactCardPayload,
    DocumentUrlMessage,
    ImageUrlMessage,
    LocationPinMessage,
    LocationPinPayload,
    MessageInfoResponse,
    SendMessageResponse,
    StickerUrlMessage,
    TextOnlyMessage,
    VideoUrlMessage,
    WasenderMessagePayload,
)
from wasender.models.sessions import (
    ConnectSessionPayload,
    ConnectSessionResponse,
    CreateWhatsAppSessionPayload,
    CreateWhatsAppSessionResponse,
    DeleteWhatsAppSessionResponse,
    DisconnectSessionResponse,
    GetAllWhatsAppSessionsResponse,
    GetQRCodeResponse,
    GetWhatsAppSessionDetailsResponse,
    RegenerateApiKeyResponse,
    SessionStatusResponse,
    UpdateWhatsAppSessionPayload,
    UpdateWhatsAppSessionResponse,
)
from wasender.settings import DEFAULT_BASE_URL

if TYPE_CHECKING:
    from types import TracebackType

    from wasender.settings import WasenderSettings

ModelT = TypeVar("ModelT", bound=BaseModel)

_MESSAGE_PAYLOAD_ADAPTER: TypeAdapter[WasenderMessagePayload] = TypeAdapter(WasenderMessagePayload)


def _segment(value: str | int) -> str:
    """Quote a path parameter (phone numbers, JIDs, ids)."""
    return quote(str(value), safe="@")


class WasenderClient:
    """Client for the Wasender REST API.

    Usage::

        async with WasenderClient(api_key="...") as client:
            result = await client.send_text("+15551234567", "hello")
            print(result.rate_limit)

    Pass ``http_client`` to share a connection pool or to inject a test
    transport; a client passed in is not closed by ``aclose``.
    """

    def __init__(
        self,
        api_key: str | None = None,
        *,
        personal_access_token: str | None = None,
        base_url: str = DEFAULT_BASE_URL,
        timeout: float = 30.0,
        http_client: httpx.AsyncClient | None = None,
    ) -> None:
        self.api_key = api_key
        self.personal_access_token = personal_access_token
        self.base_url = base_url.rstrip("/")
        self._owns_http_client = http_client is None
        self._http = http_client if http_client is not None else httpx.AsyncClient(timeout=timeout)

    @classmethod
    def from_settings(
        cls,
        settings: WasenderSettings | None = None,
        *,
        http_client: httpx.AsyncClient | None = None,
    ) -> WasenderClient:
        """Build a client from ``WASENDER_*`` configuration."""
        if settings is None:
            from wasender.settings import get_settings

            settings = get_settings()
        return cls(
            api_key=settings.api_key.get_secret_value() if settings.api_key else None,
            personal_access_token=(
                settings.personal_access_token.get_secret_value() if settings.personal_access_token else None
            ),
            base_url=settings.base_url,
            timeout=settings.request_timeout,
            http_client=http_client,
        )

    # -- Lifecycle -------------------------------------------------------------

    async def aclose(self) -> None:
        if self._owns_http_client:
            await self._http.aclose()

    async def __aenter__(self) -> WasenderClient:
        return self

    async def __aexit__(
        self,
        exc_type: type[BaseException] | None,
        exc: BaseException | None,
        tb: TracebackType | None,
    ) -> None:
        await self.aclose()

    # -- Plumbing --------------------------------------------------------------

    def _token(self, *, personal: bool) -> str:
        if personal:
            if not self.personal_access_token:
                msg = "A personal access token is required for account-scoped session endpoints."
                raise WasenderAPIError(msg)
            return self.personal_access_token
        if not self.api_key:
            msg = "A session API key is required for this endpoint."
            raise WasenderAPIError(msg)
        return self.api_key

    async def _request(
        self,
        method: str,
        path: str,
        response_model: type[ModelT],
        *,
        body: dict[str, Any] | None = None,
        personal: bool = False,
    ) -> WasenderResult[ModelT]:
        headers = {
            "Authorization": f"Bearer {self._token(personal=personal)}",
            "Accept": "application/json",
        }
        logger.debug("Wasender API: {} {}", method, path)
        try:
            response = await self._http.request(method, f"{self.base_url}{path}", headers=headers, json=body)
        except httpx.HTTPError as exc:
            msg = f"Wasender API request failed: {exc}"
            raise WasenderAPIError(msg) from exc

        rate_limit = parse_rate_limit_headers(response.headers)
        try:
            data = response.json()
        except ValueError as exc:
            msg = f"Wasender API returned a non-JSON response (status {response.status_code})"
            raise WasenderAPIError(msg, status_code=response.status_code, rate_limit=rate_limit) from exc

        if response.is_error or (isinstance(data, dict) and data.get("success") is False):
            error = WasenderAPIError.from_response_body(
                response.status_code,
                data,
                rate_limit=rate_limit,
                retry_after_header=response.headers.get("retry-after"),
            )
            logger.warning("Wasender API: {} {} failed ({}): {}", method, path, error.status_code, error.message)
            raise error

        try:
            parsed = response_model.model_validate(data)
        except ValidationError as exc:
            msg = f"Unexpected {response_model.__name__} shape from {path}"
            raise WasenderAPIError(msg, status_code=response.status_code, rate_limit=rate_limit) from exc
        return WasenderResult[response_model](response=parsed, rate_limit=rate_limit)

    # -- Messages --------------------------------------------------------------

    async def send(self, payload: WasenderMessagePayload | dict[str, Any]) -> WasenderResult[SendMessageResponse]:
        """Send any message payload.

        Accepts a payload model or a dict with a ``messageType`` tag.
        """
        if isinstance(payload, dict):
            payload = _MESSAGE_PAYLOAD_ADAPTER.validate_python(payload)
        return await self._request("POST", "/send-message", SendMessageResponse, body=payload.to_request_body())

    async def send_text(self, to: str, text: str) -> WasenderResult[SendMessageResponse]:
        return await self.send(TextOnlyMessage(to=to, text=text))

    async def send_image(
        self, to: str, image_url: str, caption: str | None = None
    ) -> WasenderResult[SendMessageResponse]:
        return await self.send(ImageUrlMessage(to=to, image_url=image_url, text=caption))

    async def send_video(
        self, to: str, video_url: str, caption: str | None = None
    ) -> WasenderResult[SendMessageResponse]:
        return await self.send(VideoUrlMessage(to=to, video_url=video_url, text=caption))

    async def send_document(
        self, to: str, document_url: str, caption: str | None = None
    ) -> WasenderResult[SendMessageResponse]:
        return await self.send(DocumentUrlMessage(to=to, document_url=document_url, text=caption))

    async def send_audio(self, to: str, audio_url: str) -> WasenderResult[SendMessageResponse]:
        return await self.send(AudioUrlMessage(to=to, audio_url=audio_url))

    async def send_sticker(self, to: str, sticker_url: str) -> WasenderResult[SendMessageResponse]:
        return await self.send(StickerUrlMessage(to=to, sticker_url=sticker_url))

    async def send_contact(
        self, to: str, name: str, phone: str, caption: str | None = None
    ) -> WasenderResult[SendMessageResponse]:
        contact = ContactCardPayload(name=name, phone=phone)
        return await self.send(ContactCardMessage(to=to, contact=contact, text=caption))

    async def send_location(
        self,
        to: str,
        latitude: float | str,
        longitude: float | str,
        *,
        name: str | None = None,
        address: str | None = None,
        caption: str | None = None,
    ) -> WasenderResult[SendMessageResponse]:
        location = LocationPinPayload(latitude=latitude, longitude=longitude, name=name, address=address)
        return await self.send(LocationPinMessage(to=to, location=location, text=caption))

    async def get_message_info(self, message_id: str | int) -> WasenderResult[MessageInfoResponse]:
        return await self._request("GET", f"/messages/{_segment(message_id)}/info", MessageInfoResponse)

    # -- Contacts --------------------------------------------------------------

    async def get_contacts(self) -> WasenderResult[GetAllContactsResponse]:
        return await self._request("GET", "/contacts", GetAllContactsResponse)

    async def get_contact_info(self, phone: str) -> WasenderResult[GetContactInfoResponse]:
        return await self._request("GET", f"/contacts/{_segment(phone)}", GetContactInfoResponse)

    async def get_contact_profile_picture(self, phone: str) -> WasenderResult[GetContactProfilePictureResponse]:
        return await self._request(
            "GET", f"/contacts/{_segment(phone)}/picture", GetContactProfilePictureResponse
        )

    async def block_contact(self, phone: str) -> WasenderResult[ContactActionResponse]:
        return await self._request("POST", f"/contacts/{_segment(phone)}/block", ContactActionResponse)

    async def unblock_contact(self, phone: str) -> WasenderResult[ContactActionResponse]:
        return await self._request("POST", f"/contacts/{_segment(phone)}/unblock", ContactActionResponse)

    # -- Groups ----------------------------------------------------------------

    async def get_groups(self) -> WasenderResult[GetAllGroupsResponse]:
        return await self._request("GET", "/groups", GetAllGroupsResponse)

    async def get_group_metadata(self, group_jid: str) -> WasenderResult[GetGroupMetadataResponse]:
        return await self._request("GET", f"/groups/{_segment(group_jid)}/metadata", GetGroupMetadataResponse)

    async def get_group_participants(self, group_jid: str) -> WasenderResult[GetGroupParticipantsResponse]:
        return await self._request(
            "GET", f"/groups/{_segment(group_jid)}/participants", GetGroupParticipantsResponse
        )

    async def add_group_participants(
        self, group_jid: str, participants: list[str]
    ) -> WasenderResult[ModifyGroupParticipantsResponse]:
        body = ModifyGroupParticipantsPayload(participants=participants).model_dump(by_alias=True)
        return await self._request(
            "POST", f"/groups/{_segment(group_jid)}/participants/add", ModifyGroupParticipantsResponse, body=body
        )

    async def remove_group_participants(
        self, group_jid: str, participants: list[str]
    ) -> WasenderResult[ModifyGroupParticipantsResponse]:
        body = ModifyGroupParticipantsPayload(participants=participants).model_dump(by_alias=True)
        return await self._request(
            "POST", f"/groups/{_segment(group_jid)}/participants/remove", ModifyGroupParticipantsResponse, body=body
        )

    async def update_group_settings(
        self, group_jid: str, settings: UpdateGroupSettingsPayload
    ) -> WasenderResult[UpdateGroupSettingsResponse]:
        body = settings.model_dump(by_alias=True, exclude_none=True)
        return await self._request(
            "PUT", f"/groups/{_segment(group_jid)}/settings", UpdateGroupSettingsResponse, body=body
        )

    # -- Sessions (personal access token) ----------------------------------------

    async def get_all_whatsapp_sessions(self) -> WasenderResult[GetAllWhatsAppSessionsResponse]:
        return await self._request("GET", "/whatsapp-sessions", GetAllWhatsAppSessionsResponse, personal=True)

    async def create_whatsapp_session(
        self, payload: CreateWhatsAppSessionPayload
    ) -> WasenderResult[CreateWhatsAppSessionResponse]:
        return await self._request(
            "POST",
            "/whatsapp-sessions",
            CreateWhatsAppSessionResponse,
            body=payload.model_dump(exclude_none=True),
            personal=True,
        )

    async def get_whatsapp_session_details(self, session_id: int) -> WasenderResult[GetWhatsAppSessionDetailsResponse]:
        return await self._request(
            "GET", f"/whatsapp-sessions/{_segment(session_id)}", GetWhatsAppSessionDetailsResponse, personal=True
        )

    async def update_whatsapp_session(
        self, session_id: int, payload: UpdateWhatsAppSessionPayload
    ) -> WasenderResult[UpdateWhatsAppSessionResponse]:
        return await self._request(
            "PUT",
            f"/whatsapp-sessions/{_segment(session_id)}",
            UpdateWhatsAppSessionResponse,
            body=payload.model_dump(exclude_unset=True),
            personal=True,
        )

    async def delete_whatsapp_session(self, session_id: int) -> WasenderResult[DeleteWhatsAppSessionResponse]:
        return await self._request(
            "DELETE", f"/whatsapp-sessions/{_segment(session_id)}", DeleteWhatsAppSessionResponse, personal=True
        )

    async def connect_whatsapp_session(
        self, session_id: int, *, qr_as_image: bool | None = None
    ) -> WasenderResult[ConnectSessionResponse]:
        body = ConnectSessionPayload(qr_as_image=qr_as_image).model_dump(exclude_none=True)
        return await self._request(
            "POST",
            f"/whatsapp-sessions/{_segment(session_id)}/connect",
            ConnectSessionResponse,
            body=body,
            personal=True,
        )

    async def get_whatsapp_session_qr_code(self, session_id: int) -> WasenderResult[GetQRCodeResponse]:
        return await self._request(
            "GET", f"/whatsapp-sessions/{_segment(session_id)}/qrcode", GetQRCodeResponse, personal=True
        )

    async def disconnect_whatsapp_session(self, session_id: int) -> WasenderResult[DisconnectSessionResponse]:
        return await self._request(
            "POST", f"/whatsapp-sessions/{_segment(session_id)}/disconnect", DisconnectSessionResponse, personal=True
        )

    async def regenerate_api_key(self, session_id: int) -> WasenderResult[RegenerateApiKeyResponse]:
        return await self._request(
            "POST", f"/whatsapp-sessions/{_segment(session_id)}/regenerate-key", RegenerateApiKeyResponse, personal=True
        )

    # -- Session status (session API key) ----------------------------------------

    async def get_session_status(self) -> WasenderResult[SessionStatusResponse]:
        return await self._request("GET", "/status", SessionStatusResponse)
