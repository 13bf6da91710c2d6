"""Tests for WasenderClient against an in-memory transport."""

from __future__ import annotations

import json
from collections.abc import AsyncIterator, Callable
from typing import Any

import httpx
import pytest

from wasender.client import WasenderClient
from wasender.errors import WasenderAPIError
from wasender.models.groups import UpdateGroupSettingsPayload
from wasender.models.messages import LocationPinMessage
from wasender.models.sessions import CreateWhatsAppSessionPayload, UpdateWhatsAppSessionPayload
from wasender.settings import WasenderSettings

BASE_URL = "https://api.test/api"
API_KEY = "session-key"
PAT = "personal-token"

SESSION = {
    "id": 7,
    "name": "Support",
    "phone_number": "+15551234567",
    "status": "connected",
    "account_protection": True,
    "log_messages": False,
    "webhook_url": "https://example.com/hook",
    "webhook_enabled": True,
    "webhook_events": ["messages.upsert"],
    "created_at": "2025-01-01T10:00:00Z",
    "updated_at": "2025-01-02T10:00:00Z",
}

RATE_LIMIT_HEADERS = {"X-RateLimit-Limit": "100", "X-RateLimit-Remaining": "99", "X-RateLimit-Reset": "1700000000"}


class Recorder:
    """Mock transport handler: records requests, replies with a queued response."""

    def __init__(self) -> None:
        self.requests: list[httpx.Request] = []
        self.reply: Callable[[httpx.Request], httpx.Response] = lambda _request: httpx.Response(
            200, json={"success": True, "message": "ok", "data": None}
        )

    def __call__(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        return self.reply(request)

    def respond(self, status_code: int = 200, *, json_body: Any = None, **kwargs: Any) -> None:
        if json_body is not None:
            kwargs["json"] = json_body
        self.reply = lambda _request: httpx.Response(status_code, **kwargs)

    @property
    def last(self) -> httpx.Request:
        return self.requests[-1]

    @property
    def last_json(self) -> Any:
        return json.loads(self.last.content)


@pytest.fixture
def recorder() -> Recorder:
    return Recorder()


@pytest.fixture
async def client(recorder: Recorder) -> AsyncIterator[WasenderClient]:
    async with httpx.AsyncClient(transport=httpx.MockTransport(recorder)) as http:
        yield WasenderClient(API_KEY, personal_access_token=PAT, base_url=BASE_URL, http_client=http)


# ---------------------------------------------------------------------------
# Credentials
# ---------------------------------------------------------------------------


async def test_message_endpoints_use_api_key(client: WasenderClient, recorder: Recorder) -> None:
    await client.send_text("+15551234567", "hello")

    assert recorder.last.headers["Authorization"] == f"Bearer {API_KEY}"
    assert recorder.last.headers["Accept"] == "application/json"


async def test_session_endpoints_use_personal_access_token(client: WasenderClient, recorder: Recorder) -> None:
    recorder.respond(json_body={"success": True, "message": "ok", "data": [SESSION]})

    await client.get_all_whatsapp_sessions()

    assert recorder.last.headers["Authorization"] == f"Bearer {PAT}"


async def test_status_uses_api_key(client: WasenderClient, recorder: Recorder) -> None:
    recorder.respond(json_body={"status": "need_scan"})

    result = await client.get_session_status()

    assert result.response.status == "need_scan"
    assert str(recorder.last.url) == f"{BASE_URL}/status"
    assert recorder.last.headers["Authorization"] == f"Bearer {API_KEY}"


async def test_missing_api_key_fails_before_request(recorder: Recorder) -> None:
    async with httpx.AsyncClient(transport=httpx.MockTransport(recorder)) as http:
        client = WasenderClient(personal_access_token=PAT, base_url=BASE_URL, http_client=http)
        with pytest.raises(WasenderAPIError, match="API key") as exc_info:
            await client.send_text("+1", "x")

    assert exc_info.value.status_code is None
    assert recorder.requests == []


async def test_missing_personal_token_fails_before_request(recorder: Recorder) -> None:
    async with httpx.AsyncClient(transport=httpx.MockTransport(recorder)) as http:
        client = WasenderClient(API_KEY, base_url=BASE_URL, http_client=http)
        with pytest.raises(WasenderAPIError, match="personal access token"):
            await client.delete_whatsapp_session(7)

    assert recorder.requests == []


# ---------------------------------------------------------------------------
# Messages
# ---------------------------------------------------------------------------


async def test_send_text(client: WasenderClient, recorder: Recorder) -> None:
    recorder.respond(
        json_body={"success": True, "message": "Message sent", "data": {"msgId": 1}},
        headers=RATE_LIMIT_HEADERS,
    )

    result = await client.send_text("+15551234567", "hello")

    assert recorder.last.method == "POST"
    assert str(recorder.last.url) == f"{BASE_URL}/send-message"
    assert recorder.last_json == {"to": "+15551234567", "text": "hello"}
    assert result.response.message == "Message sent"
    assert result.response.data == {"msgId": 1}
    assert result.rate_limit is not None
    assert result.rate_limit.limit == 100
    assert result.rate_limit.remaining == 99
    assert result.rate_limit.reset_timestamp == 1700000000


async def test_send_media_uses_camel_case_keys(client: WasenderClient, recorder: Recorder) -> None:
    await client.send_image("+1", "https://img.test/a.png", caption="look")
    assert recorder.last_json == {"to": "+1", "text": "look", "imageUrl": "https://img.test/a.png"}

    await client.send_document("+1", "https://doc.test/a.pdf")
    assert recorder.last_json == {"to": "+1", "documentUrl": "https://doc.test/a.pdf"}

    await client.send_sticker("+1", "https://s.test/a.webp")
    assert recorder.last_json == {"to": "+1", "stickerUrl": "https://s.test/a.webp"}


async def test_send_contact_and_location(client: WasenderClient, recorder: Recorder) -> None:
    await client.send_contact("+1", "Alice", "+15550000000")
    assert recorder.last_json == {"to": "+1", "contact": {"name": "Alice", "phone": "+15550000000"}}

    await client.send_location("+1", 40.7, -74.0, name="NYC")
    assert recorder.last_json == {"to": "+1", "location": {"latitude": 40.7, "longitude": -74.0, "name": "NYC"}}


async def test_send_accepts_model_or_tagged_dict(client: WasenderClient, recorder: Recorder) -> None:
    message = LocationPinMessage(to="+1", location={"latitude": "1.5", "longitude": "2.5"})
    await client.send(message)
    assert recorder.last_json == {"to": "+1", "location": {"latitude": "1.5", "longitude": "2.5"}}

    await client.send({"messageType": "video", "to": "+1", "videoUrl": "https://v.test/a.mp4"})
    assert recorder.last_json == {"to": "+1", "videoUrl": "https://v.test/a.mp4"}


async def test_get_message_info(client: WasenderClient, recorder: Recorder) -> None:
    await client.get_message_info(123)

    assert recorder.last.method == "GET"
    assert str(recorder.last.url) == f"{BASE_URL}/messages/123/info"


# ---------------------------------------------------------------------------
# Contacts and groups
# ---------------------------------------------------------------------------


async def test_get_contacts(client: WasenderClient, recorder: Recorder) -> None:
    recorder.respond(
        json_body={
            "success": True,
            "message": "ok",
            "data": [{"id": "15551234567@s.whatsapp.net", "name": "Alice", "imgUrl": None, "exists": True}],
        }
    )

    result = await client.get_contacts()

    (contact,) = result.response.data
    assert contact.name == "Alice"
    assert contact.exists is True
    assert result.rate_limit is None


async def test_contact_paths(client: WasenderClient, recorder: Recorder) -> None:
    recorder.respond(json_body={"success": True, "message": "ok", "data": {"message": "Contact blocked"}})

    result = await client.block_contact("+15551234567")

    assert recorder.last.method == "POST"
    assert recorder.last.url.raw_path == b"/api/contacts/%2B15551234567/block"
    assert result.response.data.message == "Contact blocked"


async def test_group_jid_keeps_at_sign(client: WasenderClient, recorder: Recorder) -> None:
    recorder.respond(
        json_body={"success": True, "message": "ok", "data": {"id": "123-456@g.us", "subject": "Team", "participants": []}}
    )

    result = await client.get_group_metadata("123-456@g.us")

    assert recorder.last.url.path == "/api/groups/123-456@g.us/metadata"
    assert result.response.data.subject == "Team"


async def test_add_group_participants(client: WasenderClient, recorder: Recorder) -> None:
    recorder.respond(
        json_body={
            "success": True,
            "message": "ok",
            "data": [{"status": 200, "id": "15550000000@s.whatsapp.net", "message": "added"}],
        }
    )

    result = await client.add_group_participants("123@g.us", ["+15550000000"])

    assert recorder.last.url.path == "/api/groups/123@g.us/participants/add"
    assert recorder.last_json == {"participants": ["+15550000000"]}
    assert result.response.data[0].status == 200


async def test_update_group_settings_sends_only_set_values(client: WasenderClient, recorder: Recorder) -> None:
    recorder.respond(json_body={"success": True, "message": "ok", "data": {"subject": "New"}})

    await client.update_group_settings("123@g.us", UpdateGroupSettingsPayload(subject="New", announce=False))

    assert recorder.last.method == "PUT"
    assert recorder.last_json == {"subject": "New", "announce": False}


# ---------------------------------------------------------------------------
# Sessions
# ---------------------------------------------------------------------------


async def test_create_session(client: WasenderClient, recorder: Recorder) -> None:
    recorder.respond(json_body={"success": True, "message": "created", "data": SESSION})
    payload = CreateWhatsAppSessionPayload(
        name="Support", phone_number="+15551234567", account_protection=True, log_messages=False
    )

    result = await client.create_whatsapp_session(payload)

    assert recorder.last_json == {
        "name": "Support",
        "phone_number": "+15551234567",
        "account_protection": True,
        "log_messages": False,
    }
    session = result.response.data
    assert session.id == 7
    assert session.created_at.year == 2025
    assert session.webhook_events == ["messages.upsert"]


async def test_update_session_sends_only_explicit_fields(client: WasenderClient, recorder: Recorder) -> None:
    recorder.respond(json_body={"success": True, "message": "updated", "data": SESSION})

    await client.update_whatsapp_session(7, UpdateWhatsAppSessionPayload(webhook_url=None, log_messages=True))

    assert recorder.last.method == "PUT"
    assert str(recorder.last.url) == f"{BASE_URL}/whatsapp-sessions/7"
    assert recorder.last_json == {"webhook_url": None, "log_messages": True}


async def test_delete_session(client: WasenderClient, recorder: Recorder) -> None:
    recorder.respond(json_body={"success": True, "message": "deleted", "data": None})

    result = await client.delete_whatsapp_session(7)

    assert recorder.last.method == "DELETE"
    assert recorder.last.content == b""
    assert result.response.data is None


async def test_connect_session(client: WasenderClient, recorder: Recorder) -> None:
    recorder.respond(
        json_body={"success": True, "message": "ok", "data": {"status": "need_scan", "qrCode": "2@abc"}}
    )

    result = await client.connect_whatsapp_session(7, qr_as_image=True)

    assert str(recorder.last.url) == f"{BASE_URL}/whatsapp-sessions/7/connect"
    assert recorder.last_json == {"qr_as_image": True}
    assert result.response.data.status == "need_scan"
    assert result.response.data.qr_code == "2@abc"


async def test_regenerate_api_key(client: WasenderClient, recorder: Recorder) -> None:
    recorder.respond(json_body={"success": True, "api_key": "new-key"})

    result = await client.regenerate_api_key(7)

    assert str(recorder.last.url) == f"{BASE_URL}/whatsapp-sessions/7/regenerate-key"
    assert result.response.api_key == "new-key"


# ---------------------------------------------------------------------------
# Errors
# ---------------------------------------------------------------------------


async def test_rate_limited_error(client: WasenderClient, recorder: Recorder) -> None:
    recorder.respond(
        429,
        json_body={"success": False, "message": "Too many requests", "retry_after": 30},
        headers=RATE_LIMIT_HEADERS,
    )

    with pytest.raises(WasenderAPIError) as exc_info:
        await client.send_text("+1", "x")

    error = exc_info.value
    assert error.status_code == 429
    assert error.message == "Too many requests"
    assert error.api_message == "Too many requests"
    assert error.retry_after == 30
    assert error.rate_limit is not None
    assert error.rate_limit.remaining == 99


async def test_retry_after_header_is_used_when_body_has_none(client: WasenderClient, recorder: Recorder) -> None:
    recorder.respond(429, json_body={"success": False, "message": "slow down"}, headers={"Retry-After": "12"})

    with pytest.raises(WasenderAPIError) as exc_info:
        await client.get_groups()

    assert exc_info.value.retry_after == 12


async def test_validation_error_details(client: WasenderClient, recorder: Recorder) -> None:
    recorder.respond(
        422,
        json_body={"success": False, "message": "Invalid data", "errors": {"to": ["The to field is required."]}},
    )

    with pytest.raises(WasenderAPIError) as exc_info:
        await client.send_text("", "x")

    assert exc_info.value.status_code == 422
    assert exc_info.value.error_details == {"to": ["The to field is required."]}


async def test_success_false_with_200_is_an_error(client: WasenderClient, recorder: Recorder) -> None:
    recorder.respond(200, json_body={"success": False, "message": "Session not connected"})

    with pytest.raises(WasenderAPIError, match="Session not connected") as exc_info:
        await client.get_contacts()

    assert exc_info.value.status_code == 200


async def test_error_without_message_gets_generic_text(client: WasenderClient, recorder: Recorder) -> None:
    recorder.respond(500, json_body={"oops": True})

    with pytest.raises(WasenderAPIError, match="status 500") as exc_info:
        await client.get_contacts()

    assert exc_info.value.api_message is None


async def test_non_json_response(client: WasenderClient, recorder: Recorder) -> None:
    recorder.respond(502, text="<html>Bad Gateway</html>")

    with pytest.raises(WasenderAPIError, match="non-JSON") as exc_info:
        await client.get_contacts()

    assert exc_info.value.status_code == 502


async def test_unexpected_response_shape(client: WasenderClient, recorder: Recorder) -> None:
    recorder.respond(json_body={"success": True, "message": "ok", "data": "not a list"})

    with pytest.raises(WasenderAPIError, match="GetAllContactsResponse"):
        await client.get_contacts()


async def test_transport_error_is_wrapped(client: WasenderClient, recorder: Recorder) -> None:
    def fail(request: httpx.Request) -> httpx.Response:
        raise httpx.ConnectError("connection refused", request=request)

    recorder.reply = fail

    with pytest.raises(WasenderAPIError, match="connection refused") as exc_info:
        await client.get_contacts()

    assert isinstance(exc_info.value.__cause__, httpx.ConnectError)
    assert exc_info.value.status_code is None


# ---------------------------------------------------------------------------
# Construction
# ---------------------------------------------------------------------------


async def test_from_settings(recorder: Recorder) -> None:
    settings = WasenderSettings(api_key="k1", personal_access_token="p1", base_url="https://custom.test/api/")
    recorder.respond(json_body={"success": True, "message": "ok", "data": []})
    async with httpx.AsyncClient(transport=httpx.MockTransport(recorder)) as http:
        client = WasenderClient.from_settings(settings, http_client=http)
        await client.get_groups()

    assert client.api_key == "k1"
    assert client.personal_access_token == "p1"
    assert str(recorder.last.url) == "https://custom.test/api/groups"


async def test_from_environment(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("WASENDER_API_KEY", "env-key")

    client = WasenderClient.from_settings()

    assert client.api_key == "env-key"
    assert client.personal_access_token is None
    await client.aclose()


async def test_injected_http_client_is_not_closed(recorder: Recorder) -> None:
    http = httpx.AsyncClient(transport=httpx.MockTransport(recorder))
    async with WasenderClient(API_KEY, http_client=http):
        pass

    assert not http.is_closed
    await http.aclose()


async def test_owned_http_client_is_closed() -> None:
    client = WasenderClient(API_KEY)
    async with client:
        pass

    assert client._http.is_closed
