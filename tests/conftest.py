"""Shared test fixtures: environment isolation and sample webhook deliveries."""

from __future__ import annotations

import os
from collections.abc import Iterator
from pathlib import Path
from typing import Any

import pytest

from wasender.settings import get_settings

USER_JID = "12345@s.whatsapp.net"
GROUP_JID = "99999-161@g.us"


def _key(**overrides: Any) -> dict[str, Any]:
    return {"id": "3EB0C767D26A1D8E5A4F", "fromMe": False, "remoteJid": USER_JID, **overrides}


# Minimal valid ``data`` for each known event name.
SAMPLE_DATA: dict[str, Any] = {
    "chats.upsert": [{"id": USER_JID, "name": "Alice", "unreadCount": 2, "conversationTimestamp": 1697640000}],
    "chats.update": [{"id": USER_JID, "unreadCount": 0}],
    "chats.delete": [USER_JID, GROUP_JID],
    "groups.upsert": [
        {
            "id": GROUP_JID,
            "subject": "Team",
            "owner": USER_JID,
            "owner_country_code": "US",
            "participants": [{"id": USER_JID, "admin": "superadmin"}, {"id": "67890@s.whatsapp.net"}],
        }
    ],
    "groups.update": [{"id": GROUP_JID, "announce": True}],
    "group-participants.update": {
        "id": GROUP_JID,
        "participants": [USER_JID, {"id": "67890@s.whatsapp.net", "isAdmin": True}],
        "action": "promote",
    },
    "contacts.upsert": [{"id": USER_JID, "name": "Bob", "imgUrl": None}],
    "contacts.update": [{"id": USER_JID, "notify": "Bobby"}],
    "messages.upsert": {
        "key": _key(senderPn=USER_JID, cleanSenderPn="12345"),
        "message": {"conversation": "hi"},
        "pushName": "Bob",
        "messageTimestamp": 1697640000,
    },
    "messages-personal.received": {"key": _key(), "message": {"conversation": "hello"}},
    "messages-newsletter.received": {"key": _key(remoteJid="120363@newsletter"), "message": {"conversation": "promo"}},
    "messages-group.received": {
        "key": _key(remoteJid=GROUP_JID, participant=USER_JID),
        "message": {"conversation": "group hello"},
    },
    "messages.received": {"key": _key(), "message": {"conversation": "generic"}},
    "call.received": {
        "call": {"id": "call123", "from": USER_JID, "date": "2025-10-17T12:00:00Z", "isGroup": False},
    },
    "poll.results": {
        "key": _key(id="poll1"),
        "pollResult": [{"name": "Option 1", "voters": [USER_JID]}, {"name": "Option 2", "voters": []}],
    },
    "messages.update": [{"key": _key(fromMe=True), "update": {"status": "read"}}],
    "messages.delete": {"keys": [_key(), _key(id="ANOTHER")]},
    "messages.reaction": [
        {
            "key": _key(),
            "reaction": {"text": "\U0001f44d", "key": _key(fromMe=True), "senderTimestampMs": "1697640000000"},
        }
    ],
    "message-receipt.update": [
        {"key": _key(fromMe=True), "receipt": {"userJid": USER_JID, "status": "delivered", "t": 1697640000}}
    ],
    "message.sent": {"key": _key(fromMe=True), "message": {"conversation": "outgoing"}, "status": "sent"},
    "session.status": {"status": "connected", "session_id": "sess-1"},
    "qrcode.updated": {"qr": "data:image/png;base64,iVBORw0KGgo=", "session_id": "sess-1"},
}


def make_delivery(event: str, data: Any, **extra: Any) -> dict[str, Any]:
    return {"event": event, "timestamp": 1697640000, "data": data, "sessionId": "session1", **extra}


@pytest.fixture(autouse=True)
def _isolated_settings(monkeypatch: pytest.MonkeyPatch, tmp_path: Path) -> Iterator[None]:
    """Strip WASENDER_* variables and any .env so settings start from defaults."""
    for key in list(os.environ):
        if key.startswith("WASENDER_"):
            monkeypatch.delenv(key, raising=False)
    monkeypatch.chdir(tmp_path)
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


@pytest.fixture
def sample_deliveries() -> dict[str, dict[str, Any]]:
    """One minimal valid delivery per known event name."""
    return {name: make_delivery(name, data) for name, data in SAMPLE_DATA.items()}
