"""Webhook signature check.

The platform documents the signature as the configured secret echoed back in
the ``x-webhook-signature`` header, compared as a plain string.  This is NOT
a cryptographic integrity check: it proves only that the sender knows the
secret.  Do not swap in an HMAC scheme here until the platform documents one;
a guessed scheme would reject every genuine delivery.
"""

from __future__ import annotations

WEBHOOK_SIGNATURE_HEADER = "x-webhook-signature"


def verify_wasender_webhook_signature(
    request_signature: str | None,
    configured_secret: str | None,
) -> bool:
    """Return ``True`` when the signature header equals the configured secret.

    Either value being ``None`` or empty fails the check.
    """
    if not request_signature or not configured_secret:
        return False
    return request_signature == configured_secret
