"""Errors raised by the REST client."""

from __future__ import annotations

from typing import Any

from wasender.models.common import RateLimitInfo


class WasenderAPIError(Exception):
    """A Wasender API call failed.

    Raised for non-2xx responses, ``success: false`` bodies, bodies that are
    not JSON, transport failures, and missing credentials (before any
    request is sent; ``status_code`` is ``None`` then).
    """

    def __init__(
        self,
        message: str,
        *,
        status_code: int | None = None,
        api_message: str | None = None,
        error_details: dict[str, Any] | None = None,
        rate_limit: RateLimitInfo | None = None,
        retry_after: int | None = None,
    ) -> None:
        super().__init__(message)
        self.message = message
        self.status_code = status_code
        self.api_message = api_message
        self.error_details = error_details
        self.rate_limit = rate_limit
        self.retry_after = retry_after

    @classmethod
    def from_response_body(
        cls,
        status_code: int,
        body: Any,
        *,
        rate_limit: RateLimitInfo | None = None,
        retry_after_header: str | None = None,
    ) -> WasenderAPIError:
        """Build an error from a decoded error response body.

        The API answers failures with ``{"success": false, "message": ...,
        "errors": {...}, "retry_after": ...}``; any of those may be absent.
        """
        api_message: str | None = None
        error_details: dict[str, Any] | None = None
        retry_after: int | None = None
        if isinstance(body, dict):
            if isinstance(body.get("message"), str):
                api_message = body["message"]
            if isinstance(body.get("errors"), dict):
                error_details = body["errors"]
            if isinstance(body.get("retry_after"), int):
                retry_after = body["retry_after"]
        if retry_after is None and retry_after_header and retry_after_header.strip().isdigit():
            retry_after = int(retry_after_header.strip())

        message = api_message or f"Wasender API request failed with status {status_code}"
        return cls(
            message,
            status_code=status_code,
            api_message=api_message,
            error_details=error_details,
            rate_limit=rate_limit,
            retry_after=retry_after,
        )

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.message!r}, status_code={self.status_code!r})"
