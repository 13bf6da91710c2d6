"""Base model and the shapes shared by every REST call.

Wire names on the Wasender API are camelCase; Python attributes are
snake_case.  ``WasenderModel`` maps between the two, accepts either spelling
on input, and keeps fields it does not declare so nothing the server adds is
lost.
"""

from __future__ import annotations

from collections.abc import Mapping
from datetime import UTC, datetime
from typing import Generic, Literal, TypeVar

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel

ResponseT = TypeVar("ResponseT")


class WasenderModel(BaseModel):
    """Immutable camelCase wire model."""

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        extra="allow",
        frozen=True,
    )


# -- Success envelope --------------------------------------------------------


class WasenderSuccessResponse(WasenderModel):
    """Standard API success envelope."""

    success: Literal[True] = True
    message: str


# -- Rate limiting -----------------------------------------------------------

RATE_LIMIT_LIMIT_HEADER = "x-ratelimit-limit"
RATE_LIMIT_REMAINING_HEADER = "x-ratelimit-remaining"
RATE_LIMIT_RESET_HEADER = "x-ratelimit-reset"


class RateLimitInfo(WasenderModel):
    """Request quota parsed from ``X-RateLimit-*`` response headers."""

    limit: int | None = None
    remaining: int | None = None
    reset_timestamp: int | None = None
    """Unix timestamp (seconds) when the current window resets."""

    def reset_datetime(self) -> datetime | None:
        """Return the reset time as an aware UTC datetime, if known."""
        if self.reset_timestamp is None:
            return None
        return datetime.fromtimestamp(self.reset_timestamp, tz=UTC)


def _header_int(headers: Mapping[str, str], name: str) -> int | None:
    value = headers.get(name)
    if value is None:
        return None
    try:
        return int(value.strip())
    except ValueError:
        return None


def parse_rate_limit_headers(headers: Mapping[str, str]) -> RateLimitInfo | None:
    """Extract rate-limit info from response headers.

    Header names are matched case-insensitively.  Values that are not
    integers are reported as ``None``.  Returns ``None`` when the response
    carries none of the three headers.
    """
    lowered = {key.lower(): value for key, value in headers.items()}
    names = (RATE_LIMIT_LIMIT_HEADER, RATE_LIMIT_REMAINING_HEADER, RATE_LIMIT_RESET_HEADER)
    if not any(name in lowered for name in names):
        return None
    return RateLimitInfo(
        limit=_header_int(lowered, RATE_LIMIT_LIMIT_HEADER),
        remaining=_header_int(lowered, RATE_LIMIT_REMAINING_HEADER),
        reset_timestamp=_header_int(lowered, RATE_LIMIT_RESET_HEADER),
    )


# -- Result ------------------------------------------------------------------


class WasenderResult(BaseModel, Generic[ResponseT]):
    """Parsed response body plus the rate-limit info of the call."""

    model_config = ConfigDict(frozen=True)

    response: ResponseT
    rate_limit: RateLimitInfo | None = None
