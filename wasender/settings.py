"""SDK configuration loaded from WASENDER_* environment variables."""

from __future__ import annotations

from functools import lru_cache

from pydantic import SecretStr
from pydantic_settings import BaseSettings, SettingsConfigDict

DEFAULT_BASE_URL = "https://www.wasenderapi.com/api"


class WasenderSettings(BaseSettings):
    """Wasender SDK settings.

    All fields are read from environment variables with the ``WASENDER_``
    prefix.  For example, ``WASENDER_API_KEY=...`` maps to ``api_key``.
    """

    model_config = SettingsConfigDict(
        env_prefix="WASENDER_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # -- Logging ---------------------------------------------------------------
    log_level: str = "INFO"
    log_json: bool = False
    """Emit JSON lines instead of the colored console format."""

    # -- API -------------------------------------------------------------------
    api_key: SecretStr | None = None
    """Session API key.  Used by message, contact and group endpoints."""

    personal_access_token: SecretStr | None = None
    """Account-scoped token.  Required by the ``/whatsapp-sessions`` endpoints."""

    base_url: str = DEFAULT_BASE_URL
    request_timeout: float = 30.0

    # -- Webhook receiver ------------------------------------------------------
    webhook_secret: SecretStr | None = None
    """Secret configured in the Wasender dashboard.  The receiver refuses all
    deliveries while this is unset or empty."""

    host: str = "0.0.0.0"  # noqa: S104
    port: int = 8000

    def webhook_secret_value(self) -> str | None:
        """The webhook secret, or ``None`` when unset or empty."""
        if self.webhook_secret is None:
            return None
        return self.webhook_secret.get_secret_value() or None


@lru_cache(maxsize=1)
def get_settings() -> WasenderSettings:
    """Return a cached settings instance.

    Reads from environment variables and ``.env`` on first call, then returns
    the same object.  Call ``get_settings.cache_clear()`` in tests to force a
    re-read after overriding env vars.
    """
    return WasenderSettings()
