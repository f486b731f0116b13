"""
core/config.py
----------------

Configuration for the WMS bridge.

Defines strongly‑typed settings loaded from the environment using
``pydantic-settings``. The variables keep the names the WMS deployment
already uses (``WMS_BASE_URI``, ``WMS_USERNAME``, ``WMS_PASSWORD``).
The settings object is frozen and is handed explicitly to the request
executor; nothing below the application factory reads the environment.
"""

from __future__ import annotations

from functools import lru_cache
from typing import Literal, Tuple

from pydantic import Field, SecretStr, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

# Delays (seconds) applied before each attempt of one logical call. The
# first attempt is immediate; the other five absorb the intermittent 401
# the NTLM handshake returns on first negotiation.
RETRY_DELAYS: Tuple[float, ...] = (0.0, 0.2, 0.3, 0.4, 0.6, 1.0)


class WmsSettings(BaseSettings):
    """Connection settings for the WMS HTTP API.

    Environment variables are prefixed with ``WMS_``. For example, to
    lengthen the per-attempt timeout set ``WMS_HTTP_TIMEOUT=60``. The
    retry schedule can be overridden with a JSON list such as
    ``WMS_RETRY_DELAYS='[0, 0.5, 1]'``.
    """

    base_uri: str = Field(..., description="Base URI of the WMS HTTP service.")
    username: str = Field(..., description="Account used to authenticate against the WMS.")
    password: SecretStr = Field(..., description="Password of the WMS account.")
    auth_scheme: Literal["ntlm", "basic"] = Field("ntlm", description="Authentication scheme attached to every request.")

    http_timeout: float = Field(30.0, gt=0, description="Timeout for a single attempt in seconds.")
    retry_delays: Tuple[float, ...] = Field(RETRY_DELAYS, min_length=1, description="Delay before each attempt in seconds.")

    model_config = SettingsConfigDict(env_prefix="WMS_", env_file=None, case_sensitive=False, frozen=True)

    @field_validator("retry_delays")
    @classmethod
    def _non_negative_delays(cls, value: Tuple[float, ...]) -> Tuple[float, ...]:
        if any(delay < 0 for delay in value):
            raise ValueError("retry delays must be non-negative")
        return value


@lru_cache()
def get_settings() -> WmsSettings:
    """Return a cached instance of the WMS settings.

    Only the application factory calls this; every other component
    receives the settings object through its constructor.
    """
    return WmsSettings()
