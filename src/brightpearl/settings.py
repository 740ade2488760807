"""
brightpearl.settings

Central configuration model (Pydantic Settings).

Responsibilities:
- Read Brightpearl credentials and service options from `BRIGHTPEARL_*` env vars.
- Hide secrets and tokens from repr/logging.
- Produce the plain option mapping consumed by `brightpearl.client.Client`.
"""

from __future__ import annotations

from functools import lru_cache
from typing import Any, Literal

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

# Options forwarded to the client; everything else is process/service configuration.
CLIENT_OPTIONS: tuple[str, ...] = (
    "dev_reference",
    "dev_secret",
    "app_reference",
    "account_code",
    "account_token",
    "api_domain",
    "staff_token",
)


class Settings(BaseSettings):
    model_config = SettingsConfigDict(env_prefix="BRIGHTPEARL_", case_sensitive=False)

    env: Literal["dev", "test", "prod"] = "dev"
    service_name: str = "brightpearl-client"
    log_level: str = "INFO"

    # Callback receiver
    api_host: str = "0.0.0.0"
    api_port: int = 8080

    # Developer / app identity
    dev_reference: str = ""
    dev_secret: str = Field(default="", repr=False)
    app_reference: str = ""

    # Account
    account_code: str = ""
    account_token: str = Field(default="", repr=False)
    api_domain: str = ""
    staff_token: str = Field(default="", repr=False)

    def client_settings(self) -> dict[str, Any]:
        # Unset options are dropped so they never shadow client defaults (e.g. api_domain).
        return {
            name: value
            for name in CLIENT_OPTIONS
            if (value := getattr(self, name))
        }


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    return Settings()


# --- Module Notes -----------------------------------------------------------
# The client itself never reads the environment; callers (or the callback receiver)
# go through `get_settings()` and hand the resulting mapping to `Client`.
