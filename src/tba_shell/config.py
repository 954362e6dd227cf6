# src/tba_shell/config.py
from __future__ import annotations
from pydantic_settings import BaseSettings, SettingsConfigDict
from pydantic import Field

class Settings(BaseSettings):
    # --- API endpoint / auth ---
    TBA_API_BASE: str = "https://www.thebluealliance.com/api/v3"
    TBA_AUTH_KEY: str | None = None  # X-TBA-Auth-Key (read key from your TBA account page)

    # --- App identity (sent as User-Agent and X-TBA-App-Id) ---
    TBA_AUTHOR_ID: str = "frc492"
    TBA_APP_NAME: str = "TBAShell"
    TBA_APP_VERSION: str = "v0.1"

    # --- Transport ---
    # None keeps the transport default (no timeout)
    TBA_HTTP_TIMEOUT: float | None = Field(default=None, gt=0, description="Per-request timeout in seconds")

    LOG_LEVEL: str = "INFO"

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    def app_id(self) -> str:
        """Value of the X-TBA-App-Id header: <author>:<app>:<version>."""
        return f"{self.TBA_AUTHOR_ID}:{self.TBA_APP_NAME}:{self.TBA_APP_VERSION}"

settings = Settings()
