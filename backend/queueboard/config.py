"""Application configuration using pydantic-settings."""

import json
from typing import Literal

from pydantic import Field, computed_field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_file=("../.env", ".env"),  # Load root .env first, then backend/.env (overrides)
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # Ledger backend
    ledger_backend: Literal["sheets", "memory"] = "sheets"
    ledger_header_rows: int = 0  # Leading rows of the sheet that are not tickets

    # Google Sheets (service account) - never hardcode, set via env
    google_sheet_id: str = ""
    google_service_account_email: str = ""
    google_private_key: str = ""
    google_scopes: str = "https://www.googleapis.com/auth/spreadsheets"
    sheet_name: str = "Queue"

    # Queue behaviour
    queue_scope: Literal["today", "all"] = "today"
    ticket_prefix: str = "A"
    ticket_digits: int = 3
    serialize_issuance: bool = True
    preview_size: int = 3

    # Application
    debug: bool = False
    log_level: str = "info"
    log_format: Literal["console", "json"] = "console"  # json for log shippers in production
    timezone: str = "Asia/Seoul"
    api_prefix: str = "/api"

    # CORS origins - stored as string to avoid pydantic-settings JSON parsing
    # Supports comma-separated values or JSON array format
    backend_cors_origins_str: str = Field(
        default="http://localhost:3000,http://127.0.0.1:3000",
        validation_alias="BACKEND_CORS_ORIGINS",
    )

    @computed_field  # type: ignore[prop-decorator]
    @property
    def backend_cors_origins(self) -> list[str]:
        """Parse CORS origins from string (comma-separated or JSON array)."""
        v = self.backend_cors_origins_str
        if not v:
            return []
        if v.startswith("["):
            result: list[str] = json.loads(v)
            return result
        return [origin.strip() for origin in v.split(",") if origin.strip()]

    @property
    def google_private_key_pem(self) -> str:
        """Private key with escaped newlines restored (env files store it on one line)."""
        return self.google_private_key.replace("\\n", "\n")


settings = Settings()
