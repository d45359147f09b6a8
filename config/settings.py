from pydantic_settings import BaseSettings, SettingsConfigDict
from pydantic import field_validator
from pathlib import Path
from typing import Optional


class Settings(BaseSettings):
    """Application settings - reads from environment variables"""

    # Supabase
    supabase_url: str = ""
    supabase_key: str = ""
    supabase_service_key: str = ""
    db_schema: str = "public"

    # Auth
    auth_callback_path: str = "/auth/callback"
    public_base_url: str = "http://localhost:8080"
    session_cookie_name: str = "gms_session"
    cookie_secure: bool = False

    # Web server
    host: str = "0.0.0.0"
    port: int = 8080

    # Storage / functions
    photos_bucket: str = "photos"
    documents_bucket: str = "official-documents"
    batch_import_function: str = "batch-import-registrations"
    default_competition_id: str = "default"

    # Console
    competition_title: str = "2025 National University Cycling Championship"
    export_prefix: str = "CUCC"
    toast_ttl_seconds: float = 5.0
    max_photo_bytes: int = 2 * 1024 * 1024
    max_upload_bytes: int = 50 * 1024 * 1024
    default_viewer_role: str = "Leader"
    display_utc_offset_hours: Optional[float] = 8.0
    language: str = "zh"

    # Environment
    env: str = "development"
    debug: bool = False

    @field_validator('auth_callback_path', mode='before')
    @classmethod
    def normalize_callback(cls, v):
        if isinstance(v, str) and v and not v.startswith("/"):
            return "/" + v
        return v

    @property
    def service_key(self) -> str:
        """Service key wins over the anon key when both are set"""
        return self.supabase_service_key or self.supabase_key

    @property
    def callback_url(self) -> str:
        return self.public_base_url.rstrip("/") + self.auth_callback_path

    # Pydantic v2 config
    model_config = SettingsConfigDict(
        env_file=".env" if Path(".env").exists() else None,
        env_file_encoding="utf-8",
        extra="ignore",
        case_sensitive=False,  # SUPABASE_URL == supabase_url
    )


def load_settings(**overrides) -> Settings:
    """Build settings from the environment, with explicit overrides (tests)"""
    return Settings(**overrides)

