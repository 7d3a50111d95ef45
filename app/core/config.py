"""Service settings read from environment variables.

Reads from a .env file (via pydantic-settings) with defaults suited to local use.
Every value can be overridden with a REGISTRY_-prefixed environment variable:

    REGISTRY_LOG_LEVEL         logging level of the 'app' logger
    REGISTRY_MAX_UPLOAD_BYTES  largest accepted upload
    REGISTRY_SCHEMA_PATH       JSON file replacing the bundled registry configuration
    REGISTRY_PDF_X_DENSITY     pdfplumber layout density (points per character)
    REGISTRY_PDF_Y_DENSITY     pdfplumber layout density (points per line)
"""

from typing import Optional

from pydantic import field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    log_level: str = "INFO"
    max_upload_bytes: int = 10 * 1024 * 1024
    schema_path: Optional[str] = None

    # Narrower x density keeps the two-space gap between the sign and value columns
    pdf_x_density: float = 4.0
    pdf_y_density: float = 13.0

    @field_validator("log_level", mode="before")
    @classmethod
    def upper_level(cls, v: str) -> str:
        if isinstance(v, str):
            return v.strip().upper()
        return v

    @field_validator("schema_path", mode="before")
    @classmethod
    def empty_path_is_none(cls, v: Optional[str]) -> Optional[str]:
        if isinstance(v, str) and not v.strip():
            return None
        return v

    model_config = SettingsConfigDict(
        env_prefix="REGISTRY_", env_file=".env", env_file_encoding="utf-8", extra="ignore"
    )


_settings: Optional[Settings] = None


def get_settings() -> Settings:
    """Get or create the shared Settings singleton."""
    global _settings
    if _settings is None:
        _settings = Settings()
    return _settings
