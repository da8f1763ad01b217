"""Engine configuration using pydantic-settings."""

from pathlib import Path

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

# Find .env file: check backend dir first, then project root
_BACKEND_DIR = Path(__file__).parent.parent
_PROJECT_ROOT = _BACKEND_DIR.parent
_ENV_FILE = _BACKEND_DIR / ".env" if (_BACKEND_DIR / ".env").exists() else _PROJECT_ROOT / ".env"


class Settings(BaseSettings):
    """Projection settings loaded from DOCMIRROR_* environment variables."""

    model_config = SettingsConfigDict(
        env_prefix="DOCMIRROR_",
        env_file=str(_ENV_FILE),
        env_file_encoding="utf-8",
        extra="ignore",
    )

    # Nested map fields deeper than this raise SchemaDepthExceededError
    max_schema_depth: int = Field(default=32, ge=1)

    # Key ordering used when serializing json-typed fields
    json_sort_keys: bool = True


settings = Settings()
