"""Simplified configuration management."""

import os
from functools import lru_cache
from pathlib import Path
from typing import List, Optional

from pydantic import BaseModel, Field

from .ollama_client import DEFAULT_BASE_URL, DEFAULT_MODEL, OllamaConfig


def _load_env_file() -> None:
    """Load .env from root directory if present."""
    env_path = Path(__file__).parent.parent / ".env"
    if not env_path.is_file():
        return
    try:
        for line in env_path.read_text(encoding="utf-8").splitlines():
            stripped = line.strip()
            if stripped and not stripped.startswith("#") and "=" in stripped:
                key, value = stripped.split("=", 1)
                key, value = key.strip(), value.strip().strip("'\"")
                if key and value and key not in os.environ:
                    os.environ[key] = value
    except OSError:
        pass


_load_env_file()


DEFAULT_APP_NAME = "Journal Insights Server"
DEFAULT_APP_VERSION = "0.1.0"
DEFAULT_DATABASE_PATH = Path(__file__).resolve().parent.parent / "data" / "journal.db"


def _env_float(name: str) -> Optional[float]:
    raw = os.getenv(name)
    if not raw:
        return None
    try:
        return float(raw)
    except ValueError:
        return None


def _get_port() -> int:
    """Get server port, checking the platform PORT first, then JOURNAL_PORT."""
    port = os.getenv("PORT") or os.getenv("JOURNAL_PORT")
    if port:
        try:
            return int(port)
        except ValueError:
            pass
    return 8001


class Settings(BaseModel):
    """Application settings with lightweight env fallbacks."""

    # App metadata
    app_name: str = Field(default=DEFAULT_APP_NAME)
    app_version: str = Field(default=DEFAULT_APP_VERSION)

    # Server runtime
    server_host: str = Field(default=os.getenv("JOURNAL_HOST", "0.0.0.0"))
    server_port: int = Field(default_factory=_get_port)
    log_level: str = Field(default=os.getenv("JOURNAL_LOG_LEVEL", "INFO"))

    # Storage
    database_path: Path = Field(default=Path(os.getenv("JOURNAL_DB_PATH", str(DEFAULT_DATABASE_PATH))))

    # Local inference server
    ollama_base_url: str = Field(default=os.getenv("OLLAMA_BASE_URL", DEFAULT_BASE_URL))
    ollama_model: str = Field(default=os.getenv("OLLAMA_MODEL", DEFAULT_MODEL))
    ollama_timeout: Optional[float] = Field(default_factory=lambda: _env_float("OLLAMA_TIMEOUT"))

    # Dates shown in digests and fallback summaries
    display_timezone: str = Field(default=os.getenv("JOURNAL_DISPLAY_TIMEZONE", "UTC"))

    # HTTP behaviour
    cors_allow_origins_raw: str = Field(default=os.getenv("JOURNAL_CORS_ALLOW_ORIGINS", "*"))
    enable_docs: bool = Field(default=os.getenv("JOURNAL_ENABLE_DOCS", "1") != "0")
    docs_url: Optional[str] = Field(default=os.getenv("JOURNAL_DOCS_URL", "/docs"))

    @property
    def cors_allow_origins(self) -> List[str]:
        """Parse CORS origins from comma-separated string."""
        if self.cors_allow_origins_raw.strip() in {"", "*"}:
            return ["*"]
        return [origin.strip() for origin in self.cors_allow_origins_raw.split(",") if origin.strip()]

    @property
    def resolved_docs_url(self) -> Optional[str]:
        """Return documentation URL when docs are enabled."""
        return (self.docs_url or "/docs") if self.enable_docs else None

    @property
    def ollama_config(self) -> OllamaConfig:
        """Connection settings handed to the inference client."""
        return OllamaConfig(
            base_url=self.ollama_base_url,
            model=self.ollama_model,
            timeout=self.ollama_timeout,
        )


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()
