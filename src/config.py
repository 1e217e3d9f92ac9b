"""Configuration management using Pydantic Settings."""

from functools import lru_cache
from pathlib import Path
from typing import Literal

from pydantic import field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


# =============================================================================
# Find .env file
# =============================================================================

def find_env_file() -> str:
    """Find the .env file relative to project root."""
    candidates = [
        "config/.env",
        ".env",
        Path(__file__).parent.parent / "config" / ".env",
    ]

    for candidate in candidates:
        path = Path(candidate)
        if path.exists():
            return str(path)

    return "config/.env"  # Default


ENV_FILE = find_env_file()

LITTLE_HOTELIER_BASE_URL = (
    "https://apac.littlehotelier.com/api/v1/properties/kakapolodgedirect/rates.json"
)


# =============================================================================
# Settings Classes
# =============================================================================


class LittleHotelierSettings(BaseSettings):
    """Little Hotelier rates API settings."""

    model_config = SettingsConfigDict(
        env_file=ENV_FILE,
        env_file_encoding="utf-8",
        env_prefix="LITTLE_HOTELIER_",
        extra="ignore",
        frozen=True,
    )

    base_url: str = LITTLE_HOTELIER_BASE_URL
    timeout_seconds: float = 5.0  # httpx default


class CorsSettings(BaseSettings):
    """Cross-origin policy for browser clients."""

    model_config = SettingsConfigDict(
        env_file=ENV_FILE,
        env_file_encoding="utf-8",
        env_prefix="CORS_",
        extra="ignore",
        frozen=True,
    )

    allowed_origins: list[str] = [
        "https://kakapolodge.github.io",
        "https://www.kakapolodge.co.nz",
        "https://kakapolodge.co.nz",
    ]
    allowed_methods: list[str] = ["GET", "POST", "OPTIONS"]
    allow_credentials: bool = False

    @field_validator("allowed_origins")
    @classmethod
    def strip_trailing_slash(cls, v: list[str]) -> list[str]:
        # Browsers send Origin without a trailing slash
        return [origin.rstrip("/") for origin in v]


class AppSettings(BaseSettings):
    """Application-level settings."""

    model_config = SettingsConfigDict(
        env_file=ENV_FILE,
        env_file_encoding="utf-8",
        extra="ignore",
        frozen=True,
    )

    # Server
    host: str = "0.0.0.0"
    port: int = 8080

    # Logging
    log_level: Literal["DEBUG", "INFO", "WARNING", "ERROR"] = "INFO"
    log_format: Literal["json", "console"] = "console"

    @field_validator("port")
    @classmethod
    def validate_port(cls, v: int) -> int:
        if not 1 <= v <= 65535:
            raise ValueError("Port must be between 1 and 65535")
        return v


class Settings(BaseSettings):
    """Main settings container with lazy loading."""

    model_config = SettingsConfigDict(
        env_file=ENV_FILE,
        env_file_encoding="utf-8",
        extra="ignore",
    )

    # Cache for sub-settings
    _little_hotelier: LittleHotelierSettings | None = None
    _cors: CorsSettings | None = None
    _app: AppSettings | None = None

    @property
    def little_hotelier(self) -> LittleHotelierSettings:
        if self._little_hotelier is None:
            self._little_hotelier = LittleHotelierSettings()
        return self._little_hotelier

    @property
    def cors(self) -> CorsSettings:
        if self._cors is None:
            self._cors = CorsSettings()
        return self._cors

    @property
    def app(self) -> AppSettings:
        if self._app is None:
            self._app = AppSettings()
        return self._app

    # Convenience accessors
    @property
    def little_hotelier_base_url(self) -> str:
        return self.little_hotelier.base_url

    @property
    def little_hotelier_timeout(self) -> float:
        return self.little_hotelier.timeout_seconds


@lru_cache
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()
