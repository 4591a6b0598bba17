import re
from functools import lru_cache

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

_DURATION_UNITS = {"s": 1, "m": 60, "h": 3600, "d": 86400, "w": 604800}
_DURATION_RE = re.compile(r"^\s*(\d+)\s*([smhdw]?)\s*$", re.IGNORECASE)


def parse_duration(value) -> int:
    """Convert "3600", "15m", "1h", "7d" style durations to seconds."""
    if isinstance(value, bool):
        raise ValueError("duration must be a number of seconds or a string like '1h'")
    if isinstance(value, (int, float)):
        seconds = int(value)
    else:
        match = _DURATION_RE.match(str(value))
        if not match:
            raise ValueError(f"invalid duration: {value!r}")
        amount, unit = match.groups()
        seconds = int(amount) * _DURATION_UNITS[unit.lower() or "s"]
    if seconds <= 0:
        raise ValueError("duration must be positive")
    return seconds


class Settings(BaseSettings):
    """Application settings."""

    # Auth
    jwt_secret: str = Field(..., min_length=1)
    jwt_expires_in: int = Field(default=3600, description="Token lifetime, e.g. 3600, '15m', '1h', '7d'")

    # Database
    database_url: str = Field(..., min_length=1)
    database_echo: bool = False

    # Server
    host: str = "0.0.0.0"
    port: int = 5000
    log_level: str = "INFO"
    cors_origins: list[str] = ["*"]

    model_config = SettingsConfigDict(env_file=".env", case_sensitive=False, extra="ignore")

    @field_validator("jwt_expires_in", mode="before")
    @classmethod
    def _parse_expiry(cls, value):
        return parse_duration(value)

    @field_validator("log_level")
    @classmethod
    def _upper_log_level(cls, value: str) -> str:
        return value.upper()


@lru_cache()
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()
