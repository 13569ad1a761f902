"""Library settings loaded from environment variables."""

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

LEEWAY_SECONDS_DEFAULT = 0
LOG_LEVEL_DEFAULT = "WARNING"


class JWTSettings(BaseSettings):
    """Signing and validation settings shared by builders and parsers."""

    model_config = SettingsConfigDict(env_prefix="SIMPLEJWT_", frozen=True)

    # None selects the digest output length (32/48/64 bytes).
    pss_salt_length: int | None = Field(default=None, ge=0)
    leeway_seconds: int = Field(default=LEEWAY_SECONDS_DEFAULT, ge=0)
    log_level: str = LOG_LEVEL_DEFAULT
