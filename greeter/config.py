"""Process settings, read once from the environment at startup."""

from __future__ import annotations

from pydantic import AliasChoices, Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from greeter.constants import DEFAULT_PORT, MAX_PORT


class Settings(BaseSettings):
    """Configuration for the greeter service.

    Build one instance in ``main()`` and hand it to ``create_app`` and
    ``build_server``; nothing else reads the environment.
    """

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        frozen=True,
    )

    # Server
    port: int = Field(
        default=DEFAULT_PORT,
        ge=0,
        le=MAX_PORT,
        validation_alias=AliasChoices("APP_PORT_NUMBER"),
    )

    # Observability
    log_level: str = "INFO"
    metrics_port: int | None = Field(default=None, ge=0, le=MAX_PORT)

    @field_validator("port", mode="before")
    @classmethod
    def default_blank_port(cls, value: object) -> object:
        """Treat an empty APP_PORT_NUMBER the same as an unset one."""
        if value is None:
            return DEFAULT_PORT
        if isinstance(value, str) and not value.strip():
            return DEFAULT_PORT
        return value

    @field_validator("metrics_port", mode="before")
    @classmethod
    def blank_metrics_port(cls, value: object) -> object:
        if isinstance(value, str) and not value.strip():
            return None
        return value

    @field_validator("log_level")
    @classmethod
    def normalize_log_level(cls, value: str) -> str:
        return value.strip().upper() or "INFO"
