"""Typed runtime settings with dotenv support and startup validation."""

from pydantic import AliasChoices, Field, ValidationError, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class SettingsLoadError(RuntimeError):
    """Raised when runtime settings cannot be loaded or validated."""


class AppSettings(BaseSettings):
    """Application settings for the diagnostics web process.

    Environment variable names map directly to field names in uppercase,
    except `application_port` which reads from `PORT`.

    Per-request diagnostic values (`DATABASE_URL`, `REDIS_URL`, display
    variables) are not part of this model; they are read through a
    `ConfigValueProvider` on every request.

    Attributes:
        application_host: Host interface for web server binding.
        application_port: Web server port.
        probe_timeout_seconds: Deadline applied to each dependency probe.
        uptime_source_path: File holding host uptime in seconds.
        log_level: Root logger level name.
        log_format: Format string for the root log handler.
    """

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
        case_sensitive=False,
        populate_by_name=True,
    )

    application_host: str = Field(default="0.0.0.0")
    application_port: int = Field(
        default=80,
        ge=1,
        le=65535,
        validation_alias=AliasChoices("application_port", "port"),
    )
    probe_timeout_seconds: float = Field(default=3.0, gt=0)
    uptime_source_path: str = Field(default="/proc/uptime", min_length=1)
    log_level: str = Field(default="INFO")
    log_format: str = Field(default="%(asctime)s %(levelname)s %(name)s: %(message)s")

    @field_validator("log_level")
    @classmethod
    def _validate_log_level(cls, value: str) -> str:
        normalized_value = value.strip().upper()
        if normalized_value not in {"CRITICAL", "ERROR", "WARNING", "INFO", "DEBUG"}:
            raise ValueError("log_level must be one of CRITICAL, ERROR, WARNING, INFO, DEBUG")
        return normalized_value


def config_load_settings() -> AppSettings:
    """Load and validate runtime settings from environment and dotenv.

    Returns:
        AppSettings: Validated runtime settings object.

    Raises:
        SettingsLoadError: Raised when settings are invalid.
    """

    try:
        return AppSettings()
    except ValidationError as error:
        raise SettingsLoadError(
            f"Startup configuration validation failed. Update .env or environment variables. Details: {error}"
        ) from error
