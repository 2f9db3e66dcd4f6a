"""Application configuration."""

from typing import Literal

from pydantic import BaseModel, Field
from pydantic import ValidationError as PydanticValidationError
from pydantic_settings import BaseSettings, SettingsConfigDict

from credgen.domain.model import (
    DEFAULT_ENCODING,
    DEFAULT_ID_LENGTH,
    DEFAULT_ID_PREFIX,
    DEFAULT_SECRET_LENGTH,
)
from credgen.domain.value import EncodingFormat
from credgen.util.error import ConfigurationError


class GenerationDefaults(BaseModel):
    """Default values for the command-line generation flags.

    Only the CLI reads these; the library API always uses the built-in
    defaults unless the caller passes options.
    """

    id_prefix: str = Field(default=DEFAULT_ID_PREFIX, min_length=1)
    id_length: int = Field(default=DEFAULT_ID_LENGTH, ge=1)
    secret_length: int = Field(default=DEFAULT_SECRET_LENGTH, ge=1)
    encoding: EncodingFormat = DEFAULT_ENCODING


class ObservabilitySettings(BaseModel):
    """Observability configuration for Logfire."""

    # Logfire API token (optional - if not set, nothing leaves the machine)
    # Can be set via CREDGEN_OBSERVABILITY__LOGFIRE_TOKEN env var
    logfire_token: str | None = None

    # Whether to send telemetry to Logfire cloud
    # If None, sends only when a token is present
    send_to_logfire: bool | None = None


class Settings(BaseSettings):
    """Application settings.

    Every value can be overridden from the environment with the
    ``CREDGEN_`` prefix, using ``__`` for nested fields:

        CREDGEN_DEBUG=true
        CREDGEN_DEFAULTS__ID_PREFIX=myapp
        CREDGEN_DEFAULTS__ENCODING=hex
        CREDGEN_OBSERVABILITY__LOGFIRE_TOKEN=...
    """

    model_config = SettingsConfigDict(
        env_prefix="CREDGEN_",
        env_file=".env",
        env_file_encoding="utf-8",
        env_nested_delimiter="__",
        extra="ignore",
    )

    environment: Literal["test", "development", "production"] = "development"
    debug: bool = False

    defaults: GenerationDefaults = GenerationDefaults()
    observability: ObservabilitySettings = ObservabilitySettings()


def load_settings() -> Settings:
    """Load settings from the environment.

    Raises:
        ConfigurationError: If an environment value is invalid
    """
    try:
        return Settings()
    except PydanticValidationError as e:
        first = e.errors()[0]
        location = ".".join(str(part) for part in first["loc"])
        raise ConfigurationError(
            f"Invalid configuration for {location}: {first['msg']}"
        ) from e
