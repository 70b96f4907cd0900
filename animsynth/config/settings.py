"""Application Settings - Environment-based configuration.

Uses Pydantic Settings for validation and type coercion. Every field can
be overridden with an ``ANIMSYNTH_``-prefixed environment variable or a
``.env`` file in the working directory.

These are caller defaults: the batch runner and CLI read them, while the
merge functions themselves only take plain arguments.
"""

from functools import lru_cache
from typing import Literal

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from animsynth.config.constants import SYNTH


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_prefix="ANIMSYNTH_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # Output Configuration
    output_dir: str = Field(
        default=SYNTH.DEFAULT_OUTPUT_DIR,
        description="Directory synthesized clips are written to",
    )
    prefix: str = Field(
        default=SYNTH.DEFAULT_PREFIX, description="Prepended to each output clip name"
    )
    suffix: str = Field(
        default=SYNTH.DEFAULT_SUFFIX, description="Appended to each output clip name"
    )

    # Merge Configuration
    zero_epsilon: float = Field(
        default=SYNTH.ZERO_EPSILON,
        gt=0.0,
        le=1.0,
        description="Merged weights with magnitude below this are dropped",
    )

    # Logging
    log_level: Literal["DEBUG", "INFO", "WARNING", "ERROR"] = Field(
        default="INFO", description="Logging level"
    )
    log_json: bool = Field(default=False, description="Emit JSON log lines")

    # Observability
    metrics_textfile: str | None = Field(
        default=None,
        description="Write Prometheus metrics to this file after a run",
    )

    @field_validator("log_level", mode="before")
    @classmethod
    def normalize_log_level(cls, v: str) -> str:
        """Accept lower-case level names."""
        if isinstance(v, str):
            return v.upper()
        return v

    @field_validator("output_dir")
    @classmethod
    def validate_output_dir(cls, v: str) -> str:
        """Output directory must not be blank."""
        if not v.strip():
            raise ValueError("output_dir must not be empty")
        return v


@lru_cache
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()
