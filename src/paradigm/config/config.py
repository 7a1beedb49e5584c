"""Runtime settings for Paradigm, read from ``PARADIGM_*`` environment variables."""

import os
from typing import Annotated, Literal

import annotated_types as at
from pydantic import BaseModel, ConfigDict, Field, field_validator

__all__ = ["LogLevel", "Settings", "settings"]

ENV_PREFIX = "PARADIGM_"

LogLevel = Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]


class Settings(BaseModel):
    model_config = ConfigDict(frozen=True)

    LOG_LEVEL: LogLevel = Field("INFO", description="Log level of the paradigm logger.")
    STRICT_MONOIDS: bool = Field(
        False,
        description="Verify monoid laws on a sample of the input before every concat_all.",
    )
    LAW_SAMPLE_SIZE: Annotated[int, at.Ge(1)] = Field(
        8, description="Number of leading elements used for strict law checks."
    )

    @field_validator("LOG_LEVEL", mode="before")
    @classmethod
    def normalize_log_level(cls, value):
        # Accept "debug" as well as "DEBUG"
        return value.upper() if isinstance(value, str) else value

    @classmethod
    def load(cls, environ: dict[str, str] | None = None) -> "Settings":
        """Build settings from the environment.

        Args:
            environ: Mapping to read from. Defaults to ``os.environ``.

        Returns:
            Validated settings; unset variables keep their defaults.

        Raises:
            pydantic.ValidationError: If a variable holds an invalid value.
        """
        environ = os.environ if environ is None else environ
        values = {
            name: environ[ENV_PREFIX + name]
            for name in cls.model_fields
            if ENV_PREFIX + name in environ
        }
        return cls(**values)


settings = Settings.load()
