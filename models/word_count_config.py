"""
Pydantic model for word count aggregator configuration.

Values can be supplied directly or loaded from environment variables:
- WORD_COUNT_FLUSH_INTERVAL_SECONDS (default: 10)
- WORD_COUNT_MIN_COUNT_THRESHOLD (default: 0)
"""
import os
from typing import Optional

from pydantic import BaseModel, Field, StrictInt, ValidationError

from services.word_count_errors import InvalidConfigurationError


FLUSH_INTERVAL_ENV_VAR = "WORD_COUNT_FLUSH_INTERVAL_SECONDS"
MIN_COUNT_THRESHOLD_ENV_VAR = "WORD_COUNT_MIN_COUNT_THRESHOLD"

DEFAULT_FLUSH_INTERVAL_SECONDS = 10
DEFAULT_MIN_COUNT_THRESHOLD = 0


class WordCountConfig(BaseModel):
    """Flush interval and output threshold for a WordCountAggregator."""
    flush_interval_seconds: StrictInt = Field(
        default=DEFAULT_FLUSH_INTERVAL_SECONDS,
        ge=0,
        description="Seconds between flushes of the running tally"
    )
    min_count_threshold: StrictInt = Field(
        default=DEFAULT_MIN_COUNT_THRESHOLD,
        ge=0,
        description="Exclusive lower bound a word count must exceed to be listed"
    )

    @classmethod
    def create(
        cls,
        flush_interval_seconds: int = DEFAULT_FLUSH_INTERVAL_SECONDS,
        min_count_threshold: int = DEFAULT_MIN_COUNT_THRESHOLD
    ) -> "WordCountConfig":
        """
        Build a validated configuration.

        Raises:
            InvalidConfigurationError: If either value is negative or not an int
                (bools and numeric strings are rejected)
        """
        try:
            return cls(
                flush_interval_seconds=flush_interval_seconds,
                min_count_threshold=min_count_threshold
            )
        except ValidationError as e:
            raise InvalidConfigurationError(
                f"Invalid word count configuration: {e}"
            ) from e

    @classmethod
    def from_env(cls) -> "WordCountConfig":
        """
        Load configuration from environment variables, falling back to defaults.

        Raises:
            InvalidConfigurationError: If a variable is set to an invalid value
        """
        return cls.create(
            flush_interval_seconds=_env_or_default(
                FLUSH_INTERVAL_ENV_VAR, DEFAULT_FLUSH_INTERVAL_SECONDS
            ),
            min_count_threshold=_env_or_default(
                MIN_COUNT_THRESHOLD_ENV_VAR, DEFAULT_MIN_COUNT_THRESHOLD
            )
        )


def _env_or_default(name: str, default: int) -> int:
    value: Optional[str] = os.getenv(name)
    if value is None or not value.strip():
        return default
    try:
        return int(value.strip())
    except ValueError as e:
        raise InvalidConfigurationError(
            f"{name} must be an integer, got {value!r}"
        ) from e
