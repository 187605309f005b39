# censor/service/config.py

"""Application configuration using Pydantic Settings.

Manages environment variables, defaults, and validation rules.
"""

import logging
import re
from typing import List, Optional
from pydantic import AliasChoices, Field, SecretStr, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from censor.core.definitions import DEFAULT_PLACEHOLDER, PATTERN_FLAGS


class Settings(BaseSettings):
    """Global application settings.

    Loads values from environment variables (prefix 'CENSOR_') or .env file.
    The moderation API key is also read from the bare OPEN_MODERATOR_API_KEY
    variable.
    """

    model_config = SettingsConfigDict(
        env_prefix="CENSOR_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # Engine Settings
    placeholder: str = Field(
        default=DEFAULT_PLACEHOLDER,
        description="Character used to mask profane words.",
    )

    sanitize_pattern: Optional[str] = Field(
        default=None,
        description="Regex of characters removed from a profane word before masking.",
    )

    replace_pattern: Optional[str] = Field(
        default=None,
        description="Regex of characters replaced by the placeholder.",
    )

    split_pattern: Optional[str] = Field(
        default=None,
        description="Regex used to split text into words.",
    )

    # Word List Configuration
    empty_list: bool = Field(
        default=False, description="Start without the bundled word list."
    )

    extra_words: List[str] = Field(
        default_factory=list,
        description="Terms appended to the blacklist.",
    )

    exclude: List[str] = Field(
        default_factory=list,
        description="Terms never reported as profane.",
    )

    # Moderation API
    open_moderator_api_key: Optional[SecretStr] = Field(
        default=None,
        validation_alias=AliasChoices(
            "open_moderator_api_key", "censor_open_moderator_api_key"
        ),
        description="API key for the OpenModerator service.",
    )

    moderation_base_url: str = Field(
        default="https://www.openmoderator.com/api",
        description="Base URL of the moderation API.",
    )

    moderation_timeout: float = Field(
        default=10.0, gt=0.0, description="Moderation request timeout in seconds."
    )

    log_level: str = Field(default="INFO", description="Root logging level.")

    @field_validator("placeholder")
    @classmethod
    def validate_placeholder(cls, v: str) -> str:
        """Ensure placeholder is not empty."""
        if not v:
            raise ValueError("Placeholder cannot be empty")
        return v

    @field_validator("sanitize_pattern", "replace_pattern", "split_pattern")
    @classmethod
    def validate_pattern(cls, v: Optional[str]) -> Optional[str]:
        """Ensure pattern overrides compile."""
        if v is not None:
            try:
                re.compile(v, PATTERN_FLAGS)
            except re.error as e:
                raise ValueError(f"Invalid regular expression {v!r}: {e}") from e
        return v

    @field_validator("log_level")
    @classmethod
    def validate_log_level(cls, v: str) -> str:
        level = v.upper()
        if not isinstance(logging.getLevelName(level), int):
            raise ValueError(f"Unknown log level: {v}")
        return level

    @field_validator("moderation_base_url")
    @classmethod
    def strip_trailing_slash(cls, v: str) -> str:
        return v.rstrip("/")


# Singleton settings instance
settings = Settings()
