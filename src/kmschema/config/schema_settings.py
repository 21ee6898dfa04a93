"""Builder defaults loaded from environment variables.

This module provides the SchemaSettings class which loads the serialization
conventions used by the schema builders (command token prefix and separator,
document key suffix) plus the log level used by the example driver.

Builders read these values once, when a descriptor is constructed. Explicit
keyword arguments passed to a builder always win over settings.
"""

from typing import Optional

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

from kmschema.constants import (
    DEFAULT_COMMAND_FLAG_PREFIX,
    DEFAULT_COMMAND_TOKEN_SEPARATOR,
    DEFAULT_DOCUMENT_KEY_SUFFIX,
    ENV_PREFIX,
)


class SchemaSettings(BaseSettings):
    """Static configuration loaded from environment variables.

    All settings can be overridden via environment variables with the
    KMSCHEMA_ prefix. For example, document_key_suffix can be set via
    KMSCHEMA_DOCUMENT_KEY_SUFFIX.

    Attributes:
        log_level: Logging level (DEBUG, INFO, WARNING, ERROR, CRITICAL)
        command_flag_prefix: Prefix of every command token (``--global=true``)
        command_token_separator: Text placed between consecutive command tokens
        document_key_suffix: Suffix appended to a document key to build full_key
    """

    model_config = SettingsConfigDict(
        env_prefix=ENV_PREFIX,
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    log_level: str = Field(default="INFO")

    command_flag_prefix: str = Field(default=DEFAULT_COMMAND_FLAG_PREFIX)
    command_token_separator: str = Field(default=DEFAULT_COMMAND_TOKEN_SEPARATOR)

    document_key_suffix: str = Field(default=DEFAULT_DOCUMENT_KEY_SUFFIX)


_schema_settings: Optional[SchemaSettings] = None


def get_settings() -> SchemaSettings:
    """Get singleton instance of builder settings.

    Settings are loaded once and cached for process lifetime.

    Returns:
        SchemaSettings instance
    """
    global _schema_settings

    if _schema_settings is None:
        _schema_settings = SchemaSettings()

    return _schema_settings


def reset_settings() -> None:
    """Drop the cached settings so the next get_settings() reloads them."""
    global _schema_settings
    _schema_settings = None
