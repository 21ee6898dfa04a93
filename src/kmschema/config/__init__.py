"""Configuration management for kmschema.

Provides builder defaults from environment variables (SchemaSettings).
"""

from .schema_settings import SchemaSettings, get_settings, reset_settings

__all__ = [
    "SchemaSettings",
    "get_settings",
    "reset_settings",
]
