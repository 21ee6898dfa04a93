"""Command schema builder package."""

from kmschema.service.command.schema_builder import (
    CommandSchema,
    CommandSchemaConfig,
    make_schema,
)

__all__ = ["CommandSchema", "CommandSchemaConfig", "make_schema"]
