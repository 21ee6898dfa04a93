"""API schema builder package."""

from kmschema.service.api.schema_builder import ApiSchema, ApiSchemaConfig, make_schema

__all__ = ["ApiSchema", "ApiSchemaConfig", "make_schema"]
