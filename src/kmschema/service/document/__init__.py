"""Document schema builder package."""

from kmschema.service.document.schema_builder import (
    DocumentSchema,
    DocumentSchemaConfig,
    make_schema,
)

__all__ = ["DocumentSchema", "DocumentSchemaConfig", "make_schema"]
