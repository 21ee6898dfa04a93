"""Exception handling package.

This package provides the exception classes raised by schema builders
(configuration errors) and by their operations (validation errors).
"""

from kmschema.exception.schema_exceptions import (
    InvalidParamOrderError,
    KmSchemaException,
    SchemaConfigurationError,
    SchemaValidationError,
)

__all__ = [
    "InvalidParamOrderError",
    "KmSchemaException",
    "SchemaConfigurationError",
    "SchemaValidationError",
]
