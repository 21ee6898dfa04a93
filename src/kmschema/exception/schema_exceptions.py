"""Custom exceptions for kmschema.

All custom exceptions should inherit from KmSchemaException for consistent error handling.

Two kinds of failure are kept apart:
    - SchemaConfigurationError: a builder was called with a bad configuration
      (a call-site bug, raised by make_schema)
    - SchemaValidationError: runtime data did not match a derived schema
      (raised by make_* and stringify_* operations)
"""

from typing import Any, Dict, List, Optional

from pydantic import ValidationError as PydanticValidationError

from kmschema.constants import FIELD_PATH_SEPARATOR


def format_pydantic_errors(
    exc: PydanticValidationError, prefix: tuple = ()
) -> List[Dict[str, Any]]:
    """Flatten a pydantic ValidationError into field/message/type dicts.

    Args:
        exc: Pydantic validation error
        prefix: Location parts prepended to every error location

    Returns:
        One dict per mismatch, in the order pydantic reported them
    """
    errors = []
    for error in exc.errors():
        location = tuple(prefix) + tuple(error["loc"])
        errors.append(
            {
                "field": FIELD_PATH_SEPARATOR.join(str(loc) for loc in location),
                "message": error["msg"],
                "type": error["type"],
            }
        )
    return errors


class KmSchemaException(Exception):
    """Base exception for all kmschema errors."""

    def __init__(
        self,
        message: str,
        code: str = "INTERNAL_ERROR",
        field: Optional[str] = None,
        details: Optional[Dict[str, Any]] = None,
    ):
        """Initialize kmschema exception.

        Args:
            message: Human-readable error message
            code: Error code for programmatic handling
            field: Field name if the error concerns a single field
            details: Additional error context
        """
        self.message = message
        self.code = code
        self.field = field
        self.details = details or {}
        super().__init__(message)

    def to_dict(self) -> Dict[str, Any]:
        """Serialize the exception into an error payload."""
        payload: Dict[str, Any] = {"code": self.code, "message": self.message}
        if self.field is not None:
            payload["field"] = self.field
        if self.details:
            payload["details"] = self.details
        return payload


# Builder usage errors
class SchemaConfigurationError(KmSchemaException):
    """Builder configuration failed meta-validation."""

    def __init__(
        self,
        message: str,
        family: Optional[str] = None,
        errors: Optional[List[Dict[str, Any]]] = None,
        **kwargs,
    ):
        details = kwargs.pop("details", {})
        if family:
            details["family"] = family

        self.errors = errors or []
        if self.errors:
            details["errors"] = self.errors

        super().__init__(
            message=message,
            code=kwargs.pop("code", "SCHEMA_CONFIGURATION_ERROR"),
            details=details,
            **kwargs,
        )

    @classmethod
    def from_pydantic(
        cls, family: str, exc: PydanticValidationError
    ) -> "SchemaConfigurationError":
        """Build a configuration error from a failed configuration model."""
        errors = format_pydantic_errors(exc)
        fields = ", ".join(error["field"] for error in errors)
        return cls(
            message=f"Invalid {family} schema configuration: {fields}",
            family=family,
            errors=errors,
        )


class InvalidParamOrderError(SchemaConfigurationError):
    """Parameter order list references fields the params schema does not declare."""

    def __init__(self, unknown: List[str], known: List[str], **kwargs):
        super().__init__(
            message=f"Unknown parameter(s) in order: {', '.join(unknown)}",
            code="INVALID_PARAM_ORDER",
            details={"unknown": unknown, "known": known},
            **kwargs,
        )


# Runtime data errors
class SchemaValidationError(KmSchemaException):
    """Runtime value did not match a derived schema."""

    def __init__(
        self,
        message: str,
        errors: Optional[List[Dict[str, Any]]] = None,
        schema: Optional[str] = None,
        **kwargs,
    ):
        details = kwargs.pop("details", {})
        if schema:
            details["schema"] = schema

        self.errors = errors or []
        details["errors"] = self.errors

        super().__init__(
            message=message,
            code=kwargs.pop("code", "SCHEMA_VALIDATION_ERROR"),
            details=details,
            **kwargs,
        )

    @property
    def fields(self) -> List[str]:
        """Field paths of every reported mismatch."""
        return [error["field"] for error in self.errors]

    @classmethod
    def from_pydantic(
        cls, schema: str, exc: PydanticValidationError
    ) -> "SchemaValidationError":
        """Build a validation error from a pydantic ValidationError."""
        errors = format_pydantic_errors(exc)
        return cls(
            message=f"{schema} validation failed with {len(errors)} error(s)",
            errors=errors,
            schema=schema,
        )
