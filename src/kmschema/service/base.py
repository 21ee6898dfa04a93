"""Base classes for schema descriptors with validate-and-produce operations."""

from typing import Any, Mapping

from pydantic import TypeAdapter

from kmschema.service.validation import validate_or_raise


class BaseSchemaDescriptor:
    """Mixin providing validation against a descriptor's derived schemas.

    Subclasses are frozen dataclasses holding an ``adapters`` mapping from
    schema name (``body``, ``params``, ``request_config``...) to TypeAdapter.
    """

    adapters: Mapping[str, TypeAdapter]

    def _validate(self, schema_name: str, value: Any) -> Any:
        """Validate value against the named derived schema.

        Args:
            schema_name: Key into ``adapters``
            value: Runtime value supplied by the caller

        Returns:
            Canonical value produced by the validator

        Raises:
            SchemaValidationError: If value does not match
        """
        return validate_or_raise(self.adapters[schema_name], value, schema_name)


class RequestSchemaDescriptor(BaseSchemaDescriptor):
    """Operations shared by descriptors with a request/response envelope."""

    def make_body(self, value: Any) -> Any:
        """Validate and return a request body."""
        return self._validate("body", value)

    def make_params(self, value: Any) -> Any:
        """Validate and return request parameters."""
        return self._validate("params", value)

    def make_response(self, value: Any) -> Any:
        """Validate and return a response payload."""
        return self._validate("response", value)

    def make_request_config(self, value: Any) -> Any:
        """Validate every request field at once.

        All fields are checked; the raised error lists the failures of every
        field, each location prefixed with the field name.
        """
        return self._validate("request_config", value)
