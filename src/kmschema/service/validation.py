"""Validator helpers shared by the schema builders.

A "validator" is anything pydantic can build a TypeAdapter for: a BaseModel
subclass, a plain type (``str``, ``int``) or a typing construct
(``list[Item]``, ``Literal["UAE"]``, ``Annotated[...]``). An object-shaped
validator is a BaseModel subclass, which is what gives field picking and
key enumeration.
"""

import logging
import re
from typing import Any, Dict, List, Sequence, Tuple, Type, get_origin

from pydantic import BaseModel, PydanticUserError, TypeAdapter
from pydantic import ValidationError as PydanticValidationError

from kmschema.exception.schema_exceptions import (
    InvalidParamOrderError,
    SchemaValidationError,
)

logger = logging.getLogger(__name__)

_WORD_PATTERN = re.compile(r"[A-Za-z0-9]+")


def is_object_validator(schema: Any) -> bool:
    """Check whether schema is an object-shaped validator (BaseModel subclass)."""
    return isinstance(schema, type) and issubclass(schema, BaseModel)


def build_adapter(schema: Any) -> TypeAdapter:
    """Build a TypeAdapter for a validator.

    Args:
        schema: BaseModel subclass, type or typing construct

    Returns:
        TypeAdapter validating against schema

    Raises:
        ValueError: If schema is not something pydantic can validate against
    """
    if not isinstance(schema, type) and get_origin(schema) is None:
        raise ValueError(
            f"Expected a validator (model, type or typing construct), got {schema!r}"
        )
    try:
        return TypeAdapter(schema)
    except (PydanticUserError, TypeError) as exc:
        raise ValueError(f"Cannot build a validator from {schema!r}: {exc}") from exc


def ensure_validator(schema: Any) -> Any:
    """Field validator hook: accept schema when it is a validator."""
    build_adapter(schema)
    return schema


def ensure_object_validator(schema: Any) -> Any:
    """Field validator hook: accept schema when it is object-shaped."""
    if not is_object_validator(schema):
        raise ValueError(f"Expected a pydantic BaseModel subclass, got {schema!r}")
    return schema


def validate_or_raise(adapter: TypeAdapter, value: Any, schema_name: str) -> Any:
    """Validate value and return the canonical result.

    Args:
        adapter: Adapter of the schema to validate against
        value: Runtime value supplied by the caller
        schema_name: Name reported in the error (``body``, ``params``...)

    Returns:
        Validated value as produced by pydantic

    Raises:
        SchemaValidationError: With every mismatch, if value does not match
    """
    try:
        return adapter.validate_python(value)
    except PydanticValidationError as exc:
        logger.debug(f"Validation of {schema_name} failed: {exc.error_count()} error(s)")
        raise SchemaValidationError.from_pydantic(schema_name, exc) from exc


def field_lookup(model: Type[BaseModel]) -> Dict[str, str]:
    """Map field names and aliases of model to attribute names."""
    lookup = {}
    for name, info in model.model_fields.items():
        lookup[name] = name
        if info.alias:
            lookup[info.alias] = name
    return lookup


def resolve_order(model: Type[BaseModel], order: Sequence[str]) -> List[Tuple[str, str]]:
    """Resolve a parameter order list against the fields of model.

    Each entry may name a field or its alias.

    Args:
        model: Params model
        order: Field names in embedding order

    Returns:
        (label, attribute) pairs in the order given; label is the entry as
        supplied by the caller

    Raises:
        InvalidParamOrderError: If order is a bare string or names unknown fields
    """
    lookup = field_lookup(model)
    if isinstance(order, str):
        raise InvalidParamOrderError(unknown=[order], known=sorted(lookup))

    unknown = [name for name in order if name not in lookup]
    if unknown:
        raise InvalidParamOrderError(unknown=unknown, known=sorted(lookup))

    return [(name, lookup[name]) for name in order]


def model_name(*parts: str) -> str:
    """Build a CamelCase class name from free-form parts (paths, keys)."""
    words = []
    for part in parts:
        words.extend(word[:1].upper() + word[1:] for word in _WORD_PATTERN.findall(part))
    return "".join(words) or "Root"
