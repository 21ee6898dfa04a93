"""JSON text coercion with best-effort repair.

json_object(schema) wraps a validator so it accepts JSON text instead of a
structured value. The text is repaired first (trailing commas, unquoted
keys, single quotes, missing brackets), parsed, and the result is validated
against the wrapped schema.
"""

import logging
from typing import Annotated, Any

from json_repair import repair_json
from pydantic import BeforeValidator
from pydantic_core import PydanticCustomError

logger = logging.getLogger(__name__)

_EMPTY_STRING_LITERALS = ('""', "''")


def parse_repaired_json(value: Any) -> Any:
    """Repair and parse JSON text.

    Args:
        value: JSON text, possibly malformed

    Returns:
        Parsed Python value

    Raises:
        PydanticCustomError: If value is not a string or cannot be repaired
    """
    if not isinstance(value, str):
        raise PydanticCustomError("json_type", "JSON input should be a string")

    parsed = repair_json(value, return_objects=True)
    # json_repair returns "" when nothing could be recovered
    if parsed == "" and value.strip() not in _EMPTY_STRING_LITERALS:
        raise PydanticCustomError("json_invalid", "Invalid JSON: text could not be repaired")

    logger.debug(f"Repaired JSON text into {type(parsed).__name__}")
    return parsed


def json_object(schema: Any) -> Any:
    """Validator accepting JSON text that parses into schema.

    Args:
        schema: Validator of the parsed value

    Returns:
        Annotated type usable as a field annotation or builder validator
    """
    return Annotated[schema, BeforeValidator(parse_repaired_json)]
