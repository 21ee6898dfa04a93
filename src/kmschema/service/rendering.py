"""Rendering of parameter values into path segments and command tokens.

Value strings use JSON spelling for scalars that have one (``true``,
``false``, ``null``) so a rendered path or command line reads the same as
the wire format. Value-shape renderers name the kind of a value for shape
strings; they are pluggable so callers can pick the vocabulary they need.
"""

import json
from datetime import date, datetime, time
from enum import Enum
from typing import Any, Callable, NamedTuple

from pydantic import BaseModel

ValueShapeRenderer = Callable[[Any], str]


def render_value(value: Any) -> str:
    """Render a validated parameter value as text.

    Args:
        value: Attribute of a validated params model

    Returns:
        Text embedded in a path segment or command token
    """
    if isinstance(value, bool):
        return "true" if value else "false"
    if value is None:
        return "null"
    if isinstance(value, Enum):
        return render_value(value.value)
    if isinstance(value, BaseModel):
        return value.model_dump_json(by_alias=True)
    if isinstance(value, (datetime, date, time)):
        return value.isoformat()
    if isinstance(value, (dict, list, tuple)):
        return json.dumps(value, default=str, separators=(",", ":"))
    return str(value)


def python_type_name(value: Any) -> str:
    """Default value-shape renderer: the Python type name (``bool``, ``str``)."""
    return type(value).__name__


def json_type_name(value: Any) -> str:
    """Value-shape renderer using JSON kind names (``boolean``, ``string``)."""
    if isinstance(value, Enum):
        return json_type_name(value.value)
    if isinstance(value, bool):
        return "boolean"
    if isinstance(value, (int, float)):
        return "number"
    if isinstance(value, str):
        return "string"
    if value is None:
        return "null"
    if isinstance(value, (list, tuple)):
        return "array"
    return "object"


class SerializedParams(NamedTuple):
    """Shape string and value string produced from the same field order."""

    shape: str
    value: str
