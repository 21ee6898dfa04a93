"""ObjectId coercion for pydantic models.

Accepts a ``bson.ObjectId`` as is, converts a well-formed 24-character hex
string into one, and rejects everything else.
"""

from typing import Annotated, Any

from bson import ObjectId
from pydantic import GetCoreSchemaHandler, GetJsonSchemaHandler
from pydantic.json_schema import JsonSchemaValue
from pydantic_core import PydanticCustomError, core_schema


def coerce_object_id(value: Any) -> ObjectId:
    """Convert a value to ObjectId.

    Args:
        value: ObjectId instance or its hex string form

    Returns:
        ObjectId instance (the same object when one was passed)

    Raises:
        PydanticCustomError: If the value is not a valid ObjectId
    """
    if isinstance(value, ObjectId):
        return value
    if isinstance(value, str) and ObjectId.is_valid(value):
        return ObjectId(value)
    raise PydanticCustomError(
        "object_id",
        "Input should be a valid ObjectId or a 24-character hex string",
    )


class _ObjectIdAnnotation:
    """Pydantic core schema hooks for bson.ObjectId."""

    @classmethod
    def __get_pydantic_core_schema__(
        cls, source_type: Any, handler: GetCoreSchemaHandler
    ) -> core_schema.CoreSchema:
        return core_schema.no_info_plain_validator_function(
            coerce_object_id,
            serialization=core_schema.plain_serializer_function_ser_schema(
                str, when_used="json"
            ),
        )

    @classmethod
    def __get_pydantic_json_schema__(
        cls, schema: core_schema.CoreSchema, handler: GetJsonSchemaHandler
    ) -> JsonSchemaValue:
        return {"type": "string", "pattern": "^[0-9a-fA-F]{24}$"}


ObjectIdField = Annotated[ObjectId, _ObjectIdAnnotation]


def object_id() -> Any:
    """Validator type for opaque ObjectId identifiers.

    Usable anywhere pydantic accepts an annotation::

        class Ref(BaseModel):
            owner: ObjectIdField
    """
    return ObjectIdField
