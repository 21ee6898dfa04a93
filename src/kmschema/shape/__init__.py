"""Shape utilities shared by the schema builders.

Provides the pagination envelope, JSON-with-repair coercion, ObjectId
coercion and response envelope helpers.
"""

from kmschema.shape.json_object import json_object
from kmschema.shape.object_id import ObjectIdField, object_id
from kmschema.shape.pagination import Pagination, pagination_schema
from kmschema.shape.response_shape import ResponseShape, response_shape

__all__ = [
    "ObjectIdField",
    "Pagination",
    "ResponseShape",
    "json_object",
    "object_id",
    "pagination_schema",
    "response_shape",
]
