"""Pagination envelope metadata."""

from typing import Type

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel


class Pagination(BaseModel):
    """Pagination metadata.

    Serialized with camelCase keys (``currentPage``, ``totalItems``,
    ``itemsPerPage``); both spellings are accepted on input.
    """

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    current_page: int = Field(..., ge=1, description="Current page number")
    total_items: int = Field(..., ge=0, description="Total number of items")
    items_per_page: int = Field(..., ge=1, description="Items per page")


def pagination_schema() -> Type[Pagination]:
    """Validator of the pagination envelope."""
    return Pagination
