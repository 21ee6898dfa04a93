"""Response envelope shapes.

response_shape(data) builds the envelopes endpoints commonly answer with:

    item()                     {"data": DATA}
    list().simple()            {"data": [DATA, ...]}
    list().with_pagination()   {"pagination": Pagination, "data": [DATA, ...]}

Every call builds a fresh model class, so envelopes can be passed straight
to a builder as its ``response`` validator.
"""

from __future__ import annotations

from typing import Any, List, Type

from pydantic import BaseModel, Field, create_model

from kmschema.service.validation import model_name
from kmschema.shape.pagination import pagination_schema


def _data_name(data: Any) -> str:
    return model_name(getattr(data, "__name__", "Data"))


class ResponseListShape:
    """List envelopes around one data validator."""

    def __init__(self, data: Any):
        self._data = data

    def simple(self) -> Type[BaseModel]:
        """Envelope with a list of items."""
        return create_model(
            f"{_data_name(self._data)}ListResponse",
            data=(List[self._data], Field(..., description="List of items")),
        )

    def with_pagination(self) -> Type[BaseModel]:
        """Envelope with a list of items and pagination metadata."""
        return create_model(
            f"{_data_name(self._data)}PaginatedResponse",
            pagination=(pagination_schema(), Field(..., description="Pagination metadata")),
            data=(List[self._data], Field(..., description="List of items")),
        )


class ResponseShape:
    """Response envelopes around one data validator."""

    def __init__(self, data: Any):
        self._data = data

    def data(self) -> Any:
        """The bare data validator."""
        return self._data

    def item(self) -> Type[BaseModel]:
        """Envelope with a single item."""
        return create_model(
            f"{_data_name(self._data)}ItemResponse",
            data=(self._data, Field(..., description="Response data")),
        )

    def list(self) -> ResponseListShape:
        """List envelope variants."""
        return ResponseListShape(self._data)


def response_shape(data: Any) -> ResponseShape:
    """Build response envelopes around a data validator."""
    return ResponseShape(data)
