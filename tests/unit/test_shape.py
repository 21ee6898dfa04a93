"""Unit tests for the shape utilities in kmschema.shape.

Covers the pagination envelope, JSON-with-repair coercion, ObjectId
coercion and the response envelope helpers.
"""

import pytest
from bson import ObjectId
from pydantic import TypeAdapter
from pydantic import ValidationError as PydanticValidationError

from kmschema.service import api
from kmschema.shape import (
    ObjectIdField,
    Pagination,
    json_object,
    object_id,
    pagination_schema,
    response_shape,
)
from tests.models import EmptyBody, MaritalQuery, PageParams, Person

OBJECT_ID_HEX = "65a1f0c2b4e3d2a1f0c2b4e3"

# ---------------------------------------------------------------------------
# Pagination
# ---------------------------------------------------------------------------


class TestPaginationSchema:
    """Tests for pagination_schema()."""

    def test_returns_pagination_model(self) -> None:
        """pagination_schema returns the Pagination model on every call."""
        assert pagination_schema() is Pagination
        assert pagination_schema() is pagination_schema()

    def test_accepts_camel_case_keys(self) -> None:
        """Pagination validates wire names."""
        page = Pagination.model_validate(
            {"currentPage": 1, "totalItems": 0, "itemsPerPage": 20}
        )

        assert page.current_page == 1
        assert page.total_items == 0

    def test_accepts_field_names(self) -> None:
        """Pagination validates Python field names too."""
        page = Pagination(current_page=2, total_items=10, items_per_page=5)

        assert page.items_per_page == 5

    def test_dumps_camel_case_keys(self) -> None:
        """Pagination serializes with camelCase aliases."""
        page = Pagination(current_page=2, total_items=10, items_per_page=5)

        assert page.model_dump(by_alias=True) == {
            "currentPage": 2,
            "totalItems": 10,
            "itemsPerPage": 5,
        }

    @pytest.mark.parametrize(
        "field, value",
        [("currentPage", 0), ("totalItems", -1), ("itemsPerPage", 0)],
    )
    def test_rejects_out_of_range_values(self, field: str, value: int) -> None:
        """Pagination enforces its lower bounds."""
        payload = {"currentPage": 1, "totalItems": 0, "itemsPerPage": 1}
        payload[field] = value

        with pytest.raises(PydanticValidationError):
            Pagination.model_validate(payload)


# ---------------------------------------------------------------------------
# JSON with repair
# ---------------------------------------------------------------------------


class TestJsonObject:
    """Tests for json_object()."""

    def test_parses_valid_json_text(self) -> None:
        """Well-formed JSON text is parsed into the inner schema."""
        adapter = TypeAdapter(json_object(Person))

        person = adapter.validate_python('{"name": "Ada", "age": 36, "isMarid": true}')

        assert person == Person(name="Ada", age=36, isMarid=True)

    def test_repairs_trailing_comma(self) -> None:
        """A trailing comma is repaired before parsing."""
        adapter = TypeAdapter(json_object(Person))

        person = adapter.validate_python('{"name": "Ada", "age": 36, "isMarid": true,}')

        assert person.age == 36

    def test_rejects_non_string_input(self) -> None:
        """Structured values are not accepted; the input must be text."""
        adapter = TypeAdapter(json_object(Person))

        with pytest.raises(PydanticValidationError) as exc_info:
            adapter.validate_python({"name": "Ada", "age": 36, "isMarid": True})

        assert exc_info.value.errors()[0]["type"] == "json_type"

    def test_rejects_irreparable_text(self) -> None:
        """Text that cannot be recovered fails with json_invalid."""
        adapter = TypeAdapter(json_object(Person))

        with pytest.raises(PydanticValidationError) as exc_info:
            adapter.validate_python("")

        assert exc_info.value.errors()[0]["type"] == "json_invalid"

    def test_surfaces_inner_schema_errors(self) -> None:
        """Parsed values that do not match report the inner schema's errors."""
        adapter = TypeAdapter(json_object(Person))

        with pytest.raises(PydanticValidationError) as exc_info:
            adapter.validate_python('{"name": "Ada"}')

        missing = {error["loc"][-1] for error in exc_info.value.errors()}
        assert missing == {"age", "isMarid"}

    def test_usable_as_builder_validator(self) -> None:
        """json_object can serve as an endpoint body validator."""
        schema = api.make_schema(
            method="post",
            auth="NO",
            path="/people",
            body=json_object(Person),
            params=PageParams,
            query=MaritalQuery,
            response=EmptyBody,
        )

        body = schema.make_body('{"name": "Ada", "age": 36, "isMarid": false,}')

        assert body.name == "Ada"


# ---------------------------------------------------------------------------
# ObjectId
# ---------------------------------------------------------------------------


class TestObjectId:
    """Tests for object_id() / ObjectIdField."""

    def test_object_id_returns_field_type(self) -> None:
        """object_id() returns the annotated ObjectId type."""
        assert object_id() is ObjectIdField

    def test_converts_hex_string(self) -> None:
        """A valid hex string becomes an ObjectId."""
        value = TypeAdapter(ObjectIdField).validate_python(OBJECT_ID_HEX)

        assert value == ObjectId(OBJECT_ID_HEX)

    def test_passes_object_id_through(self) -> None:
        """An ObjectId is returned unchanged."""
        original = ObjectId()

        assert TypeAdapter(ObjectIdField).validate_python(original) is original

    @pytest.mark.parametrize("bad", ["xyz", OBJECT_ID_HEX[:-1], 123, None])
    def test_rejects_invalid_values(self, bad) -> None:
        """Anything that is not an ObjectId or its hex form is rejected."""
        with pytest.raises(PydanticValidationError) as exc_info:
            TypeAdapter(ObjectIdField).validate_python(bad)

        assert exc_info.value.errors()[0]["type"] == "object_id"

    def test_serializes_to_string_in_json_mode(self) -> None:
        """ObjectId dumps as its hex string in JSON mode."""
        value = ObjectId(OBJECT_ID_HEX)

        assert TypeAdapter(ObjectIdField).dump_python(value, mode="json") == OBJECT_ID_HEX


# ---------------------------------------------------------------------------
# Response envelopes
# ---------------------------------------------------------------------------


class TestResponseShape:
    """Tests for response_shape()."""

    PERSON = {"name": "Ada", "age": 36, "isMarid": True}

    def test_data_returns_inner_validator(self) -> None:
        """data() returns the validator passed in."""
        assert response_shape(Person).data() is Person

    def test_item_envelope(self) -> None:
        """item() wraps a single value under data."""
        envelope = response_shape(Person).item()

        assert envelope.model_validate({"data": self.PERSON}).data.name == "Ada"

    def test_simple_list_envelope(self) -> None:
        """list().simple() wraps a list under data."""
        envelope = response_shape(Person).list().simple()

        result = envelope.model_validate({"data": [self.PERSON, self.PERSON]})

        assert len(result.data) == 2

    def test_paginated_list_envelope(self) -> None:
        """list().with_pagination() adds pagination metadata."""
        envelope = response_shape(Person).list().with_pagination()

        result = envelope.model_validate(
            {
                "pagination": {"currentPage": 1, "totalItems": 1, "itemsPerPage": 10},
                "data": [self.PERSON],
            }
        )

        assert isinstance(result.pagination, Pagination)

    def test_paginated_list_requires_pagination(self) -> None:
        """list().with_pagination() rejects a missing pagination block."""
        envelope = response_shape(Person).list().with_pagination()

        with pytest.raises(PydanticValidationError):
            envelope.model_validate({"data": []})
