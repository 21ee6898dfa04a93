"""Schema builder for persisted documents.

make_schema() composes a document model with the fields the storage layer
assigns: an ObjectId ``id`` and ``created_at``/``updated_at`` timestamps.
Four variants are produced so callers can validate a document before and
after persistence:

    document            fields declared by the caller
    document_with_id    document + id
    document_with_date  document + created_at, updated_at
    full_document       document + id + created_at, updated_at

Variants are subclasses of the document model, so they keep its fields,
validators and model configuration.
"""

import logging
from dataclasses import dataclass, field
from datetime import datetime
from types import MappingProxyType
from typing import Any, Literal, Mapping, Optional, Type

from pydantic import (
    BaseModel,
    ConfigDict,
    Field,
    TypeAdapter,
    create_model,
    field_validator,
)
from pydantic import ValidationError as PydanticValidationError

from kmschema.config.schema_settings import get_settings
from kmschema.exception.schema_exceptions import SchemaConfigurationError
from kmschema.service.base import BaseSchemaDescriptor
from kmschema.service.validation import build_adapter, ensure_object_validator
from kmschema.shape.object_id import ObjectIdField

logger = logging.getLogger(__name__)

FAMILY = "document"

ID_FIELDS = {"id": (ObjectIdField, ...)}
DATE_FIELDS = {"created_at": (datetime, ...), "updated_at": (datetime, ...)}


class DocumentSchemaConfig(BaseModel):
    """Configuration accepted by make_schema().

    Attributes:
        key: Document key (collection name is derived from it)
        document: Object-shaped validator of the stored fields
        key_suffix: Overrides SchemaSettings.document_key_suffix
    """

    model_config = ConfigDict(extra="forbid", frozen=True)

    key: str = Field(min_length=1)
    document: Any
    key_suffix: Optional[str] = None

    @field_validator("document")
    @classmethod
    def _check_object_validator(cls, value: Any) -> Any:
        return ensure_object_validator(value)


@dataclass(frozen=True)
class DocumentSchema(BaseSchemaDescriptor):
    """Immutable contract of one persisted document.

    Attributes:
        key: Document key
        full_key: key followed by the configured suffix (naive plural)
        document: Model of the caller's fields
        document_with_id: document + id
        document_with_date: document + created_at, updated_at
        full_document: document + id + created_at, updated_at
        full: Model of key/full_key (as literals), document and full_document
    """

    key: str
    full_key: str
    document: Type[BaseModel]
    document_with_id: Type[BaseModel]
    document_with_date: Type[BaseModel]
    full_document: Type[BaseModel]
    full: Type[BaseModel]
    adapters: Mapping[str, TypeAdapter] = field(repr=False, compare=False)

    def make_document(self, value: Any) -> BaseModel:
        """Validate and return a document without storage fields."""
        return self._validate("document", value)

    def make_document_with_id(self, value: Any) -> BaseModel:
        """Validate and return a document carrying its id."""
        return self._validate("document_with_id", value)

    def make_document_with_date(self, value: Any) -> BaseModel:
        """Validate and return a document carrying its timestamps."""
        return self._validate("document_with_date", value)

    def make_full_document(self, value: Any) -> BaseModel:
        """Validate and return a document with id and timestamps."""
        return self._validate("full_document", value)


def _augment(document: Type[BaseModel], suffix: str, **fields: Any) -> Type[BaseModel]:
    return create_model(f"{document.__name__}{suffix}", __base__=document, **fields)


def make_schema(**config: Any) -> DocumentSchema:
    """Build a DocumentSchema from a document configuration.

    Args:
        **config: Fields of DocumentSchemaConfig

    Returns:
        Immutable DocumentSchema

    Raises:
        SchemaConfigurationError: If the configuration is invalid
    """
    try:
        cfg = DocumentSchemaConfig.model_validate(config)
    except PydanticValidationError as exc:
        error = SchemaConfigurationError.from_pydantic(FAMILY, exc)
        logger.warning(error.message)
        raise error from exc

    suffix = (
        cfg.key_suffix
        if cfg.key_suffix is not None
        else get_settings().document_key_suffix
    )
    full_key = f"{cfg.key}{suffix}"
    document = cfg.document

    document_with_id = _augment(document, "WithId", **ID_FIELDS)
    document_with_date = _augment(document, "WithDate", **DATE_FIELDS)
    full_document = _augment(document, "Full", **ID_FIELDS, **DATE_FIELDS)

    full = create_model(
        f"{document.__name__}DocumentSchema",
        key=(Literal[cfg.key], ...),
        full_key=(Literal[full_key], ...),
        document=(document, ...),
        full_document=(full_document, ...),
    )

    adapters = {
        "document": build_adapter(document),
        "document_with_id": build_adapter(document_with_id),
        "document_with_date": build_adapter(document_with_date),
        "full_document": build_adapter(full_document),
        "full": build_adapter(full),
    }

    logger.debug(f"Built document schema: {cfg.key} ({full_key})")

    return DocumentSchema(
        key=cfg.key,
        full_key=full_key,
        document=document,
        document_with_id=document_with_id,
        document_with_date=document_with_date,
        full_document=full_document,
        full=full,
        adapters=MappingProxyType(adapters),
    )
