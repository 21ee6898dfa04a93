"""Schema builder for HTTP-style API endpoints.

make_schema() turns an endpoint configuration (method, auth flag, path and
the body/params/query/response validators) into an immutable ApiSchema. The
descriptor validates runtime values against the derived sub-schemas and
renders parameter values into the endpoint path.

Parameter order is always supplied by the caller. Field enumeration order is
never used to build a path, so ``/users/:id/:action`` and
``/users/:action/:id`` can be rendered from the same descriptor.
"""

import logging
from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Any, Literal, Mapping, Sequence, Type
from urllib.parse import quote

from pydantic import (
    BaseModel,
    ConfigDict,
    Field,
    TypeAdapter,
    create_model,
    field_validator,
)
from pydantic import ValidationError as PydanticValidationError

from kmschema.constants import (
    NO,
    PATH_PARAM_MARKER,
    PATH_PREFIX,
    YES,
    HttpMethod,
    YesNo,
)
from kmschema.exception.schema_exceptions import SchemaConfigurationError
from kmschema.service.base import RequestSchemaDescriptor
from kmschema.service.rendering import SerializedParams, render_value
from kmschema.service.validation import (
    build_adapter,
    ensure_object_validator,
    ensure_validator,
    model_name,
    resolve_order,
)

logger = logging.getLogger(__name__)

FAMILY = "api"


class ApiSchemaConfig(BaseModel):
    """Configuration accepted by make_schema().

    Attributes:
        method: HTTP verb, lower case
        auth: "YES" when the endpoint requires authentication
        disable: "YES" when the endpoint is switched off
        path: Path template, must start with "/"
        body: Validator of the request body
        params: Object-shaped validator of the path parameters
        query: Object-shaped validator of the query string
        response: Validator of the response payload
    """

    model_config = ConfigDict(extra="forbid", frozen=True)

    method: HttpMethod
    auth: YesNo
    disable: YesNo = NO
    path: str = Field(pattern=r"^/")
    body: Any
    params: Any
    query: Any
    response: Any

    @field_validator("body", "response")
    @classmethod
    def _check_validator(cls, value: Any) -> Any:
        return ensure_validator(value)

    @field_validator("params", "query")
    @classmethod
    def _check_object_validator(cls, value: Any) -> Any:
        return ensure_object_validator(value)


@dataclass(frozen=True)
class ApiSchema(RequestSchemaDescriptor):
    """Immutable contract of one API endpoint.

    Identity fields (method, auth, disable, path) are fixed at construction
    and pinned as literals in the ``request`` model.

    Attributes:
        method: HTTP verb
        auth: Authentication flag
        disable: Disable flag
        path: Path template
        body: Request body validator
        params: Path parameters model
        query: Query string model
        response: Response validator
        request: Model of the full request (identity fields plus body/params/query)
        request_config: Model of body/params/query only
        full: Model of ``{request, response}``
    """

    method: HttpMethod
    auth: YesNo
    disable: YesNo
    path: str
    body: Any
    params: Type[BaseModel]
    query: Type[BaseModel]
    response: Any
    request: Type[BaseModel]
    request_config: Type[BaseModel]
    full: Type[BaseModel]
    adapters: Mapping[str, TypeAdapter] = field(repr=False, compare=False)

    @property
    def need_authentication(self) -> bool:
        """True when the endpoint requires authentication."""
        return self.auth == YES

    @property
    def is_disabled(self) -> bool:
        """True when the endpoint is disabled."""
        return self.disable == YES

    def make_query(self, value: Any) -> Any:
        """Validate and return query string values."""
        return self._validate("query", value)

    def stringify_params(self, value: Any, order: Sequence[str]) -> SerializedParams:
        """Render params into path segments in the given order.

        The value string appends ``/<value>`` and the shape string appends
        ``/:<name>`` for every name of ``order``, in one pass, so both always
        have the same segments in the same positions. Rendered values are
        percent-encoded, so a value holding ``/`` stays one segment.

        Args:
            value: Params to validate and render
            order: Field names (or aliases) in embedding order

        Returns:
            SerializedParams with the shape and value strings

        Raises:
            SchemaValidationError: If value does not match the params model
            InvalidParamOrderError: If order names an undeclared field
        """
        params = self.make_params(value)
        shape_parts = []
        value_parts = []
        for label, attribute in resolve_order(self.params, order):
            shape_parts.append(f"{PATH_PREFIX}{PATH_PARAM_MARKER}{label}")
            rendered = quote(render_value(getattr(params, attribute)), safe="")
            value_parts.append(f"{PATH_PREFIX}{rendered}")
        return SerializedParams(shape="".join(shape_parts), value="".join(value_parts))

    def make_full_path(self, value: Any, order: Sequence[str]) -> str:
        """Return the endpoint path followed by the rendered params."""
        return f"{self.path}{self.stringify_params(value, order).value}"

    def make_full_path_shape(self, order: Sequence[str]) -> str:
        """Return the endpoint path followed by ``/:<name>`` placeholders."""
        shape = "".join(
            f"{PATH_PREFIX}{PATH_PARAM_MARKER}{label}"
            for label, _ in resolve_order(self.params, order)
        )
        return f"{self.path}{shape}"


def make_schema(**config: Any) -> ApiSchema:
    """Build an ApiSchema from an endpoint configuration.

    The configuration is validated before anything is derived.

    Args:
        **config: Fields of ApiSchemaConfig

    Returns:
        Immutable ApiSchema

    Raises:
        SchemaConfigurationError: If the configuration is invalid
    """
    try:
        cfg = ApiSchemaConfig.model_validate(config)
    except PydanticValidationError as exc:
        error = SchemaConfigurationError.from_pydantic(FAMILY, exc)
        logger.warning(error.message)
        raise error from exc

    name = model_name(cfg.path)
    request = create_model(
        f"{name}Request",
        method=(Literal[cfg.method], ...),
        auth=(Literal[cfg.auth], ...),
        disable=(Literal[cfg.disable], cfg.disable),
        path=(Literal[cfg.path], ...),
        body=(cfg.body, ...),
        params=(cfg.params, ...),
        query=(cfg.query, ...),
    )
    request_config = create_model(
        f"{name}RequestConfig",
        body=(cfg.body, ...),
        params=(cfg.params, ...),
        query=(cfg.query, ...),
    )
    full = create_model(
        f"{name}Schema",
        request=(request, ...),
        response=(cfg.response, ...),
    )

    adapters = {
        "body": build_adapter(cfg.body),
        "params": build_adapter(cfg.params),
        "query": build_adapter(cfg.query),
        "response": build_adapter(cfg.response),
        "request": build_adapter(request),
        "request_config": build_adapter(request_config),
        "full": build_adapter(full),
    }

    logger.debug(
        f"Built api schema: {cfg.method.upper()} {cfg.path} "
        f"(auth={cfg.auth}, disable={cfg.disable})"
    )

    return ApiSchema(
        method=cfg.method,
        auth=cfg.auth,
        disable=cfg.disable,
        path=cfg.path,
        body=cfg.body,
        params=cfg.params,
        query=cfg.query,
        response=cfg.response,
        request=request,
        request_config=request_config,
        full=full,
        adapters=MappingProxyType(adapters),
    )
