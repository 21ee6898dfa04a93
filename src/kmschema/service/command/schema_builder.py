"""Schema builder for CLI-style commands.

make_schema() turns a command configuration (key plus body/params/response
validators) into an immutable CommandSchema. Params are rendered as flag
tokens, ``--<name>=<value>``, in the declaration order of the params model.

Tokens are joined with the configured separator. The default separator is
the empty string, which yields ``start --global=true--flat=UAE``; set
KMSCHEMA_COMMAND_TOKEN_SEPARATOR=" " (or pass ``token_separator``) for
shell-style spacing.
"""

import logging
from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Any, Callable, Literal, Mapping, Optional, Type

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
from kmschema.constants import (
    DEFAULT_COMMAND_FLAG_PREFIX,
    DEFAULT_COMMAND_TOKEN_SEPARATOR,
    PATH_PREFIX,
)
from kmschema.exception.schema_exceptions import SchemaConfigurationError
from kmschema.service.base import RequestSchemaDescriptor
from kmschema.service.rendering import (
    SerializedParams,
    ValueShapeRenderer,
    python_type_name,
    render_value,
)
from kmschema.service.validation import (
    build_adapter,
    ensure_object_validator,
    ensure_validator,
    model_name,
)

logger = logging.getLogger(__name__)

FAMILY = "command"


class CommandSchemaConfig(BaseModel):
    """Configuration accepted by make_schema().

    Attributes:
        key: Command name, a single word
        body: Validator of the command body
        params: Object-shaped validator of the command flags
        response: Validator of the command output
        shape_renderer: Names the kind of a value in shape tokens
        flag_prefix: Overrides SchemaSettings.command_flag_prefix
        token_separator: Overrides SchemaSettings.command_token_separator
    """

    model_config = ConfigDict(extra="forbid", frozen=True)

    key: str = Field(min_length=1, pattern=r"^\S+$")
    body: Any
    params: Any
    response: Any
    shape_renderer: Optional[Callable[[Any], str]] = None
    flag_prefix: Optional[str] = None
    token_separator: Optional[str] = None

    @field_validator("body", "response")
    @classmethod
    def _check_validator(cls, value: Any) -> Any:
        return ensure_validator(value)

    @field_validator("params")
    @classmethod
    def _check_object_validator(cls, value: Any) -> Any:
        return ensure_object_validator(value)


@dataclass(frozen=True)
class CommandSchema(RequestSchemaDescriptor):
    """Immutable contract of one command.

    Attributes:
        key: Command name
        full_key: ``/`` followed by key
        body: Body validator
        params: Flags model
        response: Output validator
        request: Model of key/full_key (as literals) plus body and params
        request_config: Model of body and params only
        full: Model of ``{request, response}``
        shape_renderer: Names the kind of a value in shape tokens
        flag_prefix: Prefix of every token
        token_separator: Text placed between tokens
    """

    key: str
    full_key: str
    body: Any
    params: Type[BaseModel]
    response: Any
    request: Type[BaseModel]
    request_config: Type[BaseModel]
    full: Type[BaseModel]
    shape_renderer: ValueShapeRenderer = field(repr=False)
    adapters: Mapping[str, TypeAdapter] = field(repr=False, compare=False)
    flag_prefix: str = DEFAULT_COMMAND_FLAG_PREFIX
    token_separator: str = DEFAULT_COMMAND_TOKEN_SEPARATOR

    def stringify_params(self, value: Any) -> SerializedParams:
        """Render params as flag tokens in field declaration order.

        Args:
            value: Params to validate and render

        Returns:
            SerializedParams where value holds ``--name=<value>`` tokens and
            shape holds ``--name=<kind>`` tokens, position for position

        Raises:
            SchemaValidationError: If value does not match the params model
        """
        params = self.make_params(value)
        shape_tokens = []
        value_tokens = []
        for name, info in type(params).model_fields.items():
            flag = f"{self.flag_prefix}{info.alias or name}"
            attribute = getattr(params, name)
            value_tokens.append(f"{flag}={render_value(attribute)}")
            shape_tokens.append(f"{flag}={self.shape_renderer(attribute)}")
        return SerializedParams(
            shape=self.token_separator.join(shape_tokens),
            value=self.token_separator.join(value_tokens),
        )

    def make_full_path(self, value: Any) -> str:
        """Return the command key, a space and the rendered flags."""
        return f"{self.key} {self.stringify_params(value).value}"


def make_schema(**config: Any) -> CommandSchema:
    """Build a CommandSchema from a command configuration.

    Args:
        **config: Fields of CommandSchemaConfig

    Returns:
        Immutable CommandSchema

    Raises:
        SchemaConfigurationError: If the configuration is invalid
    """
    try:
        cfg = CommandSchemaConfig.model_validate(config)
    except PydanticValidationError as exc:
        error = SchemaConfigurationError.from_pydantic(FAMILY, exc)
        logger.warning(error.message)
        raise error from exc

    settings = get_settings()
    full_key = f"{PATH_PREFIX}{cfg.key}"
    name = model_name(cfg.key)

    request = create_model(
        f"{name}CommandRequest",
        key=(Literal[cfg.key], ...),
        full_key=(Literal[full_key], ...),
        body=(cfg.body, ...),
        params=(cfg.params, ...),
    )
    request_config = create_model(
        f"{name}CommandRequestConfig",
        body=(cfg.body, ...),
        params=(cfg.params, ...),
    )
    full = create_model(
        f"{name}CommandSchema",
        request=(request, ...),
        response=(cfg.response, ...),
    )

    adapters = {
        "body": build_adapter(cfg.body),
        "params": build_adapter(cfg.params),
        "response": build_adapter(cfg.response),
        "request": build_adapter(request),
        "request_config": build_adapter(request_config),
        "full": build_adapter(full),
    }

    logger.debug(f"Built command schema: {cfg.key} ({full_key})")

    return CommandSchema(
        key=cfg.key,
        full_key=full_key,
        body=cfg.body,
        params=cfg.params,
        response=cfg.response,
        request=request,
        request_config=request_config,
        full=full,
        shape_renderer=cfg.shape_renderer or python_type_name,
        flag_prefix=(
            cfg.flag_prefix
            if cfg.flag_prefix is not None
            else settings.command_flag_prefix
        ),
        token_separator=(
            cfg.token_separator
            if cfg.token_separator is not None
            else settings.command_token_separator
        ),
        adapters=MappingProxyType(adapters),
    )
