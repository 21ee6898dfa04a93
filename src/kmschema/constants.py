"""Shared constants for kmschema builders."""

from typing import Literal

HttpMethod = Literal["get", "post", "put", "delete", "head", "options", "patch"]
YesNo = Literal["YES", "NO"]

YES = "YES"
NO = "NO"

PATH_PREFIX = "/"
PATH_PARAM_MARKER = ":"

DEFAULT_COMMAND_FLAG_PREFIX = "--"
DEFAULT_COMMAND_TOKEN_SEPARATOR = ""
DEFAULT_DOCUMENT_KEY_SUFFIX = "s"

FIELD_PATH_SEPARATOR = " -> "

ENV_PREFIX = "KMSCHEMA_"
