#!/usr/bin/env python3
"""Build an example endpoint and command schema and print their rendered forms.

Usage:
    python scripts/run_examples.py
    python scripts/run_examples.py --separator " "
"""

import argparse
import logging
import sys
from pathlib import Path
from typing import Literal

from pydantic import BaseModel, Field

# Add src to path so kmschema is importable without installation
sys.path.insert(0, str(Path(__file__).parent.parent / "src"))

from kmschema.config import get_settings  # noqa: E402
from kmschema.exception import KmSchemaException  # noqa: E402
from kmschema.service import api, command  # noqa: E402
from kmschema.shape import response_shape  # noqa: E402

logger = logging.getLogger("kmschema.examples")


class Person(BaseModel):
    name: str
    age: int
    is_marid: bool = Field(alias="isMarid")


class PageParams(BaseModel):
    page_size: int = Field(alias="pageSize")
    current_page: int = Field(alias="currentPage")


class MaritalQuery(BaseModel):
    is_marid: bool = Field(alias="isMarid")


class EmptyBody(BaseModel):
    pass


class StartFlags(BaseModel):
    global_: bool = Field(alias="global")
    flat: Literal["UAE"]


def main() -> int:
    parser = argparse.ArgumentParser(description="Render example kmschema contracts")
    parser.add_argument(
        "--separator",
        default=None,
        help="Separator between command tokens (default: KMSCHEMA_COMMAND_TOKEN_SEPARATOR)",
    )
    args = parser.parse_args()

    logging.basicConfig(
        level=get_settings().log_level,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    )

    try:
        endpoint = api.make_schema(
            auth="YES",
            path="/sss",
            method="get",
            body=EmptyBody,
            params=PageParams,
            query=MaritalQuery,
            response=response_shape(Person).list().simple(),
        )
        order = ["pageSize", "currentPage"]
        logger.info(
            f"params {endpoint.make_full_path({'currentPage': 10, 'pageSize': 12}, order)}"
        )
        logger.info(f"shape  {endpoint.make_full_path_shape(order)}")

        start = command.make_schema(
            key="start",
            body=str,
            params=StartFlags,
            response=EmptyBody,
            token_separator=args.separator,
        )
        logger.info(f"commandParams {start.make_full_path({'global': True, 'flat': 'UAE'})}")
    except KmSchemaException as exc:
        logger.error(f"{exc.code}: {exc.message}", extra={"details": exc.details})
        return 1

    return 0


if __name__ == "__main__":
    sys.exit(main())
