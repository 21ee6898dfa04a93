"""Root-level pytest configuration and shared fixtures.

Adds the src/ directory to sys.path so kmschema can be imported without installation.
Provides the example descriptors used across all test suites.

Key exports:
    - fresh_settings: autouse fixture isolating SchemaSettings per test
    - Pytest fixtures for an example endpoint, command and document schema
"""

import sys
from pathlib import Path

import pytest

sys.path.insert(0, str(Path(__file__).parent.parent / "src"))

from kmschema.config import reset_settings  # noqa: E402
from kmschema.service import api, command, document  # noqa: E402
from kmschema.shape import response_shape  # noqa: E402
from tests.models import (  # noqa: E402
    CreatePersonBody,
    EmptyBody,
    MaritalQuery,
    PageParams,
    Person,
    StartFlags,
    User,
)

# ---------------------------------------------------------------------------
# Settings isolation
# ---------------------------------------------------------------------------


@pytest.fixture(autouse=True)
def fresh_settings():
    """Drop cached SchemaSettings around every test."""
    reset_settings()
    yield
    reset_settings()


# ---------------------------------------------------------------------------
# Descriptor fixtures
# ---------------------------------------------------------------------------


@pytest.fixture
def list_people_schema():
    """The ``GET /sss`` endpoint listing people."""
    return api.make_schema(
        method="get",
        auth="YES",
        path="/sss",
        body=EmptyBody,
        params=PageParams,
        query=MaritalQuery,
        response=response_shape(Person).list().simple(),
    )


@pytest.fixture
def create_person_schema():
    """A disabled ``POST /people`` endpoint with a required body."""
    return api.make_schema(
        method="post",
        auth="NO",
        disable="YES",
        path="/people",
        body=CreatePersonBody,
        params=PageParams,
        query=MaritalQuery,
        response=Person,
    )


@pytest.fixture
def start_command_schema():
    """The ``start`` command."""
    return command.make_schema(
        key="start",
        body=str,
        params=StartFlags,
        response=EmptyBody,
    )


@pytest.fixture
def user_document_schema():
    """The ``user`` document."""
    return document.make_schema(key="user", document=User)
