"""Example pydantic models shared by the test suites."""

from typing import Literal

from pydantic import BaseModel, Field


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


class CreatePersonBody(BaseModel):
    name: str


class StartFlags(BaseModel):
    global_: bool = Field(alias="global")
    flat: Literal["UAE"]


class User(BaseModel):
    name: str
    email: str
