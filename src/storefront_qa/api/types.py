"""
Types for API testing.

Resource models mirror the JSONPlaceholder payloads. Field names are
snake_case in Python and camelCase on the wire (``catchPhrase``,
``userId``); dump with ``model_dump(by_alias=True)`` to get a payload.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Literal

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel

HttpMethod = Literal["GET", "POST", "PUT", "PATCH", "DELETE"]


@dataclass
class ApiResponse:
    """Outcome of one HTTP call.

    ``duration`` is wall-clock milliseconds. ``body`` is decoded JSON when
    the response carries JSON, else the raw text.
    """

    status: int
    body: Any
    headers: dict[str, str] = field(default_factory=dict)
    duration: float = 0.0

    @property
    def ok(self) -> bool:
        return self.status < 400


@dataclass
class ApiAuth:
    """Per-request credentials. A bearer token wins over basic auth."""

    bearer: str | None = None
    username: str | None = None
    password: str | None = None


class ApiModel(BaseModel):
    """Base for resource models with camelCase aliases."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class Geo(ApiModel):
    lat: str
    lng: str


class Address(ApiModel):
    street: str
    suite: str
    city: str
    zipcode: str
    geo: Geo


class Company(ApiModel):
    name: str
    catch_phrase: str
    bs: str


class User(ApiModel):
    id: int
    name: str
    username: str
    email: str
    address: Address | None = None
    phone: str | None = None
    website: str | None = None
    company: Company | None = None


class Post(ApiModel):
    id: int
    user_id: int
    title: str
    body: str


class Comment(ApiModel):
    id: int
    post_id: int
    name: str
    email: str
    body: str


class Todo(ApiModel):
    id: int
    user_id: int
    title: str
    completed: bool


class Album(ApiModel):
    id: int
    user_id: int
    title: str


class Photo(ApiModel):
    id: int
    album_id: int
    title: str
    url: str
    thumbnail_url: str


class ErrorResponse(ApiModel):
    message: str
    status_code: int
    error: str | None = None
