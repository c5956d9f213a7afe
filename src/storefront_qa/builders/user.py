"""
User data builder.

Starts from a realistic fake user; ``with_*`` methods override fields.
``build()`` returns the camelCase payload JSONPlaceholder accepts.
"""

from __future__ import annotations

import copy
from typing import Any

from storefront_qa.api.types import User
from storefront_qa.builders.base import fake


def _fake_geo() -> dict[str, str]:
    return {"lat": str(fake.latitude()), "lng": str(fake.longitude())}


class UserBuilder:
    """Fluent builder for user payloads."""

    def __init__(self) -> None:
        self._user: dict[str, Any] = {
            "name": fake.name(),
            "username": fake.user_name(),
            "email": fake.email(),
            "phone": fake.phone_number(),
            "website": fake.url(),
            "address": {
                "street": fake.street_name(),
                "suite": fake.secondary_address(),
                "city": fake.city(),
                "zipcode": fake.zipcode(),
                "geo": _fake_geo(),
            },
            "company": {
                "name": fake.company(),
                "catchPhrase": fake.catch_phrase(),
                "bs": fake.bs(),
            },
        }

    def with_id(self, user_id: int) -> UserBuilder:
        self._user["id"] = user_id
        return self

    def with_name(self, name: str) -> UserBuilder:
        self._user["name"] = name
        return self

    def with_username(self, username: str) -> UserBuilder:
        self._user["username"] = username
        return self

    def with_email(self, email: str) -> UserBuilder:
        self._user["email"] = email
        return self

    def with_phone(self, phone: str) -> UserBuilder:
        self._user["phone"] = phone
        return self

    def with_website(self, website: str) -> UserBuilder:
        self._user["website"] = website
        return self

    def with_address(
        self,
        street: str,
        suite: str,
        city: str,
        zipcode: str,
        lat: str | None = None,
        lng: str | None = None,
    ) -> UserBuilder:
        """Replace the address; missing coordinates are generated."""
        geo = _fake_geo()
        self._user["address"] = {
            "street": street,
            "suite": suite,
            "city": city,
            "zipcode": zipcode,
            "geo": {"lat": lat or geo["lat"], "lng": lng or geo["lng"]},
        }
        return self

    def with_company(self, name: str, catch_phrase: str, bs: str) -> UserBuilder:
        self._user["company"] = {"name": name, "catchPhrase": catch_phrase, "bs": bs}
        return self

    def minimal(self) -> UserBuilder:
        """Drop the optional fields (phone, website, address, company)."""
        for key in ("phone", "website", "address", "company"):
            self._user.pop(key, None)
        return self

    def build(self) -> dict[str, Any]:
        return copy.deepcopy(self._user)

    def build_full(self) -> User:
        """Build a ``User`` model, generating any missing required field."""
        data = {
            "id": fake.random_int(min=1, max=10000),
            "name": fake.name(),
            "username": fake.user_name(),
            "email": fake.email(),
            **self.build(),
        }
        return User.model_validate(data)

    @staticmethod
    def create() -> UserBuilder:
        return UserBuilder()

    @staticmethod
    def create_minimal() -> dict[str, Any]:
        return UserBuilder().minimal().build()

    @staticmethod
    def create_many(count: int) -> list[dict[str, Any]]:
        return [UserBuilder().build() for _ in range(count)]
