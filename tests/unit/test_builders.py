"""Tests for the Faker-backed data builders."""

from __future__ import annotations

import pytest

from storefront_qa.api import Post, Todo, User
from storefront_qa.builders import PostBuilder, TodoBuilder, UserBuilder, seed_builders
from storefront_qa.schemas import POST_SCHEMA, TODO_SCHEMA, validate_schema


@pytest.fixture(autouse=True)
def seeded() -> None:
    seed_builders(1234)


class TestUserBuilder:
    def test_defaults_are_complete(self) -> None:
        user = UserBuilder.create().build()

        assert {"name", "username", "email", "phone", "website", "address", "company"} <= set(user)
        assert set(user["address"]["geo"]) == {"lat", "lng"}
        assert "catchPhrase" in user["company"]
        assert "@" in user["email"]

    def test_overrides(self) -> None:
        user = (
            UserBuilder.create()
            .with_id(5)
            .with_name("Jane Doe")
            .with_username("jane")
            .with_email("jane@example.com")
            .with_phone("555-0100")
            .with_website("jane.example")
            .with_company("Acme", "We build", "synergy")
            .build()
        )

        assert user["id"] == 5
        assert user["name"] == "Jane Doe"
        assert user["username"] == "jane"
        assert user["email"] == "jane@example.com"
        assert user["phone"] == "555-0100"
        assert user["website"] == "jane.example"
        assert user["company"] == {"name": "Acme", "catchPhrase": "We build", "bs": "synergy"}

    def test_with_address_generates_missing_coordinates(self) -> None:
        builder = UserBuilder.create()
        user = builder.with_address("1 Main St", "Apt 1", "Bristol", "BS1", lat="51.45").build()

        assert user["address"]["city"] == "Bristol"
        assert user["address"]["geo"]["lat"] == "51.45"
        assert user["address"]["geo"]["lng"]

    def test_minimal(self) -> None:
        user = UserBuilder.create_minimal()

        assert set(user) == {"name", "username", "email"}

    def test_build_returns_copy(self) -> None:
        builder = UserBuilder.create()
        first = builder.build()
        first["address"]["city"] = "Changed"

        assert builder.build()["address"]["city"] != "Changed"

    def test_build_full_fills_required_fields(self) -> None:
        user = UserBuilder.create().minimal().build_full()

        assert isinstance(user, User)
        assert 1 <= user.id <= 10000
        assert user.address is None

    def test_create_many(self) -> None:
        users = UserBuilder.create_many(3)

        assert len(users) == 3
        assert all("@" in u["email"] for u in users)

    def test_seed_makes_data_reproducible(self) -> None:
        seed_builders(99)
        first = UserBuilder.create().build()
        seed_builders(99)
        second = UserBuilder.create().build()

        assert first == second


class TestPostBuilder:
    def test_defaults(self) -> None:
        post = PostBuilder.create().build()

        assert 1 <= post["userId"] <= 10
        assert post["title"]
        assert post["body"]

    def test_build_full_matches_schema(self) -> None:
        post = PostBuilder.create().with_title("Hello").build_full()

        assert isinstance(post, Post)
        assert post.title == "Hello"
        assert validate_schema(post.model_dump(by_alias=True), POST_SCHEMA).valid

    def test_create_many_for_user(self) -> None:
        posts = PostBuilder.create_many(4, user_id=7)

        assert len(posts) == 4
        assert all(p["userId"] == 7 for p in posts)

    def test_with_fields(self) -> None:
        post = PostBuilder.create().with_id(3).with_user_id(2).with_body("Body").build()

        assert post == {"id": 3, "userId": 2, "title": post["title"], "body": "Body"}


class TestTodoBuilder:
    def test_completed_flags(self) -> None:
        assert TodoBuilder.create().completed().build()["completed"] is True
        assert TodoBuilder.create().not_completed().build()["completed"] is False
        assert TodoBuilder.create().with_completed(True).build()["completed"] is True

    def test_title_word_count(self) -> None:
        title = TodoBuilder.create().build()["title"]

        assert 3 <= len(title.rstrip(".").split()) <= 8

    def test_build_full(self) -> None:
        todo = TodoBuilder.create().with_id(9).with_title("Buy sweets").build_full()

        assert isinstance(todo, Todo)
        assert todo.id == 9
        assert todo.title == "Buy sweets"
        assert validate_schema(todo.model_dump(by_alias=True), TODO_SCHEMA).valid

    def test_create_many_for_user(self) -> None:
        todos = TodoBuilder.create_many(2, user_id=4)

        assert [t["userId"] for t in todos] == [4, 4]
