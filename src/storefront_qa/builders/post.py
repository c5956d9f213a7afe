"""Post data builder."""

from __future__ import annotations

from typing import Any

from storefront_qa.api.types import Post
from storefront_qa.builders.base import fake


def _fake_body() -> str:
    return "\n".join(fake.paragraphs(nb=2))


class PostBuilder:
    """Fluent builder for post payloads."""

    def __init__(self) -> None:
        self._post: dict[str, Any] = {
            "userId": fake.random_int(min=1, max=10),
            "title": fake.sentence(),
            "body": _fake_body(),
        }

    def with_id(self, post_id: int) -> PostBuilder:
        self._post["id"] = post_id
        return self

    def with_user_id(self, user_id: int) -> PostBuilder:
        self._post["userId"] = user_id
        return self

    def with_title(self, title: str) -> PostBuilder:
        self._post["title"] = title
        return self

    def with_body(self, body: str) -> PostBuilder:
        self._post["body"] = body
        return self

    def build(self) -> dict[str, Any]:
        return dict(self._post)

    def build_full(self) -> Post:
        data = {
            "id": fake.random_int(min=1, max=10000),
            "userId": fake.random_int(min=1, max=10),
            "title": fake.sentence(),
            "body": _fake_body(),
            **self._post,
        }
        return Post.model_validate(data)

    @staticmethod
    def create() -> PostBuilder:
        return PostBuilder()

    @staticmethod
    def create_many(count: int, user_id: int | None = None) -> list[dict[str, Any]]:
        posts = []
        for _ in range(count):
            builder = PostBuilder()
            if user_id:
                builder.with_user_id(user_id)
            posts.append(builder.build())
        return posts
