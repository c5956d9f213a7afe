"""Todo data builder."""

from __future__ import annotations

from typing import Any

from storefront_qa.api.types import Todo
from storefront_qa.builders.base import fake, sentence


class TodoBuilder:
    """Fluent builder for todo payloads."""

    def __init__(self) -> None:
        self._todo: dict[str, Any] = {
            "userId": fake.random_int(min=1, max=10),
            "title": sentence(3, 8),
            "completed": fake.pybool(),
        }

    def with_id(self, todo_id: int) -> TodoBuilder:
        self._todo["id"] = todo_id
        return self

    def with_user_id(self, user_id: int) -> TodoBuilder:
        self._todo["userId"] = user_id
        return self

    def with_title(self, title: str) -> TodoBuilder:
        self._todo["title"] = title
        return self

    def with_completed(self, completed: bool) -> TodoBuilder:
        self._todo["completed"] = completed
        return self

    def completed(self) -> TodoBuilder:
        return self.with_completed(True)

    def not_completed(self) -> TodoBuilder:
        return self.with_completed(False)

    def build(self) -> dict[str, Any]:
        return dict(self._todo)

    def build_full(self) -> Todo:
        """Build a ``Todo`` model; ``completed`` defaults to False when unset."""
        data = {
            "id": fake.random_int(min=1, max=10000),
            "userId": fake.random_int(min=1, max=10),
            "title": sentence(3, 8),
            "completed": False,
            **self._todo,
        }
        return Todo.model_validate(data)

    @staticmethod
    def create() -> TodoBuilder:
        return TodoBuilder()

    @staticmethod
    def create_many(count: int, user_id: int | None = None) -> list[dict[str, Any]]:
        todos = []
        for _ in range(count):
            builder = TodoBuilder()
            if user_id:
                builder.with_user_id(user_id)
            todos.append(builder.build())
        return todos
