"""JSON schema for todo objects."""

from __future__ import annotations

from typing import Any

TODO_SCHEMA: dict[str, Any] = {
    "type": "object",
    "required": ["id", "userId", "title", "completed"],
    "properties": {
        "id": {"type": "number", "minimum": 1},
        "userId": {"type": "number", "minimum": 1},
        "title": {"type": "string", "minLength": 1},
        "completed": {"type": "boolean"},
    },
}

TODOS_ARRAY_SCHEMA: dict[str, Any] = {
    "type": "array",
    "items": TODO_SCHEMA,
    "minItems": 0,
}
