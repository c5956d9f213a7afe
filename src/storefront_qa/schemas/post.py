"""JSON schema for post objects."""

from __future__ import annotations

from typing import Any

POST_SCHEMA: dict[str, Any] = {
    "type": "object",
    "required": ["id", "userId", "title", "body"],
    "properties": {
        "id": {"type": "number", "minimum": 1},
        "userId": {"type": "number", "minimum": 1},
        "title": {"type": "string", "minLength": 1},
        "body": {"type": "string", "minLength": 1},
    },
}

POSTS_ARRAY_SCHEMA: dict[str, Any] = {
    "type": "array",
    "items": POST_SCHEMA,
    "minItems": 0,
}
