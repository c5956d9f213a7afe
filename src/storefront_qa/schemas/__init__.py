"""
JSON schemas for JSONPlaceholder resources and validation helpers.

Usage:
    from storefront_qa.schemas import USER_SCHEMA, assert_schema

    assert_schema(response.body, USER_SCHEMA)
"""

from __future__ import annotations

from storefront_qa.schemas.post import POST_SCHEMA, POSTS_ARRAY_SCHEMA
from storefront_qa.schemas.todo import TODO_SCHEMA, TODOS_ARRAY_SCHEMA
from storefront_qa.schemas.user import USER_SCHEMA, USERS_ARRAY_SCHEMA
from storefront_qa.schemas.validator import (
    SchemaIssue,
    SchemaValidationResult,
    assert_schema,
    soft_assert_schema,
    validate_schema,
)

__all__ = [
    "POST_SCHEMA",
    "POSTS_ARRAY_SCHEMA",
    "TODO_SCHEMA",
    "TODOS_ARRAY_SCHEMA",
    "USER_SCHEMA",
    "USERS_ARRAY_SCHEMA",
    "SchemaIssue",
    "SchemaValidationResult",
    "assert_schema",
    "soft_assert_schema",
    "validate_schema",
]
