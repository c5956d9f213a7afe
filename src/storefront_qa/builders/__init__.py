"""
Faker-backed builders for API test data.

Usage:
    from storefront_qa.builders import UserBuilder, seed_builders

    seed_builders(42)
    payload = UserBuilder.create().with_name("Jane Doe").minimal().build()
"""

from __future__ import annotations

from storefront_qa.builders.base import fake, seed_builders
from storefront_qa.builders.post import PostBuilder
from storefront_qa.builders.todo import TodoBuilder
from storefront_qa.builders.user import UserBuilder

__all__ = [
    "PostBuilder",
    "TodoBuilder",
    "UserBuilder",
    "fake",
    "seed_builders",
]
