"""Fixtures for live JSONPlaceholder API tests."""

from __future__ import annotations

from collections.abc import Iterator

import pytest

from storefront_qa.api import ApiClient


@pytest.fixture(scope="module")
def api() -> Iterator[ApiClient]:
    with ApiClient() as client:
        yield client
