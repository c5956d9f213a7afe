"""Shared pytest fixtures for storefront-qa tests."""

from __future__ import annotations

import json
import os
from pathlib import Path
from typing import Any

import pytest

pytest_plugins = ["pytester"]

LIVE_ENV_VAR = "STOREFRONT_LIVE"
LIVE_DIRS = {"api", "e2e"}


def _live_enabled() -> bool:
    return os.environ.get(LIVE_ENV_VAR, "").lower() in ("1", "true", "yes")


def pytest_collection_modifyitems(config: pytest.Config, items: list[pytest.Item]) -> None:
    """Skip suites that talk to the real storefront unless STOREFRONT_LIVE=1."""
    if _live_enabled():
        return
    skip_live = pytest.mark.skip(reason=f"live suite: set {LIVE_ENV_VAR}=1 to run")
    tests_root = Path(__file__).parent
    for item in items:
        try:
            relative = item.path.relative_to(tests_root)
        except ValueError:
            continue
        if relative.parts and relative.parts[0] in LIVE_DIRS:
            item.add_marker(skip_live)


@pytest.fixture
def fixtures_dir() -> Path:
    """Return path to fixtures directory."""
    return Path(__file__).parent / "fixtures"


@pytest.fixture
def load_fixture(fixtures_dir: Path):
    """Load a JSON fixture by relative path, e.g. ``load_fixture("mocks/success/users.json")``."""

    def _load(name: str) -> Any:
        return json.loads((fixtures_dir / name).read_text(encoding="utf-8"))

    return _load
