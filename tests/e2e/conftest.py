"""Fixtures for Playwright storefront tests."""

from __future__ import annotations

from collections.abc import Iterator
from pathlib import Path
from typing import Any

import pytest

from storefront_qa.browser import get_browser_gate
from storefront_qa.environment import EnvironmentConfig, get_environment_config
from storefront_qa.pages import CheckoutPage, Product, SweetshopPage, load_products


@pytest.fixture(scope="session")
def env_config() -> EnvironmentConfig:
    return get_environment_config()


@pytest.fixture
def page(env_config: EnvironmentConfig, request: pytest.FixtureRequest) -> Iterator[Any]:
    """A fresh page per test; a screenshot is saved when the test body fails."""
    with get_browser_gate().sync_page(env_config) as page:
        yield page
        report = getattr(request.node, "rep_call", None)
        if report is not None and report.failed:
            env_config.screenshots_dir.mkdir(parents=True, exist_ok=True)
            page.screenshot(path=str(env_config.screenshots_dir / f"{request.node.name}.png"))


@pytest.hookimpl(hookwrapper=True)
def pytest_runtest_makereport(item: pytest.Item, call: pytest.CallInfo[None]):
    outcome = yield
    report = outcome.get_result()
    setattr(item, f"rep_{report.when}", report)


@pytest.fixture
def products(fixtures_dir: Path) -> list[Product]:
    return load_products(fixtures_dir / "products.json")


@pytest.fixture
def sweetshop(page: Any) -> SweetshopPage:
    return SweetshopPage(page)


@pytest.fixture
def checkout(page: Any) -> CheckoutPage:
    return CheckoutPage(page)
