"""
Pytest plugin wiring soft assertions into the test run.

Registered via the pyproject.toml entry point::

    [project.entry-points."pytest11"]
    storefront_qa = "storefront_qa.soft_assert.plugin"

Every test runs inside an autouse ``soft_assertions`` fixture whose scope
is the reporting window (``--soft-assert-scope``, default ``module``).
When the window closes the fixture finalizes the aggregator, so all soft
failures of the window surface as one error on the teardown of its last
test. Failures recorded after the last window closed (for example in a
session fixture's teardown) are reported at session finish and fail the
run.

Example::

    @pytest.mark.suite("SweetShop Basket and Checkout Tests")
    def test_basket(soft_assert):
        soft_assert(basket.count(), 4, "basket count")
        soft_assert(basket.total(), "£3.70", "basket total")
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

import pytest

from storefront_qa.soft_assert import aggregator
from storefront_qa.soft_assert.aggregator import SoftAssertions, configure_soft_assertions
from storefront_qa.soft_assert.context import SUITE_MARKER, PytestContextProvider
from storefront_qa.soft_assert.report import format_report

if TYPE_CHECKING:
    from collections.abc import Callable, Generator

logger = logging.getLogger(__name__)

SCOPES = ("function", "class", "module", "session")
DEFAULT_SCOPE = "module"

_provider_key = pytest.StashKey[PytestContextProvider]()
_soft_key = pytest.StashKey[SoftAssertions]()


def pytest_addoption(parser: pytest.Parser) -> None:
    group = parser.getgroup("storefront_qa", "soft assertions")
    group.addoption(
        "--soft-assert-scope",
        action="store",
        choices=SCOPES,
        default=DEFAULT_SCOPE,
        help="Reporting window for soft assertions (default: %(default)s)",
    )


def pytest_configure(config: pytest.Config) -> None:
    """Register the suite marker and install the default aggregator."""
    config.addinivalue_line(
        "markers", f"{SUITE_MARKER}(title): group soft assertion failures under a suite title"
    )

    previous = aggregator._default
    provider = PytestContextProvider()
    config.stash[_provider_key] = provider
    config.stash[_soft_key] = configure_soft_assertions(provider)

    # Nested sessions (pytester) must hand the outer session its aggregator back
    def _restore() -> None:
        aggregator._default = previous

    config.add_cleanup(_restore)


@pytest.hookimpl(hookwrapper=True)
def pytest_runtest_protocol(
    item: pytest.Item, nextitem: pytest.Item | None
) -> Generator[None, None, None]:
    provider = item.config.stash.get(_provider_key, None)
    if provider is None:
        yield
        return
    provider.enter(item)
    try:
        yield
    finally:
        provider.leave(item)


def _soft_assert_scope(fixture_name: str, config: pytest.Config) -> str:
    return str(config.getoption("soft_assert_scope", DEFAULT_SCOPE))


@pytest.fixture(scope=_soft_assert_scope, autouse=True)
def soft_assertions(request: pytest.FixtureRequest) -> Generator[SoftAssertions, None, None]:
    """The aggregator for this run; finalized when the reporting window closes."""
    soft = request.config.stash[_soft_key]
    yield soft
    soft.finalize_and_report()


@pytest.fixture()
def soft_assert(soft_assertions: SoftAssertions) -> Callable[..., None]:
    """Bound ``check``: ``soft_assert(actual, expected, message)``."""
    return soft_assertions.check


def pytest_sessionfinish(session: pytest.Session, exitstatus: int) -> None:
    """Report failures recorded after the last reporting window closed.

    Session fixture teardowns run after the ``soft_assertions`` fixture of
    a narrower window has finalized, so anything they record is drained
    here and fails the run.
    """
    soft = session.config.stash.get(_soft_key, None)
    if soft is None:
        return
    snapshot = soft.state.drain()
    if snapshot.is_empty:
        return

    report = format_report(snapshot)
    logger.warning(
        "%d soft assertion failure(s) recorded after the last reporting window",
        snapshot.total_failures,
    )
    reporter = session.config.pluginmanager.get_plugin("terminalreporter")
    if reporter is not None:
        reporter.write_sep("=", "soft assertion failures after last window", red=True)
        reporter.write_line(report)
    if session.exitstatus == pytest.ExitCode.OK:
        session.exitstatus = pytest.ExitCode.TESTS_FAILED
