"""
Soft assertions: record mismatches now, fail once later.

A ``SoftAssertions`` instance owns an ``AggregatorState``. ``check`` never
raises; it records mismatches against the test identity reported by its
``TestContextProvider``. ``finalize_and_report`` drains the state and
raises a single ``AggregatedSoftFailure`` describing every failure.

Usage:
    soft = SoftAssertions(StaticTestContext("T1", "S1"))
    soft.check(page_title, "Sweet Shop", "page title")
    soft.check(basket_count, 4, "basket count")
    soft.finalize_and_report()  # raises if either check failed

Inside pytest the plugin wires a default instance to the running test;
``record_soft_failure`` and ``finalize_soft_assertions`` use it.
"""

from __future__ import annotations

import logging
import threading
from typing import Any

from storefront_qa.soft_assert.compare import values_equal
from storefront_qa.soft_assert.context import (
    PytestContextProvider,
    TestContextProvider,
)
from storefront_qa.soft_assert.errors import AggregatedSoftFailure, ComparisonError
from storefront_qa.soft_assert.report import format_report
from storefront_qa.soft_assert.state import AggregatorState

logger = logging.getLogger(__name__)


class SoftAssertions:
    """Collects failed checks and reports them together."""

    def __init__(self, context: TestContextProvider, state: AggregatorState | None = None):
        self.context = context
        self.state = state if state is not None else AggregatorState()

    def check(self, actual: Any, expected: Any, message: str = "") -> None:
        """Compare ``actual`` with ``expected``; record a failure on mismatch."""
        if values_equal(actual, expected):
            return
        identity = self.context.current()
        error = ComparisonError(actual, expected, message)
        self.state.record(identity.test_title, identity.suite_title, message, error)
        logger.debug(
            "Soft assertion failed in %s (%s): %s",
            identity.test_title,
            identity.suite_title,
            error.describe(),
        )

    def finalize_and_report(self) -> None:
        """Raise one ``AggregatedSoftFailure`` if anything was recorded.

        State is cleared first, so a second call without new failures is a
        no-op.
        """
        snapshot = self.state.drain()
        if snapshot.is_empty:
            return
        logger.warning(
            "%d soft assertion failure(s) across %d test(s)",
            snapshot.total_failures,
            snapshot.failed_test_count,
        )
        raise AggregatedSoftFailure(format_report(snapshot), snapshot)

    def reset(self) -> None:
        """Drop recorded failures without reporting them."""
        self.state.reset()

    @property
    def pending(self) -> int:
        """Number of failures recorded since the last drain."""
        return len(self.state)


# ── Module-level default ────────────────────────────────────────────

_default: SoftAssertions | None = None
_default_lock = threading.Lock()


def get_soft_assertions() -> SoftAssertions:
    """Get or create the process-wide default aggregator."""
    global _default
    if _default is None:
        with _default_lock:
            if _default is None:
                _default = SoftAssertions(PytestContextProvider())
    return _default


def configure_soft_assertions(
    context: TestContextProvider | None = None,
    state: AggregatorState | None = None,
) -> SoftAssertions:
    """Replace the default aggregator.  Returns the new instance."""
    global _default
    with _default_lock:
        _default = SoftAssertions(context or PytestContextProvider(), state)
    return _default


def record_soft_failure(actual: Any, expected: Any, message: str = "") -> None:
    """Soft-check ``actual == expected`` on the default aggregator."""
    get_soft_assertions().check(actual, expected, message)


def finalize_soft_assertions() -> None:
    """Finalize the default aggregator, raising if anything failed."""
    get_soft_assertions().finalize_and_report()
