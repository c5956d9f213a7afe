"""
Soft assertions for pytest.

Checks record mismatches instead of raising; one consolidated failure is
raised when the reporting window (by default, a test module) closes.

Usage:
    from storefront_qa.pages import CheckoutPage
    from storefront_qa.soft_assert import record_soft_failure

    def test_basket(page):
        record_soft_failure(page.locator("#basketCount").text_content(), "4", "basket count")
        CheckoutPage(page).validate_checkout_currency("GBP")

Outside pytest, build an aggregator over an explicit context:
    from storefront_qa.soft_assert import SoftAssertions, StaticTestContext

    soft = SoftAssertions(StaticTestContext("smoke", "nightly"))
    soft.check(status, 200, "status")
    soft.finalize_and_report()
"""

from __future__ import annotations

from storefront_qa.soft_assert.aggregator import (
    SoftAssertions,
    configure_soft_assertions,
    finalize_soft_assertions,
    get_soft_assertions,
    record_soft_failure,
)
from storefront_qa.soft_assert.compare import values_equal
from storefront_qa.soft_assert.context import (
    PytestContextProvider,
    StaticTestContext,
    TestContextProvider,
    TestIdentity,
)
from storefront_qa.soft_assert.errors import (
    AggregatedSoftFailure,
    ComparisonError,
    NoActiveTestError,
)
from storefront_qa.soft_assert.report import format_report
from storefront_qa.soft_assert.state import AggregatorState, FailureRecord, StateSnapshot

__all__ = [
    # Aggregator
    "SoftAssertions",
    "configure_soft_assertions",
    "finalize_soft_assertions",
    "get_soft_assertions",
    "record_soft_failure",
    # State
    "AggregatorState",
    "FailureRecord",
    "StateSnapshot",
    # Test identity
    "PytestContextProvider",
    "StaticTestContext",
    "TestContextProvider",
    "TestIdentity",
    # Errors
    "AggregatedSoftFailure",
    "ComparisonError",
    "NoActiveTestError",
    # Helpers
    "format_report",
    "values_equal",
]
