"""
Errors produced by the soft-assertion aggregator.

``ComparisonError`` describes one mismatching check and is stored, never
raised, by the evaluator. ``AggregatedSoftFailure`` is the single error
raised at finalization. Both derive from ``AssertionError`` so pytest
renders them as ordinary test failures.
"""

from __future__ import annotations

import difflib
import pprint
from typing import TYPE_CHECKING, Any

if TYPE_CHECKING:
    from storefront_qa.soft_assert.state import StateSnapshot


def _needs_diff(actual: Any, expected: Any) -> bool:
    if isinstance(actual, str) and isinstance(expected, str):
        return "\n" in actual or "\n" in expected
    containers = (dict, list, tuple, set, frozenset)
    return isinstance(actual, containers) and isinstance(expected, containers)


def _diff(actual: Any, expected: Any) -> str:
    if isinstance(actual, str) and isinstance(expected, str):
        actual_lines = actual.splitlines()
        expected_lines = expected.splitlines()
    else:
        actual_lines = pprint.pformat(actual, width=60).splitlines()
        expected_lines = pprint.pformat(expected, width=60).splitlines()
    return "\n".join(
        difflib.unified_diff(
            expected_lines, actual_lines, fromfile="expected", tofile="actual", lineterm=""
        )
    )


class ComparisonError(AssertionError):
    """A single failed equality check.

    Attributes:
        actual: The observed value
        expected: The value the check required
        message: Human-supplied description of the check
        diff: Unified diff for containers and multi-line strings, else ""
    """

    def __init__(self, actual: Any, expected: Any, message: str = ""):
        self.actual = actual
        self.expected = expected
        self.message = message
        self.diff = _diff(actual, expected) if _needs_diff(actual, expected) else ""
        super().__init__(self.describe())

    def describe(self) -> str:
        """Render as ``<message>: expected <actual> to equal <expected>``."""
        text = f"expected {self.actual!r} to equal {self.expected!r}"
        if self.message:
            text = f"{self.message}: {text}"
        if self.diff:
            text = f"{text}\n{self.diff}"
        return text


class AggregatedSoftFailure(AssertionError):
    """Raised once per reporting window when any soft check failed.

    Attributes:
        report: The consolidated report text (also the exception message)
        snapshot: The drained state the report was built from
    """

    def __init__(self, report: str, snapshot: StateSnapshot):
        self.report = report
        self.snapshot = snapshot
        super().__init__(report)


class NoActiveTestError(RuntimeError):
    """Raised when a soft check fails while no test is running."""
