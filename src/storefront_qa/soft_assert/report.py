"""Consolidated soft-assertion report text."""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from storefront_qa.soft_assert.state import StateSnapshot

REPORT_HEADER = "Soft assertion failed: Total it block failed"


def format_report(snapshot: StateSnapshot) -> str:
    """
    Build the report for a drained snapshot.

    Layout::

        Soft assertion failed: Total it block failed (2)
        1. Test Title: T1
        => m1: expected 1 to equal 2

        => m2: expected 'x' to equal 'y'
        2. Test Title: T2
        => m3: expected True to equal False

        Total assertion failures in "S1": 3

    Tests appear in first-failure order, failures in recorded order.
    """
    test_blocks = []
    for index, (title, records) in enumerate(snapshot.failures.items(), start=1):
        failures = "\n\n".join(f"=> {record.error}" for record in records)
        test_blocks.append(f"{index}. Test Title: {title}\n{failures}")

    suite_lines = "\n".join(
        f'Total assertion failures in "{suite}": {count}'
        for suite, count in snapshot.suite_counts.items()
    )

    return (
        f"{REPORT_HEADER} ({snapshot.failed_test_count})\n"
        + "\n".join(test_blocks)
        + f"\n\n{suite_lines}"
    )
