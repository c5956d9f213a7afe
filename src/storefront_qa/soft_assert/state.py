"""
Aggregator state: per-test failure lists and per-suite failure counts.

Both mappings live behind one lock. ``drain`` swaps them for empty ones in
a single critical section, so a record either lands in the returned
snapshot or in the fresh state.
"""

from __future__ import annotations

import threading
from dataclasses import dataclass, field
from types import MappingProxyType
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from collections.abc import Mapping

    from storefront_qa.soft_assert.errors import ComparisonError


@dataclass(frozen=True)
class FailureRecord:
    """One failed soft check."""

    message: str
    error: ComparisonError


@dataclass(frozen=True)
class StateSnapshot:
    """Immutable view of drained state."""

    failures: Mapping[str, tuple[FailureRecord, ...]] = field(
        default_factory=lambda: MappingProxyType({})
    )
    suite_counts: Mapping[str, int] = field(default_factory=lambda: MappingProxyType({}))

    @property
    def is_empty(self) -> bool:
        return not self.failures

    @property
    def failed_test_count(self) -> int:
        return len(self.failures)

    @property
    def total_failures(self) -> int:
        return sum(len(records) for records in self.failures.values())


class AggregatorState:
    """Mutable failure store owned by one ``SoftAssertions`` instance."""

    def __init__(self) -> None:
        self._lock = threading.Lock()
        self._failures: dict[str, list[FailureRecord]] = {}
        self._suite_counts: dict[str, int] = {}

    def record(
        self, test_title: str, suite_title: str, message: str, error: ComparisonError
    ) -> None:
        """Append a failure for ``test_title`` and bump ``suite_title``'s count."""
        with self._lock:
            self._failures.setdefault(test_title, []).append(FailureRecord(message, error))
            self._suite_counts[suite_title] = self._suite_counts.get(suite_title, 0) + 1

    def drain(self) -> StateSnapshot:
        """Return everything recorded so far and start over empty."""
        with self._lock:
            failures, self._failures = self._failures, {}
            suite_counts, self._suite_counts = self._suite_counts, {}
        return StateSnapshot(
            failures=MappingProxyType({title: tuple(recs) for title, recs in failures.items()}),
            suite_counts=MappingProxyType(dict(suite_counts)),
        )

    def reset(self) -> None:
        """Discard everything recorded so far."""
        with self._lock:
            self._failures = {}
            self._suite_counts = {}

    def __len__(self) -> int:
        with self._lock:
            return sum(len(records) for records in self._failures.values())
