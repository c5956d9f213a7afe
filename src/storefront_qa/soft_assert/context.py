"""
Resolving which test and suite a soft check belongs to.

The aggregator asks a ``TestContextProvider`` for the current identity at
the moment a check fails. ``PytestContextProvider`` is fed by the plugin's
``pytest_runtest_protocol`` wrapper; ``StaticTestContext`` is a settable
stand-in for unit tests and scripts.
"""

from __future__ import annotations

import threading
from contextlib import contextmanager
from dataclasses import dataclass
from typing import TYPE_CHECKING, Protocol

import pytest

from storefront_qa.soft_assert.errors import NoActiveTestError

if TYPE_CHECKING:
    from collections.abc import Iterator

SUITE_MARKER = "suite"


@dataclass(frozen=True)
class TestIdentity:
    """Titles a failure is grouped and counted under."""

    __test__ = False

    test_title: str
    suite_title: str


class TestContextProvider(Protocol):
    """Anything that can tell which test is running right now."""

    __test__ = False

    def current(self) -> TestIdentity: ...


class StaticTestContext:
    """A provider whose identity is set by hand.

    Example:
        context = StaticTestContext("T1", "S1")
        soft = SoftAssertions(context)
        with context.running("T2"):
            soft.check(1, 2, "inside T2")
    """

    def __init__(self, test_title: str = "test", suite_title: str = "suite"):
        self._identity = TestIdentity(test_title, suite_title)

    def current(self) -> TestIdentity:
        return self._identity

    def set(self, test_title: str, suite_title: str | None = None) -> None:
        """Switch to another test, optionally in another suite."""
        self._identity = TestIdentity(test_title, suite_title or self._identity.suite_title)

    @contextmanager
    def running(self, test_title: str, suite_title: str | None = None) -> Iterator[TestIdentity]:
        """Temporarily switch identity for the duration of a ``with`` block."""
        previous = self._identity
        self.set(test_title, suite_title)
        try:
            yield self._identity
        finally:
            self._identity = previous


def resolve_suite_title(item: pytest.Item) -> str:
    """Suite title for a collected item.

    The ``suite`` marker wins, then the outermost test class, then the
    test module's file name.
    """
    marker = item.get_closest_marker(SUITE_MARKER)
    if marker is not None:
        title = marker.args[0] if marker.args else marker.kwargs.get("title")
        if title:
            return str(title)

    for node in item.listchain():
        if isinstance(node, pytest.Class):
            return node.name

    return item.path.name


class PytestContextProvider:
    """Tracks the pytest item currently inside its run protocol."""

    def __init__(self) -> None:
        self._lock = threading.Lock()
        self._item: pytest.Item | None = None
        self._identity: TestIdentity | None = None

    def enter(self, item: pytest.Item) -> None:
        identity = TestIdentity(item.nodeid, resolve_suite_title(item))
        with self._lock:
            self._item = item
            self._identity = identity

    def leave(self, item: pytest.Item) -> None:
        with self._lock:
            if self._item is item:
                self._item = None
                self._identity = None

    @property
    def active(self) -> bool:
        return self._identity is not None

    def current(self) -> TestIdentity:
        with self._lock:
            identity = self._identity
        if identity is None:
            raise NoActiveTestError("Soft assertion failed outside of a running test")
        return identity
