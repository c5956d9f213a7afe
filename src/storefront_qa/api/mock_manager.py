"""
Network mocking for Playwright pages.

Mocks are declared as ``MockConfig`` and installed with ``page.route``.
Requests whose method differs from the mock's fall through to the next
matching handler (or the network). Every request served by a mock is
appended to an ``InterceptLog`` under the mock's alias.

Usage:
    manager = MockManager()
    manager.register("users", MockConfig("GET", "**/users", users, alias="getUsers"))
    manager.apply(page, "users")
    page.goto("/users")
    manager.log.assert_called("getUsers", times=1)
"""

from __future__ import annotations

import logging
import threading
import time
from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Any

from storefront_qa.errors import UnknownMockError
from storefront_qa.logging import log_with_context

if TYPE_CHECKING:
    from playwright.sync_api import Page, Route

logger = logging.getLogger(__name__)

JSON_HEADERS = {"Content-Type": "application/json"}


@dataclass
class MockConfig:
    """
    One declarative interception.

    Attributes:
        method: HTTP method to match (case-insensitive)
        url: URL glob, regex or predicate accepted by ``page.route``
        response: JSON-serializable body
        status_code: Response status
        delay: Milliseconds to wait before responding
        headers: Response headers (default: JSON content type)
        alias: Name the served requests are logged under
        network_error: Abort the request instead of responding
    """

    method: str
    url: Any
    response: Any = None
    status_code: int = 200
    delay: int | None = None
    headers: dict[str, str] | None = None
    alias: str | None = None
    network_error: bool = False


@dataclass(frozen=True)
class InterceptedRequest:
    """A request served by a mock."""

    alias: str
    method: str
    url: str
    status: int | None
    body: Any = None


@dataclass
class InterceptLog:
    """Requests served by mocks, grouped by alias."""

    _entries: list[InterceptedRequest] = field(default_factory=list)
    _lock: threading.Lock = field(default_factory=threading.Lock, repr=False)

    def record(self, entry: InterceptedRequest) -> None:
        with self._lock:
            self._entries.append(entry)

    @property
    def requests(self) -> list[InterceptedRequest]:
        """All served requests, oldest first."""
        with self._lock:
            return list(self._entries)

    def calls(self, alias: str) -> list[InterceptedRequest]:
        """Requests served under ``alias``."""
        return [entry for entry in self.requests if entry.alias == alias]

    def last(self, alias: str) -> InterceptedRequest | None:
        matches = self.calls(alias)
        return matches[-1] if matches else None

    def assert_called(self, alias: str, times: int | None = None) -> None:
        """Assert ``alias`` served at least one (or exactly ``times``) request(s).

        Raises:
            AssertionError: If the assertion fails.
        """
        matches = self.calls(alias)
        if times is not None:
            assert len(matches) == times, (
                f"Expected {times} request(s) for '{alias}', got {len(matches)}. "
                f"Recorded: {[e.alias + ' ' + e.method + ' ' + e.url for e in self.requests]}"
            )
        else:
            assert matches, f"Expected at least one request for '{alias}', got none"

    def clear(self) -> None:
        with self._lock:
            self._entries.clear()


def _make_handler(config: MockConfig, alias: str, log: InterceptLog | None):
    method = config.method.upper()

    def handle(route: Route) -> None:
        request = route.request
        if request.method.upper() != method:
            route.fallback()
            return

        if config.delay:
            time.sleep(config.delay / 1000)

        if config.network_error:
            log_with_context(
                logger,
                logging.DEBUG,
                f"Aborting {request.method} {request.url}",
                alias=alias,
                method=request.method,
                url=request.url,
            )
            if log is not None:
                log.record(InterceptedRequest(alias, request.method, request.url, None))
            route.abort("failed")
            return

        if log is not None:
            served = InterceptedRequest(
                alias, request.method, request.url, config.status_code, config.response
            )
            log.record(served)
        log_with_context(
            logger,
            logging.DEBUG,
            f"Mocked {request.method} {request.url} -> {config.status_code}",
            alias=alias,
            method=request.method,
            url=request.url,
            status=config.status_code,
        )
        route.fulfill(
            status=config.status_code,
            headers=config.headers or dict(JSON_HEADERS),
            json=config.response,
        )

    return handle


def install_mock(
    page: Page, config: MockConfig, alias: str, log: InterceptLog | None = None
) -> None:
    """Route requests matching ``config`` on ``page``."""
    page.route(config.url, _make_handler(config, alias, log))


class MockManager:
    """Registry of named mocks that can be applied to pages."""

    def __init__(self, log: InterceptLog | None = None) -> None:
        self._mocks: dict[str, MockConfig] = {}
        self.log = log or InterceptLog()

    def register(self, name: str, config: MockConfig) -> None:
        self._mocks[name] = config

    def apply(self, page: Page, name: str) -> None:
        """Install mock ``name`` on ``page``.

        Raises:
            UnknownMockError: If ``name`` was never registered.
        """
        config = self._mocks.get(name)
        if config is None:
            raise UnknownMockError(name)
        install_mock(page, config, config.alias or name, self.log)

    def apply_many(self, page: Page, names: list[str]) -> None:
        for name in names:
            self.apply(page, name)

    def clear(self) -> None:
        """Forget registered mocks and served requests."""
        self._mocks.clear()
        self.log.clear()

    def get(self, name: str) -> MockConfig | None:
        return self._mocks.get(name)

    def has(self, name: str) -> bool:
        return name in self._mocks


# ── Helpers ─────────────────────────────────────────────────────────


def mock_api(page: Page, config: MockConfig, log: InterceptLog | None = None) -> None:
    """Install ``config`` directly, logged under its alias or ``apiMock``."""
    install_mock(page, config, config.alias or "apiMock", log)


def mock_success(
    page: Page,
    method: str,
    url: Any,
    response: Any,
    alias: str | None = None,
    log: InterceptLog | None = None,
) -> None:
    mock_api(page, MockConfig(method, url, response, status_code=200, alias=alias), log)


def mock_error(
    page: Page,
    method: str,
    url: Any,
    status_code: int,
    error_message: str,
    alias: str | None = None,
    log: InterceptLog | None = None,
) -> None:
    """Respond with ``{"error": error_message}`` and ``status_code``."""
    mock_api(
        page,
        MockConfig(method, url, {"error": error_message}, status_code=status_code, alias=alias),
        log,
    )


def mock_empty(
    page: Page, method: str, url: Any, alias: str | None = None, log: InterceptLog | None = None
) -> None:
    """Respond with an empty JSON array."""
    mock_api(page, MockConfig(method, url, [], status_code=200, alias=alias), log)


def mock_network_failure(
    page: Page, method: str, url: Any, alias: str | None = None, log: InterceptLog | None = None
) -> None:
    """Abort matching requests as a failed network call."""
    install_mock(
        page, MockConfig(method, url, network_error=True), alias or "networkError", log
    )
